# setup.py
from setuptools import setup

setup(
    name="wyas",
    version="0.4.0",
    description="Reader, evaluator and printer for a minimal Scheme expression language",
    packages=["wyas", "wyas.types", "wyas.reader", "wyas.evaluation", "wyas_lsp"],
    python_requires=">=3.10",
    install_requires=[
        "pygls>=2.0",
        "lsprotocol>=2025.0.0",
    ],
    extras_require={
        "test": ["pytest>=7", "hypothesis>=6.84"],
    },
    entry_points={
        "console_scripts": [
            "wyas=wyas.__main__:main",
            "wyas-ls=wyas_lsp.server:main",
            "wyas-repl=wyas_lsp.repl_server:main",
        ],
    },
    zip_safe=False,
)
