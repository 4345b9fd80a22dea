"""Wyas Language Server and REPL integration package.

This package provides:
- A pygls-based Language Server that reads and evaluates each line of a
  document to report diagnostics.
- A simple TCP server that evaluates code via the Interpreter.
"""

__all__ = [
    "server",
    "repl_server",
]
