"""A minimal command interpreter that runs programs found on PATH."""

__version__ = "0.1.0"
__all__ = ["lexer", "paths", "files", "shell"]