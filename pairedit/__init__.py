"""Text-handling core of a C++ code editor: lexing, edit history, line comments, key handling and project files."""

__version__ = "0.1.0"