"""KPL scanner, symbol table and its text rendering, and a word-index tool."""

__version__ = "0.1.0"