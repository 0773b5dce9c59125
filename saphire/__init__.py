"""Lexer, parser, tree-walking interpreter and REPL for the Saphire language."""

__version__ = "0.1.0"