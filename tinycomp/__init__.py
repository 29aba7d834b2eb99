"""A small compiler for a toy language: scanner, parser, semantic checks and assembly generation."""

__version__ = "0.1.0"