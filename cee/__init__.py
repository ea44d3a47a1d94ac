"""Tokenizer, parser and printer for a small C-like language."""

__version__ = "0.1.0"