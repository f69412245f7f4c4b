"""Shell front end: an echo loop, a command-line tokenizer, token classification and helpers."""

__version__ = "0.1.0"