"""Declarative command line definitions (arguments, options, commands), their views, enumerations and an option tokenizer."""

__version__ = "0.1.0"
__all__ = ["argument", "command", "enums", "errors", "option", "option_iterator"]