# markov_quotes/cli/__init__.py
from .cli import CLI, build_parser, main

__all__ = ["CLI", "build_parser", "main"]
