from .cli import CLI, build_parser, main, run

__all__ = ["CLI", "build_parser", "main", "run"]
