"""placefinder - find a city or country by partial or misspelled name and show its local time."""

from .core import __version__

__all__ = ["__version__"]
