"""
placefinder.core

Prefix search with fuzzy ranking over place names.
Contains:
 - key normalization (normalize)
 - the prefix tree (Trie)
 - edit distance and ranking (edit_distance, rank_closest)
 - build-once shared indexes (LazyIndex, CITY_INDEX, COUNTRY_INDEX)
 - resolution of names, ISO codes and zone abbreviations (resolver)
"""

from .normalizer import normalize
from .trie import Trie, TrieNode
from .fuzzy import WordDistance, edit_distance, rank_closest
from .lazy_index import CITY_INDEX, COUNTRY_INDEX, LazyIndex
from .errors import LocationNotFound, PlaceFinderError, UnknownTimezone, UnknownZone
from .resolver import (
    LocationInfo,
    describe,
    find_cities,
    find_countries,
    find_locations,
    zone_to_timezone,
)
from .clock import format_time

__all__ = [
    "normalize",
    "Trie",
    "TrieNode",
    "WordDistance",
    "edit_distance",
    "rank_closest",
    "LazyIndex",
    "CITY_INDEX",
    "COUNTRY_INDEX",
    "PlaceFinderError",
    "LocationNotFound",
    "UnknownZone",
    "UnknownTimezone",
    "LocationInfo",
    "describe",
    "find_cities",
    "find_countries",
    "find_locations",
    "zone_to_timezone",
    "format_time",
]

__version__ = "0.1.0"
