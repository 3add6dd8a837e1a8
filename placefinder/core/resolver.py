# resolver.py
# Turns what the user typed into place names and IANA zones.
#  - cities: prefix/exact search on the city index
#  - countries: ISO alpha-2, then alpha-3 code, then the country index
#  - zones: abbreviations ("pst") or full IANA names ("Asia/Kathmandu")
# Search misses come back from the trie as (False, []); this is where they
# become LocationNotFound.

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .errors import LocationNotFound, UnknownZone
from .fuzzy import edit_distance
from .lazy_index import CITY_INDEX, COUNTRY_INDEX, LazyIndex
from .normalizer import normalize
from .trie import DEFAULT_LIMIT
from .vocabulary import load_vocabulary

logger = logging.getLogger(__name__)

# zone names shorter than this are abbreviations ("pst", "cest")
ABBREVIATION_MAX_LEN = 5


@dataclass(frozen=True)
class LocationInfo:
    name: str
    kind: str  # "city" or "country"
    country: str
    timezones: Tuple[str, ...]

    @property
    def timezone(self) -> str:
        return self.timezones[0]

    @property
    def ambiguous(self) -> bool:
        """True for countries spanning more than one zone."""
        return len(self.timezones) > 1


def suggest_anywhere(query: str, names: Iterable[str], limit: int = DEFAULT_LIMIT) -> List[str]:
    """
    Rank every name by edit distance between normalized forms.
    O(len(names)) distance computations: only used when the caller opts in.
    """
    key = normalize(query)
    if not key or limit <= 0:
        return []
    return sorted(names, key=lambda n: edit_distance(key, normalize(n)))[:limit]


def _search(index: LazyIndex, query: str, limit: int, full_scan: bool) -> List[str]:
    found, matches = index.search(query, limit)
    if found:
        return matches
    if full_scan:
        logger.debug("%s: no prefix match for %r, scanning all names", index.name, query)
        return suggest_anywhere(query, index.get().words(), limit)
    return []


def find_cities(query: str, limit: int = DEFAULT_LIMIT, full_scan: bool = False) -> List[str]:
    """Matching city names; raises LocationNotFound when there are none."""
    matches = _search(CITY_INDEX, query, limit, full_scan)
    if not matches:
        raise LocationNotFound(f"City '{query}' not found!")
    return matches


def find_countries(query: str, limit: int = DEFAULT_LIMIT, full_scan: bool = False) -> List[str]:
    """
    Matching country names. Exact ISO codes win ("US", "NPL");
    otherwise search the country index.
    """
    vocab = load_vocabulary()
    code = query.strip().upper()
    if code in vocab.alpha2:
        return [vocab.alpha2[code]]
    if code in vocab.alpha3:
        return [vocab.alpha3[code]]

    matches = _search(COUNTRY_INDEX, query, limit, full_scan)
    if not matches:
        raise LocationNotFound(f"Country '{query}' not found!")
    return matches


def find_locations(city: Optional[str] = None, country: Optional[str] = None,
                   limit: int = DEFAULT_LIMIT, full_scan: bool = False) -> List[str]:
    """City search when a city is given, country search otherwise."""
    if city:
        return find_cities(city, limit=limit, full_scan=full_scan)
    return find_countries(country or "", limit=limit, full_scan=full_scan)


def describe(name: str) -> LocationInfo:
    """Look up a display name returned by a search (cities first)."""
    vocab = load_vocabulary()
    city = vocab.cities.get(name)
    if city is not None:
        return LocationInfo(name=name, kind="city", country=city["country"],
                            timezones=(city["tz"],))
    zones = vocab.countries.get(name)
    if zones:
        return LocationInfo(name=name, kind="country", country=name,
                            timezones=tuple(zones))
    raise LocationNotFound(f"Location '{name}' not found!")


def zone_to_timezone(zone: str) -> str:
    """
    "pst" -> "America/Los_Angeles"; anything longer than an abbreviation is
    taken to be an IANA name already and returned as given.
    """
    if len(zone) > ABBREVIATION_MAX_LEN:
        return zone
    tz = load_vocabulary().zones.get(zone.upper())
    if tz is None:
        raise UnknownZone(f"Zone abbreviation '{zone}' not found.")
    return tz
