# vocabulary.py - bundled place names and the identifiers they map to
#
# The JSON file holds five read-only tables:
# - cities:    display name -> {"tz": IANA zone, "country": country display name}
# - countries: display name -> [IANA zones], most populous zone first
# - alpha2 / alpha3: ISO 3166 code -> country display name
# - zones:     abbreviation -> IANA zone
# Search only ever sees the display names; the values are for resolution.

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

logger = logging.getLogger(__name__)

DATA_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "data")
DEFAULT_PATH = os.path.join(DATA_DIR, "locations.json")

SECTIONS = ("cities", "countries", "alpha2", "alpha3", "zones")


@dataclass(frozen=True)
class Vocabulary:
    cities: Mapping[str, Mapping[str, str]]
    countries: Mapping[str, List[str]]
    alpha2: Mapping[str, str]
    alpha3: Mapping[str, str]
    zones: Mapping[str, str]

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "Vocabulary":
        """Wrap each section read-only; missing sections become empty."""
        missing = [s for s in SECTIONS if s not in raw]
        if missing:
            logger.warning("vocabulary is missing sections: %s", ", ".join(missing))
        return cls(**{s: MappingProxyType(dict(raw.get(s, {}))) for s in SECTIONS})


@lru_cache(maxsize=None)
def load_vocabulary(path: Optional[str] = None) -> Vocabulary:
    """
    Load the vocabulary JSON (the bundled file by default).
    Cached per path: every caller shares the same read-only tables.
    """
    path = path or DEFAULT_PATH
    with open(path, "r", encoding="utf-8") as f:
        raw = json.load(f)
    vocab = Vocabulary.from_dict(raw)
    logger.debug("loaded %d cities, %d countries from %s",
                 len(vocab.cities), len(vocab.countries), path)
    return vocab


def city_names(path: Optional[str] = None) -> List[str]:
    return list(load_vocabulary(path).cities)


def country_names(path: Optional[str] = None) -> List[str]:
    return list(load_vocabulary(path).countries)
