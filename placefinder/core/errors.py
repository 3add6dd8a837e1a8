# errors.py - exceptions raised outside the search path
# (the trie and ranker never raise; they report "not found" as (False, []))


class PlaceFinderError(Exception):
    """Base class for everything the lookup layer reports to the user."""


class LocationNotFound(PlaceFinderError, LookupError):
    pass


class UnknownZone(PlaceFinderError, LookupError):
    pass


class UnknownTimezone(PlaceFinderError, ValueError):
    pass
