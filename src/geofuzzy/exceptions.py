class GeofuzzyError(Exception):
    """Base class for errors raised by geofuzzy."""


class IndexNotReadyError(GeofuzzyError):
    """Raised when a search is requested before the location index is built."""
    def __init__(self, message="Search index not initialized"):
        super().__init__(message)


class DatasetLoadError(GeofuzzyError, ValueError):
    """Raised when a location dataset cannot be fetched, read or parsed."""
