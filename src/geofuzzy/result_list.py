from typing import List, Union
from .constants import LOCATION_KINDS
from .converter import LocationDataConverter
from .utils import truncate_string

class ResultList(list):
    """
    A list-like container for formatted search results with additional filtering capabilities.
    Inherits from list to maintain all standard list functionality.
    """

    def __init__(self, results: List[dict] = ()):
        super().__init__(results)

    def filter_by_kind(self, kind: Union[str, List[str]]) -> 'ResultList':
        """
        Filter results by location kind.

        Args:
            kind: 'country', 'state' or 'city', or a list of them (matches any)

        Returns:
            ResultList: New ResultList containing only results of the given kind(s)
        """
        kinds = {kind.lower()} if isinstance(kind, str) else {k.lower() for k in kind}
        filtered = [
            result for result in self
            if LocationDataConverter.extract_path(result)[0] in kinds
        ]
        return ResultList(filtered)

    def kinds_summary(self) -> dict:
        """
        Get a summary of location kinds present in the results.

        Returns:
            dict: Mapping of kind to count of results, in country/state/city order
        """
        counts = {}
        for result in self:
            kind = LocationDataConverter.extract_path(result)[0]
            counts[kind] = counts.get(kind, 0) + 1
        return {kind: counts[kind] for kind in LOCATION_KINDS if kind in counts}

    def to_frame(self):
        return LocationDataConverter.results_to_frame(self)

    def __str__(self) -> str:
        """Return string representation of the results."""
        if not self:
            return "[]"
        lines = []
        for result in self:
            kind, path = LocationDataConverter.extract_path(result)
            lines.append(f"[{kind}] " + truncate_string(" > ".join(str(name) for name in path), 80))
        return "[\n " + ",\n ".join(lines) + "\n]"
