from collections.abc import Sequence
from typing import Dict, Iterator, List, Optional
import logging

from .location_record import LocationRecord, CountryRecord, StateRecord, CityRecord
from .constants import LOCATION_KINDS
from .converter import LocationDataConverter

logger = logging.getLogger(__name__)

def flatten_dataset(data, result=None, skipped=None):
    """
    Transforms the country -> state -> city tree into a flat list of records.

    The walk is depth-first: each country is followed by its states, and each
    state by its cities. Country metadata is copied onto every descendant.

    Args:
        data (list): Country objects, each with optional 'states', each state
            with optional 'cities'
        result (list): Accumulated result
        skipped (list): Receives one entry per malformed entry left out

    Returns:
        list: LocationRecord objects in scan order

    Note:
        An entry without a usable 'name' is skipped along with its subtree
        instead of aborting the build.
    """
    if result is None:
        result = []
    if skipped is None:
        skipped = []

    for country_data in data:
        country = _build(CountryRecord, country_data, skipped)
        if country is None:
            continue
        result.append(country)

        for state_data in country_data.get('states') or []:
            state = _build(StateRecord, state_data, skipped, country)
            if state is None:
                continue
            result.append(state)

            for city_data in state_data.get('cities') or []:
                city = _build(CityRecord, city_data, skipped, state)
                if city is not None:
                    result.append(city)

    return result

def _build(record_cls, data, skipped, parent=None):
    if not isinstance(data, dict):
        skipped.append(data)
        logger.debug("Skipping non-mapping %s entry: %r", record_cls.kind, data)
        return None
    try:
        if parent is None:
            return record_cls.from_api(data)
        return record_cls.from_api(data, parent)
    except ValueError as e:
        skipped.append(data)
        logger.debug("Skipping malformed %s entry: %s", record_cls.kind, e)
        return None

class SearchIndex(Sequence):
    """
    An immutable, ordered index of flattened location records.

    The scan order is the build order (country, its states, their cities),
    which the ranker relies on for early termination.

    Methods:
        exact_search(name): Find all records with exactly this name
        counts(): Number of records per kind
        to_frame(): The whole index as a pandas DataFrame
    """

    def __init__(self, records: List[LocationRecord]):
        self._records = tuple(records)
        # Lowercase name -> records sharing it, in scan order
        self._name_to_records: Dict[str, List[LocationRecord]] = {}
        for record in self._records:
            self._name_to_records.setdefault(record.search_name, []).append(record)

    def __getitem__(self, item):
        return self._records[item]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[LocationRecord]:
        return iter(self._records)

    def exact_search(self, name: str) -> List[LocationRecord]:
        """
        Perform exact name search (case-insensitive).

        Args:
            name (str): Name to search for

        Returns:
            List[LocationRecord]: Records with that name, in scan order
        """
        return list(self._name_to_records.get(name.strip().lower(), []))

    def counts(self) -> Dict[str, int]:
        counts = dict.fromkeys(LOCATION_KINDS, 0)
        for record in self._records:
            counts[record.kind] += 1
        return counts

    def to_frame(self):
        return LocationDataConverter.index_to_frame(self._records)

    def __repr__(self):
        return f"{self.__class__.__name__}({self.counts()!r})"

def create_search_index(data, skipped: Optional[list] = None) -> SearchIndex:
    """
    Build a complete search index from the hierarchical dataset.

    Args:
        data (list): Original country -> state -> city tree
        skipped (list, optional): Receives the malformed entries left out

    Returns:
        SearchIndex: Initialized search index
    """
    if skipped is None:
        skipped = []
    records = flatten_dataset(data, skipped=skipped)
    index = SearchIndex(records)
    if skipped:
        logger.warning("Skipped %d malformed dataset entries", len(skipped))
    logger.info("Built search index: %s", index.counts())
    return index
