"""
geofuzzy - fuzzy search over a hierarchical country/state/city dataset.

This library indexes a countries -> states -> cities dataset once and answers
free-text queries with optional filters (iso2:, iso3:, region:, currency:,
phone:, type:, in:), returning ranked results in the dataset's nested shape.

Main components:
- LocationSearch: Search engine owning one immutable index
- SearchWorker: Background thread serving INIT/SEARCH/GET_FILTERS messages
- SearchIndex: Flattened, immutable index of location records
- ResultList: List of formatted results with filtering helpers
- parse_query, fuzzy_score: Query parsing and the tiered fuzzy scorer
"""

from .client import LocationSearch, MessageType
from .worker import SearchWorker
from .hierarchical_search import SearchIndex, create_search_index
from .location_record import LocationRecord, CountryRecord, StateRecord, CityRecord
from .query_parser import FilterKey, Query, parse_query
from .fuzzy_scorer import fuzzy_score
from .ranker import ScoredMatch, rank, search
from .converter import LocationDataConverter
from .result_list import ResultList
from .exceptions import GeofuzzyError, IndexNotReadyError, DatasetLoadError

__version__ = "0.1.0"
__all__ = ['LocationSearch', 'MessageType', 'SearchWorker', 'SearchIndex', 'create_search_index',
           'LocationRecord', 'CountryRecord', 'StateRecord', 'CityRecord', 'FilterKey', 'Query',
           'parse_query', 'fuzzy_score', 'ScoredMatch', 'rank', 'search', 'LocationDataConverter',
           'ResultList', 'GeofuzzyError', 'IndexNotReadyError', 'DatasetLoadError']
