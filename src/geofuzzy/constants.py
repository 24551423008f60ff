# Default location dataset (countries -> states -> cities), JSON array of countries
DEFAULT_DATASET_URL = 'https://raw.githubusercontent.com/dr5hn/countries-states-cities-database/master/json/countries%2Bstates%2Bcities.json'

# ----------- SEARCH DEFAULTS -------------
DEFAULT_MAX_RESULTS      = 100
MIN_QUERY_LENGTH         = 2
MIN_SCORE_THRESHOLD      = 30
EARLY_TERMINATION_FACTOR = 3

# ----------- FUZZY SCORER TIERS -------------
EXACT_SCORE          = 1000
PREFIX_SCORE         = 800
PREFIX_WEIGHT        = 100
WORD_PREFIX_SCORE    = 600
WORD_PREFIX_WEIGHT   = 50
WORD_POSITION_COST   = 10
SUBSTRING_SCORE      = 400
SUBSTRING_WEIGHT     = 50
SUBSTRING_INDEX_COST = 2
SEQUENCE_BASE_SCORE  = 100
SEQUENCE_RUN_WEIGHT  = 5
SEQUENCE_BOUNDARY_BONUS = 10

# ----------- RANKER -------------
EXACT_MATCH_SCORE  = 10000
FILTER_ONLY_SCORE  = 1000
PARENT_WEIGHT      = 0.5
ALL_IN_NAME_BONUS  = 50

# Exact hits favour the most general kind, fuzzy hits the most specific one
EXACT_TYPE_BONUS = {'country': 1000, 'state': 500, 'city': 100}
FUZZY_TYPE_BONUS = {'country': 0, 'state': 10, 'city': 20}

LOCATION_KINDS = ('country', 'state', 'city')

AVAILABLE_FILTERS = {
	'iso2': 'Search by ISO2 country code (e.g., iso2:US)',
	'iso3': 'Search by ISO3 country code (e.g., iso3:USA)',
	'region': 'Search by region (e.g., region:Asia, region:"North America")',
	'currency': 'Search by currency code (e.g., currency:USD)',
	'phone': 'Search by phone code (e.g., phone:1)',
	'type': 'Filter by location type (e.g., type:city, type:country, type:state)',
	'in': 'Find locations within a parent (e.g., hyderabad in:india, california in:"united states")',
}
