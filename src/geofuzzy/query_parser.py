from enum import Enum
from typing import Dict, List, Optional, Tuple

class FilterKey(Enum):
	'''
	Filter keys understood by the ranker.
	'''
	ISO2     = 'iso2'
	ISO3     = 'iso3'
	REGION   = 'region'
	CURRENCY = 'currency'
	PHONE    = 'phone'
	TYPE     = 'type'
	IN       = 'in'

_KNOWN_KEYS = {key.value: key for key in FilterKey}


class Query:
	"""
	A parsed search query.

	Attributes:
		filters (dict): Lowercase filter key -> lowercase value, unknown keys included
		keywords (tuple): Lowercase free-text tokens left after filter removal
		search_text (str): Keywords joined by a single space
	"""
	def __init__(self, filters: Optional[Dict[str, str]] = None, keywords=()):
		self.filters = dict(filters or {})
		self.keywords = tuple(keywords)
		self.search_text = ' '.join(self.keywords)

	@property
	def known_filters(self) -> Dict[FilterKey, str]:
		return {_KNOWN_KEYS[key]: value for key, value in self.filters.items() if key in _KNOWN_KEYS}

	@property
	def unknown_filters(self) -> Dict[str, str]:
		return {key: value for key, value in self.filters.items() if key not in _KNOWN_KEYS}

	@property
	def is_empty(self) -> bool:
		return not self.keywords and not self.filters

	def __eq__(self, other):
		if not isinstance(other, Query):
			return NotImplemented
		return self.filters == other.filters and self.keywords == other.keywords

	def __repr__(self):
		return f"Query(filters={self.filters!r}, keywords={list(self.keywords)!r})"


def _is_key_char(ch):
	return (ch.isascii() and ch.isalnum()) or ch == '_'


def _scan_filter(text: str, start: int) -> Optional[Tuple[str, str, int]]:
	# Tries to read `key:value` or `key:"quoted value"` at `start`.
	# Returns (key, value, end) or None when the token is plain text.
	pos = start
	while pos < len(text) and _is_key_char(text[pos]):
		pos += 1
	if pos == start or pos >= len(text) or text[pos] != ':':
		return None
	key = text[start:pos]
	pos += 1

	if pos < len(text) and text[pos] == '"':
		closing = text.find('"', pos + 1)
		if closing > pos + 1:
			return key, text[pos + 1:closing], closing + 1

	end = pos
	while end < len(text) and not text[end].isspace():
		end += 1
	value = text[pos:end].replace('"', '')
	if not value:
		return None
	return key, value, end


def _scan_word(text: str, start: int) -> Tuple[int, Optional[int]]:
	# Returns the end of the token at `start` and the position of the first
	# filter that begins inside it after a non-key character (e.g. `paris,iso2:fr`).
	end = start
	while end < len(text) and not text[end].isspace():
		end += 1
	for pos in range(start + 1, end):
		if _is_key_char(text[pos]) and not _is_key_char(text[pos - 1]) and _scan_filter(text, pos) is not None:
			return end, pos
	return end, None


def parse_query(text: str) -> Query:
	"""
	Splits a raw query string into filters and free-text keywords.

	Filters have the form ``key:value`` or ``key:"quoted value"`` and may
	appear anywhere in the query. Keys and values are lowercased; a repeated
	key keeps its last value. Everything else is free text.

	Args:
		text (str): Raw query string

	Returns:
		Query: Parsed filters and keywords

	Examples:
		>>> parse_query('california in:"United States"')
		Query(filters={'in': 'united states'}, keywords=['california'])
	"""
	filters: Dict[str, str] = {}
	words: List[str] = []
	text = (text or '').strip()
	pos = 0
	while pos < len(text):
		if text[pos].isspace():
			pos += 1
			continue
		scanned = _scan_filter(text, pos)
		if scanned is not None:
			key, value, pos = scanned
			filters[key.lower()] = value.lower()
			continue
		end, inner = _scan_word(text, pos)
		if inner is not None:
			end = inner
		words.append(text[pos:end].lower())
		pos = end
	return Query(filters, words)
