from collections import OrderedDict
from typing import Any, List
import re

_split_pattern = re.compile(r'[\s,.\-]+')
_boundary_pattern = re.compile(r'[\s,.\-]')

class LRUCache(OrderedDict):
    def __init__(self, maxsize=128):
        super().__init__()
        self.maxsize = maxsize

    def __getitem__(self, key):
        value = super().__getitem__(key)
        self.move_to_end(key)
        return value

    def __setitem__(self, key, value):
        if key in self:
            self.move_to_end(key)
        super().__setitem__(key, value)
        if len(self) > self.maxsize:
            oldest = next(iter(self))
            del self[oldest]

def tokenize(text: str) -> List[str]:
	"""
	Splits a name into lowercase word tokens.

	Tokens are separated by runs of whitespace, commas, periods and hyphens;
	empty tokens are dropped.

	Examples:
		>>> tokenize('Saint-Denis, Île-de-France')
		['saint', 'denis', 'île', 'de', 'france']
	"""
	if not text:
		return []
	return [token for token in _split_pattern.split(text.lower()) if token]

def split_words(text: str) -> List[str]:
	# Raw split, empty leading/trailing segments kept so word positions stay stable
	return _split_pattern.split(text)

def is_word_boundary(text: str, index: int) -> bool:
	return index == 0 or bool(_boundary_pattern.match(text[index - 1]))

def extract_column(data, column, default: Any = None, f=None):
	if f is None:
		return [item.get(column, default) for item in data]
	return [f(item.get(column, default)) for item in data]

def clean_name(value):
	if not isinstance(value, str):
		return None
	value = value.strip()
	return value or None

def truncate_string(s, max_length):
    if len(s) > max_length:
        return s[:max_length - 3] + '...'
    return s
