from typing import Dict, List, Sequence
import logging
from time import perf_counter

from .constants import (
    DEFAULT_MAX_RESULTS, MIN_QUERY_LENGTH, MIN_SCORE_THRESHOLD, EARLY_TERMINATION_FACTOR,
    EXACT_MATCH_SCORE, FILTER_ONLY_SCORE, PARENT_WEIGHT, ALL_IN_NAME_BONUS,
    EXACT_TYPE_BONUS, FUZZY_TYPE_BONUS,
)
from .fuzzy_scorer import fuzzy_score
from .location_record import LocationRecord
from .query_parser import FilterKey, Query, parse_query

logger = logging.getLogger(__name__)


class ScoredMatch:
    """A candidate record together with its ranking score."""
    __slots__ = ('record', 'score', 'is_exact')

    def __init__(self, record: LocationRecord, score: float, is_exact: bool = False):
        self.record = record
        self.score = score
        self.is_exact = is_exact

    def __repr__(self):
        return f"ScoredMatch({self.record.kind}:{self.record.name!r}, score={self.score:.2f}, is_exact={self.is_exact})"


def _lower(value):
    return str(value).lower() if value is not None else None


def matches_filters(record: LocationRecord, filters: Dict[FilterKey, str]) -> bool:
    """
    Checks a record against every recognised filter (all must hold).

    Args:
        record (LocationRecord): Index entry
        filters (dict): FilterKey -> lowercase value

    Returns:
        bool: True if no filter excludes the record
    """
    for key, value in filters.items():
        if key is FilterKey.ISO2:
            if _lower(record.iso2) != value:
                return False
        elif key is FilterKey.ISO3:
            if _lower(record.iso3) != value:
                return False
        elif key is FilterKey.REGION:
            if _lower(record.region) != value:
                return False
        elif key is FilterKey.CURRENCY:
            if _lower(record.currency_code) != value:
                return False
        elif key is FilterKey.PHONE:
            if record.phone_code is None or str(record.phone_code) != value:
                return False
        elif key is FilterKey.TYPE:
            if record.kind != value:
                return False
        elif key is FilterKey.IN:
            if not record.is_within(value):
                return False
    return True


def _keyword_score(keyword: str, record: LocationRecord) -> float:
    name_score = fuzzy_score(keyword, record.search_name)
    parent_score = 0
    for token in record.parent_tokens:
        parent_score = max(parent_score, fuzzy_score(keyword, token) * PARENT_WEIGHT)
    return max(name_score, parent_score)


def _score_record(record: LocationRecord, query: Query, min_score: float):
    # Returns a ScoredMatch or None when the record is not a candidate
    if record.search_name == query.search_text:
        score = EXACT_MATCH_SCORE + EXACT_TYPE_BONUS[record.kind]
        is_exact = True
    else:
        score = 0
        for keyword in query.keywords:
            keyword_score = _keyword_score(keyword, record)
            if keyword_score <= 0:
                return None
            score += keyword_score
        if score < min_score:
            return None
        score += FUZZY_TYPE_BONUS[record.kind]
        is_exact = False

    if all(keyword in record.search_name for keyword in query.keywords):
        score += ALL_IN_NAME_BONUS
    return ScoredMatch(record, score, is_exact)


def rank(index: Sequence[LocationRecord], query: Query, max_results: int = DEFAULT_MAX_RESULTS,
         min_score: float = MIN_SCORE_THRESHOLD) -> List[ScoredMatch]:
    """
    Scores every index record against a parsed query and returns the best matches.

    Exact full-name matches always come before fuzzy matches. Within each
    group records are ordered by descending score, ties keeping scan order.

    Args:
        index (SearchIndex): Location records in scan order
        query (Query): Parsed query
        max_results (int): Maximum number of matches to return
        min_score (float): Minimum summed keyword score of a fuzzy match

    Returns:
        List[ScoredMatch]: Ranked matches, at most max_results

    Note:
        Scanning stops once 3 x max_results candidates are collected, so a
        better match appearing later in scan order can be missed.
    """
    filters = query.known_filters
    limit = max_results * EARLY_TERMINATION_FACTOR
    exact_matches: List[ScoredMatch] = []
    scored: List[ScoredMatch] = []
    scanned = 0

    for record in index:
        scanned += 1
        if not matches_filters(record, filters):
            continue

        if not query.keywords:
            scored.append(ScoredMatch(record, FILTER_ONLY_SCORE))
        else:
            match = _score_record(record, query, min_score)
            if match is None:
                continue
            (exact_matches if match.is_exact else scored).append(match)

        if len(exact_matches) + len(scored) >= limit:
            logger.debug("Early termination after %d of %d records", scanned, len(index))
            break

    exact_matches.sort(key=lambda m: -m.score)
    scored.sort(key=lambda m: -m.score)
    return (exact_matches + scored)[:max_results]


def search(index, text: str, max_results: int = DEFAULT_MAX_RESULTS,
           min_score: float = MIN_SCORE_THRESHOLD) -> List[ScoredMatch]:
    """
    Parses a raw query string and ranks the index against it.

    Queries shorter than two characters, and queries with neither keywords
    nor filters, give no results.
    """
    if not text:
        return []
    text = text.strip()
    if len(text) < MIN_QUERY_LENGTH:
        return []

    query = parse_query(text)
    if query.is_empty:
        return []

    started = perf_counter()
    matches = rank(index, query, max_results=max_results, min_score=min_score)
    logger.debug("Search %r: %d matches in %.1f ms", text, len(matches), (perf_counter() - started) * 1000)
    return matches
