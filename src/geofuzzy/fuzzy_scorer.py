__all__ = ['fuzzy_score', 'fuzzy_sequence_match']

from typing import Tuple
from .utils import split_words, is_word_boundary
from .constants import (
	EXACT_SCORE, PREFIX_SCORE, PREFIX_WEIGHT, WORD_PREFIX_SCORE, WORD_PREFIX_WEIGHT,
	WORD_POSITION_COST, SUBSTRING_SCORE, SUBSTRING_WEIGHT, SUBSTRING_INDEX_COST,
	SEQUENCE_BASE_SCORE, SEQUENCE_RUN_WEIGHT, SEQUENCE_BOUNDARY_BONUS,
)


def fuzzy_score(keyword: str, target: str) -> float:
	"""
	Scores one keyword against one target string; 0 means no match.

	Tiers are tried in order and the first one that matches wins:
	exact (1000), prefix (800+), word prefix (600+), substring (400+)
	and in-order character subsequence (100+).

	Args:
		keyword (str): Search keyword
		target (str): String to match against

	Returns:
		float: Match score, higher is better
	"""
	if not target or not keyword:
		return 0
	q = keyword.lower()
	t = target.lower()

	if t == q:
		return EXACT_SCORE

	if t.startswith(q):
		return PREFIX_SCORE + (len(q) / len(t)) * PREFIX_WEIGHT

	for i, word in enumerate(split_words(t)):
		if word.startswith(q):
			return WORD_PREFIX_SCORE + (len(q) / len(word)) * WORD_PREFIX_WEIGHT - i * WORD_POSITION_COST

	idx = t.find(q)
	if idx != -1:
		return SUBSTRING_SCORE + (len(q) / len(t)) * SUBSTRING_WEIGHT - idx * SUBSTRING_INDEX_COST

	matched, score = fuzzy_sequence_match(q, t)
	if matched:
		return SEQUENCE_BASE_SCORE + score
	return 0


def fuzzy_sequence_match(query: str, target: str) -> Tuple[bool, float]:
	"""
	Checks whether the query characters appear in order in the target.

	A match extending a consecutive run adds 5 x the run length, any other
	match adds 1; a match on a word boundary adds 10 more. A complete match
	is scaled by len(query) / len(target).

	Returns:
		tuple: (matched, score)
	"""
	q_idx = 0
	score = 0
	consecutive = 0
	last_match_idx = -2

	for t_idx, ch in enumerate(target):
		if q_idx >= len(query):
			break
		if ch != query[q_idx]:
			continue
		if t_idx == last_match_idx + 1:
			consecutive += 1
			score += consecutive * SEQUENCE_RUN_WEIGHT
		else:
			consecutive = 1
			score += 1
		if is_word_boundary(target, t_idx):
			score += SEQUENCE_BOUNDARY_BONUS
		last_match_idx = t_idx
		q_idx += 1

	matched = q_idx == len(query)
	# Long targets with sparse matches score lower
	if matched:
		score = score * (len(query) / len(target))
	return matched, score
