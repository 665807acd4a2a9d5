"""Fuzzy word matching used by the normalizer's misspelling correction.

Similarity is ``1 - levenshtein(a, b) / max(len(a), len(b))``. Candidates are
shortlisted with ``difflib.get_close_matches`` and then ranked by that
similarity, so only a handful of edit-distance tables are built per token.
"""
import difflib
import re


_ALPHA_RE = re.compile(r'^[a-z]+$', re.IGNORECASE)


def levenshtein(a: str, b: str) -> int:
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)
    # keep the shorter word in the inner loop
    if len(a) < len(b):
        a, b = b, a
    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i]
        for j, cb in enumerate(b, start=1):
            current.append(min(
                previous[j] + 1,
                current[j - 1] + 1,
                previous[j - 1] + (ca != cb),
            ))
        previous = current
    return previous[-1]


def similarity(a: str, b: str) -> float:
    """Return normalized edit-distance similarity in [0, 1] (case-insensitive)."""
    a = a.lower()
    b = b.lower()
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return 1.0 - levenshtein(a, b) / longest


def adjusted_threshold(threshold: float, length: int) -> float:
    # Longer words tolerate a slightly lower score: one typo in 'wednesday'
    # costs less than one typo in 'monday'.
    if length >= 8:
        return threshold - 0.05 - (min(length, 12) - 8) * 0.01
    return threshold


def find_best_match(word: str, candidates, threshold: float = 0.85) -> str | None:
    """Return the candidate most similar to ``word`` or None.

    A candidate qualifies when its similarity reaches the threshold, adjusted
    for word length. Ties keep the earlier candidate in ``candidates``.
    """
    if not word or not candidates:
        return None
    lowered = word.lower()
    shortlist = difflib.get_close_matches(lowered, list(candidates), n=5, cutoff=0.6)
    best = None
    best_score = -1.0
    for cand in shortlist:
        score = similarity(lowered, cand)
        if score > best_score:
            best, best_score = cand, score
    if best is None:
        return None
    longest = max(len(lowered), len(best))
    # words differing in length by more than half are never the same word
    if abs(len(lowered) - len(best)) / longest > 0.5:
        return None
    if best_score >= adjusted_threshold(threshold, longest):
        return best
    return None


def match_case(original: str, replacement: str) -> str:
    """Carry the casing pattern of ``original`` over to ``replacement``."""
    if original.isupper() and len(original) > 1:
        return replacement.upper()
    if original[:1].isupper():
        return replacement[:1].upper() + replacement[1:].lower()
    return replacement.lower()


def correct_word(word: str, candidates, threshold: float = 0.85, min_length: int = 3) -> str:
    """Correct a possibly misspelled word against ``candidates``.

    Words shorter than ``min_length`` or containing non-letters are returned
    unchanged, as is any word without a close enough candidate.
    """
    if len(word) < min_length or not _ALPHA_RE.match(word):
        return word
    match = find_best_match(word, candidates, threshold)
    if match is None:
        return word
    return match_case(word, match)
