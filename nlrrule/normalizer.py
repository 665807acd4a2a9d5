"""Text normalization for recurrence phrases.

``normalize`` runs a fixed pipeline of independent transforms; later steps
rely on what earlier ones established:

1. misspelling correction (dictionary lookup, then fuzzy match)
2. whitespace / punctuation canonicalization
3. ordinal suffix stripping ('15th' -> '15')
4. plural day-name expansion ('mondays' -> 'every monday')
5. phrase synonyms ('fortnightly' -> 'every 2 weeks')
6. case folding

Every step is total: unknown words pass through untouched.
"""
import logging
import re

from .constants import (
    CORRECTION_VOCABULARY,
    DAY_NAME_VARIANTS,
    MONTH_NAME_VARIANTS,
    PASSTHROUGH_WORDS,
    PLURAL_DAY_NAMES,
    RECURRING_QUANTIFIERS,
    TERM_SYNONYMS,
)
from .fuzzy import correct_word, match_case
from .models import NormalizerOptions

logger = logging.getLogger(__name__)

_WORD_RE = re.compile(r'\b[A-Za-z]+\b')
_SPACE_RE = re.compile(r'\s+')
_SPACE_BEFORE_COMMA_RE = re.compile(r'\s+,')
_COMMA_NO_SPACE_RE = re.compile(r',(?=[A-Za-z])')
_TERMINAL_PUNCT_RE = re.compile(r'[\s.,;:!?]+$')
_LEADING_PUNCT_RE = re.compile(r'^[\s.,;:!?]+')
_ORDINAL_RE = re.compile(r'\b(\d+)(?:st|nd|rd|th)\b', re.IGNORECASE)

_PLURAL_GROUPS = {'weekdays': 'weekday', 'weekends': 'weekend'}
_PLURALS = {**PLURAL_DAY_NAMES, **_PLURAL_GROUPS}
_PLURAL_RE = re.compile(r'\b(' + '|'.join(sorted(_PLURALS, key=len, reverse=True)) + r')\b', re.IGNORECASE)

# how many preceding words are searched for an 'every'/'each'
PLURAL_LOOKBACK = 3

# upper bound on synonym passes; one rewrite can form a new key with its
# neighbour ('once everyday' -> 'once daily' -> 'daily')
MAX_SYNONYM_PASSES = 5

_KNOWN_VARIANTS = {**DAY_NAME_VARIANTS, **MONTH_NAME_VARIANTS}
_VOCABULARY = set(CORRECTION_VOCABULARY)

_SYNONYM_RE = re.compile(
    r'\b(' + '|'.join(re.escape(k) for k in sorted(TERM_SYNONYMS, key=len, reverse=True)) + r')\b',
    re.IGNORECASE,
)


def correct_misspellings(text: str, threshold: float = 0.85) -> str:
    """Replace misspelled day, month and frequency words with their canonical form.

    Exact dictionary hits (including the known-variant table) win; otherwise
    the closest vocabulary word is used when its similarity reaches
    ``threshold``. The casing of the original word is kept.
    """
    def _fix(m: re.Match) -> str:
        word = m.group(0)
        lowered = word.lower()
        if lowered in _VOCABULARY or lowered in PASSTHROUGH_WORDS:
            return word
        if lowered in _KNOWN_VARIANTS:
            fixed = match_case(word, _KNOWN_VARIANTS[lowered])
        else:
            fixed = correct_word(word, CORRECTION_VOCABULARY, threshold)
        if fixed != word:
            logger.debug('corrected %r -> %r', word, fixed)
        return fixed

    return _WORD_RE.sub(_fix, text)


def canonicalize_whitespace(text: str, strip_punctuation: bool = True) -> str:
    """Collapse whitespace runs, tidy commas and drop trailing punctuation."""
    text = _SPACE_RE.sub(' ', text)
    text = _SPACE_BEFORE_COMMA_RE.sub(',', text)
    text = _COMMA_NO_SPACE_RE.sub(', ', text)
    if strip_punctuation:
        # a date token never ends in one of these, so the run is noise
        text = _TERMINAL_PUNCT_RE.sub('', text)
        text = _LEADING_PUNCT_RE.sub('', text)
    return text.strip()


def strip_ordinal_suffixes(text: str) -> str:
    return _ORDINAL_RE.sub(r'\1', text)


def expand_plural_day_names(text: str) -> str:
    """Rewrite plural day names as explicit recurrences.

    'mondays' becomes 'every monday'. When 'every'/'each' already sits within
    the last few words the plural is only made singular, so 'every mondays'
    becomes 'every monday' rather than 'every every monday'.
    """
    out = []
    pos = 0
    for m in _PLURAL_RE.finditer(text):
        plural = m.group(1)
        singular = match_case(plural, _PLURALS[plural.lower()])
        # look back over what was already rewritten, so 'mondays through fridays'
        # sees the 'every' inserted before 'monday'
        before = (''.join(out) + text[pos:m.start()]).lower().split()
        window = [w.strip(',') for w in before[-PLURAL_LOOKBACK:]]
        if any(w in RECURRING_QUANTIFIERS for w in window):
            replacement = singular
        else:
            replacement = 'every ' + singular
        logger.debug('plural day %r -> %r', plural, replacement)
        out.append(text[pos:m.start()])
        out.append(replacement)
        pos = m.end()
    out.append(text[pos:])
    return ''.join(out)


def apply_synonyms(text: str) -> str:
    """Replace synonym phrases with their canonical wording, longest first.

    Substitution repeats until the text stops changing.
    """
    def _sub(m: re.Match) -> str:
        canonical = TERM_SYNONYMS[m.group(1).lower()]
        logger.debug('synonym %r -> %r', m.group(1), canonical)
        return canonical

    for _ in range(MAX_SYNONYM_PASSES):
        replaced = _SYNONYM_RE.sub(_sub, text)
        if replaced == text:
            break
        text = replaced
    return text


def normalize(text: str, options: NormalizerOptions | None = None) -> str:
    """Normalize a raw recurrence phrase for pattern matching.

    Examples:
        normalize('Every 2nd Week on Mondays')  -> 'every 2 week on every monday'
        normalize('fortnightly on Fridays.')    -> 'every 2 weeks on every friday'
    """
    if options is None:
        options = NormalizerOptions()
    if not text:
        return ''
    if options.correct_misspellings:
        text = correct_misspellings(text, options.similarity_threshold)
    if options.collapse_whitespace:
        text = canonicalize_whitespace(text, options.strip_punctuation)
    elif options.strip_punctuation:
        text = _TERMINAL_PUNCT_RE.sub('', text)
    if not options.preserve_ordinals:
        text = strip_ordinal_suffixes(text)
    if options.normalize_day_names:
        text = expand_plural_day_names(text)
    if options.apply_synonyms:
        text = apply_synonyms(text)
    if options.lowercase:
        text = text.lower()
    return text


def split_pattern_segments(text: str) -> list[str]:
    """Split normalized text before ' on ', ' starting ', ' until ' and ' from '.

    The delimiter stays with the segment it introduces:
    'every 2 weeks on monday until june' -> ['every 2 weeks', 'on monday', 'until june']
    """
    parts = re.split(r'\s+(?=(?:on|starting|until|from)\s)', text.strip(), flags=re.IGNORECASE)
    return [p.strip() for p in parts if p.strip()]
