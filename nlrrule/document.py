"""Tagged view over a normalized phrase.

A ``TaggedDocument`` answers a small, closed set of questions about one
immutable snapshot of text. Patterns are ordinary regular expressions in
which ``#Tag`` stands for any word carrying that tag, for example
``'#Every #Value #Unit'`` or ``'#Ordinal #WeekDay of the month'``.
Matching is case-insensitive and anchored on word boundaries.
"""
import re
from functools import lru_cache

from .constants import (
    DAY_ABBREVIATIONS,
    DAY_GROUPS,
    DAY_NAMES,
    FREQUENCY_TERMS,
    MONTH_LOOKUP,
    NAMED_INTERVALS,
    NUMBER_WORDS,
    ORDINAL_WORDS,
    PLURAL_DAY_NAMES,
    UNIT_FREQUENCIES,
    UNTIL_TERMS,
)

# tag -> words carrying it
LEXICON = {
    'WeekDay': tuple(DAY_NAMES),
    'WeekDayAbbr': tuple(DAY_ABBREVIATIONS),
    'PluralDay': tuple(PLURAL_DAY_NAMES),
    'DayGroup': tuple(DAY_GROUPS),
    'Frequency': tuple(FREQUENCY_TERMS),
    'Every': ('every', 'each'),
    'Interval': tuple(NAMED_INTERVALS),
    'IntervalQualifier': ('other',),
    'Until': UNTIL_TERMS,
    'Ordinal': ('first', 'second', 'third', 'fourth', 'fifth', 'last'),
    'OrdinalWord': tuple(ORDINAL_WORDS),
    'Month': tuple(MONTH_LOOKUP),
    'Unit': tuple(UNIT_FREQUENCIES),
    'NumberWord': tuple(NUMBER_WORDS),
}

# tags recognized by shape rather than by word list
_SHAPE_TAGS = {
    'Value': r'\d+',
}

_TAG_RE = re.compile(r'#([A-Za-z]+)')
_TOKEN_RE = re.compile(r"[a-z]+(?:-[a-z]+)*|\d+", re.IGNORECASE)


def _tag_alternation(tag: str) -> str:
    if tag in _SHAPE_TAGS:
        return _SHAPE_TAGS[tag]
    try:
        words = LEXICON[tag]
    except KeyError:
        raise ValueError(f'unknown tag: #{tag}') from None
    # longest first so 'thurs' wins over 'thu'
    return '(?:' + '|'.join(re.escape(w) for w in sorted(words, key=len, reverse=True)) + ')'


@lru_cache(maxsize=256)
def compile_pattern(pattern: str) -> re.Pattern:
    """Compile a tag pattern into a case-insensitive regular expression."""
    body = _TAG_RE.sub(lambda m: _tag_alternation(m.group(1)), pattern)
    # spaces in a pattern match any run of whitespace
    body = body.replace(' ', r'\s+')
    return re.compile(r'(?<![\w-])(?:' + body + r')(?![\w-])', re.IGNORECASE)


def tags_for(word: str) -> set[str]:
    """Return every tag the lexicon assigns to ``word``."""
    lowered = word.lower()
    tags = {tag for tag, words in LEXICON.items() if lowered in words}
    for tag, shape in _SHAPE_TAGS.items():
        if re.fullmatch(shape, lowered):
            tags.add(tag)
    return tags


class TaggedDocument:
    """Read-only tagged snapshot of a normalized phrase."""

    __slots__ = ('_text', '_terms')

    def __init__(self, text: str):
        self._text = text
        self._terms = tuple(
            (m.group(0), frozenset(tags_for(m.group(0))))
            for m in _TOKEN_RE.finditer(text)
        )

    @property
    def text(self) -> str:
        return self._text

    @property
    def terms(self) -> tuple[str, ...]:
        return tuple(t[0] for t in self._terms)

    def __repr__(self) -> str:
        return f'<TaggedDocument {self._text!r}>'

    def __bool__(self) -> bool:
        return bool(self._text.strip())

    def has_tag(self, tag: str) -> bool:
        """True when any term carries ``tag``."""
        return any(tag in tags for _, tags in self._terms)

    def tagged(self, tag: str) -> list[str]:
        """Terms carrying ``tag``, in text order."""
        return [word for word, tags in self._terms if tag in tags]

    def has(self, pattern: str) -> bool:
        return compile_pattern(pattern).search(self._text) is not None

    def match(self, pattern: str) -> str | None:
        """Literal span of the first match of ``pattern``, or None."""
        m = compile_pattern(pattern).search(self._text)
        return m.group(0) if m else None

    def find(self, pattern: str) -> re.Match | None:
        """First regex match of ``pattern`` (for capture groups), or None."""
        return compile_pattern(pattern).search(self._text)

    def find_all(self, pattern: str) -> list[re.Match]:
        return list(compile_pattern(pattern).finditer(self._text))

    def truncate(self, offset: int) -> 'TaggedDocument':
        """New document holding only the text before ``offset``."""
        return TaggedDocument(self._text[:offset].rstrip(' ,'))

    def without(self, pattern: str) -> 'TaggedDocument':
        """New document with every match of ``pattern`` removed."""
        stripped = compile_pattern(pattern).sub(' ', self._text)
        return TaggedDocument(re.sub(r'\s+', ' ', stripped).strip())
