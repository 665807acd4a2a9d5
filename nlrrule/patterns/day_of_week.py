"""Weekday patterns: 'every monday', 'mondays and fridays', 'weekends',
'monday through friday'."""
from ..constants import DAY_ABBREVIATIONS, DAY_GROUPS, DAY_OF_WEEK, PATTERN_PRIORITY, WEEKDAY_CODES, WEEKDAY_LOOKUP
from ..handlers import create_handler
from ..models import Frequency, PatternMatch, sort_weekdays
from .common import body_of, fold

_DAY = '(#WeekDay|#WeekDayAbbr)'

# words after which an abbreviation reads as a day ('every sat', 'on fri')
_ABBR_LEADS = ('every', 'each', 'on', 'other')
_LIST_JOINERS = ('and', 'or', 'through', 'thru', 'to')


def expand_weekday_range(start: str, end: str) -> list[str]:
    """Codes from ``start`` to ``end`` inclusive, wrapping past Sunday."""
    i = WEEKDAY_CODES.index(start)
    j = WEEKDAY_CODES.index(end)
    if j < i:
        j += len(WEEKDAY_CODES)
    return [WEEKDAY_CODES[k % len(WEEKDAY_CODES)] for k in range(i, j + 1)]


def _next_to_weekday(terms, i, step) -> bool:
    j = i + step
    if 0 <= j < len(terms) and terms[j] in _LIST_JOINERS:
        j += step
    return 0 <= j < len(terms) and terms[j] in WEEKDAY_LOOKUP


def weekday_terms(doc) -> list[str]:
    """Weekday words of ``doc`` in text order.

    Full names always count. 'sat' and 'sun' are also ordinary words, so an
    abbreviation counts only after every/each/on/other or beside another
    weekday in a list ('sat and sun', 'mon, wed and fri').
    """
    terms = [t.lower() for t in doc.terms]
    found = []
    for i, word in enumerate(terms):
        if word in DAY_ABBREVIATIONS:
            lead = terms[i - 1] if i else None
            if not (lead in _ABBR_LEADS or _next_to_weekday(terms, i, -1) or _next_to_weekday(terms, i, 1)):
                continue
        elif word not in WEEKDAY_LOOKUP:
            continue
        found.append(doc.terms[i])
    return found


def weekday_matcher(doc, ctx):
    body = body_of(doc)
    codes: list[str] = []
    spans: list[str] = []
    for m in body.find_all(f'{_DAY} (?:through|thru|to) {_DAY}'):
        codes.extend(expand_weekday_range(WEEKDAY_LOOKUP[m.group(1).lower()], WEEKDAY_LOOKUP[m.group(2).lower()]))
        spans.append(m.group(0))
    for group in body.tagged('DayGroup'):
        codes.extend(DAY_GROUPS[group.lower()])
        spans.append(group)
    for word in weekday_terms(body):
        codes.append(WEEKDAY_LOOKUP[word.lower()])
        spans.append(word)
    if not codes:
        return None
    explicit = body.has('(?:#Every|on) (?:#WeekDay|#WeekDayAbbr|#DayGroup)')
    return PatternMatch(
        category=DAY_OF_WEEK,
        value=tuple(sort_weekdays(codes)),
        matched_text=' '.join(spans),
        confidence=1.0 if explicit else 0.9,
    )


def day_of_week_processor(options, match):
    merged = sort_weekdays(list(options.by_weekday or []) + list(match.value))
    # a weekday inside a monthly/yearly rule qualifies it, it does not make it weekly
    frequency = options.frequency or Frequency.WEEKLY
    return fold(options, by_weekday=merged, frequency=frequency)


day_of_week_handler = create_handler(
    DAY_OF_WEEK,
    [weekday_matcher],
    day_of_week_processor,
    category=DAY_OF_WEEK,
    priority=PATTERN_PRIORITY[DAY_OF_WEEK],
    description="Recognizes weekday patterns like 'every monday' or 'weekends'",
)
