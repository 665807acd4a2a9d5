"""Day-of-month patterns.

Handles plain days ('on the 15th', 'the 1st and 15th of every month',
'day 10'), the last day of the month, and ordinal weekdays ('first monday of
every month', 'the last friday of the month').
"""
import re
from typing import NamedTuple, Optional

from ..constants import DAY_OF_MONTH, ORDINAL_POSITIONS, ORDINAL_WORDS, PATTERN_PRIORITY, WEEKDAY_LOOKUP
from ..handlers import create_handler
from ..models import Frequency, PatternMatch, sort_numbers
from .common import body_of, fold

_OF_MONTH = '(?: of (?:the|every) month)'
_LIST_SEP = '(?:, and |, | and | & )'
_POSITION = '(?:#Ordinal|[1-5])'
_DAY_NUMBER = r'(?:\d+|#OrdinalWord)'
_NOT_A_UNIT = '(?! (?:#Unit|#WeekDay|#WeekDayAbbr))'

ORDINAL_WEEKDAY_PATTERN = (
    f'(?P<lead>the )?(?P<positions>{_POSITION}(?:{_LIST_SEP}{_POSITION})*) '
    f'(?P<day>#WeekDay|#WeekDayAbbr)(?P<tail>{_OF_MONTH})?'
)
LAST_DAY_PATTERN = f'(?:the )?last day{_OF_MONTH}?'
DAY_LIST_PATTERN = f'(?:on )?the (?P<days>{_DAY_NUMBER}(?:{_LIST_SEP}{_DAY_NUMBER})*)(?: day)?{_OF_MONTH}?{_NOT_A_UNIT}'
DAY_NUMBER_PATTERN = f'day (?P<days>\\d+){_OF_MONTH}?'
NUMBER_OF_MONTH_PATTERN = f'(?P<days>\\d+){_OF_MONTH}'

_SPLIT_RE = re.compile(r'\s*(?:,\s*and|,|and|&)\s*')


class MonthDayValue(NamedTuple):
    days: tuple = ()
    weekday: Optional[str] = None
    positions: tuple = ()


def _parse_day(token: str) -> int | None:
    token = token.strip().lower()
    if token.isdigit():
        return int(token)
    return ORDINAL_WORDS.get(token)


def ordinal_weekday_matcher(doc, ctx):
    for m in body_of(doc).find_all(ORDINAL_WEEKDAY_PATTERN):
        # a bare 'first monday' needs 'the' before it or 'of the month' after it
        if not (m.group('lead') or m.group('tail')):
            continue
        positions = tuple(ORDINAL_POSITIONS[p.lower()] for p in _SPLIT_RE.split(m.group('positions')) if p)
        return PatternMatch(
            category=DAY_OF_MONTH,
            value=MonthDayValue(weekday=WEEKDAY_LOOKUP[m.group('day').lower()], positions=positions),
            matched_text=m.group(0),
            confidence=1.0 if m.group('tail') else 0.9,
        )
    return None


def last_day_matcher(doc, ctx):
    text = body_of(doc).match(LAST_DAY_PATTERN)
    if not text:
        return None
    return PatternMatch(category=DAY_OF_MONTH, value=MonthDayValue(days=(-1,)), matched_text=text, confidence=1.0)


def _day_list_matcher(pattern: str, confidence: float):
    def matcher(doc, ctx):
        m = body_of(doc).find(pattern)
        if not m:
            return None
        days = []
        for token in _SPLIT_RE.split(m.group('days')):
            if not token:
                continue
            day = _parse_day(token)
            if day is None or not 1 <= day <= 31:
                # one bad day poisons the whole list
                return None
            days.append(day)
        if not days:
            return None
        return PatternMatch(
            category=DAY_OF_MONTH,
            value=MonthDayValue(days=tuple(days)),
            matched_text=m.group(0),
            confidence=confidence,
        )

    return matcher


day_list_matcher = _day_list_matcher(DAY_LIST_PATTERN, 1.0)
day_number_matcher = _day_list_matcher(DAY_NUMBER_PATTERN, 0.9)
number_of_month_matcher = _day_list_matcher(NUMBER_OF_MONTH_PATTERN, 0.95)


def day_of_month_processor(options, match):
    value = match.value
    if value.weekday is not None:
        # the ordinal weekday form defines the rule's weekday and is always monthly
        return fold(
            options,
            by_weekday=[value.weekday],
            by_set_pos=sort_numbers(value.positions),
            frequency=Frequency.MONTHLY,
        )
    merged = sort_numbers(list(options.by_month_day or []) + list(value.days))
    return fold(options, by_month_day=merged, frequency=options.frequency or Frequency.MONTHLY)


day_of_month_handler = create_handler(
    DAY_OF_MONTH,
    [ordinal_weekday_matcher, last_day_matcher, day_list_matcher, day_number_matcher, number_of_month_matcher],
    day_of_month_processor,
    category=DAY_OF_MONTH,
    priority=PATTERN_PRIORITY[DAY_OF_MONTH],
    description="Recognizes 'on the 15th', 'first monday of every month' and similar",
)
