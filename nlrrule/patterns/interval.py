"""Interval patterns: 'every 2 weeks', 'every other day', 'every other monday',
'biweekly'.

An interval always carries its unit, so it sets frequency and interval
together and may replace a frequency picked by the frequency handler.
"""
from ..constants import INTERVAL, NAMED_INTERVALS, NUMBER_WORDS, PATTERN_PRIORITY, UNIT_FREQUENCIES
from ..handlers import create_handler
from ..models import Frequency, PatternMatch
from .common import body_of, fold


def named_interval_matcher(doc, ctx):
    # normalize() rewrites these words to 'every N unit' when synonyms are on,
    # so this only fires for text normalized with apply_synonyms=False
    m = body_of(doc).find('(#Interval)')
    if not m:
        return None
    frequency, interval = NAMED_INTERVALS[m.group(1).lower()]
    return PatternMatch(
        category=INTERVAL,
        value=(Frequency(frequency), interval),
        matched_text=m.group(0),
        confidence=1.0,
    )


def numeric_interval_matcher(doc, ctx):
    m = body_of(doc).find('#Every (#Value|#NumberWord) (#Unit)')
    if not m:
        return None
    raw = m.group(1).lower()
    interval = NUMBER_WORDS[raw] if raw in NUMBER_WORDS else int(raw)
    if interval <= 0:
        # 'every 0 days' is not a recurrence
        return None
    frequency = Frequency(UNIT_FREQUENCIES[m.group(2).lower()])
    return PatternMatch(
        category=INTERVAL,
        value=(frequency, interval),
        matched_text=m.group(0),
        confidence=1.0 if raw.isdigit() else 0.95,
    )


def every_other_matcher(doc, ctx):
    m = body_of(doc).find('#Every #IntervalQualifier (#Unit)')
    if not m:
        return None
    frequency = Frequency(UNIT_FREQUENCIES[m.group(1).lower()])
    return PatternMatch(category=INTERVAL, value=(frequency, 2), matched_text=m.group(0), confidence=1.0)


def every_other_weekday_matcher(doc, ctx):
    """'every other monday', 'every other weekend': a fortnightly weekday rule."""
    m = body_of(doc).find('#Every #IntervalQualifier (?:#WeekDay|#WeekDayAbbr|#DayGroup)')
    if not m:
        return None
    return PatternMatch(
        category=INTERVAL,
        value=(Frequency.WEEKLY, 2),
        matched_text=m.group(0),
        confidence=1.0,
    )


def interval_processor(options, match):
    frequency, interval = match.value
    return fold(options, frequency=frequency, interval=interval)


interval_handler = create_handler(
    INTERVAL,
    [named_interval_matcher, numeric_interval_matcher, every_other_matcher, every_other_weekday_matcher],
    interval_processor,
    category=INTERVAL,
    priority=PATTERN_PRIORITY[INTERVAL],
    description="Recognizes interval patterns like 'every 2 weeks' or 'biweekly'",
)
