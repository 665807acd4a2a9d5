"""Frequency patterns: 'daily', 'weekly', 'every month', 'annually'."""
from ..constants import FREQUENCY, PATTERN_PRIORITY
from ..handlers import create_handler
from ..models import Frequency, PatternMatch
from .common import body_of, fold


def _frequency_matcher(frequency: Frequency, words: str, unit: str):
    def matcher(doc, ctx):
        body = body_of(doc)
        text = body.match(words)
        if text:
            return PatternMatch(category=FREQUENCY, value=frequency, matched_text=text, confidence=1.0)
        text = body.match('#Every ' + unit)
        if text:
            return PatternMatch(category=FREQUENCY, value=frequency, matched_text=text, confidence=0.95)
        return None

    matcher.__name__ = f'{frequency.value.lower()}_matcher'
    return matcher


daily_matcher = _frequency_matcher(Frequency.DAILY, 'daily', 'day')
weekly_matcher = _frequency_matcher(Frequency.WEEKLY, 'weekly', 'week')
monthly_matcher = _frequency_matcher(Frequency.MONTHLY, 'monthly', 'month')
yearly_matcher = _frequency_matcher(Frequency.YEARLY, '(?:yearly|annually)', 'year')


def frequency_processor(options, match):
    # a bare frequency never replaces one that is already committed
    if options.frequency is not None:
        return options
    return fold(options, frequency=match.value)


frequency_handler = create_handler(
    FREQUENCY,
    [daily_matcher, weekly_matcher, monthly_matcher, yearly_matcher],
    frequency_processor,
    category=FREQUENCY,
    priority=PATTERN_PRIORITY[FREQUENCY],
    description="Recognizes 'daily', 'weekly', 'every month' and similar",
)
