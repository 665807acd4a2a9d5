from datetime import datetime

import pytest

from nlrrule.document import TaggedDocument
from nlrrule.handlers import DEFAULT_CATEGORY, DEFAULT_PRIORITY, create_handler
from nlrrule.models import Frequency, MatchContext, PatternMatch, RecurrenceOptions
from nlrrule.patterns import HANDLERS, get_handler
from nlrrule.patterns.common import fold


CTX = MatchContext(now=datetime(2023, 6, 15))


def _daily_matcher(doc, ctx):
    text = doc.match('daily')
    if text:
        return PatternMatch(category='test', value=Frequency.DAILY, matched_text=text, confidence=0.8)
    return None


def _set_frequency(options, match):
    return fold(options, frequency=match.value)


def test_create_handler_defaults():
    h = create_handler('test', [_daily_matcher], _set_frequency)
    assert h.name == 'test'
    assert h.category == DEFAULT_CATEGORY
    assert h.priority == DEFAULT_PRIORITY
    assert h.matchers == (_daily_matcher,)
    assert h.description


@pytest.mark.parametrize('name,matchers,processor', [
    ('', [_daily_matcher], _set_frequency),
    ('   ', [_daily_matcher], _set_frequency),
    ('test', [], _set_frequency),
    ('test', [_daily_matcher, 'nope'], _set_frequency),
    ('test', [_daily_matcher], None),
])
def test_create_handler_rejects_bad_registration(name, matchers, processor):
    with pytest.raises(ValueError):
        create_handler(name, matchers, processor)


def test_handler_folds_first_match_into_new_options():
    h = create_handler('test', [_daily_matcher], _set_frequency)
    before = RecurrenceOptions()
    result = h(TaggedDocument('daily'), before, CTX)
    assert result.matched
    assert result.confidence == 0.8
    assert result.options.frequency == Frequency.DAILY
    # the input accumulator is never modified
    assert before.frequency is None


def test_handler_without_match_returns_input_unchanged():
    h = create_handler('test', [_daily_matcher], _set_frequency)
    before = RecurrenceOptions()
    result = h(TaggedDocument('weekly'), before, CTX)
    assert not result.matched
    assert result.options is before


def test_handler_on_empty_document():
    h = create_handler('test', [_daily_matcher], _set_frequency)
    assert not h(TaggedDocument(''), RecurrenceOptions(), CTX).matched


def test_handler_reports_matcher_errors_as_warnings():
    def broken(doc, ctx):
        raise RuntimeError('boom')

    h = create_handler('test', [broken, _daily_matcher], _set_frequency)
    result = h(TaggedDocument('daily'), RecurrenceOptions(), CTX)
    assert result.matched
    assert result.warnings == ('Error in test matcher: boom',)


def test_diagnostic_match_keeps_trying_later_matchers():
    def diagnostic(doc, ctx):
        return PatternMatch(category='test', value=None, warnings=('looked odd',))

    h = create_handler('test', [diagnostic, _daily_matcher], _set_frequency)
    result = h(TaggedDocument('daily'), RecurrenceOptions(), CTX)
    assert result.matched
    assert result.warnings == ('looked odd',)

    result = h(TaggedDocument('weekly'), RecurrenceOptions(), CTX)
    assert not result.matched
    assert result.warnings == ('looked odd',)


def test_registered_handlers_run_in_category_order():
    assert [h.name for h in HANDLERS] == ['frequency', 'interval', 'day_of_week', 'day_of_month', 'until_date']
    assert [h.priority for h in HANDLERS] == sorted(h.priority for h in HANDLERS)
    assert get_handler('interval').category == 'interval'
    assert get_handler('nope') is None


def test_fold_validates():
    with pytest.raises(ValueError):
        fold(RecurrenceOptions(), interval=0)
