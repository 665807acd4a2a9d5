import pytest

from nlrrule.document import TaggedDocument, compile_pattern, tags_for


def test_tags_for_words():
    assert tags_for('monday') == {'WeekDay'}
    assert tags_for('Sat') == {'WeekDayAbbr'}
    assert tags_for('12') == {'Value'}
    assert tags_for('first') == {'Ordinal', 'OrdinalWord'}
    assert tags_for('weekends') == {'DayGroup'}
    assert tags_for('banana') == set()


def test_document_terms_and_tags():
    doc = TaggedDocument('every 2 weeks on monday')
    assert doc.terms == ('every', '2', 'weeks', 'on', 'monday')
    assert doc.has_tag('Every')
    assert doc.has_tag('Unit')
    assert not doc.has_tag('Month')
    assert doc.tagged('WeekDay') == ['monday']


def test_document_pattern_queries():
    doc = TaggedDocument('every 2 weeks on monday')
    assert doc.has('#Every #Value #Unit')
    assert doc.match('#Every #Value #Unit') == 'every 2 weeks'
    m = doc.find('#Every (#Value) (#Unit)')
    assert m.group(1) == '2'
    assert m.group(2) == 'weeks'
    assert doc.match('#Month') is None
    assert len(doc.find_all('#Unit|#WeekDay')) == 2


def test_pattern_matches_whole_words_only():
    doc = TaggedDocument('mondayish every weekday')
    assert doc.tagged('WeekDay') == []
    assert not doc.has('#WeekDay')
    assert doc.has('#DayGroup')


def test_pattern_is_case_insensitive():
    assert TaggedDocument('Every Monday').match('#Every #WeekDay') == 'Every Monday'


def test_truncate_and_without_return_new_documents():
    doc = TaggedDocument('every monday, until june')
    head = doc.truncate(doc.text.index('until'))
    assert head.text == 'every monday'
    assert doc.text == 'every monday, until june'
    assert doc.without('#Every').text == 'monday, until june'


def test_empty_document_is_falsey():
    assert not TaggedDocument('')
    assert not TaggedDocument('   ')
    assert TaggedDocument('daily')


def test_unknown_tag_rejected():
    with pytest.raises(ValueError):
        compile_pattern('#Nonsense')
