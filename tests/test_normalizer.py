import itertools

import pytest

from nlrrule.models import NormalizerOptions
from nlrrule.normalizer import (
    apply_synonyms,
    canonicalize_whitespace,
    correct_misspellings,
    expand_plural_day_names,
    normalize,
    split_pattern_segments,
    strip_ordinal_suffixes,
)


PHRASES = [
    'mondays',
    'every mondays',
    'Every 2nd Week on Mondays',
    'fortnightly on Fridays.',
    'each tuesday and thursday',
    'the 1st and 15th of each month',
    'weekends until December 31, 2023',
    'every  other   day ,',
    'biweekly on wensday',
    'work days',
    'once everyday',
    'once annual',
    'each fortnight',
    'mondays through fridays',
    'not a pattern at all',
    '',
]


@pytest.mark.parametrize('text', PHRASES)
def test_normalize_is_idempotent(text):
    once = normalize(text)
    assert normalize(once) == once


# words that combine into further synonym keys once one of them is rewritten
SYNONYM_WORDS = ['once', 'a', 'everyday', 'daily', 'annual', 'each', 'fortnight', 'week']


@pytest.mark.parametrize('words', list(itertools.product(SYNONYM_WORDS, repeat=3)), ids=' '.join)
def test_normalize_is_idempotent_over_synonym_chains(words):
    once = normalize(' '.join(words))
    assert normalize(once) == once


def test_plural_day_becomes_recurring():
    assert 'every monday' in normalize('mondays')


def test_plural_after_every_is_only_singularized():
    out = normalize('every mondays')
    assert out == 'every monday'
    assert 'every every monday' not in out


@pytest.mark.parametrize('text,expected', [
    ('Every 2nd Week on Mondays', 'every 2 week on every monday'),
    ('fortnightly on Fridays.', 'every 2 weeks on every friday'),
    ('each month on the 10th', 'every month on the 10'),
    ('Weekends', 'every weekend'),
    ('every mondey', 'every monday'),
    ('every Fridday', 'every friday'),
    ('until Janurary', 'until january'),
])
def test_normalize_examples(text, expected):
    assert normalize(text) == expected


def test_correct_misspellings_keeps_case():
    assert correct_misspellings('Mondey and TUSDAY') == 'Monday and TUESDAY'


def test_correct_misspellings_fuzzy_long_word():
    assert correct_misspellings('wednesdy') == 'wednesday'


def test_correct_misspellings_leaves_unknown_words():
    assert correct_misspellings('water the plants') == 'water the plants'


def test_correct_misspellings_keeps_abbreviations():
    assert correct_misspellings('sat and sun') == 'sat and sun'


def test_correction_can_be_disabled():
    opts = NormalizerOptions(correct_misspellings=False)
    assert normalize('every mondey', opts) == 'every mondey'


def test_canonicalize_whitespace():
    assert canonicalize_whitespace('  every   monday ,tuesday!! ') == 'every monday, tuesday'


def test_canonicalize_keeps_punctuation_when_asked():
    assert canonicalize_whitespace('every day.', strip_punctuation=False) == 'every day.'


def test_strip_ordinal_suffixes():
    assert strip_ordinal_suffixes('the 1st, 2nd, 3rd and 24th') == 'the 1, 2, 3 and 24'


def test_preserve_ordinals_option():
    opts = NormalizerOptions(preserve_ordinals=True)
    assert normalize('on the 15th', opts) == 'on the 15th'


def test_expand_plural_day_names_keeps_case():
    assert expand_plural_day_names('Mondays') == 'every Monday'


def test_expand_plural_lookback_window():
    # 'every' more than three words back does not count
    assert expand_plural_day_names('every week, not on mondays') == 'every week, not on every monday'
    assert expand_plural_day_names('every single week mondays') == 'every single week monday'


def test_expand_plural_sees_earlier_rewrites():
    assert expand_plural_day_names('mondays through fridays') == 'every monday through friday'
    assert expand_plural_day_names('mondays and fridays') == 'every monday and friday'


def test_plural_expansion_can_be_disabled():
    opts = NormalizerOptions(normalize_day_names=False)
    assert normalize('mondays', opts) == 'mondays'


def test_apply_synonyms_longest_first():
    assert apply_synonyms('every fortnight') == 'every 2 weeks'
    assert apply_synonyms('business days') == 'weekday'


@pytest.mark.parametrize('text,expected', [
    ('once everyday', 'daily'),
    ('once annual', 'yearly'),
    ('each fortnight', 'every 2 weeks'),
])
def test_synonyms_repeat_until_stable(text, expected):
    assert normalize(text) == expected


def test_lowercase_option():
    opts = NormalizerOptions(lowercase=False)
    assert normalize('Every Monday', opts) == 'Every Monday'


def test_invalid_threshold_rejected():
    with pytest.raises(ValueError):
        NormalizerOptions(similarity_threshold=1.5)


def test_unknown_option_rejected():
    with pytest.raises(ValueError):
        NormalizerOptions(strip_emoji=True)


def test_split_pattern_segments():
    assert split_pattern_segments('every 2 weeks on monday until june') == [
        'every 2 weeks', 'on monday', 'until june',
    ]
    assert split_pattern_segments('daily') == ['daily']
