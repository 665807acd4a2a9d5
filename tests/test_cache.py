from concurrent.futures import ThreadPoolExecutor

import pytest

from nlrrule.cache import CacheEntry, ResultCache
from nlrrule.models import Frequency, RecurrenceOptions
from nlrrule.processor import RecurrenceProcessor


def _opts(**kw):
    return RecurrenceOptions(frequency=Frequency.WEEKLY, **kw)


def test_put_and_get_copy():
    cache = ResultCache(4)
    original = _opts(by_weekday=['MO'])
    cache.put('a', original)
    entry = cache.get('a')
    assert isinstance(entry, CacheEntry)
    assert entry.result == original
    assert entry.result is not original
    assert entry.created_at.tzinfo is not None
    assert not entry.fast_path


def test_stored_value_is_a_copy():
    cache = ResultCache(4)
    original = _opts(by_weekday=['MO'])
    cache.put('a', original)
    original.by_weekday.append('TU')
    assert cache.get('a').result.by_weekday == ['MO']


def test_missing_key():
    cache = ResultCache(4)
    assert cache.get('missing') is None
    assert 'missing' not in cache


def test_none_results_are_stored():
    cache = ResultCache(4)
    cache.put('a', None)
    assert 'a' in cache
    assert cache.get('a').result is None


def test_oldest_inserted_evicted_first():
    cache = ResultCache(2)
    cache.put('a', _opts())
    cache.put('b', _opts())
    cache.get('a')  # reads do not refresh position
    cache.put('c', _opts())
    assert 'a' not in cache
    assert 'b' in cache and 'c' in cache
    assert len(cache) == 2


def test_zero_size_cache_stores_nothing():
    cache = ResultCache(0)
    cache.put('a', _opts())
    assert len(cache) == 0


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        ResultCache(-1)


def test_clear():
    cache = ResultCache(4)
    cache.put('a', _opts())
    cache.clear()
    assert len(cache) == 0


def test_concurrent_processing_shares_cache():
    p = RecurrenceProcessor(cache=ResultCache(8))
    texts = ['every monday', 'every 2 weeks', 'monthly on the 15th', 'weekends'] * 25
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(p.process, texts))
    for text, result in zip(texts, results):
        assert result == p.process(text, use_cache=False)
    assert len(p.cache) == 4
