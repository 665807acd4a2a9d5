import importlib

import pytest

from nlrrule import config
from nlrrule.cache import ResultCache
from nlrrule.models import NormalizerOptions, ProcessorOptions


@pytest.mark.parametrize('value,expected', [
    ('1', True), ('true', True), ('YES', True), ('on', True),
    ('0', False), ('no', False), ('', False), (None, False),
])
def test_trueish(value, expected):
    assert config._trueish(value) is expected


def _reload_with(monkeypatch, **env):
    for name, value in env.items():
        monkeypatch.setenv(name, value)
    importlib.reload(config)


def test_env_overrides(monkeypatch):
    try:
        _reload_with(
            monkeypatch,
            NLRRULE_CACHE_SIZE='7',
            NLRRULE_SIMILARITY_THRESHOLD='0.9',
            NLRRULE_CORRECT_MISSPELLINGS='0',
            NLRRULE_DATE_ORDER='dmy',
        )
        assert config.CACHE_SIZE == 7
        assert config.SIMILARITY_THRESHOLD == 0.9
        assert config.CORRECT_MISSPELLINGS is False
        assert config.DATE_ORDER == 'DMY'
        # option defaults are read when the options are built
        assert NormalizerOptions().correct_misspellings is False
        assert NormalizerOptions().similarity_threshold == 0.9
        assert ProcessorOptions().correct_misspellings is False
        assert ResultCache().max_size == 7
    finally:
        monkeypatch.undo()
        importlib.reload(config)


def test_bad_numbers_fall_back_to_defaults(monkeypatch):
    try:
        _reload_with(monkeypatch, NLRRULE_CACHE_SIZE='lots', NLRRULE_SIMILARITY_THRESHOLD='high')
        assert config.CACHE_SIZE == 256
        assert config.SIMILARITY_THRESHOLD == 0.85
    finally:
        monkeypatch.undo()
        importlib.reload(config)
