"""Natural-language recurrence phrases to structured RRULE options.

    >>> from nlrrule import process
    >>> process('every 2 weeks on monday').by_weekday
    ['MO']
"""
from .cache import CacheEntry, ResultCache
from .document import TaggedDocument
from .handlers import Handler, create_handler
from .models import (
    Frequency,
    HandlerResult,
    MatchContext,
    NormalizerOptions,
    PatternMatch,
    ProcessorMetrics,
    ProcessorOptions,
    RecurrenceDefaults,
    RecurrenceOptions,
)
from .normalizer import normalize, split_pattern_segments
from .processor import RecurrenceProcessor, get_default_processor, process
from .rrule import build_rrule, natural_language_to_rrule, to_rrule_params, to_rrule_string

__all__ = [
    'CacheEntry',
    'Frequency',
    'Handler',
    'HandlerResult',
    'MatchContext',
    'NormalizerOptions',
    'PatternMatch',
    'ProcessorMetrics',
    'ProcessorOptions',
    'RecurrenceDefaults',
    'RecurrenceOptions',
    'RecurrenceProcessor',
    'ResultCache',
    'TaggedDocument',
    'build_rrule',
    'create_handler',
    'get_default_processor',
    'natural_language_to_rrule',
    'normalize',
    'process',
    'split_pattern_segments',
    'to_rrule_params',
    'to_rrule_string',
]
