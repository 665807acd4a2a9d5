"""Orchestration: turn a raw phrase into one RecurrenceOptions.

``RecurrenceProcessor`` is the composition root. It owns the handler table,
an optional ``ResultCache`` and the clock used to resolve relative end
dates, so tests and callers can swap each of them. ``process`` at module
level uses a lazily built default processor.
"""
import logging
import time
from datetime import datetime
from typing import Callable, Optional

from pydantic import ValidationError

from .cache import ResultCache
from .constants import FAST_PATH_FREQUENCIES, INTERVAL
from .document import TaggedDocument
from .models import (
    DEFAULTABLE_FIELDS,
    Frequency,
    MatchContext,
    NormalizerOptions,
    ProcessorMetrics,
    ProcessorOptions,
    RecurrenceOptions,
)
from .normalizer import normalize
from .patterns import HANDLERS

logger = logging.getLogger(__name__)

_UNSET = object()


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000.0


class RecurrenceProcessor:
    def __init__(self, handlers=None, cache=_UNSET, clock: Callable[[], datetime] | None = None):
        self.handlers = tuple(sorted(HANDLERS if handlers is None else handlers, key=lambda h: h.priority))
        names = [h.name for h in self.handlers]
        if len(set(names)) != len(names):
            raise ValueError(f'duplicate handler names: {names}')
        # pass cache=None explicitly to run without one
        self.cache = ResultCache() if cache is _UNSET else cache
        self.clock = clock or datetime.now

    @property
    def handler_names(self) -> tuple[str, ...]:
        return tuple(h.name for h in self.handlers)

    def process(self, pattern: str, options=None, **kwargs) -> Optional[RecurrenceOptions]:
        """Interpret ``pattern`` as a recurrence.

        ``options`` may be a ``ProcessorOptions``, a dict of its fields, or
        the fields as keyword arguments. Returns None when no category
        recognized anything in the phrase.
        """
        opts = self._coerce_options(options, kwargs)
        start = time.perf_counter()
        if not isinstance(pattern, str):
            return None

        # relative end dates ('until next week') resolve against today, so a
        # cached answer is only good for the day it was computed on
        key = (pattern, opts.cache_key(), self.clock().date())
        use_cache = opts.use_cache and self.cache is not None
        if use_cache:
            entry = self.cache.get(key)
            if entry is not None:
                result = entry.result
                if result is not None and opts.collect_metrics:
                    result.metrics = ProcessorMetrics(
                        total_time_ms=_elapsed_ms(start),
                        used_fast_path=entry.fast_path,
                        cache_hit=True,
                    )
                return result

        result, fast_path, metrics = self._compute(pattern, opts)
        if use_cache:
            # metrics describe one run only and are not cached
            self.cache.put(key, result, fast_path=fast_path)
        if result is not None and opts.collect_metrics:
            metrics.total_time_ms = _elapsed_ms(start)
            result.metrics = metrics
        return result

    @staticmethod
    def _coerce_options(options, kwargs) -> ProcessorOptions:
        if isinstance(options, ProcessorOptions) and not kwargs:
            return options
        if options is None:
            data = {}
        elif isinstance(options, ProcessorOptions):
            data = options.model_dump()
        else:
            data = dict(options)
        data.update(kwargs)
        return ProcessorOptions.model_validate(data)

    def _compute(self, pattern: str, opts: ProcessorOptions):
        metrics = ProcessorMetrics()
        literal = pattern.strip().lower()
        if literal in FAST_PATH_FREQUENCIES:
            metrics.used_fast_path = True
            metrics.matched_patterns = 1
            result = RecurrenceOptions(frequency=Frequency(FAST_PATH_FREQUENCIES[literal]), confidence=1.0)
            return self._apply_defaults(result, opts, interval_matched=False), True, metrics

        text = normalize(pattern, NormalizerOptions(correct_misspellings=opts.correct_misspellings))
        doc = TaggedDocument(text)
        ctx = MatchContext(now=self.clock())

        handlers = self.handlers
        warnings: list[str] = []
        if opts.force_handlers is not None:
            known = set(self.handler_names)
            for name in opts.force_handlers:
                if name not in known:
                    warnings.append(f"Unknown handler '{name}' ignored")
            handlers = tuple(h for h in handlers if h.name in opts.force_handlers)

        acc = RecurrenceOptions()
        matched = 0
        interval_matched = False
        confidence = 0.0
        for handler in handlers:
            t0 = time.perf_counter()
            outcome = handler(doc, acc, ctx)
            metrics.handler_times_ms[handler.name] = _elapsed_ms(t0)
            warnings.extend(outcome.warnings)
            if outcome.matched:
                matched += 1
                interval_matched = interval_matched or handler.category == INTERVAL
                acc = outcome.options
                confidence = max(confidence, outcome.confidence)
        metrics.matched_patterns = matched

        if not matched:
            if warnings:
                logger.debug('no pattern matched %r (warnings: %s)', pattern, warnings)
            return None, False, metrics
        result = acc.model_copy(update={'confidence': confidence, 'warnings': warnings})
        return self._apply_defaults(result, opts, interval_matched), False, metrics

    @staticmethod
    def _apply_defaults(result: RecurrenceOptions, opts: ProcessorOptions, interval_matched: bool) -> RecurrenceOptions:
        """Fill fields no pattern set from ``opts.defaults``.

        ``interval`` always holds a value, so its default only replaces the
        implicit 1 when no interval pattern matched.
        """
        if opts.defaults is None:
            return result
        data = result.model_dump()
        for name in DEFAULTABLE_FIELDS:
            value = getattr(opts.defaults, name)
            if value is None:
                continue
            if name == 'interval':
                if not interval_matched:
                    data[name] = value
            elif data.get(name) is None:
                data[name] = list(value) if isinstance(value, tuple) else value
        try:
            return RecurrenceOptions.model_validate(data)
        except ValidationError:
            logger.exception('defaults %r produced an invalid result', opts.defaults)
            return result


_default_processor: RecurrenceProcessor | None = None


def get_default_processor() -> RecurrenceProcessor:
    global _default_processor
    if _default_processor is None:
        _default_processor = RecurrenceProcessor()
    return _default_processor


def process(pattern: str, options=None, **kwargs) -> Optional[RecurrenceOptions]:
    """Interpret ``pattern`` with the default processor. See ``RecurrenceProcessor.process``."""
    return get_default_processor().process(pattern, options, **kwargs)
