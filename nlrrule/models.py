"""Value types passed between the normalizer, the handlers and callers."""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from . import config
from .constants import WEEKDAY_CODES


class Frequency(str, Enum):
    DAILY = 'DAILY'
    WEEKLY = 'WEEKLY'
    MONTHLY = 'MONTHLY'
    YEARLY = 'YEARLY'


WeekdayCode = Literal['MO', 'TU', 'WE', 'TH', 'FR', 'SA', 'SU']


def sort_weekdays(codes) -> list[str]:
    """Return the distinct weekday codes in week order (MO..SU)."""
    seen = set(codes)
    return [c for c in WEEKDAY_CODES if c in seen]


def sort_numbers(values) -> list[int]:
    """Return distinct integers ascending, negative positions last."""
    distinct = set(values)
    return sorted(v for v in distinct if v > 0) + sorted(v for v in distinct if v < 0)


class ProcessorMetrics(BaseModel):
    """Timing and counts attached to a result when collect_metrics is set."""
    total_time_ms: float = 0.0
    handler_times_ms: dict[str, float] = Field(default_factory=dict)
    matched_patterns: int = 0
    used_fast_path: bool = False
    cache_hit: bool = False


class RecurrenceOptions(BaseModel):
    """Structured recurrence, shaped after the RRULE parts it maps onto.

    Set-valued fields are kept as lists in canonical order so that equal
    sets compare (and serialize) equal.
    """
    frequency: Optional[Frequency] = None
    interval: int = Field(default=1, ge=1)
    by_weekday: Optional[list[WeekdayCode]] = None
    by_month_day: Optional[list[int]] = None
    by_month: Optional[list[int]] = None
    by_set_pos: Optional[list[int]] = None
    # inclusive end bound, end-of-day wall time
    until: Optional[datetime] = None
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    warnings: list[str] = Field(default_factory=list)
    metrics: Optional[ProcessorMetrics] = None

    @field_validator('by_weekday')
    @classmethod
    def _canonical_weekdays(cls, v):
        if v is None:
            return v
        return sort_weekdays(v)

    @field_validator('by_month_day')
    @classmethod
    def _valid_month_days(cls, v):
        if v is None:
            return v
        for day in v:
            if not (1 <= day <= 31 or -31 <= day <= -1):
                raise ValueError(f'day of month out of range: {day}')
        return sort_numbers(v)

    @field_validator('by_month')
    @classmethod
    def _valid_months(cls, v):
        if v is None:
            return v
        for month in v:
            if not 1 <= month <= 12:
                raise ValueError(f'month out of range: {month}')
        return sort_numbers(v)

    @field_validator('by_set_pos')
    @classmethod
    def _valid_set_pos(cls, v):
        if v is None:
            return v
        return sort_numbers(v)


# fields a caller may supply defaults for
DEFAULTABLE_FIELDS = ('frequency', 'interval', 'by_weekday', 'by_month_day', 'by_month', 'by_set_pos', 'until')


class RecurrenceDefaults(BaseModel):
    """Values applied to any RecurrenceOptions field a pattern left unset."""
    model_config = ConfigDict(extra='forbid', frozen=True)

    frequency: Optional[Frequency] = None
    interval: Optional[int] = Field(default=None, ge=1)
    by_weekday: Optional[tuple[WeekdayCode, ...]] = None
    by_month_day: Optional[tuple[int, ...]] = None
    by_month: Optional[tuple[int, ...]] = None
    by_set_pos: Optional[tuple[int, ...]] = None
    until: Optional[datetime] = None


class NormalizerOptions(BaseModel):
    """Which normalization steps run, and with which parameters."""
    model_config = ConfigDict(extra='forbid', frozen=True)

    lowercase: bool = True
    collapse_whitespace: bool = True
    strip_punctuation: bool = True
    preserve_ordinals: bool = False
    normalize_day_names: bool = True
    apply_synonyms: bool = True
    correct_misspellings: bool = Field(default_factory=lambda: config.CORRECT_MISSPELLINGS)
    similarity_threshold: float = Field(default_factory=lambda: config.SIMILARITY_THRESHOLD, ge=0.0, le=1.0)


class ProcessorOptions(BaseModel):
    """Per-call options for ``process``."""
    model_config = ConfigDict(extra='forbid', frozen=True)

    use_cache: bool = True
    # restrict the run to these handler names
    force_handlers: Optional[tuple[str, ...]] = None
    defaults: Optional[RecurrenceDefaults] = None
    correct_misspellings: bool = Field(default_factory=lambda: config.CORRECT_MISSPELLINGS)
    collect_metrics: bool = False

    @field_validator('force_handlers', mode='before')
    @classmethod
    def _sorted_names(cls, v):
        if v is None:
            return v
        if isinstance(v, str):
            v = [v]
        return tuple(sorted(set(v)))

    def cache_key(self) -> str:
        # metrics collection does not change the result, only what is attached
        return self.model_dump_json(exclude={'use_cache', 'collect_metrics'})


@dataclass(frozen=True)
class PatternMatch:
    """One recognized fragment. ``value`` None means diagnostics only."""
    category: str
    value: Any
    matched_text: str = ''
    confidence: float = 1.0
    warnings: tuple[str, ...] = ()


@dataclass(frozen=True)
class MatchContext:
    """Per-call facts matchers may need besides the document."""
    now: datetime


@dataclass(frozen=True)
class HandlerResult:
    matched: bool
    options: RecurrenceOptions
    confidence: float = 0.0
    warnings: tuple[str, ...] = field(default_factory=tuple)
