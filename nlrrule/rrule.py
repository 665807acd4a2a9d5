"""Conversion of a RecurrenceOptions into dateutil rrules and RRULE strings."""
import logging
from datetime import datetime, timezone

from dateutil import rrule as _rrule

from .models import RecurrenceOptions
from .processor import process

logger = logging.getLogger(__name__)

FREQ_MAP = {'DAILY': _rrule.DAILY, 'WEEKLY': _rrule.WEEKLY, 'MONTHLY': _rrule.MONTHLY, 'YEARLY': _rrule.YEARLY}
WEEKDAY_MAP = {
    'MO': _rrule.MO, 'TU': _rrule.TU, 'WE': _rrule.WE, 'TH': _rrule.TH,
    'FR': _rrule.FR, 'SA': _rrule.SA, 'SU': _rrule.SU,
}


def to_rrule_params(options: RecurrenceOptions) -> dict:
    """Convert a RecurrenceOptions into kwargs for ``dateutil.rrule.rrule``.

    Example: frequency WEEKLY, interval 2, by_weekday ['MO'] maps to
    {'freq': rrule.WEEKLY, 'interval': 2, 'byweekday': (rrule.MO,)}.
    A result without a frequency yields an empty dict.
    """
    if options is None or options.frequency is None:
        return {}
    out: dict = {'freq': FREQ_MAP[options.frequency.value], 'interval': options.interval}
    if options.by_weekday:
        out['byweekday'] = tuple(WEEKDAY_MAP[w] for w in options.by_weekday)
    if options.by_month_day:
        out['bymonthday'] = tuple(options.by_month_day)
    if options.by_month:
        out['bymonth'] = tuple(options.by_month)
    if options.by_set_pos:
        out['bysetpos'] = tuple(options.by_set_pos)
    if options.until is not None:
        out['until'] = options.until
    return out


def to_rrule_string(options: RecurrenceOptions) -> str:
    """Export a RecurrenceOptions to an RFC 5545 RRULE value (no leading 'RRULE:').

    INTERVAL is omitted when it is 1. UNTIL is written in the floating
    (local) form unless ``until`` is timezone-aware, which is written in UTC.
    """
    if options is None or options.frequency is None:
        return ''
    parts: list[str] = [f'FREQ={options.frequency.value}']
    if options.interval != 1:
        parts.append(f'INTERVAL={options.interval}')
    if options.by_weekday:
        parts.append('BYDAY=' + ','.join(options.by_weekday))
    if options.by_month_day:
        parts.append('BYMONTHDAY=' + ','.join(str(d) for d in options.by_month_day))
    if options.by_month:
        parts.append('BYMONTH=' + ','.join(str(m) for m in options.by_month))
    if options.by_set_pos:
        parts.append('BYSETPOS=' + ','.join(str(p) for p in options.by_set_pos))
    if options.until is not None:
        until = options.until
        if until.tzinfo is not None:
            parts.append('UNTIL=' + until.astimezone(timezone.utc).strftime('%Y%m%dT%H%M%SZ'))
        else:
            parts.append('UNTIL=' + until.strftime('%Y%m%dT%H%M%S'))
    return ';'.join(parts)


def build_rrule(options: RecurrenceOptions, dtstart: datetime):
    """Build a ``dateutil.rrule.rrule`` starting at ``dtstart``.

    dateutil refuses to mix naive and aware datetimes, so a naive ``until``
    takes the tzinfo of an aware ``dtstart``.
    """
    params = to_rrule_params(options)
    if not params:
        raise ValueError('recurrence has no frequency')
    until = params.get('until')
    if until is not None and dtstart.tzinfo is not None and until.tzinfo is None:
        params['until'] = until.replace(tzinfo=dtstart.tzinfo)
    elif until is not None and dtstart.tzinfo is None and until.tzinfo is not None:
        params['until'] = until.replace(tzinfo=None)
    return _rrule.rrule(dtstart=dtstart, **params)


def natural_language_to_rrule(dtstart: datetime, pattern: str, until: datetime | None = None, options=None):
    """Interpret ``pattern`` and build an rrule starting at ``dtstart``.

    Returns None when the phrase is not understood. An explicit ``until``
    replaces any end date found in the phrase.
    """
    result = process(pattern, options)
    if result is None or result.frequency is None:
        logger.debug('no recurrence in %r', pattern)
        return None
    if until is not None:
        result = result.model_copy(update={'until': until})
    return build_rrule(result, dtstart)
