"""End-date resolution for 'until ...' clauses.

Expressions are resolved against the caller's clock in three passes: a bare
month name, a handful of relative phrases ('next month', 'end of the year'),
then dateparser for everything else ('december 31, 2023', '12/9/2025',
'in 3 weeks'). The result is always the inclusive end of the resolved day,
naive, in the clock's wall time.
"""
import calendar
import logging
import re
from datetime import datetime, timedelta

import dateparser
from dateutil.relativedelta import relativedelta

from . import config
from .constants import MONTH_LOOKUP, NUMBER_WORDS

logger = logging.getLogger(__name__)

# Single tokens dateparser happily turns into dates ('eight' -> August,
# 'now' -> the base time) that never name an end date on their own.
NON_DATE_TOKENS = set(NUMBER_WORDS) | {'zero', 'now'}

_END_OF_RE = re.compile(r'^end of (?:the |this )?(month|year)$')


def end_of_day(dt: datetime) -> datetime:
    """Last whole second of ``dt``'s day, tzinfo dropped."""
    return dt.replace(hour=23, minute=59, second=59, microsecond=0, tzinfo=None)


def _last_day_of_month(year: int, month: int) -> datetime:
    return datetime(year, month, calendar.monthrange(year, month)[1])


def _resolve_month_name(expr: str, now: datetime) -> datetime | None:
    month = MONTH_LOOKUP.get(expr)
    if month is None:
        return None
    # 'until june' in August means next June
    year = now.year if month >= now.month else now.year + 1
    return _last_day_of_month(year, month)


def _resolve_relative(expr: str, now: datetime) -> datetime | None:
    if expr == 'next week':
        return now + timedelta(days=7)
    if expr == 'next month':
        nxt = now + relativedelta(months=1)
        return _last_day_of_month(nxt.year, nxt.month)
    if expr == 'next year':
        return datetime(now.year + 1, 12, 31)
    m = _END_OF_RE.match(expr)
    if m:
        if m.group(1) == 'month':
            return _last_day_of_month(now.year, now.month)
        return datetime(now.year, 12, 31)
    return None


def _dateparser_settings(now: datetime) -> dict:
    return {
        'PREFER_DATES_FROM': 'future',
        'PREFER_DAY_OF_MONTH': 'last',
        'DATE_ORDER': config.DATE_ORDER,
        'RELATIVE_BASE': now.replace(tzinfo=None),
        'RETURN_AS_TIMEZONE_AWARE': False,
    }


def resolve_end_date(expression: str, now: datetime) -> datetime | None:
    """Resolve an end-date expression to an inclusive end-of-day datetime.

    Returns None when the expression does not name a date.
    """
    expr = ' '.join(expression.lower().split()).strip(' ,.')
    if not expr or expr in NON_DATE_TOKENS:
        return None
    resolved = _resolve_month_name(expr, now) or _resolve_relative(expr, now)
    if resolved is None:
        try:
            resolved = dateparser.parse(expr, languages=['en'], settings=_dateparser_settings(now))
        except Exception:
            logger.exception('dateparser failed on %r', expr)
            return None
    if resolved is None:
        logger.debug('no date found in %r', expr)
        return None
    return end_of_day(resolved)
