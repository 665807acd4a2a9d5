from datetime import datetime

import pytest

from nlrrule.dates import end_of_day, resolve_end_date


NOW = datetime(2023, 6, 15, 10, 30)


def test_end_of_day():
    assert end_of_day(datetime(2023, 1, 2, 3, 4, 5, 6)) == datetime(2023, 1, 2, 23, 59, 59)


@pytest.mark.parametrize('expr,expected', [
    ('june', datetime(2023, 6, 30, 23, 59, 59)),
    ('december', datetime(2023, 12, 31, 23, 59, 59)),
    ('march', datetime(2024, 3, 31, 23, 59, 59)),
    ('feb', datetime(2024, 2, 29, 23, 59, 59)),
    ('next week', datetime(2023, 6, 22, 23, 59, 59)),
    ('next month', datetime(2023, 7, 31, 23, 59, 59)),
    ('end of the month', datetime(2023, 6, 30, 23, 59, 59)),
    ('end of month', datetime(2023, 6, 30, 23, 59, 59)),
    ('end of the year', datetime(2023, 12, 31, 23, 59, 59)),
    ('next year', datetime(2024, 12, 31, 23, 59, 59)),
    ('december 31, 2023', datetime(2023, 12, 31, 23, 59, 59)),
    ('2024-01-15', datetime(2024, 1, 15, 23, 59, 59)),
])
def test_resolve_end_date(expr, expected):
    assert resolve_end_date(expr, NOW) == expected


@pytest.mark.parametrize('expr', ['', 'eight', 'now', 'xyzzy'])
def test_resolve_end_date_rejects_non_dates(expr):
    assert resolve_end_date(expr, NOW) is None


def test_next_month_at_year_end():
    assert resolve_end_date('next month', datetime(2023, 12, 20)) == datetime(2024, 1, 31, 23, 59, 59)
