"""End-date patterns: 'until december 31, 2023', 'till next month',
'ending on the 5th of june'.

An unresolvable expression is reported as a warning and contributes nothing.
"""
from ..constants import PATTERN_PRIORITY, UNTIL_DATE
from ..dates import resolve_end_date
from ..handlers import create_handler
from ..models import Frequency, PatternMatch
from .common import find_end_clause, fold


def until_matcher(doc, ctx):
    clause = find_end_clause(doc)
    if clause is None:
        return None
    if not clause.expression:
        return PatternMatch(
            category=UNTIL_DATE,
            value=None,
            matched_text=clause.keyword,
            confidence=0.0,
            warnings=(f"Missing end date after '{clause.keyword}'",),
        )
    until = resolve_end_date(clause.expression, ctx.now)
    if until is None:
        return PatternMatch(
            category=UNTIL_DATE,
            value=None,
            matched_text=f'{clause.keyword} {clause.expression}',
            confidence=0.0,
            warnings=(f"Could not resolve end date: '{clause.expression}'",),
        )
    return PatternMatch(
        category=UNTIL_DATE,
        value=until,
        matched_text=f'{clause.keyword} {clause.expression}',
        confidence=1.0,
    )


def until_processor(options, match):
    # an end date alone still needs something to end
    return fold(options, until=match.value, frequency=options.frequency or Frequency.DAILY)


until_date_handler = create_handler(
    UNTIL_DATE,
    [until_matcher],
    until_processor,
    category=UNTIL_DATE,
    priority=PATTERN_PRIORITY[UNTIL_DATE],
    description="Recognizes end dates like 'until december 31, 2023'",
)
