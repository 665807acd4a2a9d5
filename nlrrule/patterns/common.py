"""Helpers shared by the pattern categories."""
import re
from typing import NamedTuple

from ..constants import WEEKDAY_LOOKUP
from ..document import TaggedDocument
from ..models import RecurrenceOptions

_RANGE_TERMS = ('through', 'thru')
_CLAUSE_LEAD_RE = re.compile(r'^(?:on|by|at|in|with|the)\s+', re.IGNORECASE)


class EndClause(NamedTuple):
    offset: int
    keyword: str
    expression: str


def _is_weekday_range(doc: TaggedDocument, m: re.Match) -> bool:
    if m.group(0).lower() not in _RANGE_TERMS:
        return False
    before = doc.text[:m.start()].split()
    after = doc.text[m.end():].split()
    if not before or not after:
        return False
    return before[-1].strip(',').lower() in WEEKDAY_LOOKUP and after[0].strip(',').lower() in WEEKDAY_LOOKUP


def find_end_clause(doc: TaggedDocument) -> EndClause | None:
    """Locate the 'until ...' clause, skipping 'monday through friday' ranges."""
    for m in doc.find_all('#Until'):
        if _is_weekday_range(doc, m):
            continue
        expression = doc.text[m.end():].strip(' ,')
        # 'ends on', 'ending on the 5th'
        while True:
            stripped = _CLAUSE_LEAD_RE.sub('', expression, count=1)
            if stripped == expression:
                break
            expression = stripped
        return EndClause(offset=m.start(), keyword=m.group(0).lower(), expression=expression)
    return None


def body_of(doc: TaggedDocument) -> TaggedDocument:
    """The part of the phrase before any end clause."""
    clause = find_end_clause(doc)
    if clause is None:
        return doc
    return doc.truncate(clause.offset)


def fold(options: RecurrenceOptions, **changes) -> RecurrenceOptions:
    """Return a validated copy of ``options`` with ``changes`` applied."""
    data = options.model_dump()
    data.update(changes)
    return RecurrenceOptions.model_validate(data)
