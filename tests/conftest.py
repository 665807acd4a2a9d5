import pathlib
import sys
from datetime import datetime

import pytest

# ensure project root is on PYTHONPATH for test runs
ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from nlrrule.cache import ResultCache
from nlrrule.processor import RecurrenceProcessor


# Reference time for everything that resolves relative end dates. Tests that
# depend on "now" use the `processor` fixture (or FIXED_NOW directly) so the
# outcome does not depend on the day the suite runs.
FIXED_NOW = datetime(2023, 6, 15, 10, 30)


@pytest.fixture
def fixed_now():
    return FIXED_NOW


@pytest.fixture
def processor():
    """A processor with no cache and a frozen clock."""
    return RecurrenceProcessor(cache=None, clock=lambda: FIXED_NOW)


@pytest.fixture
def cached_processor():
    """A processor with its own small cache and a frozen clock."""
    return RecurrenceProcessor(cache=ResultCache(16), clock=lambda: FIXED_NOW)
