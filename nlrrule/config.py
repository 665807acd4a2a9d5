"""Simple runtime configuration for the recurrence phrase parser.

Control flags are read from environment variables to allow tuning in
development or production without code changes. Per-call options are
passed to ``process`` through ``ProcessorOptions`` instead.
"""
import os


def _trueish(v: str | None) -> bool:
    if not v:
        return False
    return v.lower() in ('1', 'true', 'yes', 'on')


# Maximum number of (pattern, options) results kept by the default result
# cache. Oldest entries are evicted first. Set NLRRULE_CACHE_SIZE=0 to run
# the default processor without a cache.
try:
    CACHE_SIZE = int(os.getenv('NLRRULE_CACHE_SIZE', '256'))
except ValueError:
    CACHE_SIZE = 256

# Minimum normalized edit-distance similarity for a misspelled token to be
# replaced by a dictionary word during normalization.
try:
    SIMILARITY_THRESHOLD = float(os.getenv('NLRRULE_SIMILARITY_THRESHOLD', '0.85'))
except ValueError:
    SIMILARITY_THRESHOLD = 0.85

# Misspelling correction is on unless NLRRULE_CORRECT_MISSPELLINGS=0.
CORRECT_MISSPELLINGS = _trueish(os.getenv('NLRRULE_CORRECT_MISSPELLINGS', '1'))

# Date ordering preference handed to dateparser when resolving end dates such
# as 'until 12/9/2025': 'MDY' (month-day-year), 'DMY' or 'YMD'.
DATE_ORDER = os.getenv('NLRRULE_DATE_ORDER', 'MDY').upper()

# Optional local overrides: define variables in nlrrule/local_config.py to
# override the defaults above without changing versioned config.
try:
    from .local_config import *  # type: ignore  # noqa: F401,F403
except ImportError:
    # No local overrides present; proceed with defaults.
    pass
