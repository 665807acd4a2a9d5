"""Lexical dictionaries and fixed tables shared by the normalizer, the
tagged document and the pattern handlers.

Pure data: nothing in here has behavior.
"""

# RRULE weekday codes in week order; canonical ordering for by_weekday.
WEEKDAY_CODES = ('MO', 'TU', 'WE', 'TH', 'FR', 'SA', 'SU')

DAY_NAMES = {
    'monday': 'MO',
    'tuesday': 'TU',
    'wednesday': 'WE',
    'thursday': 'TH',
    'friday': 'FR',
    'saturday': 'SA',
    'sunday': 'SU',
}

DAY_ABBREVIATIONS = {
    'mon': 'MO',
    'tue': 'TU',
    'tues': 'TU',
    'wed': 'WE',
    'weds': 'WE',
    'thu': 'TH',
    'thur': 'TH',
    'thurs': 'TH',
    'fri': 'FR',
    'sat': 'SA',
    'sun': 'SU',
}

# every spelling of a weekday the matchers accept, mapped to its code
WEEKDAY_LOOKUP = {**DAY_NAMES, **DAY_ABBREVIATIONS}

PLURAL_DAY_NAMES = {name + 's': name for name in DAY_NAMES}

WEEKDAY_GROUP = ['MO', 'TU', 'WE', 'TH', 'FR']
WEEKEND_GROUP = ['SA', 'SU']

DAY_GROUPS = {
    'weekday': WEEKDAY_GROUP,
    'weekdays': WEEKDAY_GROUP,
    'weekend': WEEKEND_GROUP,
    'weekends': WEEKEND_GROUP,
}

MONTH_NAMES = {
    'january': 1, 'february': 2, 'march': 3, 'april': 4,
    'may': 5, 'june': 6, 'july': 7, 'august': 8,
    'september': 9, 'october': 10, 'november': 11, 'december': 12,
}

MONTH_ABBREVIATIONS = {
    'jan': 1, 'feb': 2, 'mar': 3, 'apr': 4, 'jun': 6, 'jul': 7,
    'aug': 8, 'sep': 9, 'sept': 9, 'oct': 10, 'nov': 11, 'dec': 12,
}

MONTH_LOOKUP = {**MONTH_NAMES, **MONTH_ABBREVIATIONS}

# time unit (singular or plural) -> RRULE frequency
UNIT_FREQUENCIES = {
    'day': 'DAILY', 'days': 'DAILY',
    'week': 'WEEKLY', 'weeks': 'WEEKLY',
    'month': 'MONTHLY', 'months': 'MONTHLY',
    'year': 'YEARLY', 'years': 'YEARLY',
}

FREQUENCY_TERMS = {
    'daily': 'DAILY',
    'weekly': 'WEEKLY',
    'monthly': 'MONTHLY',
    'yearly': 'YEARLY',
    'annually': 'YEARLY',
}

# named intervals -> (frequency, interval)
NAMED_INTERVALS = {
    'biweekly': ('WEEKLY', 2),
    'fortnightly': ('WEEKLY', 2),
    'bimonthly': ('MONTHLY', 2),
    'quarterly': ('MONTHLY', 3),
}

# Common English number-words accepted in 'every two weeks' style intervals.
NUMBER_WORDS = {
    'one': 1, 'two': 2, 'three': 3, 'four': 4, 'five': 5, 'six': 6,
    'seven': 7, 'eight': 8, 'nine': 9, 'ten': 10, 'eleven': 11, 'twelve': 12,
}

ORDINAL_WORDS = {
    'first': 1, 'second': 2, 'third': 3, 'fourth': 4, 'fifth': 5,
    'sixth': 6, 'seventh': 7, 'eighth': 8, 'ninth': 9, 'tenth': 10,
    'eleventh': 11, 'twelfth': 12, 'thirteenth': 13, 'fourteenth': 14,
    'fifteenth': 15, 'sixteenth': 16, 'seventeenth': 17, 'eighteenth': 18,
    'nineteenth': 19, 'twentieth': 20, 'twenty-first': 21,
    'twenty-second': 22, 'twenty-third': 23, 'twenty-fourth': 24,
    'twenty-fifth': 25, 'twenty-sixth': 26, 'twenty-seventh': 27,
    'twenty-eighth': 28, 'twenty-ninth': 29, 'thirtieth': 30,
    'thirty-first': 31,
}

# ordinal positions usable in 'first monday of the month' (-1 == last)
ORDINAL_POSITIONS = {
    'first': 1, 'second': 2, 'third': 3, 'fourth': 4, 'fifth': 5, 'last': -1,
    '1': 1, '2': 2, '3': 3, '4': 4, '5': 5,
}

RECURRING_QUANTIFIERS = ('every', 'each', 'all', 'any')

UNTIL_TERMS = ('until', 'till', 'through', 'thru', 'ending', 'ends')

# Known misspellings and short forms of dictionary words. Plural day names
# are deliberately absent: plurals carry the recurrence signal handled by
# the day-name expansion step.
DAY_NAME_VARIANTS = {
    'mondey': 'monday',
    'mondy': 'monday',
    'tusday': 'tuesday',
    'tuseday': 'tuesday',
    'wednes': 'wednesday',
    'wedness': 'wednesday',
    'wendsday': 'wednesday',
    'wensday': 'wednesday',
    'thrusday': 'thursday',
    'thurday': 'thursday',
    'friady': 'friday',
    'fridy': 'friday',
    'satur': 'saturday',
    'saterday': 'saturday',
    'suday': 'sunday',
    'sundy': 'sunday',
}

MONTH_NAME_VARIANTS = {
    'janurary': 'january',
    'janaury': 'january',
    'feburary': 'february',
    'febuary': 'february',
    'septem': 'september',
    'octo': 'october',
    'novem': 'november',
    'decem': 'december',
}

# Canonical vocabulary used as correction targets. Each word maps to itself
# so an exact hit is a no-op.
CORRECTION_VOCABULARY = sorted(
    set(DAY_NAMES)
    | set(PLURAL_DAY_NAMES)
    | set(DAY_GROUPS)
    | set(MONTH_NAMES)
    | set(UNIT_FREQUENCIES)
    | set(FREQUENCY_TERMS)
    | set(NAMED_INTERVALS)
    | {'every', 'other', 'until', 'first', 'second', 'third', 'fourth', 'fifth', 'last'}
)

# Words that are already correct even though they are not correction targets.
# Keeps short abbreviations ('sat', 'dec') from being fuzzily rewritten.
PASSTHROUGH_WORDS = set(DAY_ABBREVIATIONS) | set(MONTH_ABBREVIATIONS) | {'fortnight'}

# Phrase-level synonyms; applied longest key first.
TERM_SYNONYMS = {
    # frequency
    'everyday': 'daily',
    'once a day': 'daily',
    'once daily': 'daily',
    'once a week': 'weekly',
    'once weekly': 'weekly',
    'once a month': 'monthly',
    'once monthly': 'monthly',
    'once a year': 'yearly',
    'once yearly': 'yearly',
    'annual': 'yearly',
    'annually': 'yearly',
    # quantifiers
    'each': 'every',
    'all': 'every',
    # day groups
    'work day': 'weekday',
    'work days': 'weekday',
    'workday': 'weekday',
    'workdays': 'weekday',
    'business day': 'weekday',
    'business days': 'weekday',
    'week day': 'weekday',
    'week days': 'weekday',
    'week end': 'weekend',
    'week ends': 'weekend',
    # intervals
    'alternate': 'other',
    'alternating': 'other',
    'bi-weekly': 'every 2 weeks',
    'biweekly': 'every 2 weeks',
    'fortnightly': 'every 2 weeks',
    'every fortnight': 'every 2 weeks',
    'bi-monthly': 'every 2 months',
    'bimonthly': 'every 2 months',
    'quarterly': 'every 3 months',
    'bi-annual': 'every 6 months',
    'biannual': 'every 6 months',
    'semi-annual': 'every 6 months',
    'semiannual': 'every 6 months',
    'semi-annually': 'every 6 months',
}

# pattern categories, doubling as handler names
FREQUENCY = 'frequency'
INTERVAL = 'interval'
DAY_OF_WEEK = 'day_of_week'
DAY_OF_MONTH = 'day_of_month'
UNTIL_DATE = 'until_date'

# lower runs earlier
PATTERN_PRIORITY = {
    FREQUENCY: 10,
    INTERVAL: 20,
    DAY_OF_WEEK: 30,
    DAY_OF_MONTH: 40,
    UNTIL_DATE: 50,
}

# exact single-word inputs answered without normalization or tagging
FAST_PATH_FREQUENCIES = {
    'daily': 'DAILY',
    'weekly': 'WEEKLY',
    'monthly': 'MONTHLY',
    'yearly': 'YEARLY',
    'annually': 'YEARLY',
}
