"""Registered pattern handlers, one per recurrence category."""
from .day_of_month import day_of_month_handler
from .day_of_week import day_of_week_handler
from .frequency import frequency_handler
from .interval import interval_handler
from .until_date import until_date_handler

# execution order: lower priority first
HANDLERS = tuple(sorted(
    (frequency_handler, interval_handler, day_of_week_handler, day_of_month_handler, until_date_handler),
    key=lambda h: h.priority,
))

HANDLERS_BY_NAME = {h.name: h for h in HANDLERS}


def get_handler(name: str):
    return HANDLERS_BY_NAME.get(name)
