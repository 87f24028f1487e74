"""Human-readable date strings used in every public response."""

from datetime import date

_DAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def to_date_string(value: date) -> str:
    """Format ``value`` as ``"Www Mmm dd yyyy"``, e.g. ``"Tue Jul 04 2023"``.

    Names are fixed English abbreviations so the output does not depend
    on the process locale.
    """
    return f"{_DAYS[value.weekday()]} {_MONTHS[value.month - 1]} {value.day:02d} {value.year:04d}"
