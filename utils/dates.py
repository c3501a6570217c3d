from calendar import monthrange
from datetime import date, datetime


def normalize_date(raw_date) -> date | None:
    """Coerce a ``date``, ``datetime`` or ISO string into a ``date``.

    Anything after the ``YYYY-MM-DD`` prefix (a time component) is ignored.
    Returns ``None`` when the value cannot be parsed.
    """
    if isinstance(raw_date, datetime):
        return raw_date.date()
    if isinstance(raw_date, date):
        return raw_date
    if not raw_date:
        return None
    try:
        return datetime.strptime(str(raw_date).strip()[:10], "%Y-%m-%d").date()
    except ValueError:
        return None


def clamp_day(year: int, month: int, day: int) -> date:
    # clamp to last day of month
    last_day = monthrange(year, month)[1]
    return date(year, month, min(day, last_day))


def add_months(base: date, months: int, day: int | None = None) -> date:
    """Shift ``base`` by a number of months, keeping ``day`` (or base.day).

    Days past the end of the target month are clamped.
    """
    index = base.month - 1 + months
    year = base.year + index // 12
    month = index % 12 + 1
    return clamp_day(year, month, day if day is not None else base.day)


def last_day_of_month(d: date) -> date:
    return clamp_day(d.year, d.month, 31)
