WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

_LONG_NAMES = {
    "monday": "Mon",
    "tuesday": "Tue",
    "wednesday": "Wed",
    "thursday": "Thu",
    "friday": "Fri",
    "saturday": "Sat",
    "sunday": "Sun",
}


def normalize_day(value: str | None) -> str | None:
    """Map "mon", "Monday", " MON " etc. to the stored short form, None if not a weekday."""
    v = (value or "").strip().lower()
    if not v:
        return None
    if v in _LONG_NAMES:
        return _LONG_NAMES[v]
    short = v[:1].upper() + v[1:3]
    if len(v) == 3 and short in WEEKDAYS:
        return short
    return None


def day_order(day: str) -> int:
    try:
        return WEEKDAYS.index(day)
    except ValueError:
        return len(WEEKDAYS)
