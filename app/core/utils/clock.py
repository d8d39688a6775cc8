from datetime import date, datetime, timezone


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes (SQLite drops tzinfo on the way back)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def local_date(value: datetime) -> date:
    """Calendar date of ``value`` in the server's local timezone."""
    return as_utc(value).astimezone().date()


def billing_period(value: datetime) -> str:
    local = as_utc(value).astimezone()
    return f"{local.year:04d}-{local.month:02d}"
