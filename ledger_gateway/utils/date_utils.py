"""Date manipulation utilities"""

from datetime import date, datetime, time
from typing import Union

DateLike = Union[date, datetime]


def as_datetime(value: DateLike) -> datetime:
    """Promote a plain date to midnight of that day; datetimes pass through"""
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


def _align(left: DateLike, right: DateLike) -> tuple[datetime, datetime]:
    """Bring two date-likes to comparable datetimes (naive side borrows the other's tz)"""
    left_dt, right_dt = as_datetime(left), as_datetime(right)
    if left_dt.tzinfo is None and right_dt.tzinfo is not None:
        left_dt = left_dt.replace(tzinfo=right_dt.tzinfo)
    elif right_dt.tzinfo is None and left_dt.tzinfo is not None:
        right_dt = right_dt.replace(tzinfo=left_dt.tzinfo)
    return left_dt, right_dt


def days_past(due: DateLike, now: DateLike) -> int:
    """Whole days elapsed from due to now, floored (negative when due is in the future)"""
    if not isinstance(due, datetime) and not isinstance(now, datetime):
        return (now - due).days
    due_dt, now_dt = _align(due, now)
    # timedelta.days floors toward negative infinity
    return (now_dt - due_dt).days


def is_after(now: DateLike, due: DateLike) -> bool:
    """True when now is strictly later than due"""
    now_dt, due_dt = _align(now, due)
    return now_dt > due_dt
