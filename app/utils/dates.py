# app/utils/dates.py
from datetime import datetime, timezone


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Наивные даты считаем UTC (так их возвращает SQLite и шлют часть клиентов)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def month_start(value: datetime) -> datetime:
    """Полночь первого числа месяца."""
    return value.replace(day=1, hour=0, minute=0, second=0, microsecond=0)


def shift_months(value: datetime, months: int) -> datetime:
    """Сдвигает дату на целое число месяцев. Ожидает дату первого числа (см. month_start)."""
    month_index = value.year * 12 + (value.month - 1) + months
    return value.replace(year=month_index // 12, month=month_index % 12 + 1)
