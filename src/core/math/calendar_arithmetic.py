"""
Calendar Arithmetic — ISO-недели, границы месяцев, алгоритм Doomsday

Модуль содержит чистые функции календарной арифметики над civil-датами
(без времени суток и часового пояса):
- Номер недели по формуле "add 10, divide by 7"
- Первый/последний день предыдущего месяца (две независимые деривации)
- Алгоритм Doomsday: день недели "судного дня" года
- Вспомогательные подсчёты: дни и рабочие дни между датами, неделя даты,
  следующий/предыдущий день недели, UTC-время из миллисекунд

Все функции, принимающие дату, принимают также datetime (время
отбрасывается) и ISO-строку "YYYY-MM-DD". Нераспознанная строка →
InvalidArgument.

ИЗВЕСТНЫЕ УПРОЩЕНИЯ:
1. iso_week_of_year не выполняет коррекцию на границе года: даты начала
   января, относящиеся к последней неделе прошлого ISO-года, дают 0, а даты
   конца декабря, относящиеся к неделе 1 следующего года, могут дать 53.
2. doomsday_weekday возвращает день недели doomsday-дат ГОДА (4/4, 6/6,
   8/8, последний день февраля …), а не день недели самой входной даты.
   Поправка на месяц/день не применяется.

ФОРМУЛЫ:
    week = (day_of_year - iso_weekday + 10) // 7

    anchor = CENTURY_ANCHOR[(year mod 400) // 100]
    yy = year mod 100
    a = yy // 12,  b = yy mod 12,  c = b // 4
    doomsday = ((a + b + c) mod 7 + anchor) mod 7
"""

import calendar
import logging
import re
from datetime import date, datetime, timedelta, timezone
from typing import Tuple, Union

from src.core.constants import (
    CENTURY_ANCHOR_ORDINALS,
    CENTURY_YEARS,
    DAYS_PER_WEEK,
    DOOMSDAY_DOZEN,
    DOOMSDAY_LEAP_SPAN,
    GREGORIAN_CYCLE_YEARS,
    ISO_WEEK_OFFSET,
    MONTHS_PER_YEAR,
    UTC_MS_EPOCH_YEAR,
)
from src.core.domain.weekday import Weekday
from src.core.errors import InvalidArgument

logger = logging.getLogger(__name__)

DateLike = Union[date, datetime, str]

# Рабочих дней в полной неделе
_WORKDAYS_PER_WEEK = 5

# Единственная принимаемая строковая форма даты; fromisoformat на 3.11+
# понимает и другие (20210104, 2021W011)
_ISO_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


# =============================================================================
# НОРМАЛИЗАЦИЯ ВХОДА
# =============================================================================


def coerce_date(value: DateLike, name: str = "date") -> date:
    """
    Приведение входа к datetime.date.

    Args:
        value: date, datetime (время отбрасывается) или ISO-строка "YYYY-MM-DD"
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        Civil-дата без времени

    Raises:
        InvalidArgument: Строка не распознана или тип не поддерживается

    Examples:
        >>> coerce_date("2021-01-04")
        datetime.date(2021, 1, 4)
        >>> coerce_date(datetime(2021, 1, 4, 23, 59))
        datetime.date(2021, 1, 4)
    """
    # datetime — подкласс date, проверяем первым
    if isinstance(value, datetime):
        return value.date()

    if isinstance(value, date):
        return value

    if isinstance(value, str):
        text = value.strip()
        if not _ISO_DATE_PATTERN.fullmatch(text):
            logger.debug("Date string rejected", extra={"operation": "coerce_date", "raw_value": value})
            raise InvalidArgument(name, value, "expected ISO date 'YYYY-MM-DD'")
        try:
            return date.fromisoformat(text)
        except ValueError as exc:
            logger.debug("Date string rejected", extra={"operation": "coerce_date", "raw_value": value})
            raise InvalidArgument(name, value, "expected ISO date 'YYYY-MM-DD'") from exc

    raise InvalidArgument(name, value, f"unsupported type {type(value).__name__}")


def _subtract_one_month(value: date) -> date:
    """
    Сдвиг на один календарный месяц назад.

    День clamp-ится к длине целевого месяца (31 марта → 28/29 февраля).
    """
    if value.month == 1:
        year, month = value.year - 1, MONTHS_PER_YEAR
    else:
        year, month = value.year, value.month - 1

    if year < date.min.year:
        raise InvalidArgument("date", value, "no calendar month before January of year 1")

    day = min(value.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def _shift_days(value: date, days: int) -> date:
    try:
        return value + timedelta(days=days)
    except OverflowError as exc:
        raise InvalidArgument("date", value, f"shift by {days} days leaves the supported range") from exc


# =============================================================================
# ISO-НЕДЕЛЯ
# =============================================================================


def iso_week_of_year(value: DateLike) -> int:
    """
    Номер недели года по формуле (day_of_year - iso_weekday + 10) // 7.

    iso_weekday: Monday=1 … Sunday=7. Оба операнда деления положительны,
    поэтому floor совпадает с усечением к нулю.

    Коррекция на границе ISO-года не выполняется (см. docstring модуля).

    Examples:
        >>> iso_week_of_year(date(2021, 1, 4))  # понедельник
        1
        >>> iso_week_of_year(date(2021, 1, 1))  # пятница, ISO: 2020-W53
        0
    """
    current = coerce_date(value)
    day_of_year = current.timetuple().tm_yday
    weekday_index = Weekday.of(current).iso_index

    return (day_of_year - weekday_index + ISO_WEEK_OFFSET) // DAYS_PER_WEEK


# =============================================================================
# ГРАНИЦЫ МЕСЯЦЕВ
# =============================================================================


def first_day_of_last_month(value: DateLike) -> date:
    """
    Первый день предыдущего месяца: минус (day - 1) дней, затем минус месяц.

    Raises:
        InvalidArgument: Для дат января года 1 (предыдущего месяца нет)
    """
    current = coerce_date(value)
    first_of_month = _shift_days(current, -(current.day - 1))
    return _subtract_one_month(first_of_month)


def first_day_of_month_prev_month(value: DateLike) -> date:
    """
    Первый день предыдущего месяца: date(year, month, 1), затем минус месяц.

    Всегда совпадает с first_day_of_last_month.
    """
    current = coerce_date(value)
    return _subtract_one_month(date(current.year, current.month, 1))


def last_day_of_last_month(value: DateLike) -> date:
    """Последний день предыдущего месяца: минус day дней."""
    current = coerce_date(value)
    return _shift_days(current, -current.day)


# =============================================================================
# DOOMSDAY
# =============================================================================


def century_anchor(year: int) -> Weekday:
    """
    Якорный день столетия внутри 400-летнего григорианского цикла.

    [0, 100) → Tuesday, [100, 200) → Sunday,
    [200, 300) → Friday, [300, 400) → Wednesday  (по year mod 400)
    """
    century_in_cycle = (year % GREGORIAN_CYCLE_YEARS) // CENTURY_YEARS
    return Weekday(CENTURY_ANCHOR_ORDINALS[century_in_cycle])


def doomsday_weekday(value: DateLike) -> Weekday:
    """
    День недели doomsday-дат года входной даты.

    Результат нормализуется по модулю 7, поэтому всегда валидный Weekday.
    Поправка на месяц и день НЕ применяется: для 2021-07-15 возвращается
    SUNDAY (doomsday 2021 года), а не THURSDAY.

    Examples:
        >>> doomsday_weekday(date(2000, 6, 1))
        <Weekday.TUESDAY: 2>
        >>> doomsday_weekday(date(2021, 1, 4))
        <Weekday.SUNDAY: 0>
    """
    current = coerce_date(value)
    anchor = century_anchor(current.year)

    yy = current.year % CENTURY_YEARS
    dozens = yy // DOOMSDAY_DOZEN
    remainder = yy % DOOMSDAY_DOZEN
    leap_years = remainder // DOOMSDAY_LEAP_SPAN

    doomsday_offset = (dozens + remainder + leap_years) % DAYS_PER_WEEK

    return Weekday.from_ordinal(doomsday_offset + int(anchor))


# =============================================================================
# ПОДСЧЁТ ДНЕЙ
# =============================================================================


def days_between(start: DateLike, end: DateLike) -> int:
    """Число дней end - start (со знаком)."""
    return (coerce_date(end, "end") - coerce_date(start, "start")).days


def weekdays_between(start: DateLike, end: DateLike) -> int:
    """
    Число будних дней (Mon-Fri) в полуинтервале [min, max) между датами.

    Порядок аргументов не важен; для равных дат результат 0.
    """
    first = coerce_date(start, "start")
    last = coerce_date(end, "end")
    low, high = min(first, last), max(first, last)

    full_weeks, extra_days = divmod((high - low).days, DAYS_PER_WEEK)

    # Хвост короче недели: дни недели хвоста те же, что у low + i
    tail = sum(
        1 for offset in range(extra_days) if not Weekday.of(low + timedelta(days=offset)).is_weekend
    )

    return full_weeks * _WORKDAYS_PER_WEEK + tail


def is_weekend(value: DateLike) -> bool:
    return Weekday.of(coerce_date(value)).is_weekend


def is_weekday(value: DateLike) -> bool:
    return not is_weekend(value)


# =============================================================================
# НЕДЕЛИ И СОСЕДНИЕ ДНИ
# =============================================================================


def week_of(value: DateLike, first_day: Weekday = Weekday.SUNDAY) -> Tuple[date, ...]:
    """
    Семь дат недели, начиная с first_day.

    Начало недели = date + (first_day - weekday(date)) дней. При first_day
    позже дня даты (в нумерации с воскресенья) неделя начинается после даты.

    Examples:
        >>> week_of(date(2021, 1, 6))[0]  # среда → воскресенье 3 января
        datetime.date(2021, 1, 3)
    """
    current = coerce_date(value)
    start = _shift_days(current, int(first_day) - int(Weekday.of(current)))
    return tuple(_shift_days(start, offset) for offset in range(DAYS_PER_WEEK))


def next_weekday(value: DateLike, weekday: Weekday) -> date:
    """Ближайшая дата строго после value с днём недели weekday."""
    current = coerce_date(value)
    offset = int(weekday) - int(Weekday.of(current))
    if offset <= 0:
        offset += DAYS_PER_WEEK
    return _shift_days(current, offset)


def previous_weekday(value: DateLike, weekday: Weekday) -> date:
    """Ближайшая дата строго до value с днём недели weekday."""
    current = coerce_date(value)
    offset = int(weekday) - int(Weekday.of(current))
    if offset >= 0:
        offset -= DAYS_PER_WEEK
    return _shift_days(current, offset)


# =============================================================================
# UTC
# =============================================================================


def utc_datetime_from_ms(milliseconds: int) -> datetime:
    """
    UTC datetime из миллисекунд от 0001-01-01T00:00:00Z.

    Raises:
        InvalidArgument: Не целое число или результат вне [0001, 9999] годов
    """
    if isinstance(milliseconds, bool) or not isinstance(milliseconds, int):
        raise InvalidArgument("milliseconds", milliseconds, "must be an integer")

    epoch = datetime(UTC_MS_EPOCH_YEAR, 1, 1, tzinfo=timezone.utc)
    try:
        return epoch + timedelta(milliseconds=milliseconds)
    except OverflowError as exc:
        raise InvalidArgument("milliseconds", milliseconds, "outside the representable date range") from exc
