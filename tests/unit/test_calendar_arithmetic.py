"""
Тесты для Calendar Arithmetic — ISO-недели, границы месяцев, Doomsday

Проверяемые инварианты:
1. Две деривации первого дня прошлого месяца всегда совпадают
2. Последний день прошлого месяца = первый день текущего минус один день
3. Doomsday всегда нормализован в [0, 6] и равен дню недели 4 апреля года
4. Формула недели совпадает с ISO-8601 вне граничных недель (0 и 53)
5. Нераспознанная строка даты → InvalidArgument
"""

from datetime import date, datetime, timedelta, timezone

import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from src.core.domain.weekday import Weekday
from src.core.errors import InvalidArgument
from src.core.math.calendar_arithmetic import (
    century_anchor,
    coerce_date,
    days_between,
    doomsday_weekday,
    first_day_of_last_month,
    first_day_of_month_prev_month,
    is_weekday,
    is_weekend,
    iso_week_of_year,
    last_day_of_last_month,
    next_weekday,
    previous_weekday,
    utc_datetime_from_ms,
    week_of,
    weekdays_between,
)

# Для дат до 0001-02-01 предыдущего месяца не существует
month_arithmetic_dates = st.dates(min_value=date(1, 2, 1))


# =============================================================================
# ТЕСТЫ: Нормализация входа
# =============================================================================


class TestCoerceDate:
    """Тесты coerce_date: date / datetime / ISO-строка."""

    def test_date_unchanged(self):
        assert coerce_date(date(2021, 1, 4)) == date(2021, 1, 4)

    def test_datetime_drops_time(self):
        result = coerce_date(datetime(2021, 1, 4, 23, 59, 59))
        assert result == date(2021, 1, 4)
        assert type(result) is date

    def test_iso_string_parsed(self):
        assert coerce_date("2021-01-04") == date(2021, 1, 4)
        assert coerce_date("  2021-01-04 ") == date(2021, 1, 4)

    def test_malformed_string_rejected(self):
        with pytest.raises(InvalidArgument, match="ISO date"):
            coerce_date("2021-13-01")

        with pytest.raises(InvalidArgument):
            coerce_date("not a date")

    @pytest.mark.parametrize(
        "text",
        ["2021W011", "2021-W01-1", "20210104", "2021-1-4", "2021-01-04T00:00", "2021-01-04Z"],
    )
    def test_other_iso_forms_rejected(self, text):
        """Принимается только YYYY-MM-DD, независимо от версии интерпретатора."""
        with pytest.raises(InvalidArgument, match="ISO date"):
            coerce_date(text)

    def test_invalid_argument_is_value_error(self):
        """InvalidArgument ловится как ValueError."""
        with pytest.raises(ValueError):
            coerce_date("2021-02-30")

    def test_unsupported_type_rejected(self):
        with pytest.raises(InvalidArgument, match="unsupported type int"):
            coerce_date(20210104)

    def test_error_carries_argument(self):
        with pytest.raises(InvalidArgument) as exc_info:
            coerce_date("bad", name="start")

        assert exc_info.value.argument == "start"
        assert exc_info.value.value == "bad"


# =============================================================================
# ТЕСТЫ: ISO-неделя
# =============================================================================


class TestIsoWeekOfYear:
    """Тесты iso_week_of_year."""

    def test_first_monday_of_2021_is_week_one(self):
        """2021-01-04 (понедельник) → неделя 1."""
        assert iso_week_of_year(date(2021, 1, 4)) == 1

    def test_string_input(self):
        assert iso_week_of_year("2021-01-04") == 1

    def test_sunday_counts_as_last_day_of_week(self):
        """Воскресенье = 7, поэтому 2021-01-10 ещё неделя 1, а 2021-01-11 уже 2."""
        assert iso_week_of_year(date(2021, 1, 10)) == 1
        assert iso_week_of_year(date(2021, 1, 11)) == 2

    def test_early_january_of_previous_iso_year_yields_zero(self):
        """Без коррекции границы года: 2021-01-01 (ISO 2020-W53) → 0."""
        assert date(2021, 1, 1).isocalendar()[1] == 53
        assert iso_week_of_year(date(2021, 1, 1)) == 0
        assert iso_week_of_year(date(2021, 1, 3)) == 0

    def test_week_53_reproduced(self):
        """2020-12-31 (четверг) → 53, совпадает с ISO."""
        assert iso_week_of_year(date(2020, 12, 31)) == 53

    def test_late_december_of_next_iso_year_yields_53(self):
        """2019-12-30 по ISO — 2020-W01, формула даёт 53."""
        assert date(2019, 12, 30).isocalendar()[1] == 1
        assert iso_week_of_year(date(2019, 12, 30)) == 53

    def test_mid_year(self):
        assert iso_week_of_year(date(2024, 6, 15)) == date(2024, 6, 15).isocalendar()[1]

    @given(st.dates())
    def test_result_bounds(self, value):
        assert 0 <= iso_week_of_year(value) <= 53

    @given(st.dates())
    def test_matches_iso_outside_boundary_weeks(self, value):
        week = iso_week_of_year(value)
        assume(1 <= week <= 52)
        assert week == value.isocalendar()[1]


# =============================================================================
# ТЕСТЫ: Границы месяцев
# =============================================================================


class TestFirstDayOfLastMonth:
    """Тесты first_day_of_last_month / first_day_of_month_prev_month."""

    def test_mid_month(self):
        assert first_day_of_last_month(date(2021, 3, 15)) == date(2021, 2, 1)
        assert first_day_of_month_prev_month(date(2021, 3, 15)) == date(2021, 2, 1)

    def test_first_of_month(self):
        assert first_day_of_last_month(date(2021, 3, 1)) == date(2021, 2, 1)

    def test_end_of_month(self):
        assert first_day_of_last_month(date(2021, 3, 31)) == date(2021, 2, 1)
        assert first_day_of_month_prev_month(date(2021, 3, 31)) == date(2021, 2, 1)

    def test_january_rolls_back_to_december(self):
        assert first_day_of_last_month(date(2021, 1, 20)) == date(2020, 12, 1)
        assert first_day_of_month_prev_month(date(2021, 1, 20)) == date(2020, 12, 1)

    def test_datetime_and_string_input(self):
        assert first_day_of_last_month(datetime(2021, 3, 15, 12, 0)) == date(2021, 2, 1)
        assert first_day_of_month_prev_month("2021-03-15") == date(2021, 2, 1)

    def test_january_of_year_one_rejected(self):
        with pytest.raises(InvalidArgument):
            first_day_of_last_month(date(1, 1, 15))

        with pytest.raises(InvalidArgument):
            first_day_of_month_prev_month(date(1, 1, 15))

    @given(month_arithmetic_dates)
    def test_both_derivations_agree(self, value):
        """Инвариант: обе деривации дают одну и ту же дату."""
        assert first_day_of_last_month(value) == first_day_of_month_prev_month(value)

    @given(month_arithmetic_dates)
    def test_result_is_first_of_previous_month(self, value):
        result = first_day_of_last_month(value)
        assert result.day == 1
        assert result < date(value.year, value.month, 1)
        assert (result + timedelta(days=31)).replace(day=1) <= date(value.year, value.month, 1)


class TestLastDayOfLastMonth:
    """Тесты last_day_of_last_month."""

    def test_leap_february(self):
        assert last_day_of_last_month(date(2024, 3, 10)) == date(2024, 2, 29)

    def test_common_february(self):
        assert last_day_of_last_month(date(2023, 3, 31)) == date(2023, 2, 28)

    def test_year_boundary(self):
        assert last_day_of_last_month(date(2021, 1, 1)) == date(2020, 12, 31)

    def test_century_non_leap_year(self):
        """1900 — не високосный (делится на 100, но не на 400)."""
        assert last_day_of_last_month(date(1900, 3, 5)) == date(1900, 2, 28)
        assert last_day_of_last_month(date(2000, 3, 5)) == date(2000, 2, 29)

    def test_before_first_supported_date_rejected(self):
        with pytest.raises(InvalidArgument):
            last_day_of_last_month(date(1, 1, 1))

    @given(month_arithmetic_dates)
    def test_one_day_before_first_of_month(self, value):
        """Инвариант: ровно на один день раньше первого числа месяца."""
        first_of_month = date(value.year, value.month, 1)
        assert last_day_of_last_month(value) == first_of_month - timedelta(days=1)


# =============================================================================
# ТЕСТЫ: Doomsday
# =============================================================================


class TestCenturyAnchor:
    """Тесты century_anchor: 400-летний цикл якорей."""

    @pytest.mark.parametrize(
        "year, expected",
        [
            (1600, Weekday.TUESDAY),
            (1750, Weekday.SUNDAY),
            (1850, Weekday.FRIDAY),
            (1950, Weekday.WEDNESDAY),
            (2000, Weekday.TUESDAY),
            (2099, Weekday.TUESDAY),
            (2100, Weekday.SUNDAY),
            (2200, Weekday.FRIDAY),
            (400, Weekday.TUESDAY),
        ],
    )
    def test_anchor_table(self, year, expected):
        assert century_anchor(year) == expected


class TestDoomsdayWeekday:
    """Тесты doomsday_weekday."""

    @pytest.mark.parametrize(
        "year, expected",
        [
            (1800, Weekday.FRIDAY),
            (1900, Weekday.WEDNESDAY),
            (1999, Weekday.SUNDAY),
            (2000, Weekday.TUESDAY),
            (2021, Weekday.SUNDAY),
            (2024, Weekday.THURSDAY),
            (2100, Weekday.SUNDAY),
        ],
    )
    def test_known_doomsdays(self, year, expected):
        assert doomsday_weekday(date(year, 6, 1)) == expected

    def test_sum_past_saturday_is_normalized(self):
        """2021: offset 5 + якорь Tuesday(2) = 7 → SUNDAY, а не вне диапазона."""
        result = doomsday_weekday(date(2021, 1, 4))
        assert result is Weekday.SUNDAY
        assert int(result) == 0

    def test_returns_year_doomsday_not_date_weekday(self):
        """Поправка на месяц/день не применяется."""
        value = date(2021, 7, 15)
        assert Weekday.of(value) == Weekday.THURSDAY
        assert doomsday_weekday(value) == Weekday.SUNDAY

    def test_string_input(self):
        assert doomsday_weekday("2000-02-29") == Weekday.TUESDAY

    @given(st.dates())
    def test_always_valid_weekday(self, value):
        result = doomsday_weekday(value)
        assert isinstance(result, Weekday)
        assert 0 <= int(result) <= 6

    @given(st.dates())
    def test_matches_weekday_of_april_fourth(self, value):
        """4 апреля — doomsday любого григорианского года."""
        assert doomsday_weekday(value) == Weekday.of(date(value.year, 4, 4))

    @given(st.dates())
    def test_matches_last_day_of_february(self, value):
        assert doomsday_weekday(value) == Weekday.of(last_day_of_last_month(date(value.year, 3, 1)))

    @given(st.dates())
    def test_independent_of_month_and_day(self, value):
        assert doomsday_weekday(value) == doomsday_weekday(date(value.year, 1, 1))


# =============================================================================
# ТЕСТЫ: Подсчёт дней
# =============================================================================


class TestDaysBetween:
    """Тесты days_between."""

    def test_forward(self):
        assert days_between(date(2021, 1, 1), date(2021, 3, 1)) == 59

    def test_backward_is_negative(self):
        assert days_between(date(2021, 3, 1), date(2021, 1, 1)) == -59

    def test_same_day(self):
        assert days_between("2021-01-01", "2021-01-01") == 0

    def test_invalid_end_named(self):
        with pytest.raises(InvalidArgument) as exc_info:
            days_between("2021-01-01", "2021-02-31")
        assert exc_info.value.argument == "end"


class TestWeekdaysBetween:
    """Тесты weekdays_between: будни в полуинтервале [min, max)."""

    def test_full_week(self):
        assert weekdays_between(date(2021, 1, 4), date(2021, 1, 11)) == 5

    def test_monday_to_saturday(self):
        assert weekdays_between(date(2021, 1, 4), date(2021, 1, 9)) == 5

    def test_weekend_only(self):
        assert weekdays_between(date(2021, 1, 9), date(2021, 1, 11)) == 0

    def test_order_insensitive(self):
        assert weekdays_between(date(2021, 1, 11), date(2021, 1, 4)) == 5

    def test_same_day(self):
        assert weekdays_between(date(2021, 1, 4), date(2021, 1, 4)) == 0

    @given(
        st.dates(min_value=date(1900, 1, 1), max_value=date(2100, 12, 31)),
        st.integers(min_value=0, max_value=400),
    )
    def test_matches_day_by_day_count(self, start, span):
        end = start + timedelta(days=span)
        expected = sum(1 for i in range(span) if (start + timedelta(days=i)).weekday() < 5)
        assert weekdays_between(start, end) == expected
        assert weekdays_between(end, start) == expected


class TestWeekendPredicates:
    """Тесты is_weekend / is_weekday."""

    def test_saturday_and_sunday(self):
        assert is_weekend(date(2021, 1, 9))
        assert is_weekend(date(2021, 1, 10))
        assert not is_weekday("2021-01-10")

    def test_monday(self):
        assert is_weekday(date(2021, 1, 4))
        assert not is_weekend(date(2021, 1, 4))


# =============================================================================
# ТЕСТЫ: Недели и соседние дни
# =============================================================================


class TestWeekOf:
    """Тесты week_of."""

    def test_sunday_start_default(self):
        week = week_of(date(2021, 1, 6))
        assert week[0] == date(2021, 1, 3)
        assert week[-1] == date(2021, 1, 9)
        assert len(week) == 7

    def test_monday_start(self):
        week = week_of(date(2021, 1, 6), first_day=Weekday.MONDAY)
        assert week[0] == date(2021, 1, 4)

    def test_start_after_date_when_first_day_later(self):
        """Воскресенье с first_day=MONDAY: неделя начинается на следующий день."""
        week = week_of(date(2021, 1, 3), first_day=Weekday.MONDAY)
        assert week[0] == date(2021, 1, 4)

    @given(st.dates(min_value=date(1, 1, 8), max_value=date(9999, 12, 1)), st.sampled_from(Weekday))
    def test_consecutive_days(self, value, first_day):
        week = week_of(value, first_day)
        assert Weekday.of(week[0]) == first_day
        assert all(b - a == timedelta(days=1) for a, b in zip(week, week[1:]))


class TestNextPreviousWeekday:
    """Тесты next_weekday / previous_weekday."""

    def test_next_same_weekday_is_week_later(self):
        assert next_weekday(date(2021, 1, 4), Weekday.MONDAY) == date(2021, 1, 11)

    def test_next_later_in_week(self):
        assert next_weekday(date(2021, 1, 4), Weekday.FRIDAY) == date(2021, 1, 8)

    def test_next_wraps_to_sunday(self):
        assert next_weekday(date(2021, 1, 8), Weekday.SUNDAY) == date(2021, 1, 10)

    def test_previous_same_weekday_is_week_earlier(self):
        assert previous_weekday(date(2021, 1, 4), Weekday.MONDAY) == date(2020, 12, 28)

    def test_previous_sunday(self):
        assert previous_weekday(date(2021, 1, 4), Weekday.SUNDAY) == date(2021, 1, 3)

    @given(st.dates(min_value=date(1, 1, 8), max_value=date(9999, 12, 1)), st.sampled_from(Weekday))
    def test_strictly_within_one_week(self, value, weekday):
        after = next_weekday(value, weekday)
        before = previous_weekday(value, weekday)
        assert 1 <= (after - value).days <= 7
        assert 1 <= (value - before).days <= 7
        assert Weekday.of(after) == weekday
        assert Weekday.of(before) == weekday


# =============================================================================
# ТЕСТЫ: UTC из миллисекунд
# =============================================================================


class TestUtcDatetimeFromMs:
    """Тесты utc_datetime_from_ms: эпоха 0001-01-01T00:00:00Z."""

    def test_zero_is_epoch(self):
        assert utc_datetime_from_ms(0) == datetime(1, 1, 1, tzinfo=timezone.utc)

    def test_one_day(self):
        assert utc_datetime_from_ms(86_400_000) == datetime(1, 1, 2, tzinfo=timezone.utc)

    def test_unix_epoch(self):
        ms = (date(1970, 1, 1).toordinal() - 1) * 86_400_000
        result = utc_datetime_from_ms(ms)
        assert result == datetime(1970, 1, 1, tzinfo=timezone.utc)
        assert result.tzinfo is timezone.utc

    def test_milliseconds_preserved(self):
        assert utc_datetime_from_ms(1_500).microsecond == 500_000

    def test_negative_rejected(self):
        with pytest.raises(InvalidArgument, match="outside the representable"):
            utc_datetime_from_ms(-1)

    def test_overflow_rejected(self):
        with pytest.raises(InvalidArgument):
            utc_datetime_from_ms(10**20)

    def test_non_integer_rejected(self):
        with pytest.raises(InvalidArgument, match="integer"):
            utc_datetime_from_ms(1.5)

        with pytest.raises(InvalidArgument):
            utc_datetime_from_ms(True)
