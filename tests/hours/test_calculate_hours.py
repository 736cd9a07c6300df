from datetime import date, time
from decimal import Decimal

import pytest

from shift_timesheet.core.exceptions import DomainError, ValidationError
from shift_timesheet.hours.duration import SHIFT_ORDER_MESSAGE, apply_extraordinary_override, calculate_hours
from shift_timesheet.hours.model import HoursBreakdown


def test_overnight_shift_rolls_clock_out_to_next_day():
    hours = calculate_hours("22:00", "06:00", "2024-01-10")

    assert hours.total_hours == Decimal("8.00")
    assert hours.regular_hours == Decimal("8.00")
    assert hours.overtime_hours == Decimal("0.00")
    assert hours.overtime_with_bonus == Decimal("0.00")
    assert hours.total_final == Decimal("8.00")


def test_overnight_shift_across_month_end():
    hours = calculate_hours("20:00", "08:00", "2024-01-31")

    assert hours.total_hours == Decimal("12.00")


def test_explicit_clock_out_date_is_not_corrected():
    with pytest.raises(ValidationError) as exc:
        calculate_hours("08:00", "06:00", "2024-01-10", "2024-01-10")

    assert str(exc.value) == SHIFT_ORDER_MESSAGE


def test_validation_error_is_a_domain_error():
    with pytest.raises(DomainError):
        calculate_hours("08:00", "06:00", "2024-01-10", "2024-01-09")


def test_zero_length_shift_is_rejected():
    with pytest.raises(ValidationError):
        calculate_hours("08:00", "08:00", "2024-01-10")


def test_full_duty_shift_has_no_overtime():
    hours = calculate_hours("08:00", "08:00", "2024-01-10", "2024-01-11")

    assert hours.total_hours == Decimal("24.00")
    assert hours.overtime_hours == Decimal("0")
    assert hours.total_final == hours.regular_hours == hours.total_hours


def test_hours_beyond_limit_are_paid_with_bonus():
    hours = calculate_hours("08:00", "10:00", "2024-01-10", "2024-01-11")

    assert hours.total_hours == Decimal("26.00")
    assert hours.regular_hours == Decimal("24.00")
    assert hours.overtime_hours == Decimal("2.00")
    assert hours.overtime_with_bonus == Decimal("3.00")
    assert hours.total_final == Decimal("27.00")


def test_bonus_tie_rounds_away_from_zero():
    # 5 minutes of overtime: 0.0833h, with bonus exactly 0.125h
    hours = calculate_hours("08:00", "08:05", "2024-01-10", "2024-01-11")

    assert hours.total_hours == Decimal("24.08")
    assert hours.overtime_hours == Decimal("0.08")
    assert hours.overtime_with_bonus == Decimal("0.13")
    assert hours.total_final == Decimal("24.13")


def test_fractional_hours_rounded_to_two_places():
    hours = calculate_hours("08:00", "08:10", "2024-01-10")

    assert hours.total_hours == Decimal("0.17")
    assert hours.total_hours.as_tuple().exponent == -2


def test_custom_regular_threshold():
    hours = calculate_hours("08:00", "22:00", "2024-01-10", regular_threshold_hours=12)

    assert hours.regular_hours == Decimal("12.00")
    assert hours.overtime_hours == Decimal("2.00")
    assert hours.overtime_with_bonus == Decimal("3.00")
    assert hours.total_final == Decimal("15.00")


def test_threshold_has_no_upper_bound():
    hours = calculate_hours("08:00", "10:00", "2024-01-10", "2024-01-11", regular_threshold_hours=48)

    assert hours.overtime_hours == Decimal("0.00")
    assert hours.regular_hours == Decimal("26.00")


@pytest.mark.parametrize("threshold", [0, -1, "abc"])
def test_non_positive_threshold_is_rejected(threshold):
    with pytest.raises(ValidationError):
        calculate_hours("08:00", "10:00", "2024-01-10", regular_threshold_hours=threshold)


def test_accepts_date_and_time_objects():
    from_strings = calculate_hours("19:00", "07:30", "2024-03-01")
    from_objects = calculate_hours(time(19, 0), time(7, 30), date(2024, 3, 1))

    assert from_objects == from_strings
    assert from_objects.total_hours == Decimal("12.50")


@pytest.mark.parametrize(
    "clock_in, clock_out, clock_in_date",
    [("25:00", "06:00", "2024-01-10"), ("08:00", "6h", "2024-01-10"), ("08:00", "10:00", "2024-13-01")],
)
def test_malformed_input_is_a_validation_error(clock_in, clock_out, clock_in_date):
    with pytest.raises(ValidationError):
        calculate_hours(clock_in, clock_out, clock_in_date)


def test_same_inputs_give_identical_breakdowns():
    first = calculate_hours("07:13", "09:47", "2024-02-28", "2024-02-29", regular_threshold_hours=24)
    second = calculate_hours("07:13", "09:47", "2024-02-28", "2024-02-29", regular_threshold_hours=24)

    assert first == second


@pytest.mark.parametrize(
    "clock_in, clock_out, clock_in_date, clock_out_date",
    [
        ("07:13", "09:47", "2024-02-28", "2024-02-29"),
        ("08:00", "08:05", "2024-01-10", "2024-01-11"),
        ("23:59", "00:01", "2024-12-31", None),
        ("06:17", "18:44", "2024-05-05", "2024-05-06"),
    ],
)
def test_regular_plus_overtime_matches_total(clock_in, clock_out, clock_in_date, clock_out_date):
    hours = calculate_hours(clock_in, clock_out, clock_in_date, clock_out_date)

    assert abs(hours.regular_hours + hours.overtime_hours - hours.total_hours) <= Decimal("0.01")


def test_extraordinary_override_moves_everything_to_overtime():
    raw = HoursBreakdown(
        total_hours=Decimal("10.00"),
        regular_hours=Decimal("10.00"),
        overtime_hours=Decimal("0.00"),
        overtime_with_bonus=Decimal("0.00"),
        total_final=Decimal("10.00"),
    )

    hours = apply_extraordinary_override(raw)

    assert hours.regular_hours == Decimal("0")
    assert hours.overtime_hours == Decimal("10")
    assert hours.overtime_with_bonus == Decimal("15")
    assert hours.total_final == Decimal("15")
    assert raw.regular_hours == Decimal("10.00")


def test_extraordinary_override_rounds_bonus():
    # 8h20min -> 8.33h, 8.33 * 1.5 = 12.495
    raw = calculate_hours("08:00", "16:20", "2024-01-10")

    hours = apply_extraordinary_override(raw)

    assert hours.total_hours == Decimal("8.33")
    assert hours.total_final == Decimal("12.50")
