import math
from datetime import datetime

import pytest

from kidsmath.calculator import (
    MAX_HISTORY,
    PI,
    Calculator,
    CartItem,
    Mode,
    Operation,
    apply_discount,
    apply_tax,
    calculate_box_volume,
    calculate_circle_area,
    calculate_percentage,
    calculate_rectangle_area,
    main,
    safe_add,
    safe_divide,
    safe_factorial,
    safe_multiply,
    safe_power,
    safe_sqrt,
    safe_subtract,
)

FIXED = datetime(2024, 1, 2, 3, 4, 5)


def _calc(timer=lambda: 0.0):
    return Calculator(sleep=lambda _s: None, now=lambda: FIXED, timer=timer)


@pytest.mark.parametrize("a,b", [(25.5, 14.3), (100.0, 37.5), (-3.0, 7.25)])
def test_add_subtract_round_trip(a, b):
    assert safe_subtract(safe_add(a, b), b) == pytest.approx(a)


@pytest.mark.parametrize("a,b", [(144.0, 12.0), (12.0, 8.0), (-9.0, 4.0)])
def test_multiply_divide_round_trip(a, b):
    assert safe_divide(safe_multiply(a, b), b) == pytest.approx(a)


def test_divide_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        safe_divide(1.0, 0.0)


def test_power_of_zero_to_negative_raises():
    with pytest.raises(ValueError):
        safe_power(0.0, -1.0)


def test_power_matches_repeated_multiplication():
    assert safe_power(2.0, 8.0) == safe_multiply(safe_power(2.0, 4.0), safe_power(2.0, 4.0))


def test_sqrt_squares_back():
    assert safe_sqrt(64.0) ** 2 == pytest.approx(64.0)


def test_sqrt_negative_raises():
    with pytest.raises(ValueError):
        safe_sqrt(-1.0)


@pytest.mark.parametrize("n", range(0, 21))
def test_factorial_matches_math(n):
    assert safe_factorial(n) == float(math.factorial(n))


def test_factorial_above_limit_is_infinite():
    assert safe_factorial(21) == math.inf


def test_factorial_negative_raises():
    with pytest.raises(ValueError):
        safe_factorial(-1)


def test_circle_area_scales_with_square_of_radius():
    assert calculate_circle_area(1.0) == PI
    assert calculate_circle_area(2.0) == pytest.approx(4 * calculate_circle_area(1.0))


def test_circle_negative_radius_raises():
    with pytest.raises(ValueError):
        calculate_circle_area(-0.5)


def test_box_volume_is_base_times_height():
    assert calculate_box_volume(20.0, 15.0, 10.0) == calculate_rectangle_area(20.0, 15.0) * 10.0


@pytest.mark.parametrize("dims", [(-1.0, 2.0), (2.0, -1.0)])
def test_rectangle_negative_raises(dims):
    with pytest.raises(ValueError):
        calculate_rectangle_area(*dims)


def test_box_negative_raises():
    with pytest.raises(ValueError):
        calculate_box_volume(1.0, 1.0, -1.0)


@pytest.mark.parametrize("percent", [-5.0, 150.0])
def test_discount_out_of_range_keeps_price(percent):
    assert apply_discount(200.0, percent) == 200.0


def test_discount_edges():
    assert apply_discount(200.0, 0.0) == 200.0
    assert apply_discount(200.0, 100.0) == 0.0


def test_discount_removes_percentage():
    assert apply_discount(200.0, 15.0) == 200.0 - calculate_percentage(200.0, 15.0)


def test_tax_adds_percentage():
    assert apply_tax(171.0, 7.0) - 171.0 == pytest.approx(calculate_percentage(171.0, 7.0))


def test_negative_tax_is_ignored():
    assert apply_tax(50.0, -1.0) == 50.0


def test_perform_saves_history_entry():
    calc = _calc()
    result = calc.perform(Operation.ADD, 1.0, 2.0)
    entry = calc.history[-1]
    assert result == safe_add(1.0, 2.0)
    assert entry.id == 1
    assert entry.operation is Operation.ADD
    assert entry.timestamp == "2024-01-02 03:04:05"
    assert entry.description == "1.00 + 2.00 = 3.00"
    assert calc.total_calculations == 1


def test_perform_error_propagates_and_keeps_time():
    ticks = iter([0.0, 0.002])
    calc = _calc(timer=lambda: next(ticks))
    with pytest.raises(ZeroDivisionError):
        calc.perform(Operation.DIVIDE, 12.0, 0.0)
    assert len(calc.history) == 0
    assert calc.total_calculations == 0
    assert calc.total_computation_time == pytest.approx(2.0)


def test_perform_infinite_result_is_not_saved():
    calc = _calc()
    assert calc.perform(Operation.FACTORIAL, 25.0, 0.0) == math.inf
    assert calc.total_calculations == 0


def test_perform_unknown_operation_raises():
    with pytest.raises(ValueError):
        _calc().perform(99, 1.0, 2.0)


def test_history_keeps_latest_entries():
    calc = _calc()
    for i in range(MAX_HISTORY + 5):
        calc.save_to_history(Operation.ADD, i, 0.0, i, f"entry {i}")
    assert len(calc.history) == MAX_HISTORY
    assert calc.history[0].id == 6
    assert calc.history[-1].id == MAX_HISTORY + 5
    assert calc.total_calculations == MAX_HISTORY + 5


def test_history_description_is_truncated():
    calc = _calc()
    entry = calc.save_to_history(Operation.ADD, 0.0, 0.0, 0.0, "x" * 150)
    assert entry.description == "x" * 99


def test_shop_mode_totals_are_consistent():
    calc = _calc()
    final = calc.shop_mode()
    assert calc.shop_total == sum(item.total for item in calc.cart)
    assert final == pytest.approx(apply_tax(apply_discount(calc.shop_total, 10.0), 7.0))
    last = calc.history[-1]
    assert last.description == "การขายหน้าร้าน"
    assert last.result == pytest.approx(apply_discount(calc.shop_total, 10.0))


def test_cart_item_total():
    item = CartItem(1, "น้ำดื่ม", 15.0, 2)
    assert item.total == item.price * item.quantity


def test_history_mode_empty_and_latest_five():
    calc = _calc()
    assert calc.history_mode() == []
    calc.basic_mode()
    latest = calc.history_mode()
    assert [e.id for e in latest] == [3, 4, 5, 6, 7]


def test_simulate_navigation_counts_every_calculation():
    calc = _calc()
    calc.simulate_menu_navigation()
    assert calc.total_calculations == 11
    assert calc.current_mode is Mode.MAIN_MENU
    assert calc.history[-1].description == "การขายหน้าร้าน"


def test_main_menu_logs_statistics(caplog):
    calc = _calc()
    with caplog.at_level("INFO", logger="kidsmath.calculator"):
        calc.show_main_menu()
    assert "📊 สถิติ: 0 การคำนวณ | 0.00 มิลลิวินาที รวม" in caplog.messages


def test_main_runs_without_delay():
    assert main(["--no-delay"]) == 0