import logging

import pytest

from kidsmath.shopping import (
    Product,
    apply_percentage_discount,
    apply_vat,
    calculate_total_bill,
    main,
    run,
    split_payment,
)


def test_product_line_total():
    assert Product("ส้ม", 1, 12.0).total == pytest.approx(12.0)


def test_empty_bill_is_zero():
    assert calculate_total_bill([]) == 0.0


def test_bill_is_sum_of_lines():
    a = Product("แอปเปิ้ล", 6, 15.0)
    b = Product("กล้วย", 12, 8.0)
    assert calculate_total_bill([a, b]) == pytest.approx(a.total + b.total)


def test_bill_order_does_not_matter():
    items = [Product("a", 2, 3.5), Product("b", 4, 1.25), Product("c", 1, 9.0)]
    assert calculate_total_bill(items) == pytest.approx(calculate_total_bill(items[::-1]))


def test_zero_discount_keeps_total():
    assert apply_percentage_discount(372.0, 0.0) == pytest.approx(372.0)


def test_full_discount_clears_total():
    assert apply_percentage_discount(372.0, 100.0) == pytest.approx(0.0)


def test_discount_never_raises_price():
    assert apply_percentage_discount(200.0, 10.0) < 200.0


def test_zero_vat_keeps_total():
    assert apply_vat(334.8, 0.0) == pytest.approx(334.8)


def test_vat_raises_price():
    assert apply_vat(100.0, 7.0) > 100.0


def test_split_single_person_pays_all():
    assert split_payment(358.236, 1) == pytest.approx(358.236)


@pytest.mark.parametrize("people", [2, 3, 7])
def test_split_shares_add_up(people):
    assert split_payment(358.236, people) * people == pytest.approx(358.236)


@pytest.mark.parametrize("people", [0, -2])
def test_split_rejects_no_people(people):
    with pytest.raises(ValueError):
        split_payment(100.0, people)


def test_run_logs_bill(caplog):
    pauses = []
    caplog.set_level(logging.INFO, logger="kidsmath.shopping")
    run(pauses.append)
    messages = [record.getMessage() for record in caplog.records]
    assert pauses == [2.0]
    assert "   แอปเปิ้ล: 6 × 15 = 90 บาท" in messages
    assert any(m.startswith("   ส่วนลด 10%:") for m in messages)
    assert messages[-1] == "🎉 จบโปรแกรมซื้อของที่ตลาดเวอร์ชันใหม่!"


def test_main_without_delay():
    assert main(["--no-delay"]) == 0