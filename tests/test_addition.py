import logging

import pytest

from kidsmath.addition import add, main, run


@pytest.mark.parametrize("a,b", [(8, 3), (7, 3), (10, 5), (0, 0), (-4, 9)])
def test_add_is_commutative(a, b):
    assert add(a, b) == add(b, a)


@pytest.mark.parametrize("value", [0, 1, 8, 100, -3])
def test_add_zero_is_identity(value):
    assert add(value, 0) == value


def test_add_pinned_example():
    assert add(8, 3) == 11


def test_add_associative():
    assert add(add(8, 3), 3) == add(8, add(3, 3))


def test_run_pauses_in_order():
    delays = []
    run(delays.append)
    assert delays == [3.0, 2.0]


def test_run_logs_answer(caplog):
    caplog.set_level(logging.INFO)
    run(lambda _s: None)
    total = add(8, 3)
    assert f"   รวมมีสตรอว์เบอร์รี่ทั้งหมด {total} ลูก" in caplog.messages
    assert "   = 8 + 3" in caplog.messages


def test_run_logs_grand_total(caplog):
    caplog.set_level(logging.INFO)
    run(lambda _s: None)
    grand = add(add(8, 3), 3)
    assert f"🍓 สตรอว์เบอร์รี่ทั้งหมด (สตรอว์เบอร์รี่+กล้วย): {grand} ลูก" in caplog.messages


def test_run_logs_examples(caplog):
    caplog.set_level(logging.INFO)
    run(lambda _s: None)
    for old, new in ((7, 3), (10, 5)):
        line = f"   จะได้กล้วยกับสตรอว์เบอร์รี่ทั้งหมด {old} + {new} = {add(old, new)} ลูก"
        assert line in caplog.messages


def test_main_no_delay(caplog):
    caplog.set_level(logging.INFO)
    assert main(["--no-delay"]) == 0
    assert caplog.messages[-1] == "📖 อ่านต่อในโปรเจคถัดไป: 02_subtraction_toys"