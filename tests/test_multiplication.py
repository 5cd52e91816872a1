import logging

import pytest

from kidsmath.multiplication import (
    main,
    repeated_addition,
    run,
    share_candies,
    times_table,
)


@pytest.mark.parametrize("count,value", [(7, 8), (3, 8), (7, 4), (1, 5), (10, 0)])
def test_repeated_addition_matches_product(count, value):
    sums = repeated_addition(count, value)
    assert len(sums) == count
    assert sums[-1] == count * value


def test_repeated_addition_steps_are_equal():
    sums = repeated_addition(7, 8)
    steps = [b - a for a, b in zip([0] + sums, sums)]
    assert steps == [8] * 7


def test_repeated_addition_empty():
    assert repeated_addition(0, 8) == []


def test_times_table_default_length():
    table = times_table(8)
    assert len(table) == 10
    assert table[0] == (1, 8, 8)
    assert all(product == i * value for i, value, product in table)


def test_times_table_custom_upto():
    assert [i for i, _, _ in times_table(3, upto=4)] == [1, 2, 3, 4]


@pytest.mark.parametrize("total,friends", [(72, 12), (56, 12), (13, 4), (0, 3)])
def test_share_candies_invariant(total, friends):
    per_friend, left = share_candies(total, friends)
    assert per_friend * friends + left == total
    assert 0 <= left < friends


@pytest.mark.parametrize("friends", [0, -1])
def test_share_candies_rejects_no_friends(friends):
    with pytest.raises(ValueError):
        share_candies(10, friends)


def test_run_pauses_in_order():
    delays = []
    run(delays.append)
    assert delays == [3.0] + [0.3] * 10 + [2.0]


def test_run_logs_repeated_addition(caplog):
    caplog.set_level(logging.INFO)
    run(lambda _s: None)
    last = repeated_addition(7, 8)[-1]
    assert f"                + 8 = {last}" in caplog.messages
    assert caplog.messages.count("                + 8") == 5


def test_run_logs_both_tables(caplog):
    caplog.set_level(logging.INFO)
    run(lambda _s: None)
    for i, value, product in times_table(8):
        assert f"   {i} × {value} = {product}" in caplog.messages
        assert f"   {i} x {value} = {product}" in caplog.messages


def test_main_no_delay(caplog):
    caplog.set_level(logging.INFO)
    assert main(["--no-delay"]) == 0
    assert caplog.messages[-1] == "📖 อ่านต่อในโปรเจคถัดไป: 04_division_cookies"