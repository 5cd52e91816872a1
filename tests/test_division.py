import logging

import pytest

from kidsmath.division import exact_divisors, main, run, share


def test_share_from_lesson_even():
    assert share(24, 6) == (4, 0)


def test_share_from_lesson_uneven():
    assert share(13, 4) == (3, 1)


@pytest.mark.parametrize("total,people", [(24, 6), (15, 3), (13, 4), (30, 7), (0, 5)])
def test_share_reconstructs_total(total, people):
    per_person, remaining = share(total, people)
    assert per_person * people + remaining == total
    assert 0 <= remaining < people


def test_share_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        share(24, 0)


def test_exact_divisors_are_exact():
    result = exact_divisors(30)
    assert result
    for people, per_person in result:
        assert people * per_person == 30
        assert 1 <= people <= 10


def test_exact_divisors_complete():
    assert exact_divisors(30, 10) == [
        (1, 30),
        (2, 15),
        (3, 10),
        (5, 6),
        (6, 5),
        (10, 3),
    ]


def test_exact_divisors_always_includes_one():
    assert exact_divisors(17, 10)[0] == (1, 17)


def test_exact_divisors_respects_limit():
    assert all(people <= 3 for people, _ in exact_divisors(30, 3))


def test_run_logs_and_pauses(caplog):
    pauses = []
    caplog.set_level(logging.INFO, logger="kidsmath.division")
    run(pauses.append)
    messages = [record.getMessage() for record in caplog.records]
    assert pauses == [3.0, 2.0]
    assert "🍪 เริ่มต้นโปรแกรมแบ่งคุกกี้ 🍪" in messages
    divisor_lines = [m for m in messages if m.startswith("   ✅ ") and "คน →" in m]
    assert len(divisor_lines) == len(exact_divisors(30))
    assert messages[-1] == "📖 อ่านต่อในโปรเจคถัดไป: 05_mixed_shopping"


def test_main_without_delay():
    assert main(["--no-delay"]) == 0