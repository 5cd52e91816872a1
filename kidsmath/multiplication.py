"""Multiplication lesson: bags of candies."""

from __future__ import annotations

import argparse
import logging
import time
from collections.abc import Callable, Sequence
from itertools import accumulate, repeat

log = logging.getLogger(__name__)


def repeated_addition(count: int, value: int) -> list[int]:
    """Return the running sums of adding ``value`` to itself ``count`` times."""
    return list(accumulate(repeat(value, max(count, 0))))


def times_table(value: int, upto: int = 10) -> list[tuple[int, int, int]]:
    """Return ``(i, value, i * value)`` for ``i`` from 1 to ``upto``."""
    return [(i, value, i * value) for i in range(1, upto + 1)]


def share_candies(total: int, friends: int) -> tuple[int, int]:
    """Return ``(per_friend, left_over)`` when sharing ``total`` candies."""
    if friends <= 0:
        raise ValueError("the number of friends must be greater than zero")
    return divmod(total, friends)


def _log_repeated_addition(count: int, value: int) -> None:
    sums = repeated_addition(count, value)
    for i, running in enumerate(sums, start=1):
        if i == 1:
            log.info("                  %d", value)
        elif i < count:
            log.info("                + %d", value)
        else:
            log.info("                + %d = %d", value, running)


def run(sleep: Callable[[float], None] = time.sleep) -> None:
    """Walk through the multiplication lesson, writing every step to the log."""
    info = log.info
    number_of_bags = 7
    candies_per_bag = 8
    orange_bags = 2
    grape_bags = 4
    strawberry_bags = 3
    total_bags = strawberry_bags + orange_bags + grape_bags
    flavoured_candies = total_bags * candies_per_bag
    friends = 12
    candies_per_friend, remaining_candies = share_candies(flavoured_candies, friends)

    info("🍬 เริ่มต้นโปรแกรมนับลูกอมในถุง 🍬")
    info("====================================")

    info("📖 โจทย์:")
    info("   มีถุงลูกอม: %d ถุง", number_of_bags)
    info("   ถุงละ: %d เม็ด", candies_per_bag)
    info("   ❓ มีลูกอมทั้งหมดกี่เม็ด?")
    info("")

    sleep(3.0)

    total_candies = number_of_bags * candies_per_bag

    info("🧮 ขั้นตอนการคิด:")
    info("   จำนวนถุง × ลูกอมต่อถุง")
    info("   = %d × %d", number_of_bags, candies_per_bag)
    info("   = %d เม็ด", total_candies)
    info("")

    info("✅ คำตอบ:")
    info("   มีลูกอมทั้งหมด %d เม็ด", total_candies)
    info("")

    info("🍓 สตรอเบอร์รี่: %d ถุง = %d เม็ด", strawberry_bags, strawberry_bags * candies_per_bag)
    info("🍊 รสส้ม: %d ถุง = %d เม็ด", orange_bags, orange_bags * candies_per_bag)
    info("🍇 รสองุ่น: %d ถุง = %d เม็ด", grape_bags, grape_bags * candies_per_bag)
    info("🎨 ภาพประกอบ:")
    for bag in range(1, 6):
        info("   ถุงที่ %d: 🍬🍬🍬🍬🍬🍬 (%d เม็ด)", bag, candies_per_bag)
    info("   รวม:     %d เม็ด", total_candies)
    info("👥 แจกให้เพื่อน %d คน:", friends)
    info("   คนละ %d เม็ด", candies_per_friend)
    info("   เหลือ %d เม็ด", remaining_candies)
    info("")

    info("🔄 เปรียบเทียบกับการบวกซ้ำๆ:")
    info("   การคูณ: %d × %d = %d", number_of_bags, candies_per_bag, total_candies)
    info("   การบวกซ้ำๆ:")
    _log_repeated_addition(number_of_bags, candies_per_bag)
    info("   ผลลัพธ์เหมือนกัน! การคูณคือการบวกซ้ำๆ")
    info("")

    info("📊 ตารางสูตรคูณ %d:", candies_per_bag)
    for i, value, product in times_table(candies_per_bag):
        info("   %d × %d = %d", i, value, product)
        sleep(0.3)
    info("📊 ตารางสูตรคูณของ %d:", candies_per_bag)
    for i, value, product in times_table(candies_per_bag):
        info("   %d x %d = %d", i, value, product)
    info("")

    info("💡 ตัวอย่างเพิ่มเติม:")
    for bags, per_bag in ((3, 8), (7, 4)):
        info("   ถ้ามีถุงลูกอม %d ถุง ถุงละ %d เม็ด", bags, per_bag)
        info("   จะได้ลูกอม %d × %d = %d เม็ด", bags, per_bag, bags * per_bag)
        info("")

    info("🔄 เปรียบเทียบการดำเนินการ:")
    info("   การบวก (+): เพิ่มจำนวน (เช่น ไข่ 4 + 2 = 6)")
    info("   การลบ (-): ลดจำนวน (เช่น ของเล่น 8 - 3 = 5)")
    info("   การคูณ (×): บวกซ้ำๆ (เช่น ลูกอม 5 × 6 = 30)")
    info("")

    info("🎓 แนวคิดขั้นสูง:")
    info("   1. การคูณมีคุณสมบัติการสับเปลี่ยน:")
    info(
        "      %d × %d = %d × %d = %d",
        number_of_bags,
        candies_per_bag,
        candies_per_bag,
        number_of_bags,
        total_candies,
    )
    info("   2. การคูณด้วย 0 จะได้ 0 เสมอ:")
    info("      %d × 0 = 0 (ไม่มีถุงลูกอม)", number_of_bags)
    info("   3. การคูณด้วย 1 จะได้ตัวเลขเดิม:")
    info("      %d × 1 = %d (มีถุงเดียว)", candies_per_bag, candies_per_bag)
    info("")

    info("📚 สิ่งที่เรียนรู้:")
    info("   1. การคูณเลข (Multiplication): a × b = c")
    info("   2. การใช้ for loop สำหรับการทำซ้ำ")
    info("   3. ความสัมพันธ์ระหว่างการคูณและการบวกซ้ำๆ")
    info("   4. คุณสมบัติพิเศษของการคูณ")
    info("   5. การแสดงผลแบบตาราง")
    info("")

    info("🎉 จบโปรแกรมนับลูกอมในถุง!")
    info("📖 อ่านต่อในโปรเจคถัดไป: 04_division_cookies")

    sleep(2.0)


def _pauser(scale: float) -> Callable[[float], None]:
    """Return a sleep function whose pauses are stretched by ``scale``."""

    def pause(seconds: float) -> None:
        time.sleep(seconds * scale)

    return pause


def main(argv: Sequence[str] | None = None) -> int:
    """Run the lesson from the command line."""
    parser = argparse.ArgumentParser(description="Multiplication lesson with candies.")
    parser.add_argument("--no-delay", action="store_true", help="skip the reading pauses")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="I (%(name)s) %(message)s")
    run(_pauser(0.0 if args.no_delay else 1.0))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())