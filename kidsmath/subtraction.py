"""Subtraction lesson: giving toys away to friends."""

from __future__ import annotations

import argparse
import logging
import time
from collections.abc import Callable, Sequence

log = logging.getLogger(__name__)


def give_away(have: int, give: int) -> tuple[int, int]:
    """Return ``(given, remaining)``; nobody can give more than they have."""
    given = min(give, have)
    return given, have - given


def shortage(friends: int, per_friend: int, actual: int) -> int:
    """Return how many toys are missing to give each friend ``per_friend``."""
    needed = friends * per_friend
    return max(0, needed - actual)


def run(sleep: Callable[[float], None] = time.sleep) -> None:
    """Walk through the subtraction lesson, writing every step to the log."""
    info = log.info
    toys_have = 15
    toys_give_away = 7
    dolls = 5
    robots = 2
    total_toys = toys_have + dolls + robots

    info("🧸 เริ่มต้นโปรแกรมนับของเล่นของน้อง 🧸")
    info("=========================================")

    info("📖 โจทย์:")
    info("   น้องมีของเล่น: %d ชิ้น", toys_have)
    info("   เอาไปแจกให้เพื่อน: %d ชิ้น", toys_give_away)
    info("   ❓ น้องเหลือของเล่นกี่ชิ้น?")
    info("")
    info("🪆 ตุ๊กตา: %d ตัว", dolls)
    info("🤖 หุ่นยนต์: %d ตัว", robots)
    info("🎯 ของเล่นทั้งหมด: %d ชิ้น", total_toys)
    sleep(3.0)

    if toys_give_away > toys_have:
        log.warning(
            "⚠️  คำเตือน: ของเล่นที่จะแจก (%d) มากกว่าที่มีอยู่ (%d)!", toys_give_away, toys_have
        )
        info("   น้องไม่สามารถแจกของเล่นได้มากกว่าที่มี")
        info("   จะแจกได้เฉพาะ %d ชิ้น (ทั้งหมดที่มี)", toys_have)
    toys_give_away, toys_remaining = give_away(toys_have, toys_give_away)

    info("🧮 ขั้นตอนการคิด:")
    info("   ของเล่นที่มี - ของเล่นที่แจก")
    info("   = %d - %d", toys_have, toys_give_away)
    info("   = %d ชิ้น", toys_remaining)
    info("")

    info("✅ คำตอบ:")
    info("   น้องเหลือของเล่น %d ชิ้น", toys_remaining)
    info("")

    info("🎨 ภาพประกอบ:")
    info("   ของเล่นเดิม: 🧸🚗🎲🧩🎮🧸🚁🎯 (%d ชิ้น)", toys_have)
    info("   แจกให้เพื่อน: 🧸🚗🎲 (%d ชิ้น)", toys_give_away)
    info("   เหลืออยู่:   🧩🎮🧸🚁🎯 (%d ชิ้น)", toys_remaining)
    info("")
    info("🪆 ตุ๊กตา: %d ตัว", dolls)
    info("🤖 หุ่นยนต์: %d ตัว", robots)
    info("🎯 ของเล่นทั้งหมด: %d ชิ้น", total_toys)

    info("💡 ตัวอย่างเพิ่มเติม:")
    ex1_have, ex1_give = 15, 7
    info("   ถ้าน้องมีของเล่น %d ชิ้น และแจกไป %d ชิ้น", ex1_have, ex1_give)
    info("   จะเหลือ %d - %d = %d ชิ้น", ex1_have, ex1_give, ex1_have - ex1_give)
    info("")
    if toys_have >= toys_give_away:
        info("✅ ของเล่นพอแจก")
    else:
        info("❌ ของเล่นไม่พอ! ขาดไป %d ชิ้น", toys_give_away - toys_have)

    ex2_have, ex2_give = 5, 5
    info("   ถ้าน้องมีของเล่น %d ชิ้น และแจกไปหมด %d ชิ้น", ex2_have, ex2_give)
    info("   จะเหลือ %d - %d = %d ชิ้น (ไม่เหลือเลย)", ex2_have, ex2_give, ex2_have - ex2_give)
    info("")

    info("🔄 เปรียบเทียบกับการบวก:")
    info("   การบวก: เพิ่มจำนวน (เช่น ไข่ 4 + 2 = 6)")
    info("   การลบ: ลดจำนวน (เช่น ของเล่น 8 - 3 = 5)")
    info("   ข้อแตกต่าง: การลบต้องระวังไม่ให้ติดลบ!")
    info("")

    info("⚠️  กรณีที่ต้องระวัง:")
    danger_have, danger_give = 3, 5
    info("   ถ้าน้องมีของเล่น %d ชิ้น แต่จะแจก %d ชิ้น", danger_have, danger_give)
    info(
        "   จะได้ %d - %d = %d (ผลลัพธ์เป็นลบ!)",
        danger_have,
        danger_give,
        danger_have - danger_give,
    )
    info("   ในชีวิตจริง: น้องไม่สามารถแจกของเล่นมากกว่าที่มีได้")
    info("")

    info("📚 สิ่งที่เรียนรู้:")
    info("   1. การลบเลข (Subtraction): a - b = c")
    info("   2. การตรวจสอบเงื่อนไข (if statement)")
    info("   3. การจัดการกรณีพิเศษ (edge cases)")
    info("   4. ความแตกต่างระหว่างการบวกและการลบ")
    info("   5. การป้องกันผลลัพธ์ที่ไม่สมเหตุสมผล")
    info("")

    info("🧠 แบบฝึกหัดที่ 4: คำถามให้คิด")
    friends, toys_per_friend, actual_toys = 10, 2, 15
    needed_toys = friends * toys_per_friend
    info("   น้องอยากแจกของเล่นให้เพื่อน %d คน คนละ %d ชิ้น", friends, toys_per_friend)
    info("   รวมต้องมีของเล่น: %d ชิ้น", needed_toys)
    missing = shortage(friends, toys_per_friend, actual_toys)
    if missing == 0:
        info("   ✅ ของเล่นเพียงพอ มีอยู่ %d ชิ้น", actual_toys)
    else:
        log.warning("   ❌ ของเล่นไม่พอ! มีอยู่แค่ %d ชิ้น", actual_toys)
        log.warning("   ขาดอีก %d ชิ้น", missing)

    info("")
    info("🎉 จบโปรแกรมนับของเล่นของน้อง!")
    info("📖 อ่านต่อในโปรเจคถัดไป: 03_multiplication_candies")

    sleep(2.0)


def _pauser(scale: float) -> Callable[[float], None]:
    """Return a sleep function whose pauses are stretched by ``scale``."""

    def pause(seconds: float) -> None:
        time.sleep(seconds * scale)

    return pause


def main(argv: Sequence[str] | None = None) -> int:
    """Run the lesson from the command line."""
    parser = argparse.ArgumentParser(description="Subtraction lesson with toys.")
    parser.add_argument("--no-delay", action="store_true", help="skip the reading pauses")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname).1s (%(name)s) %(message)s")
    run(_pauser(0.0 if args.no_delay else 1.0))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())