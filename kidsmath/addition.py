"""Addition lesson: counting strawberries and bananas."""

from __future__ import annotations

import argparse
import logging
import time
from collections.abc import Callable, Sequence

log = logging.getLogger(__name__)

_EXAMPLES = ((7, 3), (10, 5))


def add(a: int, b: int) -> int:
    """Return the sum of two counts."""
    return a + b


def run(sleep: Callable[[float], None] = time.sleep) -> None:
    """Walk through the addition lesson, writing every step to the log."""
    eggs_already_have = 8
    eggs_new_today = 3
    duck_eggs = 3
    info = log.info

    info("🥚 เริ่มต้นโปรแกรมนับไข่ไก่ของแม่ 🥚")
    info("=====================================")

    info("📖 โจทย์:")
    info("   แม่มีสตรอว์เบอร์รี่อยู่: %d ลูก", eggs_already_have)
    info("   ไปเก็บสตรอว์เบอร์รี่มาเพิ่ม: %d ลูก", eggs_new_today)
    info("   ❓ วันนี้แม่มีสตรอว์เบอร์รี่กี่ลูก?")
    info("")

    sleep(3.0)

    total_eggs = add(eggs_already_have, eggs_new_today)
    total_all_eggs = add(total_eggs, duck_eggs)

    info("🧮 ขั้นตอนการคิด:")
    info("   สตรอว์เบอร์รี่ที่มี + สตรอว์เบอร์รี่ที่เก็บมา")
    info("   = %d + %d", eggs_already_have, eggs_new_today)
    info("   = %d ลูก", total_eggs)
    info("")

    info("✅ คำตอบ:")
    info("   รวมมีสตรอว์เบอร์รี่ทั้งหมด %d ลูก", total_eggs)
    info("")

    info("🎨 ภาพประกอบ:")
    info("   สตรอว์เบอร์รี่:    %s (%d ลูก)", "🍓" * eggs_already_have, eggs_already_have)
    info("   สตรอว์เบอร์รี่ใหม่: %s (%d ลูก)", "🍓" * eggs_new_today, eggs_new_today)
    info("   รวม:            %s (%d ลูก)", "🍓" * total_eggs, total_eggs)
    info("")

    info("🍌 และแม่เก็บกล้วยมา: %d ลูก", duck_eggs)
    info("🍓 สตรอว์เบอร์รี่ทั้งหมด (สตรอว์เบอร์รี่+กล้วย): %d ลูก", total_all_eggs)

    info("💡 ตัวอย่างเพิ่มเติม:")
    for old, new in _EXAMPLES:
        info("   ถ้าแม่มีกล้วย %d ลูก และมีสตรอว์เบอร์รี่อยู่ %d ลูก", old, new)
        info("   จะได้กล้วยกับสตรอว์เบอร์รี่ทั้งหมด %d + %d = %d ลูก", old, new, add(old, new))
        info("")

    info("📚 สิ่งที่เรียนรู้:")
    info("   1. การบวกเลข (Addition): a + b = c")
    info("   2. การใช้ตัวแปร (Variables) เก็บค่า")
    info("   3. การแสดงผลด้วย ESP_LOGI")
    info("   4. การแก้โจทย์แบบมีขั้นตอน")
    info("")

    info("🎉 จบโปรแกรมนับสตรอว์เบอร์รี่กับกล้วยของแม่!")
    info("📖 อ่านต่อในโปรเจคถัดไป: 02_subtraction_toys")

    sleep(2.0)


def _pauser(scale: float) -> Callable[[float], None]:
    """Return a sleep function whose pauses are stretched by ``scale``."""

    def pause(seconds: float) -> None:
        time.sleep(seconds * scale)

    return pause


def main(argv: Sequence[str] | None = None) -> int:
    """Run the lesson from the command line."""
    parser = argparse.ArgumentParser(description="Addition lesson with strawberries.")
    parser.add_argument("--no-delay", action="store_true", help="skip the reading pauses")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="I (%(name)s) %(message)s")
    run(_pauser(0.0 if args.no_delay else 1.0))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())