"""Division lesson: sharing cookies between friends."""

from __future__ import annotations

import argparse
import logging
import time
from collections.abc import Callable, Sequence

log = logging.getLogger(__name__)


def share(total: int, people: int) -> tuple[int, int]:
    """Return ``(per_person, remaining)`` when sharing ``total`` between ``people``."""
    if people == 0:
        raise ZeroDivisionError("cannot share cookies between zero people")
    return divmod(total, people)


def exact_divisors(total: int, limit: int = 10) -> list[tuple[int, int]]:
    """Return ``(people, per_person)`` for each group size up to ``limit`` that divides ``total``."""
    return [(people, total // people) for people in range(1, limit + 1) if total % people == 0]


def _log_evenness(remaining: int) -> None:
    if remaining == 0:
        log.info("✅ หารลงตัว! ทุกคนได้เท่ากัน")
    else:
        log.info("⚠️ หารไม่ลงตัว! เหลือ %d ชิ้น", remaining)


def run(sleep: Callable[[float], None] = time.sleep) -> None:
    """Walk through the division lesson, writing every step to the log."""
    info = log.info
    total_cookies = 24
    number_of_friends = 6

    info("🍪 เริ่มต้นโปรแกรมแบ่งคุกกี้ 🍪")
    info("================================")

    info("📖 โจทย์:")
    info("   มีคุกกี้: %d ชิ้น", total_cookies)
    info("   จะแบ่งให้เพื่อน: %d คน", number_of_friends)
    info("   ❓ แต่ละคนได้คุกกี้กี่ชิ้น?")
    info("")

    sleep(3.0)

    try:
        cookies_per_person, remaining_cookies = share(total_cookies, number_of_friends)
    except ZeroDivisionError:
        log.error("❌ ข้อผิดพลาด: ไม่สามารถหารด้วยศูนย์ได้!")
        info("   ในชีวิตจริง: ไม่มีเพื่อนมาแบ่งคุกกี้")
        info("   คุกกี้ทั้งหมด %d ชิ้น จะเหลือไว้ทั้งหมด", total_cookies)
        info("")
        info("🎉 จบโปรแกรม!")
        return

    info("🧮 ขั้นตอนการคิด:")
    info("   คุกกี้ทั้งหมด ÷ จำนวนเพื่อน")
    info("   = %d ÷ %d", total_cookies, number_of_friends)
    info("   = %d ชิ้นต่อคน", cookies_per_person)
    if remaining_cookies > 0:
        info("   เศษที่เหลือ = %d ชิ้น", remaining_cookies)
    info("")

    info("✅ คำตอบ:")
    info("   แต่ละคนได้คุกกี้ %d ชิ้น", cookies_per_person)
    if remaining_cookies > 0:
        info("   มีคุกกี้เหลือ %d ชิ้น (ไม่สามารถแบ่งได้เท่าๆ กัน)", remaining_cookies)
    else:
        info("   แบ่งได้พอดี ไม่มีเหลือ")
    _log_evenness(remaining_cookies)
    info("")

    info("🎨 ภาพประกอบการแบ่ง:")
    info("   คุกกี้ทั้งหมด: 🍪🍪🍪🍪🍪🍪🍪🍪🍪🍪🍪🍪 (%d ชิ้น)", total_cookies)
    info("")

    for person in range(1, number_of_friends + 1):
        info("   เพื่อนคนที่ %d: ", person)
        info("🍪🍪🍪 (%d ชิ้น)", cookies_per_person)

    if remaining_cookies > 0:
        info("   เหลือ: ")
        info("🍪 (%d ชิ้น)", remaining_cookies)
    _log_evenness(remaining_cookies)
    info("")

    cookies = 30
    info("🔍 คุกกี้ %d ชิ้น หารลงตัวกับ:", cookies)
    for people, per_person in exact_divisors(cookies):
        info("   ✅ %d คน → คนละ %d ชิ้น", people, per_person)

    info("💡 ตัวอย่างเพิ่มเติม:")

    ex1_cookies, ex1_friends = 15, 3
    ex1_per_person, ex1_remainder = share(ex1_cookies, ex1_friends)
    info("   คุกกี้ %d ชิ้น แบ่งให้ %d คน", ex1_cookies, ex1_friends)
    info(
        "   = %d ÷ %d = %d ชิ้นต่อคน, เหลือ %d ชิ้น",
        ex1_cookies,
        ex1_friends,
        ex1_per_person,
        ex1_remainder,
    )
    info("")

    ex2_cookies, ex2_friends = 13, 4
    ex2_per_person, ex2_remainder = share(ex2_cookies, ex2_friends)
    info("   คุกกี้ %d ชิ้น แบ่งให้ %d คน", ex2_cookies, ex2_friends)
    info(
        "   = %d ÷ %d = %d ชิ้นต่อคน, เหลือ %d ชิ้น",
        ex2_cookies,
        ex2_friends,
        ex2_per_person,
        ex2_remainder,
    )
    info("   (หารไม่ลงตัว)")
    info("")

    info("⚠️  กรณีพิเศษ - หารด้วยศูนย์:")
    info("   ถ้าไม่มีเพื่อนมาแบ่ง (หารด้วย 0)")
    info("   ไม่สามารถคำนวณได้ในทางคณิตศาสตร์")
    info("   ในชีวิตจริง: คุกกี้จะเหลือทั้งหมด")
    info("")

    shared = cookies_per_person * number_of_friends
    info("🔄 ความสัมพันธ์กับการคูณ:")
    info("   การหาร: %d ÷ %d = %d", total_cookies, number_of_friends, cookies_per_person)
    info("   การคูณ: %d × %d = %d", cookies_per_person, number_of_friends, shared)
    if remaining_cookies > 0:
        info("   บวกเศษ: %d + %d = %d", shared, remaining_cookies, total_cookies)
    info("   การหารและการคูณเป็นการดำเนินการตรงข้ามกัน")
    info("")

    info("📊 สรุปการดำเนินการทั้งหมด:")
    info("   การบวก (+): เพิ่มจำนวน")
    info("   การลบ (-): ลดจำนวน")
    info("   การคูณ (×): บวกซ้ำๆ หลายชุด")
    info("   การหาร (÷): แบ่งออกเป็นกลุ่มเท่าๆ กัน")
    info("")

    info("🎓 แนวคิดขั้นสูง:")
    info("   1. การหารจะได้ผลหาร (quotient) และเศษ (remainder)")
    info("   2. ในภาษา C:")
    info("      ผลหาร = a / b")
    info("      เศษ = a % b")
    info("   3. การตรวจสอบการหารด้วยศูนย์เป็นสิ่งสำคัญ")
    info("   4. การหารด้วย 1 จะได้ตัวเลขเดิม")
    info("   5. การหารตัวเลขด้วยตัวมันเองจะได้ 1")
    info("")

    info("📚 สิ่งที่เรียนรู้:")
    info("   1. การหารเลข (Division): a ÷ b = c")
    info("   2. การใช้ Modulo operator (%) หาเศษ")
    info("   3. การตรวจสอบการหารด้วยศูนย์")
    info("   4. ความแตกต่างระหว่างหารลงตัวและไม่ลงตัว")
    info("   5. ความสัมพันธ์ระหว่างการหารและการคูณ")
    info("   6. การจัดการกรณีพิเศษ (Error Handling)")
    info("")

    info("🎉 จบโปรแกรมแบ่งคุกกี้!")
    info("📖 อ่านต่อในโปรเจคถัดไป: 05_mixed_shopping")

    sleep(2.0)


def _scaled_sleep(scale: float) -> Callable[[float], None]:
    """Return a sleep function whose pauses are multiplied by ``scale``."""

    def pause(seconds: float) -> None:
        time.sleep(seconds * scale)

    return pause


def main(argv: Sequence[str] | None = None) -> int:
    """Run the lesson from the command line."""
    parser = argparse.ArgumentParser(description="Division lesson with cookies.")
    parser.add_argument("--no-delay", action="store_true", help="skip the reading pauses")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname).1s (%(name)s) %(message)s")
    run(_scaled_sleep(0.0) if args.no_delay else time.sleep)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())