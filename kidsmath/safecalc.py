"""Error-handling lesson: checked division, money, number parsing and interest."""

from __future__ import annotations

import argparse
import enum
import logging
import math
import re
import sys
import time
from collections.abc import Callable, Sequence

log = logging.getLogger(__name__)

MONEY_LIMIT = 1_000_000_000_000.0


class ErrorCode(enum.IntEnum):
    """Kinds of failure a checked calculation can report."""

    NONE = 0
    DIVISION_BY_ZERO = 1
    INVALID_INPUT = 2
    OUT_OF_RANGE = 3
    NEGATIVE_VALUE = 4
    OVERFLOW = 5
    UNDERFLOW = 6


class CalculationError(ValueError):
    """A checked calculation refused its input."""

    def __init__(self, code: ErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


_ART = {
    ErrorCode.NONE: ("   ✅ SUCCESS", "     🎉🎉🎉", "    สำเร็จแล้ว!"),
    ErrorCode.DIVISION_BY_ZERO: ("   🍕 ÷ 0 = ❌", "   😱 โอ้ะโอ!", "  ไม่มีลูกค้า!"),
    ErrorCode.INVALID_INPUT: ("   📝 ABC บาท?", "   🤔 งง...", "  ตัวเลขหายไป"),
    ErrorCode.OUT_OF_RANGE: ("   📈 ∞∞∞∞∞", "   😵 เกินขีด!", "  ใหญ่เกินไป"),
}
_DEFAULT_ART = ("   ❓ ERROR", "   🔧 แก้ไข", "  ต้องตรวจสอบ")


def show_ascii_art(error: ErrorCode) -> tuple[str, ...]:
    """Log and return the little picture for ``error``."""
    lines = _ART.get(error, _DEFAULT_ART)
    for line in lines:
        log.info(line)
    return lines


def _fail(code: ErrorCode, message: str, level: int = logging.ERROR) -> CalculationError:
    log.log(level, "%s", message)
    return CalculationError(code, message)


def safe_divide(dividend: float, divisor: float, context: str) -> float:
    """Divide, refusing a zero divisor and an infinite result."""
    log.info("\n🔍 ตรวจสอบการหาร: %s", context)
    log.info("📊 %.2f ÷ %.2f = ?", dividend, divisor)

    if divisor == 0.0:
        error = _fail(ErrorCode.DIVISION_BY_ZERO, "❌ หารด้วยศูนย์ไม่ได้!")
        show_ascii_art(ErrorCode.DIVISION_BY_ZERO)
        log.info("💡 ตรวจสอบจำนวนลูกค้าก่อนแบ่งพิซซ่า")
        raise error

    result = dividend / divisor
    if math.isinf(result):
        raise _fail(ErrorCode.OVERFLOW, "⚠️ ค่าผลลัพธ์เป็น Infinity!", logging.WARNING)

    log.info("✅ สำเร็จ: %.2f ÷ %.2f = %.2f", dividend, divisor, result)
    show_ascii_art(ErrorCode.NONE)
    return result


def _round_half_away(value: float) -> float:
    scaled = value * 100
    rounded = math.floor(abs(scaled) + 0.5)
    return math.copysign(rounded, scaled) / 100


def validate_money(amount: float, description: str) -> float:
    """Check an amount of money and round it to satang when needed."""
    log.info("\n💰 ตรวจสอบเงิน: %s", description)
    log.info("💵 จำนวน: %.2f บาท", amount)

    if amount < 0:
        error = _fail(ErrorCode.NEGATIVE_VALUE, "❌ จำนวนเงินต้องไม่ติดลบ!")
        log.info("💡 ตรวจสอบการคิดเงินใหม่")
        raise error

    if amount > MONEY_LIMIT:
        error = _fail(ErrorCode.OUT_OF_RANGE, "⚠️ จำนวนเงินเกินขีดจำกัด!", logging.WARNING)
        show_ascii_art(ErrorCode.OUT_OF_RANGE)
        log.info("💡 แนะนำ: ใช้ระบบธนาคารกลาง")
        raise error

    rounded = _round_half_away(amount)
    if abs(amount - rounded) > 0.001:
        log.warning("⚠️ ปัดเศษจาก %.4f → %.2f บาท", amount, rounded)
        amount = rounded

    log.info("✅ เงินถูกต้อง: %.2f บาท", amount)
    return amount


_DECIMAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_HEX = re.compile(r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?\d+)?")
_SPECIAL = re.compile(r"[+-]?(?:inf(?:inity)?|nan(?:\([0-9A-Za-z_]*\))?)", re.IGNORECASE)


def _parse_number(text: str) -> float | None:
    body = text.lstrip(" \t\n\v\f\r")
    if _DECIMAL.fullmatch(body):
        return float(body)
    if _HEX.fullmatch(body):
        sign = -1.0 if body.startswith("-") else 1.0
        return sign * float.fromhex(body.lstrip("+-"))
    if _SPECIAL.fullmatch(body):
        return math.nan
    return None


def validate_number(text: str | None, field_name: str) -> float:
    """Parse ``text`` as a finite number, the whole string and nothing else."""
    log.info("\n🔢 ตรวจสอบตัวเลข: %s", field_name)
    log.info("📝 ข้อมูลที่ป้อน: '%s'", text)

    if not text:
        raise _fail(ErrorCode.INVALID_INPUT, "❌ ไม่มีข้อมูล!")

    value = _parse_number(text)
    if value is None:
        error = _fail(ErrorCode.INVALID_INPUT, f"❌ '{text}' ไม่ใช่ตัวเลข!")
        show_ascii_art(ErrorCode.INVALID_INPUT)
        log.info("💡 ใช้เฉพาะตัวเลข 0-9 และจุดทศนิยม")
        raise error

    if math.isnan(value) or math.isinf(value):
        raise _fail(ErrorCode.INVALID_INPUT, "❌ ตัวเลขไม่ถูกต้อง!")

    log.info("✅ ตัวเลขถูกต้อง: %.2f", value)
    return value


def calculate_interest(principal: float, rate: float, years: int) -> float:
    """Return principal plus simple interest over ``years`` at ``rate`` per cent."""
    log.info("\n🏦 คำนวณดอกเบี้ย")
    log.info("💰 เงินต้น: %.2f บาท", principal)
    log.info("📈 อัตราดอกเบี้ย: %.2f%% ต่อปี", rate)
    log.info("⏰ ระยะเวลา: %d ปี", years)

    if principal <= 0:
        raise _fail(ErrorCode.NEGATIVE_VALUE, "❌ เงินต้นต้องมากกว่าศูนย์!")

    if rate < -100 or rate > 100:
        error = _fail(ErrorCode.OUT_OF_RANGE, "❌ อัตราดอกเบี้ยไม่เหมาะสม!")
        log.info("💡 ใช้ -100% ถึง 100% เท่านั้น")
        raise error

    if years < 0 or years > 100:
        raise _fail(ErrorCode.OUT_OF_RANGE, "❌ ระยะเวลาไม่เหมาะสม!")

    interest = principal * (rate / 100.0) * years
    total = principal + interest

    if total > sys.float_info.max / 2:
        raise _fail(ErrorCode.OVERFLOW, "⚠️ ผลลัพธ์ใหญ่เกินไป!", logging.WARNING)

    log.info("✅ ดอกเบี้ย: %.2f, รวม: %.2f", interest, total)
    return total


def _attempt(action: Callable[[], float]) -> float | None:
    try:
        return action()
    except CalculationError:
        return None


def _pizza_shop_scenario(sleep: Callable[[float], None]) -> None:
    log.info("\n🍕 === ร้านพิซซ่า ===")
    _attempt(lambda: safe_divide(12, 4, "แบ่งพิซซ่าให้ลูกค้า 4 คน"))
    sleep(2.0)
    _attempt(lambda: safe_divide(12, 0, "แบ่งพิซซ่าให้ลูกค้า 0 คน"))
    sleep(2.0)
    log.info("\n🌞 ฝนหยุดแล้ว! ลูกค้ามา 3 คน")
    _attempt(lambda: safe_divide(12, 4, "แบ่งพิซซ่าให้ลูกค้า 3 คน"))


def _shop_scenario(sleep: Callable[[float], None]) -> None:
    log.info("\n🛒 === ร้านขายของ ===")
    _attempt(lambda: validate_number("ABC", "ราคาสินค้า"))
    sleep(2.0)
    _attempt(lambda: validate_number("12.50", "ราคาสินค้า"))
    sleep(1.0)
    _attempt(lambda: validate_money(-50.0, "เงินทอน"))
    sleep(2.0)
    _attempt(lambda: validate_money(25.75, "เงินทอน"))


def _bank_scenario(sleep: Callable[[float], None]) -> None:
    log.info("\n🏦 === ธนาคาร ===")
    _attempt(lambda: calculate_interest(100000, 2.5, 5))
    sleep(2.0)
    _attempt(lambda: calculate_interest(100000, -5.0, 5))
    sleep(2.0)
    _attempt(lambda: validate_money(999999999999.0, "เงินฝาก"))
    sleep(2.0)
    _attempt(lambda: calculate_interest(100000, 3.0, 10))


def _show_summary() -> None:
    info = log.info
    info("\n📚 === สรุปข้อผิดพลาด ===")
    info("╔══════════════════════════════════════╗")
    info("║ 🚫 Division by Zero  - หารด้วยศูนย์ ║")
    info("║ 📝 Invalid Input      - ป้อนผิด     ║")
    info("║ 📊 Out of Range       - เกินขอบเขต  ║")
    info("║ ➖ Negative Value      - ค่าติดลบ     ║")
    info("║ ⬆️ Overflow            - ล้นค่าระบบ ║")
    info("╚══════════════════════════════════════╝")

    info("\n🛡️ หลักการจัดการข้อผิดพลาด:")
    info("✅ ตรวจสอบข้อมูลก่อนคำนวณ")
    info("✅ แจ้งเตือนแบบเข้าใจง่าย")
    info("✅ ให้คำแนะนำแก้ปัญหา")
    info("✅ ป้องกัน crash หรือ hang")
    info("✅ ใช้ enum + struct คุมสถานะ")


def run(sleep: Callable[[float], None] = time.sleep) -> None:
    """Walk through the error-handling scenarios, writing every step to the log."""
    log.info("🚀 เริ่มต้นระบบจัดการข้อผิดพลาด!")
    sleep(1.0)
    _pizza_shop_scenario(sleep)
    sleep(3.0)
    _shop_scenario(sleep)
    sleep(3.0)
    _bank_scenario(sleep)
    sleep(3.0)
    _show_summary()
    log.info("\n✅ เสร็จสิ้น! พร้อมเขียนโปรแกรมปลอดภัยแล้ว!")


def _no_sleep(_seconds: float) -> None:
    return None


def main(argv: Sequence[str] | None = None) -> int:
    """Run the lesson from the command line."""
    parser = argparse.ArgumentParser(description="Error-handling lesson.")
    parser.add_argument("--no-delay", action="store_true", help="skip the pauses")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname).1s (%(name)s) %(message)s")
    run(_no_sleep if args.no_delay else time.sleep)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())