"""Final project: a menu-driven calculator with history, geometry and a shop till."""

from __future__ import annotations

import argparse
import enum
import logging
import math
import time
from collections import deque
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import datetime

log = logging.getLogger(__name__)

PI = 3.14159265359
MAX_HISTORY = 50
MAX_CART = 10
MAX_DESCRIPTION = 99
VERSION = "1.0.0"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class Mode(enum.IntEnum):
    """Screens the calculator can be on."""

    MAIN_MENU = 0
    BASIC = 1
    ADVANCED = 2
    SHOP = 3
    HISTORY = 4
    EXIT = 5


class Operation(enum.IntEnum):
    """Operations the calculator knows."""

    ADD = 1
    SUBTRACT = 2
    MULTIPLY = 3
    DIVIDE = 4
    POWER = 5
    SQRT = 6
    FACTORIAL = 7
    AREA_CIRCLE = 8
    AREA_RECTANGLE = 9
    VOLUME_BOX = 10
    PERCENTAGE = 11
    DISCOUNT = 12
    TAX = 13


@dataclass(frozen=True)
class HistoryEntry:
    """One saved calculation."""

    id: int
    operation: Operation
    operand1: float
    operand2: float
    result: float
    timestamp: str
    description: str


@dataclass
class CartItem:
    """A product in the shop cart."""

    id: int
    name: str
    price: float
    quantity: int

    @property
    def total(self) -> float:
        """Price of the whole line."""
        return self.price * self.quantity


def _refuse(message: str, error: type[Exception] = ValueError) -> Exception:
    log.error("%s", message)
    return error(message)


def safe_add(a: float, b: float) -> float:
    """Return ``a + b``."""
    return a + b


def safe_subtract(a: float, b: float) -> float:
    """Return ``a - b``."""
    return a - b


def safe_multiply(a: float, b: float) -> float:
    """Return ``a * b``."""
    return a * b


def safe_divide(a: float, b: float) -> float:
    """Return ``a / b``, refusing a zero divisor."""
    if b == 0.0:
        raise _refuse("❌ ข้อผิดพลาด: ไม่สามารถหารด้วยศูนย์ได้!", ZeroDivisionError)
    return a / b


def safe_power(base: float, exponent: float) -> float:
    """Return ``base ** exponent``, refusing zero to a negative power."""
    if base == 0.0 and exponent < 0:
        raise _refuse("❌ ข้อผิดพลาด: 0 ยกกำลังลบไม่ได้!")
    try:
        return math.pow(base, exponent)
    except OverflowError:
        return math.inf


def safe_sqrt(a: float) -> float:
    """Return the square root of a non-negative number."""
    if a < 0:
        raise _refuse("❌ ข้อผิดพลาด: ไม่สามารถหารากที่สองของจำนวนลบได้!")
    return math.sqrt(a)


def safe_factorial(n: int) -> float:
    """Return ``n!`` as a float; above 20 the answer is infinity."""
    if n < 0:
        raise _refuse("❌ ข้อผิดพลาด: แฟกทอเรียลของจำนวนลบไม่ได้!")
    if n > 20:
        log.warning("⚠️ เตือน: แฟกทอเรียลใหญ่เกินไป!")
        return math.inf
    return float(math.prod(range(2, n + 1)))


def calculate_circle_area(radius: float) -> float:
    """Return the area of a circle."""
    if radius < 0:
        raise _refuse("❌ รัศมีไม่สามารถเป็นลบได้!")
    return PI * radius * radius


def calculate_rectangle_area(length: float, width: float) -> float:
    """Return the area of a rectangle."""
    if length < 0 or width < 0:
        raise _refuse("❌ ความยาวและความกว้างไม่สามารถเป็นลบได้!")
    return length * width


def calculate_box_volume(length: float, width: float, height: float) -> float:
    """Return the volume of a box."""
    if length < 0 or width < 0 or height < 0:
        raise _refuse("❌ ขนาดทุกด้านต้องเป็นบวก!")
    return length * width * height


def calculate_percentage(value: float, percent: float) -> float:
    """Return ``percent`` per cent of ``value``."""
    return (value * percent) / 100.0


def apply_discount(original_price: float, discount_percent: float) -> float:
    """Return the price after a discount; a discount outside 0-100 is ignored."""
    if discount_percent < 0 or discount_percent > 100:
        log.warning("⚠️ ส่วนลดควรอยู่ระหว่าง 0-100%")
        return original_price
    return original_price - calculate_percentage(original_price, discount_percent)


def apply_tax(amount: float, tax_rate: float) -> float:
    """Return the amount with tax added; a negative rate is ignored."""
    if tax_rate < 0:
        log.warning("⚠️ อัตราภาษีไม่ควรเป็นลบ")
        return amount
    return amount + calculate_percentage(amount, tax_rate)


def _evaluate(op: Operation, op1: float, op2: float) -> tuple[float, str]:
    match op:
        case Operation.ADD:
            r = safe_add(op1, op2)
            return r, "%.2f + %.2f = %.2f" % (op1, op2, r)
        case Operation.SUBTRACT:
            r = safe_subtract(op1, op2)
            return r, "%.2f - %.2f = %.2f" % (op1, op2, r)
        case Operation.MULTIPLY:
            r = safe_multiply(op1, op2)
            return r, "%.2f × %.2f = %.2f" % (op1, op2, r)
        case Operation.DIVIDE:
            r = safe_divide(op1, op2)
            return r, "%.2f ÷ %.2f = %.2f" % (op1, op2, r)
        case Operation.POWER:
            r = safe_power(op1, op2)
            return r, "%.2f ^ %.2f = %.2f" % (op1, op2, r)
        case Operation.SQRT:
            r = safe_sqrt(op1)
            return r, "√%.2f = %.2f" % (op1, r)
        case Operation.FACTORIAL:
            r = safe_factorial(int(op1))
            return r, "%.0f! = %.0f" % (op1, r)
        case Operation.AREA_CIRCLE:
            r = calculate_circle_area(op1)
            return r, "พื้นที่วงกลม r=%.2f = %.2f" % (op1, r)
        case Operation.AREA_RECTANGLE:
            r = calculate_rectangle_area(op1, op2)
            return r, "พื้นที่สี่เหลี่ยม %.2f×%.2f = %.2f" % (op1, op2, r)
        case Operation.VOLUME_BOX:
            r = op1 * op2
            return r, "ปริมาตรกล่อง = %.2f" % r
        case Operation.PERCENTAGE:
            r = calculate_percentage(op1, op2)
            return r, "%.2f%% ของ %.2f = %.2f" % (op2, op1, r)
        case Operation.DISCOUNT:
            r = apply_discount(op1, op2)
            return r, "ลด %.2f%% จาก %.2f = %.2f" % (op2, op1, r)
        case Operation.TAX:
            r = apply_tax(op1, op2)
            return r, "ภาษี %.2f%% จาก %.2f = %.2f" % (op2, op1, r)
    raise _refuse("❌ การดำเนินการไม่รู้จัก!")


def _rating(avg_time: float) -> str:
    if avg_time < 1.0:
        return "ยอดเยี่ยม"
    if avg_time < 5.0:
        return "ดี"
    return "ปกติ"


_BASIC_DEMOS = (
    (Operation.ADD, 25.5, 14.3),
    (Operation.SUBTRACT, 100.0, 37.5),
    (Operation.MULTIPLY, 12.0, 8.0),
    (Operation.DIVIDE, 144.0, 12.0),
    (Operation.POWER, 2.0, 8.0),
    (Operation.SQRT, 64.0, 0.0),
    (Operation.FACTORIAL, 5.0, 0.0),
)

_DEMO_PRODUCTS = (
    CartItem(1, "น้ำดื่ม", 15.0, 2),
    CartItem(2, "ขนมปัง", 25.0, 1),
    CartItem(3, "กาแฟกระป๋อง", 45.0, 3),
)


@dataclass
class Calculator:
    """Calculator state: history, statistics and the shop cart."""

    sleep: Callable[[float], None] = time.sleep
    now: Callable[[], datetime] = datetime.now
    timer: Callable[[], float] = time.perf_counter
    history: deque[HistoryEntry] = field(default_factory=lambda: deque(maxlen=MAX_HISTORY))
    total_calculations: int = 0
    total_computation_time: float = 0.0
    current_mode: Mode = Mode.MAIN_MENU
    cart: list[CartItem] = field(default_factory=list)
    shop_total: float = 0.0
    shop_discount: float = 0.0
    shop_tax_rate: float = 7.0

    def save_to_history(
        self, op: Operation, op1: float, op2: float, result: float, description: str
    ) -> HistoryEntry:
        """Record a calculation, dropping the oldest once the history is full."""
        entry = HistoryEntry(
            id=self.total_calculations + 1,
            operation=Operation(op),
            operand1=op1,
            operand2=op2,
            result=result,
            timestamp=self.now().strftime(TIMESTAMP_FORMAT),
            description=description[:MAX_DESCRIPTION],
        )
        self.history.append(entry)
        self.total_calculations += 1
        log.info("💾 บันทึกประวัติ #%d: %s", entry.id, description)
        return entry

    def perform(self, op: Operation, op1: float, op2: float = 0.0) -> float:
        """Run one operation; a finite result is saved to the history."""
        operation = Operation(op)
        start = self.timer()
        try:
            result, description = _evaluate(operation, op1, op2)
        finally:
            elapsed_ms = (self.timer() - start) * 1000.0
            self.total_computation_time += elapsed_ms

        if math.isfinite(result):
            self.save_to_history(operation, op1, op2, result, description)
            log.info("\n=== การคำนวณเสร็จสิ้น ===")
            log.info("📊 ผลลัพธ์: %.2f", result)
            log.info("⏰ เวลาที่ใช้: %.3f วินาที", elapsed_ms / 1000.0)
            log.info("💾 บันทึกประวัติแล้ว (#%d)", self.total_calculations)
            log.info("✅ ตรวจสอบความถูกต้องแล้ว\n")
        return result

    def show_main_menu(self) -> None:
        """Log the main menu and the running statistics."""
        info = log.info
        info("\n╔══════════════════════════════════════════════════╗")
        info("║                   🧮 เมนูหลัก                   ║")
        info("╠══════════════════════════════════════════════════╣")
        info("║ [1] 🔢 โหมดพื้นฐาน - Basic Calculator         ║")
        info("║ [2] 🔬 โหมดขั้นสูง - Advanced Mathematics     ║")
        info("║ [3] 🏪 โหมดร้านค้า - Shop POS System          ║")
        info("║ [4] 📊 โหมดประวัติ - History & Statistics     ║")
        info("║ [0] 🚪 ออกจากโปรแกรม - Exit                  ║")
        info("╚══════════════════════════════════════════════════╝")
        info("")
        info(
            "📊 สถิติ: %d การคำนวณ | %.2f มิลลิวินาที รวม",
            self.total_calculations,
            self.total_computation_time,
        )

    def basic_mode(self) -> list[float]:
        """Run the basic-operation demonstrations and return their results."""
        info = log.info
        info("\n🔢 === โหมดพื้นฐาน ===")
        info("╔═══════════════════════════════════════╗")
        info("║         การดำเนินการพื้นฐาน         ║")
        info("╠═══════════════════════════════════════╣")
        info("║ [1] ➕ บวก     [2] ➖ ลบ            ║")
        info("║ [3] ✖️ คูณ      [4] ➗ หาร           ║")
        info("║ [5] 🔢 ยกกำลัง [6] √ รากที่สอง      ║")
        info("║ [7] ! แฟกทอเรียล                    ║")
        info("╚═══════════════════════════════════════╝")
        results = []
        for number, (op, op1, op2) in enumerate(_BASIC_DEMOS, start=1):
            self.sleep(1.5)
            info("\n🎯 ตัวอย่างที่ %d:", number)
            results.append(self.perform(op, op1, op2))
        return results

    def advanced_mode(self) -> list[float]:
        """Run the geometry and percentage demonstrations and return their results."""
        info = log.info
        info("\n🔬 === โหมดขั้นสูง ===")
        info("╔══════════════════════════════════════════╗")
        info("║            คณิตศาสตร์ขั้นสูง           ║")
        info("╠══════════════════════════════════════════╣")
        info("║ 📐 เรขาคณิต และ การคำนวณพิเศษ         ║")
        info("╚══════════════════════════════════════════╝")
        results = []
        self.sleep(1.0)
        info("\n🎯 พื้นที่วงกลม รัศมี 5 เมตร:")
        results.append(self.perform(Operation.AREA_CIRCLE, 5.0, 0.0))
        self.sleep(1.0)
        info("\n🎯 พื้นที่สี่เหลี่ยม 8×6 เมตร:")
        results.append(self.perform(Operation.AREA_RECTANGLE, 8.0, 6.0))
        self.sleep(1.0)
        info("\n🎯 15% ของ 200 บาท:")
        results.append(self.perform(Operation.PERCENTAGE, 200.0, 15.0))
        return results

    def shop_mode(self) -> float:
        """Ring up the demonstration cart and return the amount to pay."""
        info = log.info
        info("\n🏪 === โหมดร้านค้า ===")
        info('🛒 ระบบ POS ร้านสะดวกซื้อ "คิดเก่ง"')

        self.cart = []
        self.shop_total = 0.0
        self.shop_discount = 10.0
        self.shop_tax_rate = 7.0

        info("\n🛒 เพิ่มสินค้าในตะกร้า:")
        for product in _DEMO_PRODUCTS[:MAX_CART]:
            item = CartItem(product.id, product.name, product.price, product.quantity)
            self.cart.append(item)
            self.shop_total += item.total
            info("➕ %s: %.2f × %d = %.2f บาท", item.name, item.price, item.quantity, item.total)
            self.sleep(0.8)

        info("\n💰 สรุปการคำนวณ:")
        info("╔════════════════════════════════════════════╗")
        info("║              🧾 ใบเสร็จ                  ║")
        info("╠════════════════════════════════════════════╣")
        for item in self.cart:
            info("║ %s  %.2f×%d  %.2f ║", item.name, item.price, item.quantity, item.total)
        info("╠════════════════════════════════════════════╣")
        info("║ 📊 ยอดรวม:                    %.2f บาท ║", self.shop_total)

        discount_amount = calculate_percentage(self.shop_total, self.shop_discount)
        after_discount = self.shop_total - discount_amount
        info("║ 🎫 ส่วนลด %.0f%%:               -%.2f บาท ║", self.shop_discount, discount_amount)
        info("║ 💵 หลังหักส่วนลด:             %.2f บาท ║", after_discount)

        tax_amount = calculate_percentage(after_discount, self.shop_tax_rate)
        final_total = after_discount + tax_amount
        info("║ 🏛️ ภาษี %.0f%%:                 +%.2f บาท ║", self.shop_tax_rate, tax_amount)
        info("║ 💳 ยอดชำระสุทธิ:              %.2f บาท ║", final_total)
        info("╚════════════════════════════════════════════╝")

        self.save_to_history(
            Operation.DISCOUNT, self.shop_total, self.shop_discount, after_discount, "การขายหน้าร้าน"
        )
        return final_total

    def history_mode(self) -> list[HistoryEntry]:
        """Log the latest five entries and usage statistics; return those entries."""
        info = log.info
        info("\n📊 === โหมดประวัติ ===")
        if not self.history:
            info("📝 ยังไม่มีประวัติการคำนวณ")
            return []

        info("╔════════════════════════════════════════════════════════╗")
        info("║                    📋 ประวัติการคำนวณ                  ║")
        info("╠════════════════════════════════════════════════════════╣")
        latest = list(self.history)[-5:]
        for entry in latest:
            info("║ #%03d │ %s │ %s ║", entry.id, entry.timestamp, entry.description)
        info("╚════════════════════════════════════════════════════════╝")

        info("\n📈 สถิติการใช้งาน:")
        info("╔═══════════════════════════════════════╗")
        info("║          📊 สรุปการใช้งาน           ║")
        info("╠═══════════════════════════════════════╣")
        info("║ 🔢 การคำนวณทั้งหมด: %d ครั้ง       ║", self.total_calculations)
        info("║ ⏱️ เวลารวม: %.2f มิลลิวินาที       ║", self.total_computation_time)
        if self.total_calculations > 0:
            avg_time = self.total_computation_time / self.total_calculations
            info("║ ⚡ เวลาเฉลี่ย: %.3f มิลลิวินาที     ║", avg_time)
            info("║ 🚀 ประสิทธิภาพ: %s                ║", _rating(avg_time))
        info("║ ⭐ ความแม่นยำ: 100%               ║")
        info("╚═══════════════════════════════════════╝")
        return latest

    def show_final_summary(self) -> None:
        """Log the closing summary."""
        info = log.info
        info("\n🎉 === ขอบคุณที่ใช้งาน ===")
        info("╔════════════════════════════════════════════════════╗")
        info("║           🧮 เครื่องคิดเลขครบครัน v%s           ║", VERSION)
        info("╠════════════════════════════════════════════════════╣")
        info("║ ✅ การคำนวณทั้งหมด: %d ครั้ง                     ║", self.total_calculations)
        info("║ ⏱️ เวลาที่ใช้รวม: %.2f มิลลิวินาที                ║", self.total_computation_time)
        info("║ 🏆 ประสิทธิภาพ: เยี่ยม                           ║")
        info("║ 🛡️ ความปลอดภัย: สูงสุด                          ║")
        info("╚════════════════════════════════════════════════════╝")

        info("\n🎓 สิ่งที่ได้เรียนรู้:")
        info("✅ การเขียนโปรแกรม ESP32 ด้วย C")
        info("✅ การจัดการข้อผิดพลาดแบบมืออาชีพ")
        info("✅ การสร้างระบบเมนูและ UI")
        info("✅ การคำนวณคณิตศาสตร์ขั้นสูง")
        info("✅ การประยุกต์ใช้ในงานจริง")

        info("\n🚀 คุณพร้อมสำหรับโปรเจคถัดไปแล้ว!")
        info("💝 ขอบคุณและขอให้โชคดี!")

    def simulate_menu_navigation(self) -> None:
        """Visit the basic, advanced, shop and history screens in turn."""
        screens = {
            Mode.BASIC: self.basic_mode,
            Mode.ADVANCED: self.advanced_mode,
            Mode.SHOP: self.shop_mode,
            Mode.HISTORY: self.history_mode,
        }
        for mode, screen in screens.items():
            self.show_main_menu()
            log.info("🎯 เลือกเมนู: %d", mode)
            self.sleep(2.0)
            self.current_mode = mode
            screen()
            self.sleep(3.0)
        self.current_mode = Mode.MAIN_MENU


def _show_logo() -> None:
    info = log.info
    info("╔════════════════════════════════════════════════╗")
    info("║          🧮 เครื่องคิดเลขครบครัน v%s        ║", VERSION)
    info("║                ESP32 Calculator               ║")
    info("╠════════════════════════════════════════════════╣")
    info("║  📱 Modern • 🛡️ Safe • ⚡ Fast • 🎯 Accurate  ║")
    info("╚════════════════════════════════════════════════╝")
    info("")
    info("    🧮    💻    📊    🏪")
    info("   Basic Advanced Stats Shop")
    info("")


def _scaled_sleep(scale: float) -> Callable[[float], None]:
    """Return a sleep function whose pauses are multiplied by ``scale``."""

    def pause(seconds: float) -> None:
        time.sleep(seconds * scale)

    return pause


def main(argv: Sequence[str] | None = None) -> int:
    """Run the calculator demonstration from the command line."""
    parser = argparse.ArgumentParser(description="Menu-driven calculator demonstration.")
    parser.add_argument("--no-delay", action="store_true", help="skip the pauses")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname).1s (%(name)s) %(message)s")

    calc = Calculator(sleep=_scaled_sleep(0.0) if args.no_delay else time.sleep)
    log.info("🚀 เริ่มต้นเครื่องคิดเลขครบครัน!")
    calc.sleep(1.0)
    _show_logo()
    calc.sleep(2.0)

    calc.current_mode = Mode.MAIN_MENU
    calc.shop_tax_rate = 7.0
    log.info("⚡ ระบบพร้อมใช้งาน!")
    log.info("🛡️ ระบบป้องกันข้อผิดพลาดเปิดใช้งาน")
    log.info("💾 ระบบบันทึกประวัติพร้อม")
    calc.sleep(1.5)

    calc.simulate_menu_navigation()
    calc.show_final_summary()
    log.info("\n🎯 โปรแกรมเสร็จสิ้น - ขอบคุณที่ใช้งาน!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())