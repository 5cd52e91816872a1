"""Mixed-operation lesson: a shopping bill with discount, VAT and a split."""

from __future__ import annotations

import argparse
import logging
import time
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

log = logging.getLogger(__name__)


@dataclass
class Product:
    """A line on the shopping list."""

    name: str
    quantity: int
    price_per_unit: float

    @property
    def total(self) -> float:
        """Price of the whole line."""
        return self.quantity * self.price_per_unit


def calculate_total_bill(products: Iterable[Product]) -> float:
    """Return the sum of every product line."""
    return sum((product.total for product in products), 0.0)


def apply_percentage_discount(total: float, percent: float) -> float:
    """Return ``total`` reduced by ``percent`` per cent."""
    return total - (total * percent / 100.0)


def apply_vat(total: float, vat_percent: float) -> float:
    """Return ``total`` increased by ``vat_percent`` per cent."""
    return total + (total * vat_percent / 100.0)


def split_payment(amount: float, people: int) -> float:
    """Return each person's share of ``amount``."""
    if people <= 0:
        raise ValueError("the number of people must be greater than zero")
    return amount / people


DEFAULT_PRODUCTS = (
    Product("แอปเปิ้ล", 6, 15.0),
    Product("กล้วย", 12, 8.0),
    Product("ส้ม", 8, 12.0),
    Product("ช็อกโกแลต", 3, 30.0),
)


def run(sleep: Callable[[float], None] = time.sleep) -> None:
    """Walk through the shopping lesson, writing every step to the log."""
    info = log.info
    info("🛒 เริ่มต้นโปรแกรมซื้อของที่ตลาด (เวอร์ชันใหม่) 🛒")
    info("=====================================")

    products = list(DEFAULT_PRODUCTS)
    discount_percent = 10.0
    vat_percent = 7.0
    people = 3

    subtotal = calculate_total_bill(products)
    discount_amount = subtotal * (discount_percent / 100.0)
    discounted_total = apply_percentage_discount(subtotal, discount_percent)
    total_with_vat = apply_vat(discounted_total, vat_percent)
    per_person = split_payment(total_with_vat, people)

    sleep(2.0)

    info("📖 รายการสินค้า:")
    for product in products:
        info(
            "   %s: %d × %.0f = %.0f บาท",
            product.name,
            product.quantity,
            product.price_per_unit,
            product.total,
        )

    info("")
    info("💰 สรุปค่าใช้จ่าย:")
    info("   ยอดรวมก่อนส่วนลด:           %.2f บาท", subtotal)
    info("   ส่วนลด %.0f%%:                -%.2f บาท", discount_percent, discount_amount)
    info("   ยอดหลังหักส่วนลด:            %.2f บาท", discounted_total)
    info(
        "   ภาษีมูลค่าเพิ่ม (VAT %.0f%%): +%.2f บาท",
        vat_percent,
        total_with_vat - discounted_total,
    )
    info("   ยอดสุทธิรวม VAT:             %.2f บาท", total_with_vat)
    info("   แบ่งจ่าย %d คน:               %.2f บาท/คน", people, per_person)
    info("")

    info("🌟 การประยุกต์ใช้ในชีวิตจริง:")
    info("   - การซื้อของเป็นกลุ่ม")
    info("   - การแบ่งบิลในร้านอาหาร")
    info("   - การคำนวณงบประมาณแบบรวมภาษี")
    info("   - การทำระบบคิดเงินอัตโนมัติ")
    info("")

    info("🎉 จบโปรแกรมซื้อของที่ตลาดเวอร์ชันใหม่!")


def _pauser(scale: float) -> Callable[[float], None]:
    """Return a sleep function whose pauses are stretched by ``scale``."""

    def pause(seconds: float) -> None:
        time.sleep(seconds * scale)

    return pause


def main(argv: Sequence[str] | None = None) -> int:
    """Run the lesson from the command line."""
    parser = argparse.ArgumentParser(description="Shopping lesson with mixed operations.")
    parser.add_argument("--no-delay", action="store_true", help="skip the pause")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname).1s (%(name)s) %(message)s")
    run(_pauser(0.0 if args.no_delay else 1.0))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())