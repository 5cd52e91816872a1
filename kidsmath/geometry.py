"""Areas and volumes: a football field, a round pool, a gift box and more."""

from __future__ import annotations

import argparse
import logging
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass

log = logging.getLogger(__name__)

PI = 3.14159265359
SQUARE_METERS_TO_RAI = 1600.0


@dataclass(frozen=True)
class Shape:
    """A named shape; ``length`` doubles as the radius for round shapes."""

    name: str
    length: float
    width: float = 0.0
    height: float = 0.0


def to_rai(area: float) -> float:
    """Convert square metres to rai."""
    return area / SQUARE_METERS_TO_RAI


def rectangle_metrics(length: float, width: float) -> tuple[float, float, float]:
    """Return ``(area, perimeter, area_in_rai)`` of a rectangle."""
    area = length * width
    perimeter = 2 * (length + width)
    return area, perimeter, to_rai(area)


def circle_metrics(radius: float, depth: float) -> tuple[float, float, float]:
    """Return ``(surface_area, circumference, volume)`` of a cylindrical pool."""
    surface_area = PI * radius * radius
    circumference = 2 * PI * radius
    return surface_area, circumference, surface_area * depth


def box_metrics(length: float, width: float, height: float) -> tuple[float, float]:
    """Return ``(volume, surface_area)`` of a rectangular box."""
    volume = length * width * height
    surface_area = 2 * (length * width + width * height + length * height)
    return volume, surface_area


def triangle_area(base: float, height: float) -> float:
    """Return the area of a triangle."""
    return 0.5 * base * height


def cone_volume(radius: float, height: float) -> float:
    """Return the volume of a cone."""
    return (1.0 / 3.0) * (PI * radius * radius) * height


_TOP = "╔══════════════════════════════════════╗"
_MID = "╠══════════════════════════════════════╣"
_BOTTOM = "╚══════════════════════════════════════╝"
_WIDE_TOP = "╔═══════════════════════════════════════╗"
_WIDE_MID = "╠═══════════════════════════════════════╣"
_WIDE_BOTTOM = "╚═══════════════════════════════════════╝"


def _log_rectangle(shape: Shape) -> None:
    info = log.info
    area, perimeter, area_in_rai = rectangle_metrics(shape.length, shape.width)
    info(_TOP)
    info("║          %s           ║", shape.name)
    info(_MID)
    info("║ 📏 ความยาว: %.2f เมตร", shape.length)
    info("║ 📏 ความกว้าง: %.2f เมตร", shape.width)
    info("║ 📐 พื้นที่: %.2f × %.2f = %.2f ตร.ม.", shape.length, shape.width, area)
    info("║ 🔄 ปริเมตร: 2×(%.0f+%.0f) = %.2f ม.", shape.length, shape.width, perimeter)
    info("║ 🌾 เท่ากับ: %.4f ไร่", area_in_rai)
    info(_BOTTOM)


def _log_circle(shape: Shape) -> None:
    info = log.info
    radius = shape.length
    surface_area, circumference, volume = circle_metrics(radius, shape.height)
    info(_TOP)
    info("║          %s            ║", shape.name)
    info(_MID)
    info("║ 📏 รัศมี: %.2f เมตร", radius)
    info("║ 📏 ความลึก: %.2f เมตร", shape.height)
    info("║ 🌊 พื้นที่ผิวน้ำ: π × %.0f² = %.2f ตร.ม.", radius, surface_area)
    info("║ ⭕ เส้นรอบวง: 2π × %.0f = %.2f ม.", radius, circumference)
    info("║ 💧 ปริมาตรน้ำ: %.2f × %.2f = %.2f ลบ.ม.", surface_area, shape.height, volume)
    info(_BOTTOM)


def _log_box(shape: Shape) -> None:
    info = log.info
    volume, surface_area = box_metrics(shape.length, shape.width, shape.height)
    info(_TOP)
    info("║          %s          ║", shape.name)
    info(_MID)
    info("║ 📏 ความยาว: %.2f ซม.", shape.length)
    info("║ 📏 ความกว้าง: %.2f ซม.", shape.width)
    info("║ 📏 ความสูง: %.2f ซม.", shape.height)
    info(
        "║ 📦 ปริมาตร: %.0f×%.0f×%.0f = %.2f ลบ.ซม.",
        shape.length,
        shape.width,
        shape.height,
        volume,
    )
    info("║ 🎀 พื้นที่ผิว: %.2f ตร.ซม.", surface_area)
    info("║ 📐 เท่ากับ: %.6f ลิตร", volume / 1000.0)
    info(_BOTTOM)


def _log_comparison() -> None:
    info = log.info
    info("\n🔍 การเปรียบเทียบผลลัพธ์:")
    info("╔════════════════════════════════════╗")
    info("║  สนามฟุตบอล vs สระน้ำ vs กล่อง    ║")
    info("╠════════════════════════════════════╣")
    info("║ 🏟️ สนาม: ใหญ่ที่สุด (6,000 ตร.ม.)  ║")
    info("║ 🏊‍♀️ สระ: กลาง (78.54 ตร.ม.)       ║")
    info("║ 🎁 กล่อง: เล็กที่สุด (300 ลบ.ซม.)  ║")
    info("╚════════════════════════════════════╝")


def _log_math_facts() -> None:
    info = log.info
    info("\n📚 ความรู้ทางคณิตศาสตร์:")
    info(_WIDE_TOP)
    info("║           สูตรคณิตศาสตร์             ║")
    info(_WIDE_MID)
    info("║ 📐 สี่เหลี่ยม: พื้นที่ = ยาว × กว้าง   ║")
    info("║ ⭕ วงกลม: พื้นที่ = π × r²           ║")
    info("║ 📦 ทรงผีเสื้อ: ปริมาตร = ย×ก×ส       ║")
    info("║ 💡 π (pi) ≈ 3.14159                  ║")
    info("║ 🌾 1 ไร่ = 1,600 ตารางเมตร          ║")
    info(_WIDE_BOTTOM)


def _log_triangle_bonus() -> None:
    info = log.info
    base, height = 10.0, 8.0
    sides = (10.0, 8.0, 6.0)
    area = triangle_area(base, height)
    perimeter = sum(sides)
    info("\n🎯 โบนัส: สามเหลี่ยม")
    info(_WIDE_TOP)
    info("║         สามเหลี่ยมมุมฉาก             ║")
    info(_WIDE_MID)
    info("║ 📏 ฐาน: %.2f ซม.", base)
    info("║ 📏 สูง: %.2f ซม.", height)
    info("║ 📐 พื้นที่: ½×%.0f×%.0f = %.2f ตร.ซม.", base, height, area)
    info("║ 🔄 ปริเมตร: %.0f+%.0f+%.0f = %.2f ซม.", *sides, perimeter)
    info(_WIDE_BOTTOM)


def _log_triangle_area(base: float, height: float) -> None:
    info = log.info
    area = triangle_area(base, height)
    info("\n📐 พื้นที่สามเหลี่ยม:")
    info(_TOP)
    info("║ ฐาน: %.2f เมตร", base)
    info("║ สูง: %.2f เมตร", height)
    info("║ ➕ พื้นที่: ½ × %.2f × %.2f = %.2f ตร.ม.", base, height, area)
    info("║ 🌾 เท่ากับ: %.6f ไร่", to_rai(area))
    info(_BOTTOM)


def _log_cone(radius: float, height: float) -> None:
    info = log.info
    base_area = PI * radius * radius
    volume = cone_volume(radius, height)
    info("\n🍦 ปริมาตรทรงกรวย:")
    info(_TOP)
    info("║ รัศมี: %.2f เมตร", radius)
    info("║ สูง: %.2f เมตร", height)
    info("║ 📐 พื้นที่ฐาน: π × %.2f² = %.2f ตร.ม.", radius, base_area)
    info("║ 💧 ปริมาตร: (1/3) × %.2f × %.2f = %.2f ลบ.ม.", base_area, height, volume)
    info(_BOTTOM)


def _log_rai_conversion(length: float, width: float) -> None:
    info = log.info
    area = length * width
    info("\n🔁 แปลงหน่วยพื้นที่:")
    info(_TOP)
    info("║ ความยาว: %.2f เมตร", length)
    info("║ ความกว้าง: %.2f เมตร", width)
    info("║ ➕ พื้นที่: %.2f ตร.ม.", area)
    info("║ 🌾 เท่ากับ: %.6f ไร่", to_rai(area))
    info(_BOTTOM)


def run(sleep: Callable[[float], None] = time.sleep) -> None:
    """Walk through the geometry lesson, writing every step to the log."""
    info = log.info
    info("🚀 เริ่มต้นโปรแกรมคณิตศาสตร์ขั้นสูง!")
    info("📐 การคำนวณพื้นที่และปริมาตร\n")
    sleep(1.0)

    football_field = Shape("สนามฟุตบอล", length=100.0, width=60.0, height=0.0)
    swimming_pool = Shape("สระน้ำกลม", length=5.0, width=0.0, height=2.0)
    gift_box = Shape("กล่องของขวัญ", length=20.0, width=15.0, height=10.0)

    info("   🏟️     🏊‍♀️     🎁")
    info(" ┌─────┐  ╭─────╮  ┌─────┐")
    info(" │ ⚽  │  │ 💧💧 │  │ 🎀  │")
    info(" │     │  │     │  │     │")
    info(" └─────┘  ╰─────╯  └─────┘\n")

    _log_rectangle(football_field)
    sleep(2.0)
    _log_circle(swimming_pool)
    sleep(2.0)
    _log_box(gift_box)
    sleep(2.0)
    _log_comparison()
    sleep(2.0)
    _log_math_facts()
    sleep(2.0)
    _log_triangle_bonus()

    _log_triangle_area(12.0, 7.0)
    sleep(2.0)
    _log_cone(3.0, 6.0)
    sleep(2.0)
    _log_rai_conversion(40.0, 40.0)
    sleep(2.0)

    info("\n✅ เสร็จสิ้นการคำนวณทั้งหมด!")
    info("🎓 ได้เรียนรู้: คณิตศาสตร์ขั้นสูง, struct, #define, และฟังก์ชันคณิตศาสตร์")


def _pauser(scale: float) -> Callable[[float], None]:
    """Return a sleep function whose pauses are stretched by ``scale``."""

    def pause(seconds: float) -> None:
        time.sleep(seconds * scale)

    return pause


def main(argv: Sequence[str] | None = None) -> int:
    """Run the lesson from the command line."""
    parser = argparse.ArgumentParser(description="Geometry lesson: areas and volumes.")
    parser.add_argument("--no-delay", action="store_true", help="skip the reading pauses")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="I (%(name)s) %(message)s")
    run(_pauser(0.0 if args.no_delay else 1.0))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())