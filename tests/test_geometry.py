import logging

import pytest

from kidsmath.geometry import (
    PI,
    SQUARE_METERS_TO_RAI,
    Shape,
    box_metrics,
    circle_metrics,
    cone_volume,
    main,
    rectangle_metrics,
    run,
    to_rai,
    triangle_area,
)


def test_one_rai_is_sixteen_hundred_square_metres():
    assert to_rai(SQUARE_METERS_TO_RAI) == pytest.approx(1.0)


def test_football_field_area_matches_comparison():
    area, _perimeter, _rai = rectangle_metrics(100.0, 60.0)
    assert area == pytest.approx(6000.0)


def test_rectangle_rai_uses_conversion():
    area, _perimeter, rai = rectangle_metrics(40.0, 40.0)
    assert rai == pytest.approx(to_rai(area))


def test_rectangle_is_symmetric():
    assert rectangle_metrics(7.0, 3.0) == pytest.approx(rectangle_metrics(3.0, 7.0))


def test_square_perimeter_is_four_sides():
    _area, perimeter, _rai = rectangle_metrics(5.0, 5.0)
    _area2, perimeter_double, _rai2 = rectangle_metrics(10.0, 10.0)
    assert perimeter_double == pytest.approx(2 * perimeter)


def test_pool_surface_matches_comparison():
    surface, _circumference, _volume = circle_metrics(5.0, 2.0)
    assert surface == pytest.approx(78.54, abs=0.005)


def test_circle_volume_is_surface_times_depth():
    surface, _circumference, volume = circle_metrics(5.0, 2.0)
    assert volume == pytest.approx(surface * 2.0)


def test_circumference_over_diameter_is_pi():
    _surface, circumference, _volume = circle_metrics(3.0, 1.0)
    assert circumference / 6.0 == pytest.approx(PI)


def test_box_volume_independent_of_orientation():
    assert box_metrics(20.0, 15.0, 10.0) == pytest.approx(box_metrics(10.0, 20.0, 15.0))


def test_cube_surface_relates_to_volume():
    volume, surface = box_metrics(2.0, 2.0, 2.0)
    big_volume, big_surface = box_metrics(4.0, 4.0, 4.0)
    assert big_volume == pytest.approx(8 * volume)
    assert big_surface == pytest.approx(4 * surface)


def test_triangle_is_half_rectangle():
    area, _perimeter, _rai = rectangle_metrics(12.0, 7.0)
    assert triangle_area(12.0, 7.0) == pytest.approx(area / 2)


def test_cone_is_third_of_cylinder():
    _surface, _circumference, cylinder = circle_metrics(3.0, 6.0)
    assert cone_volume(3.0, 6.0) == pytest.approx(cylinder / 3)


def test_shape_defaults():
    shape = Shape("pool", 5.0)
    assert (shape.width, shape.height) == (0.0, 0.0)


def test_run_pauses_and_logs(caplog):
    pauses = []
    caplog.set_level(logging.INFO, logger="kidsmath.geometry")
    run(pauses.append)
    assert pauses == [1.0, 2.0, 2.0, 2.0, 2.0, 2.0, 2.0, 2.0, 2.0]
    assert any("สนามฟุตบอล" in record.getMessage() for record in caplog.records)
    assert caplog.records[-1].getMessage().startswith("🎓")


def test_main_without_delay_returns_zero():
    assert main(["--no-delay"]) == 0