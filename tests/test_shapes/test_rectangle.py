from __future__ import annotations

from objkit.shapes import Rectangle


class TestRectangle:
    def test_fields(self) -> None:
        rect = Rectangle(10, 20)
        assert rect.width == 10
        assert rect.height == 20

    def test_area(self) -> None:
        assert Rectangle(10, 20).area() == 200

    def test_area_floats(self) -> None:
        assert Rectangle(2.5, 4).area() == 10.0

    def test_area_recomputed(self) -> None:
        rect = Rectangle(3, 3)
        rect.width = 5
        assert rect.area() == 15

    def test_defaults(self) -> None:
        rect = Rectangle()
        assert rect.width == 0
        assert rect.height == 0
        assert rect.area() == 0
