import pytest

from makalu.shapes import Circle, Rectangle, Triangle, area, perimeter


def test_perimeter():
    assert perimeter(Rectangle(10, 20)) == 60.0


def test_area_function():
    assert area(Rectangle(10, 20)) == 200.0


@pytest.mark.parametrize(
    "shape, has_area",
    [
        (Rectangle(12, 6), 72.0),
        (Circle(10), 314.1592653589793),
        (Triangle(12, 6), 36.0),
    ],
    ids=["Rectangle", "Circle", "Triangle"],
)
def test_area(shape, has_area):
    assert shape.area() == has_area


def test_area_function_matches_method():
    rectangle = Rectangle(12, 6)
    assert area(rectangle) == rectangle.area()