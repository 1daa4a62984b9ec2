import pytest

from solid_figures.figures import Rectangle, Shape, Square

VALUES = [0, 1, 7, -3, 1000]


def test_shape_is_abstract():
    with pytest.raises(TypeError):
        Shape()


def test_square_is_not_a_rectangle(my_square):
    assert isinstance(my_square, Shape)
    assert not isinstance(my_square, Rectangle)


def test_default_dimensions_are_zero():
    assert (Rectangle().width, Rectangle().height) == (0, 0)
    assert (Square().width, Square().height) == (0, 0)


@pytest.mark.parametrize("w", VALUES)
@pytest.mark.parametrize("h", VALUES)
def test_rectangle_sides_are_independent(w, h):
    rect = Rectangle()
    rect.width = w
    rect.height = h
    assert (rect.width, rect.height) == (w, h)


@pytest.mark.parametrize("v", VALUES)
def test_square_width_sets_both(v, my_square):
    my_square.width = v
    assert my_square.width == my_square.height == v


@pytest.mark.parametrize("v", VALUES)
def test_square_height_sets_both(v, my_square):
    my_square.height = v
    assert my_square.width == my_square.height == v


def test_rectangle_describe(my_rectangle):
    assert my_rectangle.describe() == (
        "Прямоугольник находится в точке (0, 0), ширина: 20 и высота: 10"
    )
    assert repr(my_rectangle) == my_rectangle.describe()


def test_square_describe_reports_one_side():
    square = Square(4, x=1, y=2)
    assert square.describe() == "Квадрат находится в точке (1, 2), со стороной 4"
    assert square.position == (1, 2)
