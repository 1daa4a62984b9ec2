#
# Фигуры для демонстрации принципа подстановки Барбары Лисков (LSP).
#
#   Квадрат здесь НЕ наследуется от прямоугольника. Обе фигуры реализуют общий
#   интерфейс Shape независимо: у прямоугольника ширина и высота меняются
#   отдельно, у квадрата изменение одной стороны меняет и другую.

from abc import ABC, abstractmethod


class Shape(ABC):
    name = 'Фигура'

    def __init__(self, x=0, y=0):
        self.__x = x
        self.__y = y

    @property
    def position(self):
        return self.__x, self.__y

    @property
    @abstractmethod
    def width(self):
        ...

    @width.setter
    @abstractmethod
    def width(self, value):
        ...

    @property
    @abstractmethod
    def height(self):
        ...

    @height.setter
    @abstractmethod
    def height(self, value):
        ...

    def describe(self):
        return f"{self.name} находится в точке ({self.__x}, {self.__y})"

    def __repr__(self):
        return self.describe()


class Rectangle(Shape):
    name = 'Прямоугольник'

    def __init__(self, width=0, height=0, x=0, y=0):
        super().__init__(x, y)
        self._width = width
        self._height = height

    @property
    def width(self):
        return self._width

    @width.setter
    def width(self, value):
        self._width = value

    @property
    def height(self):
        return self._height

    @height.setter
    def height(self, value):
        self._height = value

    def describe(self):
        return f"{Shape.describe(self)}, ширина: {self.width} и высота: {self.height}"


class Square(Shape):
    name = 'Квадрат'

    def __init__(self, side=0, x=0, y=0):
        super().__init__(x, y)
        self._side = side

    # Ширина и высота квадрата - одно и то же значение
    @property
    def width(self):
        return self._side

    @width.setter
    def width(self, value):
        self._side = value

    @property
    def height(self):
        return self._side

    @height.setter
    def height(self, value):
        self._side = value

    def describe(self):
        return f"{Shape.describe(self)}, со стороной {self.width}"
