import sys

from solid_figures.errors import ConsistencyViolation
from solid_figures.figures import Rectangle, Square
from solid_figures.settings import setup_logging
from solid_figures.transform import console_report, draw, transform


class DemoOutcomeError(Exception):
    """Пример закончился не так, как должен был."""


def run_demo(report=console_report):
    """Проигрывает пример с прямоугольником и квадратом. Возвращает выведенные строки."""
    lines = []

    def say(text):
        lines.append(text)
        report(text)

    # Для начала зададим параметры прямоугольника
    rect = Rectangle(20, 10)
    say(rect.describe())
    # Попробуем поменять, стороны меняются независимо
    rect.width, rect.height = 5, 15
    say(rect.describe())

    # У квадрата изменение одной стороны меняет и другую
    square = Square(111)
    square.height = 5
    say(f"{square.describe()}\t#Ширина: {square.width}, Высота: {square.height}")
    square.width = 13
    say(f"{square.describe()}\t#Ширина: {square.width}, Высота: {square.height}")

    # Теперь код, написанный в расчёте на прямоугольник
    transform(rect, 5, 10)
    say(f"transform(5, 10): {rect.describe()}")
    draw(rect, say)

    transform(square, 7, 7)
    say(f"transform(7, 7): {square.describe()}")

    # Контрпример: квадрат подставлен туда, где ждут независимые стороны
    square = Square(5)
    try:
        transform(square, 10, 20)
    except ConsistencyViolation as e:
        say(f"transform(10, 20) для квадрата: {e}")
    else:
        raise DemoOutcomeError("Квадрат прошёл проверку с разными сторонами")
    draw(square, say)

    return lines


def main():
    setup_logging()
    try:
        run_demo()
    except DemoOutcomeError as e:
        print(e, file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
