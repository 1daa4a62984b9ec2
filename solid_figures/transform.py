import logging

from solid_figures.errors import ConsistencyViolation


def console_report(text):
    """Выводит строку в консоль."""
    print(text)


def transform(shape, new_height, new_width):
    """Меняет высоту, затем ширину фигуры и проверяет, что изменения применились.

    Код написан в терминах Shape и рассчитывает, что стороны меняются
    независимо. Для прямоугольника это всегда так. Для квадрата вторая
    операция перезаписывает первую, и при new_height != new_width проверка
    падает с ConsistencyViolation.
    """
    logging.debug(f"transform: {shape!r} -> высота {new_height}, ширина {new_width}")
    shape.height = new_height
    shape.width = new_width

    for dimension, expected in (('height', new_height), ('width', new_width)):
        actual = getattr(shape, dimension)
        if actual != expected:
            logging.error(
                f"{shape.name}: {dimension} = {actual} после изменения, ожидалось {expected}"
            )
            raise ConsistencyViolation(dimension, expected, actual)

    logging.info(f"Фигура изменена: {shape!r}")
    return shape


def draw(shape, report=console_report):
    """Формирует строку с текущими размерами фигуры и передаёт её в report."""
    line = f"Рисуем фигуру: ширина {shape.width}, высота {shape.height}"
    report(line)
    return line
