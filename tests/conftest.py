"""
Общие фикстуры для тестов.

pytest находит этот файл автоматически, фикстуры доступны во всех тестах папки.
"""

import pytest

from solid_figures.figures import Rectangle, Square


@pytest.fixture
def my_rectangle():
    return Rectangle(20, 10)


@pytest.fixture
def my_square():
    return Square(5)


@pytest.fixture
def reported():
    # Подменяем вывод в консоль списком, чтобы проверять строки
    return []
