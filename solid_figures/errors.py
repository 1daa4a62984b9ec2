class ConsistencyViolation(Exception):
    """Размер фигуры после изменения не совпал с запрошенным."""

    def __init__(self, dimension, expected, actual):
        super().__init__(dimension, expected, actual)
        self.dimension = dimension
        self.expected = expected
        self.actual = actual

    def __str__(self):
        return f"Нарушена согласованность: {self.dimension} = {self.actual}, ожидалось {self.expected}"
