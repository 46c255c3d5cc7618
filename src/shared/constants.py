from enum import Enum

# --- Сетка и рамка

# Насколько значение рамки ниже минимума сетки
PAD_SENTINEL_OFFSET = 1000.0

# Ширина рамки вокруг сетки (ячейки)
PAD_WIDTH = 1

# Минимальный размер сетки по каждой оси
MIN_GRID_SIZE = 1

# --- Marching squares

# Рёбра ячейки
MS_EDGE_TOP = 0
MS_EDGE_RIGHT = 1
MS_EDGE_BOTTOM = 2
MS_EDGE_LEFT = 3

# Веса углов в коде ячейки
MS_WEIGHT_TL = 8  # 0b1000: верхний левый
MS_WEIGHT_TR = 4  # 0b0100: верхний правый
MS_WEIGHT_BR = 2  # 0b0010: нижний правый
MS_WEIGHT_BL = 1  # 0b0001: нижний левый

MS_MASK_EMPTY = 0  # 0b0000: все ниже уровня
MS_MASK_FULL = 15  # 0b1111: все выше уровня

# Седловые случаи: диагональные углы совпадают
MS_MASK_TR_BL = 5  # 0b0101
MS_MASK_TL_BR = 10  # 0b1010

MS_NO_CONTOUR_CASES = {MS_MASK_EMPTY, MS_MASK_FULL}
MS_AMBIGUOUS_CASES = (MS_MASK_TR_BL, MS_MASK_TL_BR)

# Параметр точки на ребре при равных значениях или без сглаживания
EDGE_MIDPOINT = 0.5

# --- Сборка колец

# Допуск совпадения точек при замыкании кольца
RING_CLOSE_TOLERANCE = 1e-3

# Квантование координат при индексации точек (шаг 1e-6 ячейки)
RING_POINT_QUANT_FACTOR = 1_000_000

# Минимум точек в замкнутом кольце (первая точка повторяется в конце)
MIN_CLOSED_RING_POINTS = 3

# Минимум точек, из которых строится путь
MIN_PATH_POINTS = 2

# --- Уровни

# Количество уровней по умолчанию (равномерно по диапазону значений)
DEFAULT_THRESHOLD_COUNT = 10

# Количество параллельных воркеров для построения изолиний
CONTOUR_PARALLEL_WORKERS = 4

# --- Оценка плотности

DENSITY_DEFAULT_WIDTH = 960
DENSITY_DEFAULT_HEIGHT = 500
DENSITY_DEFAULT_CELL_SIZE = 4
DENSITY_DEFAULT_BANDWIDTH = 20.0
DENSITY_DEFAULT_THRESHOLDS = 20

# Радиус влияния точки в стандартных отклонениях
DENSITY_KERNEL_RADIUS_SIGMAS = 3

# --- Вывод

# Знаков после запятой в данных пути
PATH_NUMBER_PRECISION = 3

# Формат логов CLI
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class OutputFormat(str, Enum):
    """Формат вывода CLI."""

    GEOJSON = 'geojson'
    COMMANDS = 'commands'
    PATH = 'path'


def default_output_format() -> OutputFormat:
    return OutputFormat.GEOJSON
