from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from shared.constants import (
    CONTOUR_PARALLEL_WORKERS,
    DEFAULT_THRESHOLD_COUNT,
    DENSITY_DEFAULT_BANDWIDTH,
    DENSITY_DEFAULT_CELL_SIZE,
    DENSITY_DEFAULT_HEIGHT,
    DENSITY_DEFAULT_THRESHOLDS,
    DENSITY_DEFAULT_WIDTH,
)


class ContourSettings(BaseModel):
    """
    Параметры построения изолиний.

    Модель неизменяемая: методы size/with_thresholds/smooth/with_workers
    возвращают изменённую копию.
    """

    model_config = {
        'frozen': True,
        'extra': 'ignore',
    }

    # Размеры для плоской (одномерной) сетки; для вложенных строк не нужны
    width: int | None = None
    height: int | None = None
    # Явный список уровней или их количество
    thresholds: list[float] | int = DEFAULT_THRESHOLD_COUNT
    # Линейная интерполяция точек на рёбрах (иначе середина ребра)
    smoothing: bool = True
    # Параллельная обработка уровней
    workers: int = CONTOUR_PARALLEL_WORKERS

    @field_validator('width', 'height')
    @classmethod
    def validate_dimensions(cls, v: int | None) -> int | None:
        if v is not None and v < 1:
            msg = 'Размер сетки должен быть положительным'
            raise ValueError(msg)
        return v

    @field_validator('workers')
    @classmethod
    def validate_workers(cls, v: int) -> int:
        # Не меньше одного воркера
        return max(int(v), 1)

    def size(self, width: int, height: int) -> ContourSettings:
        return self.model_copy(update={'width': width, 'height': height})

    def with_thresholds(self, thresholds: list[float] | int) -> ContourSettings:
        return self.model_copy(update={'thresholds': thresholds})

    def smooth(self, smoothing: bool) -> ContourSettings:
        return self.model_copy(update={'smoothing': smoothing})

    def with_workers(self, workers: int) -> ContourSettings:
        return self.model_copy(update={'workers': max(int(workers), 1)})


class DensitySettings(BaseModel):
    """Параметры оценки плотности точек (гауссово ядро)."""

    model_config = {
        'frozen': True,
        'extra': 'ignore',
    }

    # Размер области в координатах точек
    width: int = DENSITY_DEFAULT_WIDTH
    height: int = DENSITY_DEFAULT_HEIGHT
    # Шаг сетки плотности
    cell_size: int = DENSITY_DEFAULT_CELL_SIZE
    # Ширина ядра (стандартное отклонение) в координатах точек
    bandwidth: float = DENSITY_DEFAULT_BANDWIDTH
    thresholds: list[float] | int = DENSITY_DEFAULT_THRESHOLDS

    @field_validator('width', 'height', 'cell_size')
    @classmethod
    def validate_positive_int(cls, v: int) -> int:
        if v < 1:
            msg = 'Значение должно быть положительным'
            raise ValueError(msg)
        return v

    @field_validator('bandwidth')
    @classmethod
    def validate_bandwidth(cls, v: float | str) -> float:
        fv = float(v)
        if fv <= 0.0:
            msg = 'Ширина ядра должна быть положительной'
            raise ValueError(msg)
        return fv

    @property
    def grid_width(self) -> int:
        return self.width // self.cell_size + 1

    @property
    def grid_height(self) -> int:
        return self.height // self.cell_size + 1


class Profile(BaseModel):
    """Профиль TOML: секции [contours] и [density]."""

    model_config = {
        'extra': 'ignore',
    }

    contours: ContourSettings = Field(default_factory=ContourSettings)
    density: DensitySettings = Field(default_factory=DensitySettings)
