# Отрисовка изолиний: команды пути и строка данных пути
from render.commands import (
    Close,
    DrawCommand,
    Line,
    Move,
    RenderedContour,
    polygon_commands,
    render,
    render_results,
    ring_commands,
)
from render.path import format_number, to_path_data

__all__ = [
    'Close',
    'DrawCommand',
    'Line',
    'Move',
    'RenderedContour',
    'format_number',
    'polygon_commands',
    'render',
    'render_results',
    'ring_commands',
    'to_path_data',
]
