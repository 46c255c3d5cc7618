from __future__ import annotations

from typing import TYPE_CHECKING

from render.draw import Close, Line, Move
from shared.constants import PATH_NUMBER_PRECISION

if TYPE_CHECKING:
    from collections.abc import Iterable

    from render.draw import DrawCommand


def format_number(n: float) -> str:
    """Floats are rounded to three decimals, integers are printed as is."""
    if isinstance(n, float):
        return str(round(n, PATH_NUMBER_PRECISION))
    return str(n)


def to_path_data(commands: Iterable[DrawCommand]) -> str:
    """Path data string (``M1,2L3,4Z``) for a sequence of draw commands."""
    parts: list[str] = []
    for cmd in commands:
        if isinstance(cmd, Move):
            parts.append(f'M{format_number(cmd.x)},{format_number(cmd.y)}')
        elif isinstance(cmd, Line):
            parts.append(f'L{format_number(cmd.x)},{format_number(cmd.y)}')
        elif isinstance(cmd, Close):
            parts.append('Z')
        else:
            msg = f'Unknown draw command: {cmd!r}'
            raise TypeError(msg)
    return ''.join(parts)
