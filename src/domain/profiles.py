import logging
from pathlib import Path

import tomlkit

from domain.models import Profile

logger = logging.getLogger(__name__)


def load_profile(path: str | Path) -> Profile:
    """
    Загрузка и валидация профиля TOML -> Profile.

    Отсутствующие секции получают значения по умолчанию.
    """
    path = Path(path)
    if not path.exists():
        msg = f'Профиль не найден: {path}'
        raise FileNotFoundError(msg)
    text = path.read_text(encoding='utf-8')
    data = tomlkit.parse(text).unwrap()
    profile = Profile.model_validate(data)
    logger.info(
        'Profile loaded from %s: thresholds=%s smoothing=%s',
        path,
        profile.contours.thresholds,
        profile.contours.smoothing,
    )
    return profile


def save_profile(path: str | Path, profile: Profile) -> Path:
    """Сохранение профиля в TOML (без атомарности и бэкапов)."""
    path = Path(path)
    # TOML не умеет null, незаданные размеры просто не пишем
    data = profile.model_dump(exclude_none=True)
    text = tomlkit.dumps(data)
    path.write_text(text, encoding='utf-8')
    return path
