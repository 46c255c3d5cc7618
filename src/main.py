"""Command-line entry point for isoline-mapper."""

import argparse
import json
import logging
import sys
from pathlib import Path

import numpy as np

from contours import InvalidGridError, compute_with_settings, density_contours
from domain.models import Profile
from domain.profiles import load_profile
from render.commands import Close, Line, Move, render_results
from shared.constants import LOG_FORMAT, OutputFormat, default_output_format

logger = logging.getLogger(__name__)


def setup_logging(*, verbose: bool = False, log_file: Path | None = None) -> None:
    """Configure application logging to stderr and an optional file."""
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(str(log_file), encoding='utf-8'))
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )


def read_grid(path: Path) -> tuple[list | np.ndarray, int | None, int | None]:
    """
    Read samples from .npy, .csv/.txt or .json.

    JSON may hold nested rows or an object {"values": [...], "width": w, "height": h}.
    Returns (grid, width, height); dimensions are None for nested input.
    """
    suffix = path.suffix.lower()
    if suffix == '.npy':
        return np.load(path), None, None
    if suffix in {'.csv', '.txt'}:
        return np.loadtxt(path, delimiter=',', ndmin=2), None, None
    data = json.loads(path.read_text(encoding='utf-8'))
    if isinstance(data, dict):
        return data.get('values', []), data.get('width'), data.get('height')
    return data, None, None


def _command_to_json(cmd: Move | Line | Close) -> list:
    if isinstance(cmd, Move):
        return ['M', cmd.x, cmd.y]
    if isinstance(cmd, Line):
        return ['L', cmd.x, cmd.y]
    return ['Z']


def format_results(results: list, output_format: OutputFormat) -> list[dict]:
    if output_format == OutputFormat.GEOJSON:
        return [r.to_geojson() for r in results]
    rendered = render_results(results)
    if output_format == OutputFormat.PATH:
        return [{'value': r.threshold, 'path': r.path} for r in rendered]
    return [
        {'value': r.threshold, 'commands': [_command_to_json(c) for c in r.commands]}
        for r in rendered
    ]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='isoline-mapper',
        description='Построение изолиний (marching squares) по сетке значений',
    )
    parser.add_argument('input', type=Path, help='Сетка (.json, .npy, .csv) или точки (.json)')
    levels = parser.add_mutually_exclusive_group()
    levels.add_argument(
        '--thresholds', type=float, nargs='+', help='Явный список уровней'
    )
    levels.add_argument('--levels', type=int, help='Количество равномерных уровней')
    parser.add_argument(
        '--no-smooth', action='store_true', help='Точки в серединах рёбер'
    )
    parser.add_argument(
        '--format',
        choices=[f.value for f in OutputFormat],
        default=default_output_format().value,
        help='Формат вывода',
    )
    parser.add_argument('--profile', type=Path, help='Профиль TOML')
    parser.add_argument('--workers', type=int, help='Количество потоков')
    parser.add_argument(
        '--density', action='store_true', help='Вход: точки, строить изолинии плотности'
    )
    parser.add_argument('-o', '--output', type=Path, help='Файл результата (JSON)')
    parser.add_argument('--log-file', type=Path, help='Файл журнала')
    parser.add_argument('-v', '--verbose', action='store_true', help='Отладочный журнал')
    return parser


def run(args: argparse.Namespace) -> list[dict]:
    profile = load_profile(args.profile) if args.profile else Profile()

    if args.density:
        settings = profile.density
        if args.thresholds is not None:
            settings = settings.model_copy(update={'thresholds': args.thresholds})
        elif args.levels is not None:
            settings = settings.model_copy(update={'thresholds': args.levels})
        points = json.loads(args.input.read_text(encoding='utf-8'))
        results = density_contours(points, settings)
    else:
        settings = profile.contours
        if args.thresholds is not None:
            settings = settings.with_thresholds(args.thresholds)
        elif args.levels is not None:
            settings = settings.with_thresholds(args.levels)
        if args.no_smooth:
            settings = settings.smooth(False)
        if args.workers is not None:
            settings = settings.with_workers(args.workers)
        grid, width, height = read_grid(args.input)
        if width is not None and height is not None:
            settings = settings.size(int(width), int(height))
        results = compute_with_settings(grid, settings)

    logger.info('Built contours for %d levels from %s', len(results), args.input)
    return format_results(results, OutputFormat(args.format))


def main(argv: list[str] | None = None) -> int:
    """Main application entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.density and (args.no_smooth or args.workers is not None):
        # Для плотности сглаживание и число потоков не настраиваются
        parser.error('--density нельзя сочетать с --no-smooth и --workers')
    setup_logging(verbose=args.verbose, log_file=args.log_file)

    try:
        payload = run(args)
    except (InvalidGridError, ValueError, OSError) as e:
        logger.error('Failed to build contours: %s', e)
        return 2

    text = json.dumps(payload)
    if args.output:
        args.output.write_text(text, encoding='utf-8')
        logger.info('Saved %s', args.output)
    else:
        sys.stdout.write(text + '\n')
    return 0


if __name__ == '__main__':
    sys.exit(main())
