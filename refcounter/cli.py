"""Command line interface for counting references in a planning workbook."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Iterable, List, Optional

from tabulate import tabulate

from .config import AppConfig, load_config
from .errors import ParseError
from .reporting import export_tally
from .session import CounterSession
from .tally import tally_frame

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config/config.yaml")
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Count references of the selected rows of a 'Plan' sheet"
    )
    parser.add_argument("input", type=Path, help="Workbook (.xlsx or .xls) containing a 'Plan' sheet")
    parser.add_argument(
        "--select",
        action="append",
        default=[],
        help="Row indices to select, comma separated (repeatable)",
    )
    parser.add_argument("--config", type=Path, help="Path to YAML configuration")
    parser.add_argument("--output-dir", type=Path, help="Directory for the exported counts")
    parser.add_argument("--filename", help="Name of the exported counts file")
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, WARNING)")
    parser.add_argument("--quiet", action="store_true", help="Suppress console summary output")
    return parser


def main(argv: Optional[Iterable[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(_config_path(args.config))
        _apply_overrides(config, args)
    except Exception as exc:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
        logger.error("Failed to load configuration: %s", exc)
        return 1

    level_name = (args.log_level or config.logging.level).upper()
    logging.basicConfig(level=getattr(logging, level_name, logging.INFO), format=LOG_FORMAT)

    try:
        indices = _parse_indices(args.select)
    except ValueError as exc:
        logger.error("Invalid row selection: %s", exc)
        return 1

    session = CounterSession()
    try:
        session.parse_file(args.input)
    except (ParseError, FileNotFoundError) as exc:
        logger.error("Failed to load workbook: %s", exc)
        return 1

    for index in indices:
        session.toggle_row(index)

    tally = session.store.tally
    try:
        path = export_tally(tally, config.export)
    except OSError as exc:
        logger.exception("Failed to export reference counts: %s", exc)
        return 1

    if not args.quiet:
        _print_summary(session, path)

    return 0


def _config_path(path: Optional[Path]) -> Optional[Path]:
    if path is not None:
        return path
    if DEFAULT_CONFIG_PATH.exists():
        return DEFAULT_CONFIG_PATH
    return None


def _apply_overrides(config: AppConfig, args: argparse.Namespace) -> None:
    if args.output_dir:
        config.export.directory = _resolve_override_path(args.output_dir)

    if args.filename:
        filename = args.filename.strip()
        if not filename:
            raise ValueError("Export filename must not be empty")
        config.export.filename = filename


def _parse_indices(values: Iterable[str]) -> List[int]:
    indices: List[int] = []
    for value in values:
        for part in value.split(","):
            part = part.strip()
            if not part:
                continue
            indices.append(int(part))
    return indices


def _resolve_override_path(path: Path) -> Path:
    path = Path(path).expanduser()
    if path.is_absolute():
        return path
    return (Path.cwd() / path).resolve()


def _print_summary(session: CounterSession, path: Path) -> None:
    store = session.store
    selected = store.selected_indices()
    print(f"Rows loaded: {len(store)}, selected: {len(selected)}")
    frame = tally_frame(store.tally)
    if frame.empty:
        print("No rows selected.")
    else:
        print(tabulate(frame, headers="keys", tablefmt="github", showindex=False))
    print(f"Exported counts to {path}")


if __name__ == "__main__":  # pragma: no cover - manual execution entry point
    raise SystemExit(main())
