"""Application entry point for clipguard."""

from __future__ import annotations

import argparse
import json
import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

from art import tprint

import settings
from adapters.clock import SystemClock
from adapters.config_transport import transport_from_config
from adapters.verdict_formatting import format_verdict
from core.processor import GuardEngine

NAME = "CLIPGUARD"
FONT = "tarty-1"

LOGGER = logging.getLogger(__name__)


def _print_banner() -> None:
    tprint(NAME, FONT, space=1)


def _configure_logging() -> None:
    config = settings.LOGGING or {}
    if not config.get("enabled", False):
        return

    level_name = str(config.get("level", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

    handlers: list[logging.Handler] = []

    if config.get("console", True):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    file_cfg = config.get("file", {})
    if file_cfg.get("enabled", False):
        path = file_cfg.get("path", "logs/clipguard.log")
        if not os.path.isabs(path):
            path = os.path.join(settings.PROJECT_ROOT, path)
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        max_bytes = int(file_cfg.get("max_bytes", 5 * 1024 * 1024))
        backup_count = int(file_cfg.get("backup_count", 5))
        file_handler = RotatingFileHandler(
            path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if not handlers:
        return

    logging.basicConfig(level=level, handlers=handlers)


def build_engine() -> GuardEngine:
    """Create an engine seeded from config.json and stopwords.json."""

    engine = GuardEngine(SystemClock())
    engine.init(settings.ENGINE_OVERRIDES, settings.NOISE_WORDS)
    return engine


def _read_text(path: str) -> str:
    with open(path, "r", encoding="utf-8") as handle:
        return handle.read()


def _scan(capture_paths: list[str], paste_path: str) -> int:
    engine = build_engine()

    for path in capture_paths:
        if not engine.add(_read_text(path)):
            LOGGER.warning("Capture %s was not stored (too short or only noise words)", path)
    LOGGER.info("%s captures in vault", engine.count())

    verdict = engine.check(_read_text(paste_path))
    print(format_verdict(verdict, engine.config(), mode="text"))
    return 1 if verdict.blocked else 0


def _show_config() -> int:
    engine = build_engine()
    print(json.dumps(transport_from_config(engine.config()), indent=2))
    return 0


def _run_ui() -> int:
    _print_banner()
    from frontend.app import GuardPanelApp

    GuardPanelApp(build_engine()).run()
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="clipguard")
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("ui", help="Launch the copy/paste workspace panel")
    scan = subparsers.add_parser(
        "scan",
        help="Capture files into the vault, then check a paste file (exit 1 when blocked)",
    )
    scan.add_argument("--capture", action="append", required=True, metavar="FILE")
    scan.add_argument("--paste", required=True, metavar="FILE")
    subparsers.add_parser("config", help="Print the effective engine config as JSON")

    args = parser.parse_args(argv)
    _configure_logging()

    if args.command == "scan":
        return _scan(args.capture, args.paste)
    if args.command == "config":
        return _show_config()
    return _run_ui()


if __name__ == "__main__":
    raise SystemExit(main())
