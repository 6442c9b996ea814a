"""Entry point for the sleep-window dial application."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from PySide6.QtWidgets import QApplication

from .config import DialConfig
from .engine import SleepDialEngine
from .gui import SleepDialWindow


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="sleepdial")
    p.add_argument("--config", help="INI file with [ring], [duration] and [ticks] sections")
    p.add_argument("--log-level", default="WARNING")
    return p.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Launch the PySide6 event loop and show the dial window."""
    args = _parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = DialConfig.load(args.config)
    app = QApplication(sys.argv[:1])
    window = SleepDialWindow(engine=SleepDialEngine(config=config))
    window.show()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
