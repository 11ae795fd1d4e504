from __future__ import annotations

import logging
import os


def setup_logging(debug: bool) -> None:
    level = logging.DEBUG if debug else logging.INFO
    # Env override wins over --debug so service units can raise or lower verbosity
    # without editing the command line
    level_name = os.getenv("LYRIC_FINDER_LOG_LEVEL")
    if level_name:
        level = getattr(logging, level_name.upper(), level)
        if not isinstance(level, int):
            level = logging.DEBUG if debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
