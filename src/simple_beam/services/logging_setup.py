# path: src/simple_beam/services/logging_setup.py
from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler


def setup_logging(
    log_dir: str = "logs",
    log_name: str = "simple_beam.log",
    level: int = logging.INFO,
) -> logging.Logger:
    os.makedirs(log_dir, exist_ok=True)
    log_path = os.path.join(log_dir, log_name)

    logger = logging.getLogger("simple_beam")
    logger.setLevel(level)

    # Evitar duplicar handlers si se llama más de una vez; sólo se ajusta el nivel
    if logger.handlers:
        for h in logger.handlers:
            h.setLevel(level)
        return logger

    fmt = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    )

    fh = RotatingFileHandler(log_path, maxBytes=2_000_000, backupCount=3, encoding="utf-8")
    fh.setLevel(level)
    fh.setFormatter(fmt)

    sh = logging.StreamHandler()
    sh.setLevel(level)
    sh.setFormatter(fmt)

    logger.addHandler(fh)
    logger.addHandler(sh)

    logger.info("Logging inicializado. Archivo: %s (nivel %s)", log_path, logging.getLevelName(level))
    return logger
