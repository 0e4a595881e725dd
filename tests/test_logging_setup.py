# path: tests/test_logging_setup.py
import logging
import os
import tempfile

from simple_beam.domain.beam import BeamSpec, Units
from simple_beam.domain.loads import PointLoad
from simple_beam.domain.supports import PinRoller
from simple_beam.engine.analysis import analyze
from simple_beam.services.logging_setup import setup_logging


def test_setup_logging_is_idempotent():
    logger = logging.getLogger("simple_beam")
    previous = list(logger.handlers)
    for h in previous:
        logger.removeHandler(h)

    with tempfile.TemporaryDirectory() as td:
        try:
            lg = setup_logging(log_dir=td, log_name="test.log")
            n = len(lg.handlers)
            assert n == 2
            assert setup_logging(log_dir=td, log_name="test.log") is lg
            assert len(lg.handlers) == n

            lg.info("mensaje de prueba")
            for h in lg.handlers:
                h.flush()
            assert os.path.exists(os.path.join(td, "test.log"))
        finally:
            for h in list(logger.handlers):
                logger.removeHandler(h)
                h.close()
            for h in previous:
                logger.addHandler(h)


def test_debug_level_records_engine_details():
    logger = logging.getLogger("simple_beam")
    previous = list(logger.handlers)
    previous_level = logger.level
    for h in previous:
        logger.removeHandler(h)

    with tempfile.TemporaryDirectory() as td:
        try:
            lg = setup_logging(log_dir=td, log_name="engine.log", level=logging.INFO)
            assert all(h.level == logging.INFO for h in lg.handlers)

            lg = setup_logging(log_dir=td, log_name="engine.log", level=logging.DEBUG)
            assert lg.level == logging.DEBUG
            assert all(h.level == logging.DEBUG for h in lg.handlers)

            res = analyze(
                BeamSpec(10.0, Units("m", "kN")),
                PinRoller(pin_x=0.0, roller_x=10.0),
                [PointLoad("P1", 5.0, 10.0)],
            )
            assert res.is_valid
            for h in lg.handlers:
                h.flush()

            with open(os.path.join(td, "engine.log"), encoding="utf-8") as f:
                text = f.read()
            assert "Reacciones:" in text
            assert "Análisis OK" in text
        finally:
            for h in list(logger.handlers):
                logger.removeHandler(h)
                h.close()
            for h in previous:
                logger.addHandler(h)
            logger.setLevel(previous_level)
