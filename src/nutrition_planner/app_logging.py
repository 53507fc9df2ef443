"""Logging configuration helpers."""

import logging


def configure_logging(*, debug: bool = False) -> None:
    """Configure the package logger; ``debug`` lowers the level to DEBUG.

    The level is applied on every call, while the stream handler is only
    attached once.
    """
    logger = logging.getLogger("nutrition_planner")
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s: %(name)s: %(message)s")
    )
    logger.addHandler(handler)
    logger.propagate = False
