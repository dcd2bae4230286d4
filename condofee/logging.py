import logging
import sys

from condofee.settings import settings

TEXT_FORMAT = "%(levelname)s %(name)s: %(message)s"
JSON_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _formatter() -> logging.Formatter:
    if settings.log_json:
        from pythonjsonlogger.json import JsonFormatter

        return JsonFormatter(fmt=JSON_FORMAT, rename_fields={"asctime": "timestamp", "levelname": "level"})
    return logging.Formatter(TEXT_FORMAT)


def configure_logging() -> None:
    """Route every condofee logger to a single stderr handler.

    Safe to call again: Alembic's ``fileConfig`` swaps the root handlers while
    migrations run, so ``main`` calls this once more after ``initialize_db()``.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_formatter())

    root = logging.getLogger()
    root.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
    root.handlers.clear()
    root.addHandler(handler)
