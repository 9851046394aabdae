"""Structured logging configuration for estate-metrics."""

import logging
import sys
from typing import Any, TextIO

PACKAGE_LOGGER = "estate_metrics"

# Record attributes copied into JSON output when a call passes them via ``extra``
CONTEXT_FIELDS = ("property_id", "report_id", "configuration")


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
    stream: TextIO | None = None,
) -> logging.Handler:
    """Attach a console handler for estate-metrics records.

    The library never calls this itself; it only emits records on its
    module loggers. Calling it again replaces the handler it installed
    earlier and leaves any other root handlers alone.

    Parameters
    ----------
    level : str
        Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    format_type : str
        Format type: "standard" or "json".
    stream : TextIO | None
        Output stream, stdout by default.

    Returns
    -------
    logging.Handler
        The installed handler.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if format_type == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in package_logger.handlers[:]:
        if getattr(handler, "_estate_metrics", False):
            package_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(formatter)
    handler._estate_metrics = True  # type: ignore[attr-defined]

    package_logger.addHandler(handler)
    package_logger.setLevel(log_level)
    package_logger.propagate = False

    # Faker logs locale lookups at DEBUG
    logging.getLogger("faker").setLevel(logging.WARNING)
    return handler


class JsonFormatter(logging.Formatter):
    """One JSON object per record, with listing context when present."""

    def format(self, record: logging.LogRecord) -> str:
        import json
        from datetime import datetime, timezone

        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in CONTEXT_FIELDS:
            value = getattr(record, name, None)
            if value is not None:
                log_data[name] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False)


def get_logger(name: str) -> logging.Logger:
    """Get a logger inside the estate-metrics namespace.

    Parameters
    ----------
    name : str
        Logger name (usually __name__). Names outside the package are
        nested under it.

    Returns
    -------
    logging.Logger
        Logger whose records reach the handler from ``setup_logging``.
    """
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
