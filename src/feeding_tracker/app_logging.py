"""Logging setup for the feeding tracker package."""

import logging

PACKAGE_LOGGER = "feeding_tracker"
# record attributes set through ``extra=`` by the services and adapters
_CONTEXT_FIELDS = ("feeding_ids", "raw")


class ContextFormatter(logging.Formatter):
    """Append known ``extra`` context to the formatted message."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        context = [
            f"{name}={getattr(record, name)!r}"
            for name in _CONTEXT_FIELDS
            if hasattr(record, name)
        ]
        if context:
            return f"{message} [{' '.join(context)}]"
        return message


def configure_logging(level: int | str = logging.INFO) -> None:
    """Attach one stream handler to the package logger; safe to call repeatedly."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(ContextFormatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
