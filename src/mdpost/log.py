"""Logging setup for the mdpost logger hierarchy"""

import logging

import typer


LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

_handler: logging.Handler = None


class EchoHandler(logging.Handler):
    """Write records to stderr through typer.echo so output follows the active stream."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            typer.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Attach one EchoHandler to the 'mdpost' logger and set its level. Safe to call repeatedly."""
    global _handler
    logger = logging.getLogger("mdpost")
    if _handler is None:
        _handler = EchoHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(_handler)
    logger.setLevel(level.upper())
    return logger
