import json
import logging
import sys

import click

_TAGS = {
    logging.INFO: ("INFO", "green"),
    logging.WARNING: ("WARN", "yellow"),
    logging.ERROR: ("ERROR", "red"),
}


class ConsoleFormatter(logging.Formatter):
    """Render records as '[INFO] message', colored unless disabled."""

    def __init__(self, color: bool = True):
        super().__init__("%(message)s")
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        tag, fg = _TAGS.get(record.levelno, (record.levelname, None))
        msg = super().format(record)
        if self.color and fg:
            return click.style(f"[{tag}]", fg=fg) + f" {msg}"
        return f"[{tag}] {msg}"


class _VersionerHandler(logging.StreamHandler):
    pass


def configure_logger(color: bool = True, structured: bool = False) -> logging.Logger:
    logger = logging.getLogger("versioner")
    # swap our handler each run so it writes to the current sys.stderr
    for h in [h for h in logger.handlers if isinstance(h, _VersionerHandler)]:
        logger.removeHandler(h)
    handler = _VersionerHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s") if structured else ConsoleFormatter(color))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    return logger


class Reporter:
    """Console reporter; emits either tagged lines or one JSON object per event."""

    def __init__(self, logger: logging.Logger, structured: bool = False):
        self.logger = logger
        self.structured = structured

    def _emit(self, level: int, event: str, message: str, fields: dict) -> None:
        if self.structured:
            payload = {"event": event, "level": logging.getLevelName(level).lower(), "message": message}
            payload.update(fields)
            self.logger.log(level, json.dumps(payload))
        else:
            self.logger.log(level, message)

    def info(self, message: str, event: str = "info", **fields) -> None:
        self._emit(logging.INFO, event, message, fields)

    def warning(self, message: str, event: str = "warning", **fields) -> None:
        self._emit(logging.WARNING, event, message, fields)

    def error(self, message: str, event: str = "error", **fields) -> None:
        self._emit(logging.ERROR, event, message, fields)
