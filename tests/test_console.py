import json
import logging

import click

from versioner.console import ConsoleFormatter, Reporter, configure_logger


def _record(level, msg):
    return logging.LogRecord("versioner", level, __file__, 1, msg, None, None)


def test_plain_tags():
    fmt = ConsoleFormatter(color=False)
    assert fmt.format(_record(logging.INFO, "hello")) == "[INFO] hello"
    assert fmt.format(_record(logging.WARNING, "careful")) == "[WARN] careful"
    assert fmt.format(_record(logging.ERROR, "bad")) == "[ERROR] bad"


def test_colored_tags():
    fmt = ConsoleFormatter(color=True)
    assert fmt.format(_record(logging.INFO, "hi")) == click.style("[INFO]", fg="green") + " hi"
    assert fmt.format(_record(logging.WARNING, "w")) == click.style("[WARN]", fg="yellow") + " w"
    assert fmt.format(_record(logging.ERROR, "e")) == click.style("[ERROR]", fg="red") + " e"


def test_configure_logger_replaces_own_handler():
    logger = configure_logger(color=False)
    configure_logger(color=False)
    ours = [h for h in logger.handlers if type(h).__name__ == "_VersionerHandler"]
    assert len(ours) == 1
    assert logger.level == logging.INFO


def test_structured_reporter(caplog):
    logger = logging.getLogger("versioner")
    rep = Reporter(logger, structured=True)
    with caplog.at_level(logging.INFO, logger="versioner"):
        rep.warning("Hotfix detected: 1.2.4", event="version_resolved", version="1.2.4")
    payload = json.loads(caplog.records[-1].getMessage())
    assert payload == {
        "event": "version_resolved",
        "level": "warning",
        "message": "Hotfix detected: 1.2.4",
        "version": "1.2.4",
    }


def test_plain_reporter(caplog):
    rep = Reporter(logging.getLogger("versioner"))
    with caplog.at_level(logging.INFO, logger="versioner"):
        rep.info("Branch: main", event="branch", branch="main")
    assert caplog.records[-1].getMessage() == "Branch: main"
