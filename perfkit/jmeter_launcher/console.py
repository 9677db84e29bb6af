"""Colored, prefixed console output for launcher log records."""

import logging

import typer

SUCCESS = 25
logging.addLevelName(SUCCESS, "SUCCESS")

_STYLES = {
    logging.DEBUG: ("DEBUG", None),
    logging.INFO: ("INFO", typer.colors.BLUE),
    SUCCESS: ("SUCCESS", typer.colors.GREEN),
    logging.WARNING: ("WARN", typer.colors.YELLOW),
    logging.ERROR: ("ERROR", typer.colors.RED),
    logging.CRITICAL: ("ERROR", typer.colors.RED),
}


class ConsoleHandler(logging.Handler):
    """Render records as `[LEVEL] message` lines."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            prefix, color = _STYLES.get(record.levelno, (record.levelname, None))
            typer.secho(f"[{prefix}]", fg=color, bold=True, nl=False)
            typer.echo(f" {self.format(record)}")
        except Exception:  # pragma: no cover
            self.handleError(record)


def configure_logging(level: int = logging.INFO) -> None:
    """Route all launcher logging through the console handler."""
    handler = ConsoleHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    # Force reconfiguration so repeated invocations do not stack handlers
    logging.basicConfig(level=level, handlers=[handler], force=True)
