"""Logging setup shared by the command-line tools.

Library modules only call ``logging.getLogger(__name__)``; handlers are
attached exclusively by entrypoints through setup_logging().

Provides:
    - Console (stderr) and optional file handler, with size/time rotation
    - Human-readable or JSON-lines records
    - Contextual fields (scene=demo, app=render_scene) on every record,
      scoped with log_context() or push_context()/pop_context()
    - Uncaught exception logging (install_excepthook)

Format examples:
    Human: 2026-10-19T09:12:01.337Z | INFO     | app=render_scene scene=demo | Saved: out.ppm
    JSON:  {"t": "2026-10-19T09:12:01.337+00:00", "lvl": "INFO", "name": "...", "msg": "...", "scene": "demo"}

Invariants:
    - setup_logging() is idempotent: handlers it installed on a previous
      call are closed and replaced, handlers installed by anyone else stay
    - Context is held in a ContextVar, so nested log_context() blocks
      restore the outer fields on exit
"""

import contextvars
import json
import logging
import logging.handlers
import os
import sys
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

_context_var: contextvars.ContextVar = contextvars.ContextVar('rasterpen_log_context', default={})

# Handlers attached by the last setup_logging() call
_installed: List[logging.Handler] = []

_LEVEL_COLORS = {
    'DEBUG': '\033[36m',
    'INFO': '\033[32m',
    'WARNING': '\033[33m',
    'ERROR': '\033[31m',
    'CRITICAL': '\033[35m',
}
_RESET = '\033[0m'


# ============================================================================
# FORMATTERS
# ============================================================================

class _ContextFormatter(logging.Formatter):
    """Base formatter: UTC timestamp plus the active context fields."""

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        return self.render(record, ts, _context_var.get({}))

    def render(self, record: logging.LogRecord, ts: datetime, context: Dict[str, Any]) -> str:
        raise NotImplementedError


class HumanFormatter(_ContextFormatter):
    """``time | LEVEL | k=v ... | message`` lines, optionally colored."""

    def __init__(self, use_color: bool = False):
        super().__init__()
        self.use_color = use_color

    def render(self, record, ts, context):
        level = f"{record.levelname:8s}"
        if self.use_color:
            level = f"{_LEVEL_COLORS.get(record.levelname, '')}{level}{_RESET}"

        parts = [ts.strftime('%Y-%m-%dT%H:%M:%S.%f')[:-3] + 'Z', level]
        if context:
            parts.append(' '.join(f"{k}={v}" for k, v in context.items()))
        parts.append(record.getMessage())
        text = ' | '.join(parts)
        if record.exc_info:
            text += '\n' + self.formatException(record.exc_info)
        return text


class JsonFormatter(_ContextFormatter):
    """One JSON object per record; context fields are merged at top level."""

    def render(self, record, ts, context):
        payload = {
            't': ts.isoformat(),
            'lvl': record.levelname,
            'name': record.name,
            'pid': os.getpid(),
            'msg': record.getMessage(),
        }
        payload.update(context)
        if record.exc_info:
            payload['exc'] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def make_formatter(fmt_mode: str, use_color: bool = False) -> logging.Formatter:
    """Formatter for ``"human"`` or ``"json"``.

    Raises
    ------
    ValueError
        For any other mode
    """
    if fmt_mode == "human":
        return HumanFormatter(use_color)
    if fmt_mode == "json":
        return JsonFormatter()
    raise ValueError(f"Unknown log format: {fmt_mode}. Use 'human' or 'json'.")


# ============================================================================
# HANDLERS
# ============================================================================

def _size_handler(path: str, rotate: Dict[str, Any]) -> logging.Handler:
    return logging.handlers.RotatingFileHandler(
        path,
        maxBytes=rotate.get('max_bytes', 10_000_000),
        backupCount=rotate.get('backup_count', 3),
    )


def _time_handler(path: str, rotate: Dict[str, Any]) -> logging.Handler:
    return logging.handlers.TimedRotatingFileHandler(
        path,
        when=rotate.get('when', 'D'),
        interval=rotate.get('interval', 1),
        backupCount=rotate.get('backup_count', 7),
    )


_ROTATING = {'size': _size_handler, 'time': _time_handler}


def _file_handler(log_file: str, rotate: Optional[Dict[str, Any]]) -> logging.Handler:
    """Plain or rotating file handler; parent directories are created."""
    if rotate:
        mode = rotate.get('mode', 'size')
        if mode not in _ROTATING:
            raise ValueError(f"Unknown rotation mode: {mode}. Use 'size' or 'time'.")
    Path(log_file).parent.mkdir(parents=True, exist_ok=True)
    if not rotate:
        return logging.FileHandler(log_file)
    return _ROTATING[rotate.get('mode', 'size')](log_file, rotate)


# ============================================================================
# PUBLIC API
# ============================================================================

def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    *,
    json: bool = False,
    color: bool = True,
    to_stderr: bool = True,
    rotate: Optional[Dict[str, Any]] = None,
    context: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """Configure the root logger.

    Parameters
    ----------
    log_level : str
        "DEBUG", "INFO", "WARNING", "ERROR" or "CRITICAL" (any case)
    log_file : str, optional
        Log file path; None disables file logging
    json : bool
        JSON lines instead of human-readable lines, default False
    color : bool
        ANSI level colors on the console when stderr is a TTY
    to_stderr : bool
        Attach a console handler, default True
    rotate : dict, optional
        {"mode": "size", "max_bytes": ..., "backup_count": ...} or
        {"mode": "time", "when": "D", "interval": 1, "backup_count": ...}
    context : dict, optional
        Fields merged into the current context, e.g. {"app": "render_scene"}

    Returns
    -------
    dict
        {"handlers": [...]}, the handlers this call attached

    Raises
    ------
    ValueError
        If log_level or the rotation mode is unknown
    """
    level = getattr(logging, log_level.upper(), None)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")

    fmt_mode = "json" if json else "human"
    handlers: List[logging.Handler] = []
    if to_stderr:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(make_formatter(fmt_mode, color and sys.stderr.isatty()))
        handlers.append(console)
    if log_file:
        handler = _file_handler(log_file, rotate)
        handler.setFormatter(make_formatter(fmt_mode))
        handlers.append(handler)

    root = logging.getLogger()
    for old in _installed:
        root.removeHandler(old)
        old.close()
    _installed[:] = handlers
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)

    logging.getLogger("PIL").setLevel(logging.WARNING)
    logging.captureWarnings(True)

    if context:
        push_context(**context)
    return {'handlers': handlers}


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def set_level(level: str) -> None:
    """Change the root level at runtime."""
    logging.getLogger().setLevel(getattr(logging, level.upper()))


def push_context(**kwargs) -> None:
    """Merge fields into the context of all subsequent records.

    Examples
    --------
    >>> push_context(app="render_scene")
    >>> push_context(scene="demo")  # "... | app=render_scene scene=demo | ..."
    """
    _context_var.set({**_context_var.get({}), **kwargs})


def pop_context(keys: Optional[List[str]] = None) -> None:
    """Remove the given fields; all of them when keys is None."""
    if keys is None:
        _context_var.set({})
        return
    current = dict(_context_var.get({}))
    for key in keys:
        current.pop(key, None)
    _context_var.set(current)


def get_context() -> Dict[str, Any]:
    return dict(_context_var.get({}))


@contextmanager
def log_context(**kwargs) -> Iterator[None]:
    """Scope context fields to a block; the previous context is restored."""
    token = _context_var.set({**_context_var.get({}), **kwargs})
    try:
        yield
    finally:
        _context_var.reset(token)


def install_excepthook() -> None:
    """Log uncaught exceptions (except Ctrl+C) before the interpreter exits."""
    def log_exception(exc_type, exc_value, exc_traceback):
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return
        logging.getLogger(__name__).critical(
            "Uncaught exception",
            exc_info=(exc_type, exc_value, exc_traceback)
        )

    sys.excepthook = log_exception


def shutdown() -> None:
    """Flush and close all handlers (end of main())."""
    logging.shutdown()
