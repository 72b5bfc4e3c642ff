# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import pythonjsonlogger.json
from rich.console import Console
from rich.logging import RichHandler


def get_program_invocation() -> str:
    """Returns the name the current process was started as."""
    script = sys.argv[0] if sys.argv and sys.argv[0] else ""
    if not script or script == "-c":
        return "argtree"
    name = Path(script).name
    if name == "__main__.py":
        return f"python -m {Path(script).parent.name}"
    return name


CONTAINER_MARKERS = ("docker", "kubepods", "containerd", "podman")


def running_in_container() -> bool:
    try:
        cgroup = Path("/proc/1/cgroup").read_text(encoding="UTF-8")
    except OSError:
        return False
    return any(marker in cgroup for marker in CONTAINER_MARKERS)


JSON_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def _console_handler(mode: str) -> logging.Handler:
    if mode == "cli":
        return RichHandler(
            console=Console(stderr=True),
            show_path=False,
            markup=False,
            log_time_format="[%H:%M:%S]",
        )
    if mode == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_FORMAT))
        return handler
    raise ValueError(f"Invalid log mode: {mode!r} (expected 'cli' or 'json')")


def setup_logging(
    mode: str | None = None,
    level: int = logging.WARNING,
    log_filename: str | None = None,
) -> logging.Logger:
    """
    Attach output handlers to the "argtree" logger.

    argtree logs resolution and binding steps at DEBUG and dispatches at INFO.
    Nothing is shown until an application calls this. Only the "argtree" logger is
    configured, so the application's own root logging setup is left alone, and
    calling it again replaces the handlers installed by the previous call.

    Args:
        mode (str | None): "cli" for Rich console output or "json" for one JSON
            object per record. Defaults to `ARGTREE_LOG_MODE`, then to "json"
            inside a container and "cli" elsewhere.
        level (int): Minimum level written to the console.
        log_filename (str | None): Also write every record, DEBUG included, to this
            file as JSON.

    Returns:
        logging.Logger: The configured "argtree" logger.

    Raises:
        ValueError: If `mode` is not "cli" or "json".
    """
    mode = mode or os.getenv("ARGTREE_LOG_MODE") or (
        "json" if running_in_container() else "cli"
    )
    console_handler = _console_handler(mode)
    console_handler.setLevel(level)

    argtree_logger = logging.getLogger("argtree")
    for handler in argtree_logger.handlers[:]:
        argtree_logger.removeHandler(handler)
        handler.close()
    argtree_logger.addHandler(console_handler)
    argtree_logger.setLevel(logging.DEBUG if log_filename else level)
    argtree_logger.propagate = False

    if log_filename:
        file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
        file_handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_FORMAT))
        argtree_logger.addHandler(file_handler)

    argtree_logger.debug("Logging initialized in '%s' mode.", mode)
    return argtree_logger
