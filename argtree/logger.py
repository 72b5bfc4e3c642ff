# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Package-wide logger. Configure handlers with `argtree.utils.setup_logging`."""
import logging

logger: logging.Logger = logging.getLogger("argtree")
