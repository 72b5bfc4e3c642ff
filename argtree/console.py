# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for argtree help and error output."""
from rich.console import Console

from argtree.themes import get_theme

console = Console(color_system="truecolor", theme=get_theme())
