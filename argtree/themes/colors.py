# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Colour palette and rich theme used by argtree help and error rendering.

Rendering code never uses hex colours directly; it refers to the named styles of
`get_theme()` (`[argtree.error]`, `[argtree.flag]`, ...). `OneColors` holds the
palette those styles are built from. Names ending in `_b` are the bold variants.
"""
from rich.theme import Theme


class OneColors:
    COMMENT_GREY = "#5C6370"
    DARK_RED = "#BE5046"
    GREEN = "#98C379"
    LIGHT_YELLOW = "#E5C07B"
    BLUE = "#61AFEF"
    CYAN = "#56B6C2"

    CYAN_b = f"bold {CYAN}"
    GREEN_b = f"bold {GREEN}"
    DARK_RED_b = f"bold {DARK_RED}"


def get_theme() -> Theme:
    """Build a rich `Theme` with the named styles argtree uses in markup."""
    return Theme(
        {
            "argtree.group": OneColors.CYAN_b,
            "argtree.command": OneColors.GREEN_b,
            "argtree.flag": OneColors.LIGHT_YELLOW,
            "argtree.positional": OneColors.BLUE,
            "argtree.error": OneColors.DARK_RED_b,
            "argtree.dim": OneColors.COMMENT_GREY,
        }
    )
