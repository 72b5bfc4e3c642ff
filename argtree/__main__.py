"""
Argtree CLI Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.

Run a command tree declared in a YAML or TOML file:

    python -m argtree shop.yaml trading sell Ryan 12400
    ARGTREE_CONFIG=shop.yaml python -m argtree trading sell Ryan 12400
"""

import os
import sys
from pathlib import Path
from typing import Sequence

from rich.markup import escape

from argtree.config import loader
from argtree.console import console
from argtree.exceptions import ConfigError

CONFIG_SUFFIXES = (".yaml", ".yml", ".toml")


def split_config_path(argv: Sequence[str]) -> tuple[Path | None, list[str]]:
    """Return the config file to load and the tokens to parse with it."""
    tokens = list(argv)
    env_path = os.environ.get("ARGTREE_CONFIG")
    if env_path:
        return Path(env_path), tokens
    if tokens and tokens[0].endswith(CONFIG_SUFFIXES):
        return Path(tokens[0]), tokens[1:]
    return None, tokens


def main(argv: Sequence[str] | None = None) -> int:
    config_path, tokens = split_config_path(sys.argv[1:] if argv is None else argv)
    if config_path is None:
        console.print(
            "[argtree.error]❌ No config file given.[/] "
            "usage: python -m argtree CONFIG [TOKENS ...] "
            "(or set ARGTREE_CONFIG)"
        )
        return 2
    if str(config_path.parent) not in sys.path:
        sys.path.insert(0, str(config_path.parent))
    try:
        program = loader(config_path)
    except ConfigError as error:
        console.print(f"[argtree.error]❌ {escape(str(error))}[/]")
        return 2
    return program.run(tokens)


if __name__ == "__main__":
    sys.exit(main())
