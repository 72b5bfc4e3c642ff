"""
Argtree CLI Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .argument import MISSING, Argument, ArgumentKind
from .bag import ParameterBag
from .command import Command, CommandGroup
from .config import ProgramSettings, loader
from .program import Invocation, Program
from .registry import ConversionRegistry
from .version import __version__

logger = logging.getLogger("argtree")


__all__ = [
    "Program",
    "ProgramSettings",
    "Invocation",
    "Command",
    "CommandGroup",
    "Argument",
    "ArgumentKind",
    "MISSING",
    "ParameterBag",
    "ConversionRegistry",
    "loader",
    "__version__",
]
