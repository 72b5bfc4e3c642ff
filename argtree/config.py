# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Program settings and a loader that builds a program from a YAML or TOML file.

`ProgramSettings` holds the runtime knobs of a `Program`: the help layout width,
the exit codes returned after help or error output, and whether `-h` / `--help`
are reserved.

`loader()` reads a declarative tree:

    settings:
      program: shop
      width: 100
    groups:
      - name: trading
        description: Buy and sell
        commands:
          - name: sell
            description: Sell an item
            handler: shop.handlers.sell
            positionals:
              - name: name
              - name: price
                type: double
            flags:
              - name: receipt
                short: r
              - name: discount
                type: float
                default: 0.0
"""
from __future__ import annotations

import importlib
from pathlib import Path
from typing import TYPE_CHECKING, Any

import toml
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from argtree.argument import MISSING
from argtree.exceptions import ConfigError, ConversionError, InvalidDefaultError
from argtree.logger import logger
from argtree.registry import ConversionRegistry

if TYPE_CHECKING:
    from argtree.command import Command, CommandGroup
    from argtree.program import Program

MAX_DEPTH = 16


class ProgramSettings(BaseModel):
    """
    Runtime settings of a `Program`.

    Attributes:
        program (str | None): Program name on usage lines. Defaults to the name the
            process was invoked with.
        description (str): Text shown above the top-level listing.
        width (int): Column budget for help and error layout.
        error_exit_code (int): Status returned after rendering a usage error.
        help_exit_code (int): Status returned after rendering requested help.
        help_enabled (bool): Reserve `-h` / `--help` for help output.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    program: str | None = None
    description: str = ""
    width: int = Field(default=80, ge=40)
    error_exit_code: int = 0
    help_exit_code: int = 0
    help_enabled: bool = True


def import_object(dotted_path: str) -> Any:
    """Import an attribute from a dotted path like 'my.module.func'."""
    module_path, _, attr = dotted_path.rpartition(".")
    if not module_path:
        raise ConfigError(f"Invalid import path: '{dotted_path}'")
    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as error:
        logger.error("Failed to import module '%s': %s", module_path, error)
        raise ConfigError(
            f"Could not import '{dotted_path}': {error}. Ensure the module is "
            "installed and discoverable via PYTHONPATH."
        ) from error
    try:
        return getattr(module, attr)
    except AttributeError as error:
        logger.error(
            "Module '%s' does not have attribute '%s': %s", module_path, attr, error
        )
        raise ConfigError(
            f"Module '{module_path}' has no attribute '{attr}'"
        ) from error


class RawPositional(BaseModel):
    """Positional argument entry of a config file."""

    model_config = ConfigDict(extra="forbid")

    name: str
    help: str = ""
    type: str = "str"


class RawFlag(BaseModel):
    """Flag entry of a config file. Omit `type` for a boolean switch."""

    model_config = ConfigDict(extra="forbid")

    name: str
    help: str = ""
    short: str | None = None
    type: str | None = None
    default: Any = None


class RawCommand(BaseModel):
    """Command entry of a config file."""

    model_config = ConfigDict(extra="forbid")

    name: str
    description: str = ""
    handler: str
    positionals: list[RawPositional] = Field(default_factory=list)
    flags: list[RawFlag] = Field(default_factory=list)


class RawGroup(BaseModel):
    """Group entry of a config file; groups nest."""

    model_config = ConfigDict(extra="forbid")

    name: str
    description: str = ""
    groups: list[RawGroup] = Field(default_factory=list)
    commands: list[RawCommand] = Field(default_factory=list)


RawGroup.model_rebuild()


class TreeConfig(BaseModel):
    """Top level of a config file."""

    model_config = ConfigDict(extra="forbid")

    settings: ProgramSettings = Field(default_factory=ProgramSettings)
    types: dict[str, str] = Field(default_factory=dict)
    groups: list[RawGroup] = Field(default_factory=list)
    commands: list[RawCommand] = Field(default_factory=list)

    @field_validator("types")
    @classmethod
    def validate_types(cls, value: dict[str, str]) -> dict[str, str]:
        for tag, path in value.items():
            if "." not in path:
                raise ValueError(f"Converter for '{tag}' must be a dotted import path")
        return value


def resolve_type(type_text: str, registry: ConversionRegistry) -> Any:
    """Map a config type name to a type tag the registry understands."""
    if type_text in registry:
        return type_text
    if "." in type_text:
        type_tag = import_object(type_text)
        if type_tag in registry:
            return type_tag
    raise ConfigError(f"Unknown argument type '{type_text}'")


def _build_command(
    parent: CommandGroup, raw: RawCommand, registry: ConversionRegistry
) -> Command:
    handler = import_object(raw.handler)
    command = parent.add_command(raw.name, raw.description, handler)
    for positional in raw.positionals:
        command.add_positional_argument(
            positional.name,
            positional.help,
            type=resolve_type(positional.type, registry),
        )
    for flag in raw.flags:
        if flag.type is None:
            if "default" in flag.model_fields_set:
                raise ConfigError(
                    f"Flag '{flag.name}' of '{raw.name}' is a switch and cannot "
                    "declare a default"
                )
            command.add_flag(flag.name, flag.help, short=flag.short)
            continue
        type_tag = resolve_type(flag.type, registry)
        default = MISSING
        if "default" in flag.model_fields_set:
            default = flag.default
            if isinstance(default, str) and type_tag not in (str, "str", "string"):
                try:
                    default = registry.convert(type_tag, default)
                except ConversionError as error:
                    raise ConfigError(
                        f"Default for flag '{flag.name}' of '{raw.name}': {error}"
                    ) from error
        try:
            command.add_flag(
                flag.name, flag.help, short=flag.short, type=type_tag, default=default
            )
        except InvalidDefaultError as error:
            raise ConfigError(
                f"Default for flag '{flag.name}' of '{raw.name}': {error}"
            ) from error
    return command


def _build_group(
    parent: CommandGroup, raw: RawGroup, registry: ConversionRegistry, depth: int
) -> None:
    if depth > MAX_DEPTH:
        raise ConfigError(f"Maximum group depth exceeded ({MAX_DEPTH} levels deep)")
    group = parent.add_command_group(raw.name, raw.description)
    for raw_group in raw.groups:
        _build_group(group, raw_group, registry, depth + 1)
    for raw_command in raw.commands:
        _build_command(group, raw_command, registry)


def read_config(path: Path) -> dict[str, Any]:
    """Read a YAML or TOML file into a dictionary."""
    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ConfigError(f"Unsupported config format: {suffix}")
    if raw_config is None:
        return {}
    if not isinstance(raw_config, dict):
        raise ConfigError(
            "Configuration file must contain a mapping with 'groups' and/or "
            "'commands'."
        )
    return raw_config


def loader(
    file_path: Path | str,
    registry: ConversionRegistry | None = None,
    **overrides: Any,
) -> Program:
    """
    Build a `Program` from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to a `.yaml`, `.yml` or `.toml` file.
        registry (ConversionRegistry | None): Registry with any custom converters
            the file refers to by name.
        **overrides: Settings that take precedence over the file's `settings`.

    Raises:
        ConfigError: If the file is missing, malformed, or refers to unknown
            handlers or types.
        BuildError: If the declared tree violates a naming rule.
    """
    from argtree.program import Program

    if not isinstance(file_path, (str, Path)):
        raise TypeError("file_path must be a string or Path object.")
    path = Path(file_path)
    if not path.is_file():
        raise ConfigError(f"No such config file: {file_path}")

    try:
        config = TreeConfig.model_validate(read_config(path))
    except ValidationError as error:
        raise ConfigError(f"Invalid config file '{path}':\n{error}") from error

    registry = registry or ConversionRegistry()
    for tag, converter_path in config.types.items():
        registry.register(tag, import_object(converter_path))

    program = Program(
        settings=ProgramSettings(**{**config.settings.model_dump(), **overrides}),
        registry=registry,
    )
    for raw_group in config.groups:
        _build_group(program.tree.root, raw_group, registry, depth=1)
    for raw_command in config.commands:
        _build_command(program.tree.root, raw_command, registry)
    logger.debug("Loaded %d nodes from '%s'.", len(program.tree), path)
    return program
