# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Binder: fills a command's arguments from the tokens left after resolution.

Token grammar:
- A token starting with `--` or `-` (and longer than `-` itself) is a flag token.
  It is matched against the long aliases first, then the short aliases.
- A boolean switch consumes only its own token.
- A typed flag consumes the token right after it as its raw value, whatever that
  token looks like.
- Every other token is positional. Positional tokens are collected in order and
  bound to the declared positionals by rank.

Flags may be interleaved anywhere. Each raw value goes through the
`ConversionRegistry` entry for the argument's type tag.

After binding, the bag holds every positional, every switch (True or False),
every typed flag with a default, and the typed flags without a default that the
user supplied.
"""
from __future__ import annotations

from copy import deepcopy
from difflib import get_close_matches
from typing import Any, NoReturn, Sequence

from argtree.argument import LONG_PREFIX, SHORT_PREFIX, Argument
from argtree.bag import ParameterBag, TaggedValue
from argtree.command import Command
from argtree.exceptions import (
    ConversionError,
    ExtraArgumentError,
    MissingFlagValueError,
    MissingPositionalError,
    UnrecognizedFlagError,
)
from argtree.logger import logger
from argtree.registry import ConversionRegistry
from argtree.resolver import HELP_TOKENS
from argtree.signals import HelpSignal


def is_flag_token(token: str) -> bool:
    """Return True if `token` has the shape of a flag (`--name` or `-n`)."""
    return token.startswith((LONG_PREFIX, SHORT_PREFIX)) and len(token) > 1


class Binder:
    """
    Binds tokens to a command's declared arguments.

    Args:
        registry (ConversionRegistry | None): Converters for type tags. A registry
            with only the built-ins is used when omitted.
        help_enabled (bool): Treat `-h` / `--help` as a help request.
    """

    def __init__(
        self, registry: ConversionRegistry | None = None, help_enabled: bool = True
    ) -> None:
        self.registry: ConversionRegistry = registry or ConversionRegistry()
        self.help_enabled: bool = help_enabled

    def _convert(self, command: Command, spec: Argument, raw: str) -> Any:
        try:
            value = self.registry.convert(spec.type, raw)
        except ConversionError as error:
            label = spec.name if spec.positional else spec.long_flag
            raise ConversionError(
                f"Invalid value for '{label}': {error}",
                type_tag=error.type_tag,
                raw=raw,
                argument=spec,
                command=command,
            ) from error.__cause__
        logger.debug("Bound '%s' = %r.", spec.name, value)
        return value

    def _raise_unrecognized(self, command: Command, token: str) -> NoReturn:
        known = [flag for arg in command.flags for flag in arg.flags]
        matches = get_close_matches(token, known, n=3, cutoff=0.6)
        if matches:
            message = (
                f"Unrecognized flag '{token}'. Did you mean one of: {', '.join(matches)}?"
            )
        else:
            message = f"Unrecognized flag '{token}'. Use --help to see available flags."
        raise UnrecognizedFlagError(message, command=command, token=token)

    def bind(self, command: Command, tokens: Sequence[str]) -> ParameterBag:
        """
        Bind `tokens` to `command` and return the resulting bag.

        Raises:
            UnrecognizedFlagError: A flag token matches no flag of the command.
            MissingFlagValueError: A typed flag has no following token.
            MissingPositionalError: Fewer positional tokens than declared.
            ExtraArgumentError: More positional tokens than declared.
            ConversionError: A raw value is not valid for its type.
            HelpSignal: `-h` / `--help` was given.
        """
        supplied: dict[str, TaggedValue] = {}
        positional_tokens: list[str] = []

        i = 0
        while i < len(tokens):
            token = tokens[i]
            if not is_flag_token(token):
                positional_tokens.append(token)
                i += 1
                continue

            if self.help_enabled and token in HELP_TOKENS:
                raise HelpSignal(command)

            spec = command.match_flag(token)
            if spec is None:
                self._raise_unrecognized(command, token)

            if spec.is_boolean:
                supplied[spec.name] = TaggedValue(bool, True)
                i += 1
                continue

            if i + 1 >= len(tokens):
                raise MissingFlagValueError(
                    f"Flag '{token}' requires a {spec.get_type_text()} value",
                    command=command,
                    argument=spec,
                    token=token,
                )
            raw = tokens[i + 1]
            supplied[spec.name] = TaggedValue(spec.type, self._convert(command, spec, raw))
            i += 2

        declared = command.positionals
        if len(positional_tokens) > len(declared):
            extra = positional_tokens[len(declared) :]
            plural = "s" if len(extra) > 1 else ""
            raise ExtraArgumentError(
                f"Unexpected extra argument{plural}: {', '.join(extra)}",
                command=command,
                token=extra[0],
            )
        if len(positional_tokens) < len(declared):
            missing = declared[len(positional_tokens)]
            help_text = f" ({missing.help})" if missing.help else ""
            raise MissingPositionalError(
                f"Missing positional argument '{missing.name}'{help_text}",
                command=command,
                argument=missing,
            )

        values: dict[str, TaggedValue] = {}
        for spec, raw in zip(declared, positional_tokens):
            values[spec.name] = TaggedValue(spec.type, self._convert(command, spec, raw))

        for spec in command.flags:
            if spec.name in supplied:
                values[spec.name] = supplied[spec.name]
            elif spec.is_boolean:
                values[spec.name] = TaggedValue(bool, False)
            elif spec.has_default:
                values[spec.name] = TaggedValue(spec.type, deepcopy(spec.default))

        return ParameterBag(values)
