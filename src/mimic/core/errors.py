# topmark:header:start
#
#   project      : Mimic
#   file         : errors.py
#   file_relpath : src/mimic/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the Mimic parsing pipeline and header codec.

Every failure is raised synchronously at the point of detection; nothing in
the library retries or recovers. Callers can tell the failure kinds apart by
class and read the structured attributes to build a precise message:

- [`MissingArgumentError`][mimic.core.errors.MissingArgumentError]: a required
  argument (context, steps, cursor, state) was ``None``.
- [`SettingFormatError`][mimic.core.errors.SettingFormatError]: a definition line
  is not of the form ``name: value``.
- [`UnknownSettingError`][mimic.core.errors.UnknownSettingError]: the destination
  has no setting with that exact name.
- [`HeaderFormatError`][mimic.core.errors.HeaderFormatError]: header JSON does not
  have the array-of-single-key-objects shape.
- [`ConfigError`][mimic.core.errors.ConfigError]: configuration could not be read.
"""

from __future__ import annotations


class MimicError(Exception):
    """Base class for all Mimic errors."""


class MissingArgumentError(MimicError, ValueError):
    """A required argument was ``None``.

    Attributes:
        argument (str): Name of the offending argument.
    """

    def __init__(self, argument: str) -> None:
        self.argument: str = argument
        super().__init__(f"Argument '{argument}' must not be None.")


def require(value: object, argument: str) -> None:
    """Raise `MissingArgumentError` if ``value`` is ``None``.

    Args:
        value (object): The argument value to check.
        argument (str): The argument name used in the error message.

    Raises:
        MissingArgumentError: If ``value`` is ``None``.
    """
    if value is None:
        raise MissingArgumentError(argument)


class DefinitionError(MimicError, ValueError):
    """Base class for errors in a service definition.

    Attributes:
        line_number (int | None): 1-based number of the offending line, when known.
    """

    def __init__(self, message: str, *, line_number: int | None = None) -> None:
        self.line_number: int | None = line_number
        if line_number is not None:
            message = f"Line {line_number}: {message}"
        super().__init__(message)


class SettingFormatError(DefinitionError):
    """A setting line does not split into a non-empty name and value."""


class UnknownSettingError(DefinitionError):
    """A setting name does not match any setting of the destination object.

    Attributes:
        setting (str): The unknown setting name, as written in the definition.
    """

    def __init__(self, setting: str, *, line_number: int | None = None) -> None:
        self.setting: str = setting
        super().__init__(
            f"Unknown setting: '{setting}'. Please check your spelling, "
            "and be aware that setting names are case sensitive.",
            line_number=line_number,
        )


class HeaderFormatError(MimicError, ValueError):
    """Header JSON does not match the expected token sequence.

    Attributes:
        offset (int | None): Character offset of the offending token, if known.
        token_kind (str | None): Kind of the offending token, if one was read.
    """

    def __init__(
        self,
        message: str,
        *,
        offset: int | None = None,
        token_kind: str | None = None,
    ) -> None:
        self.offset: int | None = offset
        self.token_kind: str | None = token_kind
        super().__init__(message)


class ConfigError(MimicError):
    """Configuration is missing, unreadable or malformed."""
