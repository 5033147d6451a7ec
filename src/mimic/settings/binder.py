# topmark:header:start
#
#   project      : Mimic
#   file         : binder.py
#   file_relpath : src/mimic/settings/binder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Bind parsed settings onto a destination object.

The parser does not know the settings schema. It hands each ``name: value``
pair to a [`FieldBinder`][mimic.settings.binder.FieldBinder], which resolves
the name against the destination by exact, case-sensitive match and assigns
the string value. Lookup failure is always an error; unknown settings are
never skipped.

Two binders are provided:

- [`SchemaBinder`][mimic.settings.binder.SchemaBinder]: an explicit mapping from
  setting name to setter, registered up front by the destination's owner.
- [`AttributeBinder`][mimic.settings.binder.AttributeBinder]: matches setting names
  to the dataclass fields, slots or public class and instance attributes of any object.

[`binder_for`][mimic.settings.binder.binder_for] picks the schema binder when the
destination class declares ``__setting_schema__``.
"""

from __future__ import annotations

import dataclasses
import inspect
from collections.abc import Callable, Iterable, Mapping
from typing import TYPE_CHECKING, Any, Protocol

from mimic.config.logging import get_logger
from mimic.core.errors import UnknownSettingError, require

if TYPE_CHECKING:
    from mimic.config.logging import MimicLogger

logger: MimicLogger = get_logger(__name__)

Setter = Callable[[Any, str], None]
"""Assigns a setting value onto a destination: ``setter(state, value)``."""

SCHEMA_ATTRIBUTE: str = "__setting_schema__"


class FieldBinder(Protocol):
    """Resolves setting names on a destination object and assigns values."""

    def setting_names(self, state: object) -> tuple[str, ...]:
        """Return the setting names ``state`` accepts, in declaration order."""
        ...

    def has_setting(self, state: object, name: str) -> bool:
        """Return True if ``name`` matches a setting of ``state`` exactly."""
        ...

    def bind(self, state: object, name: str, value: str) -> None:
        """Assign ``value`` to the setting ``name`` of ``state``.

        Raises:
            UnknownSettingError: If ``state`` has no setting named ``name``.
        """
        ...


def attribute_setter(attribute: str) -> Setter:
    """Return a setter that assigns the value to ``attribute``.

    Args:
        attribute (str): Attribute name on the destination object.

    Returns:
        Setter: The setter function.
    """

    def _set(state: Any, value: str) -> None:
        setattr(state, attribute, value)

    _set.__qualname__ = f"attribute_setter({attribute!r})"
    return _set


class SchemaBinder:
    """Binder backed by an explicit ``setting name -> setter`` mapping.

    Args:
        setters (Mapping[str, Setter]): Setters keyed by exact setting name.
    """

    def __init__(self, setters: Mapping[str, Setter]) -> None:
        require(setters, "setters")
        self._setters: dict[str, Setter] = dict(setters)

    @classmethod
    def for_attributes(cls, attributes: Mapping[str, str]) -> SchemaBinder:
        """Build a binder mapping setting names onto attribute names.

        Args:
            attributes (Mapping[str, str]): ``setting name -> attribute name``.

        Returns:
            SchemaBinder: A binder assigning each setting to its attribute.
        """
        return cls({name: attribute_setter(attr) for name, attr in attributes.items()})

    def setting_names(self, state: object) -> tuple[str, ...]:
        return tuple(self._setters)

    def has_setting(self, state: object, name: str) -> bool:
        return name in self._setters

    def bind(self, state: object, name: str, value: str) -> None:
        require(state, "state")
        setter: Setter | None = self._setters.get(name)
        if setter is None:
            raise UnknownSettingError(name)
        logger.trace("Binding %s=%r via schema", name, value)
        setter(state, value)

    def __repr__(self) -> str:
        return f"SchemaBinder({list(self._setters)!r})"


class AttributeBinder:
    """Binder matching setting names to the fields of any object.

    Dataclass instances expose their fields. Other objects expose the public
    names (not starting with ``_``) declared on their class and its bases
    (``__slots__`` entries, annotations, plain non-callable class attributes),
    followed by their public instance attributes. Objects without any accept
    no settings.
    """

    def setting_names(self, state: object) -> tuple[str, ...]:
        if dataclasses.is_dataclass(state) and not isinstance(state, type):
            return tuple(f.name for f in dataclasses.fields(state))

        names: dict[str, None] = dict.fromkeys(_declared_names(type(state)))
        try:
            attrs: dict[str, Any] = vars(state)
        except TypeError:
            attrs = {}
        names.update(dict.fromkeys(attrs))
        return tuple(name for name in names if not name.startswith("_"))

    def has_setting(self, state: object, name: str) -> bool:
        return name in self.setting_names(state)

    def bind(self, state: object, name: str, value: str) -> None:
        require(state, "state")
        if not self.has_setting(state, name):
            raise UnknownSettingError(name)
        logger.trace("Binding %s=%r via attribute", name, value)
        setattr(state, name, value)

    def __repr__(self) -> str:
        return "AttributeBinder()"


def _declared_names(cls: type) -> list[str]:
    # Base classes first, so names keep their declaration order
    names: list[str] = []
    for klass in reversed(cls.__mro__):
        if klass is object:
            continue
        namespace: Mapping[str, Any] = vars(klass)
        slots: str | Iterable[str] = namespace.get("__slots__", ())
        names.extend([slots] if isinstance(slots, str) else slots)
        names.extend(inspect.get_annotations(klass))
        names.extend(
            name
            for name, value in namespace.items()
            if not callable(value) and not inspect.isdatadescriptor(value)
        )
    return names


def binder_for(state: object) -> FieldBinder:
    """Return the binder to use for ``state``.

    A destination class that declares ``__setting_schema__`` (a mapping of
    setting name to setter) is bound through that schema; anything else falls
    back to [`AttributeBinder`][mimic.settings.binder.AttributeBinder].

    Args:
        state (object): The destination object.

    Returns:
        FieldBinder: The binder for ``state``.
    """
    require(state, "state")
    schema: Mapping[str, Setter] | None = getattr(type(state), SCHEMA_ATTRIBUTE, None)
    if schema is not None:
        return SchemaBinder(schema)
    return AttributeBinder()
