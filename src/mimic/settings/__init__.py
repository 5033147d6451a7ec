# topmark:header:start
#
#   project      : Mimic
#   file         : __init__.py
#   file_relpath : src/mimic/settings/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Setting binders and the service definition settings model."""

from __future__ import annotations

from mimic.settings.binder import (
    AttributeBinder,
    FieldBinder,
    SchemaBinder,
    Setter,
    attribute_setter,
    binder_for,
)
from mimic.settings.model import ServiceDefinition

__all__: list[str] = [
    "AttributeBinder",
    "FieldBinder",
    "SchemaBinder",
    "ServiceDefinition",
    "Setter",
    "attribute_setter",
    "binder_for",
]
