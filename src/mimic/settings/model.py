# topmark:header:start
#
#   project      : Mimic
#   file         : model.py
#   file_relpath : src/mimic/settings/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Settings model for a virtual service definition.

[`ServiceDefinition`][mimic.settings.model.ServiceDefinition] is the destination
the CLI parses definition files into. Its settings are declared up front in
``__setting_schema__``, so the parser binds them without inspecting the class.

A definition file for it looks like::

    # A virtual service
    Method: POST
    Path: /orders
    StatusCode: 201
    ContentType: application/json
    Headers: [{"Location": ["/orders/42"]}]
    # Body
    {"id": 42}
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from mimic.core.errors import SettingFormatError
from mimic.headers.codec import decode_headers
from mimic.headers.model import HeaderCollection
from mimic.settings.binder import attribute_setter

if TYPE_CHECKING:
    from collections.abc import Mapping

    from mimic.settings.binder import Setter


@dataclass
class ServiceDefinition:
    """Settings of one virtual service, as read from a definition file.

    All values are kept as the strings found in the definition; typed views are
    provided by [`http_status`][mimic.settings.model.ServiceDefinition.http_status]
    and [`header_collection`][mimic.settings.model.ServiceDefinition.header_collection].

    Attributes:
        method (str): HTTP method the service answers (``Method``).
        path (str): Request path the service answers (``Path``).
        status_code (str): Response status code (``StatusCode``).
        content_type (str | None): Response content type (``ContentType``).
        headers (str | None): Response headers in header JSON wire form (``Headers``).
        body (str | None): Response body (``Body``, or everything after ``# Body``).
    """

    method: str = "GET"
    path: str = "/"
    status_code: str = "200"
    content_type: str | None = None
    headers: str | None = None
    body: str | None = None

    __setting_schema__: ClassVar[Mapping[str, Setter]] = {
        "Method": attribute_setter("method"),
        "Path": attribute_setter("path"),
        "StatusCode": attribute_setter("status_code"),
        "ContentType": attribute_setter("content_type"),
        "Headers": attribute_setter("headers"),
        "Body": attribute_setter("body"),
    }

    def http_status(self) -> int:
        """Return the status code as an integer.

        Raises:
            SettingFormatError: If ``StatusCode`` is not an integer between 100 and 599.
        """
        try:
            status = int(self.status_code)
        except ValueError:
            status = 0
        if not 100 <= status <= 599:
            raise SettingFormatError(
                f"StatusCode must be an integer between 100 and 599, got {self.status_code!r}"
            )
        return status

    def header_collection(self) -> HeaderCollection:
        """Return the decoded ``Headers`` setting (empty when unset).

        Raises:
            HeaderFormatError: If ``Headers`` is not valid header JSON.
        """
        if self.headers is None:
            return HeaderCollection()
        return decode_headers(self.headers)

    def to_dict(self) -> dict[str, str | None]:
        """Return the settings keyed by their definition-file names."""
        return {
            "Method": self.method,
            "Path": self.path,
            "StatusCode": self.status_code,
            "ContentType": self.content_type,
            "Headers": self.headers,
            "Body": self.body,
        }
