"""
authconf - Core Types

Base definitions shared by clients and authenticators, and the immutable
Configuration produced by a build.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Any, ClassVar, Mapping, Optional
from urllib.parse import urlencode

SECRET_MASK = "********"


def secret_field(default: Any = None) -> Any:
    """Dataclass field whose value is masked by ``to_dict()``."""
    return field(default=default, repr=False, metadata={"secret": True})


def _serialize(value: Any) -> Any:
    if isinstance(value, Definition):
        return value.name
    if isinstance(value, (list, tuple)):
        return [_serialize(v) for v in value]
    if isinstance(value, Mapping):
        return {k: _serialize(v) for k, v in value.items()}
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    return repr(value)


@dataclass(frozen=True)
class Definition:
    """
    Named, immutable object produced by a builder.

    Subclasses set ``family`` and declare their settings as dataclass fields.
    Fields declared with ``secret_field()`` are masked on serialization.
    Dict-valued fields are frozen into read-only mappings.
    """

    family: ClassVar[str] = ""

    name: str

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, dict):
                object.__setattr__(self, f.name, MappingProxyType(dict(value)))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dict with secret values masked."""
        data: dict[str, Any] = {"family": self.family}
        for f in fields(self):
            value = getattr(self, f.name)
            if f.metadata.get("secret") and value is not None:
                data[f.name] = SECRET_MASK
            else:
                data[f.name] = _serialize(value)
        return data


# ============================================================================
# Configuration
# ============================================================================

@dataclass(frozen=True)
class Configuration:
    """
    Result of a build.

    Immutable once created and safe to share between threads.

    Attributes:
        callback_url: Base callback URL for indirect clients
        clients: Clients in construction order
        authenticators: Read-only view of the authenticator registry
        encoders: Read-only view of the password encoder registry
    """

    callback_url: Optional[str] = None
    clients: tuple = ()
    authenticators: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    encoders: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self):
        object.__setattr__(self, "clients", tuple(self.clients))
        if not isinstance(self.authenticators, MappingProxyType):
            object.__setattr__(self, "authenticators", MappingProxyType(dict(self.authenticators)))
        if not isinstance(self.encoders, MappingProxyType):
            object.__setattr__(self, "encoders", MappingProxyType(dict(self.encoders)))

    def client_names(self) -> list[str]:
        return [client.name for client in self.clients]

    def find_client(self, name: str) -> Optional[Any]:
        """Client by name (case-insensitive), or None."""
        lowered = name.lower()
        for client in self.clients:
            if client.name.lower() == lowered:
                return client
        return None

    def callback_url_for(self, client_name: str) -> Optional[str]:
        """
        Callback URL for a client.

        Appends ``client_name=<name>`` to the query of the base callback URL.
        """
        if not self.callback_url:
            return None
        separator = "&" if "?" in self.callback_url else "?"
        return f"{self.callback_url}{separator}{urlencode({'client_name': client_name})}"

    def is_empty(self) -> bool:
        return not self.clients and not self.authenticators and not self.encoders

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dict (secrets masked, encoders by repr)."""
        return {
            "callback_url": self.callback_url,
            "clients": [client.to_dict() for client in self.clients],
            "authenticators": {
                name: authenticator.to_dict()
                for name, authenticator in self.authenticators.items()
            },
            "encoders": {name: repr(encoder) for name, encoder in self.encoders.items()},
        }
