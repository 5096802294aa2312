"""
authconf faults - Structured error types.

Every error raised while loading properties or building a configuration
is a typed ``Fault`` carrying a stable code, a domain and metadata about
the offending key or reference.

Core exports:
- Fault: Base fault class
- FaultDomain: Domain enumeration
- Severity: Severity levels
- Domain faults for config, registry and routing errors
"""

from .core import (
    Fault,
    FaultDomain,
    Severity,
)

from .domains import (
    ConfigFault,
    ConfigMissingFault,
    ConfigInvalidFault,
    RegistryFault,
    EncoderNotFoundFault,
    AuthenticatorNotFoundFault,
    RoutingFault,
    PatternInvalidFault,
    ExcludedPathConflictFault,
)

__all__ = [
    # Core types
    "Fault",
    "FaultDomain",
    "Severity",

    # Config
    "ConfigFault",
    "ConfigMissingFault",
    "ConfigInvalidFault",

    # Registry
    "RegistryFault",
    "EncoderNotFoundFault",
    "AuthenticatorNotFoundFault",

    # Routing
    "RoutingFault",
    "PatternInvalidFault",
    "ExcludedPathConflictFault",
]
