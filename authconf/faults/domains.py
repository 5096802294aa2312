"""
authconf faults - Domain-specific fault types.

Provides concrete fault classes for each domain:
- CONFIG faults (missing or malformed properties)
- REGISTRY faults (unresolvable encoder / authenticator references)
- ROUTING faults (path matcher misuse)
"""

from typing import Any, Optional
from .core import Fault, FaultDomain, Severity


# ============================================================================
# CONFIG Faults
# ============================================================================

class ConfigFault(Fault):
    """Base class for configuration faults."""

    def __init__(
        self,
        code: str,
        message: str,
        *,
        severity: Severity = Severity.FATAL,
        metadata: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            code=code,
            message=message,
            domain=FaultDomain.CONFIG,
            severity=severity,
            retryable=False,
            metadata=metadata,
        )


class ConfigMissingFault(ConfigFault):
    """Required configuration is missing."""

    def __init__(self, key: str, **kwargs):
        super().__init__(
            code="CONFIG_MISSING",
            message=f"Required configuration key '{key}' is missing",
            metadata={"key": key, **kwargs.get("metadata", {})},
        )


class ConfigInvalidFault(ConfigFault):
    """Configuration value is invalid."""

    def __init__(self, key: str, reason: str, **kwargs):
        super().__init__(
            code="CONFIG_INVALID",
            message=f"Configuration key '{key}' is invalid: {reason}",
            metadata={"key": key, "reason": reason, **kwargs.get("metadata", {})},
        )


# ============================================================================
# REGISTRY Faults
# ============================================================================

class RegistryFault(Fault):
    """Base class for encoder / authenticator registry faults."""

    def __init__(
        self,
        code: str,
        message: str,
        *,
        severity: Severity = Severity.FATAL,
        metadata: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            code=code,
            message=message,
            domain=FaultDomain.REGISTRY,
            severity=severity,
            retryable=False,
            metadata=metadata,
        )


class EncoderNotFoundFault(RegistryFault):
    """A property references a password encoder that was never built."""

    def __init__(self, name: str, referenced_by: Optional[str] = None, **kwargs):
        super().__init__(
            code="ENCODER_NOT_FOUND",
            message=f"Password encoder '{name}' not found"
            + (f" (referenced by '{referenced_by}')" if referenced_by else ""),
            metadata={"encoder": name, "referenced_by": referenced_by, **kwargs.get("metadata", {})},
        )


class AuthenticatorNotFoundFault(RegistryFault):
    """A client references an authenticator that was never built."""

    def __init__(self, name: str, referenced_by: Optional[str] = None, **kwargs):
        super().__init__(
            code="AUTHENTICATOR_NOT_FOUND",
            message=f"Authenticator '{name}' not found"
            + (f" (referenced by '{referenced_by}')" if referenced_by else ""),
            metadata={"authenticator": name, "referenced_by": referenced_by, **kwargs.get("metadata", {})},
        )


# ============================================================================
# ROUTING Faults
# ============================================================================

class RoutingFault(Fault):
    """Base class for path matching faults."""

    def __init__(
        self,
        code: str,
        message: str,
        *,
        severity: Severity = Severity.ERROR,
        metadata: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            code=code,
            message=message,
            domain=FaultDomain.ROUTING,
            severity=severity,
            retryable=False,
            metadata=metadata,
        )


class PatternInvalidFault(RoutingFault):
    """Path or regex given to a matcher is invalid."""

    def __init__(self, pattern: str, reason: str, **kwargs):
        super().__init__(
            code="PATTERN_INVALID",
            message=f"Invalid path pattern '{pattern}': {reason}",
            severity=Severity.FATAL,
            metadata={"pattern": pattern, "reason": reason, **kwargs.get("metadata", {})},
        )


class ExcludedPathConflictFault(RoutingFault):
    """ExcludedPathMatcher was asked to exclude more than one path."""

    def __init__(self, existing: str, rejected: str, **kwargs):
        super().__init__(
            code="EXCLUDED_PATH_CONFLICT",
            message="ExcludedPathMatcher does not support excluding multiple paths. Use PathMatcher instead.",
            metadata={"existing": existing, "rejected": rejected, **kwargs.get("metadata", {})},
        )
