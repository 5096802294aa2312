"""
authconf - Path matchers.

Decide whether a request path is subject to authentication.

- PathMatcher: exact paths, branches and anchored regexes, as exclusions
  or as an allow-list
- ExcludedPathMatcher: deprecated single-regex exclusion
"""

from __future__ import annotations

import logging
import re
import warnings
from typing import List, Optional, Pattern, Set

from .faults import ExcludedPathConflictFault, PatternInvalidFault

logger = logging.getLogger("authconf.matching")


def _check_path(path: str) -> str:
    if not path or not path.startswith("/"):
        raise PatternInvalidFault(path, "path must start with '/'")
    return path


def _compile(regex: str) -> Pattern[str]:
    if not regex or not regex.startswith("^") or not regex.endswith("$"):
        raise PatternInvalidFault(regex, "regex must start with '^' and end with '$'")
    try:
        return re.compile(regex)
    except re.error as exc:
        raise PatternInvalidFault(regex, str(exc)) from exc


def _in_branch(path: str, branch: str) -> bool:
    branch = branch.rstrip("/")
    return path == branch or path.startswith(branch + "/") or not branch


class PathMatcher:
    """
    Matches request paths.

    ``matches(path)`` is False for an excluded path. When no inclusion is
    configured every other path matches; otherwise only included paths do.

    Example:
        >>> matcher = PathMatcher().exclude_branch("/public").exclude_path("/health")
        >>> matcher.matches("/public/css/site.css")
        False
        >>> matcher.matches("/account")
        True
    """

    def __init__(self):
        self.excluded_paths: Set[str] = set()
        self.excluded_branches: List[str] = []
        self.excluded_patterns: List[Pattern[str]] = []
        self.included_paths: Set[str] = set()
        self.included_branches: List[str] = []
        self.included_patterns: List[Pattern[str]] = []

    # Exclusions

    def exclude_path(self, path: str) -> "PathMatcher":
        self.excluded_paths.add(_check_path(path))
        return self

    def exclude_paths(self, *paths: str) -> "PathMatcher":
        for path in paths:
            self.exclude_path(path)
        return self

    def exclude_branch(self, branch: str) -> "PathMatcher":
        """Exclude ``branch`` and everything below it."""
        self.excluded_branches.append(_check_path(branch))
        return self

    def exclude_regex(self, regex: str) -> "PathMatcher":
        self.excluded_patterns.append(_compile(regex))
        return self

    # Inclusions

    def include_path(self, path: str) -> "PathMatcher":
        self.included_paths.add(_check_path(path))
        return self

    def include_branch(self, branch: str) -> "PathMatcher":
        self.included_branches.append(_check_path(branch))
        return self

    def include_regex(self, regex: str) -> "PathMatcher":
        self.included_patterns.append(_compile(regex))
        return self

    # Matching

    def has_inclusions(self) -> bool:
        return bool(self.included_paths or self.included_branches or self.included_patterns)

    def is_excluded(self, path: str) -> bool:
        if path in self.excluded_paths:
            return True
        if any(_in_branch(path, branch) for branch in self.excluded_branches):
            return True
        return any(pattern.match(path) for pattern in self.excluded_patterns)

    def is_included(self, path: str) -> bool:
        if path in self.included_paths:
            return True
        if any(_in_branch(path, branch) for branch in self.included_branches):
            return True
        return any(pattern.match(path) for pattern in self.included_patterns)

    def matches(self, path: str) -> bool:
        if self.is_excluded(path):
            return False
        if not self.has_inclusions():
            return True
        return self.is_included(path)


class ExcludedPathMatcher(PathMatcher):
    """
    Matcher excluding a single regex.

    Deprecated: use ``PathMatcher.exclude_regex`` instead.
    """

    def __init__(self, exclude_path: Optional[str] = None):
        warnings.warn(
            "ExcludedPathMatcher is deprecated, use PathMatcher instead",
            DeprecationWarning,
            stacklevel=2,
        )
        super().__init__()
        if exclude_path is not None:
            self.set_exclude_path(exclude_path)

    @property
    def exclude_path_pattern(self) -> Optional[str]:
        """The excluded regex, or None."""
        if not self.excluded_patterns:
            return None
        return self.excluded_patterns[0].pattern

    def set_exclude_path(self, exclude_path: str) -> None:
        if self.excluded_patterns:
            existing = self.excluded_patterns[0].pattern
            fault = ExcludedPathConflictFault(existing, exclude_path)
            logger.error(fault.message)
            raise fault
        super().exclude_regex(exclude_path)

    # One excluded regex, nothing else

    def exclude_regex(self, regex: str) -> "ExcludedPathMatcher":
        self.set_exclude_path(regex)
        return self

    def exclude_path(self, path: str) -> "ExcludedPathMatcher":
        raise PatternInvalidFault(path, "ExcludedPathMatcher only accepts a regex, use PathMatcher")

    def exclude_branch(self, branch: str) -> "ExcludedPathMatcher":
        raise PatternInvalidFault(branch, "ExcludedPathMatcher only accepts a regex, use PathMatcher")
