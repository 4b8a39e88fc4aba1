"""Base classes and protocols for package repositories.

Defines the capability contracts that every repository handled by the
repository manager must satisfy, along with the package data structure
they return.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol, Union, runtime_checkable


@runtime_checkable
class VersionConstraint(Protocol):
    """Predicate deciding whether a version satisfies a constraint."""

    def matches(self, version: str) -> bool: ...


# A literal version string, a constraint object, or None for "any version"
ConstraintLike = Union[str, VersionConstraint, None]


@dataclass
class Package:
    """A package known to a repository."""

    name: str
    version: str
    type: str = "library"
    source: Optional[Dict[str, Any]] = None  # e.g. {"type": "git", "url": ...}
    dist: Optional[Dict[str, Any]] = None  # e.g. {"type": "zip", "url": ...}
    extra: Dict[str, Any] = field(default_factory=dict)

    def get_key(self) -> str:
        """Get unique key for this package."""
        return f"{self.name.lower()}-{self.version}"

    def pretty_string(self) -> str:
        """Return a human-readable name and version."""
        return f"{self.name} {self.version}"

    def has_name(self, name: str) -> bool:
        """Check the package name, ignoring case."""
        return self.name.lower() == name.lower()

    def satisfies(self, constraint: ConstraintLike) -> bool:
        """Check whether this package's version satisfies a constraint.

        Args:
            constraint: Literal version, constraint object, or None

        Returns:
            True if the version matches
        """
        if constraint is None:
            return True
        if isinstance(constraint, str):
            return self.version == constraint
        return constraint.matches(self.version)


class RepositoryInterface(ABC):
    """Read capability shared by every repository."""

    @abstractmethod
    def find_package(self, name: str, constraint: ConstraintLike) -> Optional[Package]:
        """Find a single package by name and version constraint.

        Args:
            name: Package name
            constraint: Package version or version constraint to match against

        Returns:
            Matching Package or None if not found
        """
        pass

    @abstractmethod
    def find_packages(self, name: str, constraint: ConstraintLike = None) -> List[Package]:
        """Find all packages matching a name and optionally a version.

        Args:
            name: Package name
            constraint: Package version or version constraint to match against

        Returns:
            List of matching packages, empty if none match
        """
        pass


class WritableRepositoryInterface(RepositoryInterface):
    """Repository whose package set can be modified (installed packages)."""

    @abstractmethod
    def add_package(self, package: Package) -> None:
        """Add a package to the repository."""
        pass

    @abstractmethod
    def remove_package(self, package: Package) -> None:
        """Remove a package from the repository."""
        pass

