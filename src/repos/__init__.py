"""Package repositories and the manager that queries them.

This module provides the repository capability contracts, in-memory
repository implementations and the RepositoryManager that dispatches
package lookups across every registered repository.
"""

from .base import (
    Package,
    VersionConstraint,
    RepositoryInterface,
    WritableRepositoryInterface,
)
from .manager import (
    RepositoryManager,
    RepositoryType,
    UnregisteredTypeError,
)
from .array import (
    ArrayRepository,
    WritableArrayRepository,
    PackageRepository,
)
from .factory import (
    create_repository_manager,
    add_configured_repositories,
)

__all__ = [
    "Package",
    "VersionConstraint",
    "RepositoryInterface",
    "WritableRepositoryInterface",
    "RepositoryManager",
    "RepositoryType",
    "UnregisteredTypeError",
    "ArrayRepository",
    "WritableArrayRepository",
    "PackageRepository",
    "create_repository_manager",
    "add_configured_repositories",
]
