"""Repository manager.

Keeps the ordered pool of repositories queried for packages, the single
local (installed) repository, and the mapping from repository type names
to the classes used to construct new repositories.
"""

import warnings
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Type

from ..common.io import IOInterface
from ..common.logger import get_logger
from .base import ConstraintLike, Package, RepositoryInterface, WritableRepositoryInterface

logger = get_logger("manager")


class UnregisteredTypeError(ValueError):
    """Raised when a repository type has no registered implementation."""

    def __init__(self, repository_type: str):
        self.repository_type = repository_type
        super().__init__(f"Repository type is not registered: {repository_type}")


@dataclass(frozen=True)
class RepositoryType:
    """Registered implementation for a repository type."""

    implementation: Type[Any]
    accepts_fetch_client: bool = False


class RepositoryManager:
    """Manages the repositories a package manager can query.

    Repositories are queried in the order they were added, so
    higher-priority sources must be added first. The local repository is
    kept apart from that pool.
    """

    def __init__(
        self,
        io: IOInterface,
        config: Any,
        event_dispatcher: Optional[Any] = None,
        fetch_client: Optional[Any] = None,
    ):
        """Initialize the manager.

        Args:
            io: Output sink passed to created repositories
            config: Configuration object passed to created repositories
            event_dispatcher: Optional event dispatcher passed to created repositories
            fetch_client: Optional network client for repositories that accept one
        """
        self._io = io
        self._config = config
        self._event_dispatcher = event_dispatcher
        self._fetch_client = fetch_client
        self._local_repository: Optional[WritableRepositoryInterface] = None
        self._repositories: List[RepositoryInterface] = []
        self._repository_types: Dict[str, RepositoryType] = {}

    @property
    def io(self) -> IOInterface:
        return self._io

    @property
    def config(self) -> Any:
        return self._config

    @property
    def event_dispatcher(self) -> Optional[Any]:
        return self._event_dispatcher

    @property
    def fetch_client(self) -> Optional[Any]:
        return self._fetch_client

    def find_package(self, name: str, constraint: ConstraintLike) -> Optional[Package]:
        """Search for a package by name and version in managed repositories.

        Args:
            name: Package name
            constraint: Package version or version constraint to match against

        Returns:
            First match in repository order, or None
        """
        for repository in self._repositories:
            package = repository.find_package(name, constraint)
            if package is not None:
                return package
        return None

    def find_packages(self, name: str, constraint: ConstraintLike) -> List[Package]:
        """Search for all packages matching a name and version in managed repositories.

        Results are concatenated in repository order and are not deduplicated.

        Args:
            name: Package name
            constraint: Package version or version constraint to match against

        Returns:
            List of matching packages
        """
        packages: List[Package] = []
        for repository in self._repositories:
            packages.extend(repository.find_packages(name, constraint))
        return packages

    def add_repository(self, repository: RepositoryInterface) -> None:
        """Append a repository to the query pool.

        Args:
            repository: Repository instance
        """
        self._repositories.append(repository)
        logger.debug(f"Added repository: {type(repository).__name__}")

    def create_repository(self, repository_type: str, config: Any) -> RepositoryInterface:
        """Return a new repository for a specific type.

        The repository is not added to the pool.

        Args:
            repository_type: Registered repository type
            config: Repository configuration

        Returns:
            New repository instance

        Raises:
            UnregisteredTypeError: If no class is registered for the type
        """
        registered = self.get_repository_class(repository_type)
        args = [config, self._io, self._config, self._event_dispatcher]
        if registered.accepts_fetch_client:
            args.append(self._fetch_client)

        name = getattr(registered.implementation, "__name__", repr(registered.implementation))
        logger.debug(f"Creating {repository_type} repository with {name}")
        return registered.implementation(*args)

    def set_repository_class(
        self,
        repository_type: str,
        implementation: Type[Any],
        accepts_fetch_client: Optional[bool] = None,
    ) -> None:
        """Store the repository class for a specific type.

        Args:
            repository_type: Repository type name
            implementation: Class (or factory) of the repository implementation
            accepts_fetch_client: Whether the constructor takes the fetch client
                as fifth argument. Defaults to the implementation's
                ``accepts_fetch_client`` attribute, or False.
        """
        if accepts_fetch_client is None:
            accepts_fetch_client = bool(getattr(implementation, "accepts_fetch_client", False))

        if repository_type in self._repository_types:
            logger.warning(f"Overwriting existing repository type: {repository_type}")

        self._repository_types[repository_type] = RepositoryType(
            implementation=implementation,
            accepts_fetch_client=accepts_fetch_client,
        )
        logger.debug(f"Registered repository type: {repository_type}")

    def get_repository_class(self, repository_type: str) -> RepositoryType:
        """Get the registration for a repository type.

        Raises:
            UnregisteredTypeError: If the type is not registered
        """
        try:
            return self._repository_types[repository_type]
        except KeyError:
            raise UnregisteredTypeError(repository_type) from None

    def list_repository_types(self) -> List[str]:
        """List registered repository types in registration order."""
        return list(self._repository_types.keys())

    def get_repositories(self) -> List[RepositoryInterface]:
        """Return all repositories, except the local one.

        Returns:
            Copy of the repository pool
        """
        return list(self._repositories)

    def set_local_repository(self, repository: WritableRepositoryInterface) -> None:
        """Set the local repository for the project."""
        self._local_repository = repository

    def get_local_repository(self) -> Optional[WritableRepositoryInterface]:
        """Return the local repository for the project, or None if unset."""
        return self._local_repository

    def get_local_repositories(self) -> List[Optional[WritableRepositoryInterface]]:
        """Return all local repositories for the project.

        Deprecated: there is only one local repository, use
        get_local_repository() instead.
        """
        warnings.warn(
            "get_local_repositories() is deprecated, use get_local_repository() instead",
            DeprecationWarning,
            stacklevel=2,
        )
        return [self._local_repository]
