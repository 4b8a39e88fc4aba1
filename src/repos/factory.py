"""Construction of a repository manager with its built-in repository types.

Registers the repository types shipped with this package and creates the
repositories listed in configuration.
"""

from typing import Any, Dict, Iterable, List, Optional, Type

from ..common.config import ManagerConfig, RepositoryConfig
from ..common.io import IOInterface
from ..common.logger import configure_logging, get_logger
from .array import PackageRepository
from .base import RepositoryInterface
from .manager import RepositoryManager

logger = get_logger("factory")

DEFAULT_REPOSITORY_TYPES: Dict[str, Type[Any]] = {
    "package": PackageRepository,
}


def register_default_types(manager: RepositoryManager) -> None:
    """Register all built-in repository types on a manager.

    Args:
        manager: RepositoryManager to configure
    """
    for repository_type, implementation in DEFAULT_REPOSITORY_TYPES.items():
        manager.set_repository_class(repository_type, implementation)


def create_repository_manager(
    io: IOInterface,
    config: Any,
    event_dispatcher: Optional[Any] = None,
    fetch_client: Optional[Any] = None,
) -> RepositoryManager:
    """Create a repository manager with the built-in types registered.

    When config is a ManagerConfig, its logging section configures the
    package logger first.

    Args:
        io: Output sink
        config: Configuration object passed through to repositories
        event_dispatcher: Optional event dispatcher
        fetch_client: Optional network client

    Returns:
        New RepositoryManager
    """
    if isinstance(config, ManagerConfig):
        configure_logging(config)

    manager = RepositoryManager(io, config, event_dispatcher, fetch_client)
    register_default_types(manager)
    return manager


def add_configured_repositories(
    manager: RepositoryManager,
    repository_configs: Iterable[RepositoryConfig],
) -> List[RepositoryInterface]:
    """Create and add the repositories described by configuration.

    Repositories are added in configuration order, which is also their
    query order.

    Args:
        manager: RepositoryManager to populate
        repository_configs: Repository configurations

    Returns:
        The created repositories

    Raises:
        UnregisteredTypeError: If a configured type is not registered
    """
    created = []
    for repo_config in repository_configs:
        repository = manager.create_repository(repo_config.type, repo_config.options)
        manager.add_repository(repository)
        created.append(repository)
        logger.info(f"Added {repo_config.type} repository: {repo_config.name}")
    return created
