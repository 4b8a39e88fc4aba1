"""In-memory repositories.

ArrayRepository answers queries over a plain list of packages,
WritableArrayRepository is used as the local (installed) repository, and
PackageRepository backs the ``package`` repository type whose packages are
declared inline in configuration.
"""

from typing import Any, Dict, Iterable, List, Optional

from ..common.logger import get_logger
from .base import ConstraintLike, Package, RepositoryInterface, WritableRepositoryInterface

logger = get_logger("array")


class ArrayRepository(RepositoryInterface):
    """Read-only repository over an in-memory package list."""

    def __init__(self, packages: Optional[Iterable[Package]] = None):
        self._packages: List[Package] = list(packages or [])

    def find_package(self, name: str, constraint: ConstraintLike) -> Optional[Package]:
        for package in self._packages:
            if package.has_name(name) and package.satisfies(constraint):
                return package
        return None

    def find_packages(self, name: str, constraint: ConstraintLike = None) -> List[Package]:
        return [p for p in self._packages if p.has_name(name) and p.satisfies(constraint)]

    def get_packages(self) -> List[Package]:
        """Return all packages in insertion order."""
        return list(self._packages)

    def has_package(self, package: Package) -> bool:
        """Check if a package with the same key is present."""
        key = package.get_key()
        return any(p.get_key() == key for p in self._packages)

    def count(self) -> int:
        return len(self._packages)

    def __len__(self) -> int:
        return len(self._packages)


class WritableArrayRepository(ArrayRepository, WritableRepositoryInterface):
    """In-memory repository whose package set can be modified."""

    def add_package(self, package: Package) -> None:
        self._packages.append(package)
        logger.debug(f"Added package: {package.pretty_string()}")

    def remove_package(self, package: Package) -> None:
        """Remove a package by key.

        Raises:
            KeyError: If the package is not in the repository
        """
        key = package.get_key()
        for index, existing in enumerate(self._packages):
            if existing.get_key() == key:
                del self._packages[index]
                logger.debug(f"Removed package: {package.pretty_string()}")
                return
        raise KeyError(f"Package not in repository: {package.pretty_string()}")


def parse_package(package_dict: Dict[str, Any]) -> Package:
    """Parse a package declaration.

    Versions must be strings; YAML reads an unquoted ``1.10`` as the float
    1.1, so numeric versions are rejected rather than converted.

    Args:
        package_dict: Mapping with at least ``name`` and ``version``

    Returns:
        Package instance

    Raises:
        ValueError: If the declaration is not a mapping, name or version is
            missing, or version is not a string
    """
    if not isinstance(package_dict, dict):
        raise ValueError(
            f"Package declaration must be a mapping, got {type(package_dict).__name__}"
        )

    missing = [key for key in ("name", "version") if key not in package_dict]
    if missing:
        raise ValueError(f"Package declaration is missing: {', '.join(missing)}")

    name = package_dict["name"]
    if not isinstance(name, str) or not name:
        raise ValueError(f"Package name must be a non-empty string, got {name!r}")

    version = package_dict["version"]
    if not isinstance(version, str):
        raise ValueError(
            f"Version of {name} must be a string (quote it in YAML), got {version!r}"
        )

    known = {"name", "version", "type", "source", "dist"}
    return Package(
        name=name,
        version=version,
        type=package_dict.get("type", "library"),
        source=package_dict.get("source"),
        dist=package_dict.get("dist"),
        extra={k: v for k, v in package_dict.items() if k not in known},
    )


class PackageRepository(ArrayRepository):
    """Repository of packages declared inline in configuration.

    Expects ``config["package"]`` to be a package mapping or a list of them.
    """

    def __init__(
        self,
        config: Dict[str, Any],
        io: Any,
        manager_config: Any,
        event_dispatcher: Optional[Any] = None,
    ):
        if "package" not in config:
            raise ValueError("A 'package' repository requires a 'package' entry")

        declared = config["package"]
        if isinstance(declared, dict):
            declared = [declared]
        elif not isinstance(declared, list):
            raise ValueError(
                f"'package' must be a mapping or a list of mappings, "
                f"got {type(declared).__name__}"
            )

        super().__init__(parse_package(entry) for entry in declared)
        self.config = config
        self.io = io
        self.manager_config = manager_config
        self.event_dispatcher = event_dispatcher

        if io is not None and io.is_verbose():
            io.write(f"Loaded {len(self)} inline package(s)")
