"""Configuration management for the repository manager.

Handles loading of YAML configuration files and parsing them into typed
dataclasses describing which repositories to set up.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

import yaml

DEFAULT_CONFIG_PATH = "config.yaml"
DEFAULT_LOG_DIR = "logs"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass
class RepositoryConfig:
    """Configuration for a single repository."""

    type: str
    options: Dict[str, Any] = field(default_factory=dict)

    @property
    def name(self) -> str:
        return self.options.get("name", self.type)


@dataclass
class ManagerConfig:
    """Top-level configuration."""

    repositories: List[RepositoryConfig] = field(default_factory=list)
    log_dir: str = DEFAULT_LOG_DIR
    log_level: str = DEFAULT_LOG_LEVEL
    log_to_file: bool = False


def parse_repository_config(repo_dict: Dict[str, Any]) -> RepositoryConfig:
    """Parse a repository configuration dictionary.

    Everything except ``type`` is kept as repository options.

    Args:
        repo_dict: Repository configuration dictionary

    Returns:
        RepositoryConfig instance

    Raises:
        ValueError: If the entry has no type
    """
    if not isinstance(repo_dict, dict):
        raise ValueError(
            f"Repository entry must be a mapping, got {type(repo_dict).__name__}"
        )
    if not repo_dict.get("type"):
        raise ValueError(f"Repository entry has no type: {repo_dict}")

    options = {key: value for key, value in repo_dict.items() if key != "type"}
    return RepositoryConfig(type=repo_dict["type"], options=options)


def parse_repositories(section: Any) -> List[RepositoryConfig]:
    """Parse the ``repositories`` section.

    The section may be a list of entries or a mapping of name to entry; for
    a mapping the key becomes the ``name`` option unless one is set.

    Args:
        section: Raw repositories section

    Returns:
        List of RepositoryConfig in declaration order
    """
    if section is None:
        return []

    if isinstance(section, dict):
        repositories = []
        for name, repo_dict in section.items():
            repo = parse_repository_config(repo_dict)
            repo.options.setdefault("name", name)
            repositories.append(repo)
        return repositories

    if isinstance(section, list):
        return [parse_repository_config(repo_dict) for repo_dict in section]

    raise ValueError(
        f"'repositories' must be a list or mapping, got {type(section).__name__}"
    )


def parse_config(config_dict: Dict[str, Any]) -> ManagerConfig:
    """Parse the full configuration dictionary.

    Args:
        config_dict: Full configuration dictionary

    Returns:
        ManagerConfig instance
    """
    logging_dict = config_dict.get("logging", {}) or {}

    return ManagerConfig(
        repositories=parse_repositories(config_dict.get("repositories")),
        log_dir=logging_dict.get("log_dir", DEFAULT_LOG_DIR),
        log_level=logging_dict.get("level", DEFAULT_LOG_LEVEL),
        log_to_file=bool(logging_dict.get("file", False)),
    )


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
    """Load configuration from YAML file.

    Args:
        config_path: Path to configuration file

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If config file is invalid YAML
        TypeError: If the document root is not a mapping
    """
    config_file = Path(config_path)

    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with config_file.open("r") as f:
        config = yaml.safe_load(f)

    if config is None:
        config = {}

    if not isinstance(config, dict):
        raise TypeError(
            f"Configuration root must be a mapping, got {type(config).__name__}"
        )

    return _expand_env_vars(config)


def _expand_env_vars(obj: Any) -> Any:
    """Recursively expand environment variables in configuration."""
    if isinstance(obj, dict):
        return {key: _expand_env_vars(value) for key, value in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(item) for item in obj]
    elif isinstance(obj, str):
        return os.path.expandvars(obj)
    else:
        return obj


def load_typed_config(config_path: str = DEFAULT_CONFIG_PATH) -> ManagerConfig:
    """Load and parse configuration into typed dataclass.

    Args:
        config_path: Path to configuration file

    Returns:
        ManagerConfig instance
    """
    return parse_config(load_config(config_path))
