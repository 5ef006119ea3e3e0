"""Configuration file loading.

Settings come from an optional YAML file:
- Custom config file (--config flag)
- Default config (~/.rip/config.yml)

CLI flags take precedence over file values, which take precedence over
built-in defaults.
"""

from __future__ import annotations

from dataclasses import dataclass
from difflib import get_close_matches
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from rip.bootstrap.download import DEFAULT_MAX_REDIRECTS
from rip.bootstrap.paths import CONFIG_FILE_NAME, get_rip_home
from rip.core.logging import get_logger

LOGGER = get_logger(__name__)

VALID_KEYS = ("install_root", "max_redirects", "timeout")


class ConfigError(Exception):
    """Configuration loading or parsing error."""

    pass


@dataclass(frozen=True)
class RipConfig:
    """Installer and launcher settings.

    Attributes:
        install_root: Directory whose bin/ holds the binary (None = ~/.rip).
        max_redirects: Redirect hops allowed per request.
        timeout: Socket timeout in seconds (None = wait indefinitely).
        source: File the settings were read from, if any.
    """

    install_root: Optional[Path] = None
    max_redirects: int = DEFAULT_MAX_REDIRECTS
    timeout: Optional[float] = None
    source: Optional[Path] = None

    def resolve_install_root(self, override: Optional[Path] = None) -> Path:
        """Return the effective install root, honoring a CLI override."""
        if override is not None:
            return override.expanduser().absolute()
        if self.install_root is not None:
            return self.install_root
        return get_rip_home()


def find_default_config() -> Optional[Path]:
    """Find the default config at ~/.rip/config.yml.

    Returns:
        Path to the config if it exists, None otherwise.
    """
    config_path = get_rip_home() / CONFIG_FILE_NAME
    if config_path.is_file():
        return config_path
    return None


def load_yaml_file(path: Path) -> Dict[str, Any]:
    """Load and parse a YAML config file.

    Raises:
        ConfigError: If the file cannot be read, is not valid YAML, or is
            not a mapping.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ConfigError(f"Config file must be a YAML mapping, got {type(data).__name__}")

    return data


def dict_to_config(data: Dict[str, Any], source: Optional[Path] = None) -> RipConfig:
    """Validate a raw mapping and convert it to RipConfig.

    Unknown keys are logged as warnings; wrong types raise ConfigError.
    """
    origin = str(source) if source else "config"

    for key in data:
        if key not in VALID_KEYS:
            suggestion = get_close_matches(str(key), VALID_KEYS, n=1)
            hint = f" (did you mean '{suggestion[0]}'?)" if suggestion else ""
            LOGGER.warning(f"{origin}: unknown key '{key}'{hint}")

    install_root = data.get("install_root")
    if install_root is not None:
        if not isinstance(install_root, str) or not install_root.strip():
            raise ConfigError(f"{origin}: 'install_root' must be a non-empty string")
        install_root = Path(install_root).expanduser()
        if not install_root.is_absolute():
            # Relative to the file that names it, not the working directory.
            base = source.parent if source is not None else Path.cwd()
            install_root = base / install_root
        install_root = install_root.absolute()

    max_redirects = data.get("max_redirects", DEFAULT_MAX_REDIRECTS)
    if isinstance(max_redirects, bool) or not isinstance(max_redirects, int) or max_redirects < 1:
        raise ConfigError(f"{origin}: 'max_redirects' must be a positive integer")

    timeout = data.get("timeout")
    if timeout is not None:
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
            raise ConfigError(f"{origin}: 'timeout' must be a positive number or null")
        timeout = float(timeout)

    return RipConfig(
        install_root=install_root,
        max_redirects=max_redirects,
        timeout=timeout,
        source=source,
    )


def load_config(config_path: Optional[Path] = None) -> RipConfig:
    """Load configuration.

    Args:
        config_path: Explicit config file (--config flag). When omitted,
            ~/.rip/config.yml is used if present.

    Returns:
        RipConfig instance (defaults when no file is found).

    Raises:
        ConfigError: If an explicit file is missing, or any file is invalid.
    """
    if config_path is not None:
        if not config_path.exists():
            raise ConfigError(f"Config file not found: {config_path}")
        path: Optional[Path] = config_path
    else:
        path = find_default_config()

    if path is None:
        LOGGER.debug("No config file found, using defaults")
        return RipConfig()

    config = dict_to_config(load_yaml_file(path), source=path)
    LOGGER.debug(f"Loaded config from {path}")
    return config
