"""
YAML configuration parser for the KV path filter.

Reads the `mount`, `routes` and `listing` sections from a YAML file, either
one named explicitly or the first `kvfilter.yaml` variant found in the working
directory, the home directory or `~/.config/kvfilter`. Writes them back with
a comment above each section.
"""

import yaml
from pathlib import Path
from typing import Dict, Any, Optional, List, Union
import logging
from dataclasses import dataclass
from pydantic import ValidationError

from ..models.config import FilterConfig


@dataclass
class ConfigParseResult:
    """
    A loaded FilterConfig and where it came from.

    Attributes:
        config: Validated filter configuration
        warnings: Suspicious settings, plus a note when no file was found
        config_path: File the settings were read from, None for built-in defaults
        is_default: True when no file was found and FilterConfig() was used
    """
    config: FilterConfig
    warnings: List[str]
    config_path: Optional[Path]
    is_default: bool


class ConfigurationError(Exception):
    """A config file is missing, unreadable, not a YAML mapping or fails validation."""
    pass


class ConfigParser:
    """
    Turns kvfilter YAML files into FilterConfig objects and back.

    Unknown top-level sections are rejected so that typos do not silently
    fall back to defaults.
    """

    DEFAULT_CONFIG_NAMES = [
        '.kvfilter.yaml',
        '.kvfilter.yml',
        'kvfilter.yaml',
        'kvfilter.yml'
    ]

    SECTIONS = [
        ("mount", "Secrets mount being browsed"),
        ("routes", "Routes that navigation decisions are sent to"),
        ("listing", "Directory listing behaviour")
    ]

    def __init__(self, strict_mode: bool = False):
        """
        Args:
            strict_mode: Raise ConfigurationError instead of returning warnings
        """
        self.strict_mode = strict_mode
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def load_config(self, config_path: Optional[Union[str, Path]] = None) -> ConfigParseResult:
        """
        Read the filter settings from a YAML file.

        Args:
            config_path: Explicit file to read. When omitted the search
                locations are tried and FilterConfig() is used if none exists.

        Returns:
            ConfigParseResult with the config, its warnings and its source

        Raises:
            ConfigurationError: If the named file is missing or any file is invalid,
                or if strict mode is on and there are warnings
        """
        if config_path:
            config_path = Path(config_path)
            if not config_path.exists():
                raise ConfigurationError(f"Configuration file not found: {config_path}")

            config_data = self._load_yaml_file(config_path)
            is_default = False
        else:
            config_path, config_data = self._find_and_load_config()
            is_default = config_data is None

            if is_default:
                config_data = {}

        filter_config = self._build_config(config_data)

        warnings = filter_config.validate_configuration()
        if is_default:
            warnings.append("No configuration file found, using default settings")

        if self.strict_mode and warnings:
            raise ConfigurationError(f"Configuration warnings in strict mode: {'; '.join(warnings)}")

        self.logger.info(f"Configuration loaded successfully from {config_path or 'defaults'}")

        return ConfigParseResult(
            config=filter_config,
            warnings=warnings,
            config_path=config_path,
            is_default=is_default
        )

    def _find_and_load_config(self) -> tuple[Optional[Path], Optional[Dict[str, Any]]]:
        """Return the first readable kvfilter file in the search locations, or (None, None)."""
        search_paths = [
            Path.cwd(),
            Path.home(),
            Path.home() / '.config' / 'kvfilter',
        ]

        for search_path in search_paths:
            for config_name in self.DEFAULT_CONFIG_NAMES:
                config_file = search_path / config_name
                if config_file.exists() and config_file.is_file():
                    try:
                        config_data = self._load_yaml_file(config_file)
                    except ConfigurationError as e:
                        self.logger.warning(f"Failed to load {config_file}: {e}")
                        continue
                    self.logger.info(f"Found configuration file: {config_file}")
                    return config_file, config_data

        self.logger.info("No configuration file found, using defaults")
        return None, None

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """
        Read a file as a YAML mapping. Empty files give an empty dict.

        Raises:
            ConfigurationError: If the file cannot be read, is not valid YAML
                or holds something other than a mapping
        """
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                content = f.read()
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file {file_path}: {e}") from e

        if not content.strip():
            self.logger.warning(f"Configuration file is empty: {file_path}")
            return {}

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML syntax in {file_path}: {e}") from e

        if data is None:
            return {}

        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file must contain a YAML object, got {type(data).__name__}")

        return data

    def _build_config(self, config_data: Dict[str, Any]) -> FilterConfig:
        """Check the section names, then validate the data as a FilterConfig."""
        known_sections = {name for name, _ in self.SECTIONS}
        unknown = sorted(set(config_data) - known_sections)
        if unknown:
            raise ConfigurationError(f"Unknown configuration sections: {', '.join(unknown)}")

        try:
            return FilterConfig.from_dict(config_data)
        except ValidationError as e:
            raise ConfigurationError(f"Configuration validation failed: {e}") from e

    def save_config(self, config: FilterConfig, output_path: Union[str, Path]) -> None:
        """
        Write the settings as commented YAML, creating parent directories.

        Raises:
            ConfigurationError: If the file cannot be written
        """
        output_path = Path(output_path)
        yaml_content = self._generate_yaml_with_comments(config.to_dict())

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, 'w', encoding='utf-8') as f:
                f.write(yaml_content)
        except OSError as e:
            raise ConfigurationError(f"Cannot write configuration file {output_path}: {e}") from e

        self.logger.info(f"Configuration saved to {output_path}")

    def _generate_yaml_with_comments(self, config_dict: Dict[str, Any]) -> str:
        """Dump each known section in SECTIONS order with its comment line above it."""
        lines = [
            "# KV Path Filter Configuration",
            "# Maps filter box navigation onto the routes of the secrets listing",
            "",
        ]

        for section_name, comment in self.SECTIONS:
            if section_name in config_dict:
                lines.append(f"# {comment}")
                section_yaml = yaml.dump({section_name: config_dict[section_name]},
                                         default_flow_style=False,
                                         sort_keys=False)
                lines.append(section_yaml.rstrip())
                lines.append("")

        return "\n".join(lines)

    def validate_config_file(self, config_path: Union[str, Path]) -> List[str]:
        """
        Check a file without loading it.

        Returns:
            A single error message, or an empty list if the file is valid.
            Warnings are not reported.
        """
        config_path = Path(config_path)
        if not config_path.exists():
            return [f"Configuration file not found: {config_path}"]

        try:
            self._build_config(self._load_yaml_file(config_path))
        except ConfigurationError as e:
            return [str(e)]

        return []

    def get_config_template(self) -> str:
        """Commented YAML holding the default value of every setting."""
        return self._generate_yaml_with_comments(FilterConfig().to_dict())


def load_config(config_path: Optional[Union[str, Path]] = None, strict_mode: bool = False) -> ConfigParseResult:
    """Shortcut for ConfigParser(strict_mode).load_config(config_path)."""
    parser = ConfigParser(strict_mode=strict_mode)
    return parser.load_config(config_path)


def validate_config_file(config_path: Union[str, Path]) -> List[str]:
    """Shortcut for ConfigParser().validate_config_file(config_path)."""
    parser = ConfigParser()
    return parser.validate_config_file(config_path)


def create_config_template(output_path: Union[str, Path]) -> None:
    """
    Write the default settings to output_path as a starting point for editing.

    Raises:
        ConfigurationError: If the file cannot be written
    """
    ConfigParser().save_config(FilterConfig(), output_path)
