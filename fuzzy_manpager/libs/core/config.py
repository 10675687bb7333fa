"""
Configuration Management

Handles loading and managing configuration files for the Fuzzy Manpager tool.
"""

import logging
import os
from io import StringIO
from pathlib import Path
from typing import Dict, Any, Mapping, Optional

try:
    import yaml
except ImportError:
    raise ImportError("PyYAML is required. Install with: pip install PyYAML")

try:
    from ruamel.yaml import YAML
    from ruamel.yaml.comments import CommentedMap
    HAS_RUAMEL_YAML = True
except ImportError:
    HAS_RUAMEL_YAML = False

from .exceptions import ConfigurationError
from .constants import ErrorMessages, FileConstants, FinderConstants, PreviewConstants

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manages configuration loading and validation"""

    # Configuration schema - defines expected structure and types
    CONFIG_SCHEMA = {
        'finder': {
            'type': dict,
            'required': False,
            'fields': {
                'prompt': {'type': str, 'required': False},
                'pointer': {'type': str, 'required': False},
                'marker': {'type': str, 'required': False},
                'height': {'type': str, 'required': False},
                'preview_window': {'type': str, 'required': False},
                'colors': {'type': list, 'required': False},
                'bindings': {'type': list, 'required': False},
                'extra_options': {'type': list, 'required': False},
            }
        },
        'display': {
            'type': dict,
            'required': False,
            'fields': {
                'examples': {'type': bool, 'required': False},
                'preview_width': {'type': int, 'required': False, 'min': 1},
                'notice_delay': {'type': (int, float), 'required': False, 'min': 0},
                'warning_delay': {'type': (int, float), 'required': False, 'min': 0},
            }
        },
        'global': {
            'type': dict,
            'required': False,
            'fields': {
                'debug': {'type': bool, 'required': False},
            }
        },
    }

    # Template header lines written above generated configuration
    TEMPLATE_HEADER = [
        "Fuzzy Manpager Configuration File",
        "Place at ~/.config/fzm/config.yaml or point FZM_CONFIG at it",
    ]

    def __init__(self):
        """Initialize configuration manager"""
        self.config_data = {}
        self.config_file_path = None

    @staticmethod
    def resolve_config_path(explicit_path: Optional[str] = None,
                            environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
        """
        Decide which configuration file to load

        Args:
            explicit_path: Path given with --config (always used when set)
            environ: Environment mapping (defaults to os.environ)

        Returns:
            Path to load, or None when no configuration applies
        """
        if explicit_path:
            return explicit_path

        environ = os.environ if environ is None else environ
        env_path = environ.get(FileConstants.CONFIG_ENV_VAR)
        if env_path:
            return env_path

        config_home = environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
        default_file = Path(config_home) / FileConstants.CONFIG_DIR_NAME / FileConstants.DEFAULT_CONFIG_FILE
        if default_file.is_file():
            return str(default_file)

        return None

    def load_config(self, config_path: str) -> Dict[str, Any]:
        """
        Load configuration from YAML file

        Args:
            config_path: Path to configuration file

        Returns:
            Dict containing configuration data

        Raises:
            ConfigurationError: If configuration file cannot be loaded or is invalid
        """
        config_file = Path(config_path).expanduser()

        if not config_file.exists():
            raise ConfigurationError(
                str(ErrorMessages.ConfigError.CONFIG_FILE_NOT_FOUND).format(config_path=config_path)
            )

        if not config_file.is_file():
            raise ConfigurationError(
                str(ErrorMessages.ConfigError.CONFIG_NOT_A_FILE).format(config_path=config_path)
            )

        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                self.config_data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(
                str(ErrorMessages.ConfigError.INVALID_YAML).format(config_path=config_path, error=e)
            )
        except OSError as e:
            raise ConfigurationError(f"Failed to load configuration from {config_path}: {e}")

        self.config_file_path = config_path
        logger.debug(f"Loaded configuration from {config_path}")

        self._validate_config()

        return self.config_data

    def _validate_config(self) -> None:
        """
        Validate configuration structure and values

        Raises:
            ConfigurationError: If configuration is invalid
        """
        if not isinstance(self.config_data, dict):
            raise ConfigurationError(str(ErrorMessages.ConfigError.NOT_A_MAPPING))

        self._validate_against_schema(self.config_data, self.CONFIG_SCHEMA, "config")

    def _validate_against_schema(self, data: Dict[str, Any], schema: Dict[str, Any], path: str = "") -> None:
        """
        Validate data against schema definition

        Args:
            data: Data to validate
            schema: Schema definition
            path: Current path for error reporting

        Raises:
            ConfigurationError: If data doesn't match schema
        """
        for key, field_schema in schema.items():
            current_path = f"{path}.{key}" if path else key

            if key in data:
                value = data[key]

                # Skip None values for optional fields
                if value is None and not field_schema.get('required', False):
                    continue

                expected_type = field_schema['type']
                # bool is an int subclass, so numeric fields reject it explicitly
                is_bool_mismatch = isinstance(value, bool) and expected_type is not bool
                if is_bool_mismatch or not isinstance(value, expected_type):
                    raise ConfigurationError(f"{current_path} must be a {self._type_name(expected_type)}")

                if 'min' in field_schema and value < field_schema['min']:
                    raise ConfigurationError(f"{current_path} must be at least {field_schema['min']}")

                if expected_type == list and not all(isinstance(item, str) for item in value):
                    raise ConfigurationError(f"{current_path} must be a list of strings")

                if expected_type == dict and 'fields' in field_schema:
                    self._validate_against_schema(value, field_schema['fields'], current_path)

            elif field_schema.get('required', False):
                raise ConfigurationError(f"Required field {current_path} is missing")

    @staticmethod
    def _type_name(expected_type) -> str:
        if isinstance(expected_type, tuple):
            return "number"
        return expected_type.__name__

    def get_section(self, section: str) -> Dict[str, Any]:
        """
        Get specific configuration section

        Args:
            section: Section name (e.g., 'finder', 'display')

        Returns:
            Dict containing section data, empty dict if section doesn't exist
        """
        return self.config_data.get(section) or {}

    def get_value(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key

        Args:
            key: Configuration key (supports dot notation like 'display.examples')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        keys = key.split('.')
        value = self.config_data

        try:
            for k in keys:
                value = value[k]
        except (KeyError, TypeError):
            return default

        return default if value is None else value

    def _create_config_template_structure(self) -> Dict[str, Any]:
        """
        Create the standard configuration template structure

        Returns:
            Dict: Configuration template with every supported key at its default
        """
        return {
            "finder": {
                "prompt": FinderConstants.PROMPT,
                "pointer": FinderConstants.POINTER,
                "marker": FinderConstants.MARKER,
                "height": FinderConstants.HEIGHT,
                "preview_window": FinderConstants.PREVIEW_WINDOW,
                "colors": [],
                "bindings": [],
                "extra_options": [],
            },
            "display": {
                "examples": False,
                "preview_width": PreviewConstants.DEFAULT_WIDTH,
                "notice_delay": 1,
                "warning_delay": 2,
            },
            "global": {
                "debug": False,
            },
        }

    def get_config_template_content(self) -> str:
        """
        Generate configuration template content as string without file I/O

        Returns:
            str: YAML configuration template content
        """
        template = self._create_config_template_structure()

        if HAS_RUAMEL_YAML:
            return self._ruamel_yaml_with_comments(template)

        header = "".join(f"# {line}\n" for line in self.TEMPLATE_HEADER)
        return header + yaml.safe_dump(template, default_flow_style=False, sort_keys=False, allow_unicode=True)

    def _ruamel_yaml_with_comments(self, data: Dict[str, Any]) -> str:
        """
        Use ruamel.yaml to generate YAML with comments preserved

        Args:
            data: Dictionary to convert

        Returns:
            str: YAML string with comments
        """
        yaml_processor = YAML()
        yaml_processor.width = 4096  # Prevent line wrapping
        yaml_processor.indent(mapping=2, sequence=4, offset=2)

        commented_data = CommentedMap()
        for key, value in data.items():
            commented_data[key] = CommentedMap(value) if isinstance(value, dict) else value

        commented_data.yaml_set_start_comment('\n'.join(self.TEMPLATE_HEADER))
        commented_data['finder'].yaml_set_comment_before_after_key(
            'colors', before="Appended after the built-in fzf options", indent=2
        )
        commented_data['display'].yaml_set_comment_before_after_key(
            'preview_width', before="Used when FZF_PREVIEW_COLUMNS is unset", indent=2
        )

        stream = StringIO()
        yaml_processor.dump(commented_data, stream)
        return stream.getvalue()
