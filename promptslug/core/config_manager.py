import configparser
import os
from typing import Optional

from promptslug.utils.logger import get_logger
from promptslug.utils.unique_token import DEFAULT_RANDOM_LENGTH

SCRIPT_DIR = os.path.dirname(os.path.abspath(__file__))
# Up two levels from promptslug/core to the project root
PROJECT_ROOT = os.path.dirname(os.path.dirname(SCRIPT_DIR))
DEFAULT_CONFIG_PATH = os.path.join(PROJECT_ROOT, 'workspace', 'config', 'settings.ini')
DEFAULT_WORKSPACE_PATH = os.path.join(PROJECT_ROOT, 'workspace/')
WORKSPACE_ENV_VAR = 'PROMPTSLUG_WORKSPACE_ROOT'

DEFAULT_MAX_ATTEMPTS = 5

logger = get_logger(__name__)


def _default_slug_settings() -> dict:
    return {
        'random_length': str(DEFAULT_RANDOM_LENGTH),
        'max_attempts': str(DEFAULT_MAX_ATTEMPTS),
        'strip_final_hyphens': 'false',
    }


class ConfigManager:
    def __init__(self, config_file_path=None):
        self.config_file_path = config_file_path or DEFAULT_CONFIG_PATH
        self.config = configparser.ConfigParser()
        self._load_config()

    def _load_config(self):
        """Loads the configuration from the INI file."""
        if not os.path.exists(self.config_file_path):
            logger.warning(f"Config file not found at {self.config_file_path}. Creating a default config.")
            default_config = configparser.ConfigParser()
            default_config['General'] = {'workspace_path': DEFAULT_WORKSPACE_PATH}
            default_config['Slugs'] = _default_slug_settings()
            try:
                os.makedirs(os.path.dirname(self.config_file_path), exist_ok=True)
                with open(self.config_file_path, 'w', encoding='utf-8') as configfile:
                    default_config.write(configfile)
                logger.info(f"Created a default config file at: {self.config_file_path}")
            except OSError as e:
                logger.error(f"Error creating default config file: {e}. Using hardcoded defaults.", exc_info=True)
            self.config = default_config
            return

        self.config.read(self.config_file_path, encoding='utf-8')

        # Fill in a missing [Slugs] section in memory; the file is left untouched
        if not self.config.has_section('Slugs'):
            self.config['Slugs'] = _default_slug_settings()
            logger.info("Added missing [Slugs] section to the config.")

    def get_workspace_path(self) -> str:
        """
        Returns the workspace path.
        Priority:
        1. PROMPTSLUG_WORKSPACE_ROOT environment variable.
        2. Path from config file (settings.ini).
        3. Default workspace path.
        """
        env_workspace_path = os.getenv(WORKSPACE_ENV_VAR)
        if env_workspace_path:
            logger.debug(f"Using workspace path from {WORKSPACE_ENV_VAR}: {env_workspace_path}")
            return os.path.abspath(env_workspace_path)

        path_from_config = self.config.get('General', 'workspace_path', fallback=DEFAULT_WORKSPACE_PATH)
        if not os.path.isabs(path_from_config):
            # Relative paths in settings.ini are relative to the project root
            resolved_path = os.path.join(PROJECT_ROOT, path_from_config)
            logger.debug(f"Resolved relative workspace path '{path_from_config}' to '{resolved_path}'")
            return os.path.abspath(resolved_path)

        return os.path.abspath(path_from_config)

    def get_setting(self, section: str, option: str, fallback=None) -> Optional[str]:
        """Gets a specific setting from the configuration."""
        try:
            return self.config.get(section, option, fallback=fallback)
        except (configparser.NoSectionError, configparser.NoOptionError):
            return fallback

    def _get_positive_int(self, option: str, default: int) -> int:
        try:
            value = self.config.getint('Slugs', option, fallback=default)
        except ValueError:
            logger.warning(f"Invalid integer for [Slugs] {option}. Using default {default}.")
            return default
        if value < 1:
            logger.warning(f"[Slugs] {option} must be at least 1, got {value}. Using default {default}.")
            return default
        return value

    def get_random_length(self) -> int:
        """Number of random base36 characters in generated unique parts."""
        return self._get_positive_int('random_length', DEFAULT_RANDOM_LENGTH)

    def get_max_attempts(self) -> int:
        """How many unique parts to try before giving up on a collision-free slug."""
        return self._get_positive_int('max_attempts', DEFAULT_MAX_ATTEMPTS)

    def get_strip_final_hyphens(self) -> bool:
        try:
            return self.config.getboolean('Slugs', 'strip_final_hyphens', fallback=False)
        except ValueError:
            logger.warning("Invalid boolean for [Slugs] strip_final_hyphens. Using default False.")
            return False
