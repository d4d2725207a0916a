from typing import Optional

from promptslug.core.config_manager import ConfigManager, DEFAULT_WORKSPACE_PATH
from promptslug.core.slug_service import SlugService
from promptslug.core.storage.slug_index import SlugIndex
from promptslug.utils.logger import get_logger

logger = get_logger(__name__)


class SlugCommandContext:
    """
    Resolves configuration, workspace and the slug index for CLI commands
    that issue or list slugs.
    """
    def __init__(self, workspace_option: Optional[str] = None, config_file: Optional[str] = None):
        self.workspace_option: Optional[str] = workspace_option
        self.config_file: Optional[str] = config_file
        self.error_messages: list[str] = []

        self.config_manager: Optional[ConfigManager] = self._load_config_manager()
        self.workspace_root: str = self._resolve_workspace_root()
        self.slug_index: SlugIndex = SlugIndex(self.workspace_root)

    def _load_config_manager(self) -> Optional[ConfigManager]:
        try:
            return ConfigManager(config_file_path=self.config_file)
        except Exception as e:
            logger.error(f"Failed to initialize ConfigManager: {e}", exc_info=True)
            self.error_messages.append(f"Failed to load configuration: {e}")
            return None

    def _resolve_workspace_root(self) -> str:
        if self.workspace_option:
            logger.info(f"Using provided workspace directory: {self.workspace_option}")
            return self.workspace_option
        if self.config_manager is None:
            logger.warning(f"No configuration available. Using default workspace: {DEFAULT_WORKSPACE_PATH}")
            return DEFAULT_WORKSPACE_PATH
        return self.config_manager.get_workspace_path()

    def is_valid(self) -> bool:
        return self.config_manager is not None

    def build_service(self) -> SlugService:
        return SlugService(config_manager=self.config_manager, slug_index=self.slug_index)
