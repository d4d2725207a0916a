import json
import logging
import os
from typing import Dict, Optional

logger = logging.getLogger(__name__)

INDEX_FILENAME = 'slug_index.json'


class SlugIndex:
    """
    Keeps track of issued slugs, mapping each slug to the text it was generated from.
    """

    def __init__(self, workspace_path: str):
        """
        Initializes the SlugIndex.

        Args:
            workspace_path: The absolute path to the workspace directory.
        """
        self.index_path = os.path.join(workspace_path, INDEX_FILENAME)
        self._index_cache: Optional[Dict[str, str]] = None

    def _load_index(self) -> Dict[str, str]:
        """
        Loads the index file from disk.

        Returns:
            A dictionary representing the index.
        """
        if self._index_cache is not None:
            return self._index_cache

        if not self.index_exists():
            self._index_cache = {}
            return self._index_cache

        try:
            with open(self.index_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.error(f"Failed to load slug index at {self.index_path}: {e}")
            data = {}

        if not isinstance(data, dict):
            logger.error(f"Slug index at {self.index_path} is not a JSON object. Treating it as empty.")
            data = {}
        self._index_cache = data
        return self._index_cache

    def _save_index(self):
        if self._index_cache is None:
            return

        os.makedirs(os.path.dirname(self.index_path), exist_ok=True)
        try:
            with open(self.index_path, 'w', encoding='utf-8') as f:
                json.dump(self._index_cache, f, indent=2, sort_keys=True)
        except OSError as e:
            logger.error(f"Failed to save slug index to {self.index_path}: {e}")

    def index_exists(self) -> bool:
        return os.path.exists(self.index_path)

    def contains(self, slug: str) -> bool:
        return slug in self._load_index()

    def get_source(self, slug: str) -> Optional[str]:
        """
        Gets the text a slug was generated from.

        Args:
            slug: The issued slug.

        Returns:
            The source text if the slug is in the index, otherwise None.
        """
        return self._load_index().get(slug)

    def add_slug(self, slug: str, source: str) -> bool:
        """
        Records a newly issued slug.

        Args:
            slug: The slug to record.
            source: The text the slug was generated from.

        Returns:
            True if the slug was added, False if it was already taken.
        """
        index = self._load_index()
        if slug in index:
            logger.warning(f"Attempted to add slug '{slug}' which already exists in the index.")
            return False

        index[slug] = source
        self._save_index()
        logger.debug(f"Added slug to index: '{slug}' <- '{source}'")
        return True

    def remove_slug(self, slug: str) -> bool:
        index = self._load_index()
        if slug not in index:
            logger.warning(f"Attempted to remove slug '{slug}' which does not exist in the index.")
            return False

        del index[slug]
        self._save_index()
        logger.info(f"Removed slug '{slug}' from index.")
        return True

    def get_all_slugs(self) -> Dict[str, str]:
        """Returns a copy of the entire slug index."""
        return self._load_index().copy()
