import itertools
from typing import Callable, Optional

from promptslug.core.config_manager import ConfigManager
from promptslug.core.exceptions import SlugCollisionError
from promptslug.core.page_slugs import individual_page_text, service_page_text, universal_page_text
from promptslug.core.storage.slug_index import SlugIndex
from promptslug.utils.logger import get_logger
from promptslug.utils.slug_generator import slugify
from promptslug.utils.unique_token import generate_unique_part, timestamp_token

logger = get_logger(__name__)


class SlugService:
    """
    Issues slugs for prompt pages.

    Combines the configured slug settings, unique-part generation and an
    optional SlugIndex used to detect collisions with previously issued slugs.
    """

    def __init__(
        self,
        config_manager: Optional[ConfigManager] = None,
        slug_index: Optional[SlugIndex] = None,
        token_factory: Optional[Callable[[], str]] = None,
    ):
        self.config_manager = config_manager or ConfigManager()
        self.slug_index = slug_index
        self.strip_final_hyphens = self.config_manager.get_strip_final_hyphens()
        self.max_attempts = self.config_manager.get_max_attempts()
        random_length = self.config_manager.get_random_length()
        self.token_factory = token_factory or (lambda: generate_unique_part(random_length=random_length))

    def make_slug(self, text: str, unique_part: Optional[str] = None) -> str:
        return slugify(text, unique_part, strip_edges=self.strip_final_hyphens)

    def issue_unique_slug(self, text: str, register: bool = True, token_factory: Optional[Callable[[], str]] = None) -> str:
        """
        Generates a slug for `text` that is not already in the slug index.

        Args:
            text: The text to slugify.
            register: Record the issued slug in the index.
            token_factory: Overrides the service's unique-part generator for this call.

        Returns:
            The issued slug.

        Raises:
            SlugCollisionError: If every attempt produced a slug already in the index.
        """
        factory = token_factory or self.token_factory
        for attempt in range(1, self.max_attempts + 1):
            slug = self.make_slug(text, factory())
            if self.slug_index is None or not self.slug_index.contains(slug):
                if register and self.slug_index is not None:
                    self.slug_index.add_slug(slug, text)
                logger.info(f"Issued slug '{slug}' for '{text}' (attempt {attempt}).")
                return slug
            logger.warning(f"Slug '{slug}' already issued. Retrying with a new unique part.")

        raise SlugCollisionError(text, self.max_attempts)

    def prompt_page_slug(
        self,
        business_name: str,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        name: Optional[str] = None,
        register: bool = True,
    ) -> str:
        text = individual_page_text(business_name, first_name=first_name, last_name=last_name, name=name)
        return self.issue_unique_slug(text, register=register)

    def service_page_slug(self, business_name: Optional[str] = None, service_name: Optional[str] = None, register: bool = True) -> str:
        return self.issue_unique_slug(service_page_text(business_name, service_name), register=register)

    def universal_slug(self, register: bool = True) -> str:
        """Slug for an account's universal page: 'universal-<base36 timestamp>'."""
        offsets = itertools.count()
        return self.issue_unique_slug(
            universal_page_text(),
            register=register,
            token_factory=lambda: timestamp_token(offset_ms=next(offsets)),
        )
