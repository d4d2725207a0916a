from promptslug.utils.slug_generator import slugify

__all__ = ['slugify']
