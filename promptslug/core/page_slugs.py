from typing import Optional

from promptslug.utils.slug_generator import slugify

UNIVERSAL_PAGE_TEXT = 'universal'


def individual_page_text(
    business_name: str,
    first_name: Optional[str] = None,
    last_name: Optional[str] = None,
    name: Optional[str] = None,
) -> str:
    """
    Source text for a prompt page created for a single customer.

    An explicit page name wins. Otherwise the business name is combined with
    the customer's first and last name, with placeholders for missing parts.
    """
    if name:
        return name
    return f"{business_name}-{first_name or 'customer'}-{last_name or 'page'}"


def service_page_text(business_name: Optional[str] = None, service_name: Optional[str] = None) -> str:
    """Source text for a service prompt page, e.g. 'Acme-Plumbing-prompt'."""
    return f"{business_name or 'business'}-{service_name or 'service'}-prompt"


def universal_page_text() -> str:
    return UNIVERSAL_PAGE_TEXT


def business_universal_slug(business_name: str) -> str:
    """Slug of a business's universal page during onboarding: 'universal-<business>'."""
    return f"{UNIVERSAL_PAGE_TEXT}-{slugify(business_name)}"
