import click
from typing import Optional

from promptslug.cli.contexts import SlugCommandContext
from promptslug.core.exceptions import SlugError
from promptslug.core.page_slugs import business_universal_slug
from promptslug.utils.logger import get_logger
from promptslug.utils.slug_generator import ascii_slugify, slugify
from promptslug.utils.unique_token import generate_unique_part, timestamp_token

logger = get_logger(__name__)


def slugify_handler(
    text: str,
    unique_part: Optional[str],
    random_unique: bool,
    transliterate: bool,
    strip_edges: bool
):
    """Handles the logic for the 'slugify' CLI command."""
    if random_unique and not unique_part:
        unique_part = generate_unique_part()

    if transliterate:
        slug = ascii_slugify(text, unique_part, strip_edges=strip_edges)
    else:
        slug = slugify(text, unique_part, strip_edges=strip_edges)

    if not slug:
        click.echo(click.style(f"Warning: '{text}' produced an empty slug.", fg="yellow"), err=True)
    logger.debug(f"slugify_handler: '{text}' -> '{slug}'")
    click.echo(slug)


def token_handler(timestamp_only: bool):
    """Handles the logic for the 'token' CLI command."""
    click.echo(timestamp_token() if timestamp_only else generate_unique_part())


def _report_context_errors(context: SlugCommandContext) -> bool:
    if context.is_valid():
        return True
    for msg in context.error_messages:
        click.echo(click.style(msg, fg="red"), err=True)
    logger.error(f"SlugCommandContext validation failed. Errors: {context.error_messages}")
    return False


def prompt_page_handler(
    business_name: str,
    first_name: Optional[str],
    last_name: Optional[str],
    name: Optional[str],
    service_name: Optional[str],
    register: bool,
    workspace: Optional[str]
):
    """Handles the logic for the 'prompt-page' CLI command."""
    context = SlugCommandContext(workspace_option=workspace)
    if not _report_context_errors(context):
        return

    service = context.build_service()
    try:
        if service_name:
            slug = service.service_page_slug(business_name, service_name, register=register)
        else:
            slug = service.prompt_page_slug(
                business_name,
                first_name=first_name,
                last_name=last_name,
                name=name,
                register=register,
            )
    except SlugError as e:
        logger.error(f"Error issuing prompt page slug: {e}", exc_info=True)
        click.echo(click.style(f"Error issuing slug: {e}", fg="red"), err=True)
        return

    click.echo(slug)


def universal_handler(business_name: Optional[str], register: bool, workspace: Optional[str]):
    """Handles the logic for the 'universal' CLI command."""
    if business_name:
        # Onboarding form variant: no token, derived from the business name
        click.echo(business_universal_slug(business_name))
        return

    context = SlugCommandContext(workspace_option=workspace)
    if not _report_context_errors(context):
        return

    try:
        slug = context.build_service().universal_slug(register=register)
    except SlugError as e:
        logger.error(f"Error issuing universal slug: {e}", exc_info=True)
        click.echo(click.style(f"Error issuing slug: {e}", fg="red"), err=True)
        return

    click.echo(slug)


def list_handler(workspace: Optional[str]):
    """Handles the logic for the 'list' CLI command."""
    context = SlugCommandContext(workspace_option=workspace)
    if not _report_context_errors(context):
        return

    slugs = context.slug_index.get_all_slugs()
    if not slugs:
        click.echo("No slugs have been issued yet.")
        return

    for slug in sorted(slugs):
        click.echo(f"{slug}\t{slugs[slug]}")
