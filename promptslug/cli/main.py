import click
from typing import Optional
from promptslug.cli.handlers import (
    list_handler,
    prompt_page_handler,
    slugify_handler,
    token_handler,
    universal_handler,
)

workspace_option = click.option(
    '--workspace',
    default=None,
    type=click.Path(file_okay=False),
    help='Workspace directory holding the slug index. Overrides the configured workspace.'
)


@click.group()
def promptslug():
    """A CLI tool for generating URL-safe prompt page slugs."""
    pass

@promptslug.command(name='slugify')
@click.argument('text')
@click.option('--unique-part', default=None, help='Token appended to the slug to disambiguate identical titles.')
@click.option('--random-unique', is_flag=True, default=False, help='Append a generated timestamp/random token when --unique-part is not given.')
@click.option('--transliterate', is_flag=True, default=False, help='Transliterate accented letters instead of treating them as separators.')
@click.option('--strip-edges', is_flag=True, default=False, help='Strip hyphens from both ends of the final slug.')
def slugify_command(
    text: str,
    unique_part: Optional[str],
    random_unique: bool,
    transliterate: bool,
    strip_edges: bool
):
    """Converts TEXT into a URL-safe slug."""
    slugify_handler(
        text=text,
        unique_part=unique_part,
        random_unique=random_unique,
        transliterate=transliterate,
        strip_edges=strip_edges
    )

@promptslug.command(name='token')
@click.option('--timestamp-only', is_flag=True, default=False, help='Print only the base36 timestamp token used for universal pages.')
def token_command(timestamp_only: bool):
    """Prints a freshly generated unique part."""
    token_handler(timestamp_only=timestamp_only)

@promptslug.command(name='prompt-page')
@click.argument('business_name')
@click.option('--first-name', default=None, help="Customer's first name.")
@click.option('--last-name', default=None, help="Customer's last name.")
@click.option('--name', default=None, help='Explicit page name. Takes precedence over the customer name.')
@click.option('--service', 'service_name', default=None, help='Issue a service prompt page slug for this service.')
@click.option('--no-register', is_flag=True, default=False, help='Do not record the issued slug in the slug index.')
@workspace_option
def prompt_page_command(
    business_name: str,
    first_name: Optional[str],
    last_name: Optional[str],
    name: Optional[str],
    service_name: Optional[str],
    no_register: bool,
    workspace: Optional[str]
):
    """
    Issues a unique slug for a new prompt page of BUSINESS_NAME.

    Without --service the slug is built from the page name or the customer's
    name; with --service it is built from the service name.
    """
    prompt_page_handler(
        business_name=business_name,
        first_name=first_name,
        last_name=last_name,
        name=name,
        service_name=service_name,
        register=not no_register,
        workspace=workspace
    )

@promptslug.command(name='universal')
@click.option('--business-name', default=None, help='Derive the slug from the business name instead of a timestamp token.')
@click.option('--no-register', is_flag=True, default=False, help='Do not record the issued slug in the slug index.')
@workspace_option
def universal_command(business_name: Optional[str], no_register: bool, workspace: Optional[str]):
    """Issues the slug for an account's universal prompt page."""
    universal_handler(business_name=business_name, register=not no_register, workspace=workspace)

@promptslug.command(name='list')
@workspace_option
def list_command(workspace: Optional[str]):
    """Lists every slug recorded in the slug index."""
    list_handler(workspace=workspace)

if __name__ == '__main__':
    promptslug()
