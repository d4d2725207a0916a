import pytest
from click.testing import CliRunner
from unittest import mock

from promptslug.cli.main import promptslug


@pytest.fixture
def runner():
    return CliRunner()


def test_slugify_cli_passes_params_to_handler(runner):
    with mock.patch("promptslug.cli.main.slugify_handler") as mock_handler:
        result = runner.invoke(promptslug, [
            'slugify', 'My Post',
            '--unique-part', 'ab12',
            '--transliterate',
            '--strip-edges',
        ])

        assert result.exit_code == 0, f"CLI command failed: {result.output}"
        mock_handler.assert_called_once_with(
            text='My Post',
            unique_part='ab12',
            random_unique=False,
            transliterate=True,
            strip_edges=True,
        )


def test_prompt_page_cli_default_params(runner):
    with mock.patch("promptslug.cli.main.prompt_page_handler") as mock_handler:
        result = runner.invoke(promptslug, ['prompt-page', 'Acme'])

        assert result.exit_code == 0, f"CLI command failed: {result.output}"
        called_kwargs = mock_handler.call_args[1]
        assert called_kwargs['business_name'] == 'Acme'
        assert called_kwargs['first_name'] is None
        assert called_kwargs['last_name'] is None
        assert called_kwargs['name'] is None
        assert called_kwargs['service_name'] is None
        assert called_kwargs['register'] is True
        assert called_kwargs['workspace'] is None


def test_prompt_page_cli_no_register(runner, tmp_path):
    with mock.patch("promptslug.cli.main.prompt_page_handler") as mock_handler:
        result = runner.invoke(promptslug, [
            'prompt-page', 'Acme',
            '--service', 'Drain Cleaning',
            '--no-register',
            '--workspace', str(tmp_path),
        ])

        assert result.exit_code == 0, f"CLI command failed: {result.output}"
        called_kwargs = mock_handler.call_args[1]
        assert called_kwargs['service_name'] == 'Drain Cleaning'
        assert called_kwargs['register'] is False
        assert called_kwargs['workspace'] == str(tmp_path)


def test_universal_cli_passes_business_name(runner):
    with mock.patch("promptslug.cli.main.universal_handler") as mock_handler:
        result = runner.invoke(promptslug, ['universal', '--business-name', 'Acme'])

        assert result.exit_code == 0, f"CLI command failed: {result.output}"
        mock_handler.assert_called_once_with(business_name='Acme', register=True, workspace=None)


def test_token_cli(runner):
    with mock.patch("promptslug.cli.main.token_handler") as mock_handler:
        result = runner.invoke(promptslug, ['token', '--timestamp-only'])

        assert result.exit_code == 0, f"CLI command failed: {result.output}"
        mock_handler.assert_called_once_with(timestamp_only=True)


def test_slugify_requires_text(runner):
    result = runner.invoke(promptslug, ['slugify'])
    assert result.exit_code != 0
