import json

from click.testing import CliRunner

from m3u.cli import cli
from m3u.version import __version__


def test_cli_version():
    runner = CliRunner()
    result = runner.invoke(cli, ['--version'])
    assert result.exit_code == 0
    assert 'm3u-stream-reader' in result.output.lower()
    assert __version__ in result.output


def test_cli_help_lists_commands():
    result = CliRunner().invoke(cli, ['--help'])
    assert result.exit_code == 0
    for command in ('entries', 'ext', 'config'):
        assert command in result.output
    assert 'M3U__SECTION__KEY' in result.output


def test_config_command_from_environment(monkeypatch):
    monkeypatch.setenv('M3U__READER__ENCODING', 'latin-1')
    result = CliRunner().invoke(cli, ['config'])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output)['reader']['encoding'] == 'latin-1'


def test_config_command_section(test_config):
    result = CliRunner().invoke(cli, ['config', '--section', 'output'], obj=test_config)
    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {'output': {'format': 'text', 'lenient': False}}


def test_config_command_unknown_section(test_config):
    result = CliRunner().invoke(cli, ['config', '-s', 'nope'], obj=test_config)
    assert result.exit_code != 0
    assert "Unknown section 'nope'" in result.output


def test_invalid_config_is_a_usage_error(monkeypatch):
    monkeypatch.setenv('M3U__OUTPUT__FORMAT', 'xml')
    result = CliRunner().invoke(cli, ['config'])
    assert result.exit_code == 2
    assert 'Unknown output format' in result.output
