from pathlib import Path
import logging
import textwrap

import pytest

from m3u.config import load_config, load_typed_config, deep_merge, coerce_scalar


def test_deep_merge_simple():
    a = {'a': 1, 'b': {'x': 1, 'y': 2}}
    b = {'b': {'y': 99, 'z': 5}, 'c': 3}
    merged = deep_merge(a, b)
    assert merged == {'a': 1, 'b': {'x': 1, 'y': 99, 'z': 5}, 'c': 3}
    # inputs untouched
    assert a['b'] == {'x': 1, 'y': 2}


def test_coerce_scalar():
    assert coerce_scalar('true') is True
    assert coerce_scalar('Off') is False
    assert coerce_scalar('10') == 10
    assert coerce_scalar('-3') == -3
    assert isinstance(coerce_scalar('10.5'), float)
    assert coerce_scalar('["a", "b"]') == ['a', 'b']
    assert coerce_scalar('[not json') == '[not json'
    assert coerce_scalar('latin-1') == 'latin-1'


def test_defaults(monkeypatch):
    monkeypatch.delenv('M3U__READER__ENCODING', raising=False)
    cfg = load_config()
    assert cfg['reader'] == {'encoding': 'utf-8', 'errors': 'strict'}
    assert cfg['output'] == {'format': 'text', 'lenient': False}
    assert cfg['log_level'] == 'WARNING'


def test_env_override(monkeypatch):
    monkeypatch.setenv('M3U__READER__ENCODING', 'latin-1')
    monkeypatch.setenv('M3U__OUTPUT__LENIENT', 'yes')
    cfg = load_config()
    assert cfg['reader']['encoding'] == 'latin-1'
    assert cfg['output']['lenient'] is True


def test_dotenv_and_env(tmp_path: Path, monkeypatch):
    """Test that .env file is loaded and environment variables override it."""
    env_file = tmp_path / '.env'
    env_file.write_text(textwrap.dedent('''\
    # playlist reading
    M3U__READER__ENCODING="cp1252"  # Windows playlists
    M3U__OUTPUT__FORMAT=json
    M3U__READER__ERRORS='replace'
    UNRELATED=1
    '''), encoding='utf-8')
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv('M3U_ENABLE_DOTENV', '1')
    monkeypatch.setenv('M3U__OUTPUT__FORMAT', 'text')
    cfg = load_config()
    assert cfg['reader']['encoding'] == 'cp1252'
    assert cfg['reader']['errors'] == 'replace'
    # env wins over .env
    assert cfg['output']['format'] == 'text'
    assert 'unrelated' not in cfg


def test_dotenv_skipped_under_pytest(tmp_path: Path, monkeypatch):
    (tmp_path / '.env').write_text('M3U__OUTPUT__FORMAT=json\n', encoding='utf-8')
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv('M3U_ENABLE_DOTENV', raising=False)
    assert load_config()['output']['format'] == 'text'


def test_overrides_applied_last(monkeypatch):
    monkeypatch.setenv('M3U__READER__ENCODING', 'latin-1')
    cfg = load_config({'reader': {'encoding': 'utf-16'}})
    assert cfg['reader'] == {'encoding': 'utf-16', 'errors': 'strict'}


def test_invalid_output_format(monkeypatch):
    monkeypatch.setenv('M3U__OUTPUT__FORMAT', 'xml')
    with pytest.raises(ValueError, match='output format'):
        load_config()


def test_invalid_encoding():
    with pytest.raises(ValueError, match='encoding'):
        load_config({'reader': {'encoding': 'no-such-codec'}})


def test_log_level_configures_root_logger():
    load_config({'log_level': 'debug'})
    assert logging.getLogger().level == logging.DEBUG
    load_config({'log_level': 'bogus'})
    assert logging.getLogger().level == logging.WARNING


def test_load_typed_config(monkeypatch):
    monkeypatch.setenv('M3U__OUTPUT__LENIENT', 'true')
    cfg = load_typed_config()
    assert cfg.output.lenient is True
    assert cfg.reader.encoding == 'utf-8'
