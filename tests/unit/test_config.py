import pytest

from kiwi_lib.config import ContainerConfig, dump_config, load_config, parse_config
from kiwi_lib.config.config import SILENT_ENV


def test_defaults_when_file_missing(tmp_path, monkeypatch):
    monkeypatch.delenv(SILENT_ENV, raising=False)
    cfg = load_config(tmp_path / 'missing.yml')
    assert cfg == ContainerConfig()


def test_load_from_yaml(tmp_path, monkeypatch):
    monkeypatch.delenv(SILENT_ENV, raising=False)
    p = tmp_path / 'kiwi.yml'
    p.write_text('silent: true\nlog_level: debug\nextra: 1\n', encoding='utf-8')
    cfg = load_config(p)
    assert cfg.silent is True
    assert cfg.log_level == 'DEBUG'


def test_env_overrides_file(tmp_path, monkeypatch):
    p = tmp_path / 'kiwi.yml'
    p.write_text('silent: true\n', encoding='utf-8')
    monkeypatch.setenv(SILENT_ENV, 'no')
    assert load_config(p).silent is False
    monkeypatch.setenv(SILENT_ENV, '1')
    assert load_config(tmp_path / 'missing.yml').silent is True


@pytest.mark.parametrize('raw', ['- a\n- b\n', 'silent: [unclosed', 'silent: maybe\n'])
def test_invalid_config(raw):
    with pytest.raises(ValueError) as e:
        parse_config(raw)
    assert 'invalid config format' in str(e.value)


def test_empty_and_bytes_input():
    assert parse_config('') == ContainerConfig()
    assert parse_config(b'silent: yes\n').silent is True


def test_dump_then_parse():
    cfg = ContainerConfig(silent=True, log_level='INFO')
    text = dump_config(cfg)
    assert text.startswith('silent: true')
    assert parse_config(text) == cfg
