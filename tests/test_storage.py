import json

import pytest

from fasttag.config import FastTagConfig
from fasttag.storage import (
    get_config_file,
    get_default_lexicon,
    load_config,
    read_config,
    set_default_lexicon,
    set_default_output_format,
    write_config,
)


def test_config_dir_from_environment(isolated_config):
    assert get_config_file(create_dir=False) == isolated_config / "config.json"


def test_read_missing_config_is_empty():
    assert read_config() == {}
    assert load_config() == FastTagConfig()


def test_write_config_merges(isolated_config):
    write_config({"lexicon": "/data/lexicon.txt"})
    write_config({"output_format": "slash"})
    assert read_config() == {"lexicon": "/data/lexicon.txt", "output_format": "slash"}
    config = load_config()
    assert config.lexicon == "/data/lexicon.txt"
    assert config.output_format == "slash"


def test_corrupt_config_is_ignored(isolated_config):
    isolated_config.mkdir(parents=True)
    (isolated_config / "config.json").write_text("{not json", encoding="utf-8")
    assert read_config() == {}


def test_from_dict_ignores_unknown_keys_and_formats():
    config = FastTagConfig.from_dict({"lexicon": "lex.txt", "output_format": "xml", "colour": "red"})
    assert config.lexicon == "lex.txt"
    assert config.output_format == "brackets"


def test_default_lexicon_prefers_environment(monkeypatch, tmp_path):
    lexicon_path = tmp_path / "lexicon.txt"
    set_default_lexicon(str(lexicon_path))
    assert get_default_lexicon() == str(lexicon_path.resolve())

    monkeypatch.setenv("FASTTAG_LEXICON", "https://example.org/lexicon.txt")
    assert get_default_lexicon() == "https://example.org/lexicon.txt"


def test_url_lexicon_is_stored_verbatim():
    set_default_lexicon("https://example.org/lexicon.txt")
    stored = json.loads(get_config_file().read_text(encoding="utf-8"))
    assert stored["lexicon"] == "https://example.org/lexicon.txt"


def test_set_output_format_validates():
    set_default_output_format("json")
    assert read_config()["output_format"] == "json"
    with pytest.raises(ValueError):
        set_default_output_format("xml")
