import pytest

from fasttag.lexicon import Lexicon
from fasttag.tagger import FastTagger

SAMPLE_CORPUS = "\n".join(
    [
        "the DT",
        "The DT",
        "dog NN VB",
        "Dog NNP",
        "ran VBD VB",
        "quickly NN",
        "running NN",
        "nationals NN",
        "national NN",
        "walked NN",
        "walk VB NN",
        "cats NN",
        "fish NN",
        "would MD",
        "3.5 NN",
        "seen VBN",
        "placeholder",
    ]
)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    config_dir = tmp_path / "fasttag-config"
    monkeypatch.setenv("FASTTAG_CONFIG_DIR", str(config_dir))
    monkeypatch.delenv("FASTTAG_LEXICON", raising=False)
    return config_dir


@pytest.fixture
def lexicon():
    return Lexicon.from_text(SAMPLE_CORPUS)


@pytest.fixture
def tagger(lexicon):
    return FastTagger(lexicon)


@pytest.fixture
def lexicon_file(tmp_path):
    path = tmp_path / "lexicon.txt"
    path.write_text(SAMPLE_CORPUS + "\n", encoding="utf-8")
    return path
