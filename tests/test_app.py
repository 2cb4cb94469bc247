# =============================================================================
# CLI Tests
# =============================================================================

import pytest

from hamspam.app import main, parse_args, apply_overrides
from hamspam.config import Config, ConfigError


@pytest.fixture
def no_config(temp_dir):
    """Path to a config file that doesn't exist."""
    return str(temp_dir / "absent.toml")


def test_batch_run(corpus_file, no_config, capsys):
    exit_code = main(["--file", str(corpus_file), "--seed", "5", "--config", no_config])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert out.count("Analysis: ") == 5
    assert "Overall Accuracy:" in out
    assert "Done." in out


def test_probe_run(corpus_file, no_config, capsys):
    exit_code = main(["--file", str(corpus_file), "--probe", "win cash", "--config", no_config])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert out.count("Classifies as: spam") == 5


def test_unknown_label_exits_with_error(temp_dir, no_config, capsys):
    corpus = temp_dir / "bad.data"
    corpus.write_text("ham\thello\nmaybe\twho knows\n", encoding="utf-8")

    exit_code = main(["--file", str(corpus), "--config", no_config])

    assert exit_code == 1
    assert "maybe" in capsys.readouterr().err


def test_missing_corpus_exits_with_error(temp_dir, no_config):
    assert main(["--file", str(temp_dir / "nope.data"), "--config", no_config]) == 1


def test_write_config(temp_dir, capsys):
    path = temp_dir / "config.toml"

    exit_code = main(["--config", str(path), "--write-config", "--seed", "9", "--top-words", "3"])

    assert exit_code == 0
    loaded = Config.load(path)
    assert loaded.corpus.seed == 9
    assert loaded.analysis.top_words == 3


def test_overrides_are_validated():
    args = parse_args(["--ratio", "2"])
    with pytest.raises(ConfigError):
        apply_overrides(Config(), args)


@pytest.mark.parametrize("setting", ['common_words = "50"', "common_words = 2.5"])
def test_wrong_typed_config_exits_with_error(corpus_file, temp_dir, capsys, setting):
    config_path = temp_dir / "config.toml"
    config_path.write_text(f"[analysis]\n{setting}\n", encoding="utf-8")

    exit_code = main(["--config", str(config_path), "--file", str(corpus_file)])

    assert exit_code == 1
    assert "Config error: analysis.common_words must be int" in capsys.readouterr().err
