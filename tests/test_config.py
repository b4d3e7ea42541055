"""
Configuration loading tests
"""
import pytest

from scene_release.config import Config, ParserConfig


def _write(tmp_path, text):
    tokens_file = tmp_path / "tokens.yaml"
    tokens_file.write_text(text, encoding="utf-8")
    return str(tokens_file)


class TestLoadTokens:

    def test_mapping_sections(self, tmp_path):
        path = _write(tmp_path, "providers:\n  SKYG: SKYG\nlanguages:\n  Latvian: lv\n")

        tokens = Config.load_tokens(path)

        assert tokens['providers'] == {'SKYG': 'SKYG'}
        assert tokens['languages'] == {'Latvian': 'lv'}
        assert tokens['flags'] == {}

    def test_list_section(self, tmp_path):
        path = _write(tmp_path, "flags:\n  - SDR\n  - OAR\n")

        assert Config.load_tokens(path)['flags'] == {'SDR': 'SDR', 'OAR': 'OAR'}

    def test_empty_file(self, tmp_path):
        path = _write(tmp_path, "")

        assert Config.load_tokens(path) == {'providers': {}, 'languages': {}, 'flags': {}}

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Config.load_tokens(str(tmp_path / "missing.yaml"))

    def test_top_level_must_be_mapping(self, tmp_path):
        path = _write(tmp_path, "- SKYG\n- NOW\n")

        with pytest.raises(ValueError):
            Config.load_tokens(path)

    def test_section_must_be_mapping_or_list(self, tmp_path):
        path = _write(tmp_path, "providers: 5\n")

        with pytest.raises(ValueError, match="providers"):
            Config.load_tokens(path)


class TestConfig:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("SCENE_RELEASE_DEFAULT_TYPE", raising=False)
        monkeypatch.delenv("SCENE_RELEASE_TOKENS_FILE", raising=False)
        monkeypatch.delenv("SCENE_RELEASE_LOG_LEVEL", raising=False)

        config = Config.from_env()

        assert config.parser.default_type == "movie"
        assert config.parser.tokens_file is None
        assert config.logging.level == "INFO"
        assert config.tokens() == {}

    def test_environment_overrides(self, monkeypatch, tmp_path):
        path = _write(tmp_path, "providers:\n  SKYG: SKYG\n")
        monkeypatch.setenv("SCENE_RELEASE_DEFAULT_TYPE", "tv")
        monkeypatch.setenv("SCENE_RELEASE_TOKENS_FILE", path)

        config = Config.from_env()

        assert config.parser.default_type == "tv"
        assert config.tokens()['providers'] == {'SKYG': 'SKYG'}

    def test_empty_tokens_variable_means_unset(self, monkeypatch):
        monkeypatch.setenv("SCENE_RELEASE_TOKENS_FILE", "")

        assert ParserConfig().tokens_file is None
