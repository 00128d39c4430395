"""
Tests for configuration loading.
"""

import json

from text_analyzer.config import DEFAULT_CONFIG, load_config, merge_config, module_config


class TestLoadConfig:
    """Defaults and file overrides."""

    def test_defaults_without_path(self):
        config = load_config(None)
        assert config == DEFAULT_CONFIG
        assert config is not DEFAULT_CONFIG

    def test_file_overrides_are_merged(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"KeywordAnalyzer": {"top_n_keywords_count": 5}, "Extra": 1}))
        config = load_config(str(path))
        assert config["KeywordAnalyzer"] == {"top_n_keywords_count": 5, "min_word_length": 4}
        assert config["Extra"] == 1
        assert DEFAULT_CONFIG["KeywordAnalyzer"]["top_n_keywords_count"] == 10

    def test_missing_file_uses_defaults(self, tmp_path):
        assert load_config(str(tmp_path / "nope.json")) == DEFAULT_CONFIG

    def test_malformed_file_uses_defaults(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{oops")
        assert load_config(str(path)) == DEFAULT_CONFIG

    def test_non_object_file_uses_defaults(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2]")
        assert load_config(str(path)) == DEFAULT_CONFIG


class TestModuleConfig:
    def test_global_is_passed_down(self):
        config = merge_config(DEFAULT_CONFIG, {"Global": {"debug": True}})
        section = module_config(config, "SummaryAnalyzer")
        assert section["max_summary_sentences"] == 3
        assert section["Global"]["debug"] is True
