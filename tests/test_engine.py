"""
Tests for the analysis engine facade and export snapshots.
"""

import json

import pytest

from text_analyzer import (
    TextAnalysisEngine,
    InvalidInputError,
    analyze,
    export_snapshot,
    export_json,
    save_snapshot_to_file,
)
from text_analyzer.config import merge_config, default_config
from text_analyzer.models import AnalysisRequest, ANALYSIS_KINDS


class TestAnalysisRequest:
    """Request validation."""

    def test_from_mapping_keeps_enabled_kinds(self):
        request = AnalysisRequest.from_options("Hi.", {"sentiment": True, "summary": False, "readability": True})
        assert request.ordered_kinds() == ["sentiment", "readability"]

    def test_from_iterable(self):
        request = AnalysisRequest.from_options("Hi.", ["readability", "keywords"])
        assert request.ordered_kinds() == ["keywords", "readability"]

    def test_none_selects_everything(self):
        assert AnalysisRequest.from_options("Hi.").ordered_kinds() == list(ANALYSIS_KINDS)

    @pytest.mark.parametrize("text", ["", "   ", "\n\t "])
    def test_blank_text_rejected(self, text):
        with pytest.raises(InvalidInputError):
            AnalysisRequest.from_options(text)

    def test_unknown_kind_rejected(self):
        with pytest.raises(InvalidInputError, match="translation"):
            AnalysisRequest.from_options("Hi.", ["sentiment", "translation"])

    def test_single_kind_name(self):
        assert AnalysisRequest.from_options("Hi.", "sentiment").ordered_kinds() == ["sentiment"]

    def test_single_unknown_kind_name_is_not_split(self):
        with pytest.raises(InvalidInputError, match="'poetry'"):
            AnalysisRequest.from_options("Hi.", "poetry")

    @pytest.mark.parametrize("options", [[1], [{}], [None, "sentiment"], {1: True}, 7])
    def test_non_name_kinds_rejected(self, options):
        with pytest.raises(InvalidInputError):
            AnalysisRequest.from_options("Hi.", options)

    def test_unhashable_kinds_rejected_by_engine(self):
        with pytest.raises(InvalidInputError):
            TextAnalysisEngine().analyze("Hi.", [["sentiment"]])


class TestTextAnalysisEngine:
    """End-to-end analysis."""

    def test_all_kinds(self, product_review):
        results = TextAnalysisEngine().analyze(product_review, {kind: True for kind in ANALYSIS_KINDS})
        assert list(results) == ["sentiment", "keywords", "summary", "readability"]
        assert results["sentiment"]["label"] == "Positive"
        assert results["sentiment"]["positiveWords"] == 2
        assert results["sentiment"]["negativeWords"] == 0
        words = [kw["word"] for kw in results["keywords"]]
        for expected in ("amazing", "love", "everything", "product"):
            assert expected in words
        assert results["summary"] == product_review
        assert isinstance(results["readability"]["fleschScore"], int)
        assert results["readability"]["wordCount"] == 10
        assert results["readability"]["sentenceCount"] == 2

    def test_bad(self):
        results = TextAnalysisEngine().analyze("Bad.", ["sentiment"])
        assert results == {"sentiment": {
            "score": -1.0, "label": "Negative", "emoji": "\U0001F61E", "color": "#ef4444",
            "positiveWords": 0, "negativeWords": 1, "confidence": 5,
        }}

    def test_unrequested_kinds_are_absent(self, product_review):
        results = TextAnalysisEngine().analyze(product_review, {"keywords": True, "sentiment": False})
        assert list(results) == ["keywords"]
        assert "sentiment" not in results

    def test_empty_selection_gives_empty_result(self, product_review):
        assert TextAnalysisEngine().analyze(product_review, {}) == {}

    def test_blank_text_fails_fast(self):
        with pytest.raises(InvalidInputError):
            TextAnalysisEngine().analyze("   ", ["sentiment"])

    def test_config_is_passed_to_modules(self):
        config = merge_config(default_config(), {"KeywordAnalyzer": {"top_n_keywords_count": 1}})
        results = TextAnalysisEngine(config=config).analyze("data data science", ["keywords"])
        assert results["keywords"] == [{"word": "data", "frequency": 2, "importance": 20}]

    def test_repeated_calls_are_independent(self, product_review):
        engine = TextAnalysisEngine()
        first = engine.analyze(product_review)
        engine.analyze("Bad.")
        assert engine.analyze(product_review) == first

    def test_module_level_analyze(self):
        assert analyze("Bad.", ["sentiment"])["sentiment"]["label"] == "Negative"


class TestExport:
    """Export snapshots."""

    def test_snapshot_shape(self, fixed_clock):
        results = {"summary": "Short."}
        snapshot = export_snapshot(results, "Short.", clock=fixed_clock)
        assert snapshot == {
            "timestamp": "2024-05-01T12:30:45.123Z",
            "originalText": "Short.",
            "analysis": {"summary": "Short."},
            "metadata": {"analyzer": "AI Text Analyzer v1.0", "engine": "Advanced NLP Engine"},
        }

    def test_json_round_trip(self, product_review, fixed_clock):
        results = TextAnalysisEngine().analyze(product_review)
        parsed = json.loads(export_json(results, product_review, clock=fixed_clock))
        assert parsed["analysis"] == results
        assert parsed["originalText"] == product_review

    def test_snapshot_is_detached_from_results(self, fixed_clock):
        results = {"keywords": [{"word": "data", "frequency": 2, "importance": 20}]}
        snapshot = export_snapshot(results, "data data", clock=fixed_clock)
        results["keywords"].clear()
        assert snapshot["analysis"]["keywords"] == [{"word": "data", "frequency": 2, "importance": 20}]

    def test_save_to_file(self, tmp_path, fixed_clock):
        snapshot = export_snapshot({"summary": "Hi."}, "Hi.", clock=fixed_clock)
        path = save_snapshot_to_file(snapshot, directory=str(tmp_path / "reports"), clock=fixed_clock)
        expected_ms = int(fixed_clock().timestamp() * 1000)
        assert path.endswith(f"text-analysis-{expected_ms}.json")
        with open(path, encoding="utf-8") as f:
            assert json.load(f) == snapshot

    def test_save_failure_returns_none(self, tmp_path, fixed_clock):
        blocker = tmp_path / "blocked"
        blocker.write_text("not a directory")
        assert save_snapshot_to_file({}, directory=str(blocker), clock=fixed_clock) is None
