"""Lightweight text analysis: sentiment, keywords, extractive summary and readability.

Usage:
    from text_analyzer import TextAnalysisEngine, export_snapshot

    engine = TextAnalysisEngine()
    results = engine.analyze("I love this. It is great!", {"sentiment": True, "readability": True})
    snapshot = export_snapshot(results, "I love this. It is great!")
"""

from .engine import TextAnalysisEngine, analyze
from .errors import TextAnalyzerError, InvalidInputError, SourceError, HistoryError
from .export import export_snapshot, export_json, save_snapshot_to_file
from .models import ANALYSIS_KINDS, AnalysisRequest

__version__ = "1.0.0"
