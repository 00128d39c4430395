"""Content analysis package.

Provides `KeywordAnalyzer`, `SummaryAnalyzer` and `ReadabilityAnalyzer`,
thin configurable modules over the keyword, summary and readability
helpers implemented in sibling modules.
"""

from .analyzer import KeywordAnalyzer, SummaryAnalyzer, ReadabilityAnalyzer
from .keywords import extract_keywords
from .summary import generate_summary
from .readability import calculate_readability, reading_level
