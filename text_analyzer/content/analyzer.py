from ..base_module import AnalysisModule
from ..models import KEYWORDS, SUMMARY, READABILITY
from .keywords import extract_keywords
from .summary import generate_summary
from .readability import calculate_readability


class KeywordAnalyzer(AnalysisModule):
    """Extracts the most frequent meaningful words of a text."""

    kind = KEYWORDS

    def __init__(self, config=None):
        super().__init__(config=config)
        self.top_n_keywords = self.config.get("top_n_keywords_count", 10)
        self.min_word_length = self.config.get("min_word_length", 4)

    def analyze(self, text: str) -> list:
        keywords = extract_keywords(text, top_n=self.top_n_keywords, min_word_length=self.min_word_length)
        self.logger.debug("Extracted %d keywords", len(keywords))
        return [kw.to_dict() for kw in keywords]


class SummaryAnalyzer(AnalysisModule):
    """Builds an extractive summary from the most keyword-dense sentences."""

    kind = SUMMARY

    def __init__(self, config=None):
        super().__init__(config=config)
        self.max_sentences = self.config.get("max_summary_sentences", 3)
        self.keyword_pool = self.config.get("keyword_pool_size", 10)

    def analyze(self, text: str) -> str:
        return generate_summary(text, max_sentences=self.max_sentences, keyword_pool=self.keyword_pool)


class ReadabilityAnalyzer(AnalysisModule):
    """Computes the Flesch Reading Ease score and reading level."""

    kind = READABILITY

    def analyze(self, text: str) -> dict:
        result = calculate_readability(text)
        self.logger.debug("Flesch score %d (%s)", result.flesch_score, result.level)
        return result.to_dict()
