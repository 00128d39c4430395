from ..base_module import AnalysisModule
from ..models import SENTIMENT
from .scoring import analyze_sentiment


class SentimentAnalyzer(AnalysisModule):
    """Classifies the overall tone of a text as Positive, Negative or Neutral."""

    kind = SENTIMENT

    def __init__(self, config=None):
        super().__init__(config=config)
        self.threshold = float(self.config.get("label_threshold", 0.2))
        self.confidence_per_word = self.config.get("confidence_per_word", 5)

    def analyze(self, text: str) -> dict:
        result = analyze_sentiment(text, threshold=self.threshold,
                                   confidence_per_word=self.confidence_per_word)
        self.logger.debug("Sentiment %s (score=%s, +%d/-%d)", result.label, result.score,
                          result.positive_words, result.negative_words)
        return result.to_dict()
