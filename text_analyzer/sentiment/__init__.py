"""Sentiment analysis package.

Provides `SentimentAnalyzer`, a lexicon-based scorer counting positive and
negative words in the text.
"""

from .analyzer import SentimentAnalyzer
from .scoring import analyze_sentiment
