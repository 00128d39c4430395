from collections import Counter

from ..models import Keyword
from ..text import words, STOPWORDS


def keyword_counts(text: str, min_word_length: int = 4, stopwords=STOPWORDS) -> Counter:
    """Count qualifying words in first-occurrence order."""
    return Counter(word for word in words(text)
                   if len(word) >= min_word_length and word not in stopwords)


def extract_keywords(text: str, top_n: int = 10, min_word_length: int = 4) -> list:
    """
    Most frequent non-stop words of *text*, at most *top_n* of them.

    Counter.most_common sorts stably, so words with equal frequency keep
    the order in which they first appear in the text.
    """
    counts = keyword_counts(text, min_word_length=min_word_length)
    return [Keyword(word=word, frequency=freq, importance=min(100, freq * 10))
            for word, freq in counts.most_common(top_n)]
