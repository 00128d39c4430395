from ..models import SentimentResult
from ..text import words, POSITIVE_WORDS, NEGATIVE_WORDS
from ..util import round_half_up

# label -> (emoji, display color)
SENTIMENT_STYLES = {
    "Positive": ("\U0001F60A", "#10b981"),
    "Negative": ("\U0001F61E", "#ef4444"),
    "Neutral": ("\U0001F610", "#f59e0b"),
}


def _label_for(score: float, threshold: float) -> str:
    if score > threshold:
        return "Positive"
    if score < -threshold:
        return "Negative"
    return "Neutral"


def analyze_sentiment(text: str, threshold: float = 0.2, confidence_per_word: int = 5,
                      positive_words=POSITIVE_WORDS, negative_words=NEGATIVE_WORDS) -> SentimentResult:
    """
    Score *text* between -1 (all negative words) and 1 (all positive words).

    A word is checked against both lexicons independently. Confidence grows
    with the number of sentiment-bearing words and saturates at 100.
    """
    positive_count = 0
    negative_count = 0
    for word in words(text):
        if word in positive_words:
            positive_count += 1
        if word in negative_words:
            negative_count += 1

    total = positive_count + negative_count
    score = (positive_count - negative_count) / total if total > 0 else 0.0
    label = _label_for(score, threshold)
    emoji, color = SENTIMENT_STYLES[label]
    confidence = min(100, total * confidence_per_word)

    return SentimentResult(
        score=round_half_up(score, 2),
        label=label,
        emoji=emoji,
        color=color,
        positive_words=positive_count,
        negative_words=negative_count,
        confidence=round_half_up(confidence),
    )
