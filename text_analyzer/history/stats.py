from collections import Counter

from ..util import round_half_up


def _most_common_label(labels: list):
    # ties go to the label whose first appearance is latest
    counts = Counter(labels)
    best = None
    for label in counts:
        if best is None or counts[label] >= counts[best]:
            best = label
    return best


def calculate_statistics(entries) -> dict:
    """Aggregate figures over history entries (newest first)."""
    sentiments = [e.results["sentiment"]["label"] for e in entries if e.results.get("sentiment")]
    flesch_scores = [e.results["readability"]["fleschScore"] for e in entries if e.results.get("readability")]

    keyword_totals = Counter()
    for entry in entries:
        for kw in entry.results.get("keywords") or []:
            keyword_totals[kw["word"]] += kw["frequency"]

    avg_readability = None
    if flesch_scores:
        avg_readability = round_half_up(sum(flesch_scores) / len(flesch_scores))

    return {
        "totalAnalyses": len(entries),
        "totalWords": sum(e.word_count for e in entries),
        "dominantSentiment": _most_common_label(sentiments) if sentiments else None,
        "avgReadability": avg_readability,
        "topKeywords": [{"word": w, "frequency": f} for w, f in keyword_totals.most_common(10)],
    }
