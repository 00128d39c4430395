import math

from ..text import words, sentences
from .keywords import extract_keywords


def _score_sentence(sentence: str, keyword_set: set) -> int:
    return sum(1 for word in words(sentence) if word in keyword_set)


def generate_summary(text: str, max_sentences: int = 3, keyword_pool: int = 10) -> str:
    """
    Extractive summary of *text*.

    Texts of one or two sentences are returned unchanged. Otherwise the
    sentences containing the most top keywords are kept, up to a third of
    the text (and at most *max_sentences*), in their original order.
    """
    all_sentences = sentences(text)
    if len(all_sentences) <= 2:
        return text

    keyword_set = {kw.word for kw in extract_keywords(text, top_n=keyword_pool)}
    scored = [(index, _score_sentence(sentence, keyword_set))
              for index, sentence in enumerate(all_sentences)]

    target = min(max_sentences, math.ceil(len(all_sentences) / 3))
    # stable sort: equal scores keep the earlier sentence first
    selected = sorted(scored, key=lambda item: item[1], reverse=True)[:target]
    selected_indices = sorted(index for index, _ in selected)
    return ' '.join(all_sentences[i] for i in selected_indices)
