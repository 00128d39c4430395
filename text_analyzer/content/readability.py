from ..models import ReadabilityResult
from ..text import words, sentences, count_text_syllables
from ..util import round_half_up, clamp

# (minimum score, level, grade), checked top-down
READING_LEVELS = [
    (90, "Very Easy", "5th grade"),
    (80, "Easy", "6th grade"),
    (70, "Fairly Easy", "7th grade"),
    (60, "Standard", "8-9th grade"),
    (50, "Fairly Difficult", "10-12th grade"),
    (30, "Difficult", "College"),
]
HARDEST_LEVEL = ("Very Difficult", "College Graduate")


def reading_level(score: int) -> tuple:
    """Return (level, grade) for a Flesch Reading Ease score."""
    for minimum, level, grade in READING_LEVELS:
        if score >= minimum:
            return level, grade
    return HARDEST_LEVEL


def calculate_readability(text: str) -> ReadabilityResult:
    # sentences() falls back to the whole text, so there is always at least one
    sentence_count = len(sentences(text))
    word_count = len(words(text)) or 1
    syllable_count = count_text_syllables(text)

    asl = word_count / sentence_count
    asw = syllable_count / word_count
    flesch = 206.835 - 1.015 * asl - 84.6 * asw
    score = clamp(round_half_up(flesch), 0, 100)
    level, grade = reading_level(score)

    return ReadabilityResult(
        flesch_score=score,
        level=level,
        grade=grade,
        avg_words_per_sentence=round_half_up(asl, 1),
        avg_syllables_per_word=round_half_up(asw, 1),
        sentence_count=sentence_count,
        word_count=word_count,
    )
