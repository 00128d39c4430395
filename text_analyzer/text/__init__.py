"""Text primitives package.

Provides tokenization, syllable estimation and the static word lists used
by the sentiment, keyword and readability analyzers.
"""

from .text_utils import words, sentences
from .syllables import count_syllables, count_text_syllables
from .lexicons import POSITIVE_WORDS, NEGATIVE_WORDS, STOPWORDS
