"""
Heuristic English syllable estimation.

The estimate strips one common silent suffix, drops a leading 'y' and then
counts groups of one or two vowels. It is an approximation and is off by
about one syllable on irregular words (e.g. "idea", "table", "creates"),
which is acceptable for Flesch scoring.
"""

import re

from .text_utils import words

_SILENT_SUFFIX = re.compile(r'(?:[^laeiouy]es|ed|[^laeiouy]e)$')
_LEADING_Y = re.compile(r'^y')
_VOWEL_GROUP = re.compile(r'[aeiouy]{1,2}')


def count_syllables(word: str) -> int:
    """Estimate the syllables of a single lowercase word (always at least 1)."""
    word = _SILENT_SUFFIX.sub('', word, count=1)
    word = _LEADING_Y.sub('', word, count=1)
    groups = _VOWEL_GROUP.findall(word)
    return len(groups) if groups else 1


def count_text_syllables(text: str) -> int:
    return sum(count_syllables(word) for word in words(text))
