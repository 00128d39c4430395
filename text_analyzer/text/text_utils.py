import string

WORD_CHARS = frozenset(string.ascii_letters + string.digits + "_")
SENTENCE_TERMINATORS = frozenset(".!?")


def words(text: str) -> list:
    """Return the lowercased runs of ASCII letters, digits and underscores in *text*."""
    tokens = []
    start = None
    for i, ch in enumerate(text):
        if ch in WORD_CHARS:
            if start is None:
                start = i
        elif start is not None:
            tokens.append(text[start:i].lower())
            start = None
    if start is not None:
        tokens.append(text[start:].lower())
    return tokens


def _raw_sentences(text: str) -> list:
    found = []
    i, n = 0, len(text)
    while i < n:
        start = i
        while i < n and text[i] not in SENTENCE_TERMINATORS:
            i += 1
        if i == start:
            # terminator with no sentence body in front of it
            i += 1
            continue
        if i == n:
            # trailing fragment without a terminator is not a sentence
            break
        while i < n and text[i] in SENTENCE_TERMINATORS:
            i += 1
        found.append(text[start:i])
    return found


def sentences(text: str) -> list:
    """
    Split *text* into sentences ending in one or more of '.', '!' or '?'.

    A trailing fragment without a terminator is dropped. When no sentence
    is found at all, the whole text is treated as a single sentence.
    Every sentence is stripped of surrounding whitespace.
    """
    found = _raw_sentences(text) or [text]
    return [s.strip() for s in found]
