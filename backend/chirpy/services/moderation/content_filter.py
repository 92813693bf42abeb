"""
Content filter applied to chirp bodies before storage.

Example:
    >>> clean_body("This is a Kerfuffle opinion")
    'this is a **** opinion'
"""

from typing import Iterable

PROFANE_WORDS = ("kerfuffle", "sharbert", "fornax")
MASK = "****"


def clean_body(text: str, words: Iterable[str] = PROFANE_WORDS) -> str:
    """
    Mask every denylisted word in a chirp body.

    Matching is a plain substring match on the lowercased text, one word at a
    time, so the whole returned string is lowercase and a mask can never form
    a new match for a later word.

    Args:
        text: Raw chirp body.
        words: Lowercase words to mask.

    Returns:
        Lowercased body with each denylisted word replaced by ``****``.
    """
    for word in words:
        text = text.lower().replace(word, MASK)
    return text
