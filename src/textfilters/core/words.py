"""
Word splitting for case conversion.

Input is scanned once, left to right. Runs of non-alphanumeric characters
(spaces, hyphens, underscores, punctuation) always end a word and are dropped.

Input without whitespace is read as an identifier and is also split inside
alphanumeric runs:
- at an uppercase letter that follows a lowercase letter or a digit
  (``someText`` -> ``some``, ``text``)
- at the last letter of an uppercase run that is followed by a lowercase
  letter (``HTTPServer`` -> ``http``, ``server``)

Input containing whitespace is read as prose, where stray capitals are case
noise: ``soMe Text`` -> ``some``, ``text``.

Digits never open a word on their own, so ``v2api`` stays one word.
Words are yielded lower-cased.
"""

from typing import Iterator, List


def is_word_boundary(previous: str, current: str, following: str = "") -> bool:
    """
    Check whether ``current`` starts a new word inside an alphanumeric run.

    Args:
        previous: The alphanumeric character before ``current``.
        current: The character being examined.
        following: The character after ``current``, or ``""`` at end of input.
    """
    if not current.isupper():
        return False

    # someText / version2Update
    if previous.islower() or previous.isdigit():
        return True

    # Last capital of an acronym run: HTTPServer
    return previous.isupper() and following.islower()


def is_identifier(text: str) -> bool:
    """True when text has no whitespace and camel boundaries apply."""
    return not any(char.isspace() for char in text)


def split_words(text: str) -> Iterator[str]:
    """
    Split text into lower-cased word fragments.

    Example:
        >>> list(split_words("XMLHttpRequest"))
        ['xml', 'http', 'request']
        >>> list(split_words("soMe  Text--here"))
        ['some', 'text', 'here']
    """
    camel_boundaries = is_identifier(text)
    word: List[str] = []

    for index, char in enumerate(text):
        if not char.isalnum():
            if word:
                yield "".join(word).lower()
                word = []
            continue

        if word and camel_boundaries:
            following = text[index + 1:index + 2]
            if is_word_boundary(word[-1], char, following):
                yield "".join(word).lower()
                word = []

        word.append(char)

    if word:
        yield "".join(word).lower()
