from collections.abc import Iterable
import re

# ASCII whitespace only: \x1c-\x1f are control characters here, not separators
_WORD_PATTERN = re.compile(r"[^ \t\n\v\f\r]+")


def split_into_words(text: str) -> list[str]:
    """Splits the input text into whitespace-delimited terms."""
    return _WORD_PATTERN.findall(text)


def make_unique_non_empty_strings(strings: Iterable[str]) -> set[str]:
    """Deduplicates a collection of words, dropping empty strings."""
    return {string for string in strings if string}


def is_valid_word(word: str) -> bool:
    """A valid word contains no control characters (codes 0 to 31)."""
    return not any(ord(char) < 32 for char in word)
