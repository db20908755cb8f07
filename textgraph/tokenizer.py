"""
Tokenizer Module
================

Text tokenization for word graph construction.

Only Latin letters form words. Everything else (digits, punctuation,
whitespace, non-Latin scripts) separates words when building the graph,
and is kept verbatim as fragments when text has to be reassembled.
"""

import re
from typing import List


WORD_PATTERN = re.compile(r'[A-Za-z]+')
SEPARATOR_PATTERN = re.compile(r'[^A-Za-z]+')
FRAGMENT_PATTERN = re.compile(r'[A-Za-z]+|[^A-Za-z]+')


def is_word(fragment: str) -> bool:
    """
    Check whether a fragment is a single alphabetic word.

    Args:
        fragment: Any string

    Returns:
        True if the fragment consists only of Latin letters

    Examples:
        >>> is_word("Scientist")
        True
        >>> is_word(", ")
        False
    """
    return WORD_PATTERN.fullmatch(fragment) is not None


class Tokenizer:
    """
    Text tokenizer producing lowercase alphabetic tokens.

    Example:
        tokenizer = Tokenizer()
        tokens = tokenizer.tokenize("The scientist analyzed the data.")
        # ['the', 'scientist', 'analyzed', 'the', 'data']

        fragments = tokenizer.split_fragments("Hi, there!")
        # ['Hi', ', ', 'there', '!']
    """

    def tokenize(self, text: str) -> List[str]:
        """
        Extract lowercase word tokens from text.

        Non-letter runs act as separators and are dropped. Duplicates are
        kept, in source order.

        Args:
            text: Raw text, any characters, any case

        Returns:
            List of lowercase tokens (empty for empty input)
        """
        if not text:
            return []
        return [token for token in SEPARATOR_PATTERN.split(text.lower()) if token]

    def split_fragments(self, text: str) -> List[str]:
        """
        Split text into alternating word and non-word fragments.

        Words keep their original casing. Joining the fragments gives back
        the input exactly.

        Args:
            text: Raw text

        Returns:
            Ordered list of fragments

        Example:
            >>> Tokenizer().split_fragments('"Go now," she said')
            ['"', 'Go', ' ', 'now', '," ', 'she', ' ', 'said']
        """
        if not text:
            return []
        return FRAGMENT_PATTERN.findall(text)

    def words_in(self, text: str) -> List[str]:
        """Return the alphabetic fragments of text with original casing."""
        return WORD_PATTERN.findall(text) if text else []
