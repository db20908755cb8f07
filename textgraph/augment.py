"""
Text augmentation with bridge words.

New text keeps the words, casing and punctuation of the input and gains a
bridge word between every pair of consecutive words that has one in the
graph. Whitespace is normalized: each run of whitespace in the output
becomes a single space, and leading/trailing whitespace is removed.
"""

import logging
import random
import re
from typing import List, Optional

from .graph import WordGraph
from .query import find_bridge_words
from .tokenizer import Tokenizer, is_word

logger = logging.getLogger(__name__)

_WHITESPACE_RUN = re.compile(r'\s+')


def generate_new_text(graph: WordGraph, text: str, rng: random.Random,
                      tokenizer: Optional[Tokenizer] = None) -> str:
    """
    Insert bridge words between consecutive words of a text.

    Consecutive means adjacent among the alphabetic fragments of the input,
    regardless of punctuation between them. For each pair with at least one
    bridge, one bridge is chosen uniformly with `rng` and placed right after
    the first word of the pair, in lowercase.

    Args:
        graph: Graph supplying bridge words
        text: Input text, any case and punctuation
        rng: Random source used for each bridge pick
        tokenizer: Optional tokenizer providing fragment splitting

    Returns:
        Augmented text, or `text` unchanged if it has fewer than two words

    Example:
        >>> generate_new_text(graph, "Seek to explore", random.Random(0))
        'Seek to explore'  # or e.g. 'Seek to boldly explore'
    """
    tokenizer = tokenizer or Tokenizer()
    fragments = tokenizer.split_fragments(text)
    word_positions = [i for i, fragment in enumerate(fragments) if is_word(fragment)]
    if len(word_positions) < 2:
        return text

    next_word = {
        position: fragments[following]
        for position, following in zip(word_positions, word_positions[1:])
    }

    pieces: List[str] = []
    inserted = 0
    for position, fragment in enumerate(fragments):
        pieces.append(fragment)
        if position not in next_word:
            continue
        bridges = find_bridge_words(graph, fragment, next_word[position])
        if bridges:
            pieces.append(" " + rng.choice(bridges))
            inserted += 1

    logger.debug("Inserted %d bridge words into %d-word text", inserted, len(word_positions))
    return _WHITESPACE_RUN.sub(" ", "".join(pieces)).strip()
