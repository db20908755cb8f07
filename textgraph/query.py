"""
Query Module
============

Degree, edge weight and bridge word lookups over a WordGraph.

All lookups are case-insensitive and total: a word that is not in the
graph yields 0, an empty list, or a "not in the graph" message, never an
exception.
"""

from typing import List

from .graph import WordGraph


def out_degree(graph: WordGraph, word: str) -> int:
    """
    Count the distinct successors of a word.

    Out-degree counts neighbors, not the total outgoing weight.

    Args:
        graph: Graph to query
        word: Word in any case

    Returns:
        Number of distinct outgoing neighbors, 0 if the word is absent
    """
    return len(graph.neighbors(word.lower()))


def in_degree(graph: WordGraph, word: str) -> int:
    """
    Count the distinct predecessors of a word.

    Args:
        graph: Graph to query
        word: Word in any case

    Returns:
        Number of nodes with an edge into the word, 0 if none or absent
    """
    return len(graph.predecessors(word.lower()))


def edge_weight(graph: WordGraph, source: str, target: str) -> int:
    """Weight of source -> target (any case), 0 if the edge does not exist."""
    return graph.weight(source.lower(), target.lower())


def find_bridge_words(graph: WordGraph, word1: str, word2: str) -> List[str]:
    """
    Find the words b with edges word1 -> b and b -> word2.

    Candidates are word1's successors, in the graph's neighbor order.

    Args:
        graph: Graph to query
        word1: First word, any case
        word2: Second word, any case

    Returns:
        Bridge words in neighbor order; empty if either word is absent

    Example:
        >>> graph = build_graph("the cat saw the dog".split())
        >>> find_bridge_words(graph, "cat", "the")
        ['saw']
    """
    word1 = word1.lower()
    word2 = word2.lower()
    if not graph.has_node(word1) or not graph.has_node(word2):
        return []

    return [
        candidate for candidate in graph.neighbors(word1)
        if word2 in graph.neighbors(candidate)
    ]


def format_bridge_words(word1: str, word2: str, bridges: List[str],
                        style: str = 'standard') -> str:
    """
    Render a bridge word list as a sentence.

    Args:
        word1: First word (already lowercase)
        word2: Second word (already lowercase)
        bridges: Bridge words, possibly empty
        style: 'standard' uses singular grammar for a single bridge,
            'legacy' always uses the plural wording

    Returns:
        The formatted message
    """
    if not bridges:
        return f"No bridge words from {word1} to {word2}!"

    if len(bridges) == 1:
        listing = f"{bridges[0]}."
    else:
        listing = ", ".join(bridges[:-1]) + f", and {bridges[-1]}."

    if len(bridges) == 1 and style == 'standard':
        return f"The bridge word from {word1} to {word2} is: {listing}"
    return f"The bridge words from {word1} to {word2} are: {listing}"


def query_bridge_words(graph: WordGraph, word1: str, word2: str,
                       style: str = 'standard') -> str:
    """
    Describe the bridge words between two words.

    Four disjoint outcomes (words echoed in lowercase):
        - neither word in the graph: No "w1" and "w2" in the graph!
        - one word missing:          No "missing" in the graph!
        - no bridges:                No bridge words from w1 to w2!
        - bridges found:             The bridge word(s) from w1 to w2 is/are: ...

    Args:
        graph: Graph to query
        word1: First word, any case
        word2: Second word, any case
        style: 'standard' or 'legacy' message wording

    Returns:
        Human-readable message

    Raises:
        ValueError: If style is not 'standard' or 'legacy'
    """
    if style not in ('standard', 'legacy'):
        raise ValueError(f"style must be 'standard' or 'legacy', got {style}")

    word1 = word1.lower()
    word2 = word2.lower()
    has_first = graph.has_node(word1)
    has_second = graph.has_node(word2)

    if style == 'legacy':
        if not has_first or not has_second:
            return f"No {word2 if has_first else word1} in the graph!"
    elif not has_first and not has_second:
        return f'No "{word1}" and "{word2}" in the graph!'
    elif not has_first or not has_second:
        return f'No "{word2 if has_first else word1}" in the graph!'

    return format_bridge_words(word1, word2, find_bridge_words(graph, word1, word2), style)
