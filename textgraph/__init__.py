"""
Text Graph Package
==================

Turns free text into a directed word-adjacency graph weighted by how often
one word follows another, and answers queries over it: degrees, edge
weights, bridge words, bridge-word text augmentation, weighted shortest
paths, PageRank and random walks.

Example:
    from textgraph import TextGraphProcessor

    processor = TextGraphProcessor()
    processor.load_text("The scientist carefully analyzed the data")
    processor.query_bridge_words("scientist", "analyzed")
    # 'The bridge word from scientist to analyzed is: carefully.'
    processor.shortest_path("the", "data").path
    # ('the', 'data')
"""

from .tokenizer import Tokenizer
from .graph import WordGraph, Edge, build_graph
from .config import TextGraphConfig, get_default_config
from .errors import (
    TextGraphError,
    PathTraversalError,
    TextLoadError,
    RenderError,
    WalkLogError,
)
from .query import (
    out_degree,
    in_degree,
    edge_weight,
    find_bridge_words,
    query_bridge_words,
)
from .augment import generate_new_text
from .paths import PathResult, shortest_path, shortest_paths_from, format_path
from .pagerank import compute_pagerank, compute_pagerank_details, pagerank_of
from .walk import RandomWalker, WalkLog, WalkResult, WalkStep, WalkStopReason
from .processor import TextGraphProcessor

__version__ = "1.0.0"
__all__ = [
    "TextGraphProcessor",
    "TextGraphConfig",
    "get_default_config",
    "Tokenizer",
    "WordGraph",
    "Edge",
    "build_graph",
    # Queries
    "out_degree",
    "in_degree",
    "edge_weight",
    "find_bridge_words",
    "query_bridge_words",
    "generate_new_text",
    # Paths
    "PathResult",
    "shortest_path",
    "shortest_paths_from",
    "format_path",
    # Ranking
    "compute_pagerank",
    "compute_pagerank_details",
    "pagerank_of",
    # Walks
    "RandomWalker",
    "WalkLog",
    "WalkResult",
    "WalkStep",
    "WalkStopReason",
    # Errors
    "TextGraphError",
    "PathTraversalError",
    "TextLoadError",
    "RenderError",
    "WalkLogError",
]
