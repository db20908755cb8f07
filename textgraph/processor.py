"""
Text graph processor: the session facade over the engine.

Holds the current WordGraph and one shared random source, and exposes every
query as a method. Loading text builds a new graph and replaces the old one
wholesale; nothing derived from the graph is cached between calls.
"""

import logging
import random
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from .augment import generate_new_text
from .config import TextGraphConfig
from .graph import WordGraph, build_graph
from .loader import load_text_file
from .observability import MetricsCollector, timed
from .pagerank import compute_pagerank_details
from .paths import PathResult, format_path, shortest_path, shortest_paths_from
from .query import edge_weight, find_bridge_words, in_degree, out_degree, query_bridge_words
from .render import describe_graph, render_graph, to_dot
from .tokenizer import Tokenizer
from .types import RankVector, WalkDecision
from .walk import RandomWalker, WalkLog, WalkResult

logger = logging.getLogger(__name__)


class TextGraphProcessor:
    """
    Build a word graph from text and answer queries over it.

    Example:
        processor = TextGraphProcessor(config=TextGraphConfig(seed=1))
        processor.load_text("The scientist analyzed the data")
        processor.query_bridge_words("the", "analyzed")
        # 'The bridge word from the to analyzed is: scientist.'
        processor.shortest_path_message("the", "data")
    """

    def __init__(
        self,
        config: Optional[TextGraphConfig] = None,
        tokenizer: Optional[Tokenizer] = None,
        rng: Optional[random.Random] = None,
        enable_metrics: bool = False
    ):
        """
        Initialize the processor with an empty graph.

        Args:
            config: Optional configuration. Defaults to TextGraphConfig().
            tokenizer: Optional custom tokenizer.
            rng: Random source for augmentation and walks. Defaults to a
                random.Random seeded with config.seed.
            enable_metrics: Enable timing and count metrics.
        """
        self.config = config or TextGraphConfig()
        self.tokenizer = tokenizer or Tokenizer()
        self.rng = rng if rng is not None else random.Random(self.config.seed)
        self._graph = WordGraph({})
        self._metrics = MetricsCollector(enabled=enable_metrics)

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    @property
    def graph(self) -> WordGraph:
        """The current graph (empty before anything is loaded)."""
        return self._graph

    @property
    def tokens(self) -> Tuple[str, ...]:
        """Token sequence of the loaded text."""
        return self._graph.tokens

    @timed("build_graph")
    def load_text(self, text: str) -> WordGraph:
        """
        Tokenize text and replace the current graph with its word graph.

        Args:
            text: Raw text

        Returns:
            The new graph
        """
        self._graph = build_graph(self.tokenizer.tokenize(text))
        logger.info(
            "Graph loaded: %d nodes, %d edges",
            self._graph.node_count(), self._graph.edge_count()
        )
        return self._graph

    def load_file(self, path: Union[str, Path],
                  root: Optional[Union[str, Path]] = None) -> WordGraph:
        """
        Read a text file inside `root` and load it.

        Raises:
            PathTraversalError: If the path escapes the root
            TextLoadError: If the file cannot be read
        """
        return self.load_text(load_text_file(path, root))

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def out_degree(self, word: str) -> int:
        """Distinct successors of a word, 0 if absent."""
        return out_degree(self._graph, word)

    def in_degree(self, word: str) -> int:
        """Distinct predecessors of a word, 0 if absent."""
        return in_degree(self._graph, word)

    def edge_weight(self, source: str, target: str) -> int:
        """Weight of source -> target, 0 if absent."""
        return edge_weight(self._graph, source, target)

    def find_bridge_words(self, word1: str, word2: str) -> List[str]:
        """Bridge words from word1 to word2."""
        return find_bridge_words(self._graph, word1, word2)

    def query_bridge_words(self, word1: str, word2: str) -> str:
        """Bridge word message in the configured style."""
        self._metrics.record_count("bridge_queries")
        return query_bridge_words(self._graph, word1, word2, style=self.config.message_style)

    @timed("generate_new_text")
    def generate_new_text(self, text: str) -> str:
        """Insert bridge words between consecutive words of text."""
        return generate_new_text(self._graph, text, self.rng, self.tokenizer)

    # -------------------------------------------------------------------------
    # Paths
    # -------------------------------------------------------------------------

    @timed("shortest_path")
    def shortest_path(self, word1: str, word2: str) -> PathResult:
        """Minimum-weight path from word1 to word2."""
        return shortest_path(self._graph, word1, word2)

    def shortest_path_message(self, word1: str, word2: str) -> str:
        """Shortest path rendered as 'a -> b -> c' or a 'No path found' message."""
        return format_path(self.shortest_path(word1, word2))

    @timed("shortest_paths_from")
    def shortest_paths_from(self, word: str) -> Dict[str, PathResult]:
        """Shortest paths from word to every reachable word."""
        return shortest_paths_from(self._graph, word)

    # -------------------------------------------------------------------------
    # Ranking
    # -------------------------------------------------------------------------

    @timed("compute_pagerank")
    def compute_pagerank_details(self) -> Dict[str, Any]:
        """PageRank with iteration statistics, using the configured parameters."""
        return compute_pagerank_details(
            self._graph,
            damping=self.config.pagerank_damping,
            iterations=self.config.pagerank_iterations,
            tolerance=self.config.pagerank_tolerance,
            init=self.config.rank_init,
        )

    def compute_pagerank(self) -> RankVector:
        """PageRank score of every word."""
        return self.compute_pagerank_details()['pagerank']

    def pagerank_of(self, word: str) -> float:
        """PageRank of one word; 0.0 if absent or nothing is loaded."""
        if self._graph.is_empty():
            return 0.0
        return self.compute_pagerank().get(word.lower(), 0.0)

    # -------------------------------------------------------------------------
    # Random walk
    # -------------------------------------------------------------------------

    @timed("random_walk")
    def random_walk(
        self,
        decide: Optional[WalkDecision] = None,
        log_path: Optional[Union[str, Path]] = None,
        start: Optional[str] = None,
        persist: bool = True
    ) -> WalkResult:
        """
        Walk the graph from a random (or given) word.

        Args:
            decide: Called with (current, next) before each step; False stops
                the walk. Defaults to always continuing.
            log_path: Walk log file (default: config.walk_log_path)
            start: Optional start word
            persist: Write the walk log. When False no file is touched.

        Returns:
            WalkResult

        Raises:
            WalkLogError: If the log cannot be written
        """
        # Walks that cannot start leave the previous log in place
        start_missing = start is not None and not self._graph.has_node(start.lower())
        if not persist or self._graph.is_empty() or start_missing:
            result = RandomWalker(self._graph, self.rng, decide).walk(start)
        else:
            with WalkLog(log_path or self.config.walk_log_path) as log:
                result = RandomWalker(self._graph, self.rng, decide, log).walk(start)
        self._metrics.record_count("walk_steps", len(result.steps))
        return result

    # -------------------------------------------------------------------------
    # Visualization
    # -------------------------------------------------------------------------

    def describe_graph(self) -> Iterator[str]:
        """'source -> target [weight=N]' lines for every edge."""
        return describe_graph(self._graph)

    def to_dot(self) -> str:
        """The graph in DOT format."""
        return to_dot(self._graph)

    @timed("render")
    def render(self, output_path: Union[str, Path],
               root: Optional[Union[str, Path]] = None) -> Path:
        """
        Draw the graph to an image with the configured Graphviz binary.

        Raises:
            PathTraversalError: If output_path escapes the root
            RenderError: If Graphviz is unavailable or fails
        """
        return render_graph(
            self._graph, output_path, root=root,
            fmt=self.config.image_format, dot_binary=self.config.dot_binary
        )

    # -------------------------------------------------------------------------
    # Metrics
    # -------------------------------------------------------------------------

    def get_metrics(self) -> Dict[str, Dict[str, Any]]:
        """
        Get all collected metrics.

        Returns:
            Dict mapping operation names to their statistics
            (count, total_ms, avg_ms, min_ms, max_ms)
        """
        return self._metrics.get_all_stats()

    def get_metrics_summary(self) -> str:
        """Human-readable metrics table."""
        return self._metrics.get_summary()

    def reset_metrics(self) -> None:
        """Clear collected metrics."""
        self._metrics.reset()

    def __repr__(self) -> str:
        return f"TextGraphProcessor({self._graph!r})"
