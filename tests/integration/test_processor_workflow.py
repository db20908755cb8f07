"""
Integration tests for the processor workflow.

Drives TextGraphProcessor end to end: load a file, query the graph, augment
text, find paths, rank words and walk with the log on disk.
"""

import os
import shutil
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from textgraph import (
    PathTraversalError,
    TextGraphConfig,
    TextGraphProcessor,
    TextLoadError,
    WalkStopReason,
)
from tests.fixtures.sample_texts import EASY_TEXT, EXTENDED_TEXT


class TestLoadAndQuery(unittest.TestCase):
    """Loading a file and querying the resulting graph."""

    def setUp(self):
        """Write the story to a temporary root and load it."""
        self.temp_dir = tempfile.mkdtemp()
        self.root = Path(self.temp_dir)
        (self.root / "story.txt").write_text(
            EASY_TEXT.replace(", ", ",\n"), encoding='utf-8'
        )
        self.processor = TextGraphProcessor(config=TextGraphConfig(seed=3))
        self.processor.load_file("story.txt", root=self.root)

    def tearDown(self):
        """Clean up temp files."""
        if os.path.exists(self.temp_dir):
            shutil.rmtree(self.temp_dir)

    def test_line_breaks_do_not_change_graph(self):
        """The file splits the story over lines; the graph is the same."""
        reference = TextGraphProcessor()
        reference.load_text(EASY_TEXT)
        self.assertEqual(self.processor.graph, reference.graph)

    def test_queries(self):
        self.assertEqual(self.processor.out_degree("the"), 4)
        self.assertEqual(self.processor.in_degree("THE"), 5)
        self.assertEqual(self.processor.edge_weight("the", "team"), 2)
        self.assertEqual(
            self.processor.query_bridge_words("the", "analyzed"),
            "The bridge word from the to analyzed is: scientist."
        )

    def test_shortest_path_message(self):
        self.assertEqual(
            self.processor.shortest_path_message("the", "again"),
            "the -> scientist -> analyzed -> it -> again"
        )
        self.assertEqual(
            self.processor.shortest_path_message("again", "the"),
            "No path found from again to the."
        )

    def test_paths_from_word(self):
        paths = self.processor.shortest_paths_from("it")
        self.assertEqual(list(paths), ["again"])
        self.assertEqual(paths["again"].weight, 1)

    def test_generate_new_text(self):
        self.assertEqual(
            self.processor.generate_new_text("Scientist analyzed data."),
            "Scientist carefully analyzed the data."
        )

    def test_reload_replaces_graph(self):
        """Loading new text discards the old graph."""
        self.processor.load_text("completely different words")
        self.assertEqual(self.processor.graph.nodes(), ["completely", "different", "words"])
        self.assertEqual(self.processor.out_degree("the"), 0)

    def test_describe_and_dot(self):
        lines = list(self.processor.describe_graph())
        self.assertEqual(len(lines), 26)
        self.assertIn("the -> scientist [weight=2]", lines)
        self.assertIn('"the" -> "scientist" [label="2"];', self.processor.to_dot())

    def test_load_errors(self):
        with self.assertRaises(TextLoadError):
            self.processor.load_file("missing.txt", root=self.root)
        with self.assertRaises(PathTraversalError):
            self.processor.load_file("../story.txt", root=self.root)
        # The previous graph survives a failed load
        self.assertEqual(self.processor.graph.node_count(), 19)


class TestRankingAndWalks(unittest.TestCase):
    """PageRank options and walks with persisted logs."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.log_path = os.path.join(self.temp_dir, "walk.txt")

    def tearDown(self):
        if os.path.exists(self.temp_dir):
            shutil.rmtree(self.temp_dir)

    def _processor(self, **kwargs):
        config = TextGraphConfig(seed=11, walk_log_path=self.log_path, **kwargs)
        processor = TextGraphProcessor(config=config)
        processor.load_text(EXTENDED_TEXT)
        return processor

    def test_rank_init_policies_agree_on_fixed_point(self):
        """Both initializations converge to the same scores."""
        tf_ranks = self._processor(rank_init='tf').compute_pagerank()
        uniform_ranks = self._processor(rank_init='uniform').compute_pagerank()
        for word, score in tf_ranks.items():
            self.assertAlmostEqual(score, uniform_ranks[word], places=4)

    def test_pagerank_details(self):
        details = self._processor().compute_pagerank_details()
        self.assertTrue(details['converged'])
        self.assertAlmostEqual(sum(details['pagerank'].values()), 1.0, places=6)

    def test_pagerank_of(self):
        processor = self._processor()
        self.assertGreater(processor.pagerank_of("The"), 0.0)
        self.assertEqual(processor.pagerank_of("unicorn"), 0.0)
        self.assertEqual(TextGraphProcessor().pagerank_of("the"), 0.0)

    def test_walk_log_matches_result(self):
        processor = self._processor()
        result = processor.random_walk()
        with open(self.log_path, encoding='utf-8') as f:
            self.assertEqual(f.read().splitlines(), result.log_lines())
        self.assertEqual(result.reason, WalkStopReason.DUPLICATE_EDGE)

    def test_walk_from_given_start(self):
        result = self._processor().random_walk(start="again")
        self.assertEqual(result.visited[:3], ["again", "the", result.steps[1].target])
        self.assertEqual(result.steps[0].target, "the")

    def test_second_walk_truncates_log(self):
        processor = self._processor()
        processor.random_walk()
        processor.random_walk(decide=lambda current, nxt: False, start="it")
        with open(self.log_path, encoding='utf-8') as f:
            self.assertEqual(f.read(), "节点: it\n")

    def test_walk_without_persisting(self):
        result = self._processor().random_walk(persist=False)
        self.assertFalse(os.path.exists(self.log_path))
        self.assertGreater(len(result.visited), 0)

    def test_empty_graph_walk_touches_nothing(self):
        processor = TextGraphProcessor(config=TextGraphConfig(walk_log_path=self.log_path))
        result = processor.random_walk()
        self.assertEqual(result.reason, WalkStopReason.EMPTY_GRAPH)
        self.assertFalse(os.path.exists(self.log_path))

    def test_unknown_start_keeps_previous_log(self):
        """A walk that cannot start does not wipe the last walk's record."""
        processor = self._processor()
        first = processor.random_walk()
        result = processor.random_walk(start="unicorn")
        self.assertEqual(result.reason, WalkStopReason.START_NOT_FOUND)
        self.assertEqual(result.steps, [])
        with open(self.log_path, encoding='utf-8') as f:
            self.assertEqual(f.read().splitlines(), first.log_lines())

    def test_unknown_start_creates_no_log(self):
        processor = self._processor()
        processor.random_walk(start="Unicorn")
        self.assertFalse(os.path.exists(self.log_path))

    def test_same_seed_same_session(self):
        """A seeded processor replays augmentation and walks exactly."""
        first = self._processor()
        second = self._processor()
        self.assertEqual(first.generate_new_text("a report"), second.generate_new_text("a report"))
        self.assertEqual(first.random_walk(persist=False).steps, second.random_walk(persist=False).steps)

    def test_render_uses_config(self):
        processor = self._processor(dot_binary="/usr/local/bin/dot", image_format="svg")
        with patch("textgraph.render.subprocess.run") as run:
            run.return_value.returncode = 0
            path = processor.render("graph.svg", root=self.temp_dir)
        command = run.call_args[0][0]
        self.assertEqual(command[:2], ["/usr/local/bin/dot", "-Tsvg"])
        self.assertEqual(path, (Path(self.temp_dir) / "graph.svg").resolve())


if __name__ == '__main__':
    unittest.main()
