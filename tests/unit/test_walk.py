"""
Unit Tests for Random Walk
==========================

Tests RandomWalker, WalkResult and WalkLog:
- Stop reasons (empty graph, unknown start, dead end, duplicate edge, cancel)
- The decision callback as the only suspension point
- Log line format and file persistence
- Properties over arbitrary graphs (no edge repeated, bounded length)
"""

import random
from unittest.mock import MagicMock

import pytest
from hypothesis import given
from hypothesis import strategies as st

from textgraph.errors import WalkLogError
from textgraph.graph import WordGraph, build_graph
from textgraph.walk import (
    EDGE_LABEL,
    NODE_LABEL,
    RandomWalker,
    WalkLog,
    WalkResult,
    WalkStep,
    WalkStopReason,
)
from tests.fixtures.sample_texts import EXTENDED_TEXT


# =============================================================================
# STOP REASON TESTS
# =============================================================================


class TestStopReasons:
    """Each way a walk can end."""

    def test_empty_graph(self):
        result = RandomWalker(WordGraph({}), random.Random(0)).walk()
        assert result.reason == WalkStopReason.EMPTY_GRAPH
        assert result.start is None
        assert result.visited == []
        assert len(result) == 0

    def test_unknown_start(self):
        result = RandomWalker(build_graph(["a", "b"]), random.Random(0)).walk(start="zzz")
        assert result.reason == WalkStopReason.START_NOT_FOUND
        assert result.steps == []

    def test_dead_end(self):
        """'a b' from a: one step then nothing leaves b."""
        result = RandomWalker(build_graph(["a", "b"]), random.Random(0)).walk(start="a")
        assert result.reason == WalkStopReason.DEAD_END
        assert result.visited == ["a", "b"]
        assert result.rejected is None

    def test_single_node_graph(self):
        """A lone word is a dead end with zero steps."""
        result = RandomWalker(build_graph(["alone"]), random.Random(0)).walk()
        assert result.start == "alone"
        assert result.reason == WalkStopReason.DEAD_END
        assert len(result) == 0

    def test_duplicate_edge(self):
        """'a b a' from a: a->b, b->a, then a->b again stops the walk."""
        result = RandomWalker(build_graph(["a", "b", "a"]), random.Random(0)).walk(start="a")
        assert result.reason == WalkStopReason.DUPLICATE_EDGE
        assert [str(step) for step in result.steps] == ["a->b", "b->a"]
        assert result.rejected == WalkStep("a", "b")
        assert result.current == "a"

    def test_self_loop_repeats_once(self):
        """A self loop can be taken once."""
        result = RandomWalker(build_graph(["go", "go"]), random.Random(0)).walk()
        assert result.visited == ["go", "go"]
        assert result.reason == WalkStopReason.DUPLICATE_EDGE

    def test_cancelled_before_first_step(self):
        """Declining the first step leaves only the start word."""
        result = RandomWalker(
            build_graph(["a", "b"]), random.Random(0), decide=lambda current, nxt: False
        ).walk(start="a")
        assert result.reason == WalkStopReason.CANCELLED
        assert result.visited == ["a"]
        assert result.rejected == WalkStep("a", "b")

    def test_cancel_after_some_steps(self):
        """The walk stops at the first declined step."""
        answers = iter([True, False])
        result = RandomWalker(
            build_graph(["a", "b", "c", "d"]), random.Random(0),
            decide=lambda current, nxt: next(answers)
        ).walk(start="a")
        assert result.visited == ["a", "b"]
        assert result.reason == WalkStopReason.CANCELLED

    def test_start_is_case_insensitive(self):
        result = RandomWalker(build_graph(["a", "b"]), random.Random(0)).walk(start="A")
        assert result.start == "a"

    def test_descriptions(self):
        """Every reason has a message."""
        for reason in WalkStopReason:
            assert reason.description


# =============================================================================
# DECISION CALLBACK TESTS
# =============================================================================


class TestDecisionCallback:
    """Tests for the per-step decide hook."""

    def test_called_with_current_and_next(self):
        calls = []

        def decide(current, following):
            calls.append((current, following))
            return True

        RandomWalker(build_graph(["a", "b", "c"]), random.Random(0), decide=decide).walk(start="a")
        assert calls == [("a", "b"), ("b", "c")]

    def test_not_called_for_duplicate(self):
        """A duplicate edge ends the walk without asking."""
        calls = []

        def decide(current, following):
            calls.append((current, following))
            return True

        RandomWalker(build_graph(["a", "b", "a"]), random.Random(0), decide=decide).walk(start="a")
        assert calls == [("a", "b"), ("b", "a")]


# =============================================================================
# RESULT AND LOG TESTS
# =============================================================================


class TestWalkResult:
    """Tests for WalkResult helpers."""

    def test_log_lines(self):
        result = WalkResult(start="a", steps=[WalkStep("a", "b")], reason=WalkStopReason.DEAD_END)
        assert result.log_lines() == [f"{NODE_LABEL}: a", f"{EDGE_LABEL}: a->b", f"{NODE_LABEL}: b"]

    def test_to_text(self):
        result = WalkResult(start="a", steps=[WalkStep("a", "b"), WalkStep("b", "c")])
        assert result.to_text() == "b c"

    def test_empty_result(self):
        result = WalkResult(start=None)
        assert result.log_lines() == []
        assert result.current is None


class TestWalkLog:
    """Tests for WalkLog persistence."""

    def test_walk_written_to_file(self, tmp_path):
        path = tmp_path / "walk.txt"
        with WalkLog(path) as log:
            result = RandomWalker(build_graph(["a", "b", "a"]), random.Random(0), log=log).walk(start="a")

        written = path.read_text(encoding='utf-8').splitlines()
        assert written == ["节点: a", "边: a->b", "节点: b", "边: b->a", "节点: a"]
        assert written == result.log_lines()
        assert log.lines == written

    def test_cancelled_step_not_logged(self, tmp_path):
        path = tmp_path / "walk.txt"
        with WalkLog(path) as log:
            RandomWalker(build_graph(["a", "b"]), random.Random(0),
                         decide=lambda current, nxt: False, log=log).walk(start="a")
        assert path.read_text(encoding='utf-8').splitlines() == ["节点: a"]

    def test_open_truncates(self, tmp_path):
        path = tmp_path / "walk.txt"
        path.write_text("old walk\n", encoding='utf-8')
        with WalkLog(path) as log:
            log.record_node("x")
        assert path.read_text(encoding='utf-8') == "节点: x\n"

    def test_lines_flushed_while_open(self, tmp_path):
        """Each line is on disk as soon as it is written."""
        path = tmp_path / "walk.txt"
        with WalkLog(path) as log:
            log.record_edge("a", "b")
            assert path.read_text(encoding='utf-8') == "边: a->b\n"

    def test_unwritable_path(self, tmp_path):
        """A log inside a missing directory raises WalkLogError."""
        with pytest.raises(WalkLogError) as excinfo:
            WalkLog(tmp_path / "missing" / "walk.txt").open()
        assert "missing" in excinfo.value.context['path'].parts

    def test_write_failure(self, tmp_path):
        log = WalkLog(tmp_path / "walk.txt")
        log._handle = MagicMock()
        log._handle.write.side_effect = OSError("disk full")
        with pytest.raises(WalkLogError, match="disk full"):
            log.record_node("a")
        assert log.lines == []

    def test_close_twice(self, tmp_path):
        log = WalkLog(tmp_path / "walk.txt").open()
        log.close()
        log.close()


# =============================================================================
# PROPERTY TESTS
# =============================================================================


class TestWalkProperties:
    """Invariants over arbitrary graphs and seeds."""

    @given(
        st.lists(st.sampled_from(["a", "b", "c", "d"]), max_size=30),
        st.integers(min_value=0, max_value=10_000),
    )
    def test_no_edge_repeats_and_length_bounded(self, tokens, seed):
        graph = build_graph(tokens)
        result = RandomWalker(graph, random.Random(seed)).walk()
        pairs = [(step.source, step.target) for step in result.steps]
        assert len(pairs) == len(set(pairs))
        assert len(result) <= graph.edge_count()
        for source, target in pairs:
            assert graph.weight(source, target) > 0

    @given(st.integers(min_value=0, max_value=10_000))
    def test_steps_are_connected(self, seed):
        graph = WordGraph.from_text(EXTENDED_TEXT)
        result = RandomWalker(graph, random.Random(seed)).walk()
        for previous, step in zip(result.steps, result.steps[1:]):
            assert previous.target == step.source
        assert result.reason in (WalkStopReason.DEAD_END, WalkStopReason.DUPLICATE_EDGE)

    def test_same_seed_same_walk(self):
        graph = WordGraph.from_text(EXTENDED_TEXT)
        first = RandomWalker(graph, random.Random(5)).walk()
        second = RandomWalker(graph, random.Random(5)).walk()
        assert first.steps == second.steps
