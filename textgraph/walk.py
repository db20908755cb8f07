"""
Random walk over a word graph.

A walk starts at a random word and repeatedly follows a uniformly chosen
outgoing edge (edge weights are ignored). It stops when:

- the current word has no successors (DEAD_END),
- the chosen edge was already taken during this walk (DUPLICATE_EDGE),
- the decision callback declines the next step (CANCELLED),
- the graph is empty (EMPTY_GRAPH, zero steps).

Termination is decided from an in-memory set of taken edges. The walk log
is only a record: it is written as the walk proceeds and never read back.

Example:
    with WalkLog("walk.txt") as log:
        result = RandomWalker(graph, random.Random(7), log=log).walk()
    print(result.reason, result.to_text())
"""

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Set, TextIO, Tuple, Union

from .errors import WalkLogError
from .graph import WordGraph
from .types import WalkDecision

logger = logging.getLogger(__name__)

NODE_LABEL = "节点"
EDGE_LABEL = "边"


class WalkStopReason(Enum):
    """Why a random walk ended."""
    EMPTY_GRAPH = "empty_graph"
    START_NOT_FOUND = "start_not_found"
    DEAD_END = "dead_end"
    DUPLICATE_EDGE = "duplicate_edge"
    CANCELLED = "cancelled"

    @property
    def description(self) -> str:
        """Human-readable description of this stop reason."""
        descriptions = {
            "empty_graph": "Graph is empty, nothing to walk.",
            "start_not_found": "Start word is not in the graph.",
            "dead_end": "Current word has no outgoing edges.",
            "duplicate_edge": "Next edge was already taken in this walk.",
            "cancelled": "Walk stopped by request.",
        }
        return descriptions[self.value]


@dataclass(frozen=True)
class WalkStep:
    """One traversed edge."""
    source: str
    target: str

    def __str__(self) -> str:
        return f"{self.source}->{self.target}"


@dataclass
class WalkResult:
    """
    Outcome of a random walk.

    Attributes:
        start: First word of the walk (None when nothing was walked)
        steps: Traversed edges in order
        reason: Why the walk stopped
        rejected: The edge that triggered DUPLICATE_EDGE or CANCELLED, if any
    """
    start: Optional[str]
    steps: List[WalkStep] = field(default_factory=list)
    reason: WalkStopReason = WalkStopReason.EMPTY_GRAPH
    rejected: Optional[WalkStep] = None

    @property
    def visited(self) -> List[str]:
        """Start word followed by each step's target."""
        if self.start is None:
            return []
        return [self.start] + [step.target for step in self.steps]

    @property
    def current(self) -> Optional[str]:
        """Word the walk ended on."""
        return self.steps[-1].target if self.steps else self.start

    def log_lines(self) -> List[str]:
        """The lines a WalkLog holds for this walk."""
        if self.start is None:
            return []
        lines = [f"{NODE_LABEL}: {self.start}"]
        for step in self.steps:
            lines.append(f"{EDGE_LABEL}: {step}")
            lines.append(f"{NODE_LABEL}: {step.target}")
        return lines

    def to_text(self) -> str:
        """Targets of each step, space separated."""
        return " ".join(step.target for step in self.steps)

    def __len__(self) -> int:
        return len(self.steps)


class WalkLog:
    """
    Append-only walk record on disk.

    Opening the log truncates a previous walk's record. Each line is
    flushed as soon as it is written, and write failures raise
    WalkLogError.

    Attributes:
        path: File being written
        lines: Lines written so far
    """

    def __init__(self, path: Union[str, Path], encoding: str = 'utf-8'):
        self.path = Path(path)
        self.encoding = encoding
        self.lines: List[str] = []
        self._handle: Optional[TextIO] = None

    def open(self) -> 'WalkLog':
        """Open (and truncate) the log file."""
        try:
            self._handle = open(self.path, 'w', encoding=self.encoding)
        except OSError as e:
            raise WalkLogError(f"Cannot open walk log {self.path}: {e}", path=self.path) from e
        return self

    def record_node(self, node: str) -> None:
        self._write(f"{NODE_LABEL}: {node}")

    def record_edge(self, source: str, target: str) -> None:
        self._write(f"{EDGE_LABEL}: {source}->{target}")

    def _write(self, line: str) -> None:
        if self._handle is None:
            self.open()
        try:
            self._handle.write(line + "\n")
            self._handle.flush()
        except OSError as e:
            raise WalkLogError(f"Cannot write walk log {self.path}: {e}", path=self.path) from e
        self.lines.append(line)

    def close(self) -> None:
        """Close the file if open."""
        if self._handle is not None:
            handle, self._handle = self._handle, None
            try:
                handle.close()
            except OSError as e:
                raise WalkLogError(f"Cannot close walk log {self.path}: {e}", path=self.path) from e

    def __enter__(self) -> 'WalkLog':
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def _always_continue(current: str, following: str) -> bool:
    return True


class RandomWalker:
    """
    Random traversal with duplicate-edge termination.

    The decision callback is the walk's only suspension point: it is called
    with (current, next) before each step is recorded and blocks as long as
    it likes. Returning False cancels the walk.

    Attributes:
        graph: Graph being walked
        rng: Random source for the start word and every step
        decide: Per-step continue/stop callback
        log: Optional WalkLog receiving each recorded node and edge
    """

    def __init__(self, graph: WordGraph, rng: Optional[random.Random] = None,
                 decide: Optional[WalkDecision] = None, log: Optional[WalkLog] = None):
        self.graph = graph
        self.rng = rng or random.Random()
        self.decide = decide or _always_continue
        self.log = log

    def walk(self, start: Optional[str] = None) -> WalkResult:
        """
        Walk the graph until a stop condition is met.

        Args:
            start: Optional start word (any case). Chosen uniformly at random
                over all nodes when omitted.

        Returns:
            WalkResult with the traversed edges and the stop reason

        Raises:
            WalkLogError: If the log cannot be written
        """
        if self.graph.is_empty():
            return WalkResult(start=None, reason=WalkStopReason.EMPTY_GRAPH)

        if start is None:
            current = self.rng.choice(self.graph.nodes())
        else:
            current = start.lower()
            if not self.graph.has_node(current):
                return WalkResult(start=None, reason=WalkStopReason.START_NOT_FOUND)

        result = WalkResult(start=current)
        taken: Set[Tuple[str, str]] = set()
        self._record_node(current)
        logger.debug("Random walk starting at %s", current)

        while True:
            successors = list(self.graph.neighbors(current))
            if not successors:
                result.reason = WalkStopReason.DEAD_END
                break

            following = self.rng.choice(successors)
            step = WalkStep(current, following)
            if (current, following) in taken:
                result.reason = WalkStopReason.DUPLICATE_EDGE
                result.rejected = step
                break

            if not self.decide(current, following):
                result.reason = WalkStopReason.CANCELLED
                result.rejected = step
                break

            if self.log is not None:
                self.log.record_edge(current, following)
            self._record_node(following)
            taken.add((current, following))
            result.steps.append(step)
            current = following

        logger.info("Random walk stopped after %d steps: %s", len(result.steps), result.reason.value)
        return result

    def _record_node(self, node: str) -> None:
        if self.log is not None:
            self.log.record_node(node)
