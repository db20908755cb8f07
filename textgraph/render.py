"""
Graph description and rendering.

describe_graph() lists the edges as text. to_dot() exports the graph in
Graphviz DOT format, and render_graph() hands that DOT text to the external
`dot` executable to produce an image. The engine never depends on the tool:
a missing or failing executable surfaces as RenderError.
"""

import logging
import os
import subprocess
import tempfile
from pathlib import Path
from typing import Iterator, Optional, Union

from .errors import RenderError
from .graph import WordGraph
from .loader import resolve_within_root

logger = logging.getLogger(__name__)


def _quote(word: str) -> str:
    """Quote an identifier for DOT."""
    return '"' + word.replace('\\', '\\\\').replace('"', '\\"') + '"'


def describe_graph(graph: WordGraph) -> Iterator[str]:
    """
    Yield one 'source -> target [weight=N]' line per edge.

    Example:
        >>> list(describe_graph(build_graph(["a", "b"])))
        ['a -> b [weight=1]']
    """
    for edge in graph.edges():
        yield f"{edge.source} -> {edge.target} [weight={edge.weight}]"


def to_dot(graph: WordGraph, name: str = "G") -> str:
    """
    Export the graph to GraphViz DOT format.

    Nodes without edges are declared explicitly so they still appear in the
    drawing. Edge labels carry the weights.
    """
    lines = [f'digraph {name} {{']
    lines.append('    rankdir=LR;')
    lines.append('    node [shape=circle];')

    connected = set()
    for edge in graph.edges():
        connected.add(edge.source)
        connected.add(edge.target)

    for word in graph.nodes():
        if word not in connected:
            lines.append(f'    {_quote(word)};')

    for edge in graph.edges():
        lines.append(f'    {_quote(edge.source)} -> {_quote(edge.target)} [label="{edge.weight}"];')

    lines.append('}')
    return '\n'.join(lines) + '\n'


def render_graph(graph: WordGraph, output_path: Union[str, Path],
                 root: Optional[Union[str, Path]] = None, fmt: str = "png",
                 dot_binary: str = "dot", timeout: Optional[float] = 60.0) -> Path:
    """
    Draw the graph to an image file with Graphviz.

    Args:
        graph: Graph to draw
        output_path: Image file to write, inside `root`
        root: Allowed root directory (default: current working directory)
        fmt: Output format passed as -T<fmt>
        dot_binary: Graphviz executable
        timeout: Seconds to wait for the tool (None waits forever)

    Returns:
        Resolved path of the written image

    Raises:
        PathTraversalError: If output_path resolves outside the root
        RenderError: If the DOT file cannot be written, or the tool is
            missing, times out or exits non-zero
    """
    target = resolve_within_root(output_path, root)

    try:
        fd, dot_file = tempfile.mkstemp(prefix="graph", suffix=".dot")
    except OSError as e:
        raise RenderError(f"Cannot create DOT file: {e}") from e
    try:
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                f.write(to_dot(graph))
        except OSError as e:
            raise RenderError(f"Cannot write DOT file: {e}", path=dot_file) from e

        command = [dot_binary, f"-T{fmt}", dot_file, "-o", str(target)]
        try:
            completed = subprocess.run(
                command, capture_output=True, text=True, timeout=timeout
            )
        except FileNotFoundError as e:
            raise RenderError(
                f"Graphviz executable not found: {dot_binary}. Install Graphviz and add it to PATH.",
                command=command
            ) from e
        except subprocess.TimeoutExpired as e:
            raise RenderError(f"Graphviz timed out after {timeout}s", command=command) from e
        except OSError as e:
            raise RenderError(f"Cannot run Graphviz: {e}", command=command) from e

        if completed.returncode != 0:
            raise RenderError(
                f"Graphviz failed with exit code {completed.returncode}: {completed.stderr.strip()}",
                command=command, returncode=completed.returncode
            )
    finally:
        try:
            os.remove(dot_file)
        except OSError:
            logger.warning("Temporary DOT file was not removed: %s", dot_file)

    logger.info("Graph rendered to %s", target)
    return target
