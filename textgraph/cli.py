#!/usr/bin/env python3
"""
Interactive command line for the text graph processor.

Loads a text file, prints the graph, optionally renders it with Graphviz,
then runs a numbered menu of queries.

Usage:
    python -m textgraph input.txt
    python -m textgraph input.txt --seed 42 --rank-init uniform
    python -m textgraph input.txt --no-render --walk-log runs/walk.txt
"""

import argparse
import logging
import sys
from typing import Callable, List, Optional

from .config import MESSAGE_STYLES, RANK_INIT_POLICIES, TextGraphConfig
from .errors import PathTraversalError, RenderError, TextGraphError, TextLoadError
from .paths import format_path
from .processor import TextGraphProcessor

logger = logging.getLogger(__name__)

MENU = """
Choose an action:
1. Out-degree of a word
2. In-degree of a word
3. Edge weight
4. Bridge words
5. Generate new text
6. Shortest path
7. Random walk
8. PageRank
9. Render graph image
10. Exit"""

EXIT_CHOICE = 10


class MenuSession:
    """
    One interactive menu session over a loaded processor.

    Input and output are injectable so the loop can be driven from tests.
    """

    def __init__(self, processor: TextGraphProcessor,
                 read: Callable[[str], str] = input,
                 write: Callable[[str], None] = print,
                 image_path: str = "graph.png",
                 root: Optional[str] = None):
        self.processor = processor
        self.read = read
        self.write = write
        self.image_path = image_path
        self.root = root

    def run(self) -> None:
        """Loop until the user exits or input ends."""
        while True:
            self.write(MENU)
            try:
                raw = self.read("Enter choice: ")
            except (EOFError, KeyboardInterrupt):
                self.write("\nGoodbye!")
                return

            try:
                choice = int(raw.strip())
            except ValueError:
                self.write(f"Invalid input, enter a number from 1 to {EXIT_CHOICE}.")
                continue

            if choice == EXIT_CHOICE:
                self.write("Goodbye!")
                return
            try:
                self.dispatch(choice)
            except EOFError:
                self.write("\nGoodbye!")
                return

    def dispatch(self, choice: int) -> None:
        """Run one menu action."""
        handlers = {
            1: self.show_out_degree,
            2: self.show_in_degree,
            3: self.show_edge_weight,
            4: self.show_bridge_words,
            5: self.show_new_text,
            6: self.show_shortest_path,
            7: self.run_walk,
            8: self.show_pagerank,
            9: self.render,
        }
        handler = handlers.get(choice)
        if handler is None:
            self.write(f"Invalid choice, enter a number from 1 to {EXIT_CHOICE}.")
            return
        handler()

    def show_out_degree(self) -> None:
        word = self.read("Word: ")
        self.write(f"Out-degree of '{word}': {self.processor.out_degree(word)}")

    def show_in_degree(self) -> None:
        word = self.read("Word: ")
        self.write(f"In-degree of '{word}': {self.processor.in_degree(word)}")

    def show_edge_weight(self) -> None:
        source = self.read("Source word: ")
        target = self.read("Target word: ")
        self.write(f"Weight of '{source}' -> '{target}': {self.processor.edge_weight(source, target)}")

    def show_bridge_words(self) -> None:
        word1 = self.read("First word: ")
        word2 = self.read("Second word: ")
        self.write(self.processor.query_bridge_words(word1, word2))

    def show_new_text(self) -> None:
        text = self.read("Text: ")
        self.write(f"New text: {self.processor.generate_new_text(text)}")

    def show_shortest_path(self) -> None:
        word1 = self.read("Start word: ")
        word2 = self.read("Target word (blank for all words): ").strip()

        if not word2:
            paths = self.processor.shortest_paths_from(word1)
            if not paths:
                self.write("No paths found.")
                return
            self.write(f"\nShortest paths from {word1.lower()}:")
            for target, result in paths.items():
                self.write(f"to {target}: {' -> '.join(result.path)} (weight {result.weight})")
                self.write("------")
            return

        result = self.processor.shortest_path(word1, word2)
        self.write(f"Shortest path: {format_path(result)}")
        if result:
            self.write(f"Path length: {result.hops}")
            self.write(f"Total weight: {result.weight}")

    def run_walk(self) -> None:
        def decide(current: str, following: str) -> bool:
            answer = self.read("Press Enter to continue, or q then Enter to stop: ")
            if answer.strip().lower() == "q":
                return False
            self.write(f"edge: {current}->{following}")
            return True

        if self.processor.graph.is_empty():
            self.write("Graph is empty, nothing to walk.")
            return

        try:
            result = self.processor.random_walk(decide=decide)
        except TextGraphError as e:
            self.write(f"Walk log error: {e.message}")
            return

        self.write(f"Start: {result.start}")
        self.write(result.reason.description)
        self.write(f"Visited: {' '.join(result.visited)}")
        self.write(f"Walk saved to {self.processor.config.walk_log_path}")

    def show_pagerank(self) -> None:
        word = self.read("Word: ")
        self.write(f"PageRank of {word}: {self.processor.pagerank_of(word)}")

    def render(self) -> None:
        output = self.read(f"Output file (e.g. {self.image_path}): ").strip() or self.image_path
        try:
            path = self.processor.render(output, root=self.root)
        except (RenderError, PathTraversalError) as e:
            self.write(f"Render failed: {e.message}")
            return
        self.write(f"Graph saved to {path}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="textgraph",
        description="Build a word graph from a text file and query it interactively",
    )
    parser.add_argument('file', help='Text file to load (inside --root)')
    parser.add_argument('--root', default=None,
                        help='Directory files must stay within (default: current directory)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for bridge word picks and random walks')
    parser.add_argument('--rank-init', choices=RANK_INIT_POLICIES, default='tf',
                        help='Initial PageRank distribution (default: tf)')
    parser.add_argument('--message-style', choices=MESSAGE_STYLES, default='standard',
                        help='Bridge word message wording (default: standard)')
    parser.add_argument('--walk-log', default='walk.txt',
                        help='Random walk log file (default: walk.txt)')
    parser.add_argument('--image', default='graph.png',
                        help='Graph image file (default: graph.png)')
    parser.add_argument('--dot', default='dot',
                        help='Graphviz executable (default: dot)')
    parser.add_argument('--no-render', action='store_true',
                        help='Skip rendering the graph image at startup')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Enable debug logging')
    return parser


def main(argv: Optional[List[str]] = None,
         read: Callable[[str], str] = input,
         write: Callable[[str], None] = print) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s'
    )

    config = TextGraphConfig(
        rank_init=args.rank_init,
        message_style=args.message_style,
        walk_log_path=args.walk_log,
        dot_binary=args.dot,
        seed=args.seed,
    )
    processor = TextGraphProcessor(config=config)

    try:
        write(f"Reading file: {args.file}")
        processor.load_file(args.file, root=args.root)
    except (PathTraversalError, TextLoadError) as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    write("\nText processed, directed graph built:")
    for line in processor.describe_graph():
        write(line)

    if not args.no_render:
        try:
            path = processor.render(args.image, root=args.root)
            write(f"Graph saved to {path}")
        except (RenderError, PathTraversalError) as e:
            logger.warning("Graph image not generated: %s", e.message)

    MenuSession(processor, read=read, write=write, image_path=args.image, root=args.root).run()
    return 0


if __name__ == '__main__':
    sys.exit(main())
