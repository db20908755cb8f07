"""
Configuration Module
====================

Centralized configuration for the text graph processor.

A dataclass-based configuration lets callers change PageRank parameters,
the rank initialization policy, message wording and collaborator settings
without touching the algorithms.

Example:
    from textgraph import TextGraphProcessor, TextGraphConfig

    config = TextGraphConfig(rank_init='uniform', seed=42)
    processor = TextGraphProcessor(config=config)
"""

import math
from dataclasses import dataclass
from typing import Dict, Optional


RANK_INIT_POLICIES = ('tf', 'uniform')
MESSAGE_STYLES = ('standard', 'legacy')


@dataclass
class TextGraphConfig:
    """
    Configuration settings for the text graph processor.

    Attributes:
        pagerank_damping: Damping factor for PageRank (0-1). Probability of
            following an outgoing edge rather than teleporting.
        pagerank_iterations: Maximum PageRank iterations before stopping.
        pagerank_tolerance: Convergence threshold. Iteration stops when the
            summed absolute change over all nodes drops below this value.
        rank_init: Initial PageRank distribution. 'tf' seeds each node with
            its share of the token sequence, 'uniform' uses 1/N.

        message_style: Wording of bridge word messages. 'standard' is
            case-insensitive with singular/plural grammar, 'legacy' keeps the
            older single-form wording.

        walk_log_path: File the random walk log is written to.
        dot_binary: Name or path of the Graphviz executable.
        image_format: Output format passed to the layout tool (-T flag).

        seed: Seed for the shared random source. None means unseeded.
    """

    # PageRank settings
    pagerank_damping: float = 0.85
    pagerank_iterations: int = 100
    pagerank_tolerance: float = 1e-6
    rank_init: str = 'tf'

    # Bridge word messages
    message_style: str = 'standard'

    # Collaborators
    walk_log_path: str = 'walk.txt'
    dot_binary: str = 'dot'
    image_format: str = 'png'

    # Randomness
    seed: Optional[int] = None

    def __post_init__(self):
        """Validate configuration values after initialization."""
        self._validate()

    def _validate(self):
        """
        Validate configuration values are within acceptable ranges.

        Raises:
            ValueError: If any configuration value is invalid.
        """
        if not (0 < self.pagerank_damping < 1):
            raise ValueError(
                f"pagerank_damping must be between 0 and 1, got {self.pagerank_damping}"
            )
        if self.pagerank_iterations < 1:
            raise ValueError(
                f"pagerank_iterations must be at least 1, got {self.pagerank_iterations}"
            )
        if math.isnan(self.pagerank_tolerance) or self.pagerank_tolerance <= 0:
            raise ValueError(
                f"pagerank_tolerance must be positive, got {self.pagerank_tolerance}"
            )
        if self.rank_init not in RANK_INIT_POLICIES:
            raise ValueError(
                f"rank_init must be 'tf' or 'uniform', got {self.rank_init}"
            )
        if self.message_style not in MESSAGE_STYLES:
            raise ValueError(
                f"message_style must be 'standard' or 'legacy', got {self.message_style}"
            )
        if not self.walk_log_path:
            raise ValueError("walk_log_path must be a non-empty path")
        if not self.dot_binary:
            raise ValueError("dot_binary must be a non-empty command name")
        if not self.image_format.isalnum():
            raise ValueError(
                f"image_format must be alphanumeric, got {self.image_format!r}"
            )

    def copy(self) -> 'TextGraphConfig':
        """
        Create a copy of this configuration.

        Returns:
            A new TextGraphConfig instance with the same values.
        """
        return TextGraphConfig(**self.to_dict())

    def to_dict(self) -> Dict:
        """
        Convert configuration to a dictionary for serialization.

        Returns:
            Dictionary representation of the configuration.
        """
        return {
            'pagerank_damping': self.pagerank_damping,
            'pagerank_iterations': self.pagerank_iterations,
            'pagerank_tolerance': self.pagerank_tolerance,
            'rank_init': self.rank_init,
            'message_style': self.message_style,
            'walk_log_path': self.walk_log_path,
            'dot_binary': self.dot_binary,
            'image_format': self.image_format,
            'seed': self.seed,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> 'TextGraphConfig':
        """
        Create configuration from a dictionary.

        Args:
            data: Dictionary with configuration values.

        Returns:
            TextGraphConfig instance.
        """
        return cls(**data)


def get_default_config() -> TextGraphConfig:
    """
    Get a new instance of the default configuration.

    Returns:
        TextGraphConfig with default values.
    """
    return TextGraphConfig()
