"""
Training configuration.

Hyper-parameters of the manual gradient-descent loop live here; the CLI
overrides individual fields.
"""

from dataclasses import dataclass, field, replace
from typing import List, Optional


# Toy dataset: 3 inputs, target in {-1, 1}
DEMO_XS: List[List[float]] = [
    [2.0, 3.0, -1.0],
    [3.0, -1.0, 0.5],
    [0.5, 1.0, 1.0],
    [1.0, 1.0, -1.0],
]
DEMO_YS: List[float] = [1.0, -1.0, -1.0, 1.0]


@dataclass
class TrainingConfig:
    """Configuration for one training run."""

    # Network shape (input width is taken from the data)
    layer_sizes: List[int] = field(default_factory=lambda: [4, 4, 1])

    # Gradient descent
    learning_rate: float = 0.06
    iterations: int = 30

    # Stop early once the loss falls below this value (None: run all iterations)
    target_loss: Optional[float] = 0.06

    # Seed for parameter initialisation (None: fresh entropy)
    seed: Optional[int] = None

    # Progress output
    verbose: bool = False
    log_every: int = 1

    def validate(self) -> "TrainingConfig":
        if self.iterations < 1:
            raise ValueError(f"iterations must be at least 1, got {self.iterations}")
        if self.learning_rate < 0:
            raise ValueError(f"learning_rate must be non-negative, got {self.learning_rate}")
        if self.log_every < 1:
            raise ValueError(f"log_every must be at least 1, got {self.log_every}")
        if not self.layer_sizes or any(n < 1 for n in self.layer_sizes):
            raise ValueError(f"layer_sizes must be positive widths, got {self.layer_sizes}")
        return self

    def with_overrides(self, **changes) -> "TrainingConfig":
        """Copy with the non-None entries of `changes` applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    @staticmethod
    def demo() -> "TrainingConfig":
        """
        The 3-input / [4, 4, 1] toy problem: 30 steps at lr 0.06, stopping
        once the summed squared error drops below 0.06.
        """
        return TrainingConfig(layer_sizes=[4, 4, 1], learning_rate=0.06,
                              iterations=30, target_loss=0.06)
