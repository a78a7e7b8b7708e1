"""
Manual gradient-descent loop over graph-node models.

Each iteration rebuilds the graph from scratch:
    forward -> loss -> zero parameter gradients -> backward -> value -= lr * grad
"""

import time
import warnings
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

import numpy as np
import pandas as pd

from ..aad.core.node import Node
from ..aad.core.engine import backward, zero_gradients
from .config import TrainingConfig


@dataclass
class TrainingResult:
    """
    Attributes:
        history (pd.DataFrame): one row per iteration, columns `step` and `loss`
            (loss measured before that iteration's update)
        predictions (List[List[float]]): model outputs from the last forward pass
        converged (bool): loss fell below `target_loss`
        runtime_sec (float): wall-clock time of the loop
    """
    history: pd.DataFrame
    predictions: List[List[float]]
    converged: bool
    runtime_sec: float

    @property
    def final_loss(self) -> float:
        return float(self.history["loss"].iloc[-1])

    @property
    def initial_loss(self) -> float:
        return float(self.history["loss"].iloc[0])


def _as_vector(x) -> list:
    if isinstance(x, (list, tuple)):
        return list(x)
    if isinstance(x, np.ndarray) and x.ndim > 0:
        return list(x)
    return [x]


def squared_error_loss(predictions: Sequence, targets: Sequence) -> Node:
    """
    Sum over samples (and outputs) of (prediction - target)^2.

    `predictions` and `targets` are aligned per sample; each entry may be a
    scalar or a vector of equal length.
    """
    if len(predictions) != len(targets):
        raise ValueError(
            f"got {len(predictions)} predictions for {len(targets)} targets"
        )
    loss = Node.leaf(0.0)
    for pred, target in zip(predictions, targets):
        pred, target = _as_vector(pred), _as_vector(target)
        if len(pred) != len(target):
            raise ValueError(
                f"prediction has {len(pred)} outputs but target has {len(target)}"
            )
        for p, y in zip(pred, target):
            loss = loss + (p - y) ** 2
    return loss


def sgd_step(parameters: Sequence[Node], learning_rate: float) -> None:
    """In-place update: value -= learning_rate * gradient."""
    for p in parameters:
        p.value = p.value - learning_rate * p.gradient


def train(model: Callable, xs: Sequence, ys: Sequence,
          config: Optional[TrainingConfig] = None) -> TrainingResult:
    """
    Fit `model` to (xs, ys) with plain gradient descent on the squared error.

    Args:
        model: callable mapping an input vector to a list of output nodes and
            exposing `parameters()` (e.g. MLP)
        xs: input vectors
        ys: targets, scalars or vectors matching the model's output width
        config: hyper-parameters; TrainingConfig() if omitted

    Returns:
        TrainingResult with the per-iteration loss history.
    """
    config = (config or TrainingConfig()).validate()
    if len(xs) == 0:
        raise ValueError("cannot train on an empty dataset")
    if len(xs) != len(ys):
        raise ValueError(f"got {len(xs)} inputs for {len(ys)} targets")

    params = model.parameters()
    steps, losses = [], []
    converged = False
    preds: List[List[Node]] = []

    t0 = time.time()
    for step in range(config.iterations):
        # Forward pass
        preds = [_as_vector(model(x)) for x in xs]
        loss = squared_error_loss(preds, ys)

        # Backward pass
        zero_gradients(params)
        backward(loss)

        # Update
        sgd_step(params, config.learning_rate)

        loss_val = float(loss.value)
        steps.append(step)
        losses.append(loss_val)
        if config.verbose and (step % config.log_every == 0 or step == config.iterations - 1):
            print(f"step {step:4d} | loss {loss_val:.6f}")

        if config.target_loss is not None and loss_val < config.target_loss:
            converged = True
            break
    runtime = time.time() - t0

    history = pd.DataFrame({"step": steps, "loss": losses})
    if len(losses) > 1 and losses[-1] >= losses[0]:
        warnings.warn(
            f"Loss did not decrease over {len(losses)} iterations "
            f"({losses[0]:.6f} -> {losses[-1]:.6f}); consider a smaller learning rate."
        )
    if config.verbose:
        status = "converged" if converged else "stopped"
        print(f"{status} after {len(losses)} iterations in {runtime:.3f} s, "
              f"final loss {losses[-1]:.6f}")

    return TrainingResult(
        history=history,
        predictions=[[float(p.value) for p in pred] for pred in preds],
        converged=converged,
        runtime_sec=runtime,
    )
