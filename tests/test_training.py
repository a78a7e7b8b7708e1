"""
Tests for the manual training loop, its configuration and the CLI.
"""

import numpy as np
import pandas as pd
import pytest

from scalar_aad.aad import Node, backward
from scalar_aad.nn import MLP
from scalar_aad.training import (
    DEMO_XS,
    DEMO_YS,
    TrainingConfig,
    sgd_step,
    squared_error_loss,
    train,
)
from scalar_aad.training.__main__ import main, parse_layers


def test_squared_error_loss_value():
    preds = [Node.leaf(0.5), Node.leaf(-0.5)]
    loss = squared_error_loss(preds, [1.0, -1.0])
    assert loss.value == pytest.approx(0.5)


def test_squared_error_loss_vector_outputs():
    preds = [[Node.leaf(0.0), Node.leaf(1.0)]]
    loss = squared_error_loss(preds, [[1.0, 1.0]])
    assert loss.value == pytest.approx(1.0)
    with pytest.raises(ValueError):
        squared_error_loss(preds, [[1.0]])
    with pytest.raises(ValueError):
        squared_error_loss(preds, [1.0, 2.0])


def test_sgd_step_moves_against_gradient():
    p = Node.leaf(1.0)
    p.gradient = 2.0
    sgd_step([p], 0.1)
    assert p.value == pytest.approx(0.8)
    assert p.gradient == 2.0


def test_training_loss_trends_down():
    model = MLP(3, [4, 4, 1], rng=0)
    config = TrainingConfig(learning_rate=0.05, iterations=100, target_loss=None)
    result = train(model, DEMO_XS, DEMO_YS, config)

    history = result.history
    assert isinstance(history, pd.DataFrame)
    assert list(history.columns) == ["step", "loss"]
    assert len(history) == 100
    assert result.final_loss < result.initial_loss
    assert history["loss"].iloc[-10:].mean() < history["loss"].iloc[:10].mean()
    assert not result.converged


def test_training_stops_early_at_target():
    model = MLP(3, [4, 1], rng=0)
    config = TrainingConfig(iterations=50, target_loss=1e9)
    result = train(model, DEMO_XS, DEMO_YS, config)
    assert result.converged
    assert len(result.history) == 1
    assert len(result.predictions) == len(DEMO_XS)


def test_training_warns_when_loss_does_not_decrease():
    model = MLP(3, [2, 1], rng=0)
    config = TrainingConfig(learning_rate=0.0, iterations=3, target_loss=None)
    with pytest.warns(UserWarning, match="Loss did not decrease"):
        train(model, DEMO_XS, DEMO_YS, config)


def test_training_verbose_prints_progress(capsys):
    model = MLP(3, [2, 1], rng=0)
    config = TrainingConfig(learning_rate=0.05, iterations=4, target_loss=None,
                            verbose=True, log_every=2)
    train(model, DEMO_XS, DEMO_YS, config)
    out = capsys.readouterr().out
    assert "step    0" in out
    assert "step    2" in out
    assert "step    3" in out  # last step always printed
    assert "step    1" not in out


def test_training_rejects_bad_data():
    model = MLP(3, [1], rng=0)
    with pytest.raises(ValueError):
        train(model, [], [])
    with pytest.raises(ValueError):
        train(model, DEMO_XS, DEMO_YS[:2])


@pytest.mark.parametrize(
    "overrides",
    [
        {"iterations": 0},
        {"learning_rate": -0.1},
        {"log_every": 0},
        {"layer_sizes": []},
        {"layer_sizes": [4, 0]},
    ],
)
def test_config_validation(overrides):
    with pytest.raises(ValueError):
        TrainingConfig(**overrides).validate()


def test_config_overrides_skip_none():
    base = TrainingConfig.demo()
    cfg = base.with_overrides(learning_rate=0.1, seed=None)
    assert cfg.learning_rate == 0.1
    assert cfg.seed is None
    assert cfg.iterations == base.iterations
    assert base.learning_rate == 0.06


def test_parse_layers():
    assert parse_layers("4,4,1") == [4, 4, 1]
    assert parse_layers("8") == [8]


def test_cli_main(capsys):
    result = main(["--seed", "0", "--iterations", "5", "--no-early-stop", "--quiet"])
    out = capsys.readouterr().out
    assert "TRAINING RESULT" in out
    assert "step" not in out
    assert len(result.history) == 5


def test_squared_error_loss_accepts_ndarray_rows():
    preds = [[Node.leaf(0.0), Node.leaf(1.0)], [Node.leaf(2.0), Node.leaf(0.5)]]
    targets = np.array([[1.0, 1.0], [1.0, 0.5]])
    loss = squared_error_loss(preds, targets)
    assert isinstance(loss, Node)
    assert loss.value == pytest.approx(2.0)

    backward(loss)
    assert preds[0][0].gradient == pytest.approx(-2.0)
    assert preds[1][0].gradient == pytest.approx(2.0)


def test_training_on_ndarray_dataset():
    xs = np.array(DEMO_XS)
    ys = np.array(DEMO_YS).reshape(-1, 1)
    model = MLP(3, [4, 1], rng=0)
    result = train(model, xs, ys, TrainingConfig(iterations=5, target_loss=None))
    assert len(result.history) == 5
    assert all(len(pred) == 1 for pred in result.predictions)


def test_cli_flags_override_demo_config():
    result = main(["--seed", "0", "--layers", "2,1", "--iterations", "7",
                   "--target-loss", "1e9", "--quiet"])
    assert result.converged
    assert len(result.history) == 1
