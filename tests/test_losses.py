import numpy as np
import pytest

from neuralnet import MSELoss, ShapeMismatch


def test_mismatched_lengths():
    with pytest.raises(ShapeMismatch):
        MSELoss([1.0, 0.0], [0.5])


def test_loss_is_half_sum_of_squares():
    assert MSELoss([1.0, 0.0], [0.5, 0.5]).loss() == pytest.approx(0.25)


def test_loss_zero_iff_equal():
    assert MSELoss([0.1, 0.2], [0.1, 0.2]).loss() == 0.0
    assert MSELoss([0.1, 0.2], [0.1, 0.3]).loss() > 0.0


def test_loss_non_negative():
    rng = np.random.default_rng(3)
    for _ in range(20):
        y, yhat = rng.normal(size=4), rng.normal(size=4)
        assert MSELoss(y, yhat).loss() >= 0.0


def test_backward_is_exact_gradient():
    y, yhat = [1.0, 0.0, 0.3], [0.7, 0.2, 0.3]
    grad = MSELoss(y, yhat).backward()
    for i in range(3):
        assert grad[i] == -(y[i] - yhat[i])


def test_inputs_are_copied_and_read_only():
    yhat = np.array([0.5, 0.5])
    loss_fn = MSELoss([1.0, 0.0], yhat)
    yhat[0] = 1.0
    assert loss_fn.yhat[0] == 0.5
    with pytest.raises(ValueError):
        loss_fn.y[0] = 2.0


def test_ragged_prediction():
    with pytest.raises(ShapeMismatch):
        MSELoss([1.0, 0.0], [[0.5, 0.5], [0.5]])
