import numpy as np

from .utils import ShapeMismatch, to_float_array


class LossFunction:
    """Loss for one prediction; y and yhat are fixed at construction."""
    def __init__(self, y, yhat):
        y = to_float_array(y, "y", copy=True).ravel()
        yhat = to_float_array(yhat, "yhat", copy=True).ravel()
        if y.shape != yhat.shape:
            raise ShapeMismatch(f"y has length {y.shape[0]} but yhat has length {yhat.shape[0]}")
        y.flags.writeable = False
        yhat.flags.writeable = False
        self._y = y
        self._yhat = yhat

    @property
    def y(self):
        return self._y

    @property
    def yhat(self):
        return self._yhat

    def loss(self):
        raise NotImplementedError

    def backward(self):
        # gradient of loss() wrt yhat
        raise NotImplementedError


class MSELoss(LossFunction):
    def loss(self):
        diff = self._y - self._yhat
        return float(0.5 * np.sum(diff * diff))

    def backward(self):
        return -(self._y - self._yhat)
