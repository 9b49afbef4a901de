import numpy as np

from .layers import ActivationLayer


class Sigmoid(ActivationLayer):
    def __init__(self, n_inputs):
        super().__init__(n_inputs, "Sigmoid")

    def forward(self):
        return 1.0 / (1.0 + np.exp(-self.node_weights))

    def backward(self, lr, delta):
        # lr is unused, there is nothing to update
        delta = self._check_delta(delta)
        s = self.forward()
        return s * delta * (1.0 - s)
