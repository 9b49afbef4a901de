import logging
import numpy as np

from .utils import ShapeMismatch, to_float_array


class Layer:
    """
    Base class for every layer.

    node_weights holds the layer's most recent input (plus a constant 1.0
    bias node when inc_bias is set), edge_weights the trainable matrix of
    shape (n_inputs + inc_bias, n_outputs). Subclasses implement forward()
    and backward(lr, delta) on top of that state.
    """
    def __init__(self, n_inputs, n_outputs, inc_bias, name):
        if int(n_inputs) <= 0 or int(n_outputs) <= 0:
            raise ValueError(f"Layer sizes must be positive, got ({n_inputs},{n_outputs})")
        self.n_inputs = int(n_inputs)
        self.n_outputs = int(n_outputs)
        self.inc_bias = bool(inc_bias)
        self.name = name

        self.node_weights = np.zeros(self.n_inputs + self.inc_bias, dtype=np.float64)
        if self.inc_bias:
            self.node_weights[-1] = 1.0
        self.edge_weights = np.empty((0, 0), dtype=np.float64)

    def set_node_weights(self, node_weights):
        node_weights = to_float_array(node_weights, f"{self.name} node weights").ravel()
        if node_weights.shape[0] != self.n_inputs:
            raise ShapeMismatch(
                f"{self.name} expects {self.n_inputs} inputs, got {node_weights.shape[0]}"
            )
        self.node_weights[:self.n_inputs] = node_weights

    def get_node_weights(self):
        return self.node_weights.copy()

    def set_edge_weights(self, edge_weights):
        raise NotImplementedError

    def get_edge_weights(self):
        return self.edge_weights.copy()

    def display(self):
        print(f"{self.name} ({self.n_inputs},{self.n_outputs})")
        if self.edge_weights.size == 0:
            print("  Activation")
            return
        for i, j in np.ndindex(self.edge_weights.shape):
            print(f"  Edge ({i},{j}): {self.edge_weights[i, j]:g}")

    def forward(self):
        raise NotImplementedError

    def backward(self, lr, delta):
        # Return error wrt this layer's inputs
        raise NotImplementedError

    def _check_delta(self, delta):
        delta = to_float_array(delta, f"{self.name} delta").ravel()
        if delta.shape[0] != self.n_outputs:
            raise ShapeMismatch(
                f"{self.name} backward expects delta of length {self.n_outputs}, got {delta.shape[0]}"
            )
        return delta

    def __repr__(self):
        return f"{type(self).__name__}(n_inputs={self.n_inputs}, n_outputs={self.n_outputs}, inc_bias={self.inc_bias})"


class DenseLayer(Layer):
    """Fully-connected layer; edges start uniform in [-1, 1)."""
    def __init__(self, n_inputs, n_outputs, inc_bias, name, seed=None):
        super().__init__(n_inputs, n_outputs, inc_bias, name)
        # seed may be an int, a np.random.Generator or None (fresh entropy)
        rng = np.random.default_rng(seed)
        self.edge_weights = rng.uniform(
            -1.0, 1.0, size=(self.n_inputs + self.inc_bias, self.n_outputs)
        )
        logging.debug(f"Built {self!r} with edge matrix {self.edge_weights.shape}")

    def set_edge_weights(self, edge_weights):
        edge_weights = to_float_array(edge_weights, f"{self.name} edge weights")
        if edge_weights.shape != self.edge_weights.shape:
            raise ShapeMismatch(
                f"{self.name} edge weights must have shape {self.edge_weights.shape}, "
                f"got {edge_weights.shape}"
            )
        self.edge_weights[...] = edge_weights


class ActivationLayer(Layer):
    """Element-wise layer with no trainable edges."""
    def __init__(self, n_inputs, name):
        super().__init__(n_inputs, n_inputs, False, name)

    def set_edge_weights(self, edge_weights):
        # nothing to train
        return None


class Linear(DenseLayer):
    def __init__(self, n_inputs, n_outputs, inc_bias=False, seed=None):
        super().__init__(n_inputs, n_outputs, inc_bias, "Linear", seed=seed)

    def forward(self):
        return self.node_weights @ self.edge_weights

    def backward(self, lr, delta):
        delta = self._check_delta(delta)

        # propagated error uses the weights as they were before this update
        dx = self.edge_weights[:self.n_inputs] @ delta
        self.edge_weights -= lr * np.outer(self.node_weights, delta)
        return dx
