import logging

from .losses import MSELoss


class Sequential:
    """
    Ordered chain of layers trained one sample at a time.

    forward() writes every layer's node_weights, and backward() reads them
    back, so a backward() call must follow the forward() it corrects.
    """
    def __init__(self, layers=None):
        self.layers = []
        for L in layers or []:
            self.add_layer(L)

    def add_layer(self, layer):
        # shapes between neighbours are only checked once data flows
        self.layers.append(layer)
        logging.debug(f"Added {layer!r} at position {len(self.layers) - 1}")

    def forward(self, x):
        if not self.layers:
            raise ValueError("Sequential has no layers")
        self.layers[0].set_node_weights(x)
        for prev, L in zip(self.layers, self.layers[1:]):
            L.set_node_weights(prev.forward())
        return self.layers[-1].forward()

    def backward(self, loss_fn, lr):
        delta = loss_fn.backward()
        for L in reversed(self.layers):
            delta = L.backward(lr, delta)

    def train_step(self, x, y, lr):
        yhat = self.forward(x)
        loss_fn = MSELoss(y, yhat)
        self.backward(loss_fn, lr)
        return loss_fn.loss(), yhat

    def predict(self, x):
        return self.forward(x)

    def display(self):
        for L in self.layers:
            L.display()

    def __len__(self):
        return len(self.layers)

    def __iter__(self):
        return iter(self.layers)
