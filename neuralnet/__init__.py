from .utils import ShapeMismatch, setup_logging, ensure_dir
from .layers import Layer, DenseLayer, ActivationLayer, Linear
from .activations import Sigmoid
from .losses import LossFunction, MSELoss
from .model import Sequential
from .train import train
