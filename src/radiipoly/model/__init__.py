from .model import VectorField
from .lorenz import Lorenz, LorenzParameters
from .fisher import Fisher, FisherParameters, symmetric_convolution

__all__ = [
    "VectorField",
    "Lorenz",
    "LorenzParameters",
    "Fisher",
    "FisherParameters",
    "symmetric_convolution",
]
