__all__ = [
    "FlowSource",
    "OseenTensor",
    "FreeSpaceOseenTensor",
    "Contraction",
    "PointSampler",
    "StokesletError",
    "EvaluatorConstructionError",
    "SingularityError",
]

from .contraction import Contraction
from .errors import EvaluatorConstructionError, SingularityError, StokesletError
from .oseen import FreeSpaceOseenTensor, OseenTensor
from .sampler import PointSampler
from .source import FlowSource

__version__ = "0.1.0"
