import logging
import threading

from typing import Any, Callable, Dict, Optional, Union

import numpy as np

from .configuration import FORCE_KEY, OSEEN_TENSOR_KEY, coerce_vector, default_force, split_options
from .contraction import Contraction
from .errors import EvaluatorConstructionError
from .oseen import FreeSpaceOseenTensor, OseenTensor
from .sampler import PointSampler

logger = logging.getLogger(__name__)


def _is_evaluator(candidate: Any) -> bool:
    # Evaluator classes have a compute attribute too, but are factories.
    return not isinstance(candidate, type) and callable(getattr(candidate, "compute", None))


class FlowSource(object):
    def __init__(
        self,
        oseen_tensor: Union[OseenTensor, Callable[..., OseenTensor]] = None,
        force: np.ndarray = None,
        **options,
    ):
        """A point force in a viscous fluid, also called a Stokeslet.

        The velocity the source induces at a point is its Oseen tensor evaluated at that
        point, contracted with the force. The Oseen tensor is given either as an evaluator,
        anything with a compute method, or as a factory returning one. The factory is called
        with the given options as keyword arguments. If an evaluator is given instead, the
        options are passed on to its set_property. Without either, a FreeSpaceOseenTensor
        is built.

        Args:
            oseen_tensor: The Oseen tensor evaluator, or a factory for it. Can be None.
            force: The force vector. Anything other than 3 real numbers means [0, 0, 1].
            **options: The evaluator configuration.

        Raises:
            EvaluatorConstructionError: If the factory fails or does not return an evaluator.
        """
        self._lock = threading.RLock()

        coerced_force = coerce_vector(force) if force is not None else None
        self._force: np.ndarray = coerced_force if coerced_force is not None else default_force()

        if oseen_tensor is None:
            oseen_tensor = FreeSpaceOseenTensor

        if _is_evaluator(oseen_tensor):
            self._oseen_tensor = oseen_tensor
            self._oseen_tensor.set_property(**options)
        else:
            self._oseen_tensor = self._build_oseen_tensor(oseen_tensor, options)

        logger.debug(f"Created {self!r}.")

    def _build_oseen_tensor(self, factory: Callable[..., OseenTensor], options: Dict[str, Any]):
        """Builds the evaluator from the factory.

        Args:
            factory: A callable taking the evaluator configuration as keyword arguments.
            options: The evaluator configuration.

        Returns:
            The evaluator built by the factory.
        """
        if not callable(factory):
            raise EvaluatorConstructionError(f"{factory!r} is neither an Oseen tensor evaluator nor a factory.")

        try:
            oseen_tensor = factory(**options)
        except Exception as exc:
            raise EvaluatorConstructionError(f"Could not build the Oseen tensor with {factory!r}.") from exc

        if not _is_evaluator(oseen_tensor):
            raise EvaluatorConstructionError(f"{factory!r} returned {oseen_tensor!r}, which has no compute method.")
        return oseen_tensor

    def __repr__(self) -> str:
        return f"{type(self).__name__}(oseen_tensor={self._oseen_tensor!r}, force={self._force.tolist()})"

    @property
    def force(self) -> np.ndarray:
        return self._force.copy()

    @force.setter
    def force(self, value) -> None:
        force = coerce_vector(value)
        if force is None:
            logger.debug(f"Ignoring invalid force {value!r}, keeping {self._force.tolist()}.")
            return

        with self._lock:
            self._force = force

    @property
    def oseen_tensor(self):
        return self._oseen_tensor

    def set_property(self, **options) -> None:
        """Sets the force and configures the Oseen tensor.

        An invalid force is ignored. Every other option is forwarded to the
        evaluator's set_property, even when there is none.

        Args:
            **options: The force, and the evaluator configuration.
        """
        own, remaining = split_options(options, FORCE_KEY)
        with self._lock:
            if FORCE_KEY in own:
                self.force = own[FORCE_KEY]
            self._oseen_tensor.set_property(**remaining)

    def get_property(self, *names: str) -> Dict[str, Any]:
        """Reads the force, the Oseen tensor and the evaluator configuration.

        Args:
            *names: The property names. Names other than force and oseen_tensor are read from the evaluator.

        Returns:
            dict: The requested properties by name.
        """
        own = {FORCE_KEY: self.force, OSEEN_TENSOR_KEY: self._oseen_tensor}
        properties = {name: own[name] for name in names if name in own}

        forwarded = [name for name in names if name not in own]
        if forwarded:
            properties.update(self._oseen_tensor.get_property(*forwarded))
        return properties

    def compute(self, points, options: Optional[Dict[str, Any]] = None) -> np.ndarray:
        """Computes the velocity induced at the given points.

        For each point r_i the Oseen tensor T_i is evaluated and contracted with
        the force, v_i = T_i . f

        If the points are not 3D coordinates, the zero vector [0, 0, 0] is returned
        instead, regardless of how many points there are.

        Args:
            points: The observation points, a 3xN array with one point per column.
            options: Passed as is to the evaluator's compute.

        Returns:
            np.ndarray: A 3xN array of velocities, column i belonging to point i.
        """
        points = PointSampler.as_points(points)
        if not PointSampler.is_spatial(points):
            logger.warning(f"Expected points of shape (3, N), got {points.shape}. Returning the zero vector.")
            return np.zeros(3)

        logger.debug(f"Computing the velocity at {points.shape[1]} points.")
        with self._lock:
            tensors = [self._oseen_tensor.compute(point, options) for point in PointSampler.columns(points)]
            return Contraction.batch_contract(tensors, self._force)
