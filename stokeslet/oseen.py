import logging

from typing import Any, Dict, Optional

import numpy as np

from .configuration import coerce_vector
from .contraction import Contraction
from .errors import SingularityError

logger = logging.getLogger(__name__)

DEFAULT_VISCOSITY = 1.0


def _copy(value: Any) -> Any:
    return value.copy() if isinstance(value, np.ndarray) else value


class OseenTensor(object):
    defaults: Dict[str, Any] = {}

    def __init__(self, **options):
        """Base class for Oseen tensor evaluators.

        An evaluator maps a position relative to the source onto a 3x3 tensor. Its
        configuration is an open bag of named options: the names listed in defaults are
        stored, anything else is ignored so that callers can forward whatever they
        do not recognize themselves.

        Subclasses implement evaluate and, when option values need checking, validate.

        Args:
            **options: Initial configuration, overriding the class defaults.
        """
        self.options: Dict[str, Any] = {name: _copy(value) for name, value in self.defaults.items()}
        self.set_property(**options)

    def validate(self, name: str, value: Any) -> Any:
        return value

    def _resolve(self, options: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        resolved = dict(self.options)
        for name, value in (options or {}).items():
            if name in self.defaults:
                resolved[name] = self.validate(name, value)
        return resolved

    def set_property(self, **options) -> None:
        """Updates the configuration.

        Args:
            **options: The options to set. Unknown names are ignored.

        Raises:
            ValueError: If a known option is given an invalid value.
        """
        for name, value in options.items():
            if name not in self.defaults:
                logger.debug(f"{type(self).__name__} ignores unknown option {name!r}.")
                continue
            self.options[name] = self.validate(name, value)

    def get_property(self, *names: str) -> Dict[str, Any]:
        """Reads the configuration. Unknown names map to None, arrays are returned as copies."""
        return {name: _copy(self.options.get(name)) for name in names}

    def compute(self, relative_position, options: Optional[Dict[str, Any]] = None) -> np.ndarray:
        """Evaluates the tensor at the given position.

        Args:
            relative_position: The observation point, a vector of length 3.
            options: Options overriding the stored configuration for this call only.

        Returns:
            np.ndarray: The 3x3 Oseen tensor.
        """
        position = coerce_vector(relative_position)
        if position is None:
            raise ValueError(f"Expected a 3D position, got {relative_position!r}.")
        return Contraction.as_tensor(self.evaluate(position, self._resolve(options)))

    def evaluate(self, position: np.ndarray, options: Dict[str, Any]) -> np.ndarray:
        raise NotImplementedError


class FreeSpaceOseenTensor(OseenTensor):
    defaults = {
        "viscosity": DEFAULT_VISCOSITY,
        "position": np.zeros(3),
        "epsilon": 0.0,
    }

    def validate(self, name: str, value: Any) -> Any:
        if name == "position":
            position = coerce_vector(value)
            if position is None:
                raise ValueError(f"The source position must have 3 components, got {value!r}.")
            return position

        value = float(value)
        if name == "viscosity" and value <= 0:
            raise ValueError(f"The viscosity must be positive, got {value}.")
        if name == "epsilon" and value < 0:
            raise ValueError(f"The regularization epsilon must not be negative, got {value}.")
        return value

    def evaluate(self, position: np.ndarray, options: Dict[str, Any]) -> np.ndarray:
        """The Oseen tensor of a point force in an unbounded fluid.

        G = (I + r r^T / r^2) / (8 pi mu r)

        With epsilon > 0 the regularized Stokeslet is used instead, which is finite at the source:

        G = ((r^2 + 2 eps^2) I + r r^T) / (8 pi mu (r^2 + eps^2)^(3/2))

        Both agree when epsilon is zero and r is not.

        Args:
            position: The observation point.
            options: The resolved configuration.

        Returns:
            np.ndarray: The 3x3 tensor.

        Raises:
            SingularityError: If epsilon is zero and the point is the source position.
        """
        r = position - options["position"]
        r_squared = float(r @ r)
        epsilon_squared = options["epsilon"] ** 2
        prefactor = 1 / (8 * np.pi * options["viscosity"])

        if epsilon_squared == 0:
            if r_squared == 0:
                raise SingularityError("The Oseen tensor is singular at the source position.")
            return prefactor * (np.eye(3) + np.outer(r, r) / r_squared) / np.sqrt(r_squared)

        denominator = (r_squared + epsilon_squared) ** 1.5
        return prefactor * ((r_squared + 2 * epsilon_squared) * np.eye(3) + np.outer(r, r)) / denominator
