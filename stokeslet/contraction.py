import logging

from typing import Sequence

import numpy as np

logger = logging.getLogger(__name__)

TENSOR_SHAPE = (3, 3)


class Contraction(object):
    @classmethod
    def as_tensor(cls, tensor) -> np.ndarray:
        """Converts an evaluator result into a 3x3 float64 tensor.

        Args:
            tensor: The value returned by the Oseen tensor evaluator.

        Returns:
            np.ndarray: The tensor.

        Raises:
            ValueError: If the value is not a 3x3 tensor.
        """
        tensor = np.asarray(tensor, dtype=np.float64)
        if tensor.shape != TENSOR_SHAPE:
            raise ValueError(f"Expected a 3x3 Oseen tensor, got shape {tensor.shape}.")
        return tensor

    @classmethod
    def contract(cls, tensor: np.ndarray, force: np.ndarray) -> np.ndarray:
        """Contracts a single tensor with the force, T . f"""
        return cls.as_tensor(tensor) @ force

    @classmethod
    def batch_contract(cls, tensors: Sequence[np.ndarray], force: np.ndarray) -> np.ndarray:
        """Contracts every tensor with the same force.

        Args:
            tensors: N tensors, one per observation point, in point order.
            force: The force vector of length 3.

        Returns:
            np.ndarray: A 3xN array, column i being tensors[i] . force.
        """
        if len(tensors) == 0:
            return np.zeros((3, 0))

        return np.column_stack([cls.contract(tensor, force) for tensor in tensors])
