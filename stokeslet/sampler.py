from typing import Iterator

import numpy as np


class PointSampler(object):
    @classmethod
    def as_points(cls, points) -> np.ndarray:
        """Converts the given observation points into a float64 array.

        A single point given as a flat array of length 3 becomes a 3x1 array.

        Args:
            points: The observation points, ideally a 3xN array.

        Returns:
            np.ndarray: The points as a float64 array, empty if they are not real numbers. Its shape is not checked here.
        """
        try:
            points = np.asarray(points)
        except (TypeError, ValueError):
            return np.empty(0)

        if not (np.issubdtype(points.dtype, np.integer) or np.issubdtype(points.dtype, np.floating)):
            return np.empty(0)

        points = points.astype(np.float64)
        if points.ndim == 1 and points.shape[0] == 3:
            return points.reshape(3, 1)
        return points

    @classmethod
    def is_spatial(cls, points: np.ndarray) -> bool:
        """Checks if the given array holds 3D coordinates, one point per column."""
        return points.ndim == 2 and points.shape[0] == 3

    @classmethod
    def columns(cls, points: np.ndarray) -> Iterator[np.ndarray]:
        """Yields every observation point, in column order.

        Args:
            points: A 3xN array of points.

        Returns:
            Iterator[np.ndarray]: The N points, each a flat array of length 3.
        """
        for index in range(points.shape[1]):
            yield points[:, index]
