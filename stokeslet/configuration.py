import logging

from typing import Any, Dict, Mapping, Optional, Tuple

import numpy as np

logger = logging.getLogger(__name__)

FORCE_KEY = "force"
OSEEN_TENSOR_KEY = "oseen_tensor"

DEFAULT_FORCE = (0.0, 0.0, 1.0)


def coerce_vector(value: Any) -> Optional[np.ndarray]:
    """Converts the given value into a 3-component vector.

    Accepted values are real numeric arrays with exactly three components. Booleans,
    strings, complex values and ragged sequences are rejected.

    Args:
        value: The candidate vector, e.g. a force or a position.

    Returns:
        np.ndarray: The vector as a flat float64 array, or None if the value is rejected.
    """
    try:
        candidate = np.asarray(value)
    except (TypeError, ValueError):
        return None

    if not (np.issubdtype(candidate.dtype, np.integer) or np.issubdtype(candidate.dtype, np.floating)):
        return None
    if candidate.size != 3:
        return None
    return candidate.astype(np.float64).reshape(3)


def default_force() -> np.ndarray:
    return np.array(DEFAULT_FORCE, dtype=np.float64)


def split_options(options: Mapping[str, Any], *recognized: str) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """Splits a configuration bag into the recognized options and the remaining ones.

    Args:
        options: The configuration bag.
        recognized: The option names the caller handles itself.

    Returns:
        dict: The recognized options that were present.
        dict: Everything else, to be forwarded untouched.
    """
    own = {name: value for name, value in options.items() if name in recognized}
    remaining = {name: value for name, value in options.items() if name not in recognized}
    if remaining:
        logger.debug(f"Forwarding options {sorted(remaining)}.")
    return own, remaining
