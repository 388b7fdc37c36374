class StokesletError(Exception):
    """Base class for every error raised by this package."""


class EvaluatorConstructionError(StokesletError):
    """The Oseen tensor factory failed, or did not return an evaluator."""


class SingularityError(StokesletError, ZeroDivisionError):
    """The unregularized Oseen tensor was evaluated at the source position."""
