import numpy as np
import pytest


class IdentityTensor(object):
    """The identity tensor, wherever the point is."""

    def __init__(self, **options):
        self.options = dict(options)
        self.calls = []

    def compute(self, relative_position, options=None):
        self.calls.append((np.array(relative_position), options))
        return np.eye(3)

    def set_property(self, **options):
        self.options.update(options)

    def get_property(self, *names):
        return {name: self.options.get(name) for name in names}


class PositionTensor(IdentityTensor):
    """A tensor that depends on the point, diag(r) + 1."""

    def compute(self, relative_position, options=None):
        super().compute(relative_position, options)
        return self.tensor_at(relative_position)

    @staticmethod
    def tensor_at(point):
        return np.diag(np.asarray(point, dtype=np.float64)) + np.ones((3, 3))


class BrokenShapeTensor(IdentityTensor):
    def compute(self, relative_position, options=None):
        return np.eye(2)


@pytest.fixture
def identity_tensor():
    return IdentityTensor()


@pytest.fixture
def position_tensor():
    return PositionTensor()


@pytest.fixture
def identity_factory():
    return IdentityTensor


@pytest.fixture
def broken_tensor():
    return BrokenShapeTensor()
