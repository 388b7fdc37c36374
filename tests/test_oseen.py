"""Tests for the Oseen tensor evaluators."""
import numpy as np
import pytest

from stokeslet import FreeSpaceOseenTensor, OseenTensor, SingularityError


class TestOseenTensor:
    def test_evaluate_is_abstract(self):
        with pytest.raises(NotImplementedError):
            OseenTensor().compute([1.0, 0.0, 0.0])

    def test_unknown_options_are_ignored(self):
        tensor = OseenTensor(anything="goes")
        assert tensor.options == {}
        assert tensor.get_property("anything") == {"anything": None}


class TestFreeSpaceOseenTensor:
    def test_defaults(self):
        properties = FreeSpaceOseenTensor().get_property("viscosity", "epsilon", "position")
        assert properties["viscosity"] == 1.0
        assert properties["epsilon"] == 0.0
        np.testing.assert_array_equal(properties["position"], np.zeros(3))

    def test_closed_form_on_axis(self):
        tensor = FreeSpaceOseenTensor(viscosity=2.0).compute([3.0, 0.0, 0.0])
        prefactor = 1 / (8 * np.pi * 2.0 * 3.0)
        np.testing.assert_allclose(tensor, prefactor * np.diag([2.0, 1.0, 1.0]))

    def test_symmetric(self):
        np.random.seed(0)
        tensor = FreeSpaceOseenTensor().compute(np.random.randn(3))
        np.testing.assert_allclose(tensor, tensor.T)

    def test_scales_as_inverse_distance(self):
        evaluator = FreeSpaceOseenTensor()
        direction = np.array([1.0, 2.0, -0.5])
        np.testing.assert_allclose(evaluator.compute(direction), 2 * evaluator.compute(2 * direction))

    def test_scales_as_inverse_viscosity(self):
        point = [0.3, -0.2, 0.9]
        slow = FreeSpaceOseenTensor(viscosity=4.0).compute(point)
        fast = FreeSpaceOseenTensor(viscosity=1.0).compute(point)
        np.testing.assert_allclose(4 * slow, fast)

    def test_source_position(self):
        shifted = FreeSpaceOseenTensor(position=[1.0, 1.0, 1.0]).compute([2.0, 1.0, 1.0])
        centered = FreeSpaceOseenTensor().compute([1.0, 0.0, 0.0])
        np.testing.assert_allclose(shifted, centered)

    def test_singular_at_source(self):
        with pytest.raises(SingularityError):
            FreeSpaceOseenTensor().compute([0.0, 0.0, 0.0])

    def test_singularity_is_zero_division(self):
        with pytest.raises(ZeroDivisionError):
            FreeSpaceOseenTensor(position=[1, 2, 3]).compute([1, 2, 3])

    def test_regularized_is_finite_at_source(self):
        tensor = FreeSpaceOseenTensor(epsilon=0.5).compute([0.0, 0.0, 0.0])
        # (2 eps^2) I / (8 pi eps^3) = I / (4 pi eps)
        np.testing.assert_allclose(tensor, np.eye(3) / (4 * np.pi * 0.5))

    def test_regularized_converges_far_away(self):
        point = [10.0, -4.0, 3.0]
        classical = FreeSpaceOseenTensor().compute(point)
        regularized = FreeSpaceOseenTensor(epsilon=1e-6).compute(point)
        np.testing.assert_allclose(regularized, classical, rtol=1e-9)

    def test_per_call_options_do_not_stick(self):
        evaluator = FreeSpaceOseenTensor()
        point = [1.0, 0.0, 0.0]
        overridden = evaluator.compute(point, {"viscosity": 2.0, "unknown": 1})
        np.testing.assert_allclose(2 * overridden, evaluator.compute(point))
        assert evaluator.get_property("viscosity") == {"viscosity": 1.0}

    def test_set_property(self):
        evaluator = FreeSpaceOseenTensor()
        evaluator.set_property(viscosity=3, color="blue")
        assert evaluator.get_property("viscosity", "color") == {"viscosity": 3.0, "color": None}

    @pytest.mark.parametrize("options", [{"viscosity": 0.0}, {"epsilon": -1.0}, {"position": [1, 2]}])
    def test_invalid_options(self, options):
        with pytest.raises(ValueError):
            FreeSpaceOseenTensor(**options)

    def test_invalid_position_argument(self):
        with pytest.raises(ValueError):
            FreeSpaceOseenTensor().compute([1.0, 2.0])

    def test_instances_own_their_defaults(self):
        first = FreeSpaceOseenTensor()
        first.options["position"][:] = 1.0
        second = FreeSpaceOseenTensor()
        np.testing.assert_array_equal(second.get_property("position")["position"], np.zeros(3))
        np.testing.assert_array_equal(FreeSpaceOseenTensor.defaults["position"], np.zeros(3))

    def test_get_property_returns_copies(self):
        evaluator = FreeSpaceOseenTensor(position=[1.0, 2.0, 3.0])
        evaluator.get_property("position")["position"][:] = 0.0
        np.testing.assert_array_equal(evaluator.get_property("position")["position"], [1.0, 2.0, 3.0])
        np.testing.assert_allclose(evaluator.compute([2.0, 2.0, 3.0]), FreeSpaceOseenTensor().compute([1.0, 0.0, 0.0]))
