import numpy as np
import pytest

from ponca.weight_func import DistWeightFunc


class SmoothKernel:
    def f(self, x):
        return (x * x - 1.0) ** 2

    def df(self, x):
        return 4.0 * x * (x * x - 1.0)

    def ddf(self, x):
        return 12.0 * x * x - 4.0


class ConstantKernel:
    def f(self, x):
        return 1.0

    def df(self, x):
        return 0.0

    def ddf(self, x):
        return 0.0


H = 1e-6
CENTER = np.array([0.3, -0.2, 0.5])
QUERY = np.array([0.7, 0.1, 0.2])
T = 1.5


def make(kernel=None, t=T):
    wf = DistWeightFunc(kernel or SmoothKernel(), t)
    wf.init(CENTER)
    return wf


def numeric_grad(func, x):
    grad = []
    for axis in range(x.size):
        e = np.zeros_like(x)
        e[axis] = H
        grad.append((func(x + e) - func(x - e)) / (2 * H))
    return np.array(grad)


def test_local_basis_and_center():
    wf = make()
    np.testing.assert_allclose(wf.convert_to_local_basis(QUERY), QUERY - CENTER)
    np.testing.assert_allclose(wf.basis_center(), CENTER)
    assert wf.evaluation_scale() == T
    weight, local = wf.w(QUERY)
    np.testing.assert_allclose(local, QUERY - CENTER)
    assert 0.0 < weight < 1.0


def test_weight_at_center_and_outside():
    wf = make()
    assert wf.w(CENTER)[0] == pytest.approx(SmoothKernel().f(0.0))
    far = CENTER + np.array([T * 2, 0.0, 0.0])
    assert wf.w(far)[0] == 0.0
    assert wf.scaledw(far) == 0.0
    assert wf.scaled2w(far) == 0.0
    np.testing.assert_array_equal(wf.spacedw(far), np.zeros(3))
    np.testing.assert_array_equal(wf.spaced2w(far), np.zeros((3, 3)))


def test_constant_kernel_is_indicator():
    wf = make(ConstantKernel())
    assert wf.w(QUERY)[0] == 1.0
    assert wf.w(CENTER + np.array([0.0, 0.0, T + 0.1]))[0] == 0.0
    np.testing.assert_array_equal(wf.spacedw(QUERY), np.zeros(3))


def test_spacedw_matches_finite_difference():
    wf = make()
    expected = numeric_grad(lambda x: wf.w(x)[0], QUERY)
    np.testing.assert_allclose(wf.spacedw(QUERY), expected, atol=1e-6)


def test_spaced2w_matches_finite_difference():
    wf = make()
    expected = np.stack(
        [numeric_grad(lambda x, i=i: wf.spacedw(x)[i], QUERY) for i in range(3)]
    )
    np.testing.assert_allclose(wf.spaced2w(QUERY), expected, atol=1e-5)
    np.testing.assert_allclose(wf.spaced2w(QUERY), wf.spaced2w(QUERY).T, atol=1e-12)


def test_scale_derivatives_match_finite_difference():
    def weight(t):
        return make(t=t).w(QUERY)[0]

    def dscale(t):
        return make(t=t).scaledw(QUERY)

    wf = make()
    assert wf.scaledw(QUERY) == pytest.approx((weight(T + H) - weight(T - H)) / (2 * H), abs=1e-6)
    assert wf.scaled2w(QUERY) == pytest.approx((dscale(T + H) - dscale(T - H)) / (2 * H), abs=1e-5)


def test_scale_spaced2w_matches_finite_difference():
    wf = make()
    expected = (make(t=T + H).spacedw(QUERY) - make(t=T - H).spacedw(QUERY)) / (2 * H)
    np.testing.assert_allclose(wf.scale_spaced2w(QUERY), expected, atol=1e-5)


def test_derivatives_vanish_at_center():
    wf = make()
    np.testing.assert_array_equal(wf.spacedw(CENTER), np.zeros(3))
    np.testing.assert_array_equal(wf.scale_spaced2w(CENTER), np.zeros(3))


def test_default_center_is_origin():
    wf = DistWeightFunc(SmoothKernel(), T)
    wf.init()
    np.testing.assert_allclose(wf.convert_to_local_basis(QUERY), QUERY)
    assert wf.basis_center() is None


def test_invalid_scale():
    with pytest.raises(ValueError):
        DistWeightFunc(SmoothKernel(), 0.0)