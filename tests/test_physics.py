import numpy as np
import pytest

from mhdflow.physics import (
    FIELD_NAMES,
    Primitives,
    conserved_from_primitives,
    max_signal_speed,
    primitives_from_conserved,
    radiative_source,
    x_fluxes,
    y_fluxes,
)


def _random_state(seed=0, shape=(4, 5)):
    rng = np.random.default_rng(seed)
    return Primitives(
        rho=rng.uniform(0.5, 2.0, shape),
        u=rng.uniform(-1.0, 1.0, shape),
        v=rng.uniform(-1.0, 1.0, shape),
        p=rng.uniform(0.1, 3.0, shape),
        bx=rng.uniform(-1.0, 1.0, shape),
        by=rng.uniform(-1.0, 1.0, shape),
    )


def _swap_axes(prim):
    return Primitives(prim.rho.T, prim.v.T, prim.u.T, prim.p.T, prim.by.T, prim.bx.T)


def test_round_trip():
    prim = _random_state()
    cons = conserved_from_primitives(prim, 1.4, 1.0)
    back = primitives_from_conserved(cons, 1.4, 1.0)
    for (name, a), (_, b) in zip(prim.items(), back.items()):
        np.testing.assert_allclose(a, b, err_msg=name)


def test_conserved_shape_and_simple_components():
    prim = _random_state()
    cons = conserved_from_primitives(prim, 1.666667, 2.0)
    assert cons.shape == (6, 4, 5)
    np.testing.assert_allclose(cons[0], prim.rho)
    np.testing.assert_allclose(cons[1], prim.rho * prim.u)
    np.testing.assert_allclose(cons[4], prim.bx)


def test_energy_at_rest():
    ones = np.ones((3, 3))
    prim = Primitives(ones, 0 * ones, 0 * ones, 0.4 * ones, 0 * ones, 0 * ones)
    cons = conserved_from_primitives(prim, 1.4, 1.0)
    np.testing.assert_allclose(cons[3], 1.0)


def test_primitives_from_conserved_bad_shape():
    with pytest.raises(ValueError):
        primitives_from_conserved(np.zeros((5, 3, 3)), 1.4, 1.0)


def test_primitives_mismatched_shapes():
    with pytest.raises(ValueError):
        Primitives(np.ones((3, 3)), np.ones((3, 4)), np.ones((3, 3)),
                   np.ones((3, 3)), np.ones((3, 3)), np.ones((3, 3)))


def test_mass_flux_is_momentum():
    prim = _random_state(1)
    cons = conserved_from_primitives(prim, 1.4, 1.0)
    np.testing.assert_allclose(x_fluxes(prim, 1.4, 1.0)[0], cons[1])
    np.testing.assert_allclose(y_fluxes(prim, 1.4, 1.0)[0], cons[2])


def test_induction_flux_components_vanish():
    prim = _random_state(2)
    np.testing.assert_array_equal(x_fluxes(prim, 1.4, 1.0)[4], np.zeros((4, 5)))
    np.testing.assert_array_equal(y_fluxes(prim, 1.4, 1.0)[5], np.zeros((4, 5)))


def test_x_and_y_fluxes_are_mirror_images():
    prim = _random_state(3)
    fx = x_fluxes(prim, 1.666667, 1.0)
    fy_swapped = y_fluxes(_swap_axes(prim), 1.666667, 1.0)
    reordered = fy_swapped[[0, 2, 1, 3, 5, 4]].transpose(0, 2, 1)
    np.testing.assert_allclose(reordered, fx)


def test_hydro_momentum_flux_without_field():
    prim = _random_state(4)
    prim.bx[:] = 0.0
    prim.by[:] = 0.0
    fx = x_fluxes(prim, 1.4, 1.0)
    np.testing.assert_allclose(fx[1], prim.rho * prim.u**2 + prim.p)
    np.testing.assert_allclose(fx[5], 0.0)


def test_max_signal_speed_flow_dominates():
    ones = np.ones((3, 3))
    prim = Primitives(ones, 3 * ones, 4 * ones, ones, 0 * ones, 0 * ones)
    assert max_signal_speed(prim, 4.0) == pytest.approx(5.0)


def test_max_signal_speed_sound_dominates():
    ones = np.ones((3, 3))
    prim = Primitives(ones, 0 * ones, 0 * ones, ones, 0 * ones, 0 * ones)
    prim.p[1, 1] = 4.0
    assert max_signal_speed(prim, 1.0) == pytest.approx(2.0)


def test_max_signal_speed_is_upper_bound():
    prim = _random_state(5)
    speed = max_signal_speed(prim, 1.4)
    assert speed >= float(np.hypot(prim.u, prim.v).max()) - 1e-12
    assert speed >= float(np.sqrt(1.4 * prim.p / prim.rho).max()) - 1e-12


def test_max_signal_speed_ignores_negative_pressure():
    zeros = np.zeros((3, 3))
    prim = Primitives(zeros + 1.0, zeros, zeros, zeros - 1.0, zeros, zeros)
    assert max_signal_speed(prim, 1.4) == 0.0


def test_radiative_source_disabled():
    assert radiative_source(1.0, 1.0, False) == 0.0
    np.testing.assert_array_equal(radiative_source(np.ones(3), np.ones(3), False), 0.0)


def test_radiative_source_enabled_unit_state():
    assert radiative_source(1.0, 1.0, True) == pytest.approx(-2.0)


def test_radiative_source_cools():
    values = radiative_source(np.array([0.5, 1.0, 2.0]), np.array([1.0, 2.0, 3.0]), True)
    assert float(np.max(values)) < 0.0


def test_items_order_and_copy_independence():
    prim = _random_state(6)
    assert [name for name, _ in prim.items()] == list(FIELD_NAMES)
    clone = prim.copy()
    clone.rho[0, 0] = -99.0
    assert prim.rho[0, 0] != -99.0
    assert clone.shape == prim.shape