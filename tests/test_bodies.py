import numpy as np
import pytest

from nbodysim.bodies import (
    Acceleration,
    AccelerationsSoA,
    Bodies,
    Body,
)


def test_zero_bodies_rejected():
    with pytest.raises(ValueError):
        Bodies(0)


def test_unknown_scheme_rejected():
    with pytest.raises(ValueError):
        Bodies(10, scheme="spiral")


def test_bad_lanes_rejected():
    with pytest.raises(ValueError):
        Bodies(10, lanes=0)


@pytest.mark.parametrize("n", [1, 7, 8, 9, 31, 100])
@pytest.mark.parametrize("lanes", [1, 4, 8, 16])
def test_padding_fills_last_vector(n, lanes):
    b = Bodies(n, lanes=lanes)
    assert (b.n + b.padding) % lanes == 0
    assert 0 <= b.padding < lanes
    assert len(b.soa) == b.n + b.padding


def test_no_padding_when_multiple_of_lanes():
    b = Bodies(16, lanes=8)
    assert b.padding == 0


def test_allocated_bytes_value():
    b = Bodies(8, lanes=8, dtype=np.float32)
    assert b.allocated_bytes == 512


def test_allocated_bytes_double_precision_is_twice():
    single = Bodies(20, lanes=4, dtype=np.float32)
    double = Bodies(20, lanes=4, dtype=np.float64)
    assert double.allocated_bytes == 2 * single.allocated_bytes


def test_galaxy_central_body():
    b = Bodies(10, scheme="galaxy", lanes=4)
    first = b.aos[0]
    assert first.m == pytest.approx(2.0e24, rel=1e-6)
    assert (first.qx, first.qy, first.qz) == (0.0, 0.0, 0.0)
    assert (first.vx, first.vy, first.vz) == (0.0, 0.0, 0.0)
    assert first.r == 0.0


def test_galaxy_orbits():
    b = Bodies(50, scheme="galaxy", lanes=4, dtype=np.float64)
    s = b.soa
    n = b.n
    dist = np.sqrt(s.qx[1:n] ** 2 + s.qy[1:n] ** 2 + s.qz[1:n] ** 2)
    assert np.all(dist >= 1.0e8 * (1 - 1e-9))
    assert np.all(dist <= 2.0e8 * (1 + 1e-9))
    np.testing.assert_allclose(s.vx[1:n], s.qy[1:n] * 4.0e-6)
    np.testing.assert_allclose(s.vy[1:n], -s.qx[1:n] * 4.0e-6)
    assert np.all(s.vz[:n] == 0.0)
    np.testing.assert_allclose(s.r[1:n], s.m[1:n] * 2.5e-15)
    assert np.all((s.m[1:n] >= 0) & (s.m[1:n] <= 5e20))


def test_random_scheme_ranges():
    b = Bodies(200, scheme="random", lanes=8, dtype=np.float64)
    s = b.soa
    n = b.n
    np.testing.assert_allclose(s.r[:n], s.m[:n] * 0.5e-14)
    assert np.all((s.m[:n] >= 0) & (s.m[:n] <= 5.0e21))
    assert np.all(np.abs(s.qx) <= 5.0e8 * 1.33 * (1 + 1e-9))
    assert np.all(np.abs(s.qy) <= 5.0e8 * (1 + 1e-9))
    assert np.all((s.qz >= -1.5e9 - 1) & (s.qz <= -0.5e9 + 1))
    for v in (s.vx, s.vy, s.vz):
        assert np.all(np.abs(v) <= 1.0e2 * (1 + 1e-9))


@pytest.mark.parametrize("scheme", ["galaxy", "random"])
def test_padding_bodies_are_massless(scheme):
    b = Bodies(5, scheme=scheme, lanes=8)
    assert b.padding == 3
    assert np.all(b.soa.m[b.n:] == 0)
    assert np.all(b.soa.r[b.n:] == 0)


@pytest.mark.parametrize("scheme", ["galaxy", "random"])
def test_same_seed_reproducible(scheme):
    a = Bodies(30, scheme=scheme, seed=11, lanes=4)
    b = Bodies(30, scheme=scheme, seed=11, lanes=4)
    assert a.aos == b.aos


def test_different_seeds_differ():
    a = Bodies(30, scheme="random", seed=1, lanes=4)
    b = Bodies(30, scheme="random", seed=2, lanes=4)
    assert len(a.aos) == len(b.aos)
    assert not np.array_equal(a.soa.qx, b.soa.qx)


def test_reinit_matches_constructor():
    built = Bodies(12, scheme="random", seed=5, lanes=4)
    other = Bodies(12, scheme="galaxy", seed=0, lanes=4)
    other.init_randomly(5)
    assert other.aos == built.aos
    other.init_galaxy(3)
    assert other.aos == Bodies(12, scheme="galaxy", seed=3, lanes=4).aos


def test_aos_matches_soa():
    b = Bodies(9, scheme="random", lanes=4)
    s = b.soa
    records = b.aos
    assert len(records) == b.n + b.padding
    for i, body in enumerate(records):
        assert isinstance(body, Body)
        assert body.m == float(s.m[i])
        assert body.qx == float(s.qx[i])
        assert body.vz == float(s.vz[i])


def test_zero_acceleration_moves_linearly():
    b = Bodies(10, scheme="random", lanes=4, dtype=np.float64)
    before = b.soa
    qx, vx, qz = before.qx.copy(), before.vx.copy(), before.qz.copy()
    zeros = np.zeros(b.n)
    b.update_positions_and_velocities(AccelerationsSoA(zeros, zeros, zeros), 2.0)
    n = b.n
    np.testing.assert_allclose(b.soa.qx[:n], qx[:n] + vx[:n] * 2.0)
    np.testing.assert_array_equal(b.soa.vx, vx)
    np.testing.assert_allclose(b.soa.qz[:n], qz[:n] + before.vz[:n] * 2.0)


def test_uniform_acceleration_changes_velocity():
    b = Bodies(6, scheme="random", lanes=4, dtype=np.float64)
    vy = b.soa.vy.copy()
    ones = np.ones(b.n)
    b.update_positions_and_velocities(AccelerationsSoA(ones, ones * 3, ones), 0.5)
    np.testing.assert_allclose(b.soa.vy[:b.n] - vy[:b.n], np.full(b.n, 1.5))


def test_padding_untouched_by_update():
    b = Bodies(5, scheme="random", lanes=8, dtype=np.float64)
    pad_q = b.soa.qx[b.n:].copy()
    pad_v = b.soa.vx[b.n:].copy()
    ones = np.ones(b.n)
    b.update_positions_and_velocities(AccelerationsSoA(ones, ones, ones), 1.0)
    np.testing.assert_array_equal(b.soa.qx[b.n:], pad_q)
    np.testing.assert_array_equal(b.soa.vx[b.n:], pad_v)


def test_soa_and_aos_accelerations_agree():
    a = Bodies(7, scheme="galaxy", seed=4, lanes=4, dtype=np.float64)
    b = Bodies(7, scheme="galaxy", seed=4, lanes=4, dtype=np.float64)
    ax = np.linspace(-1.0, 1.0, 7)
    ay = np.linspace(2.0, 3.0, 7)
    az = np.linspace(0.0, 0.5, 7)
    a.update_positions_and_velocities(AccelerationsSoA(ax, ay, az), 10.0)
    records = [Acceleration(float(x), float(y), float(z)) for x, y, z in zip(ax, ay, az)]
    b.update_positions_and_velocities(records, 10.0)
    assert a.aos == b.aos


def test_too_few_accelerations_rejected():
    b = Bodies(6, lanes=4)
    short = np.zeros(3)
    with pytest.raises(ValueError):
        b.update_positions_and_velocities(AccelerationsSoA(short, short, short), 1.0)
    with pytest.raises(ValueError):
        b.update_positions_and_velocities([Acceleration(0.0, 0.0, 0.0)], 1.0)


def test_default_dtype_is_single_precision():
    b = Bodies(4)
    assert b.soa.qx.dtype == np.float32
    assert b.dtype == np.dtype(np.float32)