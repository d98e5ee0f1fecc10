import math
import numpy as np
from doublependulum.modeling.double_pendulum import (
    DoublePendulum, PhysicalParameters, initial_state
)

def reference_derivs(y, g=9.82, L1=1.0, L2=1.0, M1=1.0, M2=1.0):
    # plain-float evaluation of the equations of motion
    dydx = [0.0] * 4
    dydx[0] = y[1]
    d = y[2] - y[0]
    den1 = (M1 + M2) * L1 - M2 * L1 * math.cos(d) * math.cos(d)
    dydx[1] = (M2 * L1 * y[1] * y[1] * math.sin(d) * math.cos(d)
               + M2 * g * math.sin(y[2]) * math.cos(d)
               + M2 * L2 * y[3] * y[3] * math.sin(d)
               - (M1 + M2) * g * math.sin(y[0])) / den1
    dydx[2] = y[3]
    den2 = (L2 / L1) * den1
    dydx[3] = (-M2 * L2 * y[3] * y[3] * math.sin(d) * math.cos(d)
               + (M1 + M2) * g * math.sin(y[0]) * math.cos(d)
               - (M1 + M2) * L1 * y[1] * y[1] * math.sin(d)
               - (M1 + M2) * g * math.sin(y[2])) / den2
    return dydx

def test_default_parameters():
    p = PhysicalParameters()
    assert (p.g, p.L1, p.L2, p.m1, p.m2) == (9.82, 1.0, 1.0, 1.0, 1.0)

def test_derive_is_deterministic():
    model = DoublePendulum()
    s = np.array([0.3, -1.2, 2.1, 0.7])
    a = model.derive(s)
    b = model.derive(s.copy())
    assert np.array_equal(a, b)
    assert a.shape == (4,)

def test_derive_ignores_time():
    model = DoublePendulum()
    s = np.array([0.3, -1.2, 2.1, 0.7])
    assert np.array_equal(model.derive(s, 0.0), model.derive(s, 123.4))

def test_derive_matches_reference_formula():
    params = PhysicalParameters(g=9.5, L1=1.3, L2=0.7, m1=2.0, m2=0.5)
    model = DoublePendulum(params)
    s = [1.1, 0.4, -0.6, 2.5]
    got = model.derive(np.array(s))
    want = reference_derivs(s, g=9.5, L1=1.3, L2=0.7, M1=2.0, M2=0.5)
    np.testing.assert_allclose(got, want, rtol=1e-12, atol=1e-12)

def test_equilibrium_has_zero_derivative():
    model = DoublePendulum()
    d = model.derive(np.zeros(4))
    assert np.all(d == 0.0)

def test_derive_does_not_mutate_state():
    s = np.array([0.3, -1.2, 2.1, 0.7])
    before = s.copy()
    DoublePendulum().derive(s)
    assert np.array_equal(s, before)

def test_degenerate_configuration_propagates_nan():
    # m1 = 0 with aligned rods zeroes both denominators
    model = DoublePendulum(PhysicalParameters(m1=0.0))
    d = model.derive(np.zeros(4))
    assert np.isnan(d[1]) and np.isnan(d[3])
    assert d[0] == 0.0 and d[2] == 0.0

def test_float32_state_keeps_dtype():
    model = DoublePendulum()
    s = np.array([0.5, 0.1, -0.2, 0.0], dtype=np.float32)
    assert model.derive(s).dtype == np.float32

def test_initial_state_converts_degrees():
    x0 = initial_state(90.0, 0.0, -10.0, 180.0)
    np.testing.assert_allclose(x0, [math.pi / 2, 0.0, -math.pi / 18, math.pi])
    assert initial_state(1, 2, 3, 4, dtype=np.float32).dtype == np.float32
