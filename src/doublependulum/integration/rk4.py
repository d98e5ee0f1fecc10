import numpy as np
from typing import Callable, Iterator, Tuple


def rk4_step(f: Callable, s: np.ndarray, t: float, h: float) -> np.ndarray:
    """
    Advance ``s`` by one classical Runge-Kutta step of size ``h``.
    ``f(s, t)`` returns ds/dt.
    """
    hh = 0.5 * h
    k1 = h * f(s, t)
    k2 = h * f(s + 0.5 * k1, t + hh)
    k3 = h * f(s + 0.5 * k2, t + hh)
    k4 = h * f(s + k3, t + h)
    return s + k1 / 6.0 + k2 / 3.0 + k3 / 3.0 + k4 / 6.0


def step_size(tmin, tmax, nstep):
    if nstep < 2:
        raise ValueError(f"nstep must be >= 2, got {nstep}")
    return (tmax - tmin) / (nstep - 1.0)


def time_grid(tmin, tmax, nstep, dtype=np.float64):
    h = step_size(tmin, tmax, nstep)
    return (tmin + h * np.arange(nstep, dtype=np.float64)).astype(dtype)


def iter_trajectory(f: Callable, x0, tmin: float, tmax: float, nstep: int) -> Iterator[Tuple[float, np.ndarray]]:
    """
    Yield ``nstep`` samples ``(t, state)``, starting with the initial
    condition. Only the current state is retained; sample times are
    computed as ``tmin + k*h`` on the fly.
    """
    x = np.array(x0, copy=True)
    dt = step_size(tmin, tmax, nstep)
    tk = x.dtype.type(tmin)
    h = x.dtype.type(dt)
    yield tk, x
    for k in range(1, nstep):
        x = rk4_step(f, x, tk, h)
        tk = x.dtype.type(tmin + k * dt)
        yield tk, x


def simulate(f: Callable, x0, tmin: float, tmax: float, nstep: int) -> Tuple[np.ndarray, np.ndarray]:
    x0 = np.asarray(x0)
    t = time_grid(tmin, tmax, nstep, dtype=x0.dtype)
    x = np.zeros((nstep, x0.shape[0]), dtype=x0.dtype)
    for k, (_, xk) in enumerate(iter_trajectory(f, x0, tmin, tmax, nstep)):
        x[k] = xk
    return t, x
