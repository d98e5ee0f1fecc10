import numpy as np
from dataclasses import dataclass, field

# state layout: [theta1, omega1, theta2, omega2]
TH1, W1, TH2, W2 = 0, 1, 2, 3


@dataclass(frozen=True)
class PhysicalParameters:
    g: float = 9.82   # m/s^2
    L1: float = 1.0   # m
    L2: float = 1.0   # m
    m1: float = 1.0   # kg
    m2: float = 1.0   # kg


@dataclass
class DoublePendulum:
    """
    Lagrangian equations of motion of the planar double pendulum
    (massless rods, point masses). Angles are measured from the downward
    vertical.
    """
    params: PhysicalParameters = field(default_factory=PhysicalParameters)

    def derive(self, state, t=0.0):
        """
        Time derivative of ``state`` = [θ1, ω1, θ2, ω2].

        ``t`` is accepted for solver symmetry only; the system is autonomous.
        A vanishing denominator yields inf/nan in the result, it is not
        reported as an error.
        """
        p = self.params
        state = np.asarray(state)
        if not np.issubdtype(state.dtype, np.floating):
            state = state.astype(np.float64)
        th1, w1, th2, w2 = state[TH1], state[W1], state[TH2], state[W2]
        M = p.m1 + p.m2

        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            delta = th2 - th1
            c, s = np.cos(delta), np.sin(delta)
            den1 = M * p.L1 - p.m2 * p.L1 * c * c
            dw1 = (p.m2 * p.L1 * w1 * w1 * s * c
                   + p.m2 * p.g * np.sin(th2) * c
                   + p.m2 * p.L2 * w2 * w2 * s
                   - M * p.g * np.sin(th1)) / den1

            den2 = np.divide(p.L2, p.L1) * den1
            dw2 = (-p.m2 * p.L2 * w2 * w2 * s * c
                   + M * p.g * np.sin(th1) * c
                   - M * p.L1 * w1 * w1 * s
                   - M * p.g * np.sin(th2)) / den2

        return np.array([w1, dw1, w2, dw2], dtype=state.dtype)


def initial_state(th10: float, w10: float, th20: float, w20: float, dtype=np.float64) -> np.ndarray:
    """Build the radian state from angles in degrees and rates in degrees/s."""
    return np.deg2rad(np.array([th10, w10, th20, w20], dtype=np.float64)).astype(dtype)
