import argparse
import math
import sys
from pathlib import Path

import numpy as np
from tqdm import tqdm

from doublependulum.modeling.double_pendulum import (
    DoublePendulum, PhysicalParameters, initial_state
)
from doublependulum.integration.rk4 import iter_trajectory
from doublependulum.util.formatting import write_trajectory

DTYPES = {"float64": np.float64, "float32": np.float32}


def parse_args(argv=None):
    p = argparse.ArgumentParser(
        prog="doublependulum",
        description="Integrate a double pendulum with fixed-step RK4 and print t θ1 ω1 θ2 ω2 per sample",
    )
    p.add_argument("TMIN", type=float, help="Start time (s)")
    p.add_argument("TMAX", type=float, help="End time (s)")
    p.add_argument("TH10", type=float, help="Initial angle of rod 1 (deg)")
    p.add_argument("W10", type=float, help="Initial angular velocity of rod 1 (deg/s)")
    p.add_argument("TH20", type=float, help="Initial angle of rod 2 (deg)")
    p.add_argument("W20", type=float, help="Initial angular velocity of rod 2 (deg/s)")
    p.add_argument("NSTEP", type=int, help="Number of time samples, including the initial one")
    defaults = PhysicalParameters()
    p.add_argument("--g", type=float, default=defaults.g, help="Gravity (m/s^2)")
    p.add_argument("--L1", type=float, default=defaults.L1, help="Length of rod 1 (m)")
    p.add_argument("--L2", type=float, default=defaults.L2, help="Length of rod 2 (m)")
    p.add_argument("--m1", type=float, default=defaults.m1, help="Mass of bob 1 (kg)")
    p.add_argument("--m2", type=float, default=defaults.m2, help="Mass of bob 2 (kg)")
    p.add_argument("--dtype", choices=sorted(DTYPES), default="float64",
                   help="Arithmetic precision; float32 matches the single-precision reference output")
    p.add_argument("-o", "--output", type=Path, default=None, help="Write records here instead of stdout")
    p.add_argument("--progress", action="store_true", help="Show a progress bar on stderr")
    return p.parse_args(argv)


def validate(args):
    if args.NSTEP < 2:
        print(f"ERROR: NSTEP must be >= 2, got {args.NSTEP}", file=sys.stderr)
        sys.exit(1)
    if not (math.isfinite(args.TMIN) and math.isfinite(args.TMAX)):
        print(f"ERROR: TMIN and TMAX must be finite, got TMIN={args.TMIN}, TMAX={args.TMAX}", file=sys.stderr)
        sys.exit(1)
    if args.L1 <= 0 or args.L2 <= 0:
        print(f"ERROR: --L1 and --L2 must be > 0, got L1={args.L1}, L2={args.L2}", file=sys.stderr)
        sys.exit(1)


def main(argv=None):
    args = parse_args(argv)
    validate(args)
    params = PhysicalParameters(g=args.g, L1=args.L1, L2=args.L2, m1=args.m1, m2=args.m2)
    model = DoublePendulum(params)
    x0 = initial_state(args.TH10, args.W10, args.TH20, args.W20, dtype=DTYPES[args.dtype])

    samples = iter_trajectory(model.derive, x0, args.TMIN, args.TMAX, args.NSTEP)
    if args.progress:
        samples = tqdm(samples, total=args.NSTEP, file=sys.stderr)

    if args.output is None:
        write_trajectory(samples, sys.stdout)
    else:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        with open(args.output, "w") as fh:
            write_trajectory(samples, fh)
    return 0


if __name__ == "__main__":
    sys.exit(main())
