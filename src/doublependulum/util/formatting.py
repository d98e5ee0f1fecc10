def format_record(t, state):
    """One output line: ``t θ1 ω1 θ2 ω2`` with ``%f`` fields."""
    return " ".join(f"{float(v):f}" for v in (t, *state))


def write_trajectory(samples, stream):
    for t, state in samples:
        stream.write(format_record(t, state) + "\n")
