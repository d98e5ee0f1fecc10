import numpy as np


def long_horizon_rmse(truth, pred):
    return float(np.sqrt(np.mean((truth - pred)**2)))


def shared_sample_difference(coarse, fine):
    """
    Max pointwise difference between a trajectory of ``n`` samples and one
    of ``2*n - 1`` samples over the same interval; every other fine sample
    lines up with a coarse one.
    """
    coarse, fine = np.asarray(coarse), np.asarray(fine)
    if fine.shape[0] != 2 * coarse.shape[0] - 1:
        raise ValueError(
            f"expected {2 * coarse.shape[0] - 1} fine samples, got {fine.shape[0]}"
        )
    return float(np.max(np.abs(fine[::2] - coarse)))


def observed_order(err_coarse, err_fine, ratio=2.0):
    # p such that err ~ h^p when h shrinks by `ratio`
    return float(np.log(err_coarse / err_fine) / np.log(ratio))
