import numpy as np
import numba

def mean_error(samples):
    """
    Return the distance between the sample mean and the mean of U(0, 1).
    """
    return np.abs(np.mean(samples) - 0.5)

def var_error(samples):
    """
    Return the distance between the sample variance and the variance of U(0, 1).
    """
    return np.abs(np.var(samples) - 1 / 12)

def star_discrepancy(samples):
    """
    Compute the star discrepancy of one-dimensional samples in [0, 1).

    Parameters
    ----------
    samples : ndarray
        The samples as an array of shape (num_samples,).

    Returns
    -------
    float
        ``sup_t |#{x_i < t} / n - t|``, computed exactly from the sorted
        samples.
    """
    samples = np.asarray(samples, dtype=np.float64)
    if len(samples.shape) != 1:
        raise ValueError("samples must be 1-dimensional")
    if samples.size == 0:
        raise ValueError("samples must not be empty")
    return numba_star_discrepancy(np.sort(samples))

@numba.njit
def numba_star_discrepancy(sorted_samples):
    n = sorted_samples.shape[0]
    worst = 0.0
    for i in range(n):
        dist = np.abs(sorted_samples[i] - (2 * i + 1) / (2 * n))
        if dist > worst:
            worst = dist
    return 1 / (2 * n) + worst
