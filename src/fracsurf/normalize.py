"""
Height field normalization.
"""

import numpy as np


def rescale(field: np.ndarray, target_std: float) -> np.ndarray:
    """
    Shift a field to zero mean and scale it to a target standard deviation.

    Parameters
    ----------
    field : ndarray
        Real-valued field of any shape.
    target_std : float
        Desired standard deviation (RMS height) of the output.

    Returns
    -------
    z : ndarray
        New array ``(field - mean) * target_std / std``.

    Notes
    -----
    Mean and standard deviation are population statistics over all grid
    points. The variance is floored at 1e-20 before the square root, and a
    zero standard deviation is treated as 1, so a constant field maps to
    zeros instead of raising.
    """
    z = np.asarray(field, dtype=float)
    mean = z.mean()
    std = np.sqrt(max(1e-20, float(np.mean(z * z)) - mean * mean))
    scale = target_std / (std or 1.0)
    return (z - mean) * scale
