"""Covariance matrices, multivariate normal densities and error ellipses."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .errors import IndexRangeError, UserInputError
from .matrix import Matrix


@dataclass(frozen=True)
class Ellipse:
    """Error ellipse: radii are one standard deviation, ``pa`` is in radians."""

    radius_maj: float
    radius_min: float
    pa: float


def _div(numerator: float, denominator: float) -> float:
    """Divide with IEEE semantics instead of raising on a zero denominator."""
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _sqrt(value: float) -> float:
    """Square root that yields NaN for negative input instead of raising."""
    if math.isnan(value) or value < 0.0:
        return math.nan
    return math.sqrt(value)


def covariance(samples: Iterable[Sequence[float]]) -> Matrix:
    """Return the covariance matrix of a list of samples.

    Each sample is a sequence of ``size`` values, one per variable. The
    result is the ``size`` x ``size`` population covariance (normalised
    by the number of samples).
    """
    data = [[float(value) for value in sample] for sample in samples]
    if not data:
        raise UserInputError("At least one sample is required.")
    size = len(data[0])
    if any(len(sample) != size for sample in data):
        raise UserInputError("All samples must have the same number of values.")

    result = Matrix(size, size)
    norm = 1.0 / len(data)
    means = [sum(column) * norm for column in zip(*data)]
    deviations = [[value - mean for value, mean in zip(sample, means)] for sample in data]

    for i in range(size):
        for j in range(size):
            total = sum(dev[i] * dev[j] for dev in deviations)
            result[i, j] = total * norm
    return result


def prob_dens(covar_inv: Matrix, vector: Matrix, scale_factor: float) -> float:
    """Return the multivariate normal density at ``vector`` (relative to the mean).

    ``covar_inv`` is the inverse covariance matrix and ``scale_factor``
    should be 1 / sqrt(|2 pi C|) for a correctly normalised density.
    """
    if covar_inv.rows != covar_inv.cols:
        raise UserInputError("Covariance matrix must be square.")
    if covar_inv.rows != vector.rows or vector.cols != 1:
        raise UserInputError("Vector size does not match covariance matrix size.")
    return scale_factor * math.exp(-0.5 * covar_inv.vmv(vector))


def error_ellipse(covar: Matrix, par1: int, par2: int) -> Ellipse:
    """Return the one-sigma error ellipse of parameters ``par1`` and ``par2``."""
    if covar.rows != covar.cols:
        raise UserInputError("Error ellipse can only be derived for square matrix.")
    if covar.rows < 2:
        raise UserInputError("Covariance matrix must have size 2 or greater.")
    if not (0 <= par1 < covar.rows and 0 <= par2 < covar.rows):
        raise IndexRangeError("Covariance matrix row index out of range.")
    if par1 == par2:
        raise UserInputError("Please specify two different rows.")

    v1 = covar[par1, par1]
    v2 = covar[par2, par2]
    c = covar[par2, par1]

    scale_factor = 1.0
    tmp = _sqrt((v1 - v2) * (v1 - v2) + 4.0 * c * c)

    eigenvalues = (0.5 * (v1 + v2 - tmp), 0.5 * (v1 + v2 + tmp))

    slopes = [_div(value - v1, c) for value in eigenvalues]
    eigenvectors = []
    for slope in slopes:
        norm = _div(1.0, _sqrt(slope * slope + 1.0))
        eigenvectors.append((1.0 * norm, slope * norm))

    idx1 = 0 if eigenvalues[0] > eigenvalues[1] else 1
    idx2 = 1 - idx1

    root1 = _sqrt(eigenvalues[idx1] * scale_factor)
    root2 = _sqrt(eigenvalues[idx2] * scale_factor)
    x1, y1 = (component * root1 for component in eigenvectors[idx1])
    x2, y2 = (component * root2 for component in eigenvectors[idx2])

    return Ellipse(
        radius_maj=_sqrt(x1 * x1 + y1 * y1),
        radius_min=_sqrt(x2 * x2 + y2 * y2),
        pa=math.atan2(y1, x1),
    )