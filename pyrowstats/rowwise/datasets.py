"""
Synthetic datasets for examples and tests.

Normal samples (optionally with missing values) and a negative-binomial
gene expression matrix with genes as rows. All generators are seeded
(default 1337) so repeated calls return identical data.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from pyrowstats.core.exceptions import ValidationError

DEFAULT_SEED = 1337


def _check_count(value: int, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value < 0:
        raise ValidationError(f"{name}: expected a non-negative integer, got {value!r}")


def _check_fraction(value: float, name: str) -> None:
    if not 0.0 <= value <= 1.0:
        raise ValidationError(f"{name}: must be in [0, 1], got {value}")


def _mask_missing(
    data: NDArray[np.float64],
    missing_frac: float,
    rng: np.random.Generator,
) -> NDArray[np.float64]:
    """Replace each entry with NaN independently with probability missing_frac."""
    missing = rng.random(data.shape) < missing_frac
    data[missing] = np.nan
    return data


def sample_normal(
    n: int,
    mean: float = 0.0,
    sd: float = 1.0,
    *,
    seed: int = DEFAULT_SEED,
) -> NDArray[np.float64]:
    """Draw n samples from Normal(mean, sd)."""
    _check_count(n, "n")
    if sd < 0:
        raise ValidationError(f"sd: must be non-negative, got {sd}")
    rng = np.random.default_rng(seed)
    return rng.normal(loc=mean, scale=sd, size=n)


def sample_normal_w_missing(
    n: int,
    mean: float = 0.0,
    sd: float = 1.0,
    missing_frac: float = 0.1,
    *,
    seed: int = DEFAULT_SEED,
) -> NDArray[np.float64]:
    """Normal samples with each value missing (NaN) with probability missing_frac."""
    _check_count(n, "n")
    if sd < 0:
        raise ValidationError(f"sd: must be non-negative, got {sd}")
    _check_fraction(missing_frac, "missing_frac")
    rng = np.random.default_rng(seed)
    samples = rng.normal(loc=mean, scale=sd, size=n)
    return _mask_missing(samples, missing_frac, rng)


def simulate_gene_expression(
    num_samples: int,
    num_genes: int,
    *,
    seed: int = DEFAULT_SEED,
) -> NDArray[np.float64]:
    """
    Simulate read counts, shape (num_genes, num_samples).

    Each gene (row) gets its own negative-binomial distribution: the size
    parameter is drawn from LogNormal(meanlog=3, sdlog=1) and the success
    probability from Uniform(0, 1]. Counts are returned as float64 so that
    missing values can be written into the matrix.
    """
    _check_count(num_samples, "num_samples")
    _check_count(num_genes, "num_genes")
    rng = np.random.default_rng(seed)

    size = rng.lognormal(mean=3.0, sigma=1.0, size=num_genes)
    # 1 - U[0, 1) lies in (0, 1], the support numpy accepts for p
    prob = 1.0 - rng.random(num_genes)

    counts = rng.negative_binomial(
        size[:, np.newaxis], prob[:, np.newaxis], size=(num_genes, num_samples),
    )
    return counts.astype(np.float64)


def simulate_gene_expression_w_missing(
    num_samples: int,
    num_genes: int,
    missing_frac: float = 0.1,
    *,
    seed: int = DEFAULT_SEED,
) -> NDArray[np.float64]:
    """simulate_gene_expression() with each count missing with probability missing_frac."""
    _check_fraction(missing_frac, "missing_frac")
    gene_exp = simulate_gene_expression(num_samples, num_genes, seed=seed)
    # Separate stream so the counts match simulate_gene_expression() exactly
    rng = np.random.default_rng([seed, 1])
    return _mask_missing(gene_exp, missing_frac, rng)
