"""
Simple sample statistics.
"""

from pyalgebra.stats.functions import (
    total,
    mean,
    median_sorted,
    mode_sorted,
    variance,
    std_dev_population,
    std_dev_sample,
    bias_indicator,
)

__all__ = [
    "total",
    "mean",
    "median_sorted",
    "mode_sorted",
    "variance",
    "std_dev_population",
    "std_dev_sample",
    "bias_indicator",
]
