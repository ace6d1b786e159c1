"""
Derived math for Deci

Производные алгоритмы, статистика и пакетные операции над Deci.
"""

# Derived arithmetic
from src.deci.math.arithmetic import (
    MAX_EXPONENT,
    SQRT_DEFAULT_PRECISION,
    SQRT_MAX_ITERATIONS,
    mod,
    power,
    power_int,
    remainder,
    round_to_nearest,
    round_to_significant_digits,
    sqrt,
)

# Bulk operations
from src.deci.math.bulk import (
    OUTLIER_IQR_MULTIPLIER,
    add_to_all,
    apply_percentage_change,
    apply_to_all,
    average,
    bottom_n,
    cumulative_sum,
    differences,
    divide_all_by,
    filter_in_range,
    filter_outliers,
    group_consecutive_similar,
    moving_average,
    multiply_all,
    multiply_all_by,
    normalize,
    partition,
    round_all,
    scale_to_sum,
    subtract_from_all,
    sum_deci,
    top_n,
)

# Statistics
from src.deci.math.statistics import (
    count_where,
    harmonic_mean,
    maximum,
    mean,
    median,
    minimum,
    standard_deviation,
    sum_of_squares,
    value_range,
    variance,
    weighted_average,
)

__all__ = [
    # Derived arithmetic: constants
    "MAX_EXPONENT",
    "SQRT_DEFAULT_PRECISION",
    "SQRT_MAX_ITERATIONS",
    # Derived arithmetic: functions
    "mod",
    "power",
    "power_int",
    "remainder",
    "round_to_nearest",
    "round_to_significant_digits",
    "sqrt",
    # Bulk operations
    "OUTLIER_IQR_MULTIPLIER",
    "add_to_all",
    "apply_percentage_change",
    "apply_to_all",
    "average",
    "bottom_n",
    "cumulative_sum",
    "differences",
    "divide_all_by",
    "filter_in_range",
    "filter_outliers",
    "group_consecutive_similar",
    "moving_average",
    "multiply_all",
    "multiply_all_by",
    "normalize",
    "partition",
    "round_all",
    "scale_to_sum",
    "subtract_from_all",
    "sum_deci",
    "top_n",
    # Statistics
    "count_where",
    "harmonic_mean",
    "maximum",
    "mean",
    "median",
    "minimum",
    "standard_deviation",
    "sum_of_squares",
    "value_range",
    "variance",
    "weighted_average",
]
