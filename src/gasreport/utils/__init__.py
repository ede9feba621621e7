from gasreport.utils.calc import mean, median_sorted
from gasreport.utils.functions import (
    DEFAULT_CLASSIFIER,
    FunctionClassifier,
    is_setup_function,
    is_test_function,
)

__all__ = [
    "DEFAULT_CLASSIFIER",
    "FunctionClassifier",
    "is_setup_function",
    "is_test_function",
    "mean",
    "median_sorted",
]
