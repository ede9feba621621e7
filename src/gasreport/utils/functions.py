from dataclasses import dataclass
from typing import Callable

from gasreport.types import DecodedCall


def is_test_function(name: str) -> bool:
    return name.startswith("test")


def is_setup_function(name: str) -> bool:
    return name.lower() == "setup"


@dataclass(frozen=True)
class FunctionClassifier:
    """
    Decides which decoded calls belong to the test harness rather than
    to the contracts under test. Calls to test or setup functions are
    left out of gas reports.
    """

    is_test: Callable[[str], bool] = is_test_function
    is_setup: Callable[[str], bool] = is_setup_function

    def is_relevant(self, call: DecodedCall) -> bool:
        return not self.is_test(call.function) and not self.is_setup(call.function)


DEFAULT_CLASSIFIER = FunctionClassifier()
