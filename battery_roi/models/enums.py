from enum import Enum


class IRRStatus(str, Enum):
    CONVERGED = "converged"
    NOT_CONVERGED = "not_converged"
    OUT_OF_RANGE = "out_of_range"
    ZERO_DERIVATIVE = "zero_derivative"
    ARITHMETIC_ERROR = "arithmetic_error"


class PaybackStatus(str, Enum):
    ATTAINABLE = "attainable"
    UNATTAINABLE = "unattainable"
