"""Exceptions raised by the analytics engines"""


class FinanceAnalyzerError(Exception):
    """Base exception for the analytics engines"""

    pass


class ValidationError(FinanceAnalyzerError, ValueError):
    """Argument is malformed or out of range; raised before any computation"""

    pass


class DataError(FinanceAnalyzerError, ValueError):
    """Input data is unparsable or not finite"""

    pass


class ConvergenceError(FinanceAnalyzerError, RuntimeError):
    """Iterative refinement did not settle within the iteration bound"""

    def __init__(self, message: str, iterations: int):
        super().__init__(message)
        self.iterations = iterations


class StallError(FinanceAnalyzerError, RuntimeError):
    """Repayment schedule cannot finish with the given payment"""

    def __init__(self, message: str, month: int, debt_index: int):
        super().__init__(message)
        self.month = month
        self.debt_index = debt_index
