"""Exception classes for confidence interval estimation."""


class StatisticalError(Exception):
    """Base exception for confidence interval estimation errors."""

    pass


class InvalidParameterError(StatisticalError):
    """Raised when an estimation parameter (e.g. alpha) is out of range."""

    pass


class InvalidRatingError(StatisticalError):
    """Raised when the ratings matrix holds a value outside the rating scale."""

    pass


class InsufficientSamplesError(StatisticalError):
    """Raised when a test condition has too few ratings for a variance estimate."""

    def __init__(self, message: str, min_required: int | None = None) -> None:
        self.min_required = min_required
        super().__init__(message)


class DistributionDomainError(StatisticalError):
    """Raised when an inverse CDF is evaluated outside its domain."""

    pass


class DegenerateProportionError(DistributionDomainError):
    """Raised when a beta inverse is requested with a non-positive shape parameter."""

    pass
