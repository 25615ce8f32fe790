from datetime import UTC, datetime
from functools import partial

from pydantic import BaseModel, Field, model_validator

from mosci.common.config import RatingScale

# Helper for timezone-aware timestamps
_utc_now = partial(datetime.now, tz=UTC)


class MOSConfidenceReport(BaseModel):
    """Mean opinion scores and their confidence intervals for every test condition.

    The matrices ``ci_lower``, ``ci_upper`` and ``ci_width`` have one row per
    test condition and one column per estimator, in the order of
    ``method_names``.

    Attributes:
        alpha: Significance level used for every interval
        method_names: Full estimator names in catalog order
        short_labels: Abbreviated estimator names in catalog order
        mos: Mean opinion score per test condition
        ci_lower: Lower bounds, k x 8
        ci_upper: Upper bounds, k x 8
        ci_width: Interval widths (upper - lower), k x 8
        num_subjects: Number of ratings per test condition
        bootstrap_iterations: Number of bootstrap resamples per test condition
        seed: Seed of the bootstrap generators, if one was fixed
        scale: Rating scale of the input
        created_at: Timestamp of the estimation
    """

    alpha: float
    method_names: list[str]
    short_labels: list[str]
    mos: list[float]
    ci_lower: list[list[float]]
    ci_upper: list[list[float]]
    ci_width: list[list[float]]
    num_subjects: int
    bootstrap_iterations: int
    seed: int | None = None
    scale: RatingScale = Field(default_factory=RatingScale)
    created_at: datetime = Field(default_factory=_utc_now)

    @model_validator(mode="after")
    def validate_shapes(self) -> "MOSConfidenceReport":
        """Validate that every matrix has one row per MOS and one column per method."""
        if len(self.method_names) != len(self.short_labels):
            raise ValueError("method_names and short_labels must have the same length")
        num_methods = len(self.method_names)
        for field_name in ("ci_lower", "ci_upper", "ci_width"):
            matrix = getattr(self, field_name)
            if len(matrix) != len(self.mos):
                raise ValueError(f"{field_name} must have one row per test condition")
            if any(len(row) != num_methods for row in matrix):
                raise ValueError(f"{field_name} must have one column per method")
        return self

    @property
    def num_conditions(self) -> int:
        return len(self.mos)

    def interval(self, condition: int, method: int) -> tuple[float, float]:
        """Return (lower, upper) for a test condition and catalog position."""
        return self.ci_lower[condition][method], self.ci_upper[condition][method]
