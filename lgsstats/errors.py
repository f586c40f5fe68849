"""Error taxonomy for the scoring engine.

All errors are local and recoverable; callers decide how to surface them.
"""


class LGSStatsError(Exception):
    """Base class for engine errors."""


class InvalidInput(LGSStatsError, ValueError):
    """Negative counts, non-positive divisors, malformed timestamps."""


class MissingReferenceData(LGSStatsError, KeyError):
    """A subject has no weight/max-question entry."""

    def __init__(self, subject: str) -> None:
        super().__init__(subject)
        self.subject = subject

    def __str__(self) -> str:
        return f"No reference data for subject: {self.subject}"
