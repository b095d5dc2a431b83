"""Error taxonomy for the maturity scoring core."""


class MaturityScoringError(Exception):
    """Base class for all scoring errors."""


class TierConfigurationError(MaturityScoringError):
    """Raised when the maturity tier table is empty or does not cover 0-5.

    This is a configuration defect, not a per-request condition. It should
    surface at startup when the tier table is loaded.
    """


class InvalidAnswerError(MaturityScoringError, ValueError):
    """Raised when an answer cannot be constructed from the supplied values."""


class ScoringPreconditionError(MaturityScoringError, ValueError):
    """Raised when a caller passes inputs the scorer cannot score, e.g. negative counts."""


class UnknownRoleError(MaturityScoringError, ValueError):
    """Raised when a role identifier is not in the role catalog."""
