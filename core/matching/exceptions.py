"""
Matching engine errors.

Data-quality problems never raise; scores degrade to zero or neutral values.
"""


class MatchingError(Exception):
    """Base exception for the matching engine."""
    pass


class EmptyCandidatePoolError(MatchingError):
    """No candidate members were supplied."""
    pass


class NoEligibleMemberError(EmptyCandidatePoolError):
    """Auto-assignment found nobody to assign."""
    pass


class MemberNotFoundError(MatchingError):
    """An explicitly chosen member is not in the supplied snapshot."""
    pass


class InvalidStrategyError(MatchingError, ValueError):
    """Unknown matching strategy name."""
    pass
