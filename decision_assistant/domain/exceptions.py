"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class AdviceServiceError(DomainException):
    """AI advice service returned an error, is unavailable, or replied with unusable content"""

    pass


class UnknownDecisionKindError(DomainException):
    """Stored or submitted decision carries a kind this service does not know"""

    pass
