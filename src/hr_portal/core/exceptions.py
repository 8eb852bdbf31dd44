class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class PersistenceError(DomainError):
    """Raised when the document store cannot be read or written."""


class EmployeeNotFound(NotFoundError):
    def __init__(self, message: str = "Employee not found"):
        super().__init__(message)


class RequestNotFound(NotFoundError):
    def __init__(self, message: str = "Leave request not found"):
        super().__init__(message)


class GroupNotFound(NotFoundError):
    def __init__(self, message: str = "Group not found"):
        super().__init__(message)


class GeofenceViolation(ValidationError):
    """Clock-in attempted outside the configured office radius."""

    def __init__(self, *, radius: float, distance: int):
        self.radius = radius
        self.distance = distance
        super().__init__(
            f"You must be within {radius:g} meters of the office to clock in. "
            f"You are currently {distance} meters away."
        )


class AlreadyClockedIn(ValidationError):
    def __init__(self, message: str = "You have already clocked in today."):
        super().__init__(message)


class AlreadyClockedOut(ValidationError):
    def __init__(self, message: str = "You have already clocked out today."):
        super().__init__(message)


class NotClockedIn(ValidationError):
    def __init__(self, message: str = "You have not clocked in yet."):
        super().__init__(message)


class QuotaExceeded(ValidationError):
    def __init__(self, message: str = "A paid leave has already been requested or approved for this month."):
        super().__init__(message)
