"""Error taxonomy surfaced to API clients."""


class LaundryTrackerError(Exception):
    """Base error carrying the HTTP status it maps to."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(LaundryTrackerError):
    """Missing or malformed request fields."""

    status_code = 400


class InvalidImageError(ValidationError):
    """Image payload is not a base64 data URL."""


class InvalidTransitionError(ValidationError):
    """Requested status does not follow the machine lifecycle."""


class NotFoundError(LaundryTrackerError):
    """Referenced entity does not exist."""

    status_code = 404


class MachineNotFoundError(NotFoundError):
    """No machine with the requested id."""


class SessionNotBoundError(NotFoundError):
    """No machine is bound to the session."""


class ResourceExhaustedError(LaundryTrackerError):
    """No capacity left to serve the request."""

    status_code = 503


class MachinesFullError(ResourceExhaustedError):
    """Every machine is occupied."""


class UpstreamFailureError(LaundryTrackerError):
    """The external image model failed or returned nothing usable."""

    status_code = 500
