"""
Domain Errors

Expected, recoverable outcomes of domain operations. Each error carries the
HTTP status and machine-readable code the API boundary responds with, so
callers never have to inspect messages to tell rejections apart.
"""

from __future__ import annotations


class DomainError(Exception):
    """Base class for every rejection raised by the domain services."""

    status_code = 400
    code = "domain_error"
    default_message = "The operation was rejected."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(DomainError):
    """Malformed input: date ordering, out-of-range rating and the like."""

    status_code = 400
    code = "validation_error"
    default_message = "Invalid input."


class InvalidRangeError(ValidationError):
    """Departure is not strictly after arrival."""

    code = "invalid_range"
    default_message = "Departure must be after arrival."


class NotFoundError(DomainError):
    status_code = 404
    code = "not_found"
    default_message = "Resource not found."


class InactiveListingError(DomainError):
    status_code = 409
    code = "listing_inactive"
    default_message = "This listing is not open for bookings."


class AvailabilityConflictError(DomainError):
    """The requested stay overlaps an active booking on the same listing."""

    status_code = 409
    code = "availability_conflict"
    default_message = "The selected dates are not available."


class ForbiddenError(DomainError):
    status_code = 403
    code = "forbidden"
    default_message = "You are not allowed to perform this action."


class FailedTransitionError(DomainError):
    status_code = 409
    code = "invalid_transition"
    default_message = "This status change is not allowed."


class PrerequisiteNotMetError(DomainError):
    """A review was attempted without a completed stay."""

    status_code = 403
    code = "prerequisite_not_met"
    default_message = "A completed booking on this listing is required."


class DuplicateError(DomainError):
    status_code = 409
    code = "duplicate"
    default_message = "This resource already exists."
