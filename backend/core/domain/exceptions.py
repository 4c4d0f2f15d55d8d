"""
core.domain.exceptions — Domain-specific exception hierarchy.

These exceptions represent business-rule violations inside service layers.
They are deliberately **not** DRF exceptions so that the domain layer stays
framework-agnostic.  The global DRF exception handler in
``core.domain.exception_handler`` maps them to HTTP responses.

Mapping cheatsheet
------------------
┌──────────────────────────┬──────────────────────────────┬──────┐
│ Domain Exception         │ Meaning                      │ Code │
├──────────────────────────┼──────────────────────────────┼──────┤
│ DomainError              │ invalid input / rule broken  │ 400  │
│ AuthenticationRequired   │ no or bad credentials        │ 401  │
│ PermissionDenied         │ role too low                 │ 403  │
│ NotFound                 │ unknown identifier           │ 404  │
│ Conflict                 │ duplicate unique field       │ 409  │
│ StoreError               │ persistence failure          │ 500  │
└──────────────────────────┴──────────────────────────────┴──────┘

Recommended usage inside a service::

    from core.domain.exceptions import NotFound

    try:
        return Report.objects.get(pk=pk)
    except Report.DoesNotExist:
        raise NotFound(f"Report with id {pk} not found.")
"""

from __future__ import annotations


class DomainError(Exception):
    """
    Base class for all domain / business-rule errors.

    Catch this at the view boundary and convert to a 400 Bad Request.
    """

    def __init__(self, message: str = "A business rule was violated.") -> None:
        self.message = message
        super().__init__(self.message)


class AuthenticationRequired(DomainError):
    """
    The caller is not logged in, or supplied credentials that do not
    verify.

    Maps to HTTP 401.
    """

    def __init__(self, message: str = "Authentication required.") -> None:
        super().__init__(message)


class PermissionDenied(DomainError):
    """
    The authenticated user does not have the required role for this
    operation.

    Maps to HTTP 403.
    """

    def __init__(self, message: str = "You do not have permission to perform this action.") -> None:
        super().__init__(message)


class NotFound(DomainError):
    """
    The requested resource does not exist.

    Maps to HTTP 404.
    """

    def __init__(self, message: str = "The requested resource was not found.") -> None:
        super().__init__(message)


class Conflict(DomainError):
    """
    The operation conflicts with the current state of the store.

    Typical usage: duplicate username, e-mail, plate number or vehicle
    call sign.  Maps to HTTP 409.
    """

    def __init__(self, message: str = "The operation conflicts with the current state.") -> None:
        super().__init__(message)


class StoreError(DomainError):
    """
    The persistence layer failed.

    The message is logged but never shown to the client, who receives a
    generic 500 instead.
    """

    def __init__(self, message: str = "The data store failed to complete the operation.") -> None:
        super().__init__(message)
