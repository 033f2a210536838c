"""
Domain exceptions raised by the store.

Endpoints translate these into HTTP responses: ``NotFoundError`` maps
to 404, the conflict and state-transition errors map to 400 and any
other ``StoreError`` falls through to the application-level handler,
which answers 500.
"""


class StoreError(Exception):
    """Base class for failures reported by the in-memory store."""


class NotFoundError(StoreError):
    """The requested entity, token or grant does not exist."""


class AlreadyExistsError(StoreError):
    """An entity with the same key is already stored."""


class TokenAlreadyUsedError(StoreError):
    """A password reset token was consumed before."""


class TokenExpiredError(StoreError):
    """A password reset token is past its ``expires_at``."""


class InvitationAlreadyProcessedError(StoreError):
    """The invitation left the ``pending`` state already."""


class InvitationExpiredError(StoreError):
    """The invitation was accepted after its ``expires_at``."""
