"""Domain layer: exceptions for business rule violations.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.exceptions import (
    AccountAlreadyExistsException,
    AuthenticationException,
    AuthorizationException,
    RedeSocialException,
    ResourceNotFoundException,
    SqlNotConfiguredException,
)

__all__ = [
    "AccountAlreadyExistsException",
    "AuthenticationException",
    "AuthorizationException",
    "RedeSocialException",
    "ResourceNotFoundException",
    "SqlNotConfiguredException",
]
