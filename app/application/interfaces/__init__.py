"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from app.infrastructure or app.api.
"""

from app.application.interfaces.repositories import (
    IAccountRepository,
    IPostRepository,
)
from app.application.interfaces.services import (
    IAuthenticationManager,
    IPasswordHasher,
    ITokenIssuer,
)

__all__ = [
    "IAccountRepository",
    "IAuthenticationManager",
    "IPasswordHasher",
    "IPostRepository",
    "ITokenIssuer",
]
