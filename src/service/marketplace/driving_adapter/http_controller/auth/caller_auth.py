from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.platform.config.di import Container
from src.service.marketplace.driven_adapter.auth.signatory_auth_provider import (
    SignatoryAuthProvider,
)
from src.service.marketplace.driving_adapter.http_controller.auth.jwt_identity_prover import (
    JwtIdentityProver,
)


bearer_scheme = HTTPBearer(auto_error=False)


@inject
def get_caller_identity(
    jwt_identity_prover: JwtIdentityProver = Depends(Provide[Container.jwt_identity_prover]),
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> str:
    """Identity proven by the bearer token; 401 when missing or invalid."""
    return jwt_identity_prover.verify_identity_token(
        credentials.credentials if credentials else None
    )


def get_caller_auth_provider(
    caller: str = Depends(get_caller_identity),
) -> SignatoryAuthProvider:
    return SignatoryAuthProvider(caller)
