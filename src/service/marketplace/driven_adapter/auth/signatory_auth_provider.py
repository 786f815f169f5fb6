from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_auth_provider import IAuthProvider
from src.service.marketplace.domain.marketplace_error import UnauthorizedError


class SignatoryAuthProvider(IAuthProvider):
    """
    Satisfies `require(identity)` for the identities that signed the call.

    The HTTP layer builds one per request from the verified bearer token;
    tests build one with every party they act as.
    """

    def __init__(self, *signatories: str) -> None:
        self.signatories = frozenset(signatories)
        self.required: list[str] = []

    @Logger.io
    def require(self, identity: str) -> None:
        self.required.append(identity)
        if identity not in self.signatories:
            raise UnauthorizedError(identity)
