"""
Identity proofs for the HTTP surface.

A caller proves it acts as identity P by presenting a bearer JWT whose `sub` is P.
"""

from datetime import datetime, timedelta, timezone

import jwt

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import AuthenticationError


class JwtIdentityProver:
    def __init__(self) -> None:
        self.secret = settings.SECRET_KEY.get_secret_value()
        self.algorithm = settings.ALGORITHM
        self.token_expire_minutes = settings.ACCESS_TOKEN_EXPIRE_MINUTES

    def issue_identity_token(self, identity: str) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            'sub': identity,
            'iat': now,
            'exp': now + timedelta(minutes=self.token_expire_minutes),
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify_identity_token(self, identity_token: str | None) -> str:
        if not identity_token:
            raise AuthenticationError('Not authenticated')

        try:
            payload = jwt.decode(identity_token, self.secret, algorithms=[self.algorithm])
        except jwt.PyJWTError:
            raise AuthenticationError('Invalid token')

        identity = payload.get('sub')
        if not identity or not isinstance(identity, str):
            raise AuthenticationError('Invalid token')
        return identity
