"""Signed bearer tokens.

Tokens are produced with Django's signing framework, so they are tamper-proof
under ``SECRET_KEY`` and carry their own timestamp for expiry checks. The
payload holds the identity claims a request needs: user id, name and role.
"""

from __future__ import annotations

from dataclasses import dataclass

from django.conf import settings
from django.core import signing

from jobboard_api.errors import AuthenticationFailure

from .models import User


@dataclass(frozen=True)
class Identity:
    user_id: int
    name: str
    role: str

    def get_user(self) -> User:
        """Load the backing user; a token for a removed or disabled account is invalid."""
        user = User.objects.filter(pk=self.user_id, is_active=True).first()
        if user is None:
            raise AuthenticationFailure()
        return user


def issue_token(user: User) -> str:
    payload = {"userId": user.pk, "name": user.name, "role": user.role}
    return signing.dumps(payload, salt=settings.AUTH_TOKEN_SALT, compress=True)


def decode_token(token: str) -> Identity:
    try:
        payload = signing.loads(
            token,
            salt=settings.AUTH_TOKEN_SALT,
            max_age=settings.AUTH_TOKEN_MAX_AGE,
        )
    except signing.BadSignature:
        # SignatureExpired is a BadSignature too
        raise AuthenticationFailure()

    if not isinstance(payload, dict):
        raise AuthenticationFailure()
    user_id = payload.get("userId")
    role = payload.get("role")
    if not isinstance(user_id, int) or role not in User.Role.values:
        raise AuthenticationFailure()
    return Identity(user_id=user_id, name=str(payload.get("name") or ""), role=role)


def token_from_header(header: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer <token>`` header.

    Returns ``None`` when no header was sent; raises for a header that is not
    a bearer credential.
    """
    if not header:
        return None
    scheme, _, token = header.strip().partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise AuthenticationFailure()
    return token.strip()
