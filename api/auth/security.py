"""
Auth security helpers.
"""

from __future__ import annotations

import os
import time
from typing import Any

import bcrypt
import jwt

MIN_BCRYPT_ROUNDS = 10
RESET_TOKEN_TYPE = "reset"


class AuthSecurityError(RuntimeError):
    pass


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def jwt_secret() -> str:
    # Local default keeps development simple.
    # In production, set JWT_SECRET in environment.
    return os.environ.get("JWT_SECRET", "dev-change-this-secret").strip() or "dev-change-this-secret"


def jwt_algorithm() -> str:
    return os.environ.get("JWT_ALG", "HS256").strip() or "HS256"


def reset_token_expire_minutes() -> int:
    return max(1, _env_int("RESET_TOKEN_EXPIRE_MIN", 60))


def bcrypt_rounds() -> int:
    return max(MIN_BCRYPT_ROUNDS, _env_int("BCRYPT_ROUNDS", MIN_BCRYPT_ROUNDS))


def now_epoch_s() -> int:
    return int(time.time())


def hash_password(plain_password: str) -> str:
    password = (plain_password or "").encode("utf-8")
    if not password:
        raise AuthSecurityError("Password is empty.")
    if len(password) > 72:
        raise AuthSecurityError("Password is longer than 72 bytes.")
    return bcrypt.hashpw(password, bcrypt.gensalt(rounds=bcrypt_rounds())).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    password = (plain_password or "").encode("utf-8")
    hashed = (password_hash or "").encode("utf-8")
    if not password or not hashed:
        return False
    try:
        return bcrypt.checkpw(password, hashed)
    except ValueError:
        return False


def build_reset_token(*, user_id: int, expires_in_s: int | None = None) -> str:
    issued_at = now_epoch_s()
    if expires_in_s is None:
        expires_in_s = reset_token_expire_minutes() * 60

    payload = {
        "sub": str(user_id),
        "type": RESET_TOKEN_TYPE,
        "iat": issued_at,
        "exp": issued_at + expires_in_s,
    }
    return jwt.encode(payload, jwt_secret(), algorithm=jwt_algorithm())


def decode_reset_token(token: str) -> dict[str, Any]:
    raw = (token or "").strip()
    if not raw:
        raise AuthSecurityError("Reset token is empty.")

    try:
        payload = jwt.decode(raw, jwt_secret(), algorithms=[jwt_algorithm()])
    except jwt.InvalidTokenError as exc:
        raise AuthSecurityError("Invalid reset token.") from exc

    token_type = str(payload.get("type") or "").strip().lower()
    if token_type != RESET_TOKEN_TYPE:
        raise AuthSecurityError("Token is not a reset token.")

    return payload


def reset_token_user_id(token: str) -> int:
    payload = decode_reset_token(token)
    subject = str(payload.get("sub") or "").strip()
    if not subject.isdigit():
        raise AuthSecurityError("Invalid reset token subject.")
    return int(subject)
