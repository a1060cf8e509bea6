from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import List, Optional
import logging
import secrets
import uuid

from fastapi import HTTPException, Depends, Request, Response
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import jwt, JWTError
from sqlalchemy.orm import Session
from werkzeug.security import generate_password_hash, check_password_hash

from app.config import get_settings
from app.models.user import TokenBlacklist, get_db

logger = logging.getLogger(__name__)

ADMIN_SUBJECT = "admin"

http_bearer = HTTPBearer(auto_error=False)


@lru_cache
def _fallback_secret_key() -> str:
    logger.warning("SECRET_KEY is not set; admin sessions will not survive a restart")
    return secrets.token_urlsafe(48)


def _secret_key() -> str:
    return get_settings().SECRET_KEY or _fallback_secret_key()


@lru_cache(maxsize=4)
def _hash_secret(secret: str) -> str:
    return generate_password_hash(secret)


def admin_password_hash() -> Optional[str]:
    """Salted hash of the operator secret, or None when no secret is configured."""
    settings = get_settings()
    if settings.ADMIN_PASSWORD_HASH:
        return settings.ADMIN_PASSWORD_HASH
    if settings.ADMIN_PASSWORD:
        return _hash_secret(settings.ADMIN_PASSWORD)
    return None


def verify_admin_password(password: str) -> bool:
    hashed = admin_password_hash()
    if not hashed or not password:
        return False
    return check_password_hash(hashed, password)


# ===== Admin session tokens =====
def create_admin_token(expires_delta: Optional[timedelta] = None) -> str:
    settings = get_settings()
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.ADMIN_SESSION_EXPIRE_MINUTES))
    payload = {"sub": ADMIN_SUBJECT, "exp": expire, "iat": now, "nbf": now, "jti": uuid.uuid4().hex}
    return jwt.encode(payload, _secret_key(), algorithm=settings.ALGORITHM)


def decode_admin_token(token: str) -> Optional[dict]:
    """Return the claims of a valid admin token, or None if it is bad, expired or foreign."""
    if not token:
        return None
    try:
        payload = jwt.decode(token, _secret_key(), algorithms=[get_settings().ALGORITHM])
    except JWTError:
        return None
    if payload.get("sub") != ADMIN_SUBJECT or not payload.get("jti"):
        return None
    return payload


def is_token_blacklisted(db: Session, jti: str) -> bool:
    return db.query(TokenBlacklist).filter(TokenBlacklist.jti == jti).first() is not None


def blacklist_token(db: Session, jti: str) -> None:
    if not is_token_blacklisted(db, jti):
        db.add(TokenBlacklist(jti=jti))
        db.commit()


def read_admin_tokens(request: Request, bearer: Optional[HTTPAuthorizationCredentials]) -> List[str]:
    """Candidate tokens in priority order: session cookie first, then the Bearer header."""
    tokens = []
    cookie = request.cookies.get(get_settings().ADMIN_COOKIE_NAME)
    if cookie:
        tokens.append(cookie)
    if bearer and bearer.credentials:
        tokens.append(bearer.credentials)
    return tokens


def current_admin_claims(
    request: Request,
    bearer: Optional[HTTPAuthorizationCredentials] = Depends(http_bearer),
    db: Session = Depends(get_db),
) -> Optional[dict]:
    # A stale cookie must not hide a valid Bearer token
    for token in read_admin_tokens(request, bearer):
        payload = decode_admin_token(token)
        if payload and not is_token_blacklisted(db, payload["jti"]):
            return payload
    return None


def require_admin(claims: Optional[dict] = Depends(current_admin_claims)) -> dict:
    if not claims:
        raise HTTPException(status_code=401, detail="Unauthorized")
    return claims


def set_admin_cookie(response: Response, token: str) -> None:
    settings = get_settings()
    response.set_cookie(
        key=settings.ADMIN_COOKIE_NAME,
        value=token,
        max_age=settings.ADMIN_SESSION_EXPIRE_MINUTES * 60,
        httponly=True,
        secure=settings.ADMIN_COOKIE_SECURE,
        samesite="lax",
        path="/",
    )


def clear_admin_cookie(response: Response) -> None:
    response.delete_cookie(key=get_settings().ADMIN_COOKIE_NAME, path="/")
