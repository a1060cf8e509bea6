import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from app.models.user import get_db
from app.schemas.user import AdminLoginSchema
from app.utils.security import (
    admin_password_hash,
    blacklist_token,
    clear_admin_cookie,
    create_admin_token,
    current_admin_claims,
    set_admin_cookie,
    verify_admin_password,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/login")
def admin_login(credentials: AdminLoginSchema, response: Response):
    if not admin_password_hash():
        logger.error("Admin login attempted but no admin password is configured")
        raise HTTPException(status_code=500, detail="Admin password not configured")
    if not verify_admin_password(credentials.password):
        logger.warning("Failed admin login attempt")
        raise HTTPException(status_code=401, detail="Invalid password")
    token = create_admin_token()
    set_admin_cookie(response, token)
    logger.info("Admin logged in")
    return {"success": True}


@router.post("/logout")
def admin_logout(
    response: Response,
    claims: Optional[dict] = Depends(current_admin_claims),
    db: Session = Depends(get_db),
):
    # Logging out without a live session still clears the cookie
    if claims:
        blacklist_token(db, claims["jti"])
        logger.info("Admin logged out")
    clear_admin_cookie(response)
    return {"success": True}


@router.get("/session")
def admin_session(claims: Optional[dict] = Depends(current_admin_claims)):
    return {"isAdmin": bool(claims)}
