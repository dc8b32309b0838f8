"""
Dependency injection utilities
"""
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from backend.app.core.config import Settings, get_settings
from backend.app.core.exceptions import UnauthorizedError
from backend.app.db.session import SessionLocal
from backend.app.models.account import Account
from backend.app.services.token_service import TokenIssuer

security = HTTPBearer(auto_error=False)


def get_db() -> Session:
    """Get database session"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_token_issuer(settings: Settings = Depends(get_settings)) -> TokenIssuer:
    return TokenIssuer(settings)


def get_current_account(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    db: Session = Depends(get_db),
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> Account:
    """Get current authenticated account from the bearer JWT"""
    if not credentials:
        raise UnauthorizedError("Not authenticated")
    return issuer.resolve_account(db, credentials.credentials)
