"""
Token issuance and resolution (stateless JWTs, no revocation)
"""
from datetime import timedelta
from typing import Any

from sqlalchemy.orm import Session

from backend.app.core.config import Settings
from backend.app.core.exceptions import UnauthorizedError
from backend.app.core.security import create_access_token, decode_access_token
from backend.app.models.account import Account


class TokenIssuer:
    def __init__(self, settings: Settings):
        self.secret_key = settings.secret_key
        self.algorithm = settings.algorithm
        self.expire_minutes = settings.access_token_expire_minutes

    def issue(self, claims: dict[str, Any], expires_minutes: int | None = None) -> str:
        """Sign claims; defaults to the configured expiry. Pass 0 for a token without exp."""
        minutes = self.expire_minutes if expires_minutes is None else expires_minutes
        expires_delta = timedelta(minutes=minutes) if minutes > 0 else None
        return create_access_token(claims, self.secret_key, self.algorithm, expires_delta)

    def signup_token(self, account: Account) -> str:
        return self.issue({"email": account.email})

    def signin_token(self, account: Account) -> str:
        return self.issue({"id": account.id})

    def decode(self, token: str) -> dict[str, Any]:
        return decode_access_token(token, self.secret_key, self.algorithm)

    def resolve_account(self, db: Session, token: str) -> Account:
        """Account named by a signin ({id}) or signup ({email}) token."""
        payload = self.decode(token)
        account = None
        if payload.get("id") is not None:
            try:
                account_id = int(payload["id"])
            except (TypeError, ValueError):
                raise UnauthorizedError("Invalid token")
            account = db.query(Account).filter(Account.id == account_id).first()
        elif payload.get("email"):
            account = db.query(Account).filter(Account.email == payload["email"]).first()
        else:
            raise UnauthorizedError("Invalid token")
        if not account:
            raise UnauthorizedError("User not found")
        return account
