"""
Authentication service business logic
"""
import re

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from backend.app.core.config import Settings
from backend.app.core.exceptions import (
    ConflictError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from backend.app.core.security import get_password_hash, verify_password
from backend.app.models.account import Account
from backend.app.schemas.user import SigninRequest, SignupRequest

# word runs joined by single "." or "-", ending in a 2-3 char ".tld"; no nested quantifiers
EMAIL_RE = re.compile(r"\w+(?:[.-]\w+)*@\w+(?:[.-]\w+)*\.\w{2,3}", re.ASCII)
EMAIL_MAX_LENGTH = 254
# 6-20 chars, at least one digit, one lowercase and one uppercase letter
PASSWORD_RE = re.compile(r"(?=.*\d)(?=.*[a-z])(?=.*[A-Z]).{6,20}", re.ASCII)

PASSWORD_POLICY_MESSAGE = (
    "Password should be 6 to 20 characters long with a numeric, 1 lowercase, and 1 uppercase"
)


def validate_signup(data: SignupRequest) -> None:
    """Raise ValidationError for the first field that is missing or malformed."""
    if not data.companyname:
        raise ValidationError("Company name is required")
    if not data.name:
        raise ValidationError("Name is required")
    if not data.email:
        raise ValidationError("Enter the email")
    if len(data.email) > EMAIL_MAX_LENGTH or not EMAIL_RE.fullmatch(data.email):
        raise ValidationError("Email is invalid")
    if not data.password:
        raise ValidationError("Enter the password")
    if not PASSWORD_RE.fullmatch(data.password):
        raise ValidationError(PASSWORD_POLICY_MESSAGE)


class AuthService:
    """Service for account operations"""

    @staticmethod
    def register_account(db: Session, data: SignupRequest, settings: Settings) -> Account:
        """Validate, hash the password and store a new account"""
        validate_signup(data)

        existing = db.query(Account).filter(Account.email == data.email).first()
        if existing:
            raise ConflictError("Email already registered")

        account = Account(
            name=data.name,
            email=data.email,
            password=get_password_hash(data.password, rounds=settings.bcrypt_rounds),
            companyname=data.companyname,
        )
        db.add(account)
        try:
            db.commit()
        except IntegrityError:
            # lost a race with a concurrent signup for the same email
            db.rollback()
            raise ConflictError("Email already registered")
        db.refresh(account)
        return account

    @staticmethod
    def authenticate(db: Session, data: SigninRequest) -> Account:
        """Return the account whose password matches, else NotFound / Unauthorized"""
        account = None
        if data.email:
            account = db.query(Account).filter(Account.email == data.email).first()
        if not account:
            raise NotFoundError("User not found")

        if not verify_password(data.password or "", account.password):
            raise UnauthorizedError("Invalid credentials")
        return account
