"""
Authentication endpoints - Signup and Signin
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from backend.app.core.config import Settings, get_settings
from backend.app.core.dependencies import get_db, get_token_issuer
from backend.app.core.exceptions import AppError, InternalError
from backend.app.core.logging_config import get_logger
from backend.app.schemas.user import (
    AccountResponse,
    SigninRequest,
    SigninResponse,
    SigninUser,
    SignupRequest,
    SignupResponse,
)
from backend.app.services.auth_service import AuthService
from backend.app.services.token_service import TokenIssuer

logger = get_logger("api.auth")
router = APIRouter()


@router.post("/signup", response_model=SignupResponse, status_code=status.HTTP_200_OK)
def signup(
    data: SignupRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
    issuer: TokenIssuer = Depends(get_token_issuer),
):
    """
    Register a new company account

    - **name**: Contact name
    - **email**: Email address (must be unique)
    - **password**: 6-20 chars with a digit, a lowercase and an uppercase letter
    - **companyname**: Company name
    """
    logger.info("Signup attempt for email=%s", data.email)
    try:
        account = AuthService.register_account(db, data, settings)
        logger.info("Account registered id=%s email=%s", account.id, account.email)
        return SignupResponse(
            message="User registered successfully",
            user=AccountResponse.model_validate(account),
            access_token=issuer.signup_token(account),
        )
    except AppError as e:
        logger.warning("Signup rejected email=%s reason=%s", data.email, e.message)
        raise
    except Exception as e:
        logger.exception("Signup error email=%s error=%s", data.email, str(e))
        raise InternalError("Internal Server Error")


@router.post("/signin", response_model=SigninResponse)
def signin(
    data: SigninRequest,
    db: Session = Depends(get_db),
    issuer: TokenIssuer = Depends(get_token_issuer),
):
    """
    Sign in and get an access token (expires after the configured minutes)

    - **email**: Email address
    - **password**: Password
    """
    logger.info("Signin attempt for email=%s", data.email)
    try:
        account = AuthService.authenticate(db, data)
        logger.info("Account signed in id=%s email=%s", account.id, account.email)
        return SigninResponse(
            message="Login successful",
            token=issuer.signin_token(account),
            user=SigninUser(id=account.id, email=account.email, companyname=account.companyname),
        )
    except AppError as e:
        logger.warning("Signin rejected email=%s reason=%s", data.email, e.message)
        raise
    except Exception as e:
        logger.exception("Signin error email=%s error=%s", data.email, str(e))
        raise InternalError("Internal server error")
