"""
Account - a company user who can sign up / sign in
"""
from sqlalchemy import Column, DateTime, Integer, String

from backend.app.db.base import Base
from backend.app.utils.clock import utcnow


class Account(Base):
    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    # bcrypt hash, never the plaintext
    password = Column(String(255), nullable=False)
    companyname = Column(String(255), nullable=False)

    created_at = Column(DateTime, default=utcnow)
