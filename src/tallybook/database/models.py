"""SQLAlchemy models for the tallybook store."""

from datetime import datetime
from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    create_engine,
)
from sqlalchemy.orm import Session, declarative_base, relationship, sessionmaker

Base = declarative_base()


class User(Base):
    """Auth identity."""

    __tablename__ = "users"

    id = Column(String, primary_key=True)
    email = Column(String, unique=True, nullable=False)
    password_hash = Column(String, nullable=False)
    confirmed = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=datetime.now, nullable=False)

    # Relationships
    profile = relationship("Profile", back_populates="user", uselist=False, cascade="all, delete-orphan")
    sessions = relationship("AuthSession", back_populates="user", cascade="all, delete-orphan")


class AuthSession(Base):
    """Issued session token."""

    __tablename__ = "sessions"

    token = Column(String, primary_key=True)
    user_id = Column(String, ForeignKey("users.id"), nullable=False)
    created_at = Column(DateTime, default=datetime.now, nullable=False)

    user = relationship("User", back_populates="sessions")


class Profile(Base):
    """One profile row per user.

    Legacy rows may carry all bank details packed into ``bank_name``.
    """

    __tablename__ = "profiles"

    id = Column(String, ForeignKey("users.id"), primary_key=True)
    updated_at = Column(DateTime, nullable=True)
    full_name = Column(String, nullable=True)
    username = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    avatar = Column(String, nullable=True)
    company_name = Column(String, nullable=True)
    business_registration_code = Column(String, nullable=True)
    company_registration_number = Column(String, nullable=True)
    address = Column(String, nullable=True)
    vat_rate = Column(Numeric(5, 2), default=0, nullable=False)
    bank_name = Column(String, nullable=True)
    account_holder_name = Column(String, nullable=True)
    account_number = Column(String, nullable=True)
    sort_code = Column(String, nullable=True)
    iban = Column(String, nullable=True)

    user = relationship("User", back_populates="profile")


class Transaction(Base):
    """Ledger entry.

    Legacy rows may carry the payment link inside ``service_description``.
    """

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    user_id = Column(String, ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.now, nullable=False)
    date = Column(DateTime, nullable=False)
    type = Column(String, nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    category = Column(String, nullable=False)
    document_type = Column(String, nullable=True)
    document_number = Column(String, nullable=True)
    client_name = Column(String, nullable=True)
    client_email = Column(String, nullable=True)
    service_description = Column(String, nullable=True)
    payment_link = Column(String, nullable=True)
    attachment_url = Column(String, nullable=True)
    attachment_bucket = Column(String, nullable=True)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
