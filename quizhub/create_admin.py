"""Create the first administrator account.

    python -m quizhub.create_admin --name Admin --email admin@ndu.edu.ng --password secret

An existing account with the same email is promoted to admin instead.
"""
import argparse
import logging
from typing import Optional, Sequence

from sqlalchemy.orm import Session

from quizhub.core.security import get_password_hash
from quizhub.db.base import Base
from quizhub.db.sessions import SessionLocal, engine
from quizhub.models.user import User

# Register every model so create_all builds the whole schema
import quizhub.models  # noqa: F401

logger = logging.getLogger(__name__)


def ensure_admin(db: Session, name: str, email: str, password: str) -> User:
    user = db.query(User).filter(User.email == email).first()
    if user:
        user.role = "admin"
        logger.info("Promoted existing user %s to admin", user.id)
    else:
        user = User(
            name=name,
            email=email,
            password_hash=get_password_hash(password),
            role="admin",
            status="active",
            badges=[],
            recent_activity=[],
        )
        db.add(user)
        logger.info("Created admin account for %s", email)
    db.commit()
    db.refresh(user)
    return user


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Create or promote an administrator account.")
    parser.add_argument("--name", default="Admin")
    parser.add_argument("--email", required=True)
    parser.add_argument("--password", required=True)
    args = parser.parse_args(argv)

    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        ensure_admin(db, args.name, args.email, args.password)
    finally:
        db.close()


if __name__ == "__main__":
    main()
