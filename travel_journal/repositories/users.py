from typing import Optional
from sqlalchemy.orm import Session

from travel_journal.core.database import fits_id_column
from travel_journal.models.sql import User


def find_by_id(db: Session, user_id: int) -> Optional[User]:
    if not fits_id_column(user_id):
        return None
    return db.query(User).filter(User.id == user_id).first()


def find_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()


def create(
    db: Session, name: str, email: str, hashed_password: str, image: Optional[str] = None
) -> User:
    user = User(name=name, email=email, hashed_password=hashed_password, image=image)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user
