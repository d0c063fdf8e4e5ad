from sqlalchemy.orm import Session
from cafechronicles.models.user_db.user_db import User


def get_user_by_id(db: Session, user_id: int):
    return db.query(User).filter(User.id == user_id).first()


def create_user(db: Session, username: str):
    db_user = User(username=username.lower().strip())
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    return db_user
