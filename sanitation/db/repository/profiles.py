from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from sanitation.db.models import Profile, UserRole
from sanitation.db.repository.base import flush_or_raise


def get_profile(db: Session, user_id: str) -> Profile | None:
    return db.execute(select(Profile).where(Profile.user_id == user_id)).scalar_one_or_none()


def get_role(db: Session, user_id: str) -> str | None:
    row = db.execute(select(UserRole).where(UserRole.user_id == user_id)).scalar_one_or_none()
    return row.role if row else None


def insert_profile(db: Session, user_id: str, fields: dict[str, Any]) -> Profile:
    profile = Profile(user_id=user_id, **fields)
    db.add(profile)
    flush_or_raise(db)
    return profile


def insert_role(db: Session, user_id: str, role: str) -> UserRole:
    row = UserRole(user_id=user_id, role=role)
    db.add(row)
    flush_or_raise(db)
    return row


def update_profile(db: Session, profile: Profile, fields: dict[str, Any]) -> Profile:
    for key, value in fields.items():
        setattr(profile, key, value)
    flush_or_raise(db)
    db.refresh(profile)
    return profile
