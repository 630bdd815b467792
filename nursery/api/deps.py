# nursery/api/deps.py
from functools import lru_cache

from fastapi import Depends, Header, HTTPException
from sqlalchemy.orm import Session

from nursery.data.database import get_db
from nursery.data.models.user import UserModel
from nursery.repos.user_repo import UserRepo
from nursery.services.lock_service import LockService


@lru_cache
def get_lock_service() -> LockService:
    #jeden klient redisa (pula polaczen) na proces
    return LockService()


def get_current_user(
    x_user_id: int | None = Header(None),
    db: Session = Depends(get_db),
) -> UserModel:
    """
    Kto wola endpoint - z naglowka X-User-Id.
    Wydawanie tokenow jest poza tym serwisem, tu tylko odczyt tozsamosci.
    """
    if x_user_id is None:
        raise HTTPException(status_code=401, detail="Access token required")

    user = UserRepo(db).get_user(x_user_id)
    if not user:
        raise HTTPException(status_code=401, detail="Unknown user")
    return user


def require_admin(user: UserModel = Depends(get_current_user)) -> UserModel:
    if user.user_type != "admin":
        raise HTTPException(status_code=403, detail="Admin access required")
    return user
