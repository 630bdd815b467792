# nursery/data/seed.py
from nursery.data.database import SessionLocal
from nursery.services.user_service import UserService


def seed():
    db = SessionLocal()
    try:
        # tylko konto admina, katalog wypelnia admin przez API
        UserService(db).ensure_admin()
    finally:
        db.close()
