from typing import List

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from nursery.data.models.user import UserModel


class UserRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_user(self, user_id: int) -> UserModel | None:
        return self.db.get(UserModel, user_id)

    def get_by_email(self, email: str) -> UserModel | None:
        return self.db.execute(
            select(UserModel).where(UserModel.email == email)
        ).scalar_one_or_none()

    def create_user(self, user: UserModel) -> UserModel:
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def count_customers(self) -> int:
        return self.db.execute(
            select(func.count(UserModel.id)).where(UserModel.user_type == "customer")
        ).scalar_one()

    def list_customers(self) -> List[UserModel]:
        return list(
            self.db.execute(
                select(UserModel)
                .where(UserModel.user_type == "customer")
                .order_by(UserModel.registered_at.desc(), UserModel.id.desc())
            ).scalars().all()
        )

    def delete_user(self, user_id: int) -> bool:
        result = self.db.execute(delete(UserModel).where(UserModel.id == user_id))
        return result.rowcount > 0
