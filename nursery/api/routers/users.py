from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from nursery.data.database import get_db
from nursery.domain.errors import NotFound, ValidationError
from nursery.domain.schemas import UserCreate, UserRead
from nursery.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.post("/", response_model=UserRead, status_code=201)
def create_user(payload: UserCreate, db: Session = Depends(get_db)):
    service = UserService(db)
    try:
        return service.create_user(payload)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/{user_id}", response_model=UserRead)
def get_user(user_id: int, db: Session = Depends(get_db)):
    service = UserService(db)
    try:
        return service.get_user(user_id)
    except NotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
