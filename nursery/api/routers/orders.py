# nursery/api/routers/orders.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from nursery.api.deps import get_current_user, get_lock_service, require_admin
from nursery.data.database import get_db
from nursery.data.models.user import UserModel
from nursery.domain.errors import (
    CheckoutInProgress,
    ConcurrentUpdate,
    InsufficientStock,
    ItemNotFound,
    NotFound,
    PersistenceError,
)
from nursery.domain.schemas import OrderConfirmationOut, OrderCreate, OrderOut
from nursery.services.checkout_service import CheckoutService
from nursery.services.lock_service import LockService
from nursery.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("/", response_model=OrderConfirmationOut, status_code=201)
def place_order(
    payload: OrderCreate,
    user: UserModel = Depends(get_current_user),
    lock_service: LockService = Depends(get_lock_service),
    db: Session = Depends(get_db),
):
    """
    Sklada zamowienie z koszyka klienta. Klient z naglowka, nie z body.
    """
    svc = CheckoutService(db, lock_service)
    try:
        return svc.place_order(
            customer_id=user.id,
            items=payload.items,
            payment=payload.payment,
            schedule=payload.schedule,
            delivery_details=payload.delivery_details,
            offers=payload.offers,
        )
    except (ItemNotFound, InsufficientStock) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except CheckoutInProgress as e:
        raise HTTPException(status_code=409, detail=str(e))
    except NotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PersistenceError as e:
        raise HTTPException(status_code=503, detail=str(e))


@router.get("/", response_model=List[OrderOut])
def list_orders(
    status: str | None = Query(None),
    customer_id: int | None = Query(None),
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    svc = OrderService(db)
    return svc.list_orders(user, status=status, customer_id=customer_id)


@router.get("/{order_id}", response_model=OrderOut)
def get_order(
    order_id: str,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    svc = OrderService(db)
    try:
        return svc.get_order(order_id, user)
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except NotFound as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{order_id}", dependencies=[Depends(require_admin)])
def delete_order(
    order_id: str,
    lock_service: LockService = Depends(get_lock_service),
    db: Session = Depends(get_db),
):
    """
    Usuwa zamowienie (admin) i oddaje stany magazynowe - atomowo.
    """
    svc = CheckoutService(db, lock_service)
    try:
        svc.cancel_order(order_id)
    except NotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PersistenceError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return {"message": "Order deleted successfully and stock restored"}


@router.put("/{order_id}/status", response_model=OrderOut, dependencies=[Depends(require_admin)])
def advance_status(order_id: str, db: Session = Depends(get_db)):
    svc = OrderService(db)
    try:
        return svc.advance_fulfillment(order_id)
    except NotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ConcurrentUpdate as e:
        raise HTTPException(status_code=409, detail=str(e))
    except PersistenceError as e:
        raise HTTPException(status_code=503, detail=str(e))
