# nursery/api/routers/admin.py
from typing import List, Literal

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from nursery.api.deps import require_admin
from nursery.data.database import get_db
from nursery.domain.errors import CustomerHasOrders, NotFound, PersistenceError
from nursery.domain.schemas import AnalyticsOut, DashboardOut, RevenueOut, UserRead
from nursery.services.analytics_service import AnalyticsService
from nursery.services.user_service import UserService

router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)])


@router.get("/dashboard", response_model=DashboardOut)
def dashboard(db: Session = Depends(get_db)):
    return AnalyticsService(db).dashboard()


@router.get("/revenue", response_model=RevenueOut)
def revenue(db: Session = Depends(get_db)):
    return AnalyticsService(db).revenue_breakdown()


@router.get("/analytics", response_model=AnalyticsOut)
def analytics(
    timeframe: Literal["daily", "monthly", "yearly"] = Query("daily"),
    metric: Literal["revenue", "orders", "customers"] = Query("revenue"),
    db: Session = Depends(get_db),
):
    return AnalyticsService(db).analytics(timeframe=timeframe, metric=metric)


# ---------- Customers ----------

@router.get("/customers", response_model=List[UserRead])
def list_customers(db: Session = Depends(get_db)):
    return UserService(db).list_customers()


@router.get("/customers/{customer_id}", response_model=UserRead)
def get_customer(customer_id: int, db: Session = Depends(get_db)):
    try:
        return UserService(db).get_customer(customer_id)
    except NotFound as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/customers/{customer_id}")
def delete_customer(customer_id: int, db: Session = Depends(get_db)):
    try:
        UserService(db).delete_customer(customer_id)
    except NotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except CustomerHasOrders as e:
        raise HTTPException(status_code=409, detail=str(e))
    except PersistenceError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return {"message": "Customer deleted successfully"}
