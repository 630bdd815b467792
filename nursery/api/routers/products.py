# nursery/api/routers/products.py
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from nursery.api.deps import require_admin
from nursery.data.database import get_db
from nursery.domain.errors import NotFound, PersistenceError, ValidationError
from nursery.domain.schemas import ProductCreate, ProductOut, ProductPage, ProductUpdate, StockUpdate
from nursery.services.catalog_service import CatalogService

router = APIRouter(prefix="/products", tags=["products"])


def get_service(db: Session):
    return CatalogService(db)


@router.get("/", response_model=ProductPage)
def list_products(
    category: str | None = Query(None),
    search: str | None = Query(None),
    status: str | None = Query(None),
    page: int = Query(1, ge=1),
    limit: int = Query(12, ge=1, le=100),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    return svc.list_products(category=category, search=search, status=status, page=page, limit=limit)


@router.get("/{product_id}", response_model=ProductOut)
def get_product(product_id: int, db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        return svc.get_product(product_id)
    except NotFound as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/", response_model=ProductOut, status_code=201, dependencies=[Depends(require_admin)])
def create_product(payload: ProductCreate, db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        return svc.create_product(payload)
    except PersistenceError as e:
        raise HTTPException(status_code=503, detail=str(e))


@router.put("/{product_id}", response_model=ProductOut, dependencies=[Depends(require_admin)])
def update_product(product_id: int, payload: ProductUpdate, db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        return svc.update_product(product_id, payload)
    except NotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PersistenceError as e:
        raise HTTPException(status_code=503, detail=str(e))


@router.put("/{product_id}/stock", response_model=ProductOut, dependencies=[Depends(require_admin)])
def set_stock(product_id: int, payload: StockUpdate, db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        return svc.set_stock(product_id, payload.stock)
    except NotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except PersistenceError as e:
        raise HTTPException(status_code=503, detail=str(e))


@router.put("/{product_id}/status", response_model=ProductOut, dependencies=[Depends(require_admin)])
def toggle_status(product_id: int, db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        return svc.toggle_status(product_id)
    except NotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PersistenceError as e:
        raise HTTPException(status_code=503, detail=str(e))


@router.delete("/{product_id}", dependencies=[Depends(require_admin)])
def delete_product(product_id: int, db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        svc.delete_product(product_id)
    except NotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PersistenceError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return {"message": "Product deleted successfully"}
