from typing import List, Literal

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from nursery.api.deps import require_admin
from nursery.data.database import get_db
from nursery.domain.errors import NotFound, PersistenceError
from nursery.domain.schemas import ConsultationCreate, ConsultationOut, ConsultationUpdate
from nursery.services.consultation_service import ConsultationService

router = APIRouter(prefix="/consultations", tags=["consultations"])


@router.post("/", status_code=201)
def submit_consultation(payload: ConsultationCreate, db: Session = Depends(get_db)):
    svc = ConsultationService(db)
    try:
        consultation = svc.submit(payload)
    except PersistenceError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return {"id": consultation.id, "message": "Consultation request submitted successfully"}


@router.get("/", response_model=List[ConsultationOut], dependencies=[Depends(require_admin)])
def list_consultations(
    status: Literal["pending", "done"] | None = Query(None),
    db: Session = Depends(get_db),
):
    return ConsultationService(db).list_consultations(status=status)


@router.put("/{consultation_id}", response_model=ConsultationOut, dependencies=[Depends(require_admin)])
def update_consultation(consultation_id: int, payload: ConsultationUpdate, db: Session = Depends(get_db)):
    svc = ConsultationService(db)
    try:
        return svc.update(consultation_id, payload)
    except NotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PersistenceError as e:
        raise HTTPException(status_code=503, detail=str(e))


@router.delete("/{consultation_id}", dependencies=[Depends(require_admin)])
def delete_consultation(consultation_id: int, db: Session = Depends(get_db)):
    svc = ConsultationService(db)
    try:
        svc.delete(consultation_id)
    except NotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PersistenceError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return {"message": "Consultation deleted successfully"}
