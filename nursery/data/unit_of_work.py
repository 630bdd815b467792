# nursery/data/unit_of_work.py
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from nursery.domain.errors import PersistenceError
from nursery.utils.logging import get_logger

logger = get_logger(__name__)


@contextmanager
def unit_of_work(db: Session, operation: str = "operation") -> Iterator[Session]:
    """
    Jedna transakcja na caly use case.
    Sukces -> commit, dowolny wyjatek -> rollback wszystkiego co poszlo do bazy
    (np. zdjete stany magazynowe przy checkoucie).
    Bledy SQLAlchemy wychodza jako PersistenceError.
    """
    try:
        yield db
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"{operation} rolled back, store error: {e}")
        raise PersistenceError(f"Could not complete {operation}, please try again") from e
    except Exception:
        db.rollback()
        logger.info(f"{operation} rolled back")
        raise
