import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from ..database import Base, build_engine, build_session_factory
from ..models.habitacion import Habitacion

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Fallo del almacén remoto; `message` se devuelve tal cual al cliente."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class HabitacionStore:
    """Cliente del almacén remoto para la colección `habitaciones`.

    Cada operación abre su propia sesión. Los errores de SQLAlchemy se
    convierten en StoreError tras deshacer la sesión.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self.SessionLocal = build_session_factory(engine)

    @classmethod
    def from_url(cls, database_url: str) -> "HabitacionStore":
        return cls(build_engine(database_url))

    def create_schema(self):
        Base.metadata.create_all(bind=self.engine)

    def close(self):
        self.engine.dispose()

    def _fail(self, db, operation: str, exc: SQLAlchemyError):
        db.rollback()
        message = str(getattr(exc, "orig", None) or exc)
        logger.warning("Store %s on habitaciones failed: %s", operation, message)
        raise StoreError(message) from exc

    def select_all(self) -> List[Dict[str, Any]]:
        db = self.SessionLocal()
        try:
            rows = db.query(Habitacion).all()
            return [r.to_dict() for r in rows]
        except SQLAlchemyError as e:
            self._fail(db, "select", e)
        finally:
            db.close()

    def select_one(self, habitacion_id: int) -> Optional[Dict[str, Any]]:
        db = self.SessionLocal()
        try:
            row = db.query(Habitacion).filter(Habitacion.habitacion_id == habitacion_id).first()
            return row.to_dict() if row else None
        except SQLAlchemyError as e:
            self._fail(db, "select", e)
        finally:
            db.close()

    def select_by_num(self, num_habi: int) -> Optional[Dict[str, Any]]:
        db = self.SessionLocal()
        try:
            row = db.query(Habitacion).filter(Habitacion.num_habi == num_habi).first()
            return row.to_dict() if row else None
        except SQLAlchemyError as e:
            self._fail(db, "select", e)
        finally:
            db.close()

    def insert(self, data: Dict[str, Any]) -> Dict[str, Any]:
        db = self.SessionLocal()
        try:
            row = Habitacion(**data)
            db.add(row)
            db.commit()
            db.refresh(row)
            return row.to_dict()
        except SQLAlchemyError as e:
            self._fail(db, "insert", e)
        finally:
            db.close()

    def update(self, habitacion_id: int, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        db = self.SessionLocal()
        try:
            row = db.query(Habitacion).filter(Habitacion.habitacion_id == habitacion_id).first()
            if row is None:
                return None
            for field, value in data.items():
                setattr(row, field, value)
            db.add(row)
            db.commit()
            db.refresh(row)
            return row.to_dict()
        except SQLAlchemyError as e:
            self._fail(db, "update", e)
        finally:
            db.close()

    def delete(self, habitacion_id: int) -> bool:
        db = self.SessionLocal()
        try:
            deleted = db.query(Habitacion).filter(Habitacion.habitacion_id == habitacion_id).delete()
            db.commit()
            return bool(deleted)
        except SQLAlchemyError as e:
            self._fail(db, "delete", e)
        finally:
            db.close()
