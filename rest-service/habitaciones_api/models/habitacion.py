from sqlalchemy import Column, Integer, String, Boolean
from ..database import Base

class Habitacion(Base):
    __tablename__ = "habitaciones"

    habitacion_id = Column(Integer, primary_key=True, index=True)
    # sin restricción unique: la unicidad se comprueba antes de insertar
    num_habi = Column(Integer, nullable=False, index=True)
    tipo = Column(String(100), nullable=False)
    capacidad = Column(Integer, nullable=False)
    precio = Column(Integer, nullable=False)
    estado = Column(Boolean, nullable=False, default=True)

    def to_dict(self):
        return {
            "habitacion_id": self.habitacion_id,
            "num_habi": self.num_habi,
            "tipo": self.tipo,
            "capacidad": self.capacidad,
            "precio": self.precio,
            "estado": self.estado,
        }
