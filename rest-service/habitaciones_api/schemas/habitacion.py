from pydantic import BaseModel, field_validator
from typing import Optional

MENSAJE_NUM_HABI = "Número de habitación inválido, debe ser un entero positivo"
MENSAJE_TIPO = "Tipo inválido, debe ser una cadena de texto"
MENSAJE_CAPACIDAD = "Capacidad inválida, debe ser un número positivo"
MENSAJE_PRECIO = "Precio inválido, debe ser un número positivo"
MENSAJE_ESTADO = "Estado inválido, debe ser un booleano (true/false)"

# rango de una columna INTEGER de Postgres
ENTERO_MAXIMO = 2147483647


def _entero_positivo(value, mensaje: str):
    # bool es subclase de int; True no es un número de habitación
    if isinstance(value, bool) or not isinstance(value, int) or not 0 < value <= ENTERO_MAXIMO:
        raise ValueError(mensaje)
    return value


class _HabitacionCampos(BaseModel):
    """Validaciones de campo compartidas por alta y actualización.

    Se ejecutan antes de la coerción de Pydantic para que "10", 2.5 o 1 (como
    booleano) se rechacen con el mensaje del campo en lugar de convertirse.
    """

    @field_validator("num_habi", mode="before", check_fields=False)
    @classmethod
    def validar_num_habi(cls, v):
        return _entero_positivo(v, MENSAJE_NUM_HABI)

    @field_validator("tipo", mode="before", check_fields=False)
    @classmethod
    def validar_tipo(cls, v):
        if not isinstance(v, str):
            raise ValueError(MENSAJE_TIPO)
        return v

    @field_validator("capacidad", mode="before", check_fields=False)
    @classmethod
    def validar_capacidad(cls, v):
        return _entero_positivo(v, MENSAJE_CAPACIDAD)

    @field_validator("precio", mode="before", check_fields=False)
    @classmethod
    def validar_precio(cls, v):
        return _entero_positivo(v, MENSAJE_PRECIO)

    @field_validator("estado", mode="before", check_fields=False)
    @classmethod
    def validar_estado(cls, v):
        if not isinstance(v, bool):
            raise ValueError(MENSAJE_ESTADO)
        return v


class HabitacionCreate(_HabitacionCampos):
    num_habi: int
    tipo: str
    capacidad: int
    precio: int
    estado: bool

    class Config:
        json_schema_extra = {
            "example": {"num_habi": 101, "tipo": "doble", "capacidad": 2, "precio": 500, "estado": True}
        }


class HabitacionUpdate(_HabitacionCampos):
    num_habi: Optional[int] = None
    tipo: Optional[str] = None
    capacidad: Optional[int] = None
    precio: Optional[int] = None
    estado: Optional[bool] = None

    class Config:
        json_schema_extra = {"example": {"precio": 650, "estado": False}}


class HabitacionResponse(BaseModel):
    habitacion_id: int
    num_habi: int
    tipo: str
    capacidad: int
    precio: int
    estado: bool

    class Config:
        from_attributes = True


class ErrorResponse(BaseModel):
    error: str
