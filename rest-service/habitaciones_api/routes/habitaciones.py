from fastapi import APIRouter, Depends, HTTPException, Path, Request, Response
from typing import List
from ..schemas.habitacion import HabitacionCreate, HabitacionUpdate, HabitacionResponse, ErrorResponse, ENTERO_MAXIMO
from ..services.habitacion_store import HabitacionStore, StoreError
from ..utils.dependencies import get_store

router = APIRouter(prefix="/habitaciones", tags=["Habitaciones"])

NO_ENCONTRADA = "Habitación no encontrada"

_ERROR_400 = {400: {"model": ErrorResponse, "description": "ID o campos inválidos"}}
_ERROR_404 = {404: {"model": ErrorResponse, "description": NO_ENCONTRADA}}
_ERROR_500 = {500: {"model": ErrorResponse, "description": "Error del almacén remoto"}}


def _id_path(description: str):
    return Path(..., gt=0, le=ENTERO_MAXIMO, description=description)


@router.get(
    "",
    response_model=List[HabitacionResponse],
    summary="Obtiene todas las habitaciones",
    responses={200: {"description": "Lista de habitaciones obtenida exitosamente"}, **_ERROR_500},
)
def list_habitaciones(request: Request, store: HabitacionStore = Depends(get_store)):
    rows = store.select_all()
    if not rows and request.app.state.settings.HABITACIONES_VACIAS_404:
        raise HTTPException(status_code=404, detail="No hay habitaciones registradas")
    return rows


@router.get(
    "/{habitacion_id}",
    response_model=HabitacionResponse,
    summary="Obtiene una habitación por ID",
    responses={200: {"description": "Habitación encontrada"}, **_ERROR_400, **_ERROR_404},
)
def get_habitacion(
    habitacion_id: int = _id_path("ID de la habitación a obtener"),
    store: HabitacionStore = Depends(get_store),
):
    # un error de consulta se responde igual que "no encontrada"
    try:
        row = store.select_one(habitacion_id)
    except StoreError:
        row = None
    if row is None:
        raise HTTPException(status_code=404, detail=NO_ENCONTRADA)
    return row


@router.post(
    "",
    response_model=HabitacionResponse,
    status_code=201,
    summary="Crea una nueva habitación",
    responses={
        201: {"description": "Habitación creada exitosamente"},
        409: {"model": ErrorResponse, "description": "Ya existe una habitación con ese número"},
        **_ERROR_400,
        **_ERROR_500,
    },
)
def post_habitacion(data: HabitacionCreate, store: HabitacionStore = Depends(get_store)):
    # comprobación previa no atómica: dos altas simultáneas pueden pasarla
    if store.select_by_num(data.num_habi) is not None:
        raise HTTPException(
            status_code=409,
            detail=f"Ya existe una habitación con el número {data.num_habi}",
        )
    return store.insert(data.model_dump())


@router.patch(
    "/{habitacion_id}",
    response_model=HabitacionResponse,
    summary="Actualiza una habitación",
    responses={200: {"description": "Habitación actualizada exitosamente"}, **_ERROR_400, **_ERROR_404, **_ERROR_500},
)
@router.put(
    "/{habitacion_id}",
    response_model=HabitacionResponse,
    summary="Actualiza una habitación (alias de PATCH)",
    responses={200: {"description": "Habitación actualizada exitosamente"}, **_ERROR_400, **_ERROR_404, **_ERROR_500},
)
def update_habitacion(
    data: HabitacionUpdate,
    habitacion_id: int = _id_path("ID de la habitación a actualizar"),
    store: HabitacionStore = Depends(get_store),
):
    existing = store.select_one(habitacion_id)
    if existing is None:
        raise HTTPException(status_code=404, detail=NO_ENCONTRADA)

    # sólo se aplican los campos enviados
    changes = data.model_dump(exclude_unset=True)
    if not changes:
        return existing

    row = store.update(habitacion_id, changes)
    if row is None:
        raise HTTPException(status_code=404, detail=NO_ENCONTRADA)
    return row


@router.delete(
    "/{habitacion_id}",
    status_code=204,
    response_class=Response,
    summary="Elimina una habitación",
    responses={204: {"description": "Habitación eliminada exitosamente"}, **_ERROR_400, **_ERROR_404, **_ERROR_500},
)
def delete_habitacion(
    habitacion_id: int = _id_path("ID de la habitación a eliminar"),
    store: HabitacionStore = Depends(get_store),
):
    if store.select_one(habitacion_id) is None:
        raise HTTPException(status_code=404, detail=NO_ENCONTRADA)
    store.delete(habitacion_id)
    return Response(status_code=204)
