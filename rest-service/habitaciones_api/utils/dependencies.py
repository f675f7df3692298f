from fastapi import Request
from ..services.habitacion_store import HabitacionStore


def get_store(request: Request) -> HabitacionStore:
    # instancia creada en el arranque de la aplicación (ver main.create_app)
    return request.app.state.store
