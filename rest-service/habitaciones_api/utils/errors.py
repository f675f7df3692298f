from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from ..services.habitacion_store import StoreError

logger = logging.getLogger(__name__)

MENSAJE_ID_INVALIDO = "ID de habitación inválido, debe ser un entero positivo"


def error_response(status_code: int, message, headers=None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def validation_message(errors) -> str:
    """Elige el mensaje de la respuesta 400 a partir de los errores de FastAPI.

    El id de la ruta tiene prioridad; después JSON mal formado, campos
    faltantes (todos en un mensaje) y por último el primer campo inválido,
    con el texto del validador del esquema.
    """
    for err in errors:
        if err.get("loc", ())[:1] == ("path",):
            return MENSAJE_ID_INVALIDO

    for err in errors:
        if err.get("type") == "json_invalid":
            return "Cuerpo JSON inválido"

    missing = [
        str(err["loc"][-1])
        for err in errors
        if err.get("type") == "missing" and len(err.get("loc", ())) > 1
    ]
    if missing:
        return "Faltan campos obligatorios: " + ", ".join(missing)

    for err in errors:
        loc = tuple(err.get("loc", ()))
        if err.get("type") == "missing" and loc == ("body",):
            return "El cuerpo de la petición es obligatorio"
        if len(loc) == 1 and loc[0] == "body":
            return "El cuerpo de la petición debe ser un objeto JSON"
        if err.get("type") == "value_error":
            ctx_error = (err.get("ctx") or {}).get("error")
            if ctx_error is not None:
                return str(ctx_error)
        return err.get("msg", "Petición inválida")

    return "Petición inválida"


def register_exception_handlers(app: FastAPI):
    @app.exception_handler(StarletteHTTPException)
    async def _http_exception(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, exc.detail, getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def _validation_exception(request: Request, exc: RequestValidationError):
        message = validation_message(exc.errors())
        logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
        return error_response(400, message)

    @app.exception_handler(StoreError)
    async def _store_exception(request: Request, exc: StoreError):
        return error_response(500, exc.message)

    @app.exception_handler(Exception)
    async def _unhandled_exception(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return error_response(500, str(exc) or "Error interno del servidor")
