from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings, settings as default_settings
from .routes import habitaciones as habitaciones_router
from .services.habitacion_store import HabitacionStore
from .utils.errors import register_exception_handlers

# uvicorn configura este logger en INFO aunque no se llame a basicConfig
banner_logger = logging.getLogger("uvicorn.error")


def create_app(settings: Optional[Settings] = None, store: Optional[HabitacionStore] = None) -> FastAPI:
    """Construye la aplicación.

    Si no se inyecta un store, se crea uno en el arranque a partir de
    `DATABASE_URL` y se libera al apagar.
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owns_store = app.state.store is None
        if owns_store:
            app.state.store = HabitacionStore.from_url(settings.DATABASE_URL)
        # asegura que la tabla exista (no hay migraciones)
        app.state.store.create_schema()
        banner_logger.info("✅ Servidor corriendo en http://localhost:%s", settings.PORT)
        try:
            yield
        finally:
            if owns_store:
                app.state.store.close()
                app.state.store = None

    app = FastAPI(
        title=settings.API_TITLE,
        description=settings.API_DESCRIPTION,
        version=settings.API_VERSION,
        servers=[{"url": f"http://localhost:{settings.PORT}", "description": "Servidor Local"}],
        docs_url="/api-docs",
        openapi_url="/api-docs/openapi.json",
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(habitaciones_router.router)
    return app


app = create_app()


def run():
    import uvicorn
    logging.basicConfig(
        level=default_settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(app, host="0.0.0.0", port=default_settings.PORT)


if __name__ == "__main__":
    run()
