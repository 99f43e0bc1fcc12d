from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cdekcalc.calculator.router import calculator_router
from cdekcalc.config import get_settings
from cdekcalc.logger import setup_file_logging


def create_app() -> FastAPI:
    settings = get_settings()
    if settings.LOG_DIR:
        setup_file_logging(settings.LOG_DIR)

    app = FastAPI(title='cdekcalc')

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(calculator_router)
    return app


app = create_app()
