from fastapi import APIRouter, Depends, FastAPI

from app.core.gate import access_gate, public
from app.core.response import install_response_envelope
from app.logger import configure_logging


def create_app(title: str, routers: list[tuple[APIRouter, str, str]]) -> FastAPI:
    """Build an app with the access gate and the response envelope installed.

    ``routers`` holds ``(router, prefix, tag)`` triples.
    """
    configure_logging()
    app = FastAPI(title=title, dependencies=[Depends(access_gate)])
    install_response_envelope(app)

    for router, prefix, tag in routers:
        app.include_router(router, prefix=prefix, tags=[tag])

    # Root health
    @app.get("/")
    @public
    async def read_root():
        return {"status": "ok"}

    return app
