import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from kadastro.api.endpoints import cadastre, dvf
from kadastro.core import config, upstream
from kadastro.middleware.cors import PermissiveCORSMiddleware
from kadastro.schemas.health import HealthResponse

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

# (router, prefix, tags)
ROUTES = [
    (cadastre.router, "/api/cadastre", ["cadastre"]),
    (dvf.router, "/api/dvf", ["dvf"]),
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    upstream.close_session()


app = FastAPI(
    title="Kadastro API",
    version=config.VERSION,
    lifespan=lifespan,
)

# CORS: any origin, read-only methods
app.add_middleware(
    PermissiveCORSMiddleware,
    allow_origin="*",
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["Content-Type"],
)

for router, prefix, tags in ROUTES:
    app.include_router(router, prefix=prefix, tags=tags)


@app.exception_handler(StarletteHTTPException)
async def plain_text_error(request, exc: StarletteHTTPException):
    """Errors go out as plain text, not FastAPI's {"detail": ...} JSON."""
    if exc.status_code in (204, 304):
        return Response(status_code=exc.status_code, headers=exc.headers)
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


@app.get("/health", response_model=HealthResponse)
def health_check():
    return {"status": "operational", "service": config.SERVICE_NAME, "version": config.VERSION}


def run():
    print(f"🚀 Kadastro API ready on http://localhost:{config.PORT}")
    uvicorn.run(app, host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
