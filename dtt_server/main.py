import time
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config import logger, LOGGING_CONFIG, CORS_ORIGINS, SEED_CATALOG, DEFAULT_HOST, DEFAULT_PORT
from .database import init_db, SessionLocal
from .errors import register_exception_handlers
from .services.catalog import seed_catalog
from .api import router as api_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    # 1) Schema
    init_db()
    # 2) Static catalog (albums / songs / singles only)
    if SEED_CATALOG:
        db = SessionLocal()
        try:
            seed_catalog(db)
        finally:
            db.close()
    logger.info("FastAPI startup complete, catalog ready")
    yield
    logger.info("FastAPI shutdown")


app = FastAPI(title="Music Catalog Community API", version=__version__, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    elapsed = (time.perf_counter() - start) * 1000
    query = f"?{request.url.query}" if request.url.query else ""
    logger.info(f"{request.method} {request.url.path}{query} -> {response.status_code} ({elapsed:.1f} ms)")
    return response


@app.get("/health")
def health():
    return {"status": "ok"}


register_exception_handlers(app)
app.include_router(api_router)


def run():
    uvicorn.run(app, host=DEFAULT_HOST, port=DEFAULT_PORT, log_config=LOGGING_CONFIG)


if __name__ == "__main__":
    run()
