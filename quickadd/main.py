import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .routers import health, ingest, parse

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging() -> None:
    logging.getLogger("quickadd").setLevel(settings.log_level)
    # no-op when the server (or pytest) already installed root handlers
    logging.basicConfig(format=LOG_FORMAT)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    yield


app = FastAPI(title="Quick Add - Task Input Parser", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router, prefix="/health", tags=["health"])
app.include_router(parse.router, prefix="/parse", tags=["parse"])
app.include_router(ingest.router, prefix="/ingest", tags=["ingest"])


@app.get("/")
def root():
    return {"ok": True, "service": "quickadd", "version": "0.1.0", "env": settings.app_env}
