import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app import data
from app.api.routes import router
from app.core.config import get_settings

settings = get_settings()
logging.basicConfig(level=logging.DEBUG if settings.debug else settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.dataset = data.init_dataset()
    yield


app = FastAPI(title=settings.app_name, debug=settings.debug, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health", tags=["health"])
def health() -> dict[str, str]:
    return {"status": "ok"}


app.include_router(router, prefix=settings.api_prefix)
