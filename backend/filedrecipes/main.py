from contextlib import asynccontextmanager
import logging

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
import uvicorn

from .api.dependencies import get_repository
from .api.recipes import router as recipes_router
from .api.websocket import router as ws_router
from .core.config import get_settings
from .core.errors import (
    IndexOutOfRangeError,
    IOFailureError,
    MalformedFormatError,
    RecipeRepositoryError,
)
from .core.repository import RecipeRepository

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    repository = get_repository()
    try:
        repository.load()
    except (IOFailureError, MalformedFormatError) as e:
        log.warning(f"Starting with no recipes: {e}")
    yield


app = FastAPI(title="filedrecipes", version="0.1.0", description="Recipe file service", lifespan=lifespan)

ERROR_STATUS = {
    IndexOutOfRangeError: 404,
    MalformedFormatError: 422,
    IOFailureError: 503,
}


@app.exception_handler(RecipeRepositoryError)
async def repository_error_handler(request: Request, exc: RecipeRepositoryError):
    status_code = ERROR_STATUS.get(type(exc), 500)
    log.warning(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(status_code=status_code, content={"error": type(exc).__name__, "detail": str(exc)})


app.include_router(recipes_router)
app.include_router(ws_router)


@app.get("/api/health")
def health_check(repository: RecipeRepository = Depends(get_repository)):
    return {"status": "ok", "recipes": repository.count, "modified": repository.is_modified}


def serve():
    uvicorn.run("backend.filedrecipes.main:app", host=settings.host, port=settings.port)
