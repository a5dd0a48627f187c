"""
Main FastAPI application
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from canteen.config import get_settings
from canteen.services.selection_store import SelectionStore
from canteen.utils.logger import get_logger
from canteen.api import menu, selections

settings = get_settings()
logger = get_logger("canteen")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Selections live for the lifetime of the process only
    app.state.selection_store = SelectionStore()
    logger.info(f"{settings.APP_NAME} {settings.APP_VERSION} started with an empty selection store")

    yield

    logger.info(f"Shutting down with {len(app.state.selection_store)} selection(s) in memory")

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)

# Include routers
app.include_router(menu.router, prefix=settings.API_PREFIX, tags=["Menu"])
app.include_router(selections.router, prefix=settings.API_PREFIX, tags=["Selections"])


@app.exception_handler(StarletteHTTPException)
async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
    # /selections advertises GET,POST,OPTIONS for every other method
    if exc.status_code == 405 and request.url.path.rstrip("/") == f"{settings.API_PREFIX}/selections":
        return selections.method_not_allowed_response()
    return await http_exception_handler(request, exc)


@app.get("/")
async def root():
    return {
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "status": "running"
    }


@app.get("/health")
async def health_check():
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "canteen.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG
    )
