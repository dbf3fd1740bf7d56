import logging
import os
from contextlib import asynccontextmanager

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from student_api.auth import dependencies as auth_dependencies
from student_api.books import router as books_router
from student_api.coffee_orders import router as coffee_orders_router
from student_api.coffee_types import router as coffee_types_router
from student_api.core import db, schema
from student_api.students import router as students_router

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO",
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One pool per process, handed to handlers through db.get_store.
    pool = await db.open_pool()
    app.state.store = pool
    try:
        if db.create_tables_on_startup():
            await schema.create_tables(pool)
        yield
    finally:
        app.state.store = None
        await db.close_pool(pool)


app = FastAPI(lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_error(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=exc.headers,
    )


@app.exception_handler(Exception)
async def unhandled_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal Server Error"},
    )


api_router = APIRouter(prefix="/api/v1")


@api_router.get("")
@api_router.get("/", include_in_schema=False)
def root() -> dict:
    return {"message": "Student API2"}


api_router.include_router(students_router.public_router, tags=["students"])
api_router.include_router(students_router.router, tags=["students"])
api_router.include_router(books_router.router, tags=["books"])
api_router.include_router(coffee_types_router.router, tags=["coffee types"])
api_router.include_router(coffee_orders_router.router, tags=["coffee orders"])


# Registered last: anything else under /api/v1 needs the token before it is a 404.
@api_router.api_route(
    "/{path:path}",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
    dependencies=[Depends(auth_dependencies.require_api_token)],
    include_in_schema=False,
)
def unknown_route(path: str) -> dict:
    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")


app.include_router(api_router)


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}
