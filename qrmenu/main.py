from datetime import datetime, timezone
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from qrmenu.api.menu_routes import router as menu_router
from qrmenu.core.config import CORS_ORIGINS, LOG_LEVEL
from qrmenu.core.exceptions import ConflictError, MissingCategoryError, StoreError
from qrmenu.db import create_db_and_tables

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
log = logging.getLogger(__name__)

# Create the FastAPI app
app = FastAPI(
    title="QR Menu Admin API",
    version="1.0.0",
    description="Back-office API for menu categories, items, themes and QR codes.",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(MissingCategoryError)
async def missing_category_handler(request: Request, exc: MissingCategoryError):
    return JSONResponse(status_code=404, content={"detail": str(exc), "category_id": exc.category_id})


@app.exception_handler(ConflictError)
async def conflict_handler(request: Request, exc: ConflictError):
    content = {"detail": str(exc)}
    for attr in ("category_id", "item_count"):
        if hasattr(exc, attr):
            content[attr] = getattr(exc, attr)
    return JSONResponse(status_code=409, content=content)


@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError):
    return JSONResponse(status_code=500, content={"detail": "Storage failure"})


app.include_router(menu_router, prefix="/api")


@app.get("/healthcheck")
async def healthcheck():
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}


@app.on_event("startup")
async def on_startup():
    log.info("Starting DB setup...")
    await create_db_and_tables()
    log.info("DB schema ready.")
