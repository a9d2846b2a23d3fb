import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from core.config import settings
from core.logging_config import configure_logging
from database import connect_db

from api import categories, subcategories, general_api

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # A failed connection aborts startup instead of serving degraded traffic
    client = await connect_db()
    app.state.mongo_client = client
    app.state.db = client[settings.MONGO_DB_NAME]
    logger.info("App starting up on port %s", settings.PORT)
    yield
    client.close()
    logger.info("App shutting down")


app = FastAPI(lifespan=lifespan, title="NESS WEAR Catalog API")

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.FRONTEND_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

async def validation_error_handler(request: Request, exc: RequestValidationError):
    # Malformed input is a client error with a single readable message
    error = exc.errors()[0]
    field = ".".join(str(part) for part in error["loc"] if part != "body")
    detail = f"Invalid {field}: {error['msg']}" if field else f"Invalid request body: {error['msg']}"
    return JSONResponse(status_code=400, content={"detail": detail})


app.add_exception_handler(RequestValidationError, validation_error_handler)

# Routers
app.include_router(general_api.router)
app.include_router(categories.router)
app.include_router(subcategories.router)


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)
