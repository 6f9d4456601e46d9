# ticketgate/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from ticketgate.core import database
from ticketgate.core.config import get_settings
from ticketgate.core.errors import TicketError
from ticketgate.migrate import run_migrations
from ticketgate.ticket.routes import router as ticket_router

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    current = get_settings()
    engine = database.init_engine(current.DATABASE_URL, ssl=current.DATABASE_SSL)
    if current.AUTO_MIGRATE:
        run_migrations(engine)
    logger.info("App running at %s", current.base_url)
    yield
    database.dispose_engine()


app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESC,
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

origins = settings.cors_origins

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials="*" not in origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(TicketError)
async def ticket_error_handler(request: Request, exc: TicketError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.warning("%s %s rejected (%d): %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    logger.warning("%s %s malformed request: %s", request.method, request.url.path, errors)
    if any(e["type"] == "missing" for e in errors):
        message = "All fields (taxId, firstName, lastName) are required"
    else:
        details = "; ".join(f"{e['loc'][-1]}: {e['msg']}" for e in errors)
        message = f"Invalid request body: {details}"
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("%s %s database error: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


# Routers
app.include_router(ticket_router)

@app.get("/health", tags=["Health"])
def health():
    return {"status": "ok"}


def run():
    import uvicorn

    uvicorn.run("ticketgate.main:app", host="0.0.0.0", port=get_settings().PORT)


if __name__ == "__main__":
    run()
