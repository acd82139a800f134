"""FastAPI application entrypoint. No business logic; only wiring, error mapping and middleware."""

from dotenv import load_dotenv

load_dotenv()

import logging

from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from authgate.api.deps import authorize_request
from authgate.api.middleware import AccessPolicyMiddleware
from authgate.api.routes import router as api_router
from authgate.core.config import settings
from authgate.core.errors import AuthGateError

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)

INVALID_BODY_MESSAGE = "Error: Invalid request body."
INTERNAL_ERROR_MESSAGE = "Error: Internal server error."

app = FastAPI(
    title="AuthGate API",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    # Loads the principal and re-checks the path rules once a route has matched.
    dependencies=[Depends(authorize_request)],
)

# Token gate runs before routing; CORS is added last so it wraps it and answers preflights.
app.add_middleware(AccessPolicyMiddleware)

# Stateless bearer-token API: no cookies, so no CSRF protection and no credentials.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.APP_ENV == "dev" else settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AuthGateError)
def auth_gate_error_handler(request: Request, exc: AuthGateError) -> JSONResponse:
    headers = None
    if exc.status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.message},
        headers=headers,
    )


@app.exception_handler(StarletteHTTPException)
def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # Locations only: the rejected input may contain a password.
    fields = [".".join(str(p) for p in err.get("loc", ())) for err in exc.errors()]
    logger.info("Malformed request to %s: %s", request.url.path, fields)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": INVALID_BODY_MESSAGE},
    )


@app.exception_handler(SQLAlchemyError)
def persistence_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Persistence error while handling %s", request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": INTERNAL_ERROR_MESSAGE},
    )


app.include_router(api_router, prefix=settings.API_PREFIX)


@app.get("/")
def root() -> dict[str, str]:
    """Root route; minimal payload for discovery."""
    return {"message": "AuthGate API"}
