import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from academy.core.config import settings
from academy.core.errors import AcademyError
from academy.routers import attendance, auth, coaches, players, registrations, sessions, venues

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
log = logging.getLogger("academy")

app = FastAPI(title="Sports Academy Admin API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(auth.router)
app.include_router(venues.router)
app.include_router(players.router)
app.include_router(coaches.router)
app.include_router(attendance.router)
app.include_router(registrations.router)
app.include_router(sessions.router)


@app.exception_handler(AcademyError)
def handle_academy_error(request: Request, exc: AcademyError):
    if exc.status_code >= 500:
        log.error("%s %s failed: %s (%s)", request.method, request.url.path, exc.message, exc.details)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
def handle_request_validation(request: Request, exc: RequestValidationError):
    # client input errors are 400 everywhere, same shape as ValidationError
    return JSONResponse(
        status_code=400,
        content={
            "error": "Invalid request payload",
            "code": "validation_error",
            "details": jsonable_encoder(exc.errors()),
        },
    )


@app.get("/health")
def health():
    return {"status": "ok"}
