from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from uuidshort.core.config import settings
from uuidshort.core.exceptions import InvalidAlphabet, ShortUUIDError
from uuidshort.core.logging_config import configure_logging
from uuidshort.api import shortuuid

logger = configure_logging()
logger.info(f"Application '{settings.PROJECT_NAME}' starting up.")


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Compact, alphabet-configurable encoding of UUIDs"
)

app.include_router(shortuuid.router, prefix="")

@app.get("/health", tags=["health"])
def health_check():
    return {"status": "healthy", "service": "short-uuid"}

@app.exception_handler(ShortUUIDError)
async def short_uuid_exception_handler(request: Request, exc: ShortUUIDError):
    logger.warning(f"Rejected {request.url.path}: {exc}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})

@app.exception_handler(InvalidAlphabet)
async def invalid_alphabet_exception_handler(request: Request, exc: InvalidAlphabet):
    logger.error(f"Configured alphabet is unusable: {exc}")
    return JSONResponse(status_code=500, content={"detail": "Service misconfigured: invalid alphabet"})

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})
