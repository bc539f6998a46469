import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from gacha.config import get_settings
from gacha.errors import InvariantViolation, ParseError
from gacha.routes import draws, entries, simulation

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=get_settings().log_level.upper(),
)
logger = logging.getLogger(__name__)


app = FastAPI(
    title="Pity Gacha API",
    description="Weighted Common/Rare draws with a pity guarantee and a bounded draw history.",
    version="1.0.0",
)

app.include_router(entries.router)
app.include_router(draws.router)
app.include_router(simulation.router)


# ============================================================
# ERROR HANDLERS
# ============================================================

@app.exception_handler(ParseError)
async def parse_error_handler(request: Request, exc: ParseError):
    logger.error("Refusing to use unreadable snapshot: %s", exc)
    return JSONResponse(
        status_code=500,
        content={"detail": "Stored catalog snapshot is unreadable", "error": str(exc)},
    )


@app.exception_handler(InvariantViolation)
async def invariant_error_handler(request: Request, exc: InvariantViolation):
    logger.exception("Draw invariant broken")
    return JSONResponse(status_code=500, content={"detail": str(exc)})


# ============================================================
# HEALTH CHECK
# ============================================================

@app.get("/health", tags=["Health"], response_model=dict)
def health_check():
    return {"status": "ok"}
