"""
Mutant Finder FastAPI Wrapper

REST API for the mutant DNA classifier and its verdict statistics.
"""

from typing import List, Optional
from pydantic import BaseModel, Field
from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import argparse
import logging

from mutant_finder_core import (
    FinderConfig, DnaStatistics, InvalidGrid,
    CounterStore, SqlCounterStore, StatisticsAggregator, MutantFinderService
)
from mutant_finder_core.security import (
    RateLimiter, InputValidator, create_security_middleware
)

logger = logging.getLogger(__name__)


# =============================================================================
# API MODELS
# =============================================================================

class DnaRequest(BaseModel):
    """Request model for classifying a DNA table."""
    dna: Optional[List[Optional[str]]] = Field(
        default=None, description="Square table of bases, one string per row"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "dna": ["ATGCGA", "CAGTGC", "TTATGT", "AGAAGG", "CCCCTA", "TCACTG"]
            }
        }


class HealthResponse(BaseModel):
    """Response model for health check."""
    status: str
    store: str


class ConfigResponse(BaseModel):
    """Response model for the active classifier settings."""
    min_run: int
    alphabet: str
    max_grid_side: int


# =============================================================================
# APPLICATION
# =============================================================================

def create_app(
    store: Optional[CounterStore] = None,
    rate_limiter: Optional[RateLimiter] = None
) -> FastAPI:
    """Build the API around a counter store (SQL database from config by default)."""
    if store is None:
        store = SqlCounterStore(FinderConfig.DATABASE_URL)
    if rate_limiter is None:
        rate_limiter = RateLimiter()

    service = MutantFinderService(StatisticsAggregator(store))

    app = FastAPI(
        title="Mutant Finder API",
        description="Detects mutant DNA and reports verdict statistics",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc"
    )
    app.state.service = service
    app.state.store = store

    create_security_middleware(app, rate_limiter)

    @app.exception_handler(InvalidGrid)
    async def invalid_grid_handler(request: Request, exc: InvalidGrid):
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(RequestValidationError)
    async def bad_body_handler(request: Request, exc: RequestValidationError):
        logger.info(f"Malformed request body on {request.url.path}")
        return JSONResponse(status_code=400, content={"detail": "Malformed request body"})

    # =========================================================================
    # ENDPOINTS
    # =========================================================================

    @app.post("/mutant", tags=["DNA"], status_code=200,
              responses={403: {"description": "Human DNA"}, 400: {"description": "Invalid DNA"}})
    def check_for_mutant_dna(request: DnaRequest):
        """
        Classify a DNA table.

        200 for a mutant, 403 for a human, 400 for malformed input.
        """
        is_valid, error = InputValidator.validate_dna(request.dna)
        if not is_valid:
            raise HTTPException(status_code=413, detail=error)

        try:
            verdict = service.is_mutant(request.dna)
        except InvalidGrid:
            raise
        except Exception:
            logger.exception("Failed to classify or record DNA table")
            raise HTTPException(status_code=500, detail="Could not process DNA table")

        return Response(status_code=200 if verdict else 403)

    @app.get("/stats", response_model=DnaStatistics, tags=["DNA"])
    def get_request_statistics():
        """Counts of mutant and human verdicts plus their ratio (null until both are non-zero)."""
        try:
            return service.get_statistics()
        except Exception:
            logger.exception("Failed to read statistics")
            raise HTTPException(status_code=500, detail="Could not read statistics")

    @app.get("/health", response_model=HealthResponse, tags=["System"])
    async def health_check():
        """Check API health."""
        return HealthResponse(status="healthy", store=type(store).__name__)

    @app.get("/config", response_model=ConfigResponse, tags=["System"])
    async def get_config():
        """Get current classifier configuration."""
        return ConfigResponse(
            min_run=service.min_run,
            alphabet=FinderConfig.DNA_ALPHABET,
            max_grid_side=InputValidator.MAX_GRID_SIDE
        )

    return app


app = create_app()


# =============================================================================
# MAIN
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    parser = argparse.ArgumentParser(description="Run the Mutant Finder API")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args()

    logging.basicConfig(
        level=FinderConfig.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    uvicorn.run(app, host=args.host, port=args.port)
