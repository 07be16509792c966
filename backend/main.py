import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from config import VERSION, settings
from exceptions import DataSourceError
from routers import countries, health
from services import country_service
from services.country_service import CountryTable

logger = logging.getLogger(__name__)
logging.basicConfig(level=settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if app.state.country_table is None:
        try:
            app.state.country_table = country_service.load(settings.country_data_path)
        except DataSourceError as e:
            logger.error("Cannot start without country data: %s", e.message)
            raise
    logger.info("Country Lookup API is running with %d countries", len(app.state.country_table))
    yield


def create_app(table: CountryTable | None = None) -> FastAPI:
    """Build the app; without a table, one is loaded from settings at startup."""
    app = FastAPI(title="Country Lookup", version=VERSION, lifespan=lifespan)

    app.state.limiter = countries.limiter
    app.state.country_table = table
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(countries.router)

    @app.get("/")
    async def root():
        return {
            "name": "Country Lookup API",
            "version": VERSION,
            "endpoints": ["/health", "/getCountry"],
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
