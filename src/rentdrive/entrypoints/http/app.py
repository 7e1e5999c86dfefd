from fastapi import FastAPI

from rentdrive.entrypoints.http.exception_handlers import register_exception_handlers
from rentdrive.entrypoints.http.routes.bookings import router as bookings_router
from rentdrive.entrypoints.http.routes.catalog import router as catalog_router
from rentdrive.entrypoints.http.routes.health import router as health_router
from rentdrive.entrypoints.http.routes.vehicles import router as vehicles_router


def build_app() -> FastAPI:
    app = FastAPI(
        title="RentDrive Catalog API",
        description="""
        Vehicle rental catalog API: browse and filter the fleet, request a booking.

        ## Features
        - Filter the catalog by vehicle class, daily rate and seat count
        - Filter facets for building the sidebar controls
        - Featured vehicles and vehicle details
        - Booking request acknowledgment (no reservation is made)

        ## Authentication
        None. The catalog is public.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
        contact={
            "name": "RentDrive Team",
            "email": "hello@rentdrive.com",
        },
        license_info={
            "name": "Proprietary",
        },
    )

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(vehicles_router, prefix="/v1")
    app.include_router(catalog_router, prefix="/v1")
    app.include_router(bookings_router, prefix="/v1")

    return app


app = build_app()
