from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

load_dotenv()

from app.config import get_settings
from app.core.logging import configure_logging
from app.routers.health import router as health_router
from app.routers.ieop import router as ieop_router

settings = get_settings()
configure_logging(settings)


# SWAGGER UI - tag display order
_OPENAPI_TAGS = [
    {"name": "Root"},
    {"name": "Health"},
    {"name": "IEOP"},
]

# FASTAPI APPLICATION CONFIGURATION
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    openapi_tags=_OPENAPI_TAGS,
)

app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])

# REGISTER ROUTERS (order matches _OPENAPI_TAGS / Swagger UI display order)
app.include_router(health_router)                                   # Health
app.include_router(ieop_router, prefix=settings.API_V1_PREFIX)      # IEOP


@app.get("/", tags=["Root"])
async def root():
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/docs",
        "endpoints": {
            "projects": f"{settings.API_V1_PREFIX}/ieop/projects",
            "summary": f"{settings.API_V1_PREFIX}/ieop/summary",
            "score": f"{settings.API_V1_PREFIX}/ieop/score",
            "methodology": f"{settings.API_V1_PREFIX}/ieop/methodology",
            "dataset": f"{settings.API_V1_PREFIX}/ieop/dataset",
        },
    }


# RUN WITH UVICORN
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
