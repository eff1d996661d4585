"""FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from src.adapters.passport import PassportConfig
from src.server.routers import health, auth
from src.server.settings import settings

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)


# FastAPI 생명주기 관리
@asynccontextmanager
async def lifespan(app: FastAPI):
    """앱 시작/종료 시 실행되는 코드"""
    logger.info("Starting application...")

    # passport 설정은 시작 시 한 번만 생성하여 요청마다 주입
    config = PassportConfig.from_settings(settings)
    if not config.is_complete():
        logger.warning("Passport configuration is incomplete; logins will fail")
    app.state.passport_config = config

    yield

    logger.info("Shutting down application...")


# Create FastAPI app
app = FastAPI(
    title="Passport Login Gateway",
    description="Forwards password-grant logins to the passport identity provider",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router)
app.include_router(auth.router)


@app.get("/")
async def root():
    """Root endpoint.

    Returns:
        Welcome message with API info
    """
    return {
        "message": "Passport Login Gateway API",
        "version": "1.0.0",
        "docs": "/docs"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "src.server.main:app",
        host=settings.SERVER_HOST,
        port=settings.SERVER_PORT,
        reload=True
    )
