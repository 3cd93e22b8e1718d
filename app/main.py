import logging
import sys

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.core.config import settings
from app.db.init import init_db
from app.db.session import engine
from app.api import vegetables
from app.api.errors import register_exception_handlers
from app.auth.routes import router as auth_router

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s - %(message)s",
    stream=sys.stdout,
)
logging.getLogger("passlib").setLevel(logging.ERROR)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="agrimarket",
    description="Backend API connecting farmers and buyers",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Initialize database
@app.on_event("startup")
async def startup_event():
    init_db()
    logger.info("Database ready at %s", engine.url)

# Include routers
app.include_router(auth_router, prefix="/api", tags=["auth"])
app.include_router(vegetables.router, prefix="/api", tags=["vegetables"])

@app.get("/")
def read_root():
    return {"message": "Welcome to AgriMarket API"}

if __name__ == "__main__":
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info",
    )
