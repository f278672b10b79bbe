import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from .config import CORS_ORIGINS, LOG_FILE, LOG_LEVEL
from .database import create_tables
from .logging_setup import setup_logging
from .routers import tasks

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Task Tracker API",
    description="Personal task tracker with filtering, sorting, search and statistics",
    version="1.0.0"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(tasks.router, prefix="/api", tags=["tasks"])

# Create tables on startup
@app.on_event("startup")
def on_startup():
    setup_logging(level=LOG_LEVEL, log_file=LOG_FILE)
    create_tables()
    logger.info("Task Tracker API ready")

@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Database error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Database error"},
    )

@app.get("/")
def read_root():
    return {"message": "Task Tracker API"}

@app.get("/health")
def health_check():
    return {"status": "healthy"}
