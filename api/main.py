"""
Main API application
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from api.validation_api import router as validation_router
from api.question_api import router as question_router
from api.attempt_api import router as attempt_router
from api.shared import get_question_repository, get_intake_service, ALLOW_RESUBMISSION

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup và shutdown events"""
    logger.info("Starting server - Loading question bank...")

    try:
        repository = get_question_repository()
        logger.info("Loaded %d questions", len(repository))

        get_intake_service()
        logger.info("Response intake ready (allow_resubmission=%s)", ALLOW_RESUBMISSION)
    except Exception:
        logger.exception("Error loading question bank")
        raise

    yield

    # Shutdown
    logger.info("Shutting down server...")


app = FastAPI(
    title="Exercise Answer Validation API",
    description="API chấm câu trả lời cho các bộ bài tập (exercise sets) qua LTI",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(validation_router)
app.include_router(question_router)
app.include_router(attempt_router)


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "Exercise Answer Validation API",
        "version": "1.0.0",
        "docs": "/docs"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
