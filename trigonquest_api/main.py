"""
FastAPI backend for TrigonQuest.

Exposes the question source and the submit-answer boundary:
- Listing questions
- Validating a drawn construction
"""

import json
from contextlib import asynccontextmanager
from typing import List

from fastapi import FastAPI, Depends, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError

from trigonquest.schema import Question, UserAnswer, ValidationResult

from .core import (
    settings,
    setup_logging,
    get_logger,
    register_error_handlers,
    InvalidAnswerError,
)
from .core.errors import jsonable_errors
from .repositories import get_question_repository
from .services import QuestionService, ValidationService

# Setup logging
setup_logging()
logger = get_logger(__name__)


# Lifecycle management
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management"""
    logger.info(
        "Starting TrigonQuest API",
        extra_data={
            "environment": settings.ENVIRONMENT,
            "debug": settings.DEBUG
        }
    )
    # Fail fast on a broken question bank
    get_question_repository()
    yield
    logger.info("Shutting down TrigonQuest API")


app = FastAPI(
    title=settings.APP_NAME,
    description="REST API for geometry construction questions and answer validation",
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan
)

register_error_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=settings.CORS_ALLOW_METHODS,
    allow_headers=settings.CORS_ALLOW_HEADERS,
)


# Dependency injection
def get_question_service_dep() -> QuestionService:
    """Get question service instance"""
    return QuestionService(get_question_repository())


def get_validation_service_dep() -> ValidationService:
    """Get validation service instance"""
    return ValidationService(get_question_repository())


# API Routes

@app.get("/")
async def read_root():
    """API root endpoint"""
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "endpoints": {
            "questions": f"{settings.API_PREFIX}/questions",
            "question": f"{settings.API_PREFIX}/questions/{{question_id}}",
            "validate": f"{settings.API_PREFIX}/validate",
            "health": "/health"
        }
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT
    }


@app.get(
    f"{settings.API_PREFIX}/questions",
    response_model=List[Question],
    response_model_exclude_none=True,
)
async def list_questions(
    service: QuestionService = Depends(get_question_service_dep)
):
    """List all questions in presentation order"""
    return await service.list_questions()


@app.get(
    f"{settings.API_PREFIX}/questions/{{question_id}}",
    response_model=Question,
    response_model_exclude_none=True,
)
async def get_question(
    question_id: str,
    service: QuestionService = Depends(get_question_service_dep)
):
    """
    Get a question by ID.

    Args:
        question_id: Question identifier

    Returns:
        The question with its given geometry
    """
    return await service.get_question(question_id)


@app.post(
    f"{settings.API_PREFIX}/validate",
    response_model=ValidationResult,
    response_model_exclude_none=True,
)
async def validate_answer(
    request: Request,
    service: ValidationService = Depends(get_validation_service_dep)
):
    """
    Validate a drawn construction.

    Any body that is not a well-formed answer is rejected with 400 before it
    reaches the validators.

    Returns:
        Validation verdict with message and optional hint
    """
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidAnswerError([{"type": "json_invalid", "loc": ["body"], "msg": str(e)}]) from e

    try:
        answer = UserAnswer.model_validate(payload)
    except ValidationError as e:
        raise InvalidAnswerError(jsonable_errors(e.errors())) from e

    return await service.validate_answer(answer)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "trigonquest_api.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )
