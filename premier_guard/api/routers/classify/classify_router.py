"""
Classification API endpoint.

Routes:
- POST / - Classify a message as referencing a Premier League team or not

Dependencies: premier_guard.application, premier_guard.configs
System role: Message classification HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from premier_guard.api.deps.dependencies import (
    get_settings_dependency,
    get_team_classifier,
)
from premier_guard.application.classifier_service import TeamClassifier
from premier_guard.configs import Settings
from premier_guard.models.common import ErrorResponse
from premier_guard.models.verdict import Verdict

from .classify_error_handling import handle_classification_errors
from .classify_validators import extract_message, parse_body, validate_content_type

logger = logging.getLogger(__name__)

router = APIRouter(tags=["classify"])


@router.post(
    "/",
    response_model=None,
    responses={
        200: {"model": Verdict},
        400: {"model": ErrorResponse},
        406: {"model": ErrorResponse},
        413: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
@handle_classification_errors
async def classify_message(
    request: Request,
    classifier: TeamClassifier = Depends(get_team_classifier),
    settings: Settings = Depends(get_settings_dependency),
) -> JSONResponse:
    """
    Classify a message.

    Args:
        request: Raw request with JSON body {"message": str}
        classifier: Injected TeamClassifier
        settings: Injected application settings

    Returns:
        JSONResponse: {"isPremierLeague", "score", "flaggedFor"?}

    Raises:
        HTTP 406: Body is not JSON
        HTTP 400: Message missing
        HTTP 413: Message too long
        HTTP 500: Classification failed
    """
    content_type = request.headers.get("content-type")
    validate_content_type(content_type)

    body = parse_body(await request.body(), content_type)
    message = extract_message(body, settings.classifier.max_message_length)

    logger.info("Classifying message", extra={"message_length": len(message)})

    verdict = await classifier.classify(message)
    return JSONResponse(verdict.to_response())
