"""
Verified ideas routes - create, fetch one and fetch all
"""
import logging
from typing import Optional

from fastapi import APIRouter, Query, Request

from app.models.verified_idea import (
    CreateIdeaResponse,
    IdeaResponse,
    IdeaListResponse,
    ErrorResponse,
)
from app.services import idea_service
from app.utils.errors import IdeaError, InternalError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/fetch-verified-ideas", tags=["Verified Ideas"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.post(
    "",
    response_model=CreateIdeaResponse,
    responses={code: ERROR_RESPONSES[code] for code in (400, 500)},
)
async def create_verified_idea(request: Request):
    """Add a new idea"""
    try:
        payload = await request.json()
        data = await idea_service.create_idea(payload)
    except IdeaError:
        raise
    except Exception as exc:
        logger.exception("Error saving the data")
        raise InternalError() from exc
    return {"success": True, "data": data}


@router.get("", response_model=IdeaResponse, responses=ERROR_RESPONSES)
async def get_verified_idea(idea_id: Optional[str] = Query(None, alias="_id")):
    """Get a single idea by _id"""
    try:
        idea = await idea_service.fetch_idea(idea_id)
    except IdeaError:
        raise
    except Exception as exc:
        logger.exception("Error fetching the idea %s", idea_id)
        raise InternalError() from exc
    return {"success": True, "idea": idea}


@router.get("/all", response_model=IdeaListResponse, responses={500: ERROR_RESPONSES[500]})
async def get_all_verified_ideas():
    """Get all ideas (summary fields only)"""
    try:
        ideas = await idea_service.fetch_all_ideas()
    except IdeaError:
        raise
    except Exception as exc:
        logger.exception("Error fetching all ideas")
        raise InternalError() from exc
    return {"success": True, "ideas": ideas}
