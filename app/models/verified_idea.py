"""
Verified idea model and schemas
"""
from pydantic import BaseModel, Field
from typing import Optional, List, Dict, Any

# Fields every submission must carry, in the order they are checked
REQUIRED_FIELDS = (
    "id",
    "address",
    "timestamp",
    "ideaOwner",
    "contactEmail",
    "ideaName",
    "ideaDescription",
    "category",
    "proofOfConcept",
    "supportingDocuments",
    "expectedOutcome",
    "currentStage",
)

# Stored only when the client sends them
OPTIONAL_FIELDS = ("contributors",)

# Fields returned by the list endpoint (_id is included by MongoDB)
SUMMARY_FIELDS = (
    "ideaOwner",
    "ideaName",
    "ideaDescription",
    "timestamp",
    "category",
    "currentStage",
)

IDEA_SUMMARY_PROJECTION = {field: 1 for field in SUMMARY_FIELDS}


class IdeaSummary(BaseModel):
    id: str = Field(alias="_id")
    # Stored values are only checked for presence, not type
    ideaOwner: Optional[Any] = None
    ideaName: Optional[Any] = None
    ideaDescription: Optional[Any] = None
    timestamp: Optional[Any] = None
    category: Optional[Any] = None
    currentStage: Optional[Any] = None

    class Config:
        populate_by_name = True


class InsertResult(BaseModel):
    acknowledged: bool
    insertedId: str


class CreateIdeaResponse(BaseModel):
    success: bool = True
    data: InsertResult


class IdeaResponse(BaseModel):
    success: bool = True
    idea: Dict[str, Any]


class IdeaListResponse(BaseModel):
    success: bool = True
    ideas: List[IdeaSummary]


class ErrorResponse(BaseModel):
    error: str
