"""Tag API: usage counts and categories for every tag in use."""

from typing import Annotated

from fastapi import APIRouter, Depends

from portal.api.v1.dependencies import get_tag_summary_use_case
from portal.application.use_cases import GetTagSummaryUseCase
from portal.schemas.directory import TagInfoResponse, TagListResponse

router = APIRouter()


@router.get("", response_model=TagListResponse)
def list_tags(
    use_case: Annotated[GetTagSummaryUseCase, Depends(get_tag_summary_use_case)],
):
    """Tags sorted by usage count (query parameters are ignored)."""
    return TagListResponse(data=[TagInfoResponse.model_validate(t) for t in use_case.execute()])
