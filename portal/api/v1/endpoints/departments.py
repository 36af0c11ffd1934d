"""Department API: member and content counts per department."""

from typing import Annotated

from fastapi import APIRouter, Depends

from portal.api.v1.dependencies import get_department_summary_use_case
from portal.application.use_cases import GetDepartmentSummaryUseCase
from portal.schemas.directory import DepartmentInfoResponse, DepartmentListResponse

router = APIRouter()


@router.get("", response_model=DepartmentListResponse)
def list_departments(
    use_case: Annotated[GetDepartmentSummaryUseCase, Depends(get_department_summary_use_case)],
):
    """Departments sorted by member count (query parameters are ignored)."""
    return DepartmentListResponse(
        data=[DepartmentInfoResponse.model_validate(d) for d in use_case.execute()]
    )
