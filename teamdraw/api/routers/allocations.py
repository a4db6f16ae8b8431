# teamdraw/api/routers/allocations.py
"""
Allocation endpoints: draw balanced groups from a participant list.
"""
from typing import List, Optional

from fastapi import APIRouter, HTTPException
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field

from teamdraw.domain.errors import AllocationError
from teamdraw.domain.models import Category
from teamdraw.services.allocation_service import AllocationService, options_from_settings
from teamdraw.services.share_service import render_summary, share_links


router = APIRouter()


class ParticipantIn(BaseModel):
    name: str = ""
    score: Optional[int] = None
    category: Category = Category.A


class AllocationReq(BaseModel):
    participants: List[ParticipantIn] = Field(default_factory=list)
    group_count: Optional[int] = None
    group_size: Optional[int] = None
    seed: Optional[int] = None


def _run(req: AllocationReq):
    service = AllocationService(options_from_settings(random_seed=req.seed))
    try:
        return service.allocate_records(
            [p.model_dump() for p in req.participants],
            req.group_count,
            req.group_size,
        )
    except (AllocationError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/", summary="Draw balanced groups")
def create_allocation(req: AllocationReq):
    result = _run(req)
    text = render_summary(result)
    return {
        "result": result.model_dump(mode="json"),
        "summary": text,
        "share_links": share_links(text),
    }


@router.post("/summary", summary="Draw balanced groups and return the text summary", response_class=PlainTextResponse)
def create_allocation_summary(req: AllocationReq):
    return render_summary(_run(req))
