from datetime import UTC, datetime

from fastapi import APIRouter
from pydantic import BaseModel

router = APIRouter(tags=["Health"])


class HealthResponse(BaseModel):
    status: str
    timestamp: str


@router.get("/health", response_model=HealthResponse)
async def health():
    """Liveness probe"""
    return HealthResponse(status="OK", timestamp=datetime.now(UTC).isoformat())
