"""Health check endpoint."""

from fastapi import APIRouter, Depends
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from auditline.adapters.persistence.database import get_session
from auditline.adapters.persistence.models import AddendumModel, LetterModel

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(session: AsyncSession = Depends(get_session)):
    """Database connectivity plus the size of the letter / addendum snapshot."""
    counts: dict[str, int] = {}
    try:
        counts["letters"] = (await session.execute(select(func.count(LetterModel.id)))).scalar_one()
        counts["addendums"] = (await session.execute(select(func.count(AddendumModel.id)))).scalar_one()
        db_status = "connected"
    except Exception as e:
        db_status = f"error: {e}"

    return {
        "status": "ok" if db_status == "connected" else "degraded",
        "database": db_status,
        "records": counts,
        "service": "Auditline - Auditor Timeline",
    }
