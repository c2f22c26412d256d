from fastapi import APIRouter
from datetime import datetime, timezone

router = APIRouter(tags=["Debug"])


@router.get("/debug")
async def debug():
    return {
        "status": "ok",
        "message": "API is working",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
