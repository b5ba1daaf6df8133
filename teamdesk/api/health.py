import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from teamdesk.db.mongo import get_db

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get("/")
def root():
    return {"ok": True, "docs": "/docs"}


@router.get("/health")
async def health_check(db=Depends(get_db)):
    try:
        await db.command("ping")
    except Exception:
        logger.exception("Database ping failed")
        return JSONResponse(
            status_code=503,
            content={"status": "unhealthy", "database": "unreachable"},
        )
    return {"status": "healthy", "database": "connected"}
