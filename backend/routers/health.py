import time
from fastapi import APIRouter, Request

from config import VERSION

router = APIRouter()

_start_time = time.time()


@router.get("/health")
async def health_check(request: Request):
    table = getattr(request.app.state, "country_table", None)
    return {
        "status": "ok",
        "uptime_seconds": round(time.time() - _start_time),
        "version": VERSION,
        "countries": len(table) if table is not None else 0,
    }
