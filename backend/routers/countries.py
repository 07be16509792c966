from fastapi import APIRouter, Depends, Query, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.country import CountryResponse
from services.country_service import CountryTable
from services.lookup_service import resolve

router = APIRouter(tags=["countries"])

limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


def get_country_table(request: Request) -> CountryTable:
    return request.app.state.country_table


@router.get("/getCountry", response_model=CountryResponse)
@limiter.limit(settings.rate_limit)
async def get_country(
    request: Request,
    based: str = Query(..., description="Comma-separated country names, or 'all'"),
    table: CountryTable = Depends(get_country_table),
):
    return CountryResponse(results=resolve(based, table))
