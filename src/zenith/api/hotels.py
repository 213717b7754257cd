"""Hotel catalog routes.

Learn: GET /hotels accepts optional exact-match `name` and `location`
query params; with neither it lists everything.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from zenith.db.engine import get_db
from zenith.db.models import Hotel
from zenith.schemas.catalog import HotelRead, HotelWrite
from zenith.services.catalog_service import CatalogRepository

router = APIRouter(prefix="/hotels")


def _repo(db: AsyncSession = Depends(get_db)) -> CatalogRepository[Hotel]:
    return CatalogRepository(db, Hotel)


@router.get("", response_model=list[HotelRead])
async def list_hotels(
    name: Optional[str] = Query(None, description="Exact hotel name"),
    location: Optional[str] = Query(None, description="Exact location"),
    repo: CatalogRepository[Hotel] = Depends(_repo),
):
    return await repo.list_by(name=name, location=location)


@router.post("", response_model=HotelRead, status_code=201)
async def add_hotel(body: HotelWrite, repo: CatalogRepository[Hotel] = Depends(_repo)):
    return await repo.save(body.model_dump())
