"""Bus catalog routes — plain CRUD over the buses table."""

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.ext.asyncio import AsyncSession

from zenith.db.engine import get_db
from zenith.db.models import Bus
from zenith.schemas.catalog import BusRead, BusWrite
from zenith.services.catalog_service import CatalogRepository

router = APIRouter(prefix="/buses")


def _repo(db: AsyncSession = Depends(get_db)) -> CatalogRepository[Bus]:
    return CatalogRepository(db, Bus)


@router.get("", response_model=list[BusRead])
@router.get("/", response_model=list[BusRead], include_in_schema=False)
async def list_buses(repo: CatalogRepository[Bus] = Depends(_repo)):
    return await repo.list_all()


@router.post("", response_model=BusRead, status_code=201)
async def add_bus(body: BusWrite, repo: CatalogRepository[Bus] = Depends(_repo)):
    return await repo.save(body.model_dump())


@router.get("/{bus_id}", response_model=BusRead)
async def get_bus(bus_id: int, repo: CatalogRepository[Bus] = Depends(_repo)):
    bus = await repo.get(bus_id)
    if not bus:
        raise HTTPException(status_code=404, detail="Bus not found")
    return bus


@router.put("/{bus_id}", response_model=BusRead)
async def update_bus(
    bus_id: int,
    body: BusWrite,
    repo: CatalogRepository[Bus] = Depends(_repo),
):
    """Replace every field of an existing bus."""
    bus = await repo.replace(bus_id, body.model_dump())
    if not bus:
        raise HTTPException(status_code=404, detail="Bus not found")
    return bus


@router.delete("/{bus_id}", status_code=204)
async def delete_bus(bus_id: int, repo: CatalogRepository[Bus] = Depends(_repo)):
    if not await repo.delete(bus_id):
        raise HTTPException(status_code=404, detail="Bus not found")
    return Response(status_code=204)
