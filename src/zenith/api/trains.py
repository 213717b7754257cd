"""Train catalog routes."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from zenith.db.engine import get_db
from zenith.db.models import Train
from zenith.schemas.catalog import TrainRead, TrainWrite
from zenith.services.catalog_service import CatalogRepository

router = APIRouter(prefix="/trains")


def _repo(db: AsyncSession = Depends(get_db)) -> CatalogRepository[Train]:
    return CatalogRepository(db, Train)


@router.get("", response_model=list[TrainRead])
async def list_trains(repo: CatalogRepository[Train] = Depends(_repo)):
    return await repo.list_all()


@router.post("", response_model=TrainRead, status_code=201)
async def add_train(body: TrainWrite, repo: CatalogRepository[Train] = Depends(_repo)):
    return await repo.save(body.model_dump())
