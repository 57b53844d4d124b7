from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from dialysis_records.auth import AccountPrincipal, get_current_user
from dialysis_records.database import get_db
from dialysis_records.models.equipment import EquipmentMaintenanceRecord
from dialysis_records.schemas.equipment import MaintenanceCreate, MaintenanceResponse
from dialysis_records.services.records import save_record

router = APIRouter()


@router.post("/maintenance", status_code=201)
async def add_maintenance_record(
    data: MaintenanceCreate,
    db: AsyncSession = Depends(get_db),
    current_user: AccountPrincipal = Depends(get_current_user),
):
    record = EquipmentMaintenanceRecord(created_by=current_user.id, **data.to_columns())
    await save_record(db, record, "maintenance record")
    return {
        "message": "Equipment Maintenance Record saved successfully.",
        "record": MaintenanceResponse.model_validate(record),
    }


@router.get("/maintenance", response_model=list[MaintenanceResponse])
async def list_maintenance_records(
    db: AsyncSession = Depends(get_db),
    current_user: AccountPrincipal = Depends(get_current_user),
):
    # Equipment is shared clinic-wide, so the log is not filtered by account
    result = await db.execute(
        select(EquipmentMaintenanceRecord).order_by(
            EquipmentMaintenanceRecord.maintenance_date.desc(),
            EquipmentMaintenanceRecord.recorded_at.desc(),
            EquipmentMaintenanceRecord.id.desc(),
        )
    )
    return [MaintenanceResponse.model_validate(r) for r in result.scalars().all()]
