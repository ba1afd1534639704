from fastapi import APIRouter

from ..measurement.catalog import UNIT_DEFINITIONS

router = APIRouter()


@router.get("/ready")
def ready():
    return {"ok": True, "units": len(UNIT_DEFINITIONS)}
