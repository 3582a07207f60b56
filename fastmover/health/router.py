from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from supabase import Client

from fastmover.health.service import health_supabase_info
from fastmover.infra.supabase_client import get_db

router = APIRouter(prefix="/health", tags=["Health"])

@router.get("")
def health_root():
    return {"ok": True}

@router.get("/supabase")
def health_supabase(db: Client = Depends(get_db)):
    return JSONResponse(health_supabase_info(db))
