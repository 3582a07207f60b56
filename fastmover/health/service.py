from typing import Any, Dict

from supabase import Client

from fastmover.config import PARCELS_TABLE, SUPABASE_URL
from fastmover.errors import UpstreamError
from fastmover.infra.supabase_client import execute


def ping(db: Client) -> None:
    """Lecture minimale pour vérifier que la base répond (lève UpstreamError sinon)."""
    execute(db.table(PARCELS_TABLE).select("id").limit(1), "Database ping failed")

def health_supabase_info(db: Client) -> Dict[str, Any]:
    info: Dict[str, Any] = {"url_configured": bool(SUPABASE_URL), "connect_ok": False}
    try:
        ping(db)
        info["connect_ok"] = True
    except UpstreamError as e:
        info["error"] = e.message
    return info
