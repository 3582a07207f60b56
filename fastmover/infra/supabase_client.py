"""
Client Supabase du service.
- Construit une seule fois au démarrage (lifespan) puis stocké sur app.state.
- Injecté dans les vues via la dépendance get_db (pas d'instance globale).
- execute(): exécute une requête PostgREST et traduit les erreurs en UpstreamError.
"""
import logging
from typing import Any, Optional

import httpx
from fastapi import Request
from postgrest.exceptions import APIError
from supabase import Client, create_client

from fastmover.config import SUPABASE_URL, SUPABASE_KEY
from fastmover.errors import Conflict, UpstreamError

logger = logging.getLogger(__name__)


def create_supabase_client(url: Optional[str] = None, key: Optional[str] = None) -> Client:
    url = url or SUPABASE_URL
    key = key or SUPABASE_KEY
    if not url or not key:
        raise RuntimeError("SUPABASE_URL/SUPABASE_SERVICE_KEY manquants")
    return create_client(url, key)


def close_supabase_client(client: Any) -> None:
    """Ferme la session HTTP PostgREST sous-jacente (arrêt du process)."""
    postgrest = getattr(client, "postgrest", None)
    session = getattr(postgrest, "session", None)
    if session is not None:
        session.close()


def get_db(request: Request) -> Client:
    """Dépendance FastAPI: renvoie le client ouvert par le lifespan."""
    client = getattr(request.app.state, "supabase", None)
    if client is None:
        raise UpstreamError("Database unavailable")
    return client


# Violation de contrainte d'unicité (Postgres)
UNIQUE_VIOLATION = "23505"


def execute(query, message: str):
    """
    Exécute un builder PostgREST.
    - Violation d'unicité: Conflict(message), l'appelant décide s'il s'agit d'un doublon.
    - Toute autre erreur API/réseau est journalisée puis relevée en UpstreamError(message).
    """
    try:
        return query.execute()
    except APIError as e:
        if getattr(e, "code", None) == UNIQUE_VIOLATION:
            logger.info("supabase unique violation: %s (%s)", message, getattr(e, "details", None))
            raise Conflict(message) from e
        logger.exception("supabase query failed: %s", message)
        raise UpstreamError(message) from e
    except httpx.HTTPError as e:
        logger.exception("supabase query failed: %s", message)
        raise UpstreamError(message) from e
