# fastmover.config
from pathlib import Path
import os
from dotenv import load_dotenv

# Calculer le chemin du projet puis charger .env de manière explicite
BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PATH = BASE_DIR / ".env"
load_dotenv(dotenv_path=ENV_PATH, override=False)

"""
Configuration centrale du service.

- Charge le fichier .env à la racine du projet (BASE_DIR/.env) sans écraser l'environnement du process
- Normalise et expose les secrets/URLs (Supabase, Stripe)
- Expose les réglages serveur (port, logs, CORS) et les noms de tables
"""

def _clean_env(v: str) -> str:
    """
    Nettoie une valeur d'environnement:
    - supprime les espaces et guillemets (simples, doubles) et backticks
    - retourne toujours une chaîne (jamais None)
    """
    return (v or "").strip().strip("'").strip('"').strip("`")

# Supabase: URL du projet et clé serveur
# - SUPABASE_URL peut parfois être sans schéma: on préfixe en https:// si nécessaire
# - La clé service est préférée (le backend écrit sans passer par la RLS)
SUPABASE_URL = _clean_env(os.getenv("SUPABASE_URL") or "")
SUPABASE_KEY = _clean_env(os.getenv("SUPABASE_SERVICE_KEY") or os.getenv("SUPABASE_KEY") or "")

if SUPABASE_URL and not SUPABASE_URL.startswith("http"):
    SUPABASE_URL = "https://" + SUPABASE_URL
if SUPABASE_URL.endswith("/"):
    SUPABASE_URL = SUPABASE_URL.rstrip("/")

PARCELS_TABLE = _clean_env(os.getenv("PARCELS_TABLE") or "parcels")
PAYMENTS_TABLE = _clean_env(os.getenv("PAYMENTS_TABLE") or "payments")

# Stripe: clé secrète et devise des payment intents
STRIPE_SECRET_KEY = _clean_env(os.getenv("STRIPE_SECRET_KEY") or "")
PAYMENT_CURRENCY = _clean_env(os.getenv("PAYMENT_CURRENCY") or "usd").lower()

# CORS (le front tourne sur un autre domaine)
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

# Serveur
PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "info").lower()
UVICORN_RELOAD = os.getenv("UVICORN_RELOAD", "").lower() in ("1", "true", "yes")

WELCOME_BANNER = "Welcome to parcel World!"
