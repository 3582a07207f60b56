"""fastmover: API colis et paiements (FastAPI, Supabase, Stripe)."""

__version__ = "1.0.0"
