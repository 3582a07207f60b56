"""Feature 'parcels': CRUD des colis (repository, service, vues)."""
