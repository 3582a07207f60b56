"""
Exceptions métier du service.
Chaque exception porte le code HTTP renvoyé par le gestionnaire global
(voir fastmover.app_setup.exceptions).
"""


class FastMoverError(Exception):
    status_code = 500

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message or self.__class__.__name__


class InvalidArgument(FastMoverError):
    """Identifiant mal formé ou champ requis manquant."""
    status_code = 400


class NotFound(FastMoverError):
    """Aucun document ne correspond."""
    status_code = 404


class UpstreamError(FastMoverError):
    """Échec de la base (Supabase) ou du processeur de paiement (Stripe)."""
    status_code = 500


class Conflict(FastMoverError):
    """Écriture refusée: contredit un enregistrement existant (ex: transactionId déjà utilisé)."""
    status_code = 409
