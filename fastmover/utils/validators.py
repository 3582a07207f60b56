from uuid import UUID

from fastmover.errors import InvalidArgument


def ensure_uuid(value: str, label: str = "ID") -> str:
    """Vérifie qu'un identifiant est un UUID bien formé et renvoie sa forme canonique."""
    try:
        return str(UUID(str(value or "")))
    except ValueError:
        raise InvalidArgument(f"Invalid {label}")
