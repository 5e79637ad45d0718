
def to_uppercase(value: str | None) -> str | None:
    """
    Converts a string to uppercase if it's not None.
    """
    if value is None:
        return None
    return value.upper()

def to_lowercase(value: str | None) -> str | None:
    """
    Converts a string to lowercase if it's not None.
    """
    if value is None or not isinstance(value, str):
        return value
    return value.lower()

def split_names(value: str | None) -> list[str]:
    """
    Split a comma-separated setting into trimmed, non-empty names, keeping order.

    "postgresql, sqlserver,," -> ["postgresql", "sqlserver"]
    """
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]
