from studyplanner.errors import InvalidIdentifierError

def coerce_id(value, kind: str = "record") -> int:
    """Validate the shape of a record id and return it as an int"""
    if isinstance(value, bool):
        raise InvalidIdentifierError(value, kind)
    if isinstance(value, str):
        value = value.strip()
        if not value.isdigit():
            raise InvalidIdentifierError(value, kind)
        value = int(value)
    if not isinstance(value, int) or value <= 0:
        raise InvalidIdentifierError(value, kind)
    return value
