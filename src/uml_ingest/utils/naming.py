"""Name normalization shared by the type registry and the builders."""


def capitalize(name: str) -> str:
    """Upper-case the first character, leaving the rest untouched.

    ``capitalize("zonedDateTime") == "ZonedDateTime"``, unlike ``str.capitalize``
    which would lower-case the tail.
    """
    if not name:
        return name
    return name[0].upper() + name[1:]


def decapitalize(name: str) -> str:
    """Lower-case the first character, leaving the rest untouched."""
    if not name:
        return name
    return name[0].lower() + name[1:]
