"""
Boolean codec

XMLTV flags are written as "yes"/"no", except for elements whose bare
presence is the flag.
"""

# Elements whose presence means true: text is dropped on encode and ignored on decode.
PRESENCE_ONLY_ELEMENTS = frozenset({"new"})


def encode_attribute(value: bool | None, name: str) -> str | None:
    """Return 'yes'/'no', or None to omit the attribute"""
    if value is None:
        return None
    return "yes" if value else "no"


def encode_element(value: bool | None, name: str) -> str | None:
    """Return element text, or None to omit the element"""
    if value is None:
        return None
    if name in PRESENCE_ONLY_ELEMENTS:
        return ""
    return "yes" if value else "no"


def decode_attribute(text: str, name: str) -> bool:
    return text == "yes"


def decode_element(text: str, name: str) -> bool:
    if name in PRESENCE_ONLY_ELEMENTS:
        return True
    return text == "yes"
