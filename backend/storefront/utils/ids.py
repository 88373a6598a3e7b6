import re

_INVISIBLE = ("\u200b", "\u200c", "\u200d", "\ufeff", "\xa0")
_RESERVED = re.compile(r"^__.*__$")
MAX_ID_BYTES = 1500


def clean_id(value: str) -> str:
    """
    Normalize an owner / product id and make sure Firestore accepts it as a document id.
    Raises ValueError (pydantic validators and the cart service both build on this).
    """
    v = value or ""
    for ch in _INVISIBLE:
        v = v.replace(ch, "")
    v = v.strip()
    if not v:
        raise ValueError("identifier cannot be empty")
    if "/" in v:
        raise ValueError("identifier cannot contain '/'")
    if v in (".", ".."):
        raise ValueError("identifier cannot be '.' or '..'")
    if _RESERVED.match(v):
        raise ValueError("identifier cannot match __.*__")
    if len(v.encode("utf-8")) > MAX_ID_BYTES:
        raise ValueError(f"identifier cannot exceed {MAX_ID_BYTES} bytes")
    return v
