import re
import unicodedata


def norm(s):
    if s is None:
        return ""
    s = unicodedata.normalize("NFD", str(s))
    s = "".join(ch for ch in s if unicodedata.category(ch) != "Mn")
    return re.sub(r"\s+", " ", s.lower()).strip()


def matches_query(query: str, *values) -> bool:
    """Búsqueda simple: la consulta normalizada aparece en alguno de los valores."""
    q = norm(query)
    if not q:
        return True
    return any(q in norm(v) for v in values)
