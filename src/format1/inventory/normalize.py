"""Token normalizers shared by the section parsers."""

import re

_SIZE_RE = re.compile(r"([0-9]+)\s*([kmgt]b)?", re.IGNORECASE)


def trim(text: str) -> str:
    """Strip leading and trailing whitespace."""
    return text.strip()


def unquote(text: str) -> str:
    """Remove one pair of surrounding double quotes, if present.

    Embedded or escaped quotes are left alone.
    """
    if len(text) >= 2 and text.startswith('"') and text.endswith('"'):
        return text[1:-1]
    return text


def parse_size(token: str) -> str:
    """Normalize a size token such as ``16GB`` or ``1 gb``.

    The unit is matched case-insensitively but kept as written. Tokens that
    don't look like a size are returned unchanged.
    """
    m = _SIZE_RE.fullmatch(trim(token))
    if not m:
        return token
    return m.group(1) + (m.group(2) or "")
