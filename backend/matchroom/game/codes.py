from __future__ import annotations

import re
import secrets
import string

CODE_ALPHABET = string.ascii_uppercase + string.digits
CODE_LENGTH = 6

_CODE_RE = re.compile(r"^[A-Z0-9]{6}$")


def generate_code() -> str:
    """Return a 6-char join code like "A9K4ZT".

    Uniqueness is the registry's problem: it checks the code against the
    rooms it holds and asks again on a collision.
    """
    return "".join(secrets.choice(CODE_ALPHABET) for _ in range(CODE_LENGTH))


def normalize_code(raw: str | None) -> str:
    return (raw or "").strip().upper()


def is_valid_code(code: str) -> bool:
    return bool(_CODE_RE.fullmatch(code or ""))
