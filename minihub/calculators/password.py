# calculators/password.py
from __future__ import annotations

import secrets
import string
from typing import Dict, Optional

CHARSETS: Dict[str, str] = {
    "lower": string.ascii_lowercase,
    "upper": string.ascii_uppercase,
    "digits": string.digits,
    "symbols": "!@#$%^&*()_+~`|}{[]:;?><,./-=",
}


def build_alphabet(options: Dict[str, bool]) -> str:
    """Concatenate the enabled character sets in a stable order."""
    return "".join(chars for name, chars in CHARSETS.items() if options.get(name))


def generate_password(length: int,
                      lower: bool = True,
                      upper: bool = True,
                      digits: bool = True,
                      symbols: bool = False,
                      rng=None) -> str:
    """Return a password of ``length`` characters drawn uniformly with replacement.

    ``rng`` only needs a ``choice`` method; the OS-backed
    :class:`secrets.SystemRandom` is used when it is omitted.  An empty
    string is returned when no character set is enabled or ``length < 1``.
    """
    alphabet = build_alphabet(
        {"lower": lower, "upper": upper, "digits": digits, "symbols": symbols}
    )
    if not alphabet or length < 1:
        return ""
    rng = rng or secrets.SystemRandom()
    return "".join(rng.choice(alphabet) for _ in range(int(length)))


def toggle_option(options: Dict[str, bool], name: str, checked: bool) -> Dict[str, bool]:
    """Return ``options`` with ``name`` set to ``checked``.

    Unchecking the last enabled set is refused and the previous options are
    returned unchanged, so at least one set is always active.
    """
    updated = {**options, name: bool(checked)}
    if not any(updated.values()):
        return dict(options)
    return updated


def enabled(options: Optional[Dict[str, bool]]) -> bool:
    return bool(options) and any(options.values())


__all__ = ["CHARSETS", "build_alphabet", "generate_password", "toggle_option", "enabled"]
