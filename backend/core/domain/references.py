"""
core.domain.references — Human-readable reference numbers.

Records carry a printable number next to their opaque id so officers can
quote them over the radio or on paper, e.g. ``OB-2025-7KQ2ZD``.
"""

from __future__ import annotations

import secrets
import string

from django.utils import timezone

from core.constants import REFERENCE_SUFFIX_LENGTH

_ALPHABET = string.ascii_uppercase + string.digits


def generate_reference_number(prefix: str, *, length: int = REFERENCE_SUFFIX_LENGTH) -> str:
    """Return ``<prefix>-<current year>-<random suffix>``."""
    suffix = "".join(secrets.choice(_ALPHABET) for _ in range(length))
    return f"{prefix}-{timezone.now().year}-{suffix}"
