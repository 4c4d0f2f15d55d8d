"""
Core constants — **Single Source of Truth** for project-wide magic values.

Any business rule that references one of these values should import it
from here instead of hardcoding.  This avoids drift between apps that use
the same value.
"""

# ── User management ─────────────────────────────────────────────────
# The bootstrap administrator account always carries primary key 1 and
# may never be deleted through the API.
PROTECTED_USER_ID: int = 1

# ── Reference numbers ───────────────────────────────────────────────
# Human-readable numbers look like ``OB-2025-7KQ2ZD``: prefix, year of
# issue, then a random upper-case alphanumeric suffix of this length.
REFERENCE_SUFFIX_LENGTH: int = 6

CASE_NUMBER_PREFIX: str = "CASE"
OB_NUMBER_PREFIX: str = "OB"
EVIDENCE_NUMBER_PREFIX: str = "EV"
REPORT_NUMBER_PREFIX: str = "RPT"

# ── Occurrence book ─────────────────────────────────────────────────
# Shown for OB entries recorded without a named officer.
OB_OFFICER_PLACEHOLDER: str = "Unassigned Officer"

# ── Geofile location search ─────────────────────────────────────────
# Radius (metres) used when the caller does not supply one.
DEFAULT_SEARCH_RADIUS_M: float = 1000.0

# ── Identifiers ─────────────────────────────────────────────────────
# Largest value a signed 64-bit integer column can hold.  Advisory
# references and sizes above it are rejected as invalid input.
MAX_STORED_INTEGER: int = 2**63 - 1
