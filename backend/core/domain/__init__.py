"""
core.domain — Shared domain utilities for cross-app service layers.

Modules
-------
exceptions         Domain-specific exceptions that map cleanly to HTTP responses.
exception_handler  Global DRF handler turning those exceptions into ``{message}``.
store              ``ResourceStore`` capability shape shared by every resource.
references         Human-readable reference numbers (``OB-2025-7KQ2ZD``).
geo                Planar distance helpers for location search.

Usage from any app::

    from core.domain.exceptions import DomainError, NotFound
    from core.domain.store import ResourceStore
    from core.domain.references import generate_reference_number
    from core.domain.geo import planar_distance_m
"""
