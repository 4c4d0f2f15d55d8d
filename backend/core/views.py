"""
Core app views — the shared resource pipeline.

Every resource endpoint in the project follows the same thin-view flow::

    received → authenticated? → validated → persisted → normalised → responded

``ResourceViewSet`` implements that flow once.  Each app subclasses it,
points it at its serializer, its filter serializer and its store
(``core.domain.store.ResourceStore`` subclass), and adds any custom
``@action`` endpoints.  Views never touch the ORM directly; domain
errors raised by the store are turned into ``{message}`` responses by the
global exception handler.

Response envelopes
------------------
Single objects are wrapped as ``{"<singular>": {...}}`` and collections
as ``{"<plural>": [...]}``; deletes answer ``{"message": ...}``.
"""

from __future__ import annotations

from typing import Any

from rest_framework import status, viewsets
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response

from core.domain.store import ResourceStore


class ResourceViewSet(viewsets.GenericViewSet):
    """
    Base ViewSet wiring validate → store → normalise → respond.

    Subclasses must set:
        ``serializer_class``         read/write serializer for the resource
        ``store``                    ``ResourceStore`` subclass
        ``singular`` / ``plural``    response envelope keys

    and may set ``filter_serializer_class`` to validate list query
    parameters.

    ``PUT`` and ``PATCH`` both merge only the submitted fields.
    """

    permission_classes = [IsAuthenticated]
    lookup_value_regex = r"\d+"

    store: type[ResourceStore]
    filter_serializer_class = None
    singular: str = "item"
    plural: str = "items"

    # ── Helpers ──────────────────────────────────────────────────────

    def get_queryset(self):
        return self.store.get_queryset()

    def envelope(self, instance: Any, *, many: bool = False) -> dict[str, Any]:
        serializer = self.get_serializer(instance, many=many)
        return {self.plural if many else self.singular: serializer.data}

    def get_filters(self, request: Request) -> dict[str, Any]:
        if self.filter_serializer_class is None:
            return {}
        filter_serializer = self.filter_serializer_class(data=request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        return dict(filter_serializer.validated_data)

    # ── Standard CRUD ────────────────────────────────────────────────

    def list(self, request: Request) -> Response:
        queryset = self.store.list(self.get_filters(request))
        return Response(self.envelope(queryset, many=True), status=status.HTTP_200_OK)

    def create(self, request: Request) -> Response:
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        instance = self.store.create(
            dict(serializer.validated_data),
            requesting_user=request.user,
        )
        return Response(self.envelope(instance), status=status.HTTP_201_CREATED)

    def retrieve(self, request: Request, pk: str = None) -> Response:
        instance = self.store.get(pk)
        return Response(self.envelope(instance), status=status.HTTP_200_OK)

    def update(self, request: Request, pk: str = None) -> Response:
        instance = self.store.get(pk)
        serializer = self.get_serializer(instance, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        instance = self.store.update(instance, dict(serializer.validated_data))
        return Response(self.envelope(instance), status=status.HTTP_200_OK)

    def partial_update(self, request: Request, pk: str = None) -> Response:
        return self.update(request, pk)

    def destroy(self, request: Request, pk: str = None) -> Response:
        self.store.delete(pk)
        return Response(
            {"message": f"{self.store.label} deleted successfully"},
            status=status.HTTP_200_OK,
        )
