"""
Project router.

Every resource route answers with or without a trailing slash
(``/api/cases`` and ``/api/cases/`` are the same endpoint).  Each app
builds its own router and the project ``urls.py`` mounts them all under
``api/``, so the per-app API root view is disabled.
"""

from rest_framework.routers import DefaultRouter


class OptionalSlashRouter(DefaultRouter):
    include_root_view = False
    include_format_suffixes = False

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.trailing_slash = "/?"
