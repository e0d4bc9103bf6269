from __future__ import annotations

from .admin import AdminSession, AdminState
from .browse import BrowseSession, BrowseState, write_detail

__all__ = ["AdminSession", "AdminState", "BrowseSession", "BrowseState", "write_detail"]
