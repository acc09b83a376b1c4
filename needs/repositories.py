from __future__ import annotations

from typing import Optional

from .models import Need


class NeedRepository:
    """Read-only access to needs; creating them is another app's job."""

    def find_by_id(self, need_id: int) -> Optional[Need]:
        return Need.objects.filter(pk=need_id).first()
