# fitmarket/services/gate.py
from __future__ import annotations

from typing import Iterable, Optional

from fitmarket.models import UserRole

RESTRICTED_ACCESS = "Restricted Access"

PUBLISH_WORKOUT = frozenset({UserRole.trainer})
PUBLISH_NUTRITION = frozenset({UserRole.nutritionist})
PUBLISH_ADVICE = frozenset({UserRole.trainer, UserRole.nutritionist})
PURCHASE = frozenset({UserRole.client})


def allows(role: Optional[str], capabilities: Iterable[str]) -> bool:
    """True when `role` is one of `capabilities`. An unresolved role is always denied."""
    if role is None:
        return False
    wanted = {getattr(c, "value", c) for c in capabilities}
    return getattr(role, "value", role) in wanted
