# fitmarket/services/forms.py
"""
Lifecycle of a role-gated publishing form.

    loading -> denied                          (role lacks the capability; terminal)
    loading -> ready -> submitting -> success -> ready   (entered data cleared)
                                   -> error   -> ready   (entered data kept)

Nothing is persisted between requests: every request opens a fresh form.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Optional, TypeVar

from fitmarket.services.gate import (
    PUBLISH_ADVICE,
    PUBLISH_NUTRITION,
    PUBLISH_WORKOUT,
    RESTRICTED_ACCESS,
    allows,
)

T = TypeVar("T")


class FormState(str, Enum):
    loading = "loading"
    denied = "denied"
    ready = "ready"
    submitting = "submitting"
    success = "success"
    error = "error"


FORM_CAPABILITIES = {
    "workout": PUBLISH_WORKOUT,
    "nutrition": PUBLISH_NUTRITION,
    "advice": PUBLISH_ADVICE,
}

_ALLOWED = {
    FormState.loading: {FormState.denied, FormState.ready},
    FormState.denied: set(),
    FormState.ready: {FormState.submitting},
    FormState.submitting: {FormState.success, FormState.error},
    FormState.success: {FormState.ready},
    FormState.error: {FormState.ready},
}


class InvalidTransition(RuntimeError):
    pass


class PublishForm:
    def __init__(self, name: str):
        if name not in FORM_CAPABILITIES:
            raise KeyError(name)
        self.name = name
        self.capabilities = FORM_CAPABILITIES[name]
        self.state = FormState.loading
        self.history: list[FormState] = [FormState.loading]
        self.data: dict[str, Any] = {}
        self.message: Optional[str] = None

    @classmethod
    def open(cls, name: str, role: Optional[str]) -> "PublishForm":
        form = cls(name)
        form.resolve(role)
        return form

    def _move(self, new: FormState) -> None:
        if new not in _ALLOWED[self.state]:
            raise InvalidTransition(f"{self.name} form: {self.state.value} -> {new.value}")
        self.state = new
        self.history.append(new)

    def resolve(self, role: Optional[str]) -> FormState:
        if allows(role, self.capabilities):
            self._move(FormState.ready)
        else:
            self._move(FormState.denied)
            self.message = RESTRICTED_ACCESS
        return self.state

    @property
    def denied(self) -> bool:
        return self.state is FormState.denied

    def submit(self, data: dict[str, Any], action: Callable[[], T]) -> T:
        """Run `action` as this form's submission; errors propagate after the form is reset."""
        self._move(FormState.submitting)
        self.data = dict(data)
        self.message = None
        try:
            result = action()
        except Exception as e:
            self._move(FormState.error)
            self.message = str(e)
            self._move(FormState.ready)
            raise
        self._move(FormState.success)
        self.data = {}
        self._move(FormState.ready)
        return result
