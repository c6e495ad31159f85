from __future__ import annotations

"""Form state for the TypConv settings window.

This module contains no Qt imports and is safe to unit-test.
FormState holds the current value of every form field and notifies
subscribers whenever a field actually changes; the view re-renders from
those notifications.
"""

import logging
from dataclasses import asdict, dataclass, fields, replace
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple, Type


logger = logging.getLogger(__name__)


class InputFileType(str, Enum):
    MARKDOWN = "markdown"
    TYPST = "typst"


class OutputFileType(str, Enum):
    PDF = "pdf"
    TYPST = "typst"


class TemplateOption(str, Enum):
    ASSIGNMENT = "assignment"
    CUSTOM = "custom"
    CV = "cv"
    REPORT = "report"


def option_labels(enum_cls: Type[Enum]) -> List[str]:
    """Return picker labels for an option enum, in declaration order."""
    return [member.value.lower() for member in enum_cls]


class FormStateError(Exception):
    """Base class for form state errors."""


class UnknownFieldError(FormStateError, ValueError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown form field: {name!r}")
        self.name = name


class InvalidOptionError(FormStateError, ValueError):
    def __init__(self, name: str, value: Any, allowed: List[str]) -> None:
        super().__init__(f"Invalid value {value!r} for {name}; expected one of {', '.join(allowed)}")
        self.name = name
        self.value = value


@dataclass
class FormValues:
    """Plain values of every form field."""

    filename: str = ""
    input_file_type: InputFileType = InputFileType.MARKDOWN
    output_file_type: OutputFileType = OutputFileType.PDF
    template: TemplateOption = TemplateOption.ASSIGNMENT
    password: str = ""
    repeat_password: str = ""
    delete_original_file: bool = False


FIELD_NAMES: Tuple[str, ...] = tuple(f.name for f in fields(FormValues))

OPTION_FIELDS: Dict[str, Type[Enum]] = {
    "input_file_type": InputFileType,
    "output_file_type": OutputFileType,
    "template": TemplateOption,
}
BOOL_FIELDS: Tuple[str, ...] = ("delete_original_file",)
SECRET_FIELDS: Tuple[str, ...] = ("password", "repeat_password")

Listener = Callable[[str, Any], None]


def _coerce(name: str, value: Any) -> Any:
    if name not in FIELD_NAMES:
        raise UnknownFieldError(name)
    enum_cls = OPTION_FIELDS.get(name)
    if enum_cls is not None:
        if isinstance(value, str) and not isinstance(value, Enum):
            value = value.strip().lower()
        try:
            return enum_cls(value)
        except ValueError:
            raise InvalidOptionError(name, value, option_labels(enum_cls)) from None
    if name in BOOL_FIELDS:
        if not isinstance(value, bool):
            raise TypeError(f"{name} expects bool, got {type(value).__name__}")
        return value
    if not isinstance(value, str):
        raise TypeError(f"{name} expects str, got {type(value).__name__}")
    return value


def _loggable(name: str, value: Any) -> str:
    if name in SECRET_FIELDS:
        return "<set>" if value else "<empty>"
    if isinstance(value, Enum):
        return value.value
    return repr(value)


class FormState:
    """Observable store for the conversion settings form.

    Fields are read as attributes (``state.filename``) or with ``get``.
    Writes go through ``set``/``update`` so subscribers are notified.
    """

    def __init__(self, values: Optional[FormValues] = None) -> None:
        self._values = replace(values) if values is not None else FormValues()
        self._listeners: List[Listener] = []

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails
        if name in FIELD_NAMES:
            return getattr(self._values, name)
        raise AttributeError(name)

    def __repr__(self) -> str:
        shown = ", ".join(f"{n}={_loggable(n, v)}" for n, v in self.snapshot().items())
        return f"FormState({shown})"

    # ---- Observers ----

    def subscribe(self, listener: Listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    def _notify(self, name: str, value: Any) -> None:
        for listener in list(self._listeners):
            listener(name, value)

    # ---- Field access ----

    def get(self, name: str) -> Any:
        if name not in FIELD_NAMES:
            raise UnknownFieldError(name)
        return getattr(self._values, name)

    def set(self, name: str, value: Any) -> bool:
        """Assign a field. Returns True if the value changed."""
        value = _coerce(name, value)
        if getattr(self._values, name) == value:
            return False
        setattr(self._values, name, value)
        logger.debug("Form field %s -> %s", name, _loggable(name, value))
        self._notify(name, value)
        return True

    def update(self, **changes: Any) -> List[str]:
        """Apply several field assignments in order; return the changed names."""
        return [name for name, value in changes.items() if self.set(name, value)]

    def snapshot(self) -> Dict[str, Any]:
        return asdict(self._values)

    def reset(self) -> List[str]:
        return self.update(**asdict(FormValues()))

    # ---- Actions ----

    def toggle_delete_original(self) -> bool:
        self.set("delete_original_file", not self._values.delete_original_file)
        return self._values.delete_original_file

    def clear_password(self) -> None:
        self.set("password", "")
