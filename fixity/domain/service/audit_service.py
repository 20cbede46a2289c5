"""Immutability audit domain service."""

import dataclasses
import typing
from collections.abc import Callable, Mapping, MutableMapping, MutableSequence, MutableSet
from typing import Any, final

import logfire
from pydantic import BaseModel

from fixity.config import AuditSettings
from fixity.domain.error import MutabilityViolationError
from fixity.domain.value import ImmutableList, ValueObject
from fixity.domain.value.immutability import (
    find_mutable_paths,
    is_deeply_immutable,
    is_sealed,
)
from fixity.util.logging import get_logger

from .base import Service

logger = get_logger(__name__)


@final
class AuditReport(ValueObject, sealed=True):
    """Result of an immutability audit."""

    subject: str
    findings: ImmutableList = ImmutableList()

    @property
    def is_clean(self) -> bool:
        return len(self.findings) == 0


class AuditService(Service):
    """Domain service that looks for accidental mutability.

    Covers the three classic leaks: values holding references to mutable
    objects, mutable collections used as fields, and types left open to
    subclasses that add mutation.
    """

    def __init__(self, audit_settings: AuditSettings) -> None:
        """Initialize audit service.

        Args:
            audit_settings: Audit configuration
        """
        self.audit_settings = audit_settings

    def audit_value(self, value: Any) -> AuditReport:
        """Find every mutable value reachable from ``value``.

        Args:
            value: Value to inspect

        Returns:
            Report whose findings are the paths of mutable values
        """
        subject = type(value).__name__
        with logfire.span("audit_service.audit_value", subject=subject):
            paths = find_mutable_paths(value)
            logger.debug(f"Audited {subject}: {len(paths)} mutable path(s)")
            return AuditReport(subject=subject, findings=ImmutableList(paths))

    def audit_type(self, cls: type) -> AuditReport:
        """Check that a type is closed to extension and frozen.

        Flags types that are not sealed, models or dataclasses that are not
        frozen, and fields declared with mutable container types.

        Args:
            cls: Type to inspect

        Returns:
            Report listing each problem found
        """
        with logfire.span("audit_service.audit_type", subject=cls.__name__):
            findings: list[str] = []
            if not is_sealed(cls):
                findings.append("type is not sealed")

            if isinstance(cls, type) and issubclass(cls, BaseModel):
                if not cls.model_config.get("frozen", False):
                    findings.append("model is not frozen")
                annotations = {
                    name: field.annotation for name, field in cls.model_fields.items()
                }
            elif dataclasses.is_dataclass(cls):
                if not cls.__dataclass_params__.frozen:  # type: ignore[attr-defined]
                    findings.append("dataclass is not frozen")
                annotations = typing.get_type_hints(cls)
            else:
                findings.append("type is neither a frozen model nor a frozen dataclass")
                annotations = {}

            for name, annotation in annotations.items():
                container = _mutable_container(annotation)
                if container:
                    findings.append(f"field '{name}' is declared as {container}")

            if findings:
                logfire.info(
                    "Type audit found problems",
                    subject=cls.__name__,
                    findings=findings,
                )
            return AuditReport(subject=cls.__name__, findings=ImmutableList(findings))

    def enforce(self, value: Any) -> AuditReport:
        """Audit ``value`` and act on findings according to settings.

        Args:
            value: Value that must be deeply immutable

        Returns:
            The audit report

        Raises:
            MutabilityViolationError: If findings exist and strict mode is on
        """
        report = self.audit_value(value)
        if report.is_clean:
            return report

        if self.audit_settings.strict:
            raise MutabilityViolationError(report.subject, list(report.findings))

        logfire.warn(
            "Mutable value allowed by non-strict audit",
            subject=report.subject,
            findings=list(report.findings),
        )
        return report

    def detect_mutation(self, subject: Any, action: Callable[[Any], object]) -> bool:
        """Run ``action`` on ``subject`` and report whether its state changed.

        Observable state is captured structurally before and after, so a
        change made through a leaked reference is caught even though the
        subject's own attributes still point at the same objects.

        Args:
            subject: Object whose state is watched
            action: Callable receiving ``subject``

        Returns:
            True if the observable state of ``subject`` changed
        """
        subject_name = type(subject).__name__
        with logfire.span("audit_service.detect_mutation", subject=subject_name):
            if is_deeply_immutable(subject):
                action(subject)
                return False
            before = _snapshot(subject)
            action(subject)
            changed = before != _snapshot(subject)
            if changed:
                logfire.warn("State change detected", subject=subject_name)
            return changed


def _mutable_container(annotation: Any) -> str | None:
    """Name of the first mutable container type in an annotation, if any."""
    origin = typing.get_origin(annotation) or annotation
    if isinstance(origin, type) and issubclass(
        origin, (MutableSequence, MutableMapping, MutableSet)
    ):
        return origin.__name__
    for arg in typing.get_args(annotation):
        found = _mutable_container(arg)
        if found:
            return found
    return None


def _snapshot(value: Any, seen: frozenset[int] = frozenset()) -> Any:
    """Structural copy of the observable state of ``value``."""
    # Deeply immutable values cannot change, so they stand for themselves
    if is_deeply_immutable(value):
        return value
    if id(value) in seen:
        return ("<cycle>", type(value).__name__)
    seen = seen | {id(value)}
    kind = type(value).__name__

    if isinstance(value, BaseModel):
        return (
            kind,
            tuple(
                (name, _snapshot(getattr(value, name), seen))
                for name in type(value).model_fields
            ),
        )
    if isinstance(value, Mapping):
        return (
            kind,
            tuple((_snapshot(k, seen), _snapshot(v, seen)) for k, v in value.items()),
        )
    if isinstance(value, (set, frozenset)):
        return (kind, frozenset(_snapshot(item, seen) for item in value))
    if isinstance(value, (list, tuple, MutableSequence)):
        return (kind, tuple(_snapshot(item, seen) for item in value))

    state: dict[str, Any] = {}
    slots = getattr(type(value), "__slots__", ())
    if isinstance(slots, str):
        slots = (slots,)
    for slot in slots:
        if hasattr(value, slot):
            state[slot] = getattr(value, slot)
    state.update(getattr(value, "__dict__", {}))
    if not state:
        return (kind, repr(value))
    return (
        kind,
        tuple((name, _snapshot(attr, seen)) for name, attr in sorted(state.items())),
    )
