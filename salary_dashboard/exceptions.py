"""
Module: exceptions

Purpose: Domain-specific exception hierarchy for the salary dashboard core.

All exceptions carry a context dict so callers can log structured details.
Row-level data problems are not raised; the loader skips and counts them.
"""

from typing import Any


class DashboardError(Exception):
    """Base exception for all salary dashboard errors."""

    def __init__(self, message: str, *, context: dict[str, Any] | None = None) -> None:
        self.message = message
        self.context = context or {}
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, context={self.context!r})"


class DataValidationError(DashboardError):
    """Raised when a record source fails schema validation."""

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        value: Any = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        ctx = context or {}
        if field is not None:
            ctx["field"] = field
        if value is not None:
            ctx["value"] = value
        super().__init__(message, context=ctx)
        self.field = field
        self.value = value


class NodeNameCollisionError(DashboardError):
    """Raised when two flow tiers share a literal category name."""

    def __init__(
        self,
        message: str,
        *,
        names: list[str] | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        ctx = context or {}
        if names is not None:
            ctx["names"] = names
        super().__init__(message, context=ctx)
        self.names = names or []


class LayoutError(DashboardError):
    """Raised when the flow layout is given an unusable canvas or parameter."""

    def __init__(
        self,
        message: str,
        *,
        parameter: str | None = None,
        value: Any = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        ctx = context or {}
        if parameter is not None:
            ctx["parameter"] = parameter
        if value is not None:
            ctx["value"] = value
        super().__init__(message, context=ctx)
        self.parameter = parameter
        self.value = value


class SelectionError(DashboardError):
    """Raised when a selection transition references an unknown node."""

    def __init__(
        self,
        message: str,
        *,
        index: int | None = None,
        node_count: int | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        ctx = context or {}
        if index is not None:
            ctx["index"] = index
        if node_count is not None:
            ctx["node_count"] = node_count
        super().__init__(message, context=ctx)
        self.index = index
        self.node_count = node_count


class ReportGenerationError(DashboardError):
    """Raised when exporting or previewing the dashboard fails."""

    def __init__(
        self,
        message: str,
        *,
        report_type: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        ctx = context or {}
        if report_type is not None:
            ctx["report_type"] = report_type
        super().__init__(message, context=ctx)
        self.report_type = report_type


class PipelineError(DashboardError):
    """Raised when a pipeline stage cannot complete."""

    def __init__(
        self,
        message: str,
        *,
        stage: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        ctx = context or {}
        if stage is not None:
            ctx["stage"] = stage
        super().__init__(message, context=ctx)
        self.stage = stage
