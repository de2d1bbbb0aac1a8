"""
RFC7807 problem value model.

Public API
----------
Problem.builder()          → ProblemBuilder   (empty)
Problem.builder(origin)    → ProblemBuilder   (copy of an existing Problem)
Problem.value_of(status)   → Problem          (title from the reason phrase, if any)

A Problem is frozen once built. `parameters` and `headers` are read-only
views over private copies, so neither the builder nor a derived Problem
can reach into another instance's storage.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from http import HTTPStatus
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

from problemkit.core.errors import InvalidParameterError

MEDIA_TYPE = "application/problem+json"

RESERVED_PROPERTIES = frozenset({"type", "title", "status", "detail", "instance"})

StatusLike = Union[HTTPStatus, int]


def check_parameter_name(key: str) -> None:
    """Raise InvalidParameterError if `key` is type, title, status, detail or instance."""
    if key in RESERVED_PROPERTIES:
        raise InvalidParameterError(key)


def to_status(status: Optional[StatusLike]) -> Optional[StatusLike]:
    """
    Normalize a status code. Registered codes become HTTPStatus members,
    other codes in 100-599 (499, 509, ...) stay plain ints.
    """
    if status is None:
        return None
    code = int(status)
    if not 100 <= code <= 599:
        raise ValueError(f"{code} is not a valid HTTP status code")
    try:
        return HTTPStatus(code)
    except ValueError:
        return code


def reason_phrase(status: StatusLike) -> Optional[str]:
    """Standard reason phrase, or None for codes HTTPStatus does not know."""
    if isinstance(status, HTTPStatus):
        return status.phrase
    return None


@dataclass(frozen=True)
class Problem:
    """Representation of the RFC7807 problem schema. Build it with `Problem.builder()`.

    Not hashable: `parameters` and `headers` are mapping views.
    """
    type: Optional[str] = None
    title: Optional[str] = None
    status: StatusLike = HTTPStatus.INTERNAL_SERVER_ERROR
    detail: Optional[str] = None
    instance: Optional[str] = None
    parameters: Mapping[str, Any] = field(default_factory=dict)
    headers: Mapping[str, Any] = field(default_factory=dict)

    __hash__ = None

    def __post_init__(self) -> None:
        # None headers/parameters mean "empty", on every construction path
        status = to_status(self.status)
        object.__setattr__(
            self, "status", HTTPStatus.INTERNAL_SERVER_ERROR if status is None else status
        )
        parameters = dict(self.parameters or {})
        for key in parameters:
            check_parameter_name(key)
        object.__setattr__(self, "parameters", MappingProxyType(parameters))
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers or {})))

    @property
    def message(self) -> str:
        return ": ".join(part for part in (self.title, self.detail) if part is not None)

    def __str__(self) -> str:
        return self.message

    @staticmethod
    def builder(origin: Optional["Problem"] = None) -> "ProblemBuilder":
        """Return an empty builder, or one seeded with every field of `origin`."""
        if origin is None:
            return ProblemBuilder()
        builder = (
            ProblemBuilder()
            .with_type(origin.type)
            .with_instance(origin.instance)
            .with_title(origin.title)
            .with_status(origin.status)
            .with_detail(origin.detail)
        )
        for key, value in origin.parameters.items():
            builder.with_parameter(key, value)
        for name, value in origin.headers.items():
            builder.with_header(name, value)
        return builder

    @staticmethod
    def value_of(status: StatusLike, detail: Optional[str] = None) -> "Problem":
        status = to_status(status)
        return (
            Problem.builder()
            .with_title(reason_phrase(status))
            .with_status(status)
            .with_detail(detail)
            .build()
        )


class ProblemBuilder:
    """Mutable companion of Problem. Every `with_*` call returns the builder."""

    def __init__(self) -> None:
        self._type: Optional[str] = None
        self._title: Optional[str] = None
        self._status: Optional[StatusLike] = None
        self._detail: Optional[str] = None
        self._instance: Optional[str] = None
        self._parameters: dict[str, Any] = {}
        self._headers: dict[str, Any] = {}

    def with_type(self, type: Optional[str]) -> "ProblemBuilder":
        self._type = type
        return self

    def with_title(self, title: Optional[str]) -> "ProblemBuilder":
        self._title = title
        return self

    def with_status(self, status: Optional[StatusLike]) -> "ProblemBuilder":
        self._status = to_status(status)
        return self

    def with_detail(self, detail: Optional[str]) -> "ProblemBuilder":
        self._detail = detail
        return self

    def with_instance(self, instance: Optional[str]) -> "ProblemBuilder":
        self._instance = instance
        return self

    def with_header(self, name: str, value: Any) -> "ProblemBuilder":
        self._headers[name] = value
        return self

    def with_parameter(self, key: str, value: Any) -> "ProblemBuilder":
        """
        Add an extension property.
        Raises InvalidParameterError if `key` is type, title, status, detail or instance.
        """
        check_parameter_name(key)
        self._parameters[key] = value
        return self

    def build(self) -> Problem:
        return Problem(
            type=self._type,
            title=self._title,
            status=self._status,
            detail=self._detail,
            instance=self._instance,
            parameters=dict(self._parameters),
            headers=dict(self._headers),
        )
