"""Owned result of a successful parse."""

from __future__ import annotations

from types import TracebackType

from cfpy.model.model import Section


class Document:
    """Top-level sections of one configuration source.

    The tree under a Document is immutable. `release()` drops it in one step;
    queries against a released Document no longer resolve.
    """

    __slots__ = ("_environment_tag", "_released", "_sections", "_source")

    def __init__(
        self,
        sections: tuple[Section, ...],
        *,
        source: str = "",
        environment_tag: int | str | None = None,
    ) -> None:
        self._sections = sections
        self._source = source
        self._environment_tag = environment_tag
        self._released = False

    @property
    def sections(self) -> tuple[Section, ...]:
        return self._sections

    @property
    def source(self) -> str:
        return self._source

    @property
    def environment_tag(self) -> int | str | None:
        return self._environment_tag

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> None:
        self._sections = ()
        self._source = ""
        self._released = True

    def __enter__(self) -> Document:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.release()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return self._sections == other._sections

    def __repr__(self) -> str:
        state = "released" if self._released else f"{len(self._sections)} sections"
        return f"Document({state})"
