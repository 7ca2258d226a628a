"""Diagnostics core types."""

from dataclasses import dataclass

from cfpy.diagnostics.codes import DiagnosticSpec, Severity
from cfpy.text import SourceLocation, TextRange


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the scanner and parser."""

    code: str
    message: str
    range: TextRange
    location: SourceLocation
    excerpt: str = ""
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    @staticmethod
    def from_spec(
        spec: DiagnosticSpec,
        *,
        range: TextRange,
        location: SourceLocation,
        excerpt: str = "",
        message: str | None = None,
    ) -> "Diagnostic":
        return Diagnostic(
            code=spec.code,
            message=message or spec.message,
            range=range,
            location=location,
            excerpt=excerpt,
            severity=spec.severity,
            hint=spec.hint,
            category=spec.category,
        )

    @property
    def line(self) -> int:
        return self.location.line

    @property
    def column(self) -> int:
        return self.location.column

    def render(self) -> str:
        """Render as `message at line L:C` followed by the excerpt trace."""
        text = f"{self.message} at line {self.location}"
        if self.excerpt:
            text += f"\n\n{self.excerpt} <<< HERE"
        return text
