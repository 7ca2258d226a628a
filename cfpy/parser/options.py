"""Parser configuration options."""

from dataclasses import dataclass
from typing import Final

from cfpy.scanner import DEFAULT_EXCERPT_LIMIT

DEFAULT_MAX_DEPTH: Final[int] = 64
# Upper bound for max_depth; each nesting level costs two Python frames.
MAX_DEPTH_LIMIT: Final[int] = 256


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Settings for one `initialize` call.

    `environment_tag` is stored on the resulting Document and read back with
    `get_environment_tag`, e.g. to distinguish dev/prod deployments.
    """

    environment_tag: int | str | None = None
    max_depth: int = DEFAULT_MAX_DEPTH
    excerpt_limit: int = DEFAULT_EXCERPT_LIMIT

    def __post_init__(self) -> None:
        if not 1 <= self.max_depth <= MAX_DEPTH_LIMIT:
            raise ValueError(f"max_depth must be between 1 and {MAX_DEPTH_LIMIT}")
        if self.excerpt_limit < 0:
            raise ValueError("excerpt_limit cannot be negative")
        if self.environment_tag is not None and (
            isinstance(self.environment_tag, bool) or not isinstance(self.environment_tag, (int, str))
        ):
            raise ValueError("environment_tag must be an int, a str or None")

    @staticmethod
    def for_environment(tag: int | str) -> "ParserOptions":
        return ParserOptions(environment_tag=tag)
