"""Whitespace and `#` comment skipping between grammar tokens."""

from cfpy.scanner.scanner import Scanner


def skip_comments(scanner: Scanner) -> None:
    """Consume whitespace and comments until neither remains."""
    scanner.eat_whitespace()
    while _skip_comment(scanner):
        scanner.eat_whitespace()


def _skip_comment(scanner: Scanner) -> bool:
    # Consume until end of line or input, including the newline itself.
    if not scanner.eat("#"):
        return False
    while scanner.peek() is not None and not scanner.eat("\n"):
        scanner.next()
    return True
