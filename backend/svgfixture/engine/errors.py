"""Error types and non-fatal diagnostics raised or recorded by the engine."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass


class SvgFixtureError(Exception):
    """Base class for all svgfixture errors."""


class InputUnreadableError(SvgFixtureError):
    """The source markup could not be parsed, so nothing was imported."""


class DiagnosticKind(str, enum.Enum):
    MALFORMED_TOKEN = "malformed_token"
    UNKNOWN_COMMAND = "unknown_command"
    INCOMPLETE_OPERANDS = "incomplete_operands"
    MISSING_MOVETO = "missing_moveto"
    PLACEMENT_OVERRUN = "placement_overrun"


@dataclass(frozen=True)
class Diagnostic:
    """A recoverable problem found while parsing or placing points."""

    kind: DiagnosticKind
    message: str
    token: str | None = None
    # Character offset into the path data, when the problem came from the parser
    position: int | None = None

    def to_dict(self) -> dict[str, object]:
        return {
            "kind": self.kind.value,
            "message": self.message,
            "token": self.token,
            "position": self.position,
        }


def report(
    diagnostics: list[Diagnostic],
    logger: logging.Logger,
    kind: DiagnosticKind,
    message: str,
    token: str | None = None,
    position: int | None = None,
) -> Diagnostic:
    """Record a diagnostic and mirror it to the module logger at WARNING level."""
    diagnostic = Diagnostic(kind=kind, message=message, token=token, position=position)
    diagnostics.append(diagnostic)
    logger.warning("%s: %s", kind.value, message)
    return diagnostic
