"""SVG path data parser.

Turns a ``d`` attribute string into absolute ``PathCommand`` objects. Parsing never
raises on bad input: malformed tokens, unknown command letters and short operand
groups are recorded as diagnostics and skipped.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, field

from svgfixture.engine.arc import arc_to_cubics
from svgfixture.engine.commands import (
    ClosePath,
    CubicCurveTo,
    LineTo,
    MoveTo,
    PathCommand,
    Point,
    QuadraticCurveTo,
)
from svgfixture.engine.errors import Diagnostic, DiagnosticKind, report

logger = logging.getLogger(__name__)

_NUMBER = r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?"
_NUMBER_RE = re.compile(_NUMBER)
_TOKEN_RE = re.compile(
    rf"(?P<sep>[\s,]+)"
    rf"|(?P<number>{_NUMBER})"
    rf"|(?P<letters>[A-Za-z]+)"
    rf"|(?P<other>[^\s,A-Za-z\d.+-]+|[-+.])"
)

# Operands consumed per repetition of each command
ARITY: dict[str, int] = {
    "M": 2,
    "L": 2,
    "H": 1,
    "V": 1,
    "C": 6,
    "S": 4,
    "Q": 4,
    "T": 2,
    "A": 7,
    "Z": 0,
}


@dataclass(frozen=True)
class Token:
    kind: str  # "command" | "unknown" | "number" | "malformed"
    text: str
    position: int
    value: float | None = None


@dataclass
class ParseResult:
    """Commands reconstructed from path data plus any recoverable problems."""

    commands: list[PathCommand] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)


@dataclass
class _ParserState:
    commands: list[PathCommand]
    diagnostics: list[Diagnostic]
    current: Point = (0.0, 0.0)
    subpath_start: Point = (0.0, 0.0)
    # Second control point of the previous C/S, first control point of the previous Q/T.
    # None when the previous command was not of that family.
    last_cubic_control: Point | None = None
    last_quad_control: Point | None = None
    started: bool = False

    def resolve(self, relative: bool, x: float, y: float) -> Point:
        if relative:
            return (self.current[0] + x, self.current[1] + y)
        return (x, y)

    def ensure_started(self, letter: str, position: int) -> None:
        if self.started:
            return
        report(
            self.diagnostics,
            logger,
            DiagnosticKind.MISSING_MOVETO,
            f"Path starts with '{letter}' instead of a move-to; starting at {self.current}",
            token=letter,
            position=position,
        )
        self.commands.append(MoveTo(self.current))
        self.subpath_start = self.current
        self.started = True


def tokenize(path_data: str, diagnostics: list[Diagnostic]) -> list[Token]:
    """Split path data into command, number and malformed tokens."""
    tokens: list[Token] = []
    for match in _TOKEN_RE.finditer(path_data):
        kind = match.lastgroup
        text = match.group()
        pos = match.start()
        if kind == "sep":
            continue
        if kind == "number":
            tokens.append(Token("number", text, pos, float(text)))
        elif kind == "letters":
            tokens.extend(_letter_tokens(text, pos, diagnostics))
        else:
            tokens.append(_malformed(text, pos, diagnostics))
    return tokens


def _letter_tokens(text: str, pos: int, diagnostics: list[Diagnostic]) -> list[Token]:
    # Only close-path letters may be glued to a following command ("zM", "Zm")
    if len(text) > 1 and any(ch not in "zZ" for ch in text[:-1]):
        return [_malformed(text, pos, diagnostics)]
    tokens = []
    for offset, ch in enumerate(text):
        if ch.upper() in ARITY:
            tokens.append(Token("command", ch, pos + offset))
        else:
            report(
                diagnostics,
                logger,
                DiagnosticKind.UNKNOWN_COMMAND,
                f"Unknown SVG command: {ch}",
                token=ch,
                position=pos + offset,
            )
            tokens.append(Token("unknown", ch, pos + offset))
    return tokens


def _malformed(text: str, pos: int, diagnostics: list[Diagnostic]) -> Token:
    report(
        diagnostics,
        logger,
        DiagnosticKind.MALFORMED_TOKEN,
        f"Failed to parse SVG parameter. Expected number, found: {text}",
        token=text,
        position=pos,
    )
    return Token("malformed", text, pos)


def _split_arc_flags(operands: list[Token]) -> list[Token]:
    """Separate arc flags packed against what follows them ("0110 0" -> 0 1 10 0).

    Flags are the 4th and 5th operand of each arc group and are always a single
    "0" or "1", so minified data often omits the separator after them.
    """
    pending = list(operands)
    out: list[Token] = []
    while pending:
        token = pending.pop(0)
        slot = len(out) % ARITY["A"]
        text = token.text
        rest = text[1:]
        if (
            slot in (3, 4)
            and token.kind == "number"
            and text[0] in "01"
            and rest
            and _NUMBER_RE.fullmatch(rest)
        ):
            out.append(Token("number", text[0], token.position, float(text[0])))
            pending.insert(0, Token("number", rest, token.position + 1, float(rest)))
        else:
            out.append(token)
    return out


def parse_path_data(path_data: str) -> ParseResult:
    """Parse an SVG path ``d`` string into absolute path commands.

    Arcs are expanded into cubic curves before they are appended.
    """
    result = ParseResult()
    state = _ParserState(commands=result.commands, diagnostics=result.diagnostics)
    tokens = tokenize(path_data, result.diagnostics)

    i = 0
    while i < len(tokens):
        token = tokens[i]
        i += 1
        if token.kind in ("number", "malformed"):
            # Every command swallows the operands after it, so this is only reached
            # for operands ahead of the first command letter.
            report(
                result.diagnostics,
                logger,
                DiagnosticKind.MALFORMED_TOKEN,
                "Operands found before any command",
                token=token.text,
                position=token.position,
            )
            while i < len(tokens) and tokens[i].kind in ("number", "malformed"):
                i += 1
            continue

        # Gather this command's operands up to the next command letter
        operands: list[Token] = []
        while i < len(tokens) and tokens[i].kind in ("number", "malformed"):
            operands.append(tokens[i])
            i += 1

        if token.kind == "unknown":
            # Already reported by the tokenizer; its operands go with it
            continue

        _run_command(state, token, operands)

    logger.debug(
        "Parsed path data: %d commands, %d diagnostics",
        len(result.commands),
        len(result.diagnostics),
    )
    return result


def _run_command(state: _ParserState, token: Token, operands: list[Token]) -> None:
    letter = token.text
    upper = letter.upper()
    relative = letter.islower()
    arity = ARITY[upper]

    if arity == 0:
        if operands:
            report(
                state.diagnostics,
                logger,
                DiagnosticKind.INCOMPLETE_OPERANDS,
                f"Ignoring {len(operands)} operand(s) after '{letter}'",
                token=letter,
                position=token.position,
            )
        if state.started:
            _close_path(state)
        return

    if not operands:
        report(
            state.diagnostics,
            logger,
            DiagnosticKind.INCOMPLETE_OPERANDS,
            f"'{letter}' has no operands",
            token=letter,
            position=token.position,
        )
        return

    if upper == "A":
        operands = _split_arc_flags(operands)

    handler = _HANDLERS[upper]
    full = len(operands) - len(operands) % arity
    for group_index, start in enumerate(range(0, full, arity)):
        group = operands[start : start + arity]
        if any(op.value is None for op in group):
            # The malformed operand was reported when tokenized; drop the whole group
            continue
        values = [op.value for op in group]
        if upper == "M" and group_index == 0:
            handler(state, relative, values)
        else:
            state.ensure_started(letter, token.position)
            # Extra pairs after a move-to are implicit line-tos
            (_line_to if upper == "M" else handler)(state, relative, values)

    if full < len(operands):
        leftover = operands[full:]
        report(
            state.diagnostics,
            logger,
            DiagnosticKind.INCOMPLETE_OPERANDS,
            f"'{letter}' expects operands in groups of {arity}; "
            f"ignoring {len(leftover)} trailing operand(s)",
            token=leftover[0].text,
            position=leftover[0].position,
        )


def _clear_controls(state: _ParserState) -> None:
    state.last_cubic_control = None
    state.last_quad_control = None


def _move_to(state: _ParserState, relative: bool, v: list[float]) -> None:
    point = state.resolve(relative, v[0], v[1])
    state.commands.append(MoveTo(point))
    state.current = point
    state.subpath_start = point
    state.started = True
    _clear_controls(state)


def _line_to(state: _ParserState, relative: bool, v: list[float]) -> None:
    point = state.resolve(relative, v[0], v[1])
    state.commands.append(LineTo(point))
    state.current = point
    _clear_controls(state)


def _horizontal_to(state: _ParserState, relative: bool, v: list[float]) -> None:
    x = state.current[0] + v[0] if relative else v[0]
    point = (x, state.current[1])
    state.commands.append(LineTo(point))
    state.current = point
    _clear_controls(state)


def _vertical_to(state: _ParserState, relative: bool, v: list[float]) -> None:
    y = state.current[1] + v[0] if relative else v[0]
    point = (state.current[0], y)
    state.commands.append(LineTo(point))
    state.current = point
    _clear_controls(state)


def _cubic_to(state: _ParserState, relative: bool, v: list[float]) -> None:
    c1 = state.resolve(relative, v[0], v[1])
    c2 = state.resolve(relative, v[2], v[3])
    end = state.resolve(relative, v[4], v[5])
    state.commands.append(CubicCurveTo(c1, c2, end))
    state.current = end
    state.last_cubic_control = c2
    state.last_quad_control = None


def _reflect(current: Point, control: Point | None) -> Point:
    if control is None:
        return current
    return (2 * current[0] - control[0], 2 * current[1] - control[1])


def _smooth_cubic_to(state: _ParserState, relative: bool, v: list[float]) -> None:
    c1 = _reflect(state.current, state.last_cubic_control)
    c2 = state.resolve(relative, v[0], v[1])
    end = state.resolve(relative, v[2], v[3])
    state.commands.append(CubicCurveTo(c1, c2, end))
    state.current = end
    state.last_cubic_control = c2
    state.last_quad_control = None


def _quadratic_to(state: _ParserState, relative: bool, v: list[float]) -> None:
    control = state.resolve(relative, v[0], v[1])
    end = state.resolve(relative, v[2], v[3])
    state.commands.append(QuadraticCurveTo(control, end))
    state.current = end
    state.last_quad_control = control
    state.last_cubic_control = None


def _smooth_quadratic_to(state: _ParserState, relative: bool, v: list[float]) -> None:
    control = _reflect(state.current, state.last_quad_control)
    end = state.resolve(relative, v[0], v[1])
    state.commands.append(QuadraticCurveTo(control, end))
    state.current = end
    state.last_quad_control = control
    state.last_cubic_control = None


def _arc_to(state: _ParserState, relative: bool, v: list[float]) -> None:
    rx, ry, rotation, large_arc, sweep = abs(v[0]), abs(v[1]), v[2], v[3] != 0, v[4] != 0
    end = state.resolve(relative, v[5], v[6])
    state.commands.extend(arc_to_cubics(state.current, rx, ry, rotation, large_arc, sweep, end))
    state.current = end
    _clear_controls(state)


def _close_path(state: _ParserState) -> None:
    state.commands.append(ClosePath())
    state.current = state.subpath_start
    _clear_controls(state)


_HANDLERS: dict[str, Callable[[_ParserState, bool, list[float]], None]] = {
    "M": _move_to,
    "L": _line_to,
    "H": _horizontal_to,
    "V": _vertical_to,
    "C": _cubic_to,
    "S": _smooth_cubic_to,
    "Q": _quadratic_to,
    "T": _smooth_quadratic_to,
    "A": _arc_to,
}
