"""
Parse command-line numbers: plain literals (with digit grouping) or small
integer expressions such as 2**64-1 or 10^18 + 9.
"""

import ast
import operator as op
import re

from nearprime.utility import U64_MAX, UserInputError

# ---- simple number parsing helpers ----
_THIN_SPACES = ("\u2009", "\u202F", "\u00A0")  # thin, narrow no-break, no-break
_SEP_CLASS = r"[ ,._\u00A0\u2009\u202F]"      # spaces/commas/dots/underscores & NBSP variants
_GROUPED_RE = re.compile(rf"^[+-]?\d{{1,3}}(?:{_SEP_CLASS}\d{{3}})+$")

# ---- allowed operators (safe subset) ----
_ALLOWED_BINOPS = {
    ast.Add:      op.add,
    ast.Sub:      op.sub,
    ast.Mult:     op.mul,
    ast.FloorDiv: op.floordiv,
    ast.Mod:      op.mod,
    ast.Pow:      op.pow,
    ast.LShift:   op.lshift,
}
_ALLOWED_UNARYOPS = {
    ast.UAdd: op.pos,
    ast.USub: op.neg,
}

_MAX_NODES = 64    # sanity guard
_MAX_EXPONENT = 64  # nothing above 2 ** 64 is useful here
_MAX_BITS = 4096


class _IntExprError(Exception):
    pass


def _parse_int_literal(text: str) -> int | None:
    """Accepts: 42  1_000_000  0xFF  0b1010  123.456.789  123 456 789
       Rejects: 3.14  1,23  12.34.56  0xG1"""

    if text is None:
        return None

    s = text.strip()

    if not s:
        return None

    for ch in _THIN_SPACES:
        s = s.replace(ch, " ")

    if s.lower().startswith(("0x", "0b", "0o")):
        try:
            return int(s.replace("_", ""), 0)
        except ValueError:
            return None

    if re.fullmatch(r"[+-]?\d[\d_]*", s):
        try:
            return int(s.replace("_", ""))
        except ValueError:
            return None

    if _GROUPED_RE.match(s):
        compact = re.sub(_SEP_CLASS, "", s)
        try:
            return int(compact)
        except ValueError:
            return None

    return None


def _eval_int_expr(expr: str) -> int:
    """Evaluate an integer-only arithmetic expression through the AST whitelist."""
    expr = expr.replace("^", "**")
    try:
        tree = ast.parse(expr, mode="eval")
    except SyntaxError as e:
        raise _IntExprError(str(e)) from None

    if sum(1 for _ in ast.walk(tree)) > _MAX_NODES:
        raise _IntExprError("expression too long")

    def _ev(node):
        if isinstance(node, ast.Expression):
            return _ev(node.body)
        if isinstance(node, ast.Constant) and type(node.value) is int:
            return node.value
        if isinstance(node, ast.UnaryOp) and type(node.op) in _ALLOWED_UNARYOPS:
            return _ALLOWED_UNARYOPS[type(node.op)](_ev(node.operand))
        if isinstance(node, ast.BinOp) and type(node.op) in _ALLOWED_BINOPS:
            left, right = _ev(node.left), _ev(node.right)
            if isinstance(node.op, (ast.Pow, ast.LShift)) and not 0 <= right <= _MAX_EXPONENT * 2:
                raise _IntExprError(f"exponent {right} out of range")
            if isinstance(node.op, ast.Pow) and abs(left).bit_length() * right > _MAX_BITS:
                raise _IntExprError("result too large")
            if isinstance(node.op, (ast.FloorDiv, ast.Mod)) and right == 0:
                raise _IntExprError("division by zero")
            return _ALLOWED_BINOPS[type(node.op)](left, right)
        raise _IntExprError(f"unsupported syntax: {type(node).__name__}")

    return _ev(tree)


def parse_int_or_expr(s: str) -> int | None:
    """Return the integer s denotes, or None if s is not a number at all."""
    n = _parse_int_literal(s)
    if n is not None:
        return n
    try:
        return _eval_int_expr(s)
    except _IntExprError:
        return None


def parse_u64(s: str) -> int:
    """Like parse_int_or_expr(), but the result must fit in 64 unsigned bits."""
    n = parse_int_or_expr(s)
    if n is None:
        raise UserInputError(f"Invalid input: '{s}' is not an integer.")
    if n < 0 or n > U64_MAX:
        raise UserInputError(f"Invalid input: {n} is outside the uint64 range 0..2**64-1.")
    return n
