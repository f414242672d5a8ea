"""
Run-time values and the primitive operators.

Values are plain Python objects:
	Number  -> float
	Text    -> str
	Boolean -> bool  (only comparisons make these; only conditions consume them)

The operator functions here know nothing of syntax. When the operands
are of the wrong kind they raise OperatorError, and the interpreter
attaches the offending node before passing it along.
"""
import math
import operator
from decimal import Decimal
from typing import Union

VALUE = Union[float, str, bool]

class OperatorError(Exception):
	pass

def kind_of(value:VALUE) -> str:
	if isinstance(value, bool): return "boolean"
	if isinstance(value, float): return "number"
	if isinstance(value, str): return "text"
	raise TypeError(type(value))

def is_number(value) -> bool:
	return isinstance(value, float)

def display(value:VALUE) -> str:
	""" The external representation used by print and by text concatenation. """
	if isinstance(value, bool): return "true" if value else "false"
	if isinstance(value, str): return value
	if math.isnan(value): return "NaN"
	if math.isinf(value): return "inf" if value > 0 else "-inf"
	# Positional notation, never an exponent; integral values lose the ".0", keeping the sign of zero.
	text = format(Decimal(repr(value)), "f")
	return text[:-2] if text.endswith(".0") else text

def _mismatch(glyph, *operands):
	kinds = " and ".join(kind_of(x) for x in operands)
	return OperatorError("Operator '%s' cannot apply to %s" % (glyph, kinds))

def _add(lhs, rhs):
	if is_number(lhs) and is_number(rhs): return lhs + rhs
	if isinstance(lhs, str) or isinstance(rhs, str):
		if isinstance(lhs, bool) or isinstance(rhs, bool): raise _mismatch("+", lhs, rhs)
		return display(lhs) + display(rhs)
	raise _mismatch("+", lhs, rhs)

def _divide(lhs, rhs):
	if rhs == 0: raise OperatorError("Division by zero")
	return lhs / rhs

def _numeric(glyph, fn):
	def op(lhs, rhs):
		if is_number(lhs) and is_number(rhs): return fn(lhs, rhs)
		raise _mismatch(glyph, lhs, rhs)
	return op

def _equal(lhs, rhs) -> bool:
	# Across kinds, things are simply unequal.
	return kind_of(lhs) == kind_of(rhs) and lhs == rhs

def _negate(operand):
	if is_number(operand): return -operand
	raise _mismatch("-", operand)

BINARY_OPS = {
	"+": _add,
	"-": _numeric("-", operator.sub),
	"*": _numeric("*", operator.mul),
	"/": _numeric("/", _divide),
	"==": _equal,
	"!=": lambda lhs, rhs: not _equal(lhs, rhs),
	"<": _numeric("<", operator.lt),
	">": _numeric(">", operator.gt),
	"<=": _numeric("<=", operator.le),
	">=": _numeric(">=", operator.ge),
}

UNARY_OPS = {
	"-": _negate,
}
