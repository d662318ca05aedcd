"""Immutable expression tree for voltages, currents, time and frequency.

Every node is a frozen dataclass, so trees compare structurally and can be
shared freely. Sum and Product flatten nested operands of their own kind
at construction:

    Sum(Sum(a, b), c) == Sum(a, Sum(b, c)) == Sum(a, b, c)

Term order is kept exactly as given.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from numbers import Real

from .topology import Current, Voltage


class Domain(Enum):
    """Which independent variable an expression is a function of."""
    TIME = "time"
    FREQUENCY = "frequency"
    INVARIANT = "invariant"


class ConstantMode(Enum):
    """Constants the transform rules recognize without float comparison."""
    E = "e"
    ONE = "one"
    MINUS_ONE = "minus_one"
    ARBITRARY = "arbitrary"


_SPECIAL_VALUES = {
    ConstantMode.E: math.e,
    ConstantMode.ONE: 1.0,
    ConstantMode.MINUS_ONE: -1.0,
}

# Rendering precedence, higher binds tighter
_PREC_SUM = 1
_PREC_PRODUCT = 2
_PREC_EXPONENT = 3
_PREC_ATOM = 4


def _wrap(value) -> Expression:
    """Promote plain numbers to Constant."""
    if isinstance(value, Expression):
        return value
    if isinstance(value, Real) and not isinstance(value, bool):
        return Constant(float(value))
    raise TypeError(f"cannot use {type(value).__name__} as an expression")


def _group(node: Expression, precedence: int) -> str:
    text = str(node)
    if node._precedence() <= precedence:
        return f"({text})"
    return text


class Expression:
    """
    Base of all expression nodes.

    Arithmetic operators build new nodes, plain numbers become constants:

        V = VoltageTerm(Voltage(p1, p2))
        expr = 2 * V + 5          # Sum(Product(Constant(2), V), Constant(5))
    """

    __slots__ = ()

    def type(self) -> Domain:
        """Classify this expression as time, frequency or invariant."""
        from .classify import classify
        return classify(self)

    def to_frequency(self) -> Expression:
        """Laplace transform of this expression."""
        from .laplace import to_frequency
        return to_frequency(self)

    def to_time(self) -> Expression:
        """Inverse Laplace transform of this expression."""
        from .laplace import to_time
        return to_time(self)

    def _precedence(self) -> int:
        return _PREC_ATOM

    def __add__(self, other):
        try:
            return Sum(self, _wrap(other))
        except TypeError:
            return NotImplemented

    def __radd__(self, other):
        try:
            return Sum(_wrap(other), self)
        except TypeError:
            return NotImplemented

    def __sub__(self, other):
        try:
            return Sum(self, -_wrap(other))
        except TypeError:
            return NotImplemented

    def __rsub__(self, other):
        try:
            return Sum(_wrap(other), -self)
        except TypeError:
            return NotImplemented

    def __mul__(self, other):
        try:
            return Product(self, _wrap(other))
        except TypeError:
            return NotImplemented

    def __rmul__(self, other):
        try:
            return Product(_wrap(other), self)
        except TypeError:
            return NotImplemented

    def __truediv__(self, other):
        try:
            return Product(self, Exponent(_wrap(other), Constant(-1.0)))
        except TypeError:
            return NotImplemented

    def __rtruediv__(self, other):
        try:
            return Product(_wrap(other), Exponent(self, Constant(-1.0)))
        except TypeError:
            return NotImplemented

    def __pow__(self, other):
        try:
            return Exponent(self, _wrap(other))
        except TypeError:
            return NotImplemented

    def __rpow__(self, other):
        try:
            return Exponent(_wrap(other), self)
        except TypeError:
            return NotImplemented

    def __neg__(self):
        return Product(Constant(-1.0), self)


@dataclass(frozen=True)
class Constant(Expression):
    """
    A literal scalar.

    Constant() is 1. Values 1.0 and -1.0 are stored as ONE and MINUS_ONE;
    use Constant.e() for Euler's number.
    """
    value: float = 1.0
    mode: ConstantMode | None = None

    def __post_init__(self):
        mode = self.mode
        if mode is None:
            value = float(self.value)
            if value == 1.0:
                mode = ConstantMode.ONE
            elif value == -1.0:
                mode = ConstantMode.MINUS_ONE
            else:
                mode = ConstantMode.ARBITRARY
        value = _SPECIAL_VALUES.get(mode, self.value)
        object.__setattr__(self, "mode", mode)
        object.__setattr__(self, "value", float(value))

    @classmethod
    def e(cls) -> Constant:
        return cls(mode=ConstantMode.E)

    @property
    def is_e(self) -> bool:
        return self.mode is ConstantMode.E

    @property
    def is_zero(self) -> bool:
        return self.mode is ConstantMode.ARBITRARY and self.value == 0.0

    def _precedence(self) -> int:
        # Negative literals need parentheses wherever a product would
        return _PREC_PRODUCT if self.value < 0 else _PREC_ATOM

    def __str__(self):
        if self.mode is ConstantMode.E:
            return "e"
        return f"{self.value:g}"


@dataclass(frozen=True)
class Exponent(Expression):
    """base ^ exponent"""
    base: Expression
    exponent: Expression

    def _precedence(self) -> int:
        return _PREC_EXPONENT

    def __str__(self):
        return f"{_group(self.base, _PREC_EXPONENT)}^{_group(self.exponent, _PREC_EXPONENT)}"


def _flatten(kind: type, operands: tuple) -> tuple[Expression, ...]:
    """Splice operands of the same kind into one term list."""
    if len(operands) < 2:
        raise ValueError(f"{kind.__name__} needs at least two operands, got {len(operands)}")
    terms = []
    for operand in operands:
        if not isinstance(operand, Expression):
            raise TypeError(f"{kind.__name__} operand must be an Expression, got {type(operand).__name__}")
        if isinstance(operand, kind):
            terms.extend(operand.terms)
        else:
            terms.append(operand)
    return tuple(terms)


@dataclass(frozen=True, init=False)
class Sum(Expression):
    """term_1 + term_2 + ...  (never directly contains another Sum)"""
    terms: tuple[Expression, ...]

    def __init__(self, *operands: Expression):
        object.__setattr__(self, "terms", _flatten(Sum, operands))

    def _precedence(self) -> int:
        return _PREC_SUM

    def __str__(self):
        return " + ".join(_group(term, _PREC_SUM) for term in self.terms)


@dataclass(frozen=True, init=False)
class Product(Expression):
    """term_1 * term_2 * ...  (never directly contains another Product)"""
    terms: tuple[Expression, ...]

    def __init__(self, *operands: Expression):
        object.__setattr__(self, "terms", _flatten(Product, operands))

    def _precedence(self) -> int:
        return _PREC_PRODUCT

    def __str__(self):
        return "*".join(_group(term, _PREC_PRODUCT) for term in self.terms)


@dataclass(frozen=True)
class Integral(Expression):
    """Definite integral of integrand from lower to upper, over time."""
    integrand: Expression
    lower: Expression
    upper: Expression

    def __str__(self):
        return f"int[{self.lower}, {self.upper}]({self.integrand})"


@dataclass(frozen=True)
class Derivative(Expression):
    """d/dt of subject."""
    subject: Expression

    def __str__(self):
        return f"d/dt({self.subject})"


@dataclass(frozen=True)
class IndependentVariable(Expression):
    """The formal variable t (TIME) or s (FREQUENCY)."""
    domain: Domain

    def __post_init__(self):
        if self.domain not in (Domain.TIME, Domain.FREQUENCY):
            raise ValueError(f"independent variable must be time or frequency, got {self.domain}")

    def __str__(self):
        return "t" if self.domain is Domain.TIME else "s"


def _argument(domain: Domain) -> str:
    if domain is Domain.TIME:
        return "(t)"
    if domain is Domain.FREQUENCY:
        return "(s)"
    return ""


@dataclass(frozen=True)
class VoltageTerm(Expression):
    """The voltage across a pin pair, as a function of t, of s, or constant."""
    voltage: Voltage
    domain: Domain = Domain.TIME

    def __str__(self):
        return f"{self.voltage}{_argument(self.domain)}"


@dataclass(frozen=True)
class CurrentTerm(Expression):
    """The current between a pin pair, as a function of t, of s, or constant."""
    current: Current
    domain: Domain = Domain.TIME

    def __str__(self):
        return f"{self.current}{_argument(self.domain)}"


T = IndependentVariable(Domain.TIME)
S = IndependentVariable(Domain.FREQUENCY)


def exp(exponent: Expression) -> Exponent:
    """e ^ exponent"""
    return Exponent(Constant.e(), _wrap(exponent))


def derivative(subject: Expression) -> Derivative:
    return Derivative(_wrap(subject))


def running_integral(integrand: Expression) -> Integral:
    """Integral of integrand from 0 to t."""
    return Integral(_wrap(integrand), Constant(0.0), T)
