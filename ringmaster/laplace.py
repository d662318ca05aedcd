"""Laplace and inverse Laplace rewrites of expression trees.

Rules applied by to_frequency (zero initial conditions):

    c                  ->  c                      (invariant terms pass through)
    t                  ->  s
    V(t), I(t)         ->  V(s), I(s)
    a + b              ->  L{a} + L{b}
    c * x              ->  c * L{x}                (one non-invariant factor)
    d/dt(x)            ->  s * L{x}
    int[0, t](x)       ->  L{x} * s^-1
    e^(a*t)            ->  (s + -a)^-1

to_time applies the same table right to left. Anything else raises
UnknownTransformError; nothing is approximated.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from .classify import classify, is_invariant
from .errors import DomainError, ExpressionError, UnknownTransformError
from .expression import (
    Constant,
    ConstantMode,
    CurrentTerm,
    Derivative,
    Domain,
    Exponent,
    Expression,
    IndependentVariable,
    Integral,
    Product,
    S,
    Sum,
    T,
    VoltageTerm,
)

logger = logging.getLogger(__name__)

MINUS_ONE = Constant(mode=ConstantMode.MINUS_ONE)
ZERO = Constant(0.0)
S_INVERSE = Exponent(S, MINUS_ONE)


class TransformResult(NamedTuple):
    """Outcome of try_transform: exactly one of expression and error is set."""
    expression: Expression | None
    error: ExpressionError | None

    @property
    def ok(self) -> bool:
        return self.error is None


def to_frequency(expr: Expression) -> Expression:
    """
    Laplace transform of a time-domain (or invariant) expression.

    Raises:
        DomainError: if expr is a frequency-domain expression
        MixedDomainError: if expr mixes time and frequency terms
        UnknownTransformError: if some sub-expression has no rule
    """
    if classify(expr) is Domain.FREQUENCY:
        raise DomainError(f"{expr} is already a frequency-domain expression")
    return _forward(expr)


def to_time(expr: Expression) -> Expression:
    """
    Inverse Laplace transform of a frequency-domain (or invariant) expression.

    Raises:
        DomainError: if expr is a time-domain expression
        MixedDomainError: if expr mixes time and frequency terms
        UnknownTransformError: if some sub-expression has no rule
    """
    if classify(expr) is Domain.TIME:
        raise DomainError(f"{expr} is already a time-domain expression")
    return _inverse(expr)


def try_transform(expr: Expression, target: Domain) -> TransformResult:
    """
    Transform expr towards target, reporting failure in the result instead of raising.

    Args:
        expr: Expression to transform
        target: Domain.FREQUENCY or Domain.TIME

    Returns:
        TransformResult with either the new expression or the ExpressionError
    """
    if target is Domain.FREQUENCY:
        transform = to_frequency
    elif target is Domain.TIME:
        transform = to_time
    else:
        raise ValueError(f"Cannot transform towards {target}")

    try:
        return TransformResult(transform(expr), None)
    except ExpressionError as exc:
        return TransformResult(None, exc)


def _unknown(expr: Expression, target: Domain, reason: str) -> UnknownTransformError:
    error = UnknownTransformError(expr, target, reason)
    logger.debug("Unknown transform: %s", error)
    return error


def _negate(constant: Constant) -> Constant:
    return Constant(-constant.value)


def _exponential_rate(expr: Exponent) -> Constant | None:
    """Return a for e^(a*t), None for any other shape."""
    if not (isinstance(expr.base, Constant) and expr.base.is_e):
        return None
    exponent = expr.exponent
    if not isinstance(exponent, Product) or len(exponent.terms) != 2:
        return None
    first, second = exponent.terms
    if isinstance(first, Constant) and second == T:
        return first
    if isinstance(second, Constant) and first == T:
        return second
    return None


def _pole(expr: Exponent) -> Constant | None:
    """Return c for (s + c)^-1, None for any other shape."""
    if expr.exponent != MINUS_ONE:
        return None
    base = expr.base
    if not isinstance(base, Sum) or len(base.terms) != 2:
        return None
    first, second = base.terms
    if first == S and isinstance(second, Constant):
        return second
    if second == S and isinstance(first, Constant):
        return first
    return None


def _forward(expr: Expression) -> Expression:
    if is_invariant(expr):
        return expr

    if isinstance(expr, IndependentVariable):
        return S

    elif isinstance(expr, VoltageTerm):
        return VoltageTerm(expr.voltage, Domain.FREQUENCY)

    elif isinstance(expr, CurrentTerm):
        return CurrentTerm(expr.current, Domain.FREQUENCY)

    elif isinstance(expr, Sum):
        # Linearity
        return Sum(*(_forward(term) for term in expr.terms))

    elif isinstance(expr, Product):
        varying = [term for term in expr.terms if not is_invariant(term)]
        if len(varying) > 1:
            raise _unknown(expr, Domain.FREQUENCY,
                           "product of time-domain terms is a convolution")
        return Product(*(_forward(term) for term in expr.terms))

    elif isinstance(expr, Derivative):
        logger.debug("Differentiation rule: %s", expr)
        return Product(S, _forward(expr.subject))

    elif isinstance(expr, Integral):
        lower, upper = expr.lower, expr.upper
        if not (isinstance(lower, Constant) and lower.is_zero and upper == T):
            raise _unknown(expr, Domain.FREQUENCY,
                           "only integrals from 0 to t have a transform")
        logger.debug("Running integral rule: %s", expr)
        return Product(_forward(expr.integrand), S_INVERSE)

    elif isinstance(expr, Exponent):
        rate = _exponential_rate(expr)
        if rate is None:
            raise _unknown(expr, Domain.FREQUENCY, "only e^(a*t) exponentials have a transform")
        logger.debug("Exponential shift rule: %s", expr)
        return Exponent(Sum(S, _negate(rate)), MINUS_ONE)

    raise TypeError(f"Unknown expression node: {type(expr).__name__}")


def _inverse(expr: Expression) -> Expression:
    if is_invariant(expr):
        return expr

    if isinstance(expr, IndependentVariable):
        return T

    elif isinstance(expr, VoltageTerm):
        return VoltageTerm(expr.voltage, Domain.TIME)

    elif isinstance(expr, CurrentTerm):
        return CurrentTerm(expr.current, Domain.TIME)

    elif isinstance(expr, Sum):
        return Sum(*(_inverse(term) for term in expr.terms))

    elif isinstance(expr, Product):
        return _read_product(expr.terms)

    elif isinstance(expr, Exponent):
        pole = _pole(expr)
        if pole is None:
            raise _unknown(expr, Domain.TIME, "only (s + c)^-1 powers have an inverse")
        logger.debug("Exponential shift rule: %s", expr)
        return Exponent(Constant.e(), Product(_negate(pole), T))

    elif isinstance(expr, (Derivative, Integral)):
        raise _unknown(expr, Domain.TIME, "calculus on frequency-domain terms has no inverse")

    raise TypeError(f"Unknown expression node: {type(expr).__name__}")


def _read_product(terms: tuple) -> Expression:
    """
    Inverse of a flattened product, read by position.

    The forward rules leave a fixed layout: a derivative puts s in front of
    its operand, a running integral puts s^-1 after it, and scalar factors
    stay where they were. Invariant factors before the first or after the
    last s-dependent factor are read as scalars outside the calculus, so
    2*V(s)*s^-1 reads as 2*int[0, t](V).
    """
    if len(terms) == 1:
        return _inverse(terms[0])

    varying = [i for i, term in enumerate(terms) if not is_invariant(term)]
    if not varying:
        return Product(*terms)

    lo, hi = varying[0], varying[-1] + 1
    if (lo, hi) != (0, len(terms)):
        try:
            core = _read_core(terms[lo:hi])
        except UnknownTransformError:
            # The scalars belong inside: c * s^-1 is int[0, t](c)
            pass
        else:
            out = [*terms[:lo], core, *terms[hi:]]
            return Product(*out)
    return _read_core(terms)


def _read_core(terms: tuple) -> Expression:
    if len(terms) == 1:
        return _inverse(terms[0])

    error = None
    if terms[0] == S:
        try:
            result = Derivative(_read_product(terms[1:]))
        except UnknownTransformError as exc:
            error = exc
        else:
            logger.debug("Differentiation rule: %s", Product(*terms))
            return result

    # s alone is also the image of t, so int[0, t](t) arrives as s*s^-1
    if terms[-1] == S_INVERSE:
        try:
            result = Integral(_read_product(terms[:-1]), ZERO, T)
        except UnknownTransformError as exc:
            error = exc
        else:
            logger.debug("Running integral rule: %s", Product(*terms))
            return result

    if error is not None:
        raise error
    raise _unknown(Product(*terms), Domain.TIME, "product of frequency-domain terms is a convolution")
