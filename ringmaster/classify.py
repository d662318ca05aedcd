"""Domain classification of expression trees.

Leaves carry their own domain (constants are invariant), composite nodes
combine the domains of their children. Time and frequency never mix under
one node; such a tree is malformed and classify() rejects it.
"""

from __future__ import annotations

from .errors import MixedDomainError
from .expression import (
    Constant,
    CurrentTerm,
    Derivative,
    Domain,
    Exponent,
    Expression,
    IndependentVariable,
    Integral,
    Product,
    Sum,
    VoltageTerm,
)


def combine(node: Expression, domains) -> Domain:
    """
    Domain shared by a group of sibling sub-expressions.

    All invariant gives INVARIANT, otherwise the one non-invariant domain.

    Raises:
        MixedDomainError: if both time and frequency are present
    """
    found = {d for d in domains if d is not Domain.INVARIANT}
    if not found:
        return Domain.INVARIANT
    if len(found) > 1:
        raise MixedDomainError(f"{type(node).__name__} {node} mixes time and frequency terms")
    return found.pop()


def classify(expr: Expression) -> Domain:
    """Return the domain of an expression."""
    if isinstance(expr, Constant):
        return Domain.INVARIANT

    elif isinstance(expr, (IndependentVariable, VoltageTerm, CurrentTerm)):
        return expr.domain

    elif isinstance(expr, (Sum, Product)):
        return combine(expr, (classify(term) for term in expr.terms))

    elif isinstance(expr, Exponent):
        # e^(k*t) is a function of t alone
        if isinstance(expr.base, Constant) and expr.base.is_e:
            return classify(expr.exponent)
        return combine(expr, (classify(expr.base), classify(expr.exponent)))

    elif isinstance(expr, Derivative):
        return classify(expr.subject)

    elif isinstance(expr, Integral):
        # Bounds matter when the integrand is constant: int[0, t](5) is 5*t
        return combine(expr, (classify(expr.integrand), classify(expr.lower), classify(expr.upper)))

    raise TypeError(f"Unknown expression node: {type(expr).__name__}")


def is_invariant(expr: Expression) -> bool:
    return classify(expr) is Domain.INVARIANT
