"""Render expression trees as SymPy expressions for display and checking."""

from __future__ import annotations

import re

import sympy as sp

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
    Sum,
    VoltageTerm,
)

t, s = sp.symbols("t s", positive=True)
tau = sp.Symbol("tau", positive=True)


def _function_name(prefix: str, a, b) -> str:
    return re.sub(r"\W", "_", f"{prefix}_{a}_{b}")


def _argument(domain: Domain):
    if domain is Domain.TIME:
        return t
    if domain is Domain.FREQUENCY:
        return s
    return None


def _term(name: str, domain: Domain):
    arg = _argument(domain)
    if arg is None:
        return sp.Symbol(name)
    return sp.Function(name)(arg)


def to_sympy(expr: Expression):
    """
    Convert an expression tree to SymPy.

    t and s become positive symbols, voltage and current terms become
    undefined functions of t or s (plain symbols when invariant), e becomes
    sympy.E. Running integrals integrate over a dummy variable tau.
    """
    if isinstance(expr, Constant):
        if expr.mode is ConstantMode.E:
            return sp.E
        if expr.mode is ConstantMode.ONE:
            return sp.Integer(1)
        if expr.mode is ConstantMode.MINUS_ONE:
            return sp.Integer(-1)
        return sp.nsimplify(expr.value)

    elif isinstance(expr, IndependentVariable):
        return _argument(expr.domain)

    elif isinstance(expr, VoltageTerm):
        return _term(_function_name("V", *expr.voltage), expr.domain)

    elif isinstance(expr, CurrentTerm):
        return _term(_function_name("I", *expr.current), expr.domain)

    elif isinstance(expr, Sum):
        return sp.Add(*(to_sympy(term) for term in expr.terms))

    elif isinstance(expr, Product):
        return sp.Mul(*(to_sympy(term) for term in expr.terms))

    elif isinstance(expr, Exponent):
        return sp.Pow(to_sympy(expr.base), to_sympy(expr.exponent))

    elif isinstance(expr, Derivative):
        return sp.diff(to_sympy(expr.subject), t)

    elif isinstance(expr, Integral):
        integrand = to_sympy(expr.integrand).subs(t, tau)
        return sp.Integral(integrand, (tau, to_sympy(expr.lower), to_sympy(expr.upper)))

    raise TypeError(f"Unknown expression node: {type(expr).__name__}")
