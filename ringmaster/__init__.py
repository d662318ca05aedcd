"""Ringmaster - symbolic voltages and currents in the time and Laplace domains.

Expressions are immutable trees of constants, sums, products, exponents,
derivatives, integrals, the independent variable (t or s) and voltage/current
terms bound to element pins. Each tree classifies as a time, frequency or
invariant quantity and can be rewritten between the two domains:

    from ringmaster import Network, R, L, Domain

    net = Network()
    net, l1 = L(net, name="L1", value=1e-3)
    v = net.voltage_between(l1.pin("a"), l1.pin("b"))   # 0.001*d/dt(I(L1.a->L1.b)(t))
    v.type()            # Domain.TIME
    v.to_frequency()    # 0.001*s*I(L1.a->L1.b)(s)
"""

import logging

from .errors import DomainError, ExpressionError, MixedDomainError, UnknownTransformError
from .topology import Pin, Voltage, Current, ElementRef, ElementSpec, Network
from .expression import (
    Domain,
    ConstantMode,
    Expression,
    Constant,
    Exponent,
    Sum,
    Product,
    Integral,
    Derivative,
    IndependentVariable,
    VoltageTerm,
    CurrentTerm,
    T,
    S,
    exp,
    derivative,
    running_integral,
)
from .classify import classify
from .laplace import TransformResult, to_frequency, to_time, try_transform
from .elements import R, C, L, VSource

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    # Errors
    "ExpressionError",
    "DomainError",
    "MixedDomainError",
    "UnknownTransformError",
    # Topology
    "Pin",
    "Voltage",
    "Current",
    "ElementRef",
    "ElementSpec",
    "Network",
    # Expression tree
    "Domain",
    "ConstantMode",
    "Expression",
    "Constant",
    "Exponent",
    "Sum",
    "Product",
    "Integral",
    "Derivative",
    "IndependentVariable",
    "VoltageTerm",
    "CurrentTerm",
    "T",
    "S",
    "exp",
    "derivative",
    "running_integral",
    # Classification and transforms
    "classify",
    "to_frequency",
    "to_time",
    "try_transform",
    "TransformResult",
    # Elements
    "R",
    "C",
    "L",
    "VSource",
    "__version__",
]
