"""Two-terminal element factories and their voltage/current laws (functional style).

Each element has pins "a" and "b". The laws are time-domain expressions in
terms of the element's own voltage V(a,b) and current I(a->b):

- R: v = R*i,           i = (1/R)*v
- C: v = (1/C)*int(i),  i = C*dv/dt
- L: v = L*di/dt,       i = (1/L)*int(v)

Transforming them with to_frequency gives the familiar impedances R, 1/(sC)
and sL.
"""

from __future__ import annotations

from .expression import (
    Constant,
    CurrentTerm,
    Derivative,
    Domain,
    Exponent,
    Expression,
    Product,
    VoltageTerm,
    running_integral,
)
from .topology import Current, ElementRef, ElementSpec, Network, Pin, Voltage

TWO_TERMINAL = ("a", "b")


def _two_terminal(net: Network, kind: str, name: str, value: float) -> tuple[Network, ElementRef]:
    spec = ElementSpec(name=name, kind=kind, pins=TWO_TERMINAL, value=float(value))
    return net.add_element(spec)


def R(net: Network, *, name: str, value: float) -> tuple[Network, ElementRef]:
    """
    Create a resistor.

    Args:
        net: Network to add to
        name: Element name (required, used in pin identities)
        value: Resistance in Ohms

    Returns:
        (new_network, element_ref)

    Example:
        net, r1 = R(net, name="R1", value=1000.0)  # 1 kOhm
    """
    return _two_terminal(net, "R", name, value)


def C(net: Network, *, name: str, value: float) -> tuple[Network, ElementRef]:
    """
    Create a capacitor.

    Args:
        net: Network to add to
        name: Element name
        value: Capacitance in Farads

    Example:
        net, c1 = C(net, name="C1", value=1e-6)  # 1 uF
    """
    return _two_terminal(net, "C", name, value)


def L(net: Network, *, name: str, value: float) -> tuple[Network, ElementRef]:
    """
    Create an inductor.

    Args:
        net: Network to add to
        name: Element name
        value: Inductance in Henrys

    Example:
        net, l1 = L(net, name="L1", value=1e-3)  # 1 mH
    """
    return _two_terminal(net, "L", name, value)


def VSource(net: Network, *, name: str, value: float) -> tuple[Network, ElementRef]:
    """
    Create an ideal DC voltage source, V(a,b) = value.

    Its current is set by the rest of the circuit, so current_between only
    names it.
    """
    return _two_terminal(net, "VSource", name, value)


def _identities(spec: ElementSpec, pin1: Pin, pin2: Pin) -> tuple[Voltage, Current, bool]:
    """Voltage and current identities for the pin pair, and whether it runs b -> a."""
    names = (pin1.name, pin2.name)
    if pin1.element != spec.name or pin2.element != spec.name:
        raise ValueError(f"Pins {pin1} and {pin2} do not both belong to {spec.name}")
    if names == TWO_TERMINAL:
        flipped = False
    elif names == TWO_TERMINAL[::-1]:
        flipped = True
    else:
        raise ValueError(f"{spec.name} has no relationship between pins {pin1.name!r} and {pin2.name!r}")
    return Voltage(pin1, pin2), Current(pin1, pin2), flipped


def _reciprocal(value: float) -> Expression:
    return Exponent(Constant(value), Constant(-1.0))


def voltage_between(spec: ElementSpec, pin1: Pin, pin2: Pin) -> Expression:
    """Time-domain voltage from pin1 to pin2 across the element."""
    _, current, flipped = _identities(spec, pin1, pin2)
    i = CurrentTerm(current, Domain.TIME)
    kind = spec.kind

    if kind == "R":
        return Product(Constant(spec.value), i)

    elif kind == "C":
        return Product(_reciprocal(spec.value), running_integral(i))

    elif kind == "L":
        return Product(Constant(spec.value), Derivative(i))

    elif kind == "VSource":
        return Constant(-spec.value if flipped else spec.value)

    raise ValueError(f"Unknown element kind: {kind}")


def current_between(spec: ElementSpec, pin1: Pin, pin2: Pin) -> Expression:
    """Time-domain current flowing from pin1 through the element to pin2."""
    voltage, current, _ = _identities(spec, pin1, pin2)
    v = VoltageTerm(voltage, Domain.TIME)
    kind = spec.kind

    if kind == "R":
        return Product(_reciprocal(spec.value), v)

    elif kind == "C":
        return Product(Constant(spec.value), Derivative(v))

    elif kind == "L":
        return Product(_reciprocal(spec.value), running_integral(v))

    elif kind == "VSource":
        return CurrentTerm(current, Domain.TIME)

    raise ValueError(f"Unknown element kind: {kind}")
