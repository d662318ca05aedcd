"""Pins, voltage/current identities and element networks (immutable/functional style)."""

from __future__ import annotations
from typing import NamedTuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .expression import Expression


class Pin(NamedTuple):
    """A terminal of an element, the basic reference point for voltages and currents."""
    element: str  # owning element name
    name: str

    def __str__(self):
        return f"{self.element}.{self.name}"


class Voltage(NamedTuple):
    """The voltage difference between an upper and a lower pin."""
    upper: Pin
    lower: Pin

    def reversed(self) -> Voltage:
        return Voltage(self.lower, self.upper)

    def __str__(self):
        return f"V({self.upper},{self.lower})"


class Current(NamedTuple):
    """The current flowing from a source pin to a destination pin."""
    src: Pin
    dst: Pin

    def reversed(self) -> Current:
        return Current(self.dst, self.src)

    def __str__(self):
        return f"I({self.src}->{self.dst})"


class ElementRef(NamedTuple):
    """Reference to an element for later pin lookups."""
    name: str
    kind: str  # "R", "C", "L", "VSource"
    pins: tuple[Pin, ...]

    def pin(self, name: str) -> Pin:
        for p in self.pins:
            if p.name == name:
                return p
        raise ValueError(f"Element {self.name} has no pin {name!r}")


class ElementSpec(NamedTuple):
    """Specification for an element (kind, pin names and value)."""
    name: str
    kind: str
    pins: tuple[str, ...]  # pin names, in terminal order
    value: float


class Network(NamedTuple):
    """
    Immutable collection of elements.

    Build using functional style:
        net = Network()
        net, r1 = R(net, name="R1", value=1000.0)
        v = net.voltage_between(r1.pin("a"), r1.pin("b"))
    """
    elements: tuple[ElementSpec, ...] = ()

    def element(self, name: str) -> ElementSpec:
        """Look up an element specification by name."""
        for spec in self.elements:
            if spec.name == name:
                return spec
        raise ValueError(f"Element {name} not found")

    def add_element(self, spec: ElementSpec) -> tuple[Network, ElementRef]:
        """
        Add an element specification.

        Returns (new_network, element_ref).
        """
        for existing in self.elements:
            if existing.name == spec.name:
                raise ValueError(f"Element {spec.name} already exists")

        new_net = self._replace(elements=self.elements + (spec,))
        ref = ElementRef(spec.name, spec.kind, tuple(Pin(spec.name, p) for p in spec.pins))
        return new_net, ref

    def voltage_between(self, pin1: Pin, pin2: Pin) -> Expression:
        """
        Time-domain expression for the voltage from pin1 to pin2.

        Both pins must belong to the same element.
        """
        from .elements import voltage_between
        return voltage_between(self._owner(pin1, pin2), pin1, pin2)

    def current_between(self, pin1: Pin, pin2: Pin) -> Expression:
        """Time-domain expression for the current from pin1 through the element to pin2."""
        from .elements import current_between
        return current_between(self._owner(pin1, pin2), pin1, pin2)

    def _owner(self, pin1: Pin, pin2: Pin) -> ElementSpec:
        if pin1.element != pin2.element:
            raise ValueError(f"Pins {pin1} and {pin2} belong to different elements")
        return self.element(pin1.element)
