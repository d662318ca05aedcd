"""Tests for element voltage/current laws and their frequency-domain forms."""

import pytest


def test_resistor_laws():
    """v = R*i and i = (1/R)*v"""
    from ringmaster import Network, R, Product, Constant, Exponent, CurrentTerm, VoltageTerm
    from ringmaster import Current, Voltage, Domain

    net = Network()
    net, r1 = R(net, name="R1", value=1000.0)
    a, b = r1.pin("a"), r1.pin("b")

    v = net.voltage_between(a, b)
    i = net.current_between(a, b)

    assert v == Product(Constant(1000.0), CurrentTerm(Current(a, b), Domain.TIME))
    assert i == Product(Exponent(Constant(1000.0), Constant(-1.0)), VoltageTerm(Voltage(a, b)))
    assert v.type() is Domain.TIME


def test_resistor_reversed_pins():
    """Swapping pins swaps the identities, the law keeps its sign."""
    from ringmaster import Network, R, Product, Constant, CurrentTerm, Current

    net = Network()
    net, r1 = R(net, name="R1", value=50.0)
    a, b = r1.pin("a"), r1.pin("b")

    assert net.voltage_between(b, a) == Product(Constant(50.0), CurrentTerm(Current(b, a)))


def test_inductor_impedance():
    """L{L di/dt} = L*s*I(s)"""
    from ringmaster import Network, L, Product, Constant, CurrentTerm, Current, Domain, S

    net = Network()
    net, l1 = L(net, name="L1", value=1e-3)
    a, b = l1.pin("a"), l1.pin("b")

    v = net.voltage_between(a, b)
    result = v.to_frequency()

    assert result == Product(Constant(1e-3), S, CurrentTerm(Current(a, b), Domain.FREQUENCY))


def test_capacitor_impedance():
    """L{(1/C) int i} = (1/C)*I(s)*s^-1"""
    from ringmaster import Network, C, Product, Constant, Exponent, CurrentTerm, Current
    from ringmaster import Domain, S

    net = Network()
    net, c1 = C(net, name="C1", value=1e-6)
    a, b = c1.pin("a"), c1.pin("b")

    result = net.voltage_between(a, b).to_frequency()

    assert result == Product(
        Exponent(Constant(1e-6), Constant(-1.0)),
        CurrentTerm(Current(a, b), Domain.FREQUENCY),
        Exponent(S, Constant(-1.0)),
    )


def test_capacitor_and_inductor_currents():
    from ringmaster import Network, C, L, Product, Constant, Exponent, VoltageTerm, Voltage
    from ringmaster import Domain, S

    net = Network()
    net, c1 = C(net, name="C1", value=2e-6)
    net, l1 = L(net, name="L1", value=5e-3)

    ca, cb = c1.pin("a"), c1.pin("b")
    la, lb = l1.pin("a"), l1.pin("b")

    assert net.current_between(ca, cb).to_frequency() == Product(
        Constant(2e-6), S, VoltageTerm(Voltage(ca, cb), Domain.FREQUENCY)
    )
    assert net.current_between(la, lb).to_frequency() == Product(
        Exponent(Constant(5e-3), Constant(-1.0)),
        VoltageTerm(Voltage(la, lb), Domain.FREQUENCY),
        Exponent(S, Constant(-1.0)),
    )


def test_element_laws_round_trip():
    from ringmaster import Network, R, C, L

    net = Network()
    net, r1 = R(net, name="R1", value=10.0)
    net, c1 = C(net, name="C1", value=1e-6)
    net, l1 = L(net, name="L1", value=1e-3)

    for ref in (r1, c1, l1):
        a, b = ref.pin("a"), ref.pin("b")
        for law in (net.voltage_between(a, b), net.current_between(a, b)):
            assert law.to_frequency().to_time() == law, f"{ref.name}: {law}"


def test_voltage_source():
    from ringmaster import Network, VSource, Constant, CurrentTerm, Current, Domain

    net = Network()
    net, vs = VSource(net, name="vs", value=5.0)
    a, b = vs.pin("a"), vs.pin("b")

    assert net.voltage_between(a, b) == Constant(5.0)
    assert net.voltage_between(b, a) == Constant(-5.0)
    assert net.voltage_between(a, b).type() is Domain.INVARIANT
    assert net.current_between(a, b) == CurrentTerm(Current(a, b))


def test_network_is_immutable():
    from ringmaster import Network, R

    net = Network()
    new_net, r1 = R(net, name="R1", value=1.0)

    assert net.elements == ()
    assert len(new_net.elements) == 1
    assert new_net.element("R1").value == 1.0
    assert r1.kind == "R"


def test_network_errors():
    from ringmaster import Network, R, C, Pin

    net = Network()
    net, r1 = R(net, name="R1", value=1.0)
    net, c1 = C(net, name="C1", value=1.0)

    with pytest.raises(ValueError):
        R(net, name="R1", value=2.0)  # duplicate name

    with pytest.raises(ValueError):
        net.voltage_between(r1.pin("a"), c1.pin("b"))  # different elements

    with pytest.raises(ValueError):
        net.voltage_between(r1.pin("a"), r1.pin("a"))  # same pin

    with pytest.raises(ValueError):
        r1.pin("c")

    with pytest.raises(ValueError):
        net.element("X1")

    with pytest.raises(ValueError):
        net.current_between(Pin("X1", "a"), Pin("X1", "b"))


def test_topology_identities():
    from ringmaster import Pin, Voltage, Current

    a, b = Pin("R1", "a"), Pin("R1", "b")

    assert Voltage(a, b).reversed() == Voltage(b, a)
    assert Current(a, b).reversed() == Current(b, a)
    assert str(Voltage(a, b)) == "V(R1.a,R1.b)"
    assert str(Current(a, b)) == "I(R1.a->R1.b)"
