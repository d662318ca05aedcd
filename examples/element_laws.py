"""
Example: element laws in the time and Laplace domains

Builds a resistor, capacitor and inductor, prints the voltage law of each
in the time domain, its Laplace transform, and the inverse transform back.
Also shows a transform that has no closed form.

Components used: R, C, L
"""
import logging

import sympy as sp

from ringmaster import Network, R, C, L, Product, try_transform, Domain, exp, T, Constant
from ringmaster.sympy_bridge import to_sympy


def build_elements(R_val=1000.0, C_val=1e-6, L_val=1e-3):
    """Build one of each passive element."""
    net = Network()
    net, r1 = R(net, name="R1", value=R_val)
    net, c1 = C(net, name="C1", value=C_val)
    net, l1 = L(net, name="L1", value=L_val)
    return net, {"R1": r1, "C1": c1, "L1": l1}


def main():
    # Show each rewrite rule as it is applied
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    print("=" * 60)
    print("Element laws: time and Laplace domains")
    print("=" * 60)

    net, refs = build_elements()

    for name, ref in refs.items():
        v = net.voltage_between(ref.pin("a"), ref.pin("b"))
        v_s = v.to_frequency()
        print(f"\n{name}")
        print("-" * 40)
        print(f"   v(t)      = {v}")
        print(f"   V(s)      = {v_s}")
        print(f"   inverse   = {v_s.to_time()}")
        print(f"   sympy     = {sp.simplify(to_sympy(v_s))}")

    print("\nExponential decay")
    print("-" * 40)
    decay = exp(Product(Constant(-3.0), T))
    print(f"   {decay}  ->  {decay.to_frequency()}")

    print("\nNo closed form")
    print("-" * 40)
    r1, c1 = refs["R1"], refs["C1"]
    product = Product(
        net.current_between(r1.pin("a"), r1.pin("b")),
        net.current_between(c1.pin("a"), c1.pin("b")),
    )
    result = try_transform(product, Domain.FREQUENCY)
    print(f"   {product}")
    print(f"   error: {result.error}")


if __name__ == "__main__":
    main()
