"""
Conversions between specific gravity and degrees Plato.

Both directions use empirical fits, and they are not exact inverses:
SG -> Plato -> SG drifts by roughly 0.1-0.5 Plato at brewing strengths.

Results are built without validation. The Plato -> SG denominator goes to
zero near 294 Plato; the result then follows IEEE semantics (inf/nan).
"""

from brewcalc.quantities import Plato, SpecificGravity
from brewcalc.utils import ieee_divide


def specific_gravity_to_plato(sg: SpecificGravity) -> Plato:
    """
    Convert specific gravity to degrees Plato.

    P = -616.868 + 1111.14 v - 630.272 v^2 + 135.997 v^3

    The cubic is only a fit for v in [1.0, 1.2]; outside that range the
    result may be far from a physical concentration.

    Args:
        sg: Specific gravity (e.g., 1.050)

    Returns:
        Degrees Plato
    """
    if not isinstance(sg, SpecificGravity):
        raise TypeError(f"Expected SpecificGravity, got {type(sg).__name__}")
    v = sg.value
    plato = -616.868 + 1111.14 * v - 630.272 * (v * v) + 135.997 * (v * v * v)
    return Plato.model_construct(value=plato)


def plato_to_specific_gravity(plato: Plato) -> SpecificGravity:
    """
    Convert degrees Plato to specific gravity.

    v = 1 + P / (258.6 - (P / 258.2) * 227.1)

    Args:
        plato: Degrees Plato

    Returns:
        Specific gravity
    """
    if not isinstance(plato, Plato):
        raise TypeError(f"Expected Plato, got {type(plato).__name__}")
    p = plato.value
    sg = 1.0 + ieee_divide(p, 258.6 - (p / 258.2) * 227.1)
    return SpecificGravity.model_construct(value=sg)
