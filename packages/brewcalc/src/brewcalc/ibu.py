"""
International Bitterness Units (IBU) for hop additions.

Only the Tinseth method has a formula. Rager, Garetz and Noonan are
selectable but raise IbuMethodNotImplementedError when invoked.

References:
    https://www.realbeer.com/hops/research.html
    https://www.backtoschoolbrewing.com/blog/2016/9/5/how-to-calculate-ibus
"""

import logging
from enum import Enum
from typing import Callable

from rapidfuzz import fuzz, process

from brewcalc.exceptions import IbuMethodNotImplementedError, ValidationError
from brewcalc.units import Ibu, Kilograms, Liters, Minutes, Percent
from brewcalc.utils import ieee_divide, ieee_exp, ieee_pow

logger = logging.getLogger(__name__)


class IbuMethod(str, Enum):
    """IBU calculation method."""

    TINSETH = "tinseth"
    RAGER = "rager"
    GARETZ = "garetz"
    NOONAN = "noonan"


DEFAULT_METHOD = IbuMethod.TINSETH


def suggest_method(query: str, threshold: float = 0.6) -> IbuMethod | None:
    """
    Suggest the closest IBU method name for a misspelt query.

    Args:
        query: The method name as given
        threshold: Minimum match score (0.0 to 1.0)

    Returns:
        The closest method, or None if nothing scores above threshold
    """
    if not query or not query.strip():
        return None

    result = process.extractOne(
        query.lower().strip(),
        [m.value for m in IbuMethod],
        scorer=fuzz.ratio,
        score_cutoff=threshold * 100,
    )
    if result is None:
        return None
    return IbuMethod(result[0])


def parse_method(method: IbuMethod | str | None) -> IbuMethod:
    """
    Resolve a method selector to an IbuMethod.

    Args:
        method: An IbuMethod, its name (case-insensitive), or None for the default

    Returns:
        The selected IbuMethod

    Raises:
        ValidationError: If the name is not a known method
    """
    if method is None:
        return DEFAULT_METHOD
    if isinstance(method, IbuMethod):
        return method
    if not isinstance(method, str):
        raise TypeError(f"IBU method must be a string, got {type(method).__name__}")

    try:
        return IbuMethod(method.lower().strip())
    except ValueError as e:
        suggestion = suggest_method(method)
        hint = f" Did you mean '{suggestion.value}'?" if suggestion else ""
        raise ValidationError(f"Unknown IBU method: {method}.{hint}") from e


def gravity_correction_factor(wort_gravity: float) -> float:
    """
    Correction factor for high gravity worts.

    C_G = 1                        for gravity <= 1.05
    C_G = 1 + (gravity - 1.05) / 2 otherwise
    """
    if wort_gravity > 1.05:
        return 1.0 + (wort_gravity - 1.05) / 2.0
    return 1.0


def utilisation(boil_time_min: Minutes, wort_gravity: float) -> float:
    """
    Continuous approximation of the hop utilisation factor U.

    U is the product of the bigness factor and the boil time factor:

        C_big  = 1.65 * 0.000125 ^ (gravity - 1)
        C_boil = (1 - e^(-0.04 t)) / 4.15

    Not clamped: negative boil times give values outside [0, 1].

    Args:
        boil_time_min: Boil time in minutes
        wort_gravity: Specific gravity of the wort

    Returns:
        Utilisation factor
    """
    bigness_factor = 1.65 * ieee_pow(0.000125, wort_gravity - 1.0)
    boil_time_factor = (1.0 - ieee_exp(-0.04 * boil_time_min)) / 4.15
    return bigness_factor * boil_time_factor


def tinseth_ibu(
    hop_mass_kg: Kilograms,
    alpha_acid_percent: Percent,
    volume_l: Liters,
    boil_time_min: Minutes,
    wort_gravity: float,
) -> Ibu:
    """
    IBU for a single hop addition using the Tinseth method.

        IBU = 10000 * m * U(t, gravity) * alpha / (V * C_G(gravity))

    The textbook factor is 1000; 10000 accounts for the hop mass being in
    kilograms and alpha acid being a percentage rather than a fraction.

    Args:
        hop_mass_kg: Hop mass in kilograms
        alpha_acid_percent: Alpha acid as a percentage (e.g., 8.5)
        volume_l: Average boil volume in litres
        boil_time_min: Boil time in minutes
        wort_gravity: Specific gravity of the wort

    Returns:
        Bitterness in IBU
    """
    numerator = (
        10_000.0
        * hop_mass_kg
        * utilisation(boil_time_min, wort_gravity)
        * alpha_acid_percent
    )
    denominator = volume_l * gravity_correction_factor(wort_gravity)
    return ieee_divide(numerator, denominator)


_FORMULAS: dict[IbuMethod, Callable[..., Ibu]] = {
    IbuMethod.TINSETH: tinseth_ibu,
}


def ibu(
    method: IbuMethod | str | None,
    hop_mass: Kilograms,
    alpha_acid: Percent,
    volume: Liters,
    boil_time: Minutes,
    wort_gravity: float,
) -> Ibu:
    """
    IBU for a single hop addition using the selected method.

    Args:
        method: Calculation method; None selects Tinseth
        hop_mass: Hop mass in kilograms
        alpha_acid: Alpha acid as a percentage
        volume: Average boil volume in litres
        boil_time: Boil time in minutes
        wort_gravity: Specific gravity of the wort

    Returns:
        Bitterness in IBU

    Raises:
        ValidationError: If the method name is unknown
        IbuMethodNotImplementedError: If the method has no formula
    """
    selected = parse_method(method)
    formula = _FORMULAS.get(selected)
    if formula is None:
        logger.warning("IBU method %s requested but not implemented", selected.value)
        raise IbuMethodNotImplementedError(selected.value)

    logger.debug(
        "Calculating IBU with %s: mass=%s kg, alpha=%s%%, volume=%s l, time=%s min, gravity=%s",
        selected.value,
        hop_mass,
        alpha_acid,
        volume,
        boil_time,
        wort_gravity,
    )
    return formula(hop_mass, alpha_acid, volume, boil_time, wort_gravity)
