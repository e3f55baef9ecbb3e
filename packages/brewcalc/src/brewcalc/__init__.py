"""
brewcalc: Brewing calculations on validated quantities.

Provides gravity scale conversion, alcohol estimation and hop
bitterness (IBU) on top of a small typed quantity system.
"""

from brewcalc.quantities import (
    Quantity,
    SpecificGravity,
    Plato,
    Litre,
    Kilogram,
    AlcoholByVolume,
)
from brewcalc.conversions import (
    specific_gravity_to_plato,
    plato_to_specific_gravity,
)
from brewcalc.arithmetic import (
    multiply_volume_by_gravity,
    multiply_mass_by_gravity,
    scale_by_gravity,
)
from brewcalc.calculations import (
    abv_from_gravity_diff,
    strike_water_volume,
)
from brewcalc.ibu import (
    IbuMethod,
    ibu,
    tinseth_ibu,
    utilisation,
    gravity_correction_factor,
)
from brewcalc.models import HopAddition, total_ibu
from brewcalc.exceptions import (
    BrewCalcError,
    ValidationError,
    IbuMethodNotImplementedError,
    ConfigurationError,
)

__version__ = "0.1.0"

__all__ = [
    # Quantities
    "Quantity",
    "SpecificGravity",
    "Plato",
    "Litre",
    "Kilogram",
    "AlcoholByVolume",
    # Conversions
    "specific_gravity_to_plato",
    "plato_to_specific_gravity",
    # Arithmetic
    "multiply_volume_by_gravity",
    "multiply_mass_by_gravity",
    "scale_by_gravity",
    # Calculations
    "abv_from_gravity_diff",
    "strike_water_volume",
    # IBU
    "IbuMethod",
    "ibu",
    "tinseth_ibu",
    "utilisation",
    "gravity_correction_factor",
    "HopAddition",
    "total_ibu",
    # Exceptions
    "BrewCalcError",
    "ValidationError",
    "IbuMethodNotImplementedError",
    "ConfigurationError",
]
