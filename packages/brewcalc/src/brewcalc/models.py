"""
Input models for bitterness calculations.

Models use Pydantic v2 for validation and serialisation. Amounts are
metric: hop mass in kilograms, volumes in litres, times in minutes.
"""

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field, field_validator

from brewcalc.ibu import DEFAULT_METHOD, IbuMethod, ibu, parse_method
from brewcalc.units import Ibu


class HopAddition(BaseModel):
    """
    A single hop addition during the boil.

    The method serialises as its tag ("tinseth", "rager", ...) and
    defaults to Tinseth.
    """

    model_config = ConfigDict(frozen=True)

    name: str | None = Field(default=None, description="Hop variety")
    hop_mass_kg: float = Field(..., ge=0, description="Hop mass in kilograms")
    alpha_acid: float = Field(
        ...,
        ge=0,
        le=100,
        description="Alpha acid percentage",
    )
    volume_l: float = Field(..., gt=0, description="Average boil volume in litres")
    boil_time_min: float = Field(..., ge=0, description="Boil time in minutes")
    wort_gravity: float = Field(..., ge=0, description="Wort specific gravity")
    method: IbuMethod = Field(
        default=DEFAULT_METHOD,
        description="IBU calculation method",
    )

    @field_validator("method", mode="before")
    @classmethod
    def _parse_method(cls, v: object) -> IbuMethod:
        if v is None or isinstance(v, str):
            return parse_method(v)
        return v

    def ibu(self) -> Ibu:
        """Bitterness contributed by this addition."""
        return ibu(
            self.method,
            self.hop_mass_kg,
            self.alpha_acid,
            self.volume_l,
            self.boil_time_min,
            self.wort_gravity,
        )


def total_ibu(additions: Iterable[HopAddition]) -> Ibu:
    """Sum the bitterness of several hop additions."""
    return sum((addition.ibu() for addition in additions), 0.0)
