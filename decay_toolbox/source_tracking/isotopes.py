from dataclasses import dataclass, field, replace
from typing import List, Optional
import uuid
import warnings

from .settings import ureg


@dataclass(frozen=True)
class Isotope:
    """
    Class to hold the information of an isotope.

    Attributes
    ----------
    name :
        The name of the isotope (eg. "Technetium-99m").
    symbol :
        The short symbol of the isotope (eg. "Tc-99m").
    half_life :
        The half-life of the isotope in seconds.
    id :
        Unique identifier. Two isotopes with the same half-life but
        different ids are different records.
    """

    name: str
    symbol: str
    half_life: float
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def __post_init__(self):
        if not self.half_life > 0:
            raise ValueError(
                f"Half-life of {self.name} must be strictly positive, got {self.half_life}"
            )

    @classmethod
    def from_half_life(cls, name: str, symbol: str, half_life, **kwargs) -> "Isotope":
        """
        Creates an Isotope from a half-life given as a pint.Quantity
        (eg. ``6.0067 * ureg.hour``) or as a number of seconds.
        """
        if isinstance(half_life, ureg.Quantity):
            half_life = half_life.to(ureg.s).magnitude
        return cls(name=name, symbol=symbol, half_life=float(half_life), **kwargs)

    def edit(self, **changes) -> "Isotope":
        """Returns a replacement isotope with the same id"""
        changes.pop("id", None)
        return replace(self, **changes)

    def get_half_life_string(self) -> str:
        if self.half_life < 3600:
            return f"{self.half_life / 60:.1f} min"
        elif self.half_life < 86400:
            return f"{self.half_life / 3600:.2f} hours"
        else:
            return f"{self.half_life / 86400:.2f} days"

    def get_half_life_quantity(self) -> ureg.Quantity:
        """Returns the half-life in days, hours or minutes, using the
        largest unit that divides it exactly."""
        if self.half_life % 86400 == 0:
            return (self.half_life * ureg.s).to(ureg.day)
        elif self.half_life % 3600 == 0:
            return (self.half_life * ureg.s).to(ureg.hour)
        return (self.half_life * ureg.s).to(ureg.minute)


# Default medical isotopes
tc99m = Isotope(name="Technetium-99m", symbol="Tc-99m", half_life=6.0067 * 3600)
f18 = Isotope(name="Fluorine-18", symbol="F-18", half_life=109.77 * 60)
i131 = Isotope(name="Iodine-131", symbol="I-131", half_life=8.02 * 86400)
ga68 = Isotope(name="Gallium-68", symbol="Ga-68", half_life=67.71 * 60)
lu177 = Isotope(name="Lutetium-177", symbol="Lu-177", half_life=6.647 * 86400)
i123 = Isotope(name="Iodine-123", symbol="I-123", half_life=13.22 * 3600)
tl201 = Isotope(name="Thallium-201", symbol="Tl-201", half_life=72.91 * 3600)

DEFAULT_ISOTOPES = [tc99m, f18, i131, ga68, lu177, i123, tl201]


class IsotopeLibrary:
    isotopes: List[Isotope]

    def __init__(self, isotopes: Optional[List[Isotope]] = None) -> None:
        """
        Initialize an IsotopeLibrary object.
        Args:
            isotopes: the isotopes of the library, if None the default
                medical isotopes are used
        """
        if isotopes is None:
            isotopes = DEFAULT_ISOTOPES
        self.isotopes = list(isotopes)

    def __len__(self) -> int:
        return len(self.isotopes)

    def __iter__(self):
        return iter(self.isotopes)

    def add(self, isotope: Isotope) -> None:
        self.isotopes.append(isotope)

    def get(self, isotope_id: uuid.UUID) -> Optional[Isotope]:
        for isotope in self.isotopes:
            if isotope.id == isotope_id:
                return isotope
        return None

    def get_by_symbol(self, symbol: str) -> Optional[Isotope]:
        for isotope in self.isotopes:
            if isotope.symbol.lower() == symbol.lower():
                return isotope
        return None

    def update(self, isotope: Isotope) -> None:
        """Replaces the isotope with the same id.
        References already holding the old isotope are not changed."""
        for i, existing in enumerate(self.isotopes):
            if existing.id == isotope.id:
                self.isotopes[i] = isotope
                return
        warnings.warn(f"Isotope {isotope.symbol} ({isotope.id}) not in library, not updated.")

    def delete(self, isotope_id: uuid.UUID) -> None:
        remaining = [iso for iso in self.isotopes if iso.id != isotope_id]
        if len(remaining) == len(self.isotopes):
            warnings.warn(f"Isotope {isotope_id} not in library, nothing deleted.")
        self.isotopes = remaining
