"""
Abstract base class for design code provisions.
Lets the engine switch material and limit values without touching the
calculation modules.
"""

from abc import ABC, abstractmethod


class DesignCode(ABC):
    """
    Abstract base class for structural design codes.

    Purpose:
    - Define the material strengths used by the rebar search
    - Provide the ductility limit and coefficient values per code
    """

    @property
    @abstractmethod
    def code_name(self) -> str:
        """Return the code name/version."""
        pass

    @property
    @abstractmethod
    def fc(self) -> float:
        """Concrete compressive strength (MPa)."""
        pass

    @property
    @abstractmethod
    def ft(self) -> float:
        """Concrete tensile strength (MPa)."""
        pass

    @property
    @abstractmethod
    def fy(self) -> float:
        """Steel yield strength (MPa)."""
        pass

    @property
    @abstractmethod
    def alpha_1(self) -> float:
        """Equivalent rectangular stress block factor."""
        pass

    @property
    @abstractmethod
    def xi_b(self) -> float:
        """Relative depth limit of the compression zone (ductile failure)."""
        pass

    @property
    @abstractmethod
    def concrete_unit_weight(self) -> float:
        """Unit weight of concrete (N/mm³)."""
        pass

    @property
    @abstractmethod
    def steel_density(self) -> float:
        """Density of reinforcing steel (tonne/mm³)."""
        pass

    @abstractmethod
    def get_minimum_steel_area(self, width: float, height: float) -> float:
        """Return minimum tension reinforcement area (mm²)."""
        pass

    @abstractmethod
    def get_concrete_shear_capacity(self, width: float, effective_depth: float) -> float:
        """Return shear resisted by concrete alone (N)."""
        pass

    @abstractmethod
    def get_bent_bar_shear_capacity(self, bar_area: float, angle_deg: float) -> float:
        """Return shear resisted by bent-up bars of total area bar_area (N)."""
        pass
