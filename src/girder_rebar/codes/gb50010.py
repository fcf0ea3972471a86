"""
GB 50010 style provisions for C50 concrete and HRB400 reinforcement.

Values used:
- Concrete C50: fc = 32.4 MPa, ft = 2.65 MPa
- Steel HRB400: fy = 400 MPa
- Relative compression zone limit xi_b = 0.518
"""

import math

from .base_code import DesignCode


class GB50010(DesignCode):
    """
    Concrete girder provisions for the C50 / HRB400 material pair.
    """

    MIN_STEEL_COEFF = 0.45      # As,min = 0.45 × ft/fy × b × h
    CONCRETE_SHEAR_COEFF = 0.20  # Vc = 0.20 × ft × b × h0
    BENT_BAR_STRESS_FACTOR = 0.75

    @property
    def code_name(self) -> str:
        return "GB 50010 (C50 / HRB400)"

    @property
    def fc(self) -> float:
        return 32.4

    @property
    def ft(self) -> float:
        return 2.65

    @property
    def fy(self) -> float:
        return 400.0

    @property
    def alpha_1(self) -> float:
        return 1.0

    @property
    def xi_b(self) -> float:
        return 0.518

    @property
    def concrete_unit_weight(self) -> float:
        return 2.5e-5

    @property
    def steel_density(self) -> float:
        return 7.85e-6

    def get_minimum_steel_area(self, width: float, height: float) -> float:
        return self.MIN_STEEL_COEFF * (self.ft / self.fy) * width * height

    def get_concrete_shear_capacity(self, width: float, effective_depth: float) -> float:
        return self.CONCRETE_SHEAR_COEFF * self.ft * width * effective_depth

    def get_bent_bar_shear_capacity(self, bar_area: float, angle_deg: float) -> float:
        """
        Vsb = 0.75 × fy × Asb × sin(αs)
        """
        return self.BENT_BAR_STRESS_FACTOR * self.fy * bar_area * math.sin(math.radians(angle_deg))
