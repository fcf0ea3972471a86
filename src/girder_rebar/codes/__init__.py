# Design code provisions
from .base_code import DesignCode
from .gb50010 import GB50010

_CODES = {
    "gb50010": GB50010,
}


def get_code(name: str = "gb50010") -> DesignCode:
    """Return a design code instance by its registry name."""
    try:
        return _CODES[name.lower()]()
    except KeyError:
        known = ", ".join(sorted(_CODES))
        raise ValueError(f"Unknown design code '{name}'. Known codes: {known}") from None
