"""Kernel value-object types — public re-export surface.

Modules:
  state.py     — State
  postal.py    — PostalCode, ZIP
  area_code.py — AreaCode
  result.py    — Ok, Err, Result
"""

from mp_regions.kernel.types.area_code import AreaCode
from mp_regions.kernel.types.postal import ZIP, PostalCode, digits_of
from mp_regions.kernel.types.result import Err, Ok, Result
from mp_regions.kernel.types.state import State

__all__ = [
    "AreaCode",
    "Err",
    "Ok",
    "PostalCode",
    "Result",
    "State",
    "ZIP",
    "digits_of",
]
