"""
Mass arithmetic under an adduct hypothesis.

Converts between measured m/z and neutral monoisotopic mass for a given
adduct label, and provides the ppm comparisons used by adduct detection.
Failures (unknown adduct, missing input, degenerate arithmetic) are
returned as None and logged, never raised.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

import numpy as np

from .catalog import AdductCatalog, DEFAULT_CATALOG
from .constants import CHARGE_SIGNS

logger = logging.getLogger(__name__)

_SIGNS = re.escape(''.join(CHARGE_SIGNS))
_CHARGE_3 = re.compile(rf'.*3[{_SIGNS}]')
_CHARGE_2 = re.compile(rf'.*2[{_SIGNS}]')


def _round_half_up(value: float) -> int:
    return int(np.floor(value + 0.5))


def parse_multimer(adduct: str) -> int:
    """Number of molecules in the ion: 3 for ``3M``, 2 for ``2M``, else 1."""
    if '3M' in adduct:
        return 3
    if '2M' in adduct:
        return 2
    return 1


def parse_charge(adduct: str) -> int:
    """
    Charge state encoded in the label suffix.

    ``'[M+3H]3+'`` -> 3, ``'[M-2H]2-'`` -> 2, anything else
    (``'[M+H]+'``, unsigned labels) -> 1.
    """
    if _CHARGE_3.fullmatch(adduct):
        return 3
    if _CHARGE_2.fullmatch(adduct):
        return 2
    return 1


def _lookup_shift(adduct: Optional[str],
                  catalog: Optional[AdductCatalog]) -> Optional[float]:
    if not adduct:
        return None
    if catalog is None:
        catalog = DEFAULT_CATALOG
    shift = catalog.shift(adduct)
    if shift is None:
        logger.warning("Unknown adduct: %s", adduct)
    return shift


def mass_from_mz(mz: Optional[float],
                 adduct: Optional[str],
                 catalog: Optional[AdductCatalog] = None) -> Optional[float]:
    """
    Monoisotopic mass of the neutral molecule observed at *mz* as *adduct*.

    Args:
        mz: Observed m/z.
        adduct: Adduct label (``'[M+H]+'``, ``'[2M+H]+'``, ``'[M+2H]2+'``, ...).
        catalog: Adduct shifts; defaults to :data:`DEFAULT_CATALOG`.

    Returns:
        ``(mz * charge + shift) / multimer``, or None when *mz* or *adduct*
        is missing or the adduct is not in the catalog.
    """
    if mz is None:
        return None
    shift = _lookup_shift(adduct, catalog)
    if shift is None:
        return None
    return (mz * parse_charge(adduct) + shift) / parse_multimer(adduct)


def mz_from_mass(mass: Optional[float],
                 adduct: Optional[str],
                 catalog: Optional[AdductCatalog] = None) -> Optional[float]:
    """
    Theoretical m/z of a neutral *mass* ionized as *adduct*.

    Inverse of :func:`mass_from_mz` for the same label and catalog.

    Returns:
        ``(mass * multimer - shift) / charge``, or None on the same
        failures as :func:`mass_from_mz`.
    """
    if mass is None:
        return None
    shift = _lookup_shift(adduct, catalog)
    if shift is None:
        return None
    return (mass * parse_multimer(adduct) - shift) / parse_charge(adduct)


def ppm_increment(experimental: Optional[float],
                  theoretical: Optional[float]) -> Optional[int]:
    """
    Absolute difference between two masses in ppm of *theoretical*.

    Not symmetric: the divisor is always the second argument.

    Returns:
        ``round(|experimental - theoretical| * 1e6 / theoretical)``, or None
        if either value is missing, *theoretical* is zero, or the result
        is not finite.
    """
    if experimental is None or theoretical is None or theoretical == 0:
        logger.debug("Cannot compute ppm between %s and %s", experimental, theoretical)
        return None
    ppm = abs((experimental - theoretical) * 1e6 / theoretical)
    if not np.isfinite(ppm):
        logger.debug("Non-finite ppm between %s and %s", experimental, theoretical)
        return None
    return _round_half_up(ppm)


def within_ppm(experimental: Optional[float],
               theoretical: Optional[float],
               tolerance: float) -> bool:
    """True if :func:`ppm_increment` is defined and within *tolerance*."""
    ppm = ppm_increment(experimental, theoretical)
    return ppm is not None and ppm <= tolerance


def delta_from_ppm(mass: float, ppm: float) -> float:
    """
    Convert a ppm tolerance into an absolute window in Da.

    Returns:
        ``round(|mass * ppm| / 1e6)``.
    """
    return float(_round_half_up(abs(mass * ppm) / 1e6))
