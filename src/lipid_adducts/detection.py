"""
Adduct inference from a cluster of grouped peaks.

Two phases are tried in order:

1. **Peak pairs** - for each ordered pair of distinct adducts and each
   ordered pair of distinct peaks, the peaks are explained as the same
   neutral mass ionized two ways. If the candidate m/z is one of the two
   peaks, that peak's adduct is assigned.
2. **Single m/z** - fallback over the catalog when no pair matched.

The first hypothesis that satisfies the tolerance wins; hypotheses are
visited in catalog order crossed with peak (m/z) order, and no attempt is
made to find the closest match.
"""

from __future__ import annotations

import logging
from itertools import permutations
from typing import Iterable, Mapping, Optional, Sequence

from .catalog import AdductCatalog, DEFAULT_CATALOG
from .constants import PPM_TOLERANCE
from .mass import mass_from_mz, mz_from_mass, within_ppm
from .models import IonizationMode, Peak, sorted_peaks

logger = logging.getLogger(__name__)


class AdductDetector:
    """
    Infer the adduct of a candidate m/z from its grouped peaks.

    Args:
        catalog: Adduct shifts; defaults to :data:`DEFAULT_CATALOG`.
        tolerance_ppm: Matching tolerance in ppm (default 10).

    Example::

        detector = AdductDetector()
        peaks = [Peak(700.5, 1e5), Peak(722.482, 4e4)]
        detector.detect(700.5, peaks, IonizationMode.POSITIVE)  # '[M+H]+'
    """

    def __init__(self,
                 catalog: Optional[AdductCatalog] = None,
                 tolerance_ppm: float = PPM_TOLERANCE):
        self.catalog = catalog if catalog is not None else DEFAULT_CATALOG
        self.tolerance_ppm = tolerance_ppm

    def detect(self, mz: float, peaks: Iterable[Peak],
               ionization_mode: IonizationMode) -> Optional[str]:
        """
        Return the adduct label for *mz*, or None if no hypothesis fits.

        Args:
            mz: Candidate m/z.
            peaks: Peaks grouped with the candidate; deduplicated and
                sorted by m/z before use.
            ionization_mode: Selects the catalog partition searched.
        """
        adducts = self.catalog.for_mode(ionization_mode)
        ordered = sorted_peaks(peaks)

        adduct = None
        if len(ordered) >= 2:
            adduct = self.detect_from_pairs(mz, ordered, adducts)
        if adduct is None:
            adduct = self.detect_from_mz(mz, adducts)
        return adduct

    def detect_from_pairs(self, mz: float, peaks: Sequence[Peak],
                          adducts: Mapping[str, float]) -> Optional[str]:
        """Phase 1: explain two grouped peaks as one neutral mass."""
        for adduct1, adduct2 in permutations(adducts, 2):
            for peak1, peak2 in permutations(peaks, 2):
                mass1 = mass_from_mz(peak1.mz, adduct1, self.catalog)
                mass2 = mass_from_mz(peak2.mz, adduct2, self.catalog)
                if mass1 is None or mass2 is None:
                    continue
                if not within_ppm(mass1, mass2, self.tolerance_ppm):
                    continue

                if within_ppm(mz, peak1.mz, self.tolerance_ppm):
                    logger.debug("Adduct %s detected from pair (%s, %s)",
                                 adduct1, adduct1, adduct2)
                    return adduct1
                if within_ppm(mz, peak2.mz, self.tolerance_ppm):
                    logger.debug("Adduct %s detected from pair (%s, %s)",
                                 adduct2, adduct1, adduct2)
                    return adduct2
        return None

    def detect_from_mz(self, mz: float,
                       adducts: Mapping[str, float]) -> Optional[str]:
        """
        Phase 2: fall back to the candidate m/z alone.

        The expected m/z is derived from *mz* itself through the inverse
        conversion, so this accepts the first adduct whose conversion
        succeeds and is not numerically degenerate, regardless of mass
        agreement. Comparing against an independent reference m/z (e.g. the
        lipid's theoretical mass) was probably intended; the behaviour is
        kept because annotations downstream depend on it.
        """
        for adduct in adducts:
            mono_mass = mass_from_mz(mz, adduct, self.catalog)
            if mono_mass is None:
                continue
            expected_mz = mz_from_mass(mono_mass, adduct, self.catalog)
            if within_ppm(mz, expected_mz, self.tolerance_ppm):
                logger.debug("Adduct %s detected from direct match", adduct)
                return adduct
        return None


def detect_adduct(mz: float,
                  peaks: Iterable[Peak],
                  ionization_mode: IonizationMode,
                  catalog: Optional[AdductCatalog] = None,
                  tolerance_ppm: float = PPM_TOLERANCE) -> Optional[str]:
    """Shortcut for ``AdductDetector(catalog, tolerance_ppm).detect(...)``."""
    return AdductDetector(catalog, tolerance_ppm).detect(mz, peaks, ionization_mode)
