"""
Value types shared across the package: ionization mode, lipid identity
and spectral peaks.
"""

from __future__ import annotations

import numpy as np
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple


class IonizationMode(Enum):
    """Ionization polarity of an acquisition."""
    POSITIVE = 'positive'
    NEGATIVE = 'negative'

    @classmethod
    def from_string(cls, value: str) -> 'IonizationMode':
        """
        Parse an ionization mode from a free-text polarity string.

        Args:
            value: ``'positive'``, ``'pos'``, ``'+'`` or their negative
                counterparts (case-insensitive).

        Returns:
            The matching :class:`IonizationMode`.
        """
        key = str(value).strip().lower()
        if key in ('positive', 'pos', '+'):
            return cls.POSITIVE
        if key in ('negative', 'neg', '-', '−'):
            return cls.NEGATIVE
        raise ValueError(f"Unknown ionization mode '{value}'. Use 'positive' or 'negative'.")


@dataclass(frozen=True)
class Lipid:
    """A lipid identity that annotations refer to."""
    name: str
    compound_id: Optional[int] = None
    formula: str = ""
    lipid_type: str = ""
    carbon_count: int = 0
    double_bonds_count: int = 0

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, order=True)
class Peak:
    """A centroided spectral peak, ordered by m/z."""
    mz: float
    intensity: float = 0.0


def sorted_peaks(peaks: Iterable[Peak]) -> Tuple[Peak, ...]:
    """Deduplicate *peaks* and return them in m/z order."""
    return tuple(sorted(set(peaks)))


def peaks_from_arrays(mz_array: np.ndarray,
                      int_array: np.ndarray) -> Tuple[Peak, ...]:
    """
    Build a peak cluster from parallel m/z and intensity arrays.

    Args:
        mz_array: m/z values.
        int_array: Intensities, same length as *mz_array*.

    Returns:
        Deduplicated tuple of :class:`Peak` sorted by m/z.
    """
    mz_array = np.asarray(mz_array, dtype=float)
    int_array = np.asarray(int_array, dtype=float)
    if mz_array.shape != int_array.shape:
        raise ValueError(
            f"m/z and intensity arrays differ in shape: "
            f"{mz_array.shape} vs {int_array.shape}")
    return sorted_peaks(Peak(float(mz), float(inten))
                        for mz, inten in zip(mz_array, int_array))
