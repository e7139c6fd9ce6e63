"""
Annotation of an observed feature with a putative lipid identity.
"""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

from .detection import AdductDetector
from .models import IonizationMode, Lipid, Peak, sorted_peaks


class Annotation:
    """
    A putative lipid identification for one observed feature.

    The adduct is inferred once, at construction, from the grouped peaks
    as given; build a new annotation to re-run detection. Equality and
    hashing consider only the lipid, m/z and retention time.

    Args:
        lipid: Putative lipid identity.
        mz: Observed m/z of the feature.
        intensity: Intensity of the most abundant grouped peak.
        retention_time: Retention time in minutes.
        ionization_mode: Polarity of the acquisition.
        grouped_signals: Peaks believed to come from the same species.
        detector: Adduct detector to use; defaults to one over the
            default catalog.
    """

    def __init__(self,
                 lipid: Lipid,
                 mz: float,
                 intensity: float,
                 retention_time: float,
                 ionization_mode: IonizationMode,
                 grouped_signals: Iterable[Peak] = (),
                 detector: Optional[AdductDetector] = None):
        self._lipid = lipid
        self._mz = mz
        self._intensity = intensity
        self._rt_min = retention_time
        self._ionization_mode = ionization_mode
        self._grouped_signals: Tuple[Peak, ...] = sorted_peaks(grouped_signals)
        self._score = 0
        self._total_scores_applied = 0

        if detector is None:
            detector = AdductDetector()
        self._adduct: Optional[str] = detector.detect(
            self._mz, self._grouped_signals, self._ionization_mode)

    @property
    def lipid(self) -> Lipid:
        return self._lipid

    @property
    def mz(self) -> float:
        return self._mz

    @property
    def intensity(self) -> float:
        return self._intensity

    @property
    def rt_min(self) -> float:
        return self._rt_min

    @property
    def ionization_mode(self) -> IonizationMode:
        return self._ionization_mode

    @property
    def grouped_signals(self) -> Tuple[Peak, ...]:
        """Grouped peaks, deduplicated and sorted by m/z."""
        return self._grouped_signals

    @property
    def adduct(self) -> Optional[str]:
        """Inferred adduct label, or None if none could be assigned."""
        return self._adduct

    @adduct.setter
    def adduct(self, value: Optional[str]):
        self._adduct = value

    @property
    def score(self) -> int:
        return self._score

    @property
    def total_scores_applied(self) -> int:
        return self._total_scores_applied

    def add_score(self, delta: int):
        """Add a rule contribution to the score."""
        self._score += delta
        self._total_scores_applied += 1

    def normalized_score(self) -> Optional[float]:
        """
        Score divided by the number of contributions applied.

        Returns:
            The normalized score, or None if no score has been added yet.
        """
        if self._total_scores_applied == 0:
            return None
        return self._score / self._total_scores_applied

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Annotation):
            return NotImplemented
        return (self._mz == other._mz
                and self._rt_min == other._rt_min
                and self._lipid == other._lipid)

    def __hash__(self) -> int:
        return hash((self._lipid, self._mz, self._rt_min))

    def __repr__(self) -> str:
        return (f"Annotation({self._lipid.name}, mz={self._mz:.4f}, "
                f"RT={self._rt_min:.2f}, adduct={self._adduct}, "
                f"intensity={self._intensity:.1f}, score={self._score})")
