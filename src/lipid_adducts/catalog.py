"""
Adduct catalog: read-only mapping from adduct label to mass shift.

A shift is the signed value, in Da, that turns ``mz * charge`` into the
mass of the ``multimer`` neutral molecules::

    mass = (mz * charge + shift) / multimer

The catalog is built once and passed explicitly to whatever needs it, so
tests can substitute a synthetic one.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

from pyteomics import mass

from .constants import POSITIVE_ADDUCTS, NEGATIVE_ADDUCTS
from .models import IonizationMode

logger = logging.getLogger(__name__)

ELECTRON_MASS = mass.nist_mass['e*'][0][0]


def _formula_mass(formula: str) -> float:
    if not formula:
        return 0.0
    return mass.calculate_mass(formula=formula)


def adduct_shift(gained: str, lost: str, charge: int,
                 mode: IonizationMode) -> float:
    """
    Calculate the mass shift of an adduct from its chemical definition.

    Args:
        gained: Formula of the species added to the molecule (e.g. ``'Na'``).
        lost: Formula of the species removed from it (e.g. ``'H'``).
        charge: Absolute charge of the ion.
        mode: Polarity; positive ions have lost *charge* electrons,
            negative ions have gained them.

    Returns:
        Shift in Da such that ``mass = (mz * charge + shift) / multimer``.
    """
    sign = 1 if mode is IonizationMode.POSITIVE else -1
    return -(_formula_mass(gained) - _formula_mass(lost)) + sign * charge * ELECTRON_MASS


def _frozen(shifts: Mapping[str, float]) -> Mapping[str, float]:
    return MappingProxyType({str(label): float(value) for label, value in shifts.items()})


@dataclass(frozen=True)
class AdductCatalog:
    """
    Read-only adduct shifts, partitioned by ionization polarity.

    Both partitions keep their insertion order, which is the order adduct
    detection visits hypotheses in.

    Args:
        positive: Mapping of positive mode labels to shifts (Da).
        negative: Mapping of negative mode labels to shifts (Da).

    Example::

        catalog = AdductCatalog({'[M+H]+': -1.007276}, {'[M-H]-': 1.007276})
        catalog.shift('[M-H]-')            # 1.007276
        catalog.for_mode(IonizationMode.POSITIVE)
    """
    positive: Mapping[str, float] = field(default_factory=dict)
    negative: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, 'positive', _frozen(self.positive))
        object.__setattr__(self, 'negative', _frozen(self.negative))

    def __contains__(self, label: object) -> bool:
        return label in self.positive or label in self.negative

    def __len__(self) -> int:
        return len(self.positive) + len(self.negative)

    def __iter__(self) -> Iterator[str]:
        yield from self.positive
        yield from self.negative

    def shift(self, label: str) -> Optional[float]:
        """Shift for *label*, searching positive then negative; None if unknown."""
        if label in self.positive:
            return self.positive[label]
        return self.negative.get(label)

    def for_mode(self, mode: IonizationMode) -> Mapping[str, float]:
        """Partition visible in the given ionization mode."""
        if mode is IonizationMode.POSITIVE:
            return self.positive
        if mode is IonizationMode.NEGATIVE:
            return self.negative
        raise ValueError(f"Unknown ionization mode '{mode}'.")

    def labels(self, mode: Optional[IonizationMode] = None) -> List[str]:
        """Adduct labels in catalog order, optionally restricted to one mode."""
        if mode is None:
            return list(self)
        return list(self.for_mode(mode))

    @classmethod
    def from_definitions(cls,
                         positive: Mapping[str, Tuple[str, str, int]],
                         negative: Mapping[str, Tuple[str, str, int]]
                         ) -> 'AdductCatalog':
        """
        Build a catalog from ``label -> (gained, lost, charge)`` definitions.

        See :func:`adduct_shift` for how each shift is derived.
        """
        pos = {label: adduct_shift(gained, lost, charge, IonizationMode.POSITIVE)
               for label, (gained, lost, charge) in positive.items()}
        neg = {label: adduct_shift(gained, lost, charge, IonizationMode.NEGATIVE)
               for label, (gained, lost, charge) in negative.items()}
        return cls(pos, neg)

    @classmethod
    def from_json(cls, path: str) -> 'AdductCatalog':
        """
        Load a catalog from a JSON document.

        Expected layout::

            {"positive": {"[M+H]+": -1.007276, ...},
             "negative": {"[M-H]-": 1.007276, ...}}

        Either partition may be omitted.
        """
        with open(path, encoding='utf-8') as fh:
            doc = json.load(fh)
        if not isinstance(doc, dict):
            raise ValueError(f"Adduct catalog {path} must be a JSON object.")

        partitions: Dict[str, Dict[str, float]] = {}
        for key in ('positive', 'negative'):
            entries = doc.get(key, {})
            if not isinstance(entries, dict):
                raise ValueError(f"'{key}' in {path} must map labels to shifts.")
            shifts: Dict[str, float] = {}
            for label, value in entries.items():
                if isinstance(value, bool) or not isinstance(value, (int, float)):
                    raise ValueError(
                        f"Shift for adduct '{label}' in {path} is not a number: {value!r}")
                shifts[label] = float(value)
            partitions[key] = shifts

        logger.debug("Loaded %d positive and %d negative adducts from %s",
                     len(partitions['positive']), len(partitions['negative']), path)
        return cls(partitions['positive'], partitions['negative'])


DEFAULT_CATALOG = AdductCatalog.from_definitions(POSITIVE_ADDUCTS, NEGATIVE_ADDUCTS)
"""Catalog built from the definitions in :mod:`lipid_adducts.constants`."""
