"""
lipid-adducts: Adduct inference and adduct mass arithmetic for lipidomics.

Modules:
    models      - Ionization mode, lipid identity, peak value types
    catalog     - Read-only adduct catalog (label -> mass shift)
    mass        - m/z <-> monoisotopic mass conversion, ppm utilities
    detection   - Adduct inference from grouped peaks
    annotation  - Annotation record with one-shot adduct detection
    constants   - Physical constants, tolerance, adduct definitions
"""

__version__ = "0.1.0"

# models
from .models import IonizationMode, Lipid, Peak, peaks_from_arrays

# catalog
from .catalog import AdductCatalog, DEFAULT_CATALOG, adduct_shift

# mass
from .mass import (
    parse_multimer,
    parse_charge,
    mass_from_mz,
    mz_from_mass,
    ppm_increment,
    within_ppm,
    delta_from_ppm,
)

# detection
from .detection import AdductDetector, detect_adduct

# annotation
from .annotation import Annotation

# constants (commonly used)
from .constants import PROTON, PPM_TOLERANCE, POSITIVE_ADDUCTS, NEGATIVE_ADDUCTS

__all__ = [
    # version
    "__version__",
    # models
    "IonizationMode",
    "Lipid",
    "Peak",
    "peaks_from_arrays",
    # catalog
    "AdductCatalog",
    "DEFAULT_CATALOG",
    "adduct_shift",
    # mass
    "parse_multimer",
    "parse_charge",
    "mass_from_mz",
    "mz_from_mass",
    "ppm_increment",
    "within_ppm",
    "delta_from_ppm",
    # detection
    "AdductDetector",
    "detect_adduct",
    # annotation
    "Annotation",
    # constants
    "PROTON",
    "PPM_TOLERANCE",
    "POSITIVE_ADDUCTS",
    "NEGATIVE_ADDUCTS",
]
