"""
Physical constants, matching tolerance, and adduct definitions
for lipid adduct calculations.

All masses are monoisotopic unless otherwise noted.
"""

# =============================================================================
# Physical constants
# =============================================================================

PROTON = 1.007276
"""Proton mass in Da."""

# =============================================================================
# Matching
# =============================================================================

PPM_TOLERANCE = 10
"""Mass tolerance (ppm) used when inferring adducts."""

CHARGE_SIGNS = ('+', '−', '-')
"""Characters accepted as the polarity suffix of an adduct label."""

# =============================================================================
# Adduct definitions
# =============================================================================
# label -> (gained formula, lost formula, charge)
# Iteration order is significant: adduct detection returns the first
# hypothesis that matches, visiting labels in this order.

POSITIVE_ADDUCTS = {
    '[M+H]+': ('H', '', 1),
    '[M+2H]2+': ('H2', '', 2),
    '[M+Na]+': ('Na', '', 1),
    '[M+NH4]+': ('NH4', '', 1),
    '[M+H-H2O]+': ('H', 'H2O', 1),
    '[M+K]+': ('K', '', 1),
    '[M+Li]+': ('Li', '', 1),
    '[M+H+NH4]2+': ('NH5', '', 2),
    '[M+2Na-H]+': ('Na2', 'H', 1),
    '[M+3H]3+': ('H3', '', 3),
    '[2M+H]+': ('H', '', 1),
    '[2M+Na]+': ('Na', '', 1),
}
"""Positive mode adducts."""

NEGATIVE_ADDUCTS = {
    '[M-H]-': ('', 'H', 1),
    '[M+Cl]-': ('Cl', '', 1),
    '[M+HCOOH-H]-': ('CH2O2', 'H', 1),
    '[M+CH3COOH-H]-': ('C2H4O2', 'H', 1),
    '[M-H-H2O]-': ('', 'H3O', 1),
    '[M-2H]2-': ('', 'H2', 2),
    '[M-3H]3-': ('', 'H3', 3),
    '[2M-H]-': ('', 'H', 1),
    '[3M-H]-': ('', 'H', 1),
}
"""Negative mode adducts."""
