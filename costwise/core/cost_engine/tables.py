"""Static pricing tables for the cost engine.

Maryland construction pricing (2024 Q4).  The regional baseline is
Montgomery County (multiplier 1.0 for unknown ZIP codes).  Every table is
wrapped in ``MappingProxyType`` so callers can read but never mutate it.
"""

from __future__ import annotations

from types import MappingProxyType

from costwise.common.enums import MaterialQuality, ProjectType

DEFAULT_REGION_KEY = "default"


# ---------------------------------------------------------------------------
# Base cost per square foot (project type x quality tier)
# ---------------------------------------------------------------------------

BASE_COSTS_PER_SQFT = MappingProxyType({
    ProjectType.KITCHEN_REMODEL.value: MappingProxyType(
        {"budget": 160, "standard": 195, "premium": 280, "luxury": 420}
    ),
    ProjectType.BATHROOM_REMODEL.value: MappingProxyType(
        {"budget": 220, "standard": 285, "premium": 410, "luxury": 650}
    ),
    ProjectType.HOME_ADDITION.value: MappingProxyType(
        {"budget": 180, "standard": 240, "premium": 340, "luxury": 480}
    ),
    ProjectType.DECK_CONSTRUCTION.value: MappingProxyType(
        {"budget": 35, "standard": 55, "premium": 85, "luxury": 120}
    ),
    ProjectType.FLOORING_INSTALLATION.value: MappingProxyType(
        {"budget": 8, "standard": 15, "premium": 25, "luxury": 45}
    ),
    ProjectType.ROOFING_REPLACEMENT.value: MappingProxyType(
        {"budget": 8, "standard": 12, "premium": 18, "luxury": 28}
    ),
    ProjectType.SIDING_INSTALLATION.value: MappingProxyType(
        {"budget": 6, "standard": 11, "premium": 16, "luxury": 24}
    ),
})


# ---------------------------------------------------------------------------
# Regional multipliers by ZIP code
# ---------------------------------------------------------------------------

REGIONAL_MULTIPLIERS = MappingProxyType({
    # Montgomery County (Bethesda, Rockville, Gaithersburg)
    "20814": 1.15, "20815": 1.20, "20816": 1.18, "20817": 1.22, "20852": 1.10, "20853": 1.12,
    "20854": 1.08, "20855": 1.14, "20878": 1.16, "20879": 1.11, "20886": 1.09, "20895": 1.13,
    # Prince George's County (Hyattsville, College Park, Bowie)
    "20737": 0.95, "20740": 0.92, "20742": 0.90, "20782": 0.94, "20783": 0.93, "20784": 0.91,
    "20785": 0.96, "20787": 0.97, "20794": 0.89, "20912": 0.88,
    # Anne Arundel County (Annapolis, Glen Burnie)
    "21401": 1.05, "21403": 1.07, "21409": 1.03, "21122": 1.02, "21144": 1.01, "21146": 1.04,
    # Howard County (Columbia, Ellicott City)
    "21042": 1.12, "21043": 1.14, "21044": 1.11, "21045": 1.13, "21075": 1.10,
    DEFAULT_REGION_KEY: 1.0,
})


# ---------------------------------------------------------------------------
# Timeline and quality adjustments
# ---------------------------------------------------------------------------

TIMELINE_MULTIPLIERS = MappingProxyType({
    "1-2 weeks": 1.25,  # rush premium
    "2-4 weeks": 1.15,  # fast track
    "4-8 weeks": 1.0,
    "8-12 weeks": 0.95,
    "3-6 months": 0.90,
    "6+ months": 0.85,
})

QUALITY_ADJUSTMENTS = MappingProxyType({
    MaterialQuality.BUDGET.value: 0.8,
    MaterialQuality.STANDARD.value: 1.0,
    MaterialQuality.PREMIUM.value: 1.4,
    MaterialQuality.LUXURY.value: 2.0,
})


# Share of the base project cost allocated to each fixed category
MATERIALS_SHARE = 0.40
LABOR_SHARE = 0.38
PERMITS_SHARE = 0.04
EQUIPMENT_SHARE = 0.06
OVERHEAD_SHARE = 0.12


PROJECT_TYPES: tuple[str, ...] = tuple(BASE_COSTS_PER_SQFT)
QUALITY_TIERS: tuple[str, ...] = tuple(QUALITY_ADJUSTMENTS)
TIMELINE_BANDS: tuple[str, ...] = tuple(TIMELINE_MULTIPLIERS)
