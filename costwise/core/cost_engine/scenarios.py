"""What-if scenarios and regional pricing insights built on the calculator."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from costwise.core.cost_engine.calculator import calculate_enhanced_estimate, resolve_regional_multiplier
from costwise.core.cost_engine.schemas import CostBreakdown, CostParameters

RUSH_TIMELINE = "2-4 weeks"
EXTENDED_TIMELINE = "3-6 months"

_SCENARIO_UPDATES: dict[str, dict[str, str]] = {
    "budget_option": {"material_quality": "budget"},
    "premium_option": {"material_quality": "premium"},
    "rush_timeline": {"timeline": RUSH_TIMELINE},
    "extended_timeline": {"timeline": EXTENDED_TIMELINE},
}

PREMIUM_MARKET = (
    "Premium market area - Higher material and labor costs due to affluent "
    "location and strict building standards."
)
ABOVE_AVERAGE_MARKET = "Above-average market - Moderate premium for quality materials and skilled contractors."
VALUE_MARKET = "Value market area - Lower baseline costs with good contractor availability."
STANDARD_MARKET = "Standard market rates - Typical Maryland pricing for materials and labor."


def generate_what_if_scenarios(
    base_params: CostParameters | Mapping[str, Any],
) -> dict[str, CostBreakdown]:
    """Re-run the calculator with one parameter swapped per scenario.

    Calculator errors propagate unchanged; there is no partial result.
    """
    if not isinstance(base_params, CostParameters):
        base_params = CostParameters.model_validate(base_params)

    return {
        name: calculate_enhanced_estimate(base_params.model_copy(update=update))
        for name, update in _SCENARIO_UPDATES.items()
    }


def insight_for_multiplier(multiplier: float) -> str:
    if multiplier >= 1.15:
        return PREMIUM_MARKET
    if multiplier >= 1.05:
        return ABOVE_AVERAGE_MARKET
    if multiplier <= 0.92:
        return VALUE_MARKET
    return STANDARD_MARKET


def get_regional_insights(zip_code: str | None = None) -> str:
    return insight_for_multiplier(resolve_regional_multiplier(zip_code))
