"""CostWise cost engine.

Pure, table-driven estimate calculation plus the what-if and regional
insight helpers built on top of it.
"""

from costwise.core.cost_engine.calculator import calculate_enhanced_estimate
from costwise.core.cost_engine.errors import CostEngineError
from costwise.core.cost_engine.scenarios import generate_what_if_scenarios, get_regional_insights
from costwise.core.cost_engine.schemas import CostBreakdown, CostParameters

__all__ = [
    "CostBreakdown",
    "CostEngineError",
    "CostParameters",
    "calculate_enhanced_estimate",
    "generate_what_if_scenarios",
    "get_regional_insights",
]
