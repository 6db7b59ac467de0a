import math

import pytest

from costwise.core.cost_engine import tables
from costwise.core.cost_engine.calculator import (
    calculate_enhanced_estimate,
    parse_timeline_hours,
    round_half_up,
)
from costwise.core.cost_engine.errors import (
    CostEngineError,
    InvalidParametersError,
    UnsupportedProjectTypeError,
)
from costwise.core.cost_engine.schemas import CostOverrides, CostParameters


def test_kitchen_reference_breakdown(kitchen_params):
    result = calculate_enhanced_estimate(kitchen_params)

    assert result.materials.amount == 15600
    assert result.labor.amount == 14820
    assert result.permits.amount == 1560
    assert result.equipment.amount == 2340
    assert result.overhead.amount == 4680
    assert result.total == 39000
    assert [c.percentage for _, c in result.categories()] == [40, 38, 4, 6, 12]


def test_accepts_camel_case_mapping():
    result = calculate_enhanced_estimate(
        {"projectType": "kitchen-remodel", "area": 200, "materialQuality": "standard", "timeline": "4-8 weeks"}
    )
    assert result.total == 39000


def test_total_and_percentages_hold_across_inputs():
    zip_codes = [None, "20817", "20912", "21401", "99999"]
    timelines = ["", "1-2 weeks", "8-12 weeks", "6+ months"]
    for project_type in tables.PROJECT_TYPES:
        for quality in tables.QUALITY_TIERS:
            for zip_code in zip_codes:
                for timeline in timelines:
                    result = calculate_enhanced_estimate(
                        CostParameters(
                            project_type=project_type,
                            area=137.5,
                            material_quality=quality,
                            timeline=timeline,
                            zip_code=zip_code,
                        )
                    )
                    assert result.total == sum(c.amount for _, c in result.categories())
                    assert abs(result.percentage_sum() - 100) <= 2


def test_percentage_drift_stays_within_two_across_areas():
    # Five independently rounded shares can each be off by at most 0.5
    areas = [step * 0.25 for step in range(4, 4000, 3)]
    for project_type in tables.PROJECT_TYPES:
        for quality in tables.QUALITY_TIERS:
            for area in areas:
                result = calculate_enhanced_estimate(
                    CostParameters(project_type=project_type, area=area, material_quality=quality)
                )
                assert result.total == sum(c.amount for _, c in result.categories())
                assert abs(result.percentage_sum() - 100) <= 2


def test_small_siding_job_percentages_sum_to_102():
    result = calculate_enhanced_estimate(
        CostParameters(project_type="siding-installation", area=8, material_quality="standard")
    )

    assert result.total == 88
    assert [c.amount for _, c in result.categories()] == [35, 33, 4, 5, 11]
    assert [c.percentage for _, c in result.categories()] == [40, 38, 5, 6, 13]
    assert result.percentage_sum() == 102


def test_regional_multiplier_applied(kitchen_params):
    params = kitchen_params.model_copy(update={"zip_code": "20817"})  # 1.22
    assert calculate_enhanced_estimate(params).total == 47580


def test_unknown_zip_uses_default(kitchen_params):
    params = kitchen_params.model_copy(update={"zip_code": "99999"})
    assert calculate_enhanced_estimate(params).total == 39000


def test_rush_timeline_band(kitchen_params):
    params = kitchen_params.model_copy(update={"timeline": "1-2 weeks"})  # 1.25
    assert calculate_enhanced_estimate(params).total == 48750


def test_unmatched_timeline_is_neutral(kitchen_params):
    params = kitchen_params.model_copy(update={"timeline": "whenever"})
    assert calculate_enhanced_estimate(params).total == 39000


def test_unknown_quality_falls_back_to_standard(kitchen_params):
    params = kitchen_params.model_copy(update={"material_quality": "gold-plated"})
    assert calculate_enhanced_estimate(params).total == 39000


def test_null_quality_and_timeline_fall_back():
    result = calculate_enhanced_estimate(
        {"projectType": "kitchen-remodel", "area": 200, "materialQuality": None, "timeline": None}
    )
    assert result.total == 39000
    assert result.materials.amount == 15600


def test_timeline_hours_price_labor_with_defaults(kitchen_params):
    params = kitchen_params.model_copy(update={"timeline": "8 hours"})
    result = calculate_enhanced_estimate(params)

    # 8 hours x 2 workers x $55/hr
    assert result.labor.amount == 880
    assert result.materials.amount == 15600
    assert result.total == 15600 + 880 + 1560 + 2340 + 4680


def test_timeline_hours_use_supplied_crew(kitchen_params):
    params = kitchen_params.model_copy(
        update={"timeline": "8 hours", "labor_workers": 3, "labor_rate": 60, "labor_hours": 100}
    )
    assert calculate_enhanced_estimate(params).labor.amount == 8 * 3 * 60


def test_zero_workers_on_timeline_hours_prices_no_labor(kitchen_params):
    params = kitchen_params.model_copy(update={"timeline": "8 hours", "labor_workers": 0})
    result = calculate_enhanced_estimate(params)

    assert result.labor.amount == 0
    assert result.labor.percentage == 0
    assert result.total == 15600 + 1560 + 2340 + 4680


def test_explicit_labor_inputs(kitchen_params):
    params = kitchen_params.model_copy(update={"labor_hours": 40, "labor_workers": 3, "labor_rate": 50})
    result = calculate_enhanced_estimate(params)
    assert result.labor.amount == 6000
    assert result.total == 15600 + 6000 + 1560 + 2340 + 4680


def test_partial_labor_inputs_use_percentage(kitchen_params):
    params = kitchen_params.model_copy(update={"labor_hours": 40})
    assert calculate_enhanced_estimate(params).labor.amount == 14820


def test_equipment_override_changes_total_not_base(kitchen_params):
    params = kitchen_params.model_copy(
        update={"overrides": CostOverrides(equipment_cost=5000, overhead_cost=0)}
    )
    result = calculate_enhanced_estimate(params)

    assert result.equipment.amount == 5000
    assert result.overhead.amount == 4680
    assert result.total == 15600 + 14820 + 1560 + 5000 + 4680
    assert result.percentage_sum() in (99, 100, 101)


def test_negative_overrides_are_ignored(kitchen_params):
    params = kitchen_params.model_copy(
        update={"overrides": CostOverrides(equipment_cost=-10, overhead_cost=-1)}
    )
    result = calculate_enhanced_estimate(params)
    assert result.equipment.amount == 2340
    assert result.overhead.amount == 4680


@pytest.mark.parametrize("area", [0, -25, None, ""])
def test_missing_or_non_positive_area_rejected(kitchen_params, area):
    params = kitchen_params.model_copy(update={"area": area})
    with pytest.raises(InvalidParametersError, match="Invalid project parameters"):
        calculate_enhanced_estimate(params)


@pytest.mark.parametrize("area", ["abc", "nan", float("nan")])
def test_non_numeric_area_rejected(kitchen_params, area):
    params = kitchen_params.model_copy(update={"area": area})
    with pytest.raises(InvalidParametersError, match="Area must be a valid number"):
        calculate_enhanced_estimate(params)


@pytest.mark.parametrize("area", ["inf", "Infinity", "-inf", float("inf")])
def test_infinite_area_rejected(kitchen_params, area):
    params = kitchen_params.model_copy(update={"area": area})
    with pytest.raises(InvalidParametersError, match="Area must be a valid number"):
        calculate_enhanced_estimate(params)


def test_numeric_string_area_accepted(kitchen_params):
    params = kitchen_params.model_copy(update={"area": "200"})
    assert calculate_enhanced_estimate(params).total == 39000


def test_missing_project_type_rejected():
    with pytest.raises(InvalidParametersError):
        calculate_enhanced_estimate(CostParameters(area=200))


def test_unsupported_project_type_rejected(kitchen_params):
    params = kitchen_params.model_copy(update={"project_type": "treehouse"})
    with pytest.raises(UnsupportedProjectTypeError, match="Unsupported project type: treehouse"):
        calculate_enhanced_estimate(params)


def test_errors_are_value_errors_with_codes():
    with pytest.raises(ValueError) as exc_info:
        calculate_enhanced_estimate(CostParameters(project_type="treehouse", area=10))
    assert isinstance(exc_info.value, CostEngineError)
    assert exc_info.value.code == "UNSUPPORTED_PROJECT_TYPE"


def test_tiny_area_that_rounds_to_zero_rejected():
    with pytest.raises(CostEngineError):
        calculate_enhanced_estimate(CostParameters(project_type="siding-installation", area=0.01))


def test_area_whose_components_all_round_to_zero_rejected():
    # 0.25 sqft x $6 x 0.8 rounds to a base of $1, too small for any share
    params = CostParameters(project_type="siding-installation", area=0.25, material_quality="budget")
    with pytest.raises(InvalidParametersError, match="Area is too small"):
        calculate_enhanced_estimate(params)


def test_round_half_up_differs_from_bankers_rounding():
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(2.4999) == 2
    assert round(2.5) == 2


@pytest.mark.parametrize(
    "timeline, expected",
    [
        ("8 hours", 8.0),
        ("1.5 Hours", 1.5),
        ("about 40 hour job", 40.0),
        ("4-8 weeks", None),
        ("0 hours", None),
        ("", None),
        (None, None),
    ],
)
def test_parse_timeline_hours(timeline, expected):
    assert parse_timeline_hours(timeline) == expected


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        tables.REGIONAL_MULTIPLIERS["20001"] = 2.0  # type: ignore[index]
    with pytest.raises(TypeError):
        tables.BASE_COSTS_PER_SQFT["kitchen-remodel"]["standard"] = 1  # type: ignore[index]


def test_category_shares_cover_whole_project():
    shares = (
        tables.MATERIALS_SHARE
        + tables.LABOR_SHARE
        + tables.PERMITS_SHARE
        + tables.EQUIPMENT_SHARE
        + tables.OVERHEAD_SHARE
    )
    assert math.isclose(shares, 1.0)
