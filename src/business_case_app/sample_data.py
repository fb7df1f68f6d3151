from __future__ import annotations

from .models.common import GeneralParameters, ProductType
from .models.costs import CostParameters, HardwareVariableCosts, SoftwareVariableCosts
from .models.market import CompetitorParameters, MarketParameters
from .models.revenue import RevenueParameters
from .models.scenario import BusinessCaseInput, default_scenarios


def build_sample_case(product_type: ProductType = ProductType.SOFTWARE) -> BusinessCaseInput:
    if product_type == ProductType.SOFTWARE:
        variable = SoftwareVariableCosts(infra_cost_per_user=1.5, license_cost_per_user=0.5)
    else:
        variable = HardwareVariableCosts(
            manufacturing_cost_per_unit=40,
            shipping_cost_per_unit=5,
            packaging_cost_per_unit=3,
        )

    costs = CostParameters(
        dev_capex=200000,
        launch_marketing_capex=50000,
        variable=variable,
        support_cost_per_unit=2,
        annual_fixed_opex=150000,
    )

    market = MarketParameters(
        tam_units_per_year=[100000, 120000, 150000, 180000, 200000],
        sam_pct=40,
        som_pct=30,
        adoption_pct_per_year=[1, 3, 5, 7, 10],
    )

    return BusinessCaseInput(
        general=GeneralParameters(product_name="New Product", product_type=product_type, years=5),
        costs=costs,
        market=market,
        revenue=RevenueParameters(base_price_per_unit=99, annual_price_growth_pct=3),
        scenarios=default_scenarios(),
        competitor=CompetitorParameters(competitor_name="Main Competitor", competitor_price=109),
    )
