from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import Field

from .common import FrozenModel, ProductType


class SoftwareVariableCosts(FrozenModel):
    product_type: Literal["software"] = "software"
    infra_cost_per_user: float = Field(0.0, description="Cloud and hosting cost per active user")
    license_cost_per_user: float = Field(0.0, description="Third-party APIs and licences per user")

    def per_unit(self) -> float:
        return self.infra_cost_per_user + self.license_cost_per_user


class HardwareVariableCosts(FrozenModel):
    product_type: Literal["hardware"] = "hardware"
    manufacturing_cost_per_unit: float = 0.0
    shipping_cost_per_unit: float = 0.0
    packaging_cost_per_unit: float = 0.0

    def per_unit(self) -> float:
        return self.manufacturing_cost_per_unit + self.shipping_cost_per_unit + self.packaging_cost_per_unit


VariableCosts = Annotated[
    Union[SoftwareVariableCosts, HardwareVariableCosts],
    Field(discriminator="product_type"),
]


class CostParameters(FrozenModel):
    dev_capex: float = Field(0.0, description="R&D and engineering, paid before year 1")
    launch_marketing_capex: float = Field(0.0, description="Launch campaigns and certifications, paid before year 1")
    variable: VariableCosts = Field(default_factory=SoftwareVariableCosts)
    support_cost_per_unit: float = 0.0
    annual_fixed_opex: float = Field(0.0, description="Salaries and overhead, identical every year")

    @property
    def product_type(self) -> ProductType:
        return ProductType(self.variable.product_type)

    def upfront_capex(self) -> float:
        return self.dev_capex + self.launch_marketing_capex

    def unit_variable_cost(self) -> float:
        return self.variable.per_unit() + self.support_cost_per_unit
