from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from ..config import DEFAULT_CURRENCY, DEFAULT_HORIZON_YEARS


class ProductType(str, Enum):
    SOFTWARE = "software"
    HARDWARE = "hardware"


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class GeneralParameters(FrozenModel):
    product_name: str = "New Product"
    product_type: ProductType = ProductType.SOFTWARE
    currency: str = Field(DEFAULT_CURRENCY, description="Display symbol only, never converted")
    years: int = Field(DEFAULT_HORIZON_YEARS, description="Projection horizon in years")
