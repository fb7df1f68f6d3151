from __future__ import annotations


class BusinessCaseError(Exception):
    """Base class for errors raised by the business case services."""


class ScenarioNotFoundError(BusinessCaseError):
    def __init__(self, scenario_id: str) -> None:
        super().__init__(f"Scenario {scenario_id} not found")
        self.scenario_id = scenario_id


class UnsupportedExportFormatError(BusinessCaseError):
    def __init__(self, fmt: str) -> None:
        super().__init__(f"Unsupported export format: {fmt}")
        self.fmt = fmt
