from pathlib import Path
from typing import List, Literal, Union

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from gasreport.exceptions import ConfigError, FilterError
from gasreport.utils.trace import DEFAULT_TABLE_WIDTH

CONFIG_FILE_NAME = "gas-report.yaml"


class GasReportConfig(BaseModel):
    report_for: List[str] = []
    """Names of the contracts to report on. Empty or ``*`` means all."""

    output: Literal["table", "json"] = "table"
    width: int = DEFAULT_TABLE_WIDTH

    @field_validator("report_for", mode="before")
    @classmethod
    def validate_report_for(cls, value):
        if value is None:
            return []

        elif isinstance(value, str):
            value = [value]

        contracts = []
        for contract in value:
            if not isinstance(contract, str) or not contract.strip():
                raise FilterError(str(contract))

            contracts.append(contract.strip())

        return contracts


def load_config(path: Union[Path, str] = CONFIG_FILE_NAME) -> GasReportConfig:
    """
    Load the config from a YAML file, using the defaults
    when the file does not exist.
    """
    path = Path(path)
    if not path.is_file():
        return GasReportConfig()

    try:
        data = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as err:
        raise ConfigError(f"Unable to parse config file '{path}': {err}") from err

    if not isinstance(data, dict):
        raise ConfigError(f"Config file '{path}' must contain a mapping")

    try:
        return GasReportConfig.model_validate(data)
    except ValidationError as err:
        raise ConfigError(f"Invalid config file '{path}': {err}") from err
