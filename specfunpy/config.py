"""Batch evaluation files.

A batch file lists calls to catalogue functions together with the precision
tier to evaluate them in::

    precision: standard
    calls:
      - function: digamma
        args: [2.5]
      - function: airy_ai_zeros
        args: [0, 5]
        precision: extended

JSON and YAML are accepted, chosen by the file suffix.
"""

import json
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

from specfunpy.catalogue import CATALOGUE
from specfunpy.precision import PrecisionTier


def _tier_name(value: str | None) -> str | None:
    if value is None:
        return None
    return PrecisionTier.parse(value).value


class CallSpec(BaseModel):
    function: str = Field()
    args: list[int | float] = Field(default=[])
    precision: str | None = Field(default=None)
    label: str = Field(default="")

    @field_validator("function")
    @classmethod
    def known_function(cls, value: str) -> str:
        if value not in CATALOGUE:
            raise ValueError(f"Unknown special function {value!r}")
        return value

    @field_validator("precision")
    @classmethod
    def known_precision(cls, value: str | None) -> str | None:
        return _tier_name(value)


class BatchConfig(BaseModel):
    precision: str = Field(default="standard")
    calls: list[CallSpec] = Field(default=[])

    @field_validator("precision")
    @classmethod
    def known_precision(cls, value: str) -> str:
        return _tier_name(value)

    @classmethod
    def from_file(cls, path_config: str | Path) -> "BatchConfig":
        path_config = Path(path_config)
        match path_config.suffix:
            case ".json":
                with open(path_config) as data:
                    config = json.load(data)
            case ".yaml" | ".yml":
                with open(path_config) as data:
                    config = yaml.safe_load(data)
            case _:
                raise ValueError(
                    "The provided config file needs to be a json or yaml file!"
                )
        if config is None:
            raise ValueError(f"Could not read config file {path_config}.")
        return cls(**config)

    def tier_for(self, call: CallSpec) -> PrecisionTier:
        return PrecisionTier.parse(call.precision or self.precision)
