import json
from pathlib import Path

import yaml
from pydantic import BaseModel, Field


class CallResult(BaseModel):
    function: str = Field()
    args: list[int | float] = Field(default=[])
    label: str = Field(default="")
    precision: str = Field(default="standard")
    value: float | list[float] | None = Field(default=None)
    imag: float | None = Field(default=None)
    error: dict | None = Field(default=None)

    @property
    def ok(self) -> bool:
        return self.error is None


class Export(BaseModel):
    source: str = Field(default="specfunpy")
    version: str = Field(default="")
    results: list[CallResult] = Field(default=[])

    @property
    def failures(self) -> list[CallResult]:
        return [result for result in self.results if not result.ok]

    def save(self, filename: str | Path) -> None:
        if isinstance(filename, str):
            filename = Path(filename)

        match filename.suffix:
            case ".json":
                with open(filename, "w") as f:
                    json.dump(self.model_dump(), f, indent=4)
            case ".yml" | ".yaml":
                with open(filename, "w") as f:
                    yaml.dump(self.model_dump(), f)
            case _:
                raise ValueError(f"Unknown file extension {filename.suffix}")
