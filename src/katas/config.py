from __future__ import annotations

from dataclasses import dataclass

OUTPUT_FORMATS = ("text", "json")


@dataclass(frozen=True)
class KatasConfig:
    log_level: str = "WARNING"
    output: str = "text"  # "text" or "json"
    ranges_separator: str = ","

    def __post_init__(self) -> None:
        if self.output not in OUTPUT_FORMATS:
            raise ValueError(
                f"output must be one of {', '.join(OUTPUT_FORMATS)}, got {self.output!r}"
            )

    @property
    def json_output(self) -> bool:
        return self.output == "json"
