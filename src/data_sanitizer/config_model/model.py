from __future__ import annotations
from typing import Any, Dict, List, Optional, Union
from pathlib import Path
import os
import pytz
from pydantic import (
    BaseModel,
    ConfigDict,
    field_validator,
)

CFG_ENV_VAR = "SANITIZER_CFG"
DEFAULT_CFG_PATH = "config/config.toml"

RuleValue = Union[str, List[str]]


# ---------- Leaf models ----------

class LoggingCfg(BaseModel):
    level: str = "INFO"
    structured_json: bool = True


class DatesCfg(BaseModel):
    input_formats: List[str] = ["%Y-%m-%d", "%m/%d/%Y", "%Y-%m-%d %H:%M:%S"]
    output_format: Optional[str] = None
    timezone: Optional[str] = None

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, v: Optional[str]) -> Optional[str]:
        if v and v not in pytz.all_timezones_set:
            raise ValueError(f"unknown timezone {v!r}")
        return v or None


# ---------- Root ----------

def _flatten_rules(raw: Dict[str, Any], prefix: str = "") -> Dict[str, Any]:
    """
    TOML splits bare dotted keys into tables, so `user.name = "trim"` arrives
    as {"user": {"name": "trim"}}. Fold nested tables back into dot paths.
    """
    out: Dict[str, Any] = {}
    for key, val in raw.items():
        path = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(val, dict):
            out.update(_flatten_rules(val, path))
        else:
            out[path] = val
    return out


class SanitizerCfg(BaseModel):
    model_config = ConfigDict(extra="ignore")

    logging: LoggingCfg = LoggingCfg()
    dates: DatesCfg = DatesCfg()
    rules: Dict[str, RuleValue] = {}

    @field_validator("rules", mode="before")
    @classmethod
    def _dotted_rules(cls, v: Any) -> Any:
        return _flatten_rules(v) if isinstance(v, dict) else v

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str]) -> "SanitizerCfg":
        try:
            import tomllib  # py>=3.11
        except ImportError:
            import tomli as tomllib

        p = Path(path)
        # utf-8-sig strips a BOM some editors leave at the start
        text = p.read_text(encoding="utf-8-sig")
        try:
            raw = tomllib.loads(text)
        except tomllib.TOMLDecodeError as e:
            snippet = text.strip()[:80].replace("\n", "\\n")
            raise RuntimeError(
                f"Failed to parse TOML at {p}. First chars: {snippet!r}"
            ) from e

        raw.setdefault("logging", {})
        raw.setdefault("dates", {})
        raw.setdefault("rules", {})
        return cls(**raw)

    @classmethod
    def load(cls, path: str | None = None) -> "SanitizerCfg":
        final = Path(path or os.environ.get(CFG_ENV_VAR, DEFAULT_CFG_PATH)).resolve()
        return cls.from_toml(final)


def load_config(path: str | None = None) -> SanitizerCfg:
    return SanitizerCfg.load(path)
