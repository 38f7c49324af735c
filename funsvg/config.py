"""Configuration loading for funsvg."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


class GradientConfig(BaseModel):
    long_span_ms: float = 2000  # segments longer than this get subdivided
    target_span_ms: float = 1000
    split_bias_ms: float = 500
    merge_span_ms: float = 1000  # adjacent pairs shorter than this get merged
    fade_ms: float = 100


class RenderConfig(BaseModel):
    width: float = 690
    height: float = 52
    line_width: float = 0.5
    graph_opacity: float = 0.2
    duration_ms: float = 0  # 0 = use the script's own duration
    page_color: str = "#ffffff"


class Config(BaseModel):
    gradient: GradientConfig = Field(default_factory=GradientConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    output_dir: str = "data/previews"

    @property
    def resolved_output_dir(self) -> Path:
        """Resolve output_dir relative to project root."""
        p = Path(self.output_dir).expanduser()
        if p.is_absolute():
            return p
        return _project_root() / p


def _project_root() -> Path:
    """Return the funsvg project root directory."""
    return Path(__file__).parent.parent


def load_config(config_path: Path | None = None) -> Config:
    """Load config from YAML file. Falls back to defaults if file missing."""
    if config_path is None:
        config_path = _project_root() / "config.yaml"

    if config_path.exists():
        raw: dict[str, Any] = yaml.safe_load(config_path.read_text()) or {}
        return Config(**raw)

    return Config()
