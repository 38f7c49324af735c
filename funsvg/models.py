"""Pydantic models for funsvg."""

from pydantic import BaseModel, ConfigDict, Field


class InvalidDurationError(ValueError):
    """Raised when a render is requested with a non-positive duration."""


def check_duration(duration_ms: float) -> None:
    if not duration_ms > 0:
        raise InvalidDurationError(f"duration_ms must be positive, got {duration_ms!r}")


# --- Input models ---


class Keyframe(BaseModel):
    """One actuator action: time in milliseconds, position in [0, 100]."""
    model_config = ConfigDict(frozen=True)

    at: float
    pos: float


class Funscript(BaseModel):
    actions: list[Keyframe] = Field(default_factory=list)

    @property
    def duration_ms(self) -> float:
        if not self.actions:
            return 0
        return self.actions[-1].at


# --- Synthesis models ---


class Segment(BaseModel):
    """A stretch of motion with a single representative speed."""
    model_config = ConfigDict(frozen=True)

    start: Keyframe
    end: Keyframe
    speed: float

    @property
    def span(self) -> float:
        return self.end.at - self.start.at


class GradientStop(BaseModel):
    model_config = ConfigDict(frozen=True)

    at: float
    speed: float

    def offset(self, duration_ms: float) -> float:
        """Position along the gradient axis, clamped to [0, 1]."""
        return max(0.0, min(1.0, self.at / duration_ms))


# --- Render models ---


class PaintedStop(BaseModel):
    """A gradient stop ready for markup: offset, color and opacity."""
    model_config = ConfigDict(frozen=True)

    offset: float
    speed: float
    color: str
    opacity: float


class StrokeCommand(BaseModel):
    """A straight stroke between two pixel points."""
    model_config = ConfigDict(frozen=True)

    x1: float
    y1: float
    x2: float
    y2: float
    speed: float
    color: str
