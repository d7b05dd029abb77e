"""Pydantic models for the brush, chunk and logging profile."""
from __future__ import annotations

from typing import Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _ordered(v: Tuple[float, float]) -> Tuple[float, float]:
    lo, hi = v
    if lo > hi:
        raise ValueError(f"range lower bound {lo} exceeds upper bound {hi}")
    return v


# =============== brushes ===============

class StrokeDefaults(BaseModel):
    fill: str = Field(default="rgba(200,200,200,0.9)", min_length=1)
    color: str = Field(default="rgba(200,200,200,0.9)", min_length=1)
    width: float = Field(default=2.0, ge=0)
    noise: float = Field(default=0.5, ge=0, le=1)
    stroke_width: float = Field(default=1.0, ge=0)

    model_config = ConfigDict(extra="forbid")


class BlobDefaults(BaseModel):
    length: float = 20.0
    width: float = 5.0
    angle: float = 0.0
    noise: float = Field(default=0.5, ge=0, le=1)
    fill: str = Field(default="rgba(200,200,200,0.9)", min_length=1)
    resolution: int = Field(default=15, ge=2)

    model_config = ConfigDict(extra="forbid")


class BranchDefaults(BaseModel):
    height: float = Field(default=300.0, gt=0)
    width: float = Field(default=6.0, ge=0)
    angle: float = 0.0
    bend: float = 0.2
    detail: int = Field(default=10, ge=1)
    segments: int = Field(default=3, ge=1)
    jitter_scale: float = Field(default=1.0 / 80.0, ge=0)
    burl: float = Field(default=1.0, ge=0)

    model_config = ConfigDict(extra="forbid")


class Brushes(BaseModel):
    stroke: StrokeDefaults = Field(default_factory=StrokeDefaults)
    blob: BlobDefaults = Field(default_factory=BlobDefaults)
    branch: BranchDefaults = Field(default_factory=BranchDefaults)

    model_config = ConfigDict(extra="forbid")


# =============== chunks ===============

class WaterChunk(BaseModel):
    height: float = Field(default=2.0, ge=0)
    width: float = Field(default=800.0, gt=0)
    clusters: int = Field(default=10, ge=1)
    color_prefix: str = "rgba(100,100,100,"

    model_config = ConfigDict(extra="forbid")


class DistmountChunk(BaseModel):
    height: float = Field(default=300.0, ge=0)
    length: float = Field(default=2000.0, gt=0)
    segments: int = Field(default=5, ge=2)
    span: float = Field(default=10.0, gt=0)
    noise_seed: float = 0.0
    max_area: float = Field(default=100.0, ge=0)

    model_config = ConfigDict(extra="forbid")


class MountChunk(BaseModel):
    height: Optional[float] = Field(default=None, gt=0)
    height_range: Tuple[float, float] = (100.0, 500.0)
    width: Optional[float] = Field(default=None, gt=0)
    width_range: Tuple[float, float] = (400.0, 600.0)
    layers: int = Field(default=10, ge=1)
    samples: int = Field(default=50, ge=3)
    rocks: int = Field(default=5, ge=0)
    noise_seed: float = 0.0
    outline_color: str = Field(default="rgba(100,100,100,0.3)", min_length=1)
    outline_width: float = Field(default=3.0, ge=0)
    outline_noise: float = Field(default=1.0, ge=0, le=1)

    model_config = ConfigDict(extra="forbid")

    @field_validator("height_range", "width_range")
    @classmethod
    def check_ranges(cls, v: Tuple[float, float]) -> Tuple[float, float]:
        return _ordered(v)


class FlatmountChunk(BaseModel):
    height: Optional[float] = Field(default=None, gt=0)
    height_range: Tuple[float, float] = (40.0, 440.0)
    width: Optional[float] = Field(default=None, gt=0)
    width_range: Tuple[float, float] = (400.0, 600.0)
    flatness: float = Field(default=0.5, ge=0)
    plateau: float = Field(default=100.0, gt=0)
    layers: int = Field(default=5, ge=1)
    samples: int = Field(default=50, ge=3)
    noise_seed: float = 0.0
    outline_color: str = Field(default="rgba(100,100,100,0.3)", min_length=1)
    outline_width: float = Field(default=3.0, ge=0)
    outline_noise: float = Field(default=1.0, ge=0, le=1)

    model_config = ConfigDict(extra="forbid")

    @field_validator("height_range", "width_range")
    @classmethod
    def check_ranges(cls, v: Tuple[float, float]) -> Tuple[float, float]:
        return _ordered(v)


class BoatChunk(BaseModel):
    scale: float = Field(default=1.0, gt=0)
    flip: bool = False
    length: int = Field(default=120, ge=15)
    fill: str = Field(default="rgba(255,255,255,1)", min_length=1)
    stroke_color: str = Field(default="rgba(100,100,100,0.4)", min_length=1)
    stroke_width: float = Field(default=1.0, ge=0)
    stroke_noise: float = Field(default=0.5, ge=0, le=1)

    model_config = ConfigDict(extra="forbid")


class TreeChunk(BaseModel):
    height: float = Field(default=80.0, gt=0)
    width: float = Field(default=2.0, ge=0)
    depth: int = Field(default=3, ge=0, le=8)
    fork_probability: float = Field(default=0.5, ge=0, le=1)
    shrink: Tuple[float, float] = (0.6, 0.75)
    spread: float = 0.2
    leaf_length: float = Field(default=6.0, ge=0)
    leaf_width: float = Field(default=2.0, ge=0)
    leaf_color: str = Field(default="rgba(100,100,100,0.6)", min_length=1)

    model_config = ConfigDict(extra="forbid")

    @field_validator("shrink")
    @classmethod
    def check_shrink(cls, v: Tuple[float, float]) -> Tuple[float, float]:
        return _ordered(v)


class Chunks(BaseModel):
    water: WaterChunk = Field(default_factory=WaterChunk)
    distmount: DistmountChunk = Field(default_factory=DistmountChunk)
    mount: MountChunk = Field(default_factory=MountChunk)
    flatmount: FlatmountChunk = Field(default_factory=FlatmountChunk)
    boat: BoatChunk = Field(default_factory=BoatChunk)
    tree: TreeChunk = Field(default_factory=TreeChunk)

    model_config = ConfigDict(extra="forbid")


# =============== logging ===============

class LoggingCfg(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["text", "json"] = "text"

    model_config = ConfigDict(extra="forbid")


class Profile(BaseModel):
    brushes: Brushes = Field(default_factory=Brushes)
    chunks: Chunks = Field(default_factory=Chunks)
    logging: LoggingCfg = Field(default_factory=LoggingCfg)

    model_config = ConfigDict(extra="forbid")


__all__ = [
    "StrokeDefaults",
    "BlobDefaults",
    "BranchDefaults",
    "Brushes",
    "WaterChunk",
    "DistmountChunk",
    "MountChunk",
    "FlatmountChunk",
    "BoatChunk",
    "TreeChunk",
    "Chunks",
    "LoggingCfg",
    "Profile",
]
