"""API response models."""

from __future__ import annotations

import math

from pydantic import BaseModel, Field

from pathlang.engine.errors import PathParseError
from pathlang.engine.geometry import (
    ArcSegment,
    CubicSegment,
    Point,
    QuadraticSegment,
    Segment,
    SubPath,
)


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    env: str = "development"
    element_kinds_registered: int = 0


class PointModel(BaseModel):
    x: float
    y: float

    @classmethod
    def from_point(cls, point: Point) -> PointModel:
        return cls(x=point.x, y=point.y)


class SegmentModel(BaseModel):
    kind: str
    start: PointModel
    end: PointModel
    controls: list[PointModel] = Field(default_factory=list)

    # Arc-only fields; rotation in degrees
    radius_x: float | None = None
    radius_y: float | None = None
    rotation: float | None = None
    large_arc: bool | None = None
    sweep_clockwise: bool | None = None
    degenerate: bool | None = None

    @classmethod
    def from_segment(cls, seg: Segment) -> SegmentModel:
        data = {
            "kind": seg.kind,
            "start": PointModel.from_point(seg.start),
            "end": PointModel.from_point(seg.end),
        }
        if isinstance(seg, QuadraticSegment):
            data["controls"] = [PointModel.from_point(seg.control)]
        elif isinstance(seg, CubicSegment):
            data["controls"] = [PointModel.from_point(seg.control1), PointModel.from_point(seg.control2)]
        elif isinstance(seg, ArcSegment):
            data.update(
                radius_x=seg.radius_x,
                radius_y=seg.radius_y,
                rotation=math.degrees(seg.rotation),
                large_arc=seg.large_arc,
                sweep_clockwise=seg.sweep_clockwise,
                degenerate=seg.is_degenerate,
            )
        return cls(**data)


class SubPathModel(BaseModel):
    start: PointModel
    closed: bool
    segments: list[SegmentModel] = Field(default_factory=list)

    @classmethod
    def from_subpath(cls, sp: SubPath) -> SubPathModel:
        return cls(
            start=PointModel.from_point(sp.start),
            closed=sp.closed,
            segments=[SegmentModel.from_segment(seg) for seg in sp.segments],
        )


class ParseErrorDetail(BaseModel):
    kind: str
    message: str
    offset: int | None = None

    @classmethod
    def from_error(cls, error: PathParseError) -> ParseErrorDetail:
        return cls(kind=error.kind.value, message=error.message, offset=error.offset)


class ParseResponse(BaseModel):
    fill_rule: str
    subpaths: list[SubPathModel] = Field(default_factory=list)
    svg_path_data: str = ""
    element_count: int = 0
    validation_count: int = 0
    trace: list[str] | None = None
    processing_time_ms: float = 0.0


class ValidateResponse(BaseModel):
    valid: bool
    error: ParseErrorDetail | None = None
