"""Typed construction records produced by validation and consumed by synthesis."""

from dataclasses import dataclass, field
from typing import Any

Number = int | float


@dataclass(frozen=True)
class PointSpec:
    name: str
    x: Number
    y: Number


@dataclass(frozen=True)
class CircleByCenterRadius:
    name: str
    center: str
    radius: Number


@dataclass(frozen=True)
class CircleByThreePoints:
    name: str
    point1: str
    point2: str
    point3: str


CircleSpec = CircleByCenterRadius | CircleByThreePoints


@dataclass(frozen=True)
class PolygonSpec:
    name: str
    vertices: tuple[str, ...]


@dataclass(frozen=True)
class LineByTwoPoints:
    name: str
    point1: str
    point2: str


@dataclass(frozen=True)
class LineByEquation:
    name: str
    equation: str


LineSpec = LineByTwoPoints | LineByEquation


@dataclass(frozen=True)
class RawCommandSpec:
    command: str


@dataclass(frozen=True)
class DeleteSpec:
    name: str


@dataclass(frozen=True)
class ObjectQuerySpec:
    name: str


@dataclass(frozen=True)
class SynthesizedCommand:
    command: str
    metadata: dict[str, Any] = field(default_factory=dict)
