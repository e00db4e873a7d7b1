from pydantic import BaseModel, field_validator
from typing import Any, List, Optional

from ..services.field import Point, is_number


class PointSchema(BaseModel):
    id: Optional[int] = None
    left: Optional[float] = None
    top: Optional[float] = None

    @field_validator("left", "top", mode="before")
    @classmethod
    def _numeric_or_none(cls, value: Any) -> Optional[float]:
        # Best effort: anything that is not a finite number counts as missing
        return value if is_number(value) else None

    @field_validator("id", mode="before")
    @classmethod
    def _int_or_none(cls, value: Any) -> Optional[int]:
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        if is_number(value) and float(value).is_integer():
            return int(value)
        return None

    def to_point(self) -> Point:
        return Point(id=self.id, left=self.left, top=self.top)


class AnalyzeRequest(BaseModel):
    ball: Optional[PointSchema] = None
    green: List[PointSchema] = []
    black: List[PointSchema] = []

    def ball_point(self) -> Optional[Point]:
        return self.ball.to_point() if self.ball is not None else None

    def green_points(self) -> List[Point]:
        return [p.to_point() for p in self.green]

    def black_points(self) -> List[Point]:
        return [p.to_point() for p in self.black]


class AnalyzeResponse(BaseModel):
    detectedFormation: str
    phase: str
    red: List[PointSchema]
    greenAdjusted: List[PointSchema]
    coachComment: str
