from dataclasses import dataclass, field
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class TunnelInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    start_location: str = Field(..., min_length=1)
    end_location: str = Field(..., min_length=1)
    max_cars_per_hour: float = Field(..., ge=0)


class NetworkInput(BaseModel):
    tunnels: List[TunnelInput] = Field(..., min_length=1)


@dataclass
class Route:
    destination: int
    max_cars_per_hour: float


@dataclass
class Vertex:
    location: str
    routes: List[Route] = field(default_factory=list)
    incoming: int = 0


@dataclass(frozen=True)
class PathSegment:
    start: int
    end: int
    max_cars_per_hour: float


@dataclass
class TunnelGraph:
    """Vertices live in one list; routes point at them by index."""

    vertices: List[Vertex] = field(default_factory=list)
    index: Dict[str, int] = field(default_factory=dict)
    head: Optional[int] = None
    tail: Optional[int] = None

    def add_vertex(self, location: str) -> int:
        if location not in self.index:
            self.index[location] = len(self.vertices)
            self.vertices.append(Vertex(location))
        return self.index[location]

    def vertex(self, location: str) -> Vertex:
        return self.vertices[self.index[location]]

    def location(self, i: int) -> str:
        return self.vertices[i].location

    def routes_from(self, i: int) -> List[Route]:
        return self.vertices[i].routes

    def describe(self, path: List[int]) -> str:
        return "-".join(self.location(i) for i in path)
