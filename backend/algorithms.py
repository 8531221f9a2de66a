import logging
from typing import Any, Dict, Iterable, List, Mapping, Union

from errors import CapacityLookupError, MalformedGraphError, NoPathFoundError
from models import PathSegment, Route, TunnelGraph, TunnelInput

logger = logging.getLogger(__name__)

NO_ROUTE = -1


def build_graph(tunnels: Iterable[Union[TunnelInput, Mapping[str, Any]]], strict: bool = False) -> TunnelGraph:
    records = [t if isinstance(t, TunnelInput) else TunnelInput.model_validate(t) for t in tunnels]
    if not records:
        raise MalformedGraphError("tunnel network has no edges")

    graph = TunnelGraph()
    for t in records:
        graph.add_vertex(t.start_location)
        graph.add_vertex(t.end_location)

    for t in records:
        u, v = graph.index[t.start_location], graph.index[t.end_location]
        graph.vertices[u].routes.append(Route(v, t.max_cars_per_hour))
        graph.vertices[v].incoming += 1

    heads = [i for i, vx in enumerate(graph.vertices) if vx.incoming == 0]
    tails = [i for i, vx in enumerate(graph.vertices) if not vx.routes]
    for role, found in (("head", heads), ("tail", tails)):
        if not found:
            raise MalformedGraphError(f"no {role} vertex found")
        if len(found) > 1:
            names = ", ".join(graph.location(i) for i in found)
            if strict:
                raise MalformedGraphError(f"ambiguous {role}: {names}")
            logger.warning(f"Several {role} candidates ({names}), using {graph.location(found[-1])}")

    graph.head, graph.tail = heads[-1], tails[-1]
    logger.debug(f"Built graph: {len(graph.vertices)} vertices, {len(records)} routes, "
                 f"head={graph.location(graph.head)} tail={graph.location(graph.tail)}")
    return graph


def find_all_paths(graph: TunnelGraph) -> List[List[int]]:
    """Every simple path from head to tail, in depth-first order.

    A vertex is blocked only while it sits on the current branch. Reaching the
    tail records the path but does not end the branch.
    """
    if graph.head is None or graph.tail is None:
        raise MalformedGraphError("graph has no head or tail")

    head, tail = graph.head, graph.tail
    paths: List[List[int]] = []
    path = [head]
    active = {head}
    if head == tail:
        paths.append(list(path))
    stack = [(head, iter(graph.routes_from(head)))]

    while stack:
        _, routes = stack[-1]
        try:
            route = next(routes)
        except StopIteration:
            stack.pop()
            active.discard(path.pop())
            continue
        nxt = route.destination
        if nxt in active:
            continue
        active.add(nxt)
        path.append(nxt)
        if nxt == tail:
            paths.append(list(path))
        stack.append((nxt, iter(graph.routes_from(nxt))))

    logger.debug(f"Found {len(paths)} paths from {graph.location(head)} to {graph.location(tail)}")
    return paths


def find_route_capacity(graph: TunnelGraph, start: int, end: int) -> float:
    for route in graph.routes_from(start):
        if route.destination == end:
            return route.max_cars_per_hour
    return NO_ROUTE


def find_all_routes(graph: TunnelGraph) -> List[List[PathSegment]]:
    routes = []
    for path in find_all_paths(graph):
        segments = []
        for u, v in zip(path[:-1], path[1:]):
            cap = find_route_capacity(graph, u, v)
            if cap == NO_ROUTE:
                raise CapacityLookupError(graph.location(u), graph.location(v))
            segments.append(PathSegment(u, v, cap))
        routes.append(segments)
    return routes


def bottleneck(segments: List[PathSegment]) -> float:
    return min(s.max_cars_per_hour for s in segments)


def max_network_capacity(graph: TunnelGraph) -> float:
    bottlenecks = [bottleneck(segments) for segments in find_all_routes(graph) if segments]
    if not bottlenecks:
        raise NoPathFoundError(f"no route from {graph.location(graph.head)} to {graph.location(graph.tail)}")
    bottlenecks.sort(key=float)
    return bottlenecks[-1]


def analyze_network(graph: TunnelGraph) -> Dict[str, Any]:
    report = []
    for segments in find_all_routes(graph):
        if not segments:
            continue
        path = [graph.location(segments[0].start)] + [graph.location(s.end) for s in segments]
        report.append({
            "path": path,
            "segments": [{"from": graph.location(s.start), "to": graph.location(s.end),
                          "max_cars_per_hour": s.max_cars_per_hour} for s in segments],
            "bottleneck": bottleneck(segments),
        })
    if not report:
        raise NoPathFoundError(f"no route from {graph.location(graph.head)} to {graph.location(graph.tail)}")

    return {
        "head": graph.location(graph.head),
        "tail": graph.location(graph.tail),
        "max_cars_per_hour": sorted((r["bottleneck"] for r in report), key=float)[-1],
        "routes": report,
    }
