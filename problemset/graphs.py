"""Graph problems: connectivity, bipartiteness, shortest paths and cycles."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

Edge = tuple[int, int]

_MOVES = ((1, 0, "D"), (0, 1, "R"), (-1, 0, "U"), (0, -1, "L"))


def _adjacency(n: int, edges: Iterable[Edge]) -> list[list[int]]:
    if n < 0:
        raise ValueError("node count must be non-negative")
    adj: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in edges:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"edge ({a}, {b}) has a node outside 1..{n}")
        adj[a].append(b)
        adj[b].append(a)
    return adj


def _grid_rows(grid: Iterable[str]) -> list[str]:
    rows = list(grid)
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("grid rows must all have the same length")
    return rows


def _reach(adj: list[list[int]], start: int, seen: list[bool]) -> None:
    seen[start] = True
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for neighbour in adj[node]:
            if not seen[neighbour]:
                seen[neighbour] = True
                queue.append(neighbour)


def building_roads(n: int, edges: Iterable[Edge]) -> list[Edge]:
    """Fewest new roads that connect all cities, joining consecutive components."""
    adj = _adjacency(n, edges)
    seen = [False] * (n + 1)
    leaders = []
    for city in range(1, n + 1):
        if not seen[city]:
            leaders.append(city)
            _reach(adj, city, seen)
    return list(zip(leaders, leaders[1:]))


def building_teams(n: int, edges: Iterable[Edge]) -> list[int] | None:
    """Team 1 or 2 for each pupil so friends differ, or None if impossible."""
    adj = _adjacency(n, edges)
    team = [0] * (n + 1)
    for start in range(1, n + 1):
        if team[start]:
            continue
        team[start] = 1
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for neighbour in adj[node]:
                if not team[neighbour]:
                    team[neighbour] = 3 - team[node]
                    queue.append(neighbour)
                elif team[neighbour] == team[node]:
                    return None
    return team[1:]


def counting_rooms(grid: Iterable[str]) -> int:
    """Number of 4-connected regions of '.' floor cells."""
    rows = _grid_rows(grid)
    height = len(rows)
    width = len(rows[0]) if rows else 0
    seen: set[tuple[int, int]] = set()
    rooms = 0
    for r, row in enumerate(rows):
        for c, cell in enumerate(row):
            if cell != "." or (r, c) in seen:
                continue
            rooms += 1
            seen.add((r, c))
            queue = deque([(r, c)])
            while queue:
                x, y = queue.popleft()
                for dx, dy, _ in _MOVES:
                    nx, ny = x + dx, y + dy
                    if (
                        0 <= nx < height
                        and 0 <= ny < width
                        and (nx, ny) not in seen
                        and rows[nx][ny] == "."
                    ):
                        seen.add((nx, ny))
                        queue.append((nx, ny))
    return rooms


def _locate(rows: list[str], mark: str) -> tuple[int, int]:
    for r, row in enumerate(rows):
        c = row.find(mark)
        if c >= 0:
            return r, c
    raise ValueError(f"grid has no {mark!r} cell")


def labyrinth(grid: Iterable[str]) -> str | None:
    """Shortest move string (D/R/U/L) from 'A' to 'B' avoiding '#', or None."""
    rows = _grid_rows(grid)
    start = _locate(rows, "A")
    end = _locate(rows, "B")
    height, width = len(rows), len(rows[0])
    came_from: dict[tuple[int, int], tuple[tuple[int, int], str]] = {}
    visited = {start}
    queue = deque([start])
    while queue and end not in visited:
        x, y = queue.popleft()
        for dx, dy, move in _MOVES:
            nxt = (x + dx, y + dy)
            nx, ny = nxt
            if (
                0 <= nx < height
                and 0 <= ny < width
                and nxt not in visited
                and rows[nx][ny] != "#"
            ):
                visited.add(nxt)
                came_from[nxt] = ((x, y), move)
                queue.append(nxt)
                if nxt == end:
                    break
    if end not in visited:
        return None
    moves = []
    current = end
    while current != start:
        current, move = came_from[current]
        moves.append(move)
    return "".join(reversed(moves))


def message_route(n: int, edges: Iterable[Edge]) -> list[int] | None:
    """Shortest route of computers from 1 to n, or None if unreachable."""
    if n < 1:
        raise ValueError("node count must be positive")
    adj = _adjacency(n, edges)
    parent = [0] * (n + 1)
    seen = [False] * (n + 1)
    seen[1] = True
    queue = deque([1])
    while queue:
        node = queue.popleft()
        for neighbour in adj[node]:
            if not seen[neighbour]:
                seen[neighbour] = True
                parent[neighbour] = node
                queue.append(neighbour)
    if not seen[n]:
        return None
    route = [n]
    while route[-1] != 1:
        route.append(parent[route[-1]])
    route.reverse()
    return route


def round_trip(n: int, edges: Iterable[Edge]) -> list[int] | None:
    """A cycle as a closed list of cities (first equals last), or None."""
    adj = _adjacency(n, edges)
    visited = [False] * (n + 1)
    parent = [0] * (n + 1)
    for root in range(1, n + 1):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, -1, iter(adj[root]))]
        while stack:
            node, par, neighbours = stack[-1]
            for neighbour in neighbours:
                if neighbour == par:
                    continue
                if visited[neighbour]:
                    cycle = [neighbour]
                    v = node
                    while v != neighbour:
                        cycle.append(v)
                        v = parent[v]
                    cycle.append(neighbour)
                    cycle.reverse()
                    return cycle
                visited[neighbour] = True
                parent[neighbour] = node
                stack.append((neighbour, node, iter(adj[neighbour])))
                break
            else:
                stack.pop()
    return None