import pytest

from problemset.graphs import (
    building_roads,
    building_teams,
    counting_rooms,
    labyrinth,
    message_route,
    round_trip,
)


def _components(n, edges):
    parent = list(range(n + 1))

    def find(x):
        while parent[x] != x:
            parent[x] = parent[parent[x]]
            x = parent[x]
        return x

    for a, b in edges:
        parent[find(a)] = find(b)
    return len({find(v) for v in range(1, n + 1)})


def test_building_roads_joins_component_leaders():
    assert building_roads(4, [(1, 2), (3, 4)]) == [(1, 3)]


def test_building_roads_connected_graph_needs_none():
    assert building_roads(3, [(1, 2), (2, 3)]) == []


@pytest.mark.parametrize(
    "n, edges",
    [(6, [(1, 2), (4, 5)]), (5, []), (7, [(2, 3), (3, 4), (6, 7)])],
)
def test_building_roads_result_connects_graph(n, edges):
    roads = building_roads(n, edges)
    assert len(roads) == _components(n, edges) - 1
    assert _components(n, edges + roads) == 1


def test_building_roads_rejects_bad_node():
    with pytest.raises(ValueError):
        building_roads(3, [(1, 4)])


def test_building_teams_valid_assignment():
    edges = [(1, 2), (1, 3), (3, 4), (2, 5)]
    teams = building_teams(5, edges)
    assert len(teams) == 5
    assert set(teams) <= {1, 2}
    assert all(teams[a - 1] != teams[b - 1] for a, b in edges)


def test_building_teams_first_pupil_in_team_one():
    assert building_teams(3, [])[0] == 1


def test_building_teams_odd_cycle_impossible():
    assert building_teams(3, [(1, 2), (2, 3), (3, 1)]) is None


def test_counting_rooms_example():
    grid = [
        "########",
        "#..#...#",
        "####.#.#",
        "#..#...#",
        "########",
    ]
    assert counting_rooms(grid) == 3


def test_counting_rooms_all_walls():
    assert counting_rooms(["###", "###"]) == 0


def test_counting_rooms_diagonal_not_connected():
    assert counting_rooms([".#", "#."]) == 2


def test_labyrinth_example():
    grid = [
        "########",
        "#.A#...#",
        "#.##.#B#",
        "#......#",
        "########",
    ]
    assert labyrinth(grid) == "LDDRRRRRU"


def test_labyrinth_path_leads_to_b():
    grid = ["A...", ".##.", "...B"]
    path = labyrinth(grid)
    deltas = {"D": (1, 0), "R": (0, 1), "U": (-1, 0), "L": (0, -1)}
    x, y = 0, 0
    for move in path:
        dx, dy = deltas[move]
        x, y = x + dx, y + dy
        assert grid[x][y] != "#"
    assert grid[x][y] == "B"
    assert len(path) == 5


def test_labyrinth_blocked():
    assert labyrinth(["A#B"]) is None


def test_labyrinth_requires_endpoints():
    with pytest.raises(ValueError):
        labyrinth(["A.."])


def test_message_route_example():
    edges = [(1, 2), (1, 3), (1, 4), (2, 3), (5, 4)]
    assert message_route(5, edges) == [1, 4, 5]


def test_message_route_impossible():
    assert message_route(4, [(1, 2), (3, 4)]) is None


def test_message_route_single_node():
    assert message_route(1, []) == [1]


def test_round_trip_is_valid_cycle():
    edges = [(1, 3), (1, 2), (5, 3), (1, 5), (2, 4)]
    cycle = round_trip(5, edges)
    edge_set = {frozenset(e) for e in edges}
    assert cycle[0] == cycle[-1]
    assert len(cycle) >= 4
    assert len(set(cycle[:-1])) == len(cycle) - 1
    assert all(frozenset(pair) in edge_set for pair in zip(cycle, cycle[1:]))


def test_round_trip_tree_has_none():
    assert round_trip(4, [(1, 2), (2, 3), (2, 4)]) is None


def test_round_trip_in_later_component():
    cycle = round_trip(6, [(1, 2), (4, 5), (5, 6), (6, 4)])
    assert sorted(cycle[:-1]) == [4, 5, 6]
    assert cycle[0] == cycle[-1]