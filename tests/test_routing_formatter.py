import math

from routefinder.services.outputs.routing_formatter import (
    route_result_to_csv,
    route_result_to_json,
    route_result_to_text,
)
from routefinder.services.routing.models import DistanceMatrix
from routefinder.services.routing.optimizer import find_shortest_route


def _result(durations=None):
    matrix = DistanceMatrix.from_rows([[0, 10, 15], [10, 0, 20], [15, 20, 0]], durations=durations)
    return find_shortest_route(matrix, ["A", "B", "C"])


def test_text_output_lists_stops_and_kilometres():
    assert route_result_to_text(_result()) == (
        "Best Route:\n"
        "1: A\n"
        "2: B\n"
        "3: C\n"
        "\n"
        "Total Distance: 0.03 km"
    )


def test_text_output_uses_two_decimals():
    matrix = DistanceMatrix.from_rows([[0, 12346], [12346, 0]])
    text = route_result_to_text(find_shortest_route(matrix, ["Home", "Office"]))

    assert text.endswith("Total Distance: 12.35 km")


def test_json_output():
    payload = route_result_to_json(_result(durations=[[0, 60, 90], [60, 0, 120], [90, 120, 0]]))

    assert payload["locations"] == ["A", "B", "C"]
    assert payload["order"] == [0, 1, 2]
    assert payload["total_distance_m"] == 30
    assert payload["total_distance_km"] == 0.03
    assert payload["total_duration_s"] == 180
    assert payload["stops"][2] == {
        "location": "C",
        "index": 2,
        "sequence": 3,
        "distance_from_prev_m": 20.0,
        "duration_from_prev_s": 120.0,
    }


def test_json_output_drops_unknown_durations():
    payload = route_result_to_json(_result(durations=[[0, None, 90], [None, 0, None], [90, None, 0]]))

    assert payload["total_duration_s"] is None
    assert payload["stops"][1]["duration_from_prev_s"] is None
    assert not any(
        isinstance(stop["duration_from_prev_s"], float) and math.isinf(stop["duration_from_prev_s"])
        for stop in payload["stops"]
    )


def test_csv_output():
    lines = route_result_to_csv(_result()).splitlines()

    assert lines[0] == "sequence,location,index,distance_from_prev_m,duration_from_prev_s,total_distance_m"
    assert lines[1] == "1,A,0,0.0,,30.0"
    assert lines[3] == "3,C,2,20.0,,30.0"
