import pytest
from pydantic import ValidationError

from models import NetworkInput, TunnelInput
from samples import random_tunnels


def test_tunnel_input_coerces_capacity():
    t = TunnelInput(start_location="A", end_location="B", max_cars_per_hour="12")
    assert t.max_cars_per_hour == 12.0


@pytest.mark.parametrize("payload", [
    {"start_location": "A", "end_location": "B", "max_cars_per_hour": -1},
    {"start_location": "", "end_location": "B", "max_cars_per_hour": 1},
    {"start_location": "A", "end_location": "B"},
])
def test_tunnel_input_rejects_bad_records(payload):
    with pytest.raises(ValidationError):
        TunnelInput(**payload)


def test_tunnel_input_is_frozen():
    t = TunnelInput(start_location="A", end_location="B", max_cars_per_hour=1)
    with pytest.raises(ValidationError):
        t.max_cars_per_hour = 2


def test_network_input_from_json():
    net = NetworkInput.model_validate_json(
        '{"tunnels": [{"start_location": "A", "end_location": "B", "max_cars_per_hour": 5}]}')
    assert net.tunnels[0].end_location == "B"


def test_network_input_needs_tunnels():
    with pytest.raises(ValidationError):
        NetworkInput(tunnels=[])


def test_random_tunnels_single_head_and_tail():
    edges = random_tunnels(n=12, density=0.1, seed=7)
    starts = {t.start_location for t in edges}
    ends = {t.end_location for t in edges}
    assert starts - ends == {"L0"}
    assert ends - starts == {"L11"}
    assert all(1 <= t.max_cars_per_hour <= 20 for t in edges)
