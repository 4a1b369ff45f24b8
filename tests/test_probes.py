from gridtactics.sim.contracts import Facing
from gridtactics.sim.map_text import parse_map
from gridtactics.sim.probes import probe, probe_string


def test_front_probe_reports_finish_step() -> None:
    grid_map = parse_map("p0e1 _ f")
    assert probe_string(grid_map, 0) == "front: 2/F2 back: 0 left: 0 right: 0"


def test_probe_prefixes_by_actor_type() -> None:
    grid_map = parse_map("_ t1s1 _\np2w1 p0n1 e3w1\n_ x _")
    assert probe_string(grid_map, 0) == "front: E0 back: 0 left: P0 right: E0"


def test_probe_finish_then_actor() -> None:
    grid_map = parse_map("p0e1 f _ t1w1")
    assert probe(grid_map, Facing.EAST, (0, 0)) == "E2/F1"


def test_probe_string_for_missing_actor() -> None:
    assert probe_string(parse_map("p0e1"), 4) is None
