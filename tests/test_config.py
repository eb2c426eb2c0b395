import pytest

from polymaze.config import MazeConfig
from polymaze.errors import InvalidEntryCount, MazeError, SizeOutOfRange, UnknownTopology
from polymaze.topology import Topology, create_grid, parse_topology


def test_defaults_validate():
    config = MazeConfig()
    assert (config.topology, config.size, config.entry_count, config.seed) == ("polar", 9, 3, None)
    assert config.validate() is config


@pytest.mark.parametrize(
    "config,error",
    [
        (MazeConfig(topology="spiral"), UnknownTopology),
        (MazeConfig(size=0), SizeOutOfRange),
        (MazeConfig(entry_count=0), InvalidEntryCount),
        (MazeConfig(entry_count=-2), InvalidEntryCount),
    ],
)
def test_invalid_config(config, error):
    with pytest.raises(error):
        config.validate()


def test_errors_are_value_errors():
    for error in (UnknownTopology("x"), SizeOutOfRange(0, (1, None)), InvalidEntryCount(0)):
        assert isinstance(error, MazeError)
        assert isinstance(error, ValueError)


def test_parse_topology():
    assert parse_topology("RECT") is Topology.RECT
    assert parse_topology(" irregular ") is Topology.IRREGULAR
    assert parse_topology(Topology.TRI) is Topology.TRI
    with pytest.raises(UnknownTopology) as exc:
        parse_topology("cube")
    assert "rect" in str(exc.value)


def test_create_grid_sizes():
    assert len(create_grid("rect", 3)) == 9
    with pytest.raises(SizeOutOfRange) as exc:
        create_grid("irregular", 26)
    assert exc.value.bounds == (2, 25)
