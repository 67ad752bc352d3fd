import io
import json
from unittest.mock import patch

import pytest

from mybar.bar import (
    BarOverflowError,
    build_a_bar,
    header,
    join_blocks,
    main,
    render_line,
)
from mybar.network import NETWORK_COLOR, NetworkMonitor


def test_header():
    assert header() == '{"version":1,"click_events":true}\n[\n[]\n'


def test_join_blocks():
    assert join_blocks(["a", "b"], 1024) == "a,b"
    assert join_blocks([], 1024) == ""


def test_join_blocks_overflow_keeps_partial():
    with pytest.raises(BarOverflowError) as info:
        join_blocks(["aaa", "bbbb"], 8)
    assert info.value.partial == "aaa"


def test_render_line():
    assert render_line(["a", "b"], 1024) == ",[a,b]\n"


def test_render_line_drops_overflowing_blocks():
    assert render_line(["aaa", "bbbb"], 10) == ",[aaa]\n"


def _monitor(tmp_path):
    (tmp_path / "route").write_text("Iface\tDestination\neth0\t00000000\n")
    stats = tmp_path / "net" / "eth0" / "statistics"
    stats.mkdir(parents=True)
    (stats / "rx_bytes").write_text("100\n")
    (stats / "tx_bytes").write_text("50\n")
    return NetworkMonitor(str(tmp_path / "route"), f"{tmp_path}/net/")


def test_build_a_bar_streams_lines(tmp_path):
    out = io.StringIO()
    build_a_bar(out, _monitor(tmp_path), iterations=2, interval=0)
    text = out.getvalue()
    assert text.startswith(header())
    lines = text[len(header()):].splitlines()
    assert len(lines) == 2
    for line in lines:
        blocks = json.loads(line[1:])
        assert [block.get("name") for block in blocks][1::2] == ["network_data", "timedate"]
        assert blocks[2]["background"] == NETWORK_COLOR


def test_build_a_bar_without_network(tmp_path):
    out = io.StringIO()
    monitor = NetworkMonitor(str(tmp_path / "absent"), f"{tmp_path}/")
    build_a_bar(out, monitor, iterations=1, interval=0)
    line = out.getvalue()[len(header()):]
    assert line.startswith(",[,{")
    separator, body = json.loads("[" + line[3:])
    assert separator["background"] == "#000000"
    assert body["name"] == "timedate"


def test_main_stops_on_interrupt(capsys):
    with patch("time.sleep", side_effect=KeyboardInterrupt):
        assert main([]) == 0
    captured = capsys.readouterr().out
    assert captured.startswith(header())
    assert captured.rstrip("\n").endswith("]")