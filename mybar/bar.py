"""Main loop streaming status lines to i3bar."""

import argparse
import itertools
import logging
import sys
import time

from .blocks import I3_BAR_COLOR
from .clock import time_date_block
from .network import NetworkError, NetworkMonitor

MASTER_BUFFER_SIZE = 1024
_LINE_PREFIX = ",["

log = logging.getLogger(__name__)


class BarOverflowError(Exception):
    """Raised when blocks do not fit in the line; `partial` holds what fitted."""

    def __init__(self, message, partial):
        super().__init__(message)
        self.partial = partial


def _size(text):
    return len(text.encode("utf-8"))


def join_blocks(blocks, max_length=MASTER_BUFFER_SIZE):
    """Join blocks with commas, refusing to grow past `max_length` bytes."""
    pieces = iter(blocks)
    joined = next(pieces, "")
    for block in pieces:
        if _size(block) + _size(joined) + 1 >= max_length:
            raise BarOverflowError("status line too long", joined)
        joined = f"{joined},{block}"
    return joined


def render_line(blocks, max_length=MASTER_BUFFER_SIZE):
    """Return one status array line; blocks that do not fit are dropped."""
    try:
        body = join_blocks(blocks, max_length - len(_LINE_PREFIX))
    except BarOverflowError as exc:
        body = exc.partial
    return f"{_LINE_PREFIX}{body}]\n"


def header():
    """Return the protocol header and the opening of the endless array."""
    return '{"version":1,"click_events":true}\n[\n[]\n'


def build_a_bar(out=None, monitor=None, iterations=None, interval=1.0):
    """Write the header, then a status line every `interval` seconds."""
    out = sys.stdout if out is None else out
    monitor = NetworkMonitor() if monitor is None else monitor
    out.write(header())
    out.flush()
    network_json = ""
    ticks = itertools.count() if iterations is None else range(iterations)
    for _ in ticks:
        color = I3_BAR_COLOR
        try:
            network_json, color = monitor.block(color)
        except NetworkError as exc:
            log.debug("network block unavailable: %s", exc)
        time_json, color = time_date_block(color)
        out.write(render_line([network_json, time_json]))
        out.flush()
        time.sleep(interval)


def main(argv=None):
    """Run the status bar until interrupted."""
    parser = argparse.ArgumentParser(
        prog="mybar", description="Stream network and clock status to i3bar."
    )
    parser.parse_args(argv)
    try:
        build_a_bar()
    except (KeyboardInterrupt, BrokenPipeError):
        pass
    return 0