# mybar

`mybar` writes a continuous status stream in the i3bar JSON protocol. Each
line holds two blocks in Solarized colours, each with a powerline-style
separator block in front of it:

- **network_data**: the average download and upload rates of the default
  network device. The average covers the last five readings, one reading per
  line. Rates are shown in bps, Kbps, Mbps or Gbps.
- **timedate**: the local date and time, for example ` Mon 01 Jan 12:00:00`.

The default device is the interface whose destination is `00000000` in
`/proc/net/route`. Its byte counters are read from
`/sys/class/net/<device>/statistics/rx_bytes` and `tx_bytes`. This makes the
network block Linux-only.

If a network reading fails, for example because there is no default route,
the network block from the last successful reading is shown again. Until a
reading has succeeded, the network slot is left empty and only the clock
block appears. The first reading measures each counter against zero, so the
first few seconds show the traffic since boot spread over the window.

## Installation

```
pip install .
```

## Use with i3

Put the command in the bar section of your i3 configuration:

```
bar {
    status_command mybar
}
```

To see the raw stream, run the command yourself:

```
mybar
```

It prints the protocol header `{"version":1,"click_events":true}`. Then it
opens an endless JSON array and adds one status line to it every second. It
stops on Ctrl-C or when the reader closes the pipe. The command has no options
apart from `--help`.

## Use as a library

`mybar.bar.build_a_bar(out, monitor, iterations, interval)` writes the stream
to any text stream. `iterations=None` runs forever.

```python
import sys
from mybar.bar import build_a_bar
from mybar.network import NetworkMonitor

monitor = NetworkMonitor()
build_a_bar(sys.stdout, monitor, iterations=3, interval=1.0)
```

`NetworkMonitor(route_path, sys_dir, window)` takes other paths for the route
table and the statistics directory. `window` sets the number of readings that
are averaged. `NetworkMonitor.sample()` returns the averaged `(rx, tx)` rates
in bits. It raises `mybar.network.NetworkError` when no default device is found
or a counter cannot be read.

The blocks can also be built on their own:

```python
from mybar.blocks import status_json
from mybar.clock import time_date_block
from mybar.network import format_speed

print(status_json("#000000", "#268BD2", "demo", "#ffffff", "hello"))
block, next_color = time_date_block("#268BD2")
print(format_speed(2048.0))  # "2.00 Kbps"
```

`mybar.bar.render_line(blocks, max_length)` joins blocks into one line of the
array. Blocks that would push the line past `max_length` bytes (1024 by
default) are dropped. `join_blocks` raises `BarOverflowError` in that case
instead.

## What it does not do

- The header announces click events, but the stream from i3bar is never read.
  Clicks on the blocks have no effect.
- There is no configuration file. Colours, the set of blocks and the
  one-second interval are fixed, except through the library calls above.

## Development

```
pip install -e ".[test]"
pytest
```