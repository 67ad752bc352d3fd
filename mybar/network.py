"""Network throughput block read from the kernel's routing and statistics files."""

import re

from .blocks import SOLAR_BLUE, status_json

ROUTE = "/proc/net/route"
SYS_DIR = "/sys/class/net/"
RX_SUFFIX = "/statistics/rx_bytes"
TX_SUFFIX = "/statistics/tx_bytes"
WINDOW = 5
NETWORK_COLOR = SOLAR_BLUE
NETWORK_FONT_COLOR = "#ffffff"

_MAX_ROUTE_LINES = 100
_BYTE_BUFFER_SIZE = 20
_SPEED_MAX_LEN = 12
_U64 = 1 << 64
_NUMBER = re.compile(r"\s*([+-]?)(\d*)")


class NetworkError(Exception):
    """Raised when network statistics cannot be obtained."""


def find_default_network_device(route_path=ROUTE):
    """Return the interface whose destination is the default route."""
    try:
        with open(route_path, encoding="utf-8", errors="replace") as route:
            next(route, None)  # header line
            for count, line in enumerate(route):
                if count >= _MAX_ROUTE_LINES:
                    break
                fields = line.split()
                if len(fields) >= 2 and fields[1][:8] == "00000000":
                    return fields[0][:15]
    except OSError as exc:
        raise NetworkError(f"Failed to open {route_path}: {exc}") from exc
    raise NetworkError("no default network device")


def _parse_unsigned(text):
    sign, digits = _NUMBER.match(text).groups()
    value = int(digits) if digits else 0
    if value >= _U64:
        return _U64 - 1
    return (-value) % _U64 if sign == "-" else value


def read_bytes_value(device_name, suffix, sys_dir=SYS_DIR):
    """Read an unsigned counter from a device statistics file."""
    path = f"{sys_dir}{device_name}{suffix}"
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            line = handle.readline(_BYTE_BUFFER_SIZE - 1)
    except OSError as exc:
        raise NetworkError(f"Failed to open {path}: {exc}") from exc
    if not line:
        raise NetworkError(f"Failed to read from file {path}")
    return _parse_unsigned(line)


def get_up_down_bytes(device_name, sys_dir=SYS_DIR):
    """Return the received and transmitted byte counters of a device."""
    rx = read_bytes_value(device_name, RX_SUFFIX, sys_dir)
    tx = read_bytes_value(device_name, TX_SUFFIX, sys_dir)
    return rx, tx


def format_speed(bits):
    """Render a bit rate as bps, Kbps, Mbps or Gbps."""
    text = f"{bits:.0f} bps"
    for unit in ("Kbps", "Mbps", "Gbps"):
        if bits > 1024.0:
            bits /= 1024.0
            text = f"{bits:.2f} {unit}"
    return text[: _SPEED_MAX_LEN - 1]


class CircularBuffer:
    """Fixed-size ring of byte counts, averaged in bits."""

    def __init__(self, size):
        if size <= 0:
            raise ValueError("buffer size must be positive")
        self._values = [0] * size
        self._position = 0

    def insert(self, value):
        """Store a value, overwriting the oldest one."""
        self._values[self._position] = value
        self._position = (self._position + 1) % len(self._values)

    def average_bits(self):
        """Return the mean of the stored values multiplied by eight."""
        total = sum(value * 8 for value in self._values) % _U64
        return total / len(self._values)


class NetworkMonitor:
    """Tracks throughput of the default network device over a sliding window."""

    def __init__(self, route_path=ROUTE, sys_dir=SYS_DIR, window=WINDOW):
        self.route_path = route_path
        self.sys_dir = sys_dir
        self._rx = CircularBuffer(window)
        self._tx = CircularBuffer(window)
        self._rx_previous = 0
        self._tx_previous = 0

    def sample(self):
        """Take one reading and return the average (rx, tx) rates in bits."""
        device = find_default_network_device(self.route_path)
        rx_current, tx_current = get_up_down_bytes(device, self.sys_dir)
        rx_change = (rx_current - self._rx_previous) % _U64
        tx_change = (tx_current - self._tx_previous) % _U64
        self._rx_previous = rx_current
        self._tx_previous = tx_current
        self._rx.insert(rx_change)
        self._tx.insert(tx_change)
        return self._rx.average_bits(), self._tx.average_bits()

    def block(self, prev_color):
        """Return the network block JSON and the colour the next block follows."""
        rx_average, tx_average = self.sample()
        text = f"   {format_speed(rx_average)}  {format_speed(tx_average)}"
        block = status_json(
            prev_color, NETWORK_COLOR, "network_data", NETWORK_FONT_COLOR, text
        )
        return block, NETWORK_COLOR