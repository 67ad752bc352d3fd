"""Rendering of i3bar JSON blocks in the Solarized colour scheme."""

SOLAR_BASE03 = "#002B36"
SOLAR_BASE02 = "#073642"
SOLAR_BASE01 = "#586E75"
SOLAR_BASE00 = "#657B83"
SOLAR_BASE0 = "#839496"
SOLAR_BASE1 = "#93A1A1"
SOLAR_BASE2 = "#EEE8D5"
SOLAR_BASE3 = "#FDF6E3"
SOLAR_YELLOW = "#B58900"
SOLAR_ORANGE = "#CB4B16"
SOLAR_RED = "#DC322F"
SOLAR_MAGENTA = "#D33682"
SOLAR_VIOLET = "#6C71C4"
SOLAR_BLUE = "#268BD2"
SOLAR_CYAN = "#2AA198"
SOLAR_GREEN = "#859900"

I3_BAR_COLOR = "#000000"
LINE_BUFFER_SIZE = 512

# The border colour matches I3_BAR_COLOR.
COMMON_JSON = (
    '"border":"#000000",'
    '"separator":false,'
    '"separator_block_width":0,'
    '"border_top":2,'
    '"border_bottom":2,'
    '"border_left":0,'
    '"border_right":0'
)


def _clip(text, limit=LINE_BUFFER_SIZE):
    """Cut text so its UTF-8 form fits a buffer of `limit` bytes with terminator."""
    data = text.encode("utf-8")
    if len(data) < limit:
        return text
    return data[: limit - 1].decode("utf-8", errors="ignore")


def separator_json(previous_color, current_color):
    """Return a standalone separator block followed by a comma."""
    return _clip(
        '{"full_text":"",'
        f'"color":"{current_color}",'
        f'"background":"{previous_color}"'
        f"{COMMON_JSON}"
        "},"
    )


def status_json(prev_color, current_color, name, font_color, text):
    """Return a separator block and a named status block, comma separated."""
    return _clip(
        '{"full_text":"",'
        f'"background":"{prev_color}",'
        f'"color":"{current_color}",'
        f"{COMMON_JSON}"
        "},"
        "{"
        f'"name":"{name}",'
        f'"background":"{current_color}",'
        f'"color":"{font_color}",'
        f'"full_text":"{text}",'
        f"{COMMON_JSON}"
        "}"
    )