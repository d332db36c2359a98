"""Deterministic plugin colors.

Maps a plugin name onto the viridis color scale so the same plugin always
gets the same color. Presentation only.
"""

from rich.color import Color
from rich.color_triplet import ColorTriplet

# Evenly spaced viridis samples from t=0 to t=1
VIRIDIS_STOPS: tuple[str, ...] = (
    "#440154",
    "#472d7b",
    "#3b528b",
    "#2c728e",
    "#21908c",
    "#27ad81",
    "#5dc863",
    "#aadc32",
    "#fde725",
)

# Input domain of the color scale
SCALE_DOMAIN: tuple[float, float] = (1, 10)


def _interpolate_viridis(t: float) -> ColorTriplet:
    t = min(max(t, 0.0), 1.0)
    segments = len(VIRIDIS_STOPS) - 1
    position = t * segments
    index = min(int(position), segments - 1)
    fraction = position - index

    start = Color.parse(VIRIDIS_STOPS[index]).get_truecolor()
    end = Color.parse(VIRIDIS_STOPS[index + 1]).get_truecolor()
    return ColorTriplet(
        round(start.red + (end.red - start.red) * fraction),
        round(start.green + (end.green - start.green) * fraction),
        round(start.blue + (end.blue - start.blue) * fraction),
    )


def name_code(name: str) -> int:
    """Sum of the name's UTF-16 code units, reduced mod 10.

    Characters outside the Basic Multilingual Plane count as their two
    surrogate units, so codes agree with JavaScript's ``charCodeAt``.
    """
    encoded = name.encode("utf-16-le", errors="surrogatepass")
    return sum(
        int.from_bytes(encoded[index:index + 2], "little")
        for index in range(0, len(encoded), 2)
    ) % 10


def color_for(name: str) -> str:
    """
    Color for a plugin name as a ``#rrggbb`` hex string.

    Codes below the scale domain clamp to its first color.
    """
    low, high = SCALE_DOMAIN
    t = (name_code(name) - low) / (high - low)
    return _interpolate_viridis(t).hex
