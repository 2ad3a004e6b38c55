"""Enumerations and four-character keys used in PSD files."""

from __future__ import annotations

from enum import IntEnum


def make_key(key: str | bytes) -> int:
    """Pack a four-character key into the 32-bit big-endian integer stored in files."""
    raw = key.encode("latin-1") if isinstance(key, str) else bytes(key)
    if len(raw) != 4:
        raise ValueError(f"a key must be exactly 4 characters long, got {key!r}")
    return int.from_bytes(raw, "big")


class BlendMode(IntEnum):
    """All blend modes known by Photoshop."""

    PASS_THROUGH = 0
    NORMAL = 1
    DISSOLVE = 2
    DARKEN = 3
    MULTIPLY = 4
    COLOR_BURN = 5
    LINEAR_BURN = 6
    DARKER_COLOR = 7
    LIGHTEN = 8
    SCREEN = 9
    COLOR_DODGE = 10
    LINEAR_DODGE = 11
    LIGHTER_COLOR = 12
    OVERLAY = 13
    SOFT_LIGHT = 14
    HARD_LIGHT = 15
    VIVID_LIGHT = 16
    LINEAR_LIGHT = 17
    PIN_LIGHT = 18
    HARD_MIX = 19
    DIFFERENCE = 20
    EXCLUSION = 21
    SUBTRACT = 22
    DIVIDE = 23
    HUE = 24
    SATURATION = 25
    COLOR = 26
    LUMINOSITY = 27
    UNKNOWN = 28

    @property
    def key(self) -> str | None:
        """The four-character key of this mode, or None for UNKNOWN."""
        return _BLEND_KEYS.get(self)


_BLEND_KEYS: dict[BlendMode, str] = {
    BlendMode.PASS_THROUGH: "pass",
    BlendMode.NORMAL: "norm",
    BlendMode.DISSOLVE: "diss",
    BlendMode.DARKEN: "dark",
    BlendMode.MULTIPLY: "mul ",
    BlendMode.COLOR_BURN: "idiv",
    BlendMode.LINEAR_BURN: "lbrn",
    BlendMode.DARKER_COLOR: "dkCl",
    BlendMode.LIGHTEN: "lite",
    BlendMode.SCREEN: "scrn",
    BlendMode.COLOR_DODGE: "div ",
    BlendMode.LINEAR_DODGE: "lddg",
    BlendMode.LIGHTER_COLOR: "lgCl",
    BlendMode.OVERLAY: "over",
    BlendMode.SOFT_LIGHT: "sLit",
    BlendMode.HARD_LIGHT: "hLit",
    BlendMode.VIVID_LIGHT: "vLit",
    BlendMode.LINEAR_LIGHT: "lLit",
    BlendMode.PIN_LIGHT: "pLit",
    BlendMode.HARD_MIX: "hMix",
    BlendMode.DIFFERENCE: "diff",
    BlendMode.EXCLUSION: "smud",
    BlendMode.SUBTRACT: "fsub",
    BlendMode.DIVIDE: "fdiv",
    BlendMode.HUE: "hue ",
    BlendMode.SATURATION: "sat ",
    BlendMode.COLOR: "colr",
    BlendMode.LUMINOSITY: "lum ",
}

_MODES_BY_KEY: dict[int, BlendMode] = {make_key(k): mode for mode, k in _BLEND_KEYS.items()}


def blend_mode_from_key(key: int | str | bytes) -> BlendMode:
    """Map a blend mode key (packed integer or four characters) to a BlendMode."""
    if isinstance(key, (str, bytes, bytearray)):
        key = make_key(key)
    return _MODES_BY_KEY.get(key, BlendMode.UNKNOWN)


def blend_mode_to_string(value: int) -> str:
    """Return the name of a blend mode."""
    try:
        return BlendMode(value).name
    except ValueError:
        return "Unhandled blend mode"


class ColorMode(IntEnum):
    """All color modes known by Photoshop."""

    BITMAP = 0
    GRAYSCALE = 1
    INDEXED = 2
    RGB = 3
    CMYK = 4
    MULTICHANNEL = 7
    DUOTONE = 8
    LAB = 9


def color_mode_to_string(value: int) -> str:
    """Return the name of a color mode, or "Unknown"."""
    try:
        return ColorMode(value).name
    except ValueError:
        return "Unknown"


class CompressionType(IntEnum):
    """Compression types for channel data."""

    RAW = 0
    RLE = 1
    ZIP = 2
    ZIP_WITH_PREDICTION = 3


class ImageResource(IntEnum):
    """Identifiers of image resources stored in the Image Resources section."""

    IPTC_NAA = 1028
    CAPTION_DIGEST = 1061
    XMP_METADATA = 1060
    PRINT_INFORMATION = 1082
    PRINT_STYLE = 1083
    PRINT_SCALE = 1062
    PRINT_FLAGS = 1011
    PRINT_FLAGS_INFO = 10000
    PRINT_INFO = 1071
    RESOLUTION_INFO = 1005
    DISPLAY_INFO = 1077
    GLOBAL_ANGLE = 1037
    GLOBAL_ALTITUDE = 1049
    COLOR_HALFTONING_INFO = 1013
    COLOR_TRANSFER_FUNCTIONS = 1016
    MULTICHANNEL_HALFTONING_INFO = 1012
    MULTICHANNEL_TRANSFER_FUNCTIONS = 1015
    LAYER_STATE_INFORMATION = 1024
    LAYER_GROUP_INFORMATION = 1026
    LAYER_GROUP_ENABLED_ID = 1072
    LAYER_SELECTION_ID = 1069
    GRID_GUIDES_INFO = 1032
    URL_LIST = 1054
    SLICES = 1050
    PIXEL_ASPECT_RATIO = 1064
    ICC_PROFILE = 1039
    ICC_UNTAGGED_PROFILE = 1041
    ID_SEED_NUMBER = 1044
    THUMBNAIL_RESOURCE = 1036
    VERSION_INFO = 1057
    EXIF_DATA = 1058
    BACKGROUND_COLOR = 1010
    ALPHA_CHANNEL_ASCII_NAMES = 1006
    ALPHA_CHANNEL_UNICODE_NAMES = 1045
    ALPHA_IDENTIFIERS = 1053
    COPYRIGHT_FLAG = 1034
    PATH_SELECTION_STATE = 1088
    ONION_SKINS = 1078
    TIMELINE_INFO = 1075
    SHEET_DISCLOSURE = 1076
    WORKING_PATH = 1025
    MAC_PRINT_MANAGER_INFO = 1001
    WINDOWS_DEVMODE = 1085


class ExportChannel(IntEnum):
    """Channels that can be exported to a layer."""

    GRAY = 0
    RED = 1
    GREEN = 2
    BLUE = 3
    ALPHA = 4


class ExportColorMode(IntEnum):
    """Color modes available for export; the value is also the channel count."""

    GRAYSCALE = 1
    RGB = 3