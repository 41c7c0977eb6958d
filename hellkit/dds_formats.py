"""Texture format identifiers and FourCC codes used in DDS files."""

from __future__ import annotations

import enum


def make_fourcc(code):
    """Pack a four-character code (str or bytes) into a little-endian 32-bit integer."""
    data = code.encode("latin-1") if isinstance(code, str) else bytes(code)
    if len(data) != 4:
        raise ValueError(f"a FourCC code needs exactly four characters, got {code!r}")
    return int.from_bytes(data, "little")


class Format(enum.Enum):
    """Pixel and block-compression formats a texture may hold."""

    UNKNOWN = enum.auto()
    ARGB_8888 = enum.auto()
    BGRA_8888 = enum.auto()
    RGBA_8888 = enum.auto()
    RGB_888 = enum.auto()
    BGR_888 = enum.auto()
    RG_8 = enum.auto()
    R_8 = enum.auto()
    ARGB_2101010 = enum.auto()
    ARGB_16 = enum.auto()
    RG_16 = enum.auto()
    R_16 = enum.auto()
    ARGB_16F = enum.auto()
    RG_16F = enum.auto()
    R_16F = enum.auto()
    ARGB_32F = enum.auto()
    RG_32F = enum.auto()
    R_32F = enum.auto()
    DXT1 = enum.auto()
    DXT3 = enum.auto()
    DXT5 = enum.auto()
    DXT5_xGBR = enum.auto()
    DXT5_RxBG = enum.auto()
    DXT5_RBxG = enum.auto()
    DXT5_xRBG = enum.auto()
    DXT5_RGxB = enum.auto()
    DXT5_xGxR = enum.auto()
    ATI1N = enum.auto()
    ATI2N = enum.auto()
    ATI2N_XY = enum.auto()
    ATI2N_DXT5 = enum.auto()
    BC1 = enum.auto()
    BC2 = enum.auto()
    BC3 = enum.auto()
    BC4 = enum.auto()
    BC5 = enum.auto()
    BC6H = enum.auto()
    BC6H_SF = enum.auto()
    BC7 = enum.auto()
    ATC_RGB = enum.auto()
    ATC_RGBA_EXPLICIT = enum.auto()
    ATC_RGBA_INTERPOLATED = enum.auto()
    ETC_RGB = enum.auto()


FOURCC_ATI1N = make_fourcc("ATI1")
FOURCC_ATI2N = make_fourcc("ATI2")
FOURCC_ATI2N_XY = make_fourcc("A2XY")
FOURCC_ATI2N_DXT5 = make_fourcc("A2D5")
FOURCC_DXT5_xGBR = make_fourcc("xGBR")
FOURCC_DXT5_RxBG = make_fourcc("RxBG")
FOURCC_DXT5_RBxG = make_fourcc("RBxG")
FOURCC_DXT5_xRBG = make_fourcc("xRBG")
FOURCC_DXT5_RGxB = make_fourcc("RGxB")
FOURCC_DXT5_xGxR = make_fourcc("xGxR")
FOURCC_APC1 = make_fourcc("APC1")
FOURCC_APC2 = make_fourcc("APC2")
FOURCC_APC3 = make_fourcc("APC3")
FOURCC_APC4 = make_fourcc("APC4")
FOURCC_APC5 = make_fourcc("APC5")
FOURCC_APC6 = make_fourcc("APC6")
FOURCC_ATC_RGB = make_fourcc("ATC ")
FOURCC_ATC_RGBA_EXPLICIT = make_fourcc("ATCA")
FOURCC_ATC_RGBA_INTERP = make_fourcc("ATCI")
FOURCC_ETC_RGB = make_fourcc("ETC ")
FOURCC_BC1 = make_fourcc("BC1 ")
FOURCC_BC2 = make_fourcc("BC2 ")
FOURCC_BC3 = make_fourcc("BC3 ")
FOURCC_BC4 = make_fourcc("BC4 ")
FOURCC_BC4S = make_fourcc("BC4S")
FOURCC_BC4U = make_fourcc("BC4U")
FOURCC_BC5 = make_fourcc("BC5 ")
FOURCC_BC5S = make_fourcc("BC5S")

# Deprecated, still recognised when reading.
FOURCC_DXT5_GXRB = make_fourcc("GXRB")
FOURCC_DXT5_GRXB = make_fourcc("GRXB")
FOURCC_DXT5_RXGB = make_fourcc("RXGB")
FOURCC_DXT5_BRGX = make_fourcc("BRGX")

FOURCC_DXT1 = make_fourcc("DXT1")
FOURCC_DXT2 = make_fourcc("DXT2")
FOURCC_DXT3 = make_fourcc("DXT3")
FOURCC_DXT4 = make_fourcc("DXT4")
FOURCC_DXT5 = make_fourcc("DXT5")
FOURCC_DX10 = make_fourcc("DX10")

DDS_MAGIC = make_fourcc("DDS ")

_FOURCC_FORMATS = (
    (FOURCC_DXT1, Format.DXT1),
    (FOURCC_DXT3, Format.DXT3),
    (FOURCC_DXT5, Format.DXT5),
    (FOURCC_DXT5_xGBR, Format.DXT5_xGBR),
    (FOURCC_DXT5_RxBG, Format.DXT5_RxBG),
    (FOURCC_DXT5_RBxG, Format.DXT5_RBxG),
    (FOURCC_DXT5_xRBG, Format.DXT5_xRBG),
    (FOURCC_DXT5_RGxB, Format.DXT5_RGxB),
    (FOURCC_DXT5_xGxR, Format.DXT5_xGxR),
    (FOURCC_DXT5_GXRB, Format.DXT5_xRBG),
    (FOURCC_DXT5_GRXB, Format.DXT5_RxBG),
    (FOURCC_DXT5_RXGB, Format.DXT5_xGBR),
    (FOURCC_DXT5_BRGX, Format.DXT5_RGxB),
    (FOURCC_ATI1N, Format.ATI1N),
    (FOURCC_ATI2N, Format.ATI2N),
    (FOURCC_ATI2N_XY, Format.ATI2N_XY),
    (FOURCC_ATI2N_DXT5, Format.ATI2N_DXT5),
    (FOURCC_BC1, Format.BC1),
    (FOURCC_BC2, Format.BC2),
    (FOURCC_BC3, Format.BC3),
    (FOURCC_BC4, Format.BC4),
    (FOURCC_BC4S, Format.BC4),
    (FOURCC_BC4U, Format.BC4),
    (FOURCC_BC5, Format.BC5),
    (FOURCC_BC5S, Format.BC5),
    (FOURCC_ATC_RGB, Format.ATC_RGB),
    (FOURCC_ATC_RGBA_EXPLICIT, Format.ATC_RGBA_EXPLICIT),
    (FOURCC_ATC_RGBA_INTERP, Format.ATC_RGBA_INTERPOLATED),
    (FOURCC_ETC_RGB, Format.ETC_RGB),
)

_DXT5_SWIZZLED = frozenset(
    {
        Format.DXT5_xGBR,
        Format.DXT5_RxBG,
        Format.DXT5_RBxG,
        Format.DXT5_xRBG,
        Format.DXT5_RGxB,
        Format.DXT5_xGxR,
        Format.ATI2N_DXT5,
    }
)

_DESCRIPTIONS = (
    (Format.UNKNOWN, "Unknown"),
    (Format.ARGB_8888, "ARGB_8888"),
    (Format.BGRA_8888, "BGRA_8888"),
    (Format.RGBA_8888, "RBGA_8888"),
    (Format.RGB_888, "RGB_888"),
    (Format.BGR_888, "BRG_888"),
    (Format.RG_8, "RG_8"),
    (Format.R_8, "R_8"),
    (Format.ARGB_2101010, "ARGB_2101010"),
    (Format.ARGB_16, "ARGB_16"),
    (Format.RG_16, "RG_16"),
    (Format.R_16, "R_16"),
    (Format.ARGB_16F, "ARGB_16F"),
    (Format.RG_16F, "RG_16F"),
    (Format.R_16F, "R_16F"),
    (Format.ARGB_32F, "ARGB_32F"),
    (Format.RG_32F, "RG_32F"),
    (Format.R_32F, "R_32F"),
    (Format.DXT1, "DXT1"),
    (Format.DXT3, "DXT3"),
    (Format.DXT5, "DXT5"),
    (Format.DXT5_xGBR, "DXT5_xGBR"),
    (Format.DXT5_RxBG, "DXT5_RxBG"),
    (Format.DXT5_RBxG, "DXT5_RBxG"),
    (Format.DXT5_xRBG, "DXT5_xRBG"),
    (Format.DXT5_RGxB, "DXT5_RGxB"),
    (Format.DXT5_xGxR, "DXT5_xGxR"),
    (Format.ATI1N, "ATI1N"),
    (Format.ATI2N, "ATI2N"),
    (Format.ATI2N_XY, "ATI2N_XY"),
    (Format.ATI2N_DXT5, "ATI2N_DXT5"),
    (Format.BC1, "BC1"),
    (Format.BC2, "BC2"),
    (Format.BC3, "BC3"),
    (Format.BC4, "BC4"),
    (Format.BC5, "BC5"),
    (Format.BC6H, "BC6H"),
    (Format.BC7, "BC7"),
    (Format.ATC_RGB, "ATC_RGB"),
    (Format.ATC_RGBA_EXPLICIT, "ATC_RGBA_Explicit"),
    (Format.ATC_RGBA_INTERPOLATED, "ATC_RGBA_Interpolated"),
    (Format.ETC_RGB, "ETC_RGB"),
)


def format_from_fourcc(fourcc):
    """Format named by a FourCC code, or ``Format.UNKNOWN``."""
    return next((fmt for code, fmt in _FOURCC_FORMATS if code == fourcc), Format.UNKNOWN)


def fourcc_from_format(fmt):
    """First FourCC code that names the format, or 0 if it has none."""
    return next((code for code, known in _FOURCC_FORMATS if known == fmt), 0)


def is_dxt5_swizzled(fmt):
    """True for the DXT5 variants with swizzled channels."""
    return fmt in _DXT5_SWIZZLED


def parse_format(name):
    """Format whose description matches ``name`` ignoring case, or ``Format.UNKNOWN``."""
    if name is None:
        return Format.UNKNOWN
    wanted = name.upper()
    return next(
        (fmt for fmt, description in _DESCRIPTIONS if description.upper() == wanted),
        Format.UNKNOWN,
    )


def format_description(fmt):
    """Short name of a format; ``"Unknown"`` for formats without one."""
    return next(
        (description for known, description in _DESCRIPTIONS if known == fmt),
        _DESCRIPTIONS[0][1],
    )


class D3DResourceDimension(enum.IntEnum):
    UNKNOWN = 0
    BUFFER = 1
    TEXTURE1D = 2
    TEXTURE2D = 3
    TEXTURE3D = 4


class DxgiFormat(enum.IntEnum):
    """DXGI format numbers used in the DX10 header extension."""

    UNKNOWN = 0
    R32G32B32A32_TYPELESS = 1
    R32G32B32A32_FLOAT = 2
    R32G32B32A32_UINT = 3
    R32G32B32A32_SINT = 4
    R32G32B32_TYPELESS = 5
    R32G32B32_FLOAT = 6
    R32G32B32_UINT = 7
    R32G32B32_SINT = 8
    R16G16B16A16_TYPELESS = 9
    R16G16B16A16_FLOAT = 10
    R16G16B16A16_UNORM = 11
    R16G16B16A16_UINT = 12
    R16G16B16A16_SNORM = 13
    R16G16B16A16_SINT = 14
    R32G32_TYPELESS = 15
    R32G32_FLOAT = 16
    R32G32_UINT = 17
    R32G32_SINT = 18
    R32G8X24_TYPELESS = 19
    D32_FLOAT_S8X24_UINT = 20
    R32_FLOAT_X8X24_TYPELESS = 21
    X32_TYPELESS_G8X24_UINT = 22
    R10G10B10A2_TYPELESS = 23
    R10G10B10A2_UNORM = 24
    R10G10B10A2_UINT = 25
    R11G11B10_FLOAT = 26
    R8G8B8A8_TYPELESS = 27
    R8G8B8A8_UNORM = 28
    R8G8B8A8_UNORM_SRGB = 29
    R8G8B8A8_UINT = 30
    R8G8B8A8_SNORM = 31
    R8G8B8A8_SINT = 32
    R16G16_TYPELESS = 33
    R16G16_FLOAT = 34
    R16G16_UNORM = 35
    R16G16_UINT = 36
    R16G16_SNORM = 37
    R16G16_SINT = 38
    R32_TYPELESS = 39
    D32_FLOAT = 40
    R32_FLOAT = 41
    R32_UINT = 42
    R32_SINT = 43
    R24G8_TYPELESS = 44
    D24_UNORM_S8_UINT = 45
    R24_UNORM_X8_TYPELESS = 46
    X24_TYPELESS_G8_UINT = 47
    R8G8_TYPELESS = 48
    R8G8_UNORM = 49
    R8G8_UINT = 50
    R8G8_SNORM = 51
    R8G8_SINT = 52
    R16_TYPELESS = 53
    R16_FLOAT = 54
    D16_UNORM = 55
    R16_UNORM = 56
    R16_UINT = 57
    R16_SNORM = 58
    R16_SINT = 59
    R8_TYPELESS = 60
    R8_UNORM = 61
    R8_UINT = 62
    R8_SNORM = 63
    R8_SINT = 64
    A8_UNORM = 65
    R1_UNORM = 66
    R9G9B9E5_SHAREDEXP = 67
    R8G8_B8G8_UNORM = 68
    G8R8_G8B8_UNORM = 69
    BC1_TYPELESS = 70
    BC1_UNORM = 71
    BC1_UNORM_SRGB = 72
    BC2_TYPELESS = 73
    BC2_UNORM = 74
    BC2_UNORM_SRGB = 75
    BC3_TYPELESS = 76
    BC3_UNORM = 77
    BC3_UNORM_SRGB = 78
    BC4_TYPELESS = 79
    BC4_UNORM = 80
    BC4_SNORM = 81
    BC5_TYPELESS = 82
    BC5_UNORM = 83
    BC5_SNORM = 84
    B5G6R5_UNORM = 85
    B5G5R5A1_UNORM = 86
    B8G8R8A8_UNORM = 87
    B8G8R8X8_UNORM = 88
    R10G10B10_XR_BIAS_A2_UNORM = 89
    B8G8R8A8_TYPELESS = 90
    B8G8R8A8_UNORM_SRGB = 91
    B8G8R8X8_TYPELESS = 92
    B8G8R8X8_UNORM_SRGB = 93
    BC6H_TYPELESS = 94
    BC6H_UF16 = 95
    BC6H_SF16 = 96
    BC7_TYPELESS = 97
    BC7_UNORM = 98
    BC7_UNORM_SRGB = 99
    AYUV = 100
    Y410 = 101
    Y416 = 102
    NV12 = 103
    P010 = 104
    P016 = 105
    OPAQUE_420 = 106
    YUY2 = 107
    Y210 = 108
    Y216 = 109
    NV11 = 110
    AI44 = 111
    IA44 = 112
    P8 = 113
    A8P8 = 114
    B4G4R4A4_UNORM = 115
    FORCE_UINT = 0xFFFFFFFF


class D3DFormat(enum.IntEnum):
    """Direct3D 9 format numbers, some of which are FourCC codes."""

    UNKNOWN = 0

    R8G8B8 = 20
    A8R8G8B8 = 21
    X8R8G8B8 = 22
    R5G6B5 = 23
    X1R5G5B5 = 24
    A1R5G5B5 = 25
    A4R4G4B4 = 26
    R3G3B2 = 27
    A8 = 28
    A8R3G3B2 = 29
    X4R4G4B4 = 30
    A2B10G10R10 = 31
    A8B8G8R8 = 32
    X8B8G8R8 = 33
    G16R16 = 34
    A2R10G10B10 = 35
    A16B16G16R16 = 36

    A8P8 = 40
    P8 = 41

    L8 = 50
    A8L8 = 51
    A4L4 = 52

    V8U8 = 60
    L6V5U5 = 61
    X8L8V8U8 = 62
    Q8W8V8U8 = 63
    V16U16 = 64
    A2W10V10U10 = 67

    UYVY = make_fourcc("UYVY")
    R8G8_B8G8 = make_fourcc("RGBG")
    YUY2 = make_fourcc("YUY2")
    G8R8_G8B8 = make_fourcc("GRGB")
    DXT1 = make_fourcc("DXT1")
    DXT2 = make_fourcc("DXT2")
    DXT3 = make_fourcc("DXT3")
    DXT4 = make_fourcc("DXT4")
    DXT5 = make_fourcc("DXT5")

    D16_LOCKABLE = 70
    D32 = 71
    D15S1 = 73
    D24S8 = 75
    D24X8 = 77
    D24X4S4 = 79
    D16 = 80

    D32F_LOCKABLE = 82
    D24FS8 = 83

    L16 = 81

    VERTEXDATA = 100
    INDEX16 = 101
    INDEX32 = 102

    Q16W16V16U16 = 110

    MULTI2_ARGB8 = make_fourcc("MET1")

    R16F = 111
    G16R16F = 112
    A16B16G16R16F = 113

    R32F = 114
    G32R32F = 115
    A32B32G32R32F = 116

    CxV8U8 = 117