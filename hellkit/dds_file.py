"""Reading and writing DirectDraw Surface (DDS) texture files."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

from hellkit.dds_formats import (
    DDS_MAGIC,
    FOURCC_ATI1N,
    FOURCC_ATI2N_XY,
    FOURCC_DX10,
    FOURCC_DXT1,
    FOURCC_DXT3,
    FOURCC_DXT5,
    D3DFormat,
    D3DResourceDimension,
    DxgiFormat,
    Format,
    format_from_fourcc,
    fourcc_from_format,
    is_dxt5_swizzled,
)

DDSD_CAPS = 0x00000001
DDSD_HEIGHT = 0x00000002
DDSD_WIDTH = 0x00000004
DDSD_PITCH = 0x00000008
DDSD_PIXELFORMAT = 0x00001000
DDSD_MIPMAPCOUNT = 0x00020000
DDSD_LINEARSIZE = 0x00080000
DDSD_DEPTH = 0x00800000

DDSCAPS_COMPLEX = 0x00000008
DDSCAPS_TEXTURE = 0x00001000
DDSCAPS_MIPMAP = 0x00400000

DDPF_ALPHAPIXELS = 0x00000001
DDPF_ALPHA = 0x00000002
DDPF_FOURCC = 0x00000004
DDPF_RGB = 0x00000040
DDPF_LUMINANCE = 0x00020000

_HEADER = struct.Struct("<31I")
_DX10_HEADER = struct.Struct("<5I")
HEADER_SIZE = _HEADER.size
PIXEL_FORMAT_SIZE = 32

_STANDARD_FLAGS = DDSD_CAPS | DDSD_WIDTH | DDSD_HEIGHT | DDSD_PIXELFORMAT | DDSD_MIPMAPCOUNT | DDSD_LINEARSIZE
_STANDARD_CAPS = DDSCAPS_TEXTURE | DDSCAPS_COMPLEX | DDSCAPS_MIPMAP

_LEGACY_BC_FOURCC = {
    Format.BC1: FOURCC_DXT1,
    Format.BC2: FOURCC_DXT3,
    Format.BC3: FOURCC_DXT5,
    Format.BC4: FOURCC_ATI1N,
    Format.BC5: FOURCC_ATI2N_XY,
}

_DX10_FORMATS = {
    Format.BC7: DxgiFormat.BC7_UNORM,
    Format.BC6H: DxgiFormat.BC6H_UF16,
    Format.BC6H_SF: DxgiFormat.BC6H_SF16,
}

# format: (bits per pixel, pixel-format flags, (r, g, b, a) masks)
_MASKED_LAYOUTS = {
    Format.RGBA_8888: (32, DDPF_ALPHAPIXELS | DDPF_RGB, (0xFF000000, 0x00FF0000, 0x0000FF00, 0x000000FF)),
    Format.ARGB_8888: (32, DDPF_ALPHAPIXELS | DDPF_RGB, (0x00FF0000, 0x0000FF00, 0x000000FF, 0xFF000000)),
    Format.RGB_888: (24, DDPF_RGB, (0x00FF0000, 0x0000FF00, 0x000000FF, 0)),
    Format.RG_8: (16, DDPF_ALPHAPIXELS | DDPF_LUMINANCE, (0x0000FF00, 0x000000FF, 0, 0xFF000000)),
    Format.R_8: (8, DDPF_LUMINANCE, (0x000000FF, 0, 0, 0)),
    Format.ARGB_2101010: (32, DDPF_ALPHAPIXELS | DDPF_RGB, (0x000003FF, 0x000FFC00, 0x3FF00000, 0xC0000000)),
}

# format: (D3D format code stored as FourCC, pixel-format flags)
_D3D_LAYOUTS = {
    Format.ARGB_16: (D3DFormat.A16B16G16R16, DDPF_FOURCC | DDPF_ALPHAPIXELS),
    Format.RG_16: (D3DFormat.G16R16, DDPF_FOURCC),
    Format.R_16: (D3DFormat.L16, DDPF_FOURCC),
    Format.ARGB_16F: (D3DFormat.A16B16G16R16F, DDPF_FOURCC | DDPF_ALPHAPIXELS),
    Format.RG_16F: (D3DFormat.G16R16F, DDPF_FOURCC),
    Format.R_16F: (D3DFormat.R16F, DDPF_FOURCC),
    Format.ARGB_32F: (D3DFormat.A32B32G32R32F, DDPF_FOURCC | DDPF_ALPHAPIXELS),
    Format.RG_32F: (D3DFormat.G32R32F, DDPF_FOURCC),
    Format.R_32F: (D3DFormat.R32F, DDPF_FOURCC),
}

_BYTES_PER_PIXEL = {
    Format.ARGB_8888: 4,
    Format.BGRA_8888: 4,
    Format.RGBA_8888: 4,
    Format.RGB_888: 3,
    Format.BGR_888: 3,
    Format.RG_8: 2,
    Format.R_8: 1,
    Format.ARGB_2101010: 4,
    Format.ARGB_16: 8,
    Format.RG_16: 4,
    Format.R_16: 2,
    Format.ARGB_16F: 8,
    Format.RG_16F: 4,
    Format.R_16F: 2,
    Format.ARGB_32F: 16,
    Format.RG_32F: 8,
    Format.R_32F: 4,
}

_BLOCK_BYTES = {
    Format.DXT1: 8,
    Format.BC1: 8,
    Format.ATI1N: 8,
    Format.BC4: 8,
    Format.ATC_RGB: 8,
    Format.ETC_RGB: 8,
    Format.DXT3: 16,
    Format.DXT5: 16,
    Format.DXT5_xGBR: 16,
    Format.DXT5_RxBG: 16,
    Format.DXT5_RBxG: 16,
    Format.DXT5_xRBG: 16,
    Format.DXT5_RGxB: 16,
    Format.DXT5_xGxR: 16,
    Format.ATI2N: 16,
    Format.ATI2N_XY: 16,
    Format.ATI2N_DXT5: 16,
    Format.BC2: 16,
    Format.BC3: 16,
    Format.BC5: 16,
    Format.BC6H: 16,
    Format.BC6H_SF: 16,
    Format.BC7: 16,
    Format.ATC_RGBA_EXPLICIT: 16,
    Format.ATC_RGBA_INTERPOLATED: 16,
}

_RGBA_MASKS = (0x000000FF, 0x0000FF00, 0x00FF0000, 0xFF000000)
_BGRA_MASKS = (0x00FF0000, 0x0000FF00, 0x000000FF, 0xFF000000)


class DdsError(ValueError):
    """Raised when a DDS file cannot be read or a texture cannot be saved."""


@dataclass
class PixelFormat:
    """The pixel-format block of a DDS header."""

    size: int = PIXEL_FORMAT_SIZE
    flags: int = 0
    fourcc: int = 0
    rgb_bit_count: int = 0
    r_mask: int = 0
    g_mask: int = 0
    b_mask: int = 0
    a_mask: int = 0


@dataclass
class SurfaceDescription:
    """The 124-byte surface header that follows the DDS magic number."""

    size: int = HEADER_SIZE
    flags: int = 0
    height: int = 0
    width: int = 0
    pitch_or_linear_size: int = 0
    depth: int = 0
    mip_map_count: int = 0
    alpha_bit_depth: int = 0
    reserved: int = 0
    surface: int = 0
    color_keys: tuple = (0,) * 8
    pixel_format: PixelFormat = field(default_factory=PixelFormat)
    caps: int = 0
    caps2: int = 0
    caps3: int = 0
    caps4: int = 0
    texture_stage: int = 0


@dataclass
class Texture:
    """A single-level texture: dimensions, format, row pitch and raw pixel data."""

    width: int = 0
    height: int = 0
    format: Format = Format.UNKNOWN
    data: bytes = b""
    pitch: int = 0


def _pack(desc):
    pf = desc.pixel_format
    values = (
        desc.size,
        desc.flags,
        desc.height,
        desc.width,
        desc.pitch_or_linear_size,
        desc.depth,
        desc.mip_map_count,
        desc.alpha_bit_depth,
        desc.reserved,
        desc.surface,
        *desc.color_keys,
        pf.size,
        pf.flags,
        pf.fourcc,
        pf.rgb_bit_count,
        pf.r_mask,
        pf.g_mask,
        pf.b_mask,
        pf.a_mask,
        desc.caps,
        desc.caps2,
        desc.caps3,
        desc.caps4,
        desc.texture_stage,
    )
    return _HEADER.pack(*(int(v) & 0xFFFFFFFF for v in values))


def _unpack(raw):
    v = _HEADER.unpack(raw)
    return SurfaceDescription(
        size=v[0],
        flags=v[1],
        height=v[2],
        width=v[3],
        pitch_or_linear_size=v[4],
        depth=v[5],
        mip_map_count=v[6],
        alpha_bit_depth=v[7],
        reserved=v[8],
        surface=v[9],
        color_keys=tuple(v[10:18]),
        pixel_format=PixelFormat(*v[18:26]),
        caps=v[26],
        caps2=v[27],
        caps3=v[28],
        caps4=v[29],
        texture_stage=v[30],
    )


def _detect_format(pf):
    if pf.rgb_bit_count == 32:
        masks = (pf.r_mask, pf.g_mask, pf.b_mask, pf.a_mask)
        if masks == _RGBA_MASKS:
            return Format.RGBA_8888
        if masks == _BGRA_MASKS:
            return Format.BGRA_8888
        return Format.UNKNOWN
    if pf.rgb_bit_count == 24:
        return Format.RGB_888 if pf.r_mask == 0xFF else Format.BGR_888
    # Swizzled DXT5 files keep their real FourCC in the bit-count field.
    fmt = format_from_fourcc(pf.rgb_bit_count)
    if fmt is Format.UNKNOWN:
        fmt = format_from_fourcc(pf.fourcc)
    if fmt is Format.UNKNOWN:
        raise DdsError("unsupported source format")
    return fmt


def _buffer_size(fmt, width, height, pitch):
    block = _BLOCK_BYTES.get(fmt)
    if block is not None:
        return ((width + 3) // 4) * ((height + 3) // 4) * block
    bpp = _BYTES_PER_PIXEL.get(fmt)
    if bpp is None:
        return 0
    if pitch:
        return pitch * height
    return width * height * bpp


def _read_exact(stream, size, what):
    data = stream.read(size)
    if len(data) != size:
        raise DdsError(f"truncated DDS file: incomplete {what}")
    return data


def read_dds(stream):
    """Read a texture from a binary stream holding a DDS file."""
    magic = stream.read(4)
    if len(magic) != 4 or int.from_bytes(magic, "little") != DDS_MAGIC:
        raise DdsError("source file is not a valid DDS")
    desc = _unpack(_read_exact(stream, HEADER_SIZE, "header"))
    fmt = _detect_format(desc.pixel_format)
    pitch = desc.pitch_or_linear_size
    size = _buffer_size(fmt, desc.width, desc.height, pitch)
    data = _read_exact(stream, size, "pixel data") if size else b""
    return Texture(width=desc.width, height=desc.height, format=fmt, data=data, pitch=pitch)


def _encode(texture):
    fmt = texture.format
    data = bytes(texture.data)
    pf = PixelFormat()
    desc = SurfaceDescription(
        flags=_STANDARD_FLAGS,
        width=texture.width,
        height=texture.height,
        mip_map_count=1,
        pixel_format=pf,
        caps=_STANDARD_CAPS,
    )
    extension = b""

    if fmt in _LEGACY_BC_FOURCC:
        desc.pitch_or_linear_size = len(data)
        pf.flags = DDPF_FOURCC | DDPF_ALPHAPIXELS
        pf.fourcc = _LEGACY_BC_FOURCC[fmt]
    elif fourcc := fourcc_from_format(fmt):
        desc.pitch_or_linear_size = len(data)
        pf.flags = DDPF_FOURCC
        pf.fourcc = fourcc
        if is_dxt5_swizzled(fmt):
            pf.rgb_bit_count = fourcc
            pf.fourcc = FOURCC_DXT5
    elif fmt in _DX10_FORMATS:
        pf.flags = DDPF_FOURCC
        pf.fourcc = FOURCC_DX10
        desc.pitch_or_linear_size = texture.width * 4
        extension = _DX10_HEADER.pack(
            _DX10_FORMATS[fmt], D3DResourceDimension.TEXTURE2D, 0, 1, 0
        )
    elif fmt in _MASKED_LAYOUTS:
        bit_count, flags, (r, g, b, a) = _MASKED_LAYOUTS[fmt]
        pf.rgb_bit_count = bit_count
        pf.flags = flags
        pf.r_mask, pf.g_mask, pf.b_mask, pf.a_mask = r, g, b, a
        desc.pitch_or_linear_size = texture.pitch
    elif fmt in _D3D_LAYOUTS:
        code, flags = _D3D_LAYOUTS[fmt]
        desc.pitch_or_linear_size = len(data)
        pf.flags = flags
        pf.fourcc = code
    else:
        raise DdsError(f"cannot save textures in format {fmt.name}")

    return DDS_MAGIC.to_bytes(4, "little") + _pack(desc) + extension + data


def write_dds(stream, texture):
    """Write a texture as a DDS file to a binary stream."""
    stream.write(_encode(texture))


def load_dds(path):
    """Load a texture from a DDS file on disk."""
    with open(path, "rb") as handle:
        return read_dds(handle)


def save_dds(path, texture):
    """Save a texture to a DDS file on disk."""
    payload = _encode(texture)
    with open(path, "wb") as handle:
        handle.write(payload)