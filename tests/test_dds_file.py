import io
import struct

import pytest

from hellkit.dds_file import (
    DDSD_CAPS,
    DDSD_HEIGHT,
    DDSD_LINEARSIZE,
    DDSD_MIPMAPCOUNT,
    DDSD_PIXELFORMAT,
    DDSD_WIDTH,
    DdsError,
    Texture,
    load_dds,
    read_dds,
    save_dds,
    write_dds,
)
from hellkit.dds_formats import DxgiFormat, Format, make_fourcc


def _encode(texture):
    buffer = io.BytesIO()
    write_dds(buffer, texture)
    return buffer.getvalue()


def _round_trip(texture):
    return read_dds(io.BytesIO(_encode(texture)))


def test_bc1_file_layout():
    texture = Texture(width=4, height=4, format=Format.BC1, data=bytes(range(8)))
    raw = _encode(texture)
    assert raw[:4] == b"DDS "
    assert struct.unpack_from("<I", raw, 4)[0] == 124
    assert raw[84:88] == b"DXT1"
    assert len(raw) == 4 + 124 + 8
    assert raw[-8:] == bytes(range(8))


def test_header_flags_and_dimensions():
    texture = Texture(width=8, height=4, format=Format.BC3, data=bytes(32))
    raw = _encode(texture)
    flags, height, width = struct.unpack_from("<III", raw, 8)
    expected = DDSD_CAPS | DDSD_WIDTH | DDSD_HEIGHT | DDSD_PIXELFORMAT | DDSD_MIPMAPCOUNT | DDSD_LINEARSIZE
    assert flags == expected
    assert (width, height) == (8, 4)


@pytest.mark.parametrize(
    "written, read_back, size",
    [
        (Format.BC1, Format.DXT1, 32),
        (Format.BC2, Format.DXT3, 64),
        (Format.BC3, Format.DXT5, 64),
        (Format.BC4, Format.ATI1N, 32),
        (Format.BC5, Format.ATI2N_XY, 64),
    ],
)
def test_block_compressed_round_trip(written, read_back, size):
    data = bytes(i % 256 for i in range(size))
    result = _round_trip(Texture(width=8, height=8, format=written, data=data))
    assert result.format == read_back
    assert result.data == data
    assert (result.width, result.height) == (8, 8)


def test_swizzled_dxt5_keeps_its_variant():
    data = bytes(range(16))
    texture = Texture(width=4, height=4, format=Format.DXT5_xGBR, data=data)
    raw = _encode(texture)
    assert raw[84:88] == b"DXT5"
    assert raw[88:92] == b"xGBR"
    result = read_dds(io.BytesIO(raw))
    assert result.format == Format.DXT5_xGBR
    assert result.data == data


def test_bc7_uses_dx10_extension_and_cannot_be_read_back():
    data = bytes(16)
    raw = _encode(Texture(width=4, height=4, format=Format.BC7, data=data))
    assert raw[84:88] == b"DX10"
    assert struct.unpack_from("<I", raw, 128)[0] == DxgiFormat.BC7_UNORM
    assert len(raw) == 4 + 124 + 20 + len(data)
    with pytest.raises(DdsError):
        read_dds(io.BytesIO(raw))


def test_argb_reads_back_as_bgra():
    data = bytes(range(16))
    result = _round_trip(Texture(width=2, height=2, format=Format.ARGB_8888, data=data))
    assert result.format == Format.BGRA_8888
    assert result.data == data


def test_rgb_reads_back_as_bgr():
    data = bytes(range(12))
    result = _round_trip(Texture(width=2, height=2, format=Format.RGB_888, data=data))
    assert result.format == Format.BGR_888
    assert result.data == data


def test_rgba_masks_are_not_recognised_on_read():
    result = _round_trip(Texture(width=2, height=2, format=Format.RGBA_8888, data=bytes(16)))
    assert result.format == Format.UNKNOWN
    assert result.data == b""


def test_pitch_sets_uncompressed_data_size():
    data = bytes(range(24))
    texture = Texture(width=2, height=2, format=Format.ARGB_8888, data=data, pitch=12)
    result = _round_trip(texture)
    assert result.pitch == 12
    assert result.data == data


def test_float_format_written_with_d3d_code_is_unsupported_on_read():
    raw = _encode(Texture(width=1, height=1, format=Format.R_16F, data=bytes(2)))
    assert raw[84:88] != b"\x00\x00\x00\x00"
    with pytest.raises(DdsError):
        read_dds(io.BytesIO(raw))


def test_unknown_format_cannot_be_saved():
    with pytest.raises(DdsError):
        _encode(Texture(width=1, height=1, format=Format.UNKNOWN, data=b""))


def test_rejects_non_dds():
    with pytest.raises(DdsError):
        read_dds(io.BytesIO(b"PNG!" + bytes(124)))


def test_rejects_truncated_header():
    with pytest.raises(DdsError):
        read_dds(io.BytesIO(b"DDS " + bytes(40)))


def test_rejects_truncated_pixel_data():
    raw = _encode(Texture(width=8, height=8, format=Format.BC1, data=bytes(32)))
    with pytest.raises(DdsError):
        read_dds(io.BytesIO(raw[:-4]))


def test_save_and_load_file(tmp_path):
    path = tmp_path / "texture.dds"
    data = bytes(range(64))
    save_dds(path, Texture(width=8, height=8, format=Format.BC3, data=data))
    result = load_dds(path)
    assert result.format == Format.DXT5
    assert result.data == data
    assert path.read_bytes()[:4] == make_fourcc("DDS ").to_bytes(4, "little")


def test_load_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_dds(tmp_path / "missing.dds")