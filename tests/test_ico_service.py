from __future__ import annotations

import struct

import pytest

from imgico.errors import EmptyIconError, EncodingError, InvalidSizeError
from imgico.models.image_model import RenderedImage
from imgico.services.ico_service import IcoService, encode_dimension


@pytest.fixture
def service() -> IcoService:
    return IcoService()


def fake_images(sizes, base=b"png"):
    # содержимое не проверяется кодировщиком, длины намеренно разные
    return [RenderedImage(data=base * (i + 1), size=size) for i, size in enumerate(sizes)]


def test_header_fields(service):
    data = service.encode(fake_images([16, 32, 48]))
    assert struct.unpack_from("<HHH", data, 0) == (0, 1, 3)


def test_output_length(service):
    images = fake_images([16, 32, 48, 64, 128, 256])
    data = service.encode(images)
    assert len(data) == 6 + 16 * len(images) + sum(len(img.data) for img in images)


def test_directory_entry_layout(service):
    image = RenderedImage(data=b"\x89PNG-data", size=48)
    data = service.encode([image])
    entry = struct.unpack_from("<BBBBHHII", data, 6)
    assert entry == (48, 48, 0, 0, 1, 32, len(image.data), 22)
    assert data[22:] == image.data


@pytest.mark.parametrize("size, expected", [(1, 1), (16, 16), (255, 255), (256, 0)])
def test_dimension_encoding(service, size, expected):
    data = service.encode([RenderedImage(data=b"x", size=size)])
    assert data[6] == expected
    assert data[7] == expected
    assert encode_dimension(size) == expected


def test_offsets_chain(service):
    images = fake_images([16, 32, 48, 64])
    data = service.encode(images)
    expected_offset = 6 + 16 * len(images)
    for i, image in enumerate(images):
        size_field, offset_field = struct.unpack_from("<II", data, 6 + 16 * i + 8)
        assert size_field == len(image.data)
        assert offset_field == expected_offset
        assert data[offset_field:offset_field + size_field] == image.data
        expected_offset += len(image.data)


def test_deterministic(service):
    images = fake_images([16, 256])
    assert service.encode(images) == service.encode(images)


def test_empty_list_rejected(service):
    with pytest.raises(EmptyIconError):
        service.encode([])


@pytest.mark.parametrize("size", [0, 257, -5])
def test_rendered_image_rejects_invalid_size(size):
    with pytest.raises(InvalidSizeError) as excinfo:
        RenderedImage(data=b"x", size=size)
    assert excinfo.value.size == size
    assert str(size) in str(excinfo.value)


def test_encode_rejects_foreign_objects_with_invalid_size(service):
    class Loose:
        def __init__(self, size):
            self.data = b"x"
            self.size = size

    with pytest.raises(InvalidSizeError):
        service.encode([Loose(16), Loose(300)])


def test_decode_directory_matches_encode(service):
    images = fake_images([16, 256])
    entries = service.decode_directory(service.encode(images))
    assert [entry.size for entry in entries] == [16, 256]
    assert [entry.width for entry in entries] == [16, 0]
    assert all(entry.planes == 1 and entry.bit_count == 32 for entry in entries)
    assert entries[1].data_offset == entries[0].data_offset + entries[0].data_size


def test_decode_directory_rejects_garbage(service):
    with pytest.raises(EncodingError):
        service.decode_directory(b"\x00\x00")
    with pytest.raises(EncodingError):
        service.decode_directory(struct.pack("<HHH", 0, 2, 1))
    with pytest.raises(EncodingError):
        # заголовок обещает две записи, но каталог обрезан
        service.decode_directory(struct.pack("<HHH", 0, 1, 2) + b"\x00" * 16)
