import numpy as np
import pytest

from unlif.core.exceptions import LIFEndOfStreamError, LIFParseError
from unlif.core.types import ImageGeometry
from unlif.processing.export import export_to_tiff
from unlif.processing.extract import extract_lif
from unlif.processing.image import read_pgm, read_pgm_header


@pytest.fixture
def extracted(tmp_path, geometry, single_block_lif):
    '''Paths of the images extracted from the single-block file.'''
    path, data = single_block_lif
    images = []
    with pytest.raises(LIFEndOfStreamError):
        for image in extract_lif(path, geometry, tmp_path):
            images.append(image)
    return images, data


def test_header_fields():
    assert read_pgm_header(b'P5\n4 3\n4095\nxxxx') == (4, 3, 4095, 12)


def test_header_with_comment():
    assert read_pgm_header(b'P5\n# from unlif\n2 1\n255\nab') == (2, 1, 255, 24)


def test_read_little_endian(extracted, geometry):
    images, data = extracted
    offset = images[0].offset
    expected = np.frombuffer(data[offset:offset + 24], dtype='<u2').reshape(geometry.shape)
    array = read_pgm(images[0].path)
    assert array.shape == (3, 4)
    assert array.dtype == np.uint16
    np.testing.assert_array_equal(array, expected)


def test_read_big_endian(extracted):
    images, data = extracted
    offset = images[1].offset
    expected = np.frombuffer(data[offset:offset + 24], dtype='>u2').reshape(3, 4)
    np.testing.assert_array_equal(read_pgm(images[1].path, byteorder='>'), expected)


def test_read_8_bit(tmp_path):
    path = tmp_path / 'small.pgm'
    path.write_bytes(b'P5\n3 2\n255\n' + bytes([1, 2, 3, 4, 5, 6]))
    array = read_pgm(path)
    assert array.dtype == np.uint8
    np.testing.assert_array_equal(array, [[1, 2, 3], [4, 5, 6]])


def test_wrong_magic(tmp_path):
    path = tmp_path / 'ascii.pgm'
    path.write_bytes(b'P2\n1 1\n255\n0\n')
    with pytest.raises(LIFParseError):
        read_pgm(path)


def test_non_numeric_field(tmp_path):
    path = tmp_path / 'bad.pgm'
    path.write_bytes(b'P5\nfour 3\n4095\n')
    with pytest.raises(LIFParseError, match='width'):
        read_pgm(path)


def test_truncated_samples(tmp_path):
    path = tmp_path / 'short.pgm'
    path.write_bytes(b'P5\n4 3\n4095\n' + b'\x00' * 10)
    with pytest.raises(LIFParseError, match='Truncated'):
        read_pgm(path)


def test_invalid_byteorder(tmp_path):
    with pytest.raises(ValueError):
        read_pgm(tmp_path / 'any.pgm', byteorder='=')


def test_geometry_validation():
    with pytest.raises(ValueError):
        ImageGeometry(width=0)
    with pytest.raises(ValueError):
        ImageGeometry(bytes_per_pixel=3)
    with pytest.raises(ValueError):
        ImageGeometry(bytes_per_pixel=1, max_value=4095)


def test_export_to_tiff(extracted):
    tifffile = pytest.importorskip('tifffile')
    images, _ = extracted
    tiff_path = export_to_tiff(images[0].path)
    assert tiff_path == images[0].path.with_suffix('.tiff')
    np.testing.assert_array_equal(tifffile.imread(tiff_path), read_pgm(images[0].path))


def test_export_to_tiff_fixes_suffix(extracted, tmp_path):
    pytest.importorskip('tifffile')
    images, _ = extracted
    tiff_path = export_to_tiff(images[0].path, tmp_path / 'frame.png')
    assert tiff_path == tmp_path / 'frame.tiff'
    assert tiff_path.exists()


def test_two_byte_geometry_needs_wide_max_value():
    with pytest.raises(ValueError, match='1-byte samples'):
        ImageGeometry(width=4, height=3, bytes_per_pixel=2, max_value=255)
    assert ImageGeometry(width=4, height=3, bytes_per_pixel=2, max_value=256).image_size == 24


def test_header_round_trips_sample_width(tmp_path):
    geometry = ImageGeometry(width=4, height=3, bytes_per_pixel=1, max_value=255)
    path = tmp_path / 'narrow.pgm'
    path.write_bytes(geometry.pgm_header() + bytes(range(12)))
    array = read_pgm(path)
    assert array.dtype == np.uint8
    assert array.shape == geometry.shape
