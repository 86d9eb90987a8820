import pytest

from unlif.core.config import set_output_dir, set_verbose
from unlif.core.constants import ENV_OUTPUT_DIR, MARKER
from unlif.core.types import ImageGeometry


def encode_block_id(digits):
    '''Block identifier as stored after a marker: a padding byte before
    each digit character.'''
    if isinstance(digits, str):
        digits = digits.encode('latin-1')
    return b''.join(b'\x00' + digits[i:i + 1] for i in range(len(digits)))


def pattern_bytes(n, seed=0):
    '''Deterministic filler that never contains the marker's first byte.'''
    base = bytes((i + seed) % 77 for i in range(77))
    return (base * (n // 77 + 1))[:n]


@pytest.fixture(autouse=True)
def reset_config(monkeypatch):
    '''Keep the global runtime configuration from leaking between tests.'''
    monkeypatch.delenv(ENV_OUTPUT_DIR, raising=False)
    set_verbose(False)
    set_output_dir(None)
    yield
    set_verbose(False)
    set_output_dir(None)


@pytest.fixture
def geometry():
    '''A 4x3 16-bit geometry: 24 bytes per image.'''
    return ImageGeometry(width=4, height=3)


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    '''Run the test inside an empty temporary working directory.'''
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def make_block():
    '''Build marker bytes followed by a block identifier.'''
    def _make_block(block_id='0007'):
        return MARKER + encode_block_id(block_id)
    return _make_block


@pytest.fixture
def filler():
    return pattern_bytes


@pytest.fixture
def single_block_lif(tmp_path, geometry, make_block):
    '''A LIF-like file holding one block "0007" with two full images.

    The marker ends exactly 2 * image_size bytes into the file so the
    first block's span covers two records.

    Returns
    -------
    Tuple[pathlib.Path, bytes]
        path to the file and its contents
    '''
    size = geometry.image_size
    block = make_block('0007')
    data = (
        b'\xff' * (2 * size - len(block)) + block + b'\x00\x00' +
        pattern_bytes(2 * size)
    )
    path = tmp_path / 'single.lif'
    path.write_bytes(data)
    return path, data
