import pytest

from unlif.__main__ import main
from unlif.core.config import is_verbose


SMALL = ['--width', '4', '--height', '3']


def test_missing_argument_prints_usage(workdir, capsys):
    assert main([]) == 1
    out = capsys.readouterr().out
    assert 'Unlif version 1.0' in out
    assert 'Please specify lif filename' in out


def test_help(capsys):
    assert main(['help']) == 0
    assert 'USAGE' in capsys.readouterr().out


def test_version(capsys):
    assert main(['--version']) == 0
    assert 'v1.0' in capsys.readouterr().out


def test_missing_input(workdir, capsys):
    assert main(['missing.lif']) == 2
    assert 'Unable to open input file' in capsys.readouterr().err


@pytest.mark.parametrize('args', [
    ['--width', 'wide', 'file.lif'],
    ['--height', '0', 'file.lif'],
    ['--width'],
    ['--bogus', 'file.lif'],
])
def test_invalid_options(workdir, capsys, args):
    assert main(args) == 1
    captured = capsys.readouterr()
    assert 'Error' in captured.err
    assert 'Please specify lif filename' in captured.out


def test_full_scan_exits_with_read_status(workdir, single_block_lif, capsys):
    path, data = single_block_lif
    assert main(SMALL + [str(path)]) == 5

    captured = capsys.readouterr()
    assert 'Extracted "MemBlock_0007_001.pgm" from offset 50.' in captured.out
    assert 'Extracted "MemBlock_0007_002.pgm" from offset 74.' in captured.out
    assert f'at offset {len(data)}' in captured.err
    assert (workdir / 'MemBlock_0007_001.pgm').read_bytes() == b'P5\n4 3\n4095\n' + data[50:74]
    assert (workdir / 'MemBlock_0007_002.pgm').exists()


def test_no_markers(workdir, capsys):
    path = workdir / 'empty.lif'
    path.write_bytes(b'\x00' * 100)
    assert main([str(path)]) == 5
    assert 'Extracted' not in capsys.readouterr().out
    assert list(workdir.glob('*.pgm')) == []


def test_output_dir_option(workdir, single_block_lif):
    path, _ = single_block_lif
    out_dir = workdir / 'images' / 'run1'
    assert main(SMALL + ['--output-dir', str(out_dir), str(path)]) == 5
    assert sorted(p.name for p in out_dir.glob('*.pgm')) == [
        'MemBlock_0007_001.pgm',
        'MemBlock_0007_002.pgm',
    ]
    assert list(workdir.glob('*.pgm')) == []


def test_read_failure_in_copy(workdir, make_block, capsys):
    block = make_block('0001')
    path = workdir / 'short.lif'
    path.write_bytes(b'\xff' * (24 - len(block) + 24) + block + b'\x00' * 4)
    assert main(SMALL + [str(path)]) == 5
    assert 'Unexpected end of input file' in capsys.readouterr().err


def test_cannot_create_output(workdir, single_block_lif, capsys):
    path, _ = single_block_lif
    blocker = workdir / 'MemBlock_0007_001.pgm'
    blocker.mkdir()
    assert main(SMALL + [str(path)]) == 4
    assert 'Unable to open output file' in capsys.readouterr().err


def test_tiff_option(workdir, single_block_lif):
    pytest.importorskip('tifffile')
    path, _ = single_block_lif
    assert main(SMALL + ['--tiff', str(path)]) == 5
    assert (workdir / 'MemBlock_0007_001.tiff').exists()
    assert (workdir / 'MemBlock_0007_002.tiff').exists()


def test_verbose(workdir, single_block_lif, capsys):
    path, _ = single_block_lif
    assert main(SMALL + ['-v', str(path)]) == 5
    assert is_verbose()
    assert 'Geometry: 4x3, 24 bytes/image' in capsys.readouterr().err


def test_output_dir_is_a_file(workdir, single_block_lif, capsys):
    path, _ = single_block_lif
    not_a_dir = workdir / 'notadir'
    not_a_dir.write_bytes(b'')
    assert main(SMALL + ['--output-dir', str(not_a_dir), str(path)]) == 4
    assert 'Unable to create output directory' in capsys.readouterr().err
    assert not_a_dir.read_bytes() == b''


def test_reports_image_count(workdir, single_block_lif, capsys):
    path, _ = single_block_lif
    assert main(SMALL + [str(path)]) == 5
    assert 'Extracted 2 image(s)' in capsys.readouterr().out
