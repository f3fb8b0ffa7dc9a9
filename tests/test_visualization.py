import struct

import pytest

from crashnet.visualization import plot_degree_histogram

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def _png_size(path):
    data = path.read_bytes()
    width, height = struct.unpack(">II", data[16:24])
    return width, height


def test_empty_map_writes_nothing(tmp_path, capsys):
    target = tmp_path / "hist.png"
    result = plot_degree_histogram({}, target)
    assert result is None
    assert not target.exists()
    assert capsys.readouterr().out == ""


def test_writes_png_file(tmp_path):
    target = tmp_path / "hist.png"
    plot_degree_histogram({0: 1, 1: 2, 2: 1}, target)
    assert target.read_bytes()[:8] == PNG_SIGNATURE


def test_image_dimensions(tmp_path):
    target = tmp_path / "hist.png"
    plot_degree_histogram({0: 3, 1: 3}, str(target))
    assert _png_size(target) == (800, 600)


def test_reports_saved_path(tmp_path, capsys):
    target = tmp_path / "degrees.png"
    plot_degree_histogram({5: 1}, str(target))
    out = capsys.readouterr().out
    assert out.strip() == f"Histogram saved to {target}"


def test_missing_directory_raises(tmp_path):
    target = tmp_path / "no_such_dir" / "hist.png"
    with pytest.raises(FileNotFoundError):
        plot_degree_histogram({0: 1}, target)