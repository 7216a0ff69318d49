import pytest

from solong.cli import main


def write_map(tmp_path, name, rows):
    path = tmp_path / name
    path.write_text("\n".join(rows) + "\n")
    return str(path)


@pytest.mark.parametrize("argv", [[], ["a.ber", "b.ber"]])
def test_wrong_argument_count(argv, capsys):
    assert main(argv) == 1
    assert capsys.readouterr().out == "Error\nwrong format, try: ./so_long filename\n"


def test_bad_extension(tmp_path, capsys):
    path = write_map(tmp_path, "map.txt", ["11111", "1PCE1", "11111"])
    assert main([path]) == 1
    assert capsys.readouterr().out == "Error\nInvalid File path or extension\n"


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.ber")]) == 1
    assert capsys.readouterr().out == "Error\nInvalid File path or extension\n"


def test_short_map(tmp_path, capsys):
    path = write_map(tmp_path, "short.ber", ["11111", "11111"])
    assert main([path]) == 1
    assert capsys.readouterr().out == "Error\nMap is too short\n"


def test_impossible_map(tmp_path, capsys):
    path = write_map(tmp_path, "stuck.ber", ["111111", "1P1CE1", "111111"])
    assert main([path]) == 1
    assert capsys.readouterr().out == "Error\nMap is Impossible\n"


def test_invalid_characters(tmp_path, capsys):
    path = write_map(tmp_path, "chars.ber", ["11111", "1PXE1", "11111"])
    assert main([path]) == 1
    assert capsys.readouterr().out == "Error\nInvalid characters, only 01EPC\n"


def test_argv_none_reads_sys_argv(monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["so_long"])
    assert main() == 1
    assert capsys.readouterr().out.startswith("Error\n")