import io

import pytest

from tinycad.commands import CommandError, ExitRequested, Session, c_atof, c_atoi
from tinycad.geometry import dxf_text


@pytest.fixture
def session_and_out():
    out = io.StringIO()
    return Session(out), out


@pytest.mark.parametrize(
    "text, expected",
    [("3.5abc", 3.5), ("abc", 0.0), ("  -2", -2.0), ("1e2", 100.0), (".5", 0.5), ("", 0.0)],
)
def test_c_atof(text, expected):
    assert c_atof(text) == expected


def test_c_atof_hex():
    assert c_atof("0x10") == 16.0


@pytest.mark.parametrize("text, expected", [("12x", 12), ("  -7", -7), ("x1", 0), ("+4", 4)])
def test_c_atoi(text, expected):
    assert c_atoi(text) == expected


def test_command_names_in_table_order(session_and_out):
    session, _ = session_and_out
    names = session.command_names()
    assert names[:2] == ["cube", "c"]
    assert names[-1] == "export_dxf"
    assert "cube_div" not in names
    assert len(names) == 18


def test_cube_reports_creation(session_and_out):
    session, out = session_and_out
    session.execute(["cube", "2"])
    assert out.getvalue() == "Cube created with size 2.00 and 1 subdivisions\n"


def test_cube_alias_with_divisions(session_and_out):
    session, out = session_and_out
    session.execute(["c", "1.5", "4"])
    assert "4 subdivisions" in out.getvalue()
    assert session.modeler.cube_divisions == 4


def test_cube_usage_error(session_and_out):
    session, _ = session_and_out
    with pytest.raises(CommandError, match="Usage: cube <size>"):
        session.execute(["cube"])


def test_cube_divisions_out_of_range(session_and_out):
    session, _ = session_and_out
    with pytest.raises(CommandError, match="between 1 and 100"):
        session.execute(["cube", "1", "101"])


def test_sphere_divisions_out_of_range(session_and_out):
    session, _ = session_and_out
    with pytest.raises(CommandError, match="between 3 and 100"):
        session.execute(["sp", "1", "2"])


def test_sphere_default_divisions(session_and_out):
    session, out = session_and_out
    session.execute(["sphere", "3"])
    assert out.getvalue() == "Sphere created with radius 3.00 and 30 subdivisions\n"


def test_unknown_command(session_and_out):
    session, _ = session_and_out
    with pytest.raises(CommandError, match=r"Unknown command: cube_div\. Type 'help' for a list\."):
        session.execute(["cube_div", "3"])


def test_save_without_shape(session_and_out, tmp_path):
    session, _ = session_and_out
    with pytest.raises(CommandError, match="No shape created yet"):
        session.execute(["save", str(tmp_path / "x.stl")])


def test_save_writes_stl(session_and_out, tmp_path):
    session, out = session_and_out
    path = tmp_path / "cube.stl"
    session.execute(["cube", "2"])
    session.execute(["s", str(path)])
    assert path.read_text() == session.modeler.stl_text()
    assert out.getvalue().endswith(f"Saved STL file: {path}\n")


def test_save_usage(session_and_out):
    session, _ = session_and_out
    with pytest.raises(CommandError, match="Usage: save <filename>"):
        session.execute(["save"])


def test_exit_raises_and_prints(session_and_out):
    session, out = session_and_out
    with pytest.raises(ExitRequested):
        session.execute(["e"])
    assert out.getvalue() == "Exiting the CLI. Thanks for using it!\n"


def test_version(session_and_out):
    session, out = session_and_out
    session.execute(["v"])
    assert out.getvalue() == "CAD, version 0.0 (Beta)\n"


def test_help_lists_commands(session_and_out):
    session, out = session_and_out
    session.execute(["help"])
    lines = out.getvalue().splitlines()
    assert lines[0] == "Available commands:"
    assert any(line.startswith("  cube <size>") for line in lines)


def test_sketch_point_wrong_arity(session_and_out):
    session, _ = session_and_out
    with pytest.raises(CommandError, match="Usage: sketch_point <x> <y>"):
        session.execute(["sketch_point", "1"])


def test_sketch_list_and_clear(session_and_out):
    session, out = session_and_out
    session.execute(["sketch_point", "1", "2"])
    session.execute(["sketch_line", "0", "0", "1", "1"])
    session.execute(["sketch_circle", "0", "0", "5"])
    assert len(session.sketch) == 3
    session.execute(["sketch_list"])
    assert out.getvalue().splitlines() == session.sketch.describe()
    session.execute(["sketch_clear"])
    assert len(session.sketch) == 0
    assert out.getvalue().endswith("Sketch cleared.\n")


def test_sketch_full(tmp_path):
    session = Session(io.StringIO())
    for _ in range(session.sketch.capacity):
        session.execute(["sketch_point", "0", "0"])
    with pytest.raises(CommandError, match="Sketch buffer full"):
        session.execute(["sketch_point", "0", "0"])


def test_export_dxf(session_and_out, tmp_path):
    session, out = session_and_out
    path = tmp_path / "s.dxf"
    session.execute(["sketch_circle", "1", "2", "3"])
    session.execute(["export_dxf", str(path)])
    assert path.read_text() == dxf_text(session.sketch)
    assert out.getvalue() == f"Sketch exported to {path}\n"


def test_export_dxf_usage(session_and_out):
    session, _ = session_and_out
    with pytest.raises(CommandError, match="Usage: export_dxf <filename>"):
        session.execute(["export_dxf"])