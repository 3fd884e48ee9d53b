import pytest

from treni.cli import main


@pytest.mark.parametrize(
    "argv",
    [[], ["unknown"], ["ETCS1", "RBC"], ["RBC"], ["ETCS2", "RBC", "extra"], ["etcs1"]],
)
def test_unrecognised_arguments_do_nothing(argv, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(argv) == 0
    assert list(tmp_path.iterdir()) == []


def test_etcs1_without_file_tree_fails(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["ETCS1"]) == 1
    assert capsys.readouterr().err.startswith("error:")


def test_etcs2_without_itineraries_fails(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "file" / "binari").mkdir(parents=True)
    (tmp_path / "file" / "log").mkdir()
    assert main(["ETCS2"]) == 1
    assert (tmp_path / "file" / "binari" / "S1").read_text() == "0"


def test_argv_defaults_to_sys_argv(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.argv", ["treni", "nothing"])
    assert main() == 0
    assert list(tmp_path.iterdir()) == []