import pytest


@pytest.fixture
def data_dir(tmp_path):
    """
    data/ with two csv files, a text file and a sub directory that also looks like a csv
    """
    data = tmp_path / "data"
    (data / "archive").mkdir(parents=True)
    (data / "dir.csv").mkdir()
    for name in ("a.csv", "b.csv", "notes.txt"):
        (data / name).write_text("x", encoding="utf-8")
    return data
