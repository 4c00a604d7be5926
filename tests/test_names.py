import pytest

from chaincache.names import load_names, load_surnames, load_words


def test_load_words(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("alpha beta\ngamma delta\n", encoding="utf-8")
    words = load_words(path, 3)
    assert list(words) == ["alpha", "beta", "gamma"]


def test_load_words_too_few(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("alpha\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_words(path, 2)


def test_load_words_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_words(tmp_path / "absent.txt", 1)


def test_load_names(tmp_path):
    path = tmp_path / "names.txt"
    path.write_text("\n".join(f"name{i}" for i in range(800)), encoding="utf-8")
    names = load_names(path)
    assert len(names) == 737
    assert names[0] == "name0"
    assert names[735] == "name735"
    assert names[736] == ""


def test_load_surnames(tmp_path):
    path = tmp_path / "surnames.txt"
    path.write_text(" ".join(f"s{i}" for i in range(14652)), encoding="utf-8")
    surnames = load_surnames(path)
    assert len(surnames) == 14653
    assert surnames[14651] == "s14651"
    assert surnames[14652] == ""