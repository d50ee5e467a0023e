import pytest

from practicebook.minigrep import UserArgument, main, parse_arguments, read_file


@pytest.fixture
def poem(tmp_path):
    path = tmp_path / "poem.txt"
    path.write_text(
        "I'm nobody! Who are you?\n"
        "Are you nobody, too?\n"
        "Then there's a pair of us - don't tell!\n"
        "How dreary to be somebody!\n",
        encoding="utf-8",
    )
    return path


def test_parse_arguments_takes_search_and_file():
    result = parse_arguments(["prog", "needle", "haystack.txt"])
    assert result == UserArgument(search="needle", file_name="haystack.txt")


@pytest.mark.parametrize("args", [[], ["prog"], ["prog", "needle"]])
def test_parse_arguments_too_few(args):
    with pytest.raises(ValueError, match="Not enough arguments"):
        parse_arguments(args)


def test_parse_arguments_too_many():
    with pytest.raises(ValueError, match="Too many arguments"):
        parse_arguments(["prog", "a", "b", "c"])


def test_read_file_matches_case_insensitively(poem):
    result = read_file("NOBODY", poem)
    assert result == ["I'm nobody! Who are you?", "Are you nobody, too?"]


def test_read_file_every_result_contains_search(poem):
    result = read_file("body", poem)
    assert len(result) == 3
    assert all("body" in line.lower() for line in result)


def test_read_file_no_match(poem):
    assert read_file("zebra", poem) == []


def test_read_file_strips_carriage_returns(tmp_path):
    path = tmp_path / "crlf.txt"
    path.write_bytes(b"alpha\r\nbeta\r\n")
    assert read_file("a", path) == ["alpha", "beta"]


def test_read_file_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_file("x", tmp_path / "missing.txt")


def test_main_prints_matches(poem, capsys):
    code = main(["dreary", str(poem)])
    out = capsys.readouterr().out
    assert code == 0
    assert out.strip() == '["How dreary to be somebody!"]'


def test_main_reports_argument_error(capsys):
    code = main(["only-one"])
    assert code == 1
    assert capsys.readouterr().out.strip() == "Not enough arguments"