import string

import pytest

from drillbox.basics import (
    append_contact,
    average,
    capitalize_first,
    count_lines,
    greeting,
    pyramid,
    read_positive_int,
    uppercase,
    write_keywords,
)


def test_average_of_equal_scores():
    assert average([5, 5, 5]) == 5
    assert average([7]) == 7


def test_average_times_length_is_sum():
    scores = [72, 73, 33, 90]
    assert average(scores) * len(scores) == pytest.approx(sum(scores))


def test_average_empty_raises():
    with pytest.raises(ValueError):
        average([])


def test_uppercase_example():
    assert uppercase("hello, World 1!") == "HELLO, WORLD 1!"


def test_uppercase_matches_ascii_upper():
    text = string.printable
    assert uppercase(text) == text.upper()


def test_uppercase_leaves_non_ascii():
    assert uppercase("é") == "é"


def test_capitalize_first():
    assert capitalize_first("hello") == "Hello"
    assert capitalize_first("") == ""


def test_capitalize_first_only_touches_first_char():
    text = "zebra crossing"
    result = capitalize_first(text)
    assert result[1:] == text[1:]
    assert result[0] == uppercase(text[0])


def test_pyramid_shape():
    rows = pyramid(5).splitlines()
    assert len(rows) == 5
    assert [row.count("*") for row in rows] == list(range(1, 6))
    assert pyramid(0) == ""


def test_pyramid_negative_raises():
    with pytest.raises(ValueError):
        pyramid(-1)


def test_greeting():
    assert greeting(["Ann"]) == "Hello, Ann"
    assert greeting([]) == "Hello World"
    assert greeting(["a", "b"]) == "Hello World"


def test_read_positive_int_retries():
    answers = iter(["abc", "-3", "0", "7"])
    prompts = []

    def fake_input(prompt):
        prompts.append(prompt)
        return next(answers)

    assert read_positive_int("Number: ", fake_input) == 7
    assert prompts == ["Number: "] * 4


def test_keywords_round_trip(tmp_path):
    path = tmp_path / "file.txt"
    written = write_keywords(path)
    assert written == 32
    assert count_lines(path) == written
    assert "int" in path.read_text().splitlines()


def test_count_lines_empty(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_bytes(b"")
    assert count_lines(path) == 0


def test_append_contact(tmp_path):
    path = tmp_path / "phonebook.csv"
    append_contact(path, "Alice", "100")
    append_contact(path, "Bob", "101")
    assert path.read_text() == "Alice,100\nBob,101\n"
    assert count_lines(path) == 2