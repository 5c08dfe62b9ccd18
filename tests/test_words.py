import pytest

from eulerkit.words import (
    count_triangle_words,
    count_triangle_words_in_file,
    parse_words,
    word_value,
)


def test_parse_quoted_list():
    assert parse_words('"A","ABC"') == ["A", "ABC"]


def test_parse_mixed_delimiters():
    assert parse_words('"SKY" , "B"\n"CAB"') == ["SKY", "B", "CAB"]


def test_parse_empty_text():
    assert parse_words("") == []


def test_word_value_of_sky():
    assert word_value("SKY") == 55


def test_word_value_is_additive():
    assert word_value("AB") == word_value("A") + word_value("B")


def test_single_triangle_word():
    assert count_triangle_words(["SKY"]) == 1


def test_count_never_exceeds_word_total():
    words = ["A", "B", "C", "SKY", "ZZZ", "HELLO"]
    assert 0 <= count_triangle_words(words) <= len(words)


def test_empty_word_list():
    assert count_triangle_words([]) == 0


def test_count_from_file_matches_list(tmp_path):
    words = ["SKY", "B", "A", "ABC", "ZEBRA"]
    path = tmp_path / "words.txt"
    path.write_text(",".join(f'"{w}"' for w in words))
    assert count_triangle_words_in_file(path) == count_triangle_words(words)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        count_triangle_words_in_file(tmp_path / "absent.txt")