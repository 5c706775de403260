from patchforge.utils.text import normalize_line_endings, split_lines, trim_blank_lines


def test_normalize_line_endings():
    assert normalize_line_endings("a\r\nb\rc\n") == "a\nb\nc\n"


def test_split_lines_keeps_trailing_empty_line():
    assert split_lines("a\r\nb\n") == ["a", "b", ""]
    assert "\n".join(split_lines("a\nb\n")) == "a\nb\n"


def test_split_lines_empty_text_is_one_empty_line():
    assert split_lines("") == [""]


def test_trim_blank_lines_keeps_interior_and_indentation():
    assert trim_blank_lines("\n \n  a\n\n  b\n\t\n") == "  a\n\n  b"


def test_trim_blank_lines_of_blank_text_is_empty():
    assert trim_blank_lines(" \n\t\n") == ""
