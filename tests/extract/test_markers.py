import re
import textwrap

from patchforge.extract.markers import (
    PARSERS,
    LineMarkerParser,
    looks_like_marker_patch,
    matching_parsers,
    parse_patch_input,
)
from patchforge.models import PatchInput


def test_parse_colon_markers():
    raw = textwrap.dedent("""\
        OLD:
        const a = 1;
        NEW:
        const a = 2;
    """)
    assert parse_patch_input(raw) == PatchInput(search="const a = 1;", replace="const a = 2;")


def test_parse_colon_markers_case_insensitive():
    raw = "old:\nfoo()\nNew:\nbar()"
    assert parse_patch_input(raw) == PatchInput(search="foo()", replace="bar()")


def test_colon_replace_body_runs_to_next_marker():
    raw = "OLD:\na\nNEW:\nb\nOLD:\nc\nNEW:\nd"
    assert parse_patch_input(raw) == PatchInput(search="a", replace="b")


def test_parse_bracket_markers():
    raw = "[OLD]\n  if x:\n      y()\n[NEW]\n  if x:\n      z()\n"
    parsed = parse_patch_input(raw)
    assert parsed.search == "  if x:\n      y()"
    assert parsed.replace == "  if x:\n      z()"


def test_parse_conflict_markers():
    raw = textwrap.dedent("""\
        Here is the change:
        <<<<<<< SEARCH
        function greet(name) {
          return name;
        }
        =======
        function greet(name) {
          return name.toUpperCase();
        }
        >>>>>>> REPLACE
        trailing chatter
    """)
    parsed = parse_patch_input(raw)
    assert parsed.search == "function greet(name) {\n  return name;\n}"
    assert parsed.replace == "function greet(name) {\n  return name.toUpperCase();\n}"


def test_conflict_markers_accept_crlf():
    raw = "<<<<<<< SEARCH\r\na\r\n=======\r\nb\r\n>>>>>>> REPLACE\r\n"
    assert parse_patch_input(raw) == PatchInput(search="a", replace="b")


def test_first_recognised_format_wins():
    raw = "OLD:\nfrom colon\nNEW:\nto colon\n<<<<<<< SEARCH\nx\n=======\ny\n>>>>>>> REPLACE"
    parsed = parse_patch_input(raw)
    assert parsed.search == "from colon"
    # colon replace body has no closing marker and runs to end of input
    assert parsed.replace.startswith("to colon")


def test_bodies_trimmed_of_outer_blank_lines_only():
    raw = "OLD:\n\n\n  a\n\n  b\n\n\nNEW:\n\nc\n\n"
    parsed = parse_patch_input(raw)
    assert parsed.search == "  a\n\n  b"
    assert parsed.replace == "c"


def test_empty_bodies_still_parse():
    assert parse_patch_input("<<<<<<< SEARCH\nold\n=======\n>>>>>>> REPLACE") == PatchInput(
        search="old", replace=""
    )
    assert parse_patch_input("OLD:\n\nNEW:\nnew") == PatchInput(search="", replace="new")


def test_missing_marker_returns_none():
    raw = "<<<<<<< SEARCH\na\n=======\nb\n"
    assert parse_patch_input(raw) is None
    assert looks_like_marker_patch(raw)
    assert matching_parsers(raw) == ["search_replace"]


def test_misordered_markers_return_none():
    assert parse_patch_input("NEW:\nb\nOLD:\na") is None
    assert parse_patch_input(">>>>>>> REPLACE\nb\n=======\na\n<<<<<<< SEARCH") is None


def test_inline_marker_text_is_not_a_marker():
    raw = "x = 'OLD:'\ny = '[NEW]'"
    assert parse_patch_input(raw) is None
    assert not looks_like_marker_patch(raw)


def test_plain_code_is_not_a_marker_patch():
    raw = "Title\n=======\nbody text"
    assert parse_patch_input(raw) is None
    assert not looks_like_marker_patch(raw)


def test_custom_parser_can_be_appended():
    arrow = LineMarkerParser(
        name="find_replace",
        search_marker=re.compile(r"FIND:"),
        replace_marker=re.compile(r"REPLACE WITH:"),
    )
    raw = "FIND:\na\nREPLACE WITH:\nb"
    assert parse_patch_input(raw) is None
    assert parse_patch_input(raw, parsers=PARSERS + (arrow,)) == PatchInput(search="a", replace="b")


def test_half_written_colon_patch_is_flagged_only_when_marker_leads():
    assert matching_parsers("OLD:\nfoo()\n") == ["old_new_colon"]
    assert matching_parsers("\n[OLD]\nfoo()\n") == ["old_new_bracket"]
    assert not looks_like_marker_patch("settings:\n  old:\n    value: 2\n  new: true")
    assert not looks_like_marker_patch("  old:\n    value: 2")


def test_config_section_headers_are_not_markers():
    raw = "[new]\nenabled = false\n[old]\nenabled = true"
    assert parse_patch_input(raw) is None
    assert not looks_like_marker_patch(raw)
