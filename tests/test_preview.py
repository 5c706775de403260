from patchforge import preview_patch, render_preview
from patchforge.models import Match, MatchStrategy
from patchforge.preview import preview_header

DOC = "a\nb\n    c\n    d\ne\nf"


def test_preview_layout():
    expected = "\n".join([
        "Match at lines 3-3 (confidence: 100.0%, similarity: 100.0%)",
        "",
        "  a",
        "  b",
        "-     c",
        "+     C1",
        "+     C2",
        "      d",
        "  e",
    ]) + "\n"
    assert preview_patch(DOC, "OLD:\nc\nNEW:\nC1\nC2") == expected


def test_preview_blank_replacement_lines_stay_blank():
    out = preview_patch(DOC, "OLD:\nc\nNEW:\nC1\n\nC2")
    assert "+ \n" in out
    assert "+     \n" not in out


def test_preview_header_for_context_anchored_match():
    m = Match(
        start_line=0,
        end_line=5,
        base_indent="",
        confidence=0.86,
        similarity=0.86,
        context_match_length=4,
        strategy=MatchStrategy.CONTEXT_ANCHORED,
    )
    assert preview_header(m) == "Match at lines 1-5 (confidence: 86.0%, 4 context lines matched)"


def test_render_preview_without_context():
    m = Match(start_line=0, end_line=1, base_indent="  ", confidence=0.9, similarity=0.8)
    out = render_preview("  old\nrest", m, "new")
    assert out == "Match at lines 1-1 (confidence: 90.0%, similarity: 80.0%)\n\n-   old\n+   new\n"


def test_preview_returns_none_for_missing_match_index():
    assert preview_patch(DOC, "OLD:\nc\nNEW:\nC", match_index=1) is None
    assert preview_patch(DOC, "OLD:\nc\nNEW:\nC", match_index=-1) is None


def test_preview_returns_none_on_failure():
    assert preview_patch(DOC, "") is None
    assert preview_patch(DOC, "OLD:\nnothing like this\nNEW:\nx") is None
