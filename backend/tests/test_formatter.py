"""
Tests for bullet normalization and fragment tokenization.
"""
from markdown_it import MarkdownIt

from soapview.formatter import format_section_content, fragments_to_markdown, normalize_bullets
from soapview.models import HeadingRun, PlainRun


def test_empty_content_yields_nothing():
    assert list(format_section_content("")) == []
    assert list(format_section_content(None)) == []
    assert list(format_section_content("   \n ")) == []


def test_dash_separated_clauses_become_bullets():
    assert normalize_bullets("take ibuprofen - rest - follow up") == "• take ibuprofen\n• rest\n• follow up"

    fragments = list(format_section_content("take ibuprofen - rest - follow up"))
    assert [f.text for f in fragments] == ["• take ibuprofen", "• rest", "• follow up"]
    assert all(isinstance(f, PlainRun) for f in fragments)


def test_label_before_dash_list_is_not_bulleted():
    assert normalize_bullets("Plan: - rest - fluids") == "Plan:\n• rest\n• fluids"


def test_dash_list_on_following_lines():
    assert normalize_bullets("Medications:\n- lisinopril\n- metformin") == "Medications:\n• lisinopril\n• metformin"


def test_leading_bullet_is_normalized():
    assert normalize_bullets("  •   cough") == "• cough"


def test_hyphenated_words_are_untouched():
    assert normalize_bullets("follow-up in two weeks") == "follow-up in two weeks"


def test_heading_detection():
    fragments = list(format_section_content("Chief Complaint: headache for 3 days"))
    assert fragments == [HeadingRun(prefix="", label="Chief Complaint:", rest=" headache for 3 days")]
    assert fragments[0].kind == "heading"


def test_heading_with_bullet_and_ordinal_prefix():
    fragments = list(format_section_content("1. Diagnosis: viral URI\n• Follow/Up: 2 weeks"))
    assert fragments[0] == HeadingRun(prefix="1. ", label="Diagnosis:", rest=" viral URI", line_break=True)
    assert fragments[1] == HeadingRun(prefix="• ", label="Follow/Up:", rest=" 2 weeks")


def test_line_without_label_is_plain():
    fragments = list(format_section_content("BP 120/80, HR 72"))
    assert fragments == [PlainRun(text="BP 120/80, HR 72")]
    assert fragments[0].kind == "plain"


def test_empty_lines_are_kept_and_last_fragment_has_no_break():
    fragments = list(format_section_content("Vitals stable\n\nHistory: asthma"))
    assert fragments == [
        PlainRun(text="Vitals stable", line_break=True),
        PlainRun(text="", line_break=True),
        HeadingRun(prefix="", label="History:", rest=" asthma"),
    ]


def test_formatter_is_lazy():
    fragments = format_section_content("a\nb")
    assert next(fragments) == PlainRun(text="a", line_break=True)
    assert next(fragments) == PlainRun(text="b")


def test_fragments_to_markdown():
    fragments = format_section_content("Chief Complaint: cough - fever")
    assert fragments_to_markdown(fragments) == "• **Chief Complaint:** cough  \n• fever"


def test_markdown_keeps_line_breaks_when_rendered():
    html = MarkdownIt().render(fragments_to_markdown(format_section_content("rest - fluids - follow up")))
    assert html == "<p>• rest<br />\n• fluids<br />\n• follow up</p>\n"


def test_markdown_bolds_indented_label():
    markdown = fragments_to_markdown(format_section_content("History:\n  Allergies: none"))
    assert markdown == "**History:**  \n  **Allergies:** none"

    html = MarkdownIt().render(markdown)
    assert "<strong>Allergies:</strong> none" in html
    assert "**" not in html
