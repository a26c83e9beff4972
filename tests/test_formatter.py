"""Tests for the resume text to HTML formatter."""

from ats_tailor.core.formatter import extract_text, format_resume_html


class TestEmptyInput:
    def test_empty_string(self):
        assert format_resume_html("") == ""

    def test_whitespace_only(self):
        assert format_resume_html("  \n\n \t ") == ""


class TestHeadings:
    def test_known_heading_becomes_h2(self):
        html = format_resume_html("EXPERIENCE\nDeveloper at Acme")
        assert html.startswith("<h2>EXPERIENCE</h2>")

    def test_heading_match_is_case_insensitive(self):
        html = format_resume_html("Education\nBA History")
        assert "<h2>Education</h2>" in html

    def test_heading_with_trailing_colon(self):
        html = format_resume_html("Skills:\nPython")
        assert "<h2>Skills:</h2>" in html

    def test_heading_word_inside_sentence_is_not_tagged(self):
        html = format_resume_html("Ten years of experience with Python")
        assert "<h2>" not in html

    def test_no_break_after_heading(self):
        html = format_resume_html("SKILLS\nPython, Go")
        assert "</h2><br>" not in html
        assert "<h2>SKILLS</h2>Python, Go" in html


class TestLists:
    def test_bullets_grouped_into_one_list(self):
        html = format_resume_html("EXPERIENCE\n• Did a thing\n• Did another")
        assert html == "<h2>EXPERIENCE</h2><ul><li>Did a thing</li><li>Did another</li></ul>"

    def test_dash_and_numbered_bullets(self):
        html = format_resume_html("- first\n2. second")
        assert html == "<ul><li>first</li><li>second</li></ul>"

    def test_separate_runs_make_separate_lists(self):
        html = format_resume_html("• a\n\nMiddle line\n\n• b")
        assert html.count("<ul>") == 2
        assert "<p>Middle line</p>" in html

    def test_hyphenated_word_is_not_a_bullet(self):
        html = format_resume_html("Full-stack developer")
        assert "<li>" not in html


class TestParagraphs:
    def test_block_wrapped_in_paragraph(self):
        assert format_resume_html("Hello there") == "<p>Hello there</p>"

    def test_single_newlines_become_breaks(self):
        assert format_resume_html("Line one\nLine two") == "<p>Line one<br>Line two</p>"

    def test_blank_lines_separate_paragraphs(self):
        html = format_resume_html("First\n\n\n\nSecond")
        assert html == "<p>First</p><p>Second</p>"

    def test_no_paragraph_around_tagged_block(self):
        html = format_resume_html("EDUCATION\nBA")
        assert "<p><h2>" not in html

    def test_no_leading_or_trailing_break(self):
        html = format_resume_html("\n\nJane Doe\n\n")
        assert not html.startswith("<br>")
        assert not html.endswith("<br>")

    def test_no_repeated_breaks(self):
        html = format_resume_html("a\n \nb")
        assert "<br><br>" not in html

    def test_windows_line_endings(self):
        assert format_resume_html("a\r\nb") == "<p>a<br>b</p>"


class TestJobEntries:
    def test_job_entry_spans(self):
        html = format_resume_html("Senior Engineer | Acme Corp (2021 - Present)")
        assert '<span class="job-title">Senior Engineer</span>' in html
        assert '<span class="company">Acme Corp</span>' in html
        assert '<span class="date">2021 - Present</span>' in html

    def test_job_entry_inside_bullet(self):
        html = format_resume_html("• Intern | Initech (Summer 2017)")
        assert '<li><span class="job-title">Intern</span>' in html

    def test_line_without_pipe_is_untouched(self):
        html = format_resume_html("BSc Computer Science (2014 - 2018)")
        assert "<span" not in html


class TestEscaping:
    def test_markup_in_input_is_escaped(self):
        html = format_resume_html("Built <script>alert(1)</script> widgets")
        assert "<script>" not in html
        assert "&lt;script&gt;" in html

    def test_ampersand_escaped(self):
        assert format_resume_html("R&D lead") == "<p>R&amp;D lead</p>"


class TestContentPreservation:
    def test_round_trip_keeps_every_line(self, sample_resume_text):
        text = extract_text(format_resume_html(sample_resume_text))
        for line in sample_resume_text.splitlines():
            content = line.strip().lstrip("•-").strip()
            if content:
                assert content in text

    def test_round_trip_special_characters(self):
        source = "Q&A <lead> \"quoted\" it's"
        assert extract_text(format_resume_html(source)) == source

    def test_formatting_is_idempotent_on_text(self, sample_resume_text):
        first = extract_text(format_resume_html(sample_resume_text))
        second = extract_text(format_resume_html(first))
        assert first == second

    def test_no_double_wrapping(self, sample_resume_text):
        html = format_resume_html(sample_resume_text)
        assert "<p><p>" not in html
        assert "<li><li>" not in html
        assert "<ul><ul>" not in html
        assert "<p><ul>" not in html


class TestExtractText:
    def test_blocks_separated_by_blank_line(self):
        assert extract_text("<h2>SKILLS</h2><p>Python</p>") == "SKILLS\n\nPython"

    def test_list_items_on_own_lines(self):
        assert extract_text("<ul><li>a</li><li>b</li></ul>") == "a\nb"

    def test_breaks_become_newlines(self):
        assert extract_text("<p>a<br>b</p>") == "a\nb"


class TestInlineMarkup:
    def test_tab_becomes_non_breaking_spaces(self):
        assert format_resume_html("Python\tGo") == "<p>Python&nbsp;&nbsp;&nbsp;&nbsp;Go</p>"

    def test_emphasis_becomes_strong(self):
        assert format_resume_html("Used **Python** daily") == (
            "<p>Used <strong>Python</strong> daily</p>"
        )

    def test_emphasis_inside_list_item(self):
        html = format_resume_html("• Built **FastAPI** services")
        assert html == "<ul><li>Built <strong>FastAPI</strong> services</li></ul>"

    def test_emphasis_round_trip(self):
        source = "Used **Python** and **C++** daily"
        assert extract_text(format_resume_html(source)) == source

    def test_lone_asterisks_untouched(self):
        assert format_resume_html("5 * 3 = 15") == "<p>5 * 3 = 15</p>"
