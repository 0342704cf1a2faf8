"""
Link Classifier Tests
=====================

Image, URL, math and truncation rules for relation payloads.
"""

import pytest

from sstviewer.composition.links import (
    HEADER_TRUNCATION, ITEM_TRUNCATION, LinkKind, TruncationPolicy,
    classify, is_image_ref, is_math_markup, is_url_ref,
)


class TestImageClassification:

    @pytest.mark.parametrize("label", ["has image", "is an image for"])
    @pytest.mark.parametrize("text", ["http://x.org/a.png", "https://x.org/a.png"])
    def test_image_labels_with_web_text(self, label, text):
        assert is_image_ref(text, label)
        assert classify(text, label) is LinkKind.IMAGE

    @pytest.mark.parametrize("label", ["has URL", "Has image", "has image ", "leads to"])
    def test_other_labels_are_never_images(self, label):
        assert not is_image_ref("https://x.org/a.png", label)
        assert classify("https://x.org/a.png", label) is not LinkKind.IMAGE

    def test_image_label_without_scheme(self):
        assert not is_image_ref("x.org/a.png", "has image")
        assert not is_image_ref("ftp://x.org/a.png", "has image")

    @pytest.mark.parametrize("text,label", [(None, "has image"), ("", "has image"), ("http://a", None)])
    def test_absent_input_is_false(self, text, label):
        assert is_image_ref(text, label) is False


class TestURLClassification:

    def test_url_label_with_web_text(self):
        assert is_url_ref("https://example.org", "has URL")
        assert classify("https://example.org", "has URL") is LinkKind.URL

    def test_url_label_is_exact(self):
        assert not is_url_ref("https://example.org", "has url")

    def test_url_label_without_scheme_is_plain(self):
        assert classify("example.org", "has URL") is LinkKind.PLAIN

    def test_line_break_is_preformatted(self):
        assert classify("line one\nline two", "has URL") is LinkKind.PREFORMATTED

    def test_unclassifiable_defaults_to_plain(self):
        assert classify("just words", "leads to") is LinkKind.PLAIN
        assert classify(None, None) is LinkKind.PLAIN


class TestMathMarkup:

    def test_needs_both_delimiters(self):
        assert is_math_markup(r"energy \(E=mc^2\) here")
        assert not is_math_markup(r"only \(open")
        assert not is_math_markup(r"only close\)")

    def test_plain_parentheses_are_not_math(self):
        assert not is_math_markup("a (parenthetical) remark")

    def test_absent_is_false(self):
        assert is_math_markup(None) is False
        assert is_math_markup("") is False


class TestTruncationPolicy:

    def test_exactly_threshold_is_kept(self):
        text = "a" * 90

        assert not ITEM_TRUNCATION.applies(text)
        assert ITEM_TRUNCATION.apply(text) == text

    def test_one_over_threshold_is_cut(self):
        text = "b" * 91

        assert ITEM_TRUNCATION.apply(text) == "b" * 70 + "..."

    def test_math_is_never_cut(self):
        text = r"\(" + "x" * 200 + r"\)"

        assert ITEM_TRUNCATION.apply(text) == text

    def test_header_policy_bounds_total_length(self):
        title = "t" * 61

        result = HEADER_TRUNCATION.apply(title)

        assert len(result) == 60
        assert result.endswith("...")
        assert HEADER_TRUNCATION.apply("t" * 60) == "t" * 60

    def test_keep_must_fit_threshold(self):
        with pytest.raises(ValueError):
            TruncationPolicy(threshold=10, keep=11)
