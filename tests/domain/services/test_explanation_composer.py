"""Tests for explanation composition and formatting."""

from truthchain.domain.models.verdict import BiasFlag
from truthchain.domain.models.verification import Source
from truthchain.domain.services.explanation_composer import (
    compose_explanation,
    compose_lexical_why_fake,
    compose_why_fake,
    format_explanation,
    parse_bias_flag,
)


def test_parse_bias_flag():
    """Test bias annotation parsing."""
    assert parse_bias_flag("YES") is BiasFlag.YES
    assert parse_bias_flag("no") is BiasFlag.NO
    assert parse_bias_flag(" unsure ") is BiasFlag.UNSURE
    assert parse_bias_flag(None) is BiasFlag.NO
    assert parse_bias_flag("") is BiasFlag.NO
    assert parse_bias_flag("slightly") is BiasFlag.UNSURE
    assert parse_bias_flag(None, default=BiasFlag.UNSURE) is BiasFlag.UNSURE


def test_compose_keeps_parts_structured():
    """Test the structured explanation."""
    explanation = compose_explanation("Summary.", ["• a", "• b"], BiasFlag.YES, ["Check the date"])

    assert explanation.summary == "Summary."
    assert explanation.detailed_points == ["• a", "• b"]
    assert explanation.bias_flag is BiasFlag.YES
    assert explanation.tips == ["Check the date"]


def test_compose_with_missing_summary():
    """Test defaults for missing parts."""
    explanation = compose_explanation(None)
    assert explanation.summary == ""
    assert explanation.detailed_points == []
    assert explanation.bias_flag is BiasFlag.NO


def test_format_full_explanation():
    """Test block order and separators."""
    explanation = compose_explanation("Summary.", ["• a", "• b"], BiasFlag.YES, ["tip 1", "tip 2"])
    assert format_explanation(explanation) == (
        "Summary.\n\n• a\n• b\n\n⚠️ Bias Detected: YES\n\n💡 Tips:\ntip 1\ntip 2"
    )


def test_format_omits_empty_blocks_and_unbiased_flag():
    """Test optional blocks are skipped."""
    explanation = compose_explanation("Only a summary.", bias_flag=BiasFlag.NO)
    assert format_explanation(explanation) == "Only a summary."


def test_format_unsure_bias():
    """Test that UNSURE counts as flagged."""
    explanation = compose_explanation("Text", bias_flag=BiasFlag.UNSURE)
    assert format_explanation(explanation).endswith("⚠️ Bias Detected: UNSURE")


def test_why_fake_lists_points_and_sources():
    """Test the structured debunk block."""
    sources = [
        Source(title="DOH", url="https://doh.gov.ph", credibility_score=90, relevance="Denies the claim"),
        Source(title="WHO", url="https://who.int", credibility_score=90),
    ]
    text = compose_why_fake(["• first", "• second"], sources)

    assert text.startswith("❌ Why This Is Fake:\n\n• first\n• second\n")
    assert "1. DOH - Denies the claim\n   https://doh.gov.ph\n" in text
    assert "2. WHO\n   https://who.int\n" in text


def test_lexical_why_fake_embeds_raw_text():
    """Test the free-text debunk block."""
    sources = [Source(title="Source 1", url="https://a.example", credibility_score=85)]
    text = compose_lexical_why_fake("This is fake.", sources)

    assert text == "❌ Why This Is Fake:\n\nThis is fake.\n\n📚 Sources:\n1. Source 1: https://a.example\n"


def test_parse_bias_flag_reads_leading_word():
    """Test free-text annotations."""
    assert parse_bias_flag("YES - partisan framing") is BiasFlag.YES
    assert parse_bias_flag("No, the tone is neutral") is BiasFlag.NO
    assert parse_bias_flag("Unsure: sources disagree") is BiasFlag.UNSURE
    assert parse_bias_flag("Possibly slanted") is BiasFlag.UNSURE
    assert parse_bias_flag("   ") is BiasFlag.NO


def test_bias_note_is_kept_and_shown():
    """Test the model's wording survives into the rendered text."""
    explanation = compose_explanation("Text", bias_flag=BiasFlag.YES, bias_note="YES - partisan framing")

    assert explanation.bias_note == "YES - partisan framing"
    assert format_explanation(explanation) == "Text\n\n⚠️ Bias Detected: YES - partisan framing"


def test_bare_bias_label_is_not_a_note():
    """Test a note that only repeats the flag."""
    assert compose_explanation("Text", bias_flag=BiasFlag.YES, bias_note=" yes ").bias_note is None
    assert compose_explanation("Text", bias_note="   ").bias_note is None
