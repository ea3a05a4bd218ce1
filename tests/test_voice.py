import pytest

from site_spec_drafter.voice import (
    CTAS_BY_VOICE,
    HEADLINES_BY_VOICE,
    SOFT_CTAS_BY_VOICE,
    SUB_TYPE_CTAS,
    get_voice_keyed_cta_text,
    get_voice_keyed_headline,
)


def test_cta_register_differs_by_tone():
    polished = get_voice_keyed_cta_text("book", "polished", [])
    warm = get_voice_keyed_cta_text("book", "warm", [])
    assert polished == "Reserve Your Experience"
    assert warm == "Book your spot"
    assert polished != warm
    assert 0 < len(polished) <= 40
    assert 0 < len(warm) <= 40


@pytest.mark.parametrize("tone", ["warm", "polished", "direct"])
@pytest.mark.parametrize("goal", ["book", "sell", "convert"])
def test_sales_averse_tags_change_sales_forward_ctas(tone, goal):
    plain = get_voice_keyed_cta_text(goal, tone, [])
    assert get_voice_keyed_cta_text(goal, tone, ["salesy"]) != plain
    assert get_voice_keyed_cta_text(goal, tone, ["aggressive"]) != plain


def test_sales_averse_tags_are_case_insensitive_and_scoped():
    assert get_voice_keyed_cta_text("book", "warm", ["Salesy"]) == "See what's available"
    assert get_voice_keyed_cta_text("contact", "warm", ["salesy"]) == "Let's chat"
    assert get_voice_keyed_cta_text("book", "warm", ["minimalist"]) == "Book your spot"


def test_sub_type_cta_override():
    assert get_voice_keyed_cta_text("book", "polished", [], "restaurant") == "Reserve Your Table"
    assert get_voice_keyed_cta_text("contact", "direct", [], "spa") == "Book now"
    assert get_voice_keyed_cta_text("sell", "polished", [], "spa") == "Shop the Collection"


def test_cta_fallbacks():
    assert get_voice_keyed_cta_text("mystery", "direct", []) == "Get in touch"
    assert get_voice_keyed_cta_text("book", "shouty", None) == "Reserve Your Experience"
    assert get_voice_keyed_cta_text("book", None) == "Reserve Your Experience"


def test_every_cta_fits_a_button():
    tables = [CTAS_BY_VOICE, SOFT_CTAS_BY_VOICE, *SUB_TYPE_CTAS.values()]
    for table in tables:
        for entries in table.values():
            for text in entries.values():
                assert 0 < len(text) <= 40


def test_polished_register_has_no_contractions():
    polished = [
        *HEADLINES_BY_VOICE["polished"].values(),
        *CTAS_BY_VOICE["polished"].values(),
        *SOFT_CTAS_BY_VOICE["polished"].values(),
    ]
    assert all("'" not in text for text in polished)


def test_headline_resolution():
    assert get_voice_keyed_headline("Luxe Cuts", "booking", "warm") == (
        "Luxe Cuts — Your next great experience starts here"
    )
    assert get_voice_keyed_headline("Nonna", "business", "direct", "restaurant") == (
        "Nonna. Exceptional food. No compromise."
    )
    assert get_voice_keyed_headline("Acme", "mystery", "polished") == "Acme — Where Excellence Meets Precision"
    assert get_voice_keyed_headline("Acme", "landing", "unknown") == "Acme — The Intelligent Choice"
