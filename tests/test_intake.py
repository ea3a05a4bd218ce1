import logging

from site_spec_drafter.intake import extract_business_name, infer_sub_type, normalize_personality


def test_extract_business_name_prefers_called_phrase():
    assert extract_business_name("We opened a bakery called Flour Power. We bake daily.") == "Flour Power"
    assert extract_business_name("A small shop named Tidewater Goods and we love it") == "Tidewater Goods"


def test_extract_business_name_from_possessive_phrase():
    assert extract_business_name("My studio Bright Lens Media shoots weddings") == "Bright Lens Media"
    assert extract_business_name("Welcome to our agency North Star, we build brands") == "North Star"


def test_extract_business_name_from_introduction():
    assert extract_business_name("I'm Jane Doe based in Austin") == "Jane Doe"


def test_extract_business_name_falls_back_to_leading_capitals():
    assert extract_business_name("Acme Widgets builds tools for makers") == "Acme Widgets"
    assert extract_business_name("Sunrise, a yoga collective") == "Sunrise"


def test_extract_business_name_placeholder():
    assert extract_business_name("we make candles by hand") == "My Business"
    assert extract_business_name("") == "My Business"


def test_infer_sub_type_keyword_match():
    assert infer_sub_type("business", "We are a cozy Italian trattoria downtown") == "restaurant"
    assert infer_sub_type("booking", "Hot stone massage and facials") == "spa"
    assert infer_sub_type("portfolio", "Family photo sessions at the beach") == "photography"


def test_infer_sub_type_first_table_wins():
    # restaurant is checked before spa
    assert infer_sub_type("booking", "A spa with a healthy cafe") == "restaurant"


def test_infer_sub_type_falls_back_to_site_type():
    assert infer_sub_type("ecommerce", "Handmade leather wallets") == "ecommerce"
    assert infer_sub_type("event", "", keywords={}) == "event"


def test_infer_sub_type_custom_keywords():
    assert infer_sub_type("event", "Vinyl record swap", keywords={"music": ("vinyl",)}) == "music"


def test_normalize_personality_passes_valid_vector(caplog):
    vector = [0.1, 0.2, 0.3, 0.4, 0.5, 0.6]
    with caplog.at_level(logging.WARNING, logger="site_spec_drafter.intake"):
        assert normalize_personality(vector) == vector
    assert not caplog.records


def test_normalize_personality_clamps_and_coerces(caplog):
    with caplog.at_level(logging.WARNING, logger="site_spec_drafter.intake"):
        result = normalize_personality([1.5, -0.2, "x", None, float("nan"), True])
    assert result == [1.0, 0.0, 0.5, 0.5, 0.5, 0.5]
    assert len([record for record in caplog.records if record.levelno == logging.WARNING]) == 1


def test_normalize_personality_pads_and_truncates():
    assert normalize_personality([0.1, 0.9]) == [0.1, 0.9, 0.5, 0.5, 0.5, 0.5]
    assert normalize_personality([0.2] * 8) == [0.2] * 6
    assert normalize_personality(None) == [0.5] * 6
    assert normalize_personality([1, 0, 1, 0, 1, 0]) == [1.0, 0.0, 1.0, 0.0, 1.0, 0.0]


def test_normalize_personality_clamps_huge_integers():
    assert normalize_personality([10**400, -(10**400), 0.5, 0.5, 0.5, 0.5]) == [1.0, 0.0, 0.5, 0.5, 0.5, 0.5]


def test_extract_business_name_ignores_pronoun_openers():
    assert extract_business_name("I'm a Baker") == "My Business"
    assert extract_business_name("We Bake bread every morning") == "My Business"
    assert extract_business_name("Our Family farm stand") == "My Business"
