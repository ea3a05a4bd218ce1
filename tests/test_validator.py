from dataclasses import replace

from site_spec_drafter.models.intake import SpecContext
from site_spec_drafter.models.spec import ComponentPlacement, PageSpec, SiteIntentDocument, SpecMetadata
from site_spec_drafter.validator import collect_strings, validate_spec_content
from site_spec_drafter.vocabulary import GenericPhrase, default_vocabulary


def make_spec(*placements: tuple[str, dict], business_name: str = "Nonna Rosa") -> SiteIntentDocument:
    components = [
        ComponentPlacement(component_id=component_id, variant="default", order=index, content=content)
        for index, (component_id, content) in enumerate(placements)
    ]
    return SiteIntentDocument(
        session_id="sess_test",
        site_type="business",
        conversion_goal="contact",
        personality_vector=[0.5] * 6,
        business_name=business_name,
        tagline="Handmade pasta",
        pages=[PageSpec(slug="/", title="Home", purpose="Primary landing page", components=components)],
        metadata=SpecMetadata(generated_at=0),
    )


RESTAURANT = SpecContext(site_type="business", description="A neighbourhood trattoria")
NAV = ("nav-sticky", {"logoText": "Nonna Rosa", "links": []})


def _messages(result) -> list[str]:
    return [warning.message for warning in result.warnings]


def test_clean_restaurant_spec_has_no_warnings():
    spec = make_spec(NAV, ("content-text", {"headline": "Our Menu", "body": "<p>Fresh pasta every day.</p>"}))
    result = validate_spec_content(spec, RESTAURANT)
    assert result.sub_type == "restaurant"
    assert result.warnings == []


def test_generic_phrase_flagged_unless_exempt():
    spec = make_spec(NAV, ("content-text", {"headline": "Our Menu", "body": "Your Trusted Partner in dining"}))
    result = validate_spec_content(spec, RESTAURANT)
    assert _messages(result) == ['Generic placeholder detected: "your trusted partner"']
    assert result.warnings[0].severity == "warning"

    spa_spec = make_spec(NAV, ("content-text", {"headline": "Services & Treatments", "body": "A calm massage"}))
    spa = validate_spec_content(spa_spec, SpecContext(site_type="booking", description="day spa"))
    assert spa.sub_type == "spa"
    assert not any("Generic placeholder" in message for message in _messages(spa))


def test_missing_business_name_is_an_error():
    spec = make_spec(
        ("nav-sticky", {"logoText": "Trattoria"}),
        ("content-text", {"headline": "Nonna Rosa menu"}),
        ("footer-standard", {"copyright": "2025 Nonna Rosa"}),
    )
    result = validate_spec_content(spec, RESTAURANT)
    assert [(w.severity, w.field) for w in result.errors] == [("error", "logoText")]


def test_business_name_match_is_case_insensitive_and_footer_counts():
    spec = make_spec(
        ("nav-sticky", {"logoText": "Home"}),
        ("content-text", {"headline": "Our Menu"}),
        ("footer-standard", {"logoText": "NONNA ROSA trattoria"}),
    )
    assert validate_spec_content(spec, RESTAURANT).errors == []


def test_blacklisted_term_names_first_component():
    spec = make_spec(
        NAV,
        ("content-text", {"headline": "Our Menu"}),
        ("team-grid", {"members": [{"name": "Ana", "role": "CEO"}]}),
        ("form-contact", {"headline": "Book an appointment"}),
    )
    result = validate_spec_content(spec, RESTAURANT)
    refs = {w.message: w.component_ref for w in result.warnings}
    assert refs['"ceo" is inappropriate vocabulary for a restaurant site'] == "team-grid[2]"
    assert refs['"appointment" is inappropriate vocabulary for a restaurant site'] == "form-contact[3]"


def test_missing_sub_type_vocabulary_is_flagged():
    spec = make_spec(NAV, ("content-text", {"headline": "About us", "body": "We love people"}))
    result = validate_spec_content(spec, RESTAURANT)
    assert len(result.warnings) == 1
    assert result.warnings[0].message.startswith("No restaurant-specific vocabulary found in content")
    assert "menu, dine, dining, table, reservation" in result.warnings[0].message


def test_string_stat_values_are_errors():
    spec = make_spec(
        NAV,
        ("content-text", {"headline": "Our Menu"}),
        ("content-stats", {"stats": [{"value": 12, "label": "Years"}, {"value": "500+", "label": "Guests"}]}),
    )
    errors = validate_spec_content(spec, RESTAURANT).errors
    assert len(errors) == 1
    assert errors[0].component_ref == "content-stats[2]"
    assert errors[0].field == "stats[1].value"
    assert '"500+"' in errors[0].message


def test_sub_type_without_tables_only_checks_structure():
    spec = make_spec(("nav-sticky", {"logoText": "Acme"}), business_name="Acme")
    result = validate_spec_content(spec, SpecContext(site_type="landing", description="Widgets for makers"))
    assert result.sub_type == "landing"
    assert result.warnings == []


def test_empty_document_reports_missing_name_without_raising():
    spec = make_spec(business_name="Acme")
    result = validate_spec_content(spec, SpecContext(site_type="landing"))
    assert [w.field for w in result.warnings] == ["logoText"]


def test_custom_vocabulary():
    vocabulary = replace(default_vocabulary(), generic_phrases=(GenericPhrase("best in town"),))
    spec = make_spec(NAV, ("content-text", {"headline": "Our Menu", "body": "Best in town, your trusted partner"}))
    result = validate_spec_content(spec, RESTAURANT, vocabulary=vocabulary)
    assert _messages(result) == ['Generic placeholder detected: "best in town"']


def test_generated_documents_carry_the_business_name(generator, load_intake):
    for name in ("SESSION-booking-luxe-cuts", "SESSION-restaurant-trattoria", "SESSION-photography-studio"):
        intake = load_intake(name)
        document = generator.generate(intake)
        context = SpecContext(site_type=intake.site_type, description=intake.description)
        assert validate_spec_content(document, context).errors == []


def test_collect_strings_walks_nested_content():
    content = {"a": "one", "b": [{"c": "two"}, 3, ["three"]], "d": None}
    assert list(collect_strings(content)) == ["one", "two", "three"]
