import re
from dataclasses import replace

from site_spec_drafter.auto_fix import fix_spec_content, parse_float_prefix
from site_spec_drafter.models.intake import SpecContext
from site_spec_drafter.vocabulary import ReplacementRule, default_vocabulary

from test_validator import NAV, RESTAURANT, make_spec

SPA = SpecContext(site_type="booking", description="A day spa in the hills")


def _content(result, index: int) -> dict:
    return list(result.spec.iter_placements())[index].content


def test_fix_does_not_mutate_input():
    spec = make_spec(("nav-sticky", {"logoText": "Trattoria"}), ("content-text", {"headline": "Our Services"}))
    before = spec.model_dump()
    result = fix_spec_content(spec, RESTAURANT)
    assert result.fixes
    assert spec.model_dump() == before
    assert result.spec is not spec


def test_business_name_written_into_nav_and_footer():
    spec = make_spec(
        ("nav-sticky", {"logoText": "Trattoria"}),
        ("content-text", {"headline": "Our Menu"}),
        ("footer-standard", {"copyright": "2025"}),
    )
    result = fix_spec_content(spec, RESTAURANT)
    assert [(f.component_ref, f.original, f.replacement, f.rule) for f in result.fixes] == [
        ("nav-sticky[0]", "Trattoria", "Nonna Rosa", "business-name"),
        ("footer-standard[2]", "", "Nonna Rosa", "business-name"),
    ]
    assert _content(result, 0)["logoText"] == "Nonna Rosa"
    assert _content(result, 2)["logoText"] == "Nonna Rosa"


def test_empty_business_name_is_left_alone():
    spec = make_spec(("nav-sticky", {"logoText": "Home"}), business_name="")
    assert fix_spec_content(spec, SpecContext(site_type="landing")).fixes == []


def test_headline_swap_for_restaurant():
    spec = make_spec(NAV, ("commerce-services", {"headline": "Our Services", "subheadline": "Pick one"}))
    result = fix_spec_content(spec, RESTAURANT)
    assert len(result.fixes) == 1
    fix = result.fixes[0]
    assert (fix.component_ref, fix.field, fix.original, fix.replacement, fix.rule) == (
        "commerce-services[1]",
        "headline",
        "Our Services",
        "Our Menu",
        "headline-swap",
    )
    assert _content(result, 1)["headline"] == "Our Menu"


def test_logo_text_is_never_rewritten():
    spec = make_spec(
        (
            "nav-sticky",
            {"logoText": "Our Services Ltd", "links": [{"label": "Our Services", "href": "#services"}]},
        ),
        business_name="Our Services Ltd",
    )
    result = fix_spec_content(spec, RESTAURANT)
    content = _content(result, 0)
    assert content["logoText"] == "Our Services Ltd"
    assert content["links"][0]["label"] == "Our Menu"
    assert [fix.field for fix in result.fixes] == ["links[0].label"]


def test_team_roles_swapped():
    members = [
        {"name": "Alex", "role": "Founder & CEO"},
        {"name": "Jordan", "role": "Creative Director"},
        {"name": "Sam", "role": "Host"},
    ]
    spec = make_spec(NAV, ("team-grid", {"headline": "Meet the Team", "members": members}))
    result = fix_spec_content(spec, RESTAURANT)
    roles = [member["role"] for member in _content(result, 1)["members"]]
    assert roles == ["Executive Chef", "Sous Chef", "Host"]
    assert [(fix.field, fix.rule) for fix in result.fixes] == [
        ("members[0].role", "role-swap"),
        ("members[1].role", "role-swap"),
    ]


def test_vocabulary_swaps_chain_within_one_string():
    spec = make_spec(NAV, ("content-text", {"body": "Every session starts with a consultation."}))
    result = fix_spec_content(spec, RESTAURANT)
    assert [(fix.original, fix.replacement) for fix in result.fixes] == [
        ("Every session starts with a consultation.", "Every dining experience starts with a consultation."),
        ("Every dining experience starts with a consultation.", "Every dining experience starts with a reservation."),
    ]
    assert all(fix.rule == "vocab-swap" for fix in result.fixes)


def test_vocabulary_swaps_reach_nested_lists():
    spec = make_spec(NAV, ("content-accordion", {"items": [{"question": "Who?", "answer": "Ask your therapist"}]}))
    result = fix_spec_content(spec, RESTAURANT)
    assert _content(result, 1)["items"][0]["answer"] == "Ask your chef"
    assert result.fixes[0].field == "items[0].answer"


def test_longer_phrase_wins_over_its_suffix():
    spec = make_spec(NAV, ("content-text", {"body": "Meet our sous chef"}))
    result = fix_spec_content(spec, SPA)
    assert result.sub_type == "spa"
    assert _content(result, 1)["body"] == "Meet our lead therapist"
    assert len(result.fixes) == 1


def test_string_stats_are_coerced():
    stats = [{"value": "1,200+", "label": "Guests"}, {"value": "n/a", "label": "Awards"}, {"value": 5, "label": "Chefs"}]
    spec = make_spec(NAV, ("content-stats", {"stats": stats}))
    result = fix_spec_content(spec, SpecContext(site_type="business", description=""))
    values = [stat["value"] for stat in _content(result, 1)["stats"]]
    assert values == [1200, "n/a", 5]
    assert [(f.field, f.original, f.replacement, f.rule) for f in result.fixes] == [
        ("stats[0].value", "1,200+", "1200", "type-coerce"),
    ]


def test_unchanged_match_records_no_fix():
    rule = ReplacementRule(pattern=re.compile(r"\bmenu\b"), replacement="menu", rule="vocab-swap")
    vocabulary = replace(default_vocabulary(), vocab_replacements={"restaurant": (rule,)})
    spec = make_spec(NAV, ("content-text", {"headline": "See the menu"}))
    assert fix_spec_content(spec, RESTAURANT, vocabulary=vocabulary).fixes == []


def test_fixing_twice_changes_nothing_more():
    spec = make_spec(
        ("nav-sticky", {"logoText": "Trattoria"}),
        ("commerce-services", {"headline": "Our Services", "body": "Book an appointment with our therapist"}),
        ("team-grid", {"members": [{"name": "Alex", "role": "CEO"}]}),
        ("content-stats", {"stats": [{"value": "98%", "label": "Happy"}]}),
    )
    first = fix_spec_content(spec, RESTAURANT)
    assert first.fixes
    second = fix_spec_content(first.spec, RESTAURANT)
    assert second.fixes == []
    assert second.spec.model_dump() == first.spec.model_dump()


def test_generated_booking_site_needs_no_fixes(generator, load_intake):
    intake = load_intake("SESSION-booking-luxe-cuts")
    document = generator.generate(intake)
    result = fix_spec_content(document, SpecContext(site_type=intake.site_type, description=intake.description))
    assert result.sub_type == "booking"
    assert result.fixes == []


def test_parse_float_prefix():
    assert parse_float_prefix("1,200+") == 1200
    assert isinstance(parse_float_prefix("1,200+"), int)
    assert parse_float_prefix(" 4.9 ") == 4.9
    assert parse_float_prefix("98%") == 98
    assert parse_float_prefix("-3.5k") == -3.5
    assert parse_float_prefix("n/a") is None
    assert parse_float_prefix("1e999") is None


def test_parse_float_prefix_rejects_decimal_commas():
    assert parse_float_prefix("4,9") is None
    assert parse_float_prefix("1,25%") is None
    assert parse_float_prefix("1,200,000 visitors") == 1200000
    assert parse_float_prefix("2,500, and counting") == 2500


def test_decimal_comma_stat_is_left_for_review():
    spec = make_spec(NAV, ("content-stats", {"stats": [{"value": "4,9", "label": "Rating"}]}))
    result = fix_spec_content(spec, SpecContext(site_type="business", description=""))
    assert result.fixes == []
    assert _content(result, 1)["stats"][0]["value"] == "4,9"
