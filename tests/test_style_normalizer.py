from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from stylist_common.tools.fallback_data import (  # noqa: E402
    DEFAULT_COLOR_MATCHING,
    DEFAULT_OUTFIT_IDEA,
    default_style_suggestion,
)
from stylist_common.tools.style_normalizer import normalize_style_suggestion  # noqa: E402


def test_normalizing_default_is_identity():
    default = default_style_suggestion()

    assert normalize_style_suggestion(default) == default


def test_normalizing_twice_is_stable():
    raw = {
        "outfitIdeas": [{"title": "Night Out", "items": ["Satin slip dress", 3, None]}],
        "colorMatching": {"complementaryColors": ["#101010", 7]},
        "seasonalRecommendations": {"fall": "Suede boots", "summer": 12},
    }

    once = normalize_style_suggestion(raw)

    assert normalize_style_suggestion(once) == once


def test_non_list_outfit_ideas_use_two_defaults():
    result = normalize_style_suggestion({"outfitIdeas": {"title": "Not a list"}})

    assert [idea["title"] for idea in result["outfitIdeas"]] == ["Classic Versatile Look", "Smart Casual"]


def test_empty_outfit_ideas_inject_one_default():
    result = normalize_style_suggestion({"outfitIdeas": []})

    assert result["outfitIdeas"] == [
        {
            "title": DEFAULT_OUTFIT_IDEA["title"],
            "description": DEFAULT_OUTFIT_IDEA["description"],
            "items": list(DEFAULT_OUTFIT_IDEA["items"]),
        }
    ]


def test_outfit_fields_are_filtered_not_coerced():
    result = normalize_style_suggestion(
        {
            "outfitIdeas": [
                {"title": 99, "description": "Kept", "items": ["Loafers", 4, {"x": 1}, "Blazer"]},
                {"title": "Only numbers", "items": [1, 2]},
                {"title": "No items", "items": "Loafers"},
                "not an object",
            ]
        }
    )

    first, second, third, fourth = result["outfitIdeas"]
    assert first["title"] == DEFAULT_OUTFIT_IDEA["title"]
    assert first["description"] == "Kept"
    assert first["items"] == ["Loafers", "Blazer"]
    assert second["items"] == list(DEFAULT_OUTFIT_IDEA["items"])
    assert third["items"] == list(DEFAULT_OUTFIT_IDEA["items"])
    assert fourth["title"] == DEFAULT_OUTFIT_IDEA["title"]


def test_colors_only_replaced_by_non_empty_lists():
    result = normalize_style_suggestion(
        {"colorMatching": {"complementaryColors": [], "avoidColors": ["#ABCDEF", 12]}}
    )

    assert result["colorMatching"]["complementaryColors"] == list(DEFAULT_COLOR_MATCHING["complementaryColors"])
    assert result["colorMatching"]["avoidColors"] == ["#ABCDEF"]


def test_seasons_require_string_values():
    result = normalize_style_suggestion(
        {"seasonalRecommendations": {"spring": "Trench coat", "summer": None, "monsoon": "Umbrella"}}
    )

    assert result["seasonalRecommendations"] == {
        "spring": "Trench coat",
        "summer": "Breathable fabrics and lighter colors",
        "fall": "Earth tones and light jackets",
        "winter": "Heavier layers and darker colors",
    }


def test_non_mapping_input_is_treated_as_empty():
    for raw in (None, [], "text", 3.5):
        result = normalize_style_suggestion(raw)
        assert len(result["outfitIdeas"]) == 2
        assert result["moodBoards"] == []


def test_defaults_are_fresh_copies():
    first = default_style_suggestion()
    first["outfitIdeas"][0]["items"].append("Mutated")
    first["colorMatching"]["avoidColors"].clear()

    second = default_style_suggestion()

    assert "Mutated" not in second["outfitIdeas"][0]["items"]
    assert second["colorMatching"]["avoidColors"] == ["#FF5733", "#D1B000"]
