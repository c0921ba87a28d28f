import random
from collections.abc import Mapping
from types import MappingProxyType

PRIVACY_NOTE = "Your images were only used for generating these suggestions and were not stored on our servers."

SEASONS = ("spring", "summer", "fall", "winter")

DEFAULT_OUTFIT_IDEA: Mapping = MappingProxyType(
    {
        "title": "Classic Versatile Look",
        "description": "A timeless outfit that works for many occasions",
        "items": (
            "Clean, minimal white or neutral top",
            "Well-fitted dark jeans or trousers",
            "Simple, quality footwear in a neutral color",
        ),
    }
)

SMART_CASUAL_IDEA: Mapping = MappingProxyType(
    {
        "title": "Smart Casual",
        "description": "Perfect for semi-formal occasions or office environments",
        "items": (
            "Button-down shirt in a neutral color",
            "Chinos or dress pants",
            "Leather shoes or clean sneakers",
        ),
    }
)

RELAXED_WEEKEND_IDEA: Mapping = MappingProxyType(
    {
        "title": "Relaxed Weekend",
        "description": "Comfortable yet put-together for casual outings",
        "items": (
            "Quality t-shirt or casual top",
            "Well-fitted jeans or casual pants",
            "Casual footwear suited to the season",
        ),
    }
)

DEFAULT_COLOR_MATCHING: Mapping = MappingProxyType(
    {
        "complementaryColors": ("#000000", "#FFFFFF", "#0073CF"),
        "avoidColors": ("#FF5733", "#D1B000"),
    }
)

DEFAULT_SEASONAL_RECOMMENDATIONS: Mapping = MappingProxyType(
    {
        "spring": "Light layers and bright accents",
        "summer": "Breathable fabrics and lighter colors",
        "fall": "Earth tones and light jackets",
        "winter": "Heavier layers and darker colors",
    }
)

# Used by field-level extraction when the model text only yields titles.
EXTRACTED_DESCRIPTION_PLACEHOLDER = "Stylish outfit recommendation"
EXTRACTED_ITEMS_PLACEHOLDER = (
    "Style recommendation extracted from AI response",
    "Pair with complementary accessories",
    "Consider layering options appropriate for the season",
)

MOCK_IMAGE_SOURCE = "Mock Image"

FASHION_IMAGE_MAP: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "casual": (
            "https://images.unsplash.com/photo-1515886657613-9f3515b0c78f",
            "https://images.unsplash.com/photo-1603344797033-f0f4f587ab60",
            "https://images.unsplash.com/photo-1523381210434-271e8be1f52b",
        ),
        "formal": (
            "https://images.unsplash.com/photo-1593032465175-481ac7f401f0",
            "https://images.unsplash.com/photo-1507679799987-c73779587ccf",
            "https://images.unsplash.com/photo-1617127365659-c47fa864d8bc",
        ),
        "spring": (
            "https://images.unsplash.com/photo-1523381294911-8d3cead13475",
            "https://images.unsplash.com/photo-1596992879119-badb0e683b75",
            "https://images.unsplash.com/photo-1556905055-8f358a7a47b2",
        ),
        "summer": (
            "https://images.unsplash.com/photo-1534119428213-bd2626145164",
            "https://images.unsplash.com/photo-1509631179647-0177331693ae",
            "https://images.unsplash.com/photo-1601370552761-eda0ff296db6",
        ),
        "fall": (
            "https://images.unsplash.com/photo-1530041539828-114de669390e",
            "https://images.unsplash.com/photo-1520006403909-838d6b92c22e",
            "https://images.unsplash.com/photo-1511735111819-9a3f7709049c",
        ),
        "winter": (
            "https://images.unsplash.com/photo-1577471488278-16eec37ffcc2",
            "https://images.unsplash.com/photo-1548883354-7622d03aca27",
            "https://images.unsplash.com/photo-1548430395-ec39eaf2aa1a",
        ),
        "jeans": (
            "https://images.unsplash.com/photo-1511105043137-7e66f28270e3",
            "https://images.unsplash.com/photo-1584370848010-d7fe6bc767ec",
            "https://images.unsplash.com/photo-1598554747436-c9293d6a588f",
        ),
        "dress": (
            "https://images.unsplash.com/photo-1585487000160-6ebcfceb0d03",
            "https://images.unsplash.com/photo-1623335082260-16256c0dd220",
            "https://images.unsplash.com/photo-1567401893414-76b7b1e5a7a5",
        ),
        "jacket": (
            "https://images.unsplash.com/photo-1548126032-079a0fb0099d",
            "https://images.unsplash.com/photo-1591047139829-d91aecb6caea",
            "https://images.unsplash.com/photo-1578681994506-b8f463449011",
        ),
        "shoes": (
            "https://images.unsplash.com/photo-1560769629-975ec94e6a86",
            "https://images.unsplash.com/photo-1542280756-74b2f55e73ab",
            "https://images.unsplash.com/photo-1543163521-1bf539c55dd2",
        ),
        "accessories": (
            "https://images.unsplash.com/photo-1584287882055-7c13efff2c86",
            "https://images.unsplash.com/photo-1601923157214-ca717e8e576c",
            "https://images.unsplash.com/photo-1611591437281-460bfbe1220a",
        ),
    }
)


def outfit_idea(template: Mapping) -> dict:
    return {
        "title": template["title"],
        "description": template["description"],
        "items": list(template["items"]),
    }


def default_color_matching() -> dict:
    return {key: list(colors) for key, colors in DEFAULT_COLOR_MATCHING.items()}


def default_seasonal_recommendations() -> dict:
    return dict(DEFAULT_SEASONAL_RECOMMENDATIONS)


def default_style_suggestion() -> dict:
    """Return a fresh copy of the suggestion served when nothing usable came back."""
    return {
        "outfitIdeas": [
            outfit_idea(DEFAULT_OUTFIT_IDEA),
            outfit_idea(SMART_CASUAL_IDEA),
            outfit_idea(RELAXED_WEEKEND_IDEA),
        ],
        "colorMatching": default_color_matching(),
        "seasonalRecommendations": default_seasonal_recommendations(),
        "moodBoards": [],
    }


def mock_image_pool(query: str) -> list[str]:
    tokens = query.lower().split()

    pool: list[str] = []
    for token in tokens:
        for category, urls in FASHION_IMAGE_MAP.items():
            if category in token or token in category:
                for url in urls:
                    if url not in pool:
                        pool.append(url)

    if pool:
        return pool
    return [url for urls in FASHION_IMAGE_MAP.values() for url in urls]


def generate_mock_images(query: str, limit: int, rng: random.Random | None = None) -> list[dict]:
    """Placeholder fashion images for a query, used when live search is unavailable."""
    pool = mock_image_pool(query)
    shuffled = list(pool)
    (rng or random).shuffle(shuffled)

    return [
        {
            "url": url,
            "title": f"{query} - Fashion style {idx + 1}",
            "source": MOCK_IMAGE_SOURCE,
        }
        for idx, url in enumerate(shuffled[: max(0, limit)])
    ]
