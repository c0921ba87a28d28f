from pydantic import BaseModel, Field


class OutfitIdea(BaseModel):
    title: str
    description: str
    items: list[str] = Field(min_length=1)


class ColorMatching(BaseModel):
    complementaryColors: list[str]
    avoidColors: list[str]


class SeasonalRecommendations(BaseModel):
    spring: str
    summer: str
    fall: str
    winter: str


class StyleSuggestion(BaseModel):
    outfitIdeas: list[OutfitIdea] = Field(min_length=1)
    colorMatching: ColorMatching
    seasonalRecommendations: SeasonalRecommendations
    moodBoards: list[str] = Field(default_factory=list)


class ImageSearchResult(BaseModel):
    url: str
    title: str
    source: str = "Web"


class OutfitDetails(BaseModel):
    title: str
    description: str
    items: list[str]
