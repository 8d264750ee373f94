"""Request/response Pydantic models."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

LIST_ITEMS = 3


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AnalyzeRequest(BaseModel):
    url: str | None = None


class ErrorResponse(BaseModel):
    error: str


class AnalysisBlock(CamelModel):
    strengths: list[str] = Field(min_length=LIST_ITEMS, max_length=LIST_ITEMS)
    weaknesses: list[str] = Field(min_length=LIST_ITEMS, max_length=LIST_ITEMS)
    recommendations: list[str] = Field(min_length=LIST_ITEMS, max_length=LIST_ITEMS)


class AnalysisReport(CamelModel):
    overall_score: int = Field(ge=0, le=100)
    eeat_score: int = Field(ge=0, le=100)
    helpful_content_score: int = Field(ge=0, le=100)
    visual_score: int = Field(ge=0, le=100)
    eeat_analysis: AnalysisBlock
    helpful_content_analysis: AnalysisBlock
    visual_analysis: AnalysisBlock


class PageMetadata(CamelModel):
    title: str = ""
    description: str = ""
    word_count: int = 0
    reading_time: int = 0
    has_author_info: bool = False
    has_dates: bool = False
    has_references: bool = False
    has_schema: bool = False


class AnalysisResponse(AnalysisReport):
    url: str
    metadata: PageMetadata = PageMetadata()
