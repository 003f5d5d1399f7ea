"""Resume quality metrics."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

SUBSCORE_MAX = 25
SCORE_MAX = 100


class QualityMetrics(BaseModel):
    """Composite 0-100 score; always the sum of the four 0-25 subscores."""

    model_config = ConfigDict(frozen=True)

    score: int = Field(default=0, ge=0, le=SCORE_MAX, description="Overall quality score")
    completeness: int = Field(default=0, ge=0, le=SUBSCORE_MAX, description="Contact and section coverage")
    clarity: int = Field(default=0, ge=0, le=SUBSCORE_MAX, description="Length and structure")
    relevance: int = Field(default=0, ge=0, le=SUBSCORE_MAX, description="Technical keyword relevance")
    formatting: int = Field(default=0, ge=0, le=SUBSCORE_MAX, description="Sections, dates and contact markers")

    @model_validator(mode="after")
    def _score_is_sum(self) -> "QualityMetrics":
        total = self.completeness + self.clarity + self.relevance + self.formatting
        if self.score != min(SCORE_MAX, total):
            raise ValueError(f"score {self.score} does not equal subscore sum {total}")
        return self
