"""
Analysis result models returned by the job-match scan.

The JSON field names (camelCase aliases) are the contract sent to the LLM as a
structured-output schema, so they must not change.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

SKILL_GAP_CATEGORIES = ["Technical", "Soft Skills", "Experience", "Education", "Domain Knowledge"]


def _as_int(value, low: int, high: int):
    if isinstance(value, float):
        value = round(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return max(low, min(high, value))
    return value


class SkillGap(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    category: str
    score: int

    @field_validator("score", mode="before")
    @classmethod
    def _clamp(cls, v):
        return _as_int(v, 1, 100)


class AnalysisResult(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    score: int = Field(description="Overall match score from 0 to 100")
    match_summary: str = Field(alias="matchSummary", description="2-3 sentences summarizing the fit")
    missing_keywords: List[str] = Field(
        alias="missingKeywords",
        description="List of important keywords missing from the resume",
    )
    suggestions: List[str] = Field(description="List of actionable improvements")
    skill_gap_analysis: List[SkillGap] = Field(alias="skillGapAnalysis")

    @field_validator("score", mode="before")
    @classmethod
    def _clamp(cls, v):
        return _as_int(v, 0, 100)


def analysis_json_schema() -> dict:
    """JSON schema (wire names) handed to the provider's structured-output mode."""
    return AnalysisResult.model_json_schema(by_alias=True)
