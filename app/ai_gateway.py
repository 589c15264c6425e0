"""
AI gateway: turns resume data into prompts and LLM replies into typed results.

• analyze()         – structured job-match analysis (AnalysisResult)
• enhance_summary() – free-text rewrite of the professional summary

Each call is a single best-effort request: no retry, no caching.

Note the asymmetry on a missing credential: analyze() raises
ConfigurationError, while enhance_summary() returns a placeholder string.
"""

from __future__ import annotations
import json
import logging
import textwrap

from pydantic import ValidationError

from config import Settings
from llm_client import LLMClient, get_llm_client
from schema_analysis import AnalysisResult, SKILL_GAP_CATEGORIES, analysis_json_schema

logger = logging.getLogger(__name__)

MISSING_KEY_PLACEHOLDER = "API Key missing"

_ANALYZE_PROMPT = textwrap.dedent(
    """\
    You are an expert Applicant Tracking System (ATS) and Career Coach.
    Analyze the following Resume text against the Job Description.

    RESUME:
    {resume}

    JOB DESCRIPTION:
    {job}

    Provide a detailed analysis in strict JSON format.
    1. Calculate a match score (0-100).
    2. Provide a brief summary of the fit (2-3 sentences).
    3. List critical missing keywords found in the JD but not the resume.
    4. Provide specific, actionable suggestions to improve the resume for this role.
    5. Analyze skill gaps in 5 categories: {categories} with a score of 1-100 for each.
    """
)

_ENHANCE_PROMPT = (
    "Rewrite the following professional summary to be more impactful, concise, "
    "and result-oriented for a {role} role. Keep it under 50 words.\n\n"
    "Current Summary: {summary}"
)


class GatewayError(Exception):
    """Base class for every failure the scanner reports to the user."""


class ConfigurationError(GatewayError):
    pass


class ServiceError(GatewayError):
    """The LLM call itself failed (network, auth, rate limit, ...)."""


class MalformedResponseError(GatewayError):
    """The LLM answered, but not with a usable analysis."""


def build_analysis_prompt(resume_text: str, job_description: str) -> str:
    categories = ", ".join(f"'{c}'" for c in SKILL_GAP_CATEGORIES)
    return _ANALYZE_PROMPT.format(resume=resume_text, job=job_description, categories=categories)


def build_enhance_prompt(current_summary: str, role_label: str) -> str:
    return _ENHANCE_PROMPT.format(role=role_label, summary=current_summary)


def parse_analysis(raw: str | None) -> AnalysisResult:
    if not raw or not raw.strip():
        raise MalformedResponseError("No response from AI")
    try:
        return AnalysisResult.model_validate(json.loads(raw))
    except (json.JSONDecodeError, ValidationError, TypeError) as e:
        raise MalformedResponseError(f"Malformed response from AI: {e}") from e


class AIGateway:
    def __init__(self, settings: Settings, client: LLMClient | None = None):
        self.settings = settings
        self._client = client

    @property
    def client(self) -> LLMClient:
        # built on first use so a missing key never reaches the provider SDK
        if self._client is None:
            self._client = get_llm_client(self.settings)
        return self._client

    def analyze(self, resume_text: str, job_description: str) -> AnalysisResult:
        if not self.settings.has_credential:
            raise ConfigurationError(
                "API Key is missing. Please check your environment configuration (OPENAI_API_KEY)."
            )

        messages = [{"role": "user", "content": build_analysis_prompt(resume_text, job_description)}]
        try:
            rsp = self.client.chat(
                model=self.settings.model,
                messages=messages,
                response_schema=analysis_json_schema(),
            )
        except Exception as e:
            logger.exception("LLM analysis request failed")
            raise ServiceError(str(e) or "Failed to analyze resume.") from e

        try:
            result = parse_analysis(rsp.message.content)
        except MalformedResponseError:
            logger.exception("LLM analysis response could not be parsed")
            raise
        logger.info("Analysis complete: score=%d, %d missing keywords",
                    result.score, len(result.missing_keywords))
        return result

    def enhance_summary(self, current_summary: str, role_label: str) -> str:
        if not self.settings.has_credential:
            return MISSING_KEY_PLACEHOLDER

        messages = [{"role": "user", "content": build_enhance_prompt(current_summary, role_label)}]
        rsp = self.client.chat(model=self.settings.model, messages=messages)
        text = (rsp.message.content or "").strip()
        return text or current_summary
