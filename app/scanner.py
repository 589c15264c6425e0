"""
ATS scanner state: job description, last analysis, last error.

status moves idle → scanning → success | failed; a new scan from success or
failed clears the previous result and error before the call is made.
"""

from __future__ import annotations
import logging
from typing import Dict, Any

from ai_gateway import GatewayError

logger = logging.getLogger(__name__)

IDLE, SCANNING, SUCCESS, FAILED = "idle", "scanning", "success", "failed"

SCORE_HEX = {
    "green": "#22c55e",
    "yellow": "#eab308",
    "red": "#ef4444",
}


def score_color(score: int) -> str:
    if score >= 80:
        return "green"
    if score >= 60:
        return "yellow"
    return "red"


def format_resume_for_ai(data: Dict[str, Any]) -> str:
    lines = [f"Name: {data['full_name']}"]
    if data.get("headline"):
        lines.append(f"Title: {data['headline']}")
    lines.append(f"Summary: {data['summary']}")
    lines.append(f"Skills: {data['skills']}")
    lines.append("Experience:")
    for exp in data["experience"]:
        lines.append(
            f"{exp['role']} at {exp['company']} "
            f"({exp['start_date']}-{exp['end_date']}): {exp['description']}"
        )
    if data.get("education"):
        lines.append("Education:")
        for edu in data["education"]:
            lines.append(f"{edu['degree']}, {edu['school']} ({edu['graduation_date']})")
    return "\n".join(lines) + "\n"


class Scanner:
    def __init__(self):
        self.job_description = ""
        self.status = IDLE
        self.result = None
        self.error = ""

    @property
    def is_scanning(self) -> bool:
        return self.status == SCANNING

    def can_scan(self, resume: Dict[str, Any]) -> bool:
        return bool(resume.get("full_name")) and not self.is_scanning

    def _fail(self, message: str) -> None:
        self.result = None
        self.error = message
        self.status = FAILED

    def scan(self, resume: Dict[str, Any], gateway) -> None:
        if self.is_scanning:
            return
        if not self.job_description.strip():
            self._fail("Please enter a Job Description.")
            return
        if not resume.get("full_name"):
            self._fail("Please add your full name in the Resume Builder first.")
            return

        self.result = None
        self.error = ""
        self.status = SCANNING
        logger.info("Scanning resume against job description (%d chars)", len(self.job_description))
        try:
            result = gateway.analyze(format_resume_for_ai(resume), self.job_description)
        except GatewayError as e:
            self._fail(str(e) or "Failed to analyze resume.")
            return
        except Exception as e:
            logger.exception("Unexpected error during scan")
            self._fail(f"An unexpected error occurred during analysis: {e}")
            return
        self.result = result
        self.status = SUCCESS
