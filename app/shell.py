"""
Session-wide application state: the one resume record and the active view.
"""

from __future__ import annotations
from typing import Dict, Any

from schema_resume import new_resume
from resume_editor import ResumeEditor
from scanner import Scanner

BUILDER, SCANNER = "builder", "scanner"
MODES = {BUILDER: "Resume Builder", SCANNER: "ATS Scanner"}

_STATE_KEY = "app_state"


class AppState:
    def __init__(self, resume: Dict[str, Any] | None = None):
        self.resume = resume if resume is not None else new_resume()
        self.mode = BUILDER
        self.editor = ResumeEditor(self.resume, self.set_resume)
        self.scanner = Scanner()

    def set_resume(self, data: Dict[str, Any]) -> None:
        self.resume = data

    def switch_mode(self, mode: str) -> None:
        if mode not in MODES:
            raise ValueError(f"Unknown view: {mode}")
        self.mode = mode


def get_app_state(session) -> AppState:
    """Fetch the AppState stored in a Streamlit session_state, creating it on first run."""
    if _STATE_KEY not in session:
        session[_STATE_KEY] = AppState()
    return session[_STATE_KEY]
