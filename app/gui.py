import streamlit as st

# MUST be the first Streamlit command
st.set_page_config(layout="wide", page_title="ResuMatch.AI", page_icon="📄")

import logging

from ai_gateway import AIGateway
from config import load_settings, configure_logging
from editor_view import render_editor
from preview import stylesheet
from scanner_view import render_scanner
from shell import get_app_state, MODES, BUILDER

logger = logging.getLogger(__name__)


@st.cache_resource
def get_gateway() -> AIGateway:
    """One gateway (and LLM client) per server process."""
    settings = load_settings()
    configure_logging(settings)
    logger.info("Using %s model %s", settings.provider, settings.model)
    return AIGateway(settings)


gateway = get_gateway()
state = get_app_state(st.session_state)

st.markdown(f"<style>{stylesheet()}</style>", unsafe_allow_html=True)
st.markdown("""
<style>
/* Hide streamlit branding */
#MainMenu {visibility: hidden;}
footer {visibility: hidden;}
</style>
""", unsafe_allow_html=True)

st.title("📄 ResuMatch.AI")

if not gateway.settings.has_credential:
    st.warning("⚠️ No OPENAI_API_KEY configured. Scanning will fail until one is set.")


def on_view_change_callback():
    state.switch_mode(st.session_state.selected_view)


if "selected_view" not in st.session_state:
    st.session_state.selected_view = state.mode
st.radio(
    "View",
    options=list(MODES),
    format_func=MODES.get,
    key="selected_view",
    horizontal=True,
    label_visibility="collapsed",
    on_change=on_view_change_callback,
)
st.divider()

if state.mode == BUILDER:
    render_editor(state.editor, gateway)
else:
    st.markdown("Optimize your resume for specific job descriptions using AI.")
    render_scanner(state.scanner, state.resume, gateway)
