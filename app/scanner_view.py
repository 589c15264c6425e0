import streamlit as st

from charts import score_gauge, skill_gap_radar
from preview import render_analysis
from scanner import Scanner


def _on_scan(scanner: Scanner, resume: dict, gateway):
    scanner.job_description = st.session_state.job_description
    with st.spinner("🔍 Analyzing..."):
        scanner.scan(resume, gateway)


def render_scanner(scanner: Scanner, resume: dict, gateway):
    st.header("🔍 ATS Scanner")
    st.markdown(
        "Paste the job description below. We will analyze your current resume "
        "(from the Builder tab) against it."
    )

    if "job_description" not in st.session_state:
        st.session_state.job_description = scanner.job_description
    st.text_area(
        "Job Description",
        key="job_description",
        height=250,
        placeholder="Paste the full job description here...",
    )

    st.button(
        "🤖 Analyzing..." if scanner.is_scanning else "📤 Scan Resume",
        type="primary",
        disabled=not scanner.can_scan(resume),
        on_click=_on_scan,
        args=(scanner, resume, gateway),
    )
    if not resume.get("full_name"):
        st.caption("Add your full name in the Resume Builder to enable scanning.")

    if scanner.error:
        st.error(f"❌ {scanner.error}")

    result = scanner.result
    if result is None:
        return

    col_score, col_radar = st.columns([1, 2])
    with col_score:
        st.subheader("Match Score")
        st.plotly_chart(score_gauge(result), use_container_width=True)
    with col_radar:
        st.subheader("Detailed Breakdown")
        st.plotly_chart(skill_gap_radar(result), use_container_width=True)

    st.html(render_analysis(result))
