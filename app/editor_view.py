"""
Resume Builder view: form on the left, live preview on the right.

Widgets write through ResumeEditor callbacks, so the shell's resume is
updated on every change without any extra sync step.
"""

import streamlit as st

from preview import render_resume, printable_html
from resume_editor import ResumeEditor

PERSONAL_FIELDS = [
    ("full_name", "Full Name"),
    ("headline", "Job Title (e.g. Software Engineer)"),
    ("email", "Email"),
    ("phone", "Phone"),
    ("location", "Location (City, Country)"),
]

EXPERIENCE_FIELDS = [
    ("company", "Company"),
    ("role", "Role"),
    ("start_date", "Start Date"),
    ("end_date", "End Date"),
]


def _field_key(field: str) -> str:
    return f"resume_{field}"


def _exp_key(exp_id: str, field: str) -> str:
    return f"exp_{exp_id}_{field}"


def _seed(key: str, value: str) -> None:
    # Streamlit drops widget keys for views that were not rendered last run
    if key not in st.session_state:
        st.session_state[key] = value


# --- Callbacks ---
def _on_field_change(editor: ResumeEditor, field: str):
    editor.change_field(field, st.session_state[_field_key(field)])


def _on_exp_change(editor: ResumeEditor, exp_id: str, field: str):
    editor.change_experience(exp_id, field, st.session_state[_exp_key(exp_id, field)])


def _on_enhance(editor: ResumeEditor, gateway):
    with st.spinner("✨ Enhancing summary..."):
        called = editor.enhance_summary(gateway)
    if called:
        st.session_state[_field_key("summary")] = editor.data["summary"]


def _on_add_experience(editor: ResumeEditor):
    editor.add_experience()


def _on_remove_experience(editor: ResumeEditor, exp_id: str):
    editor.remove_experience(exp_id)


def _text_input(editor: ResumeEditor, field: str, label: str):
    key = _field_key(field)
    _seed(key, editor.data[field])
    st.text_input(label, key=key, on_change=_on_field_change, args=(editor, field))


def _experience_group(editor: ResumeEditor, exp: dict):
    exp_id = exp["id"]
    with st.container(border=True):
        cols = st.columns(2)
        for i, (field, label) in enumerate(EXPERIENCE_FIELDS):
            key = _exp_key(exp_id, field)
            _seed(key, exp[field])
            cols[i % 2].text_input(label, key=key, on_change=_on_exp_change, args=(editor, exp_id, field))

        key = _exp_key(exp_id, "description")
        _seed(key, exp["description"])
        st.text_area(
            "Description",
            key=key,
            placeholder="Description of responsibilities...",
            on_change=_on_exp_change,
            args=(editor, exp_id, "description"),
        )
        st.button("🗑️ Remove", key=f"remove_{exp_id}", on_click=_on_remove_experience, args=(editor, exp_id))


def render_editor(editor: ResumeEditor, gateway):
    col_form, col_preview = st.columns(2)

    with col_form:
        head, export = st.columns([3, 1])
        head.subheader("Resume Editor")
        export_clicked = export.button("⬇️ Export PDF")

        st.markdown("#### Personal Info")
        for field, label in PERSONAL_FIELDS:
            _text_input(editor, field, label)

        st.markdown("#### Professional Summary")
        _seed(_field_key("summary"), editor.data["summary"])
        st.text_area(
            "Summary",
            key=_field_key("summary"),
            placeholder="Brief professional summary...",
            on_change=_on_field_change,
            args=(editor, "summary"),
        )
        st.button(
            "✨ Enhancing..." if editor.is_enhancing else "✨ AI Enhance",
            disabled=not editor.can_enhance,
            on_click=_on_enhance,
            args=(editor, gateway),
        )

        st.markdown("#### Experience")
        for exp in editor.data["experience"]:
            _experience_group(editor, exp)
        st.button("➕ Add Experience", on_click=_on_add_experience, args=(editor,))

        st.markdown("#### Skills")
        _seed(_field_key("skills"), editor.data["skills"])
        st.text_area(
            "Skills",
            key=_field_key("skills"),
            placeholder="Java, React, Team Leadership, Project Management (Comma separated)",
            on_change=_on_field_change,
            args=(editor, "skills"),
        )

    with col_preview:
        st.components.v1.html(render_resume(editor.data, inline=True), height=900, scrolling=True)

    if export_clicked:
        # the frame prints its own document, i.e. only the preview
        st.components.v1.html(printable_html(editor.data), height=0)
