from pathlib import Path
from typing import List

from jinja2 import Environment, FileSystemLoader

from scanner import score_color, SCORE_HEX

_CSS_PATH = Path(__file__).parent / "static" / "style.css"
env = Environment(loader=FileSystemLoader(Path(__file__).parent / "templates"),
                  autoescape=True)

_PRINT_SCRIPT = "<script>window.addEventListener('load', () => window.print());</script>"


def skill_tags(skills: str) -> List[str]:
    """Comma-separated skills → trimmed tags; empty fragments are dropped."""
    return [s.strip() for s in (skills or "").split(",") if s.strip()]


def contact_line(data: dict) -> str:
    return " • ".join(v for v in (data.get("email"), data.get("phone"), data.get("location")) if v)


def stylesheet() -> str:
    return _CSS_PATH.read_text(encoding="utf-8")


def render_resume(data: dict, inline: bool = False) -> str:
    """Render résumé → HTML.  If inline=True, embed CSS in a <style> tag."""
    css_inline = stylesheet() if inline else ""
    return env.get_template("resume.html").render(
        r=data,
        contact=contact_line(data),
        skills=skill_tags(data.get("skills", "")),
        inline_css=css_inline,
    )


def printable_html(data: dict) -> str:
    """Standalone preview page that opens the browser's print dialog once loaded."""
    return render_resume(data, inline=True) + _PRINT_SCRIPT


def render_analysis(result) -> str:
    color = score_color(result.score)
    return env.get_template("analysis.html").render(
        a=result,
        color=color,
        color_hex=SCORE_HEX[color],
    )
