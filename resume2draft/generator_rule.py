import re
from pathlib import Path
from jinja2 import Environment, FileSystemLoader

from resume2draft.schema_resume import ExtractedRecord

_CSS_PATH = Path(__file__).parent / "static" / "style.css"
_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*:")

def safe_url(url: str) -> str:
    """http(s) links pass, bare hosts get https://, any other scheme is dropped."""
    url = (url or "").strip()
    if not url:
        return ""
    if re.match(r"^https?://", url, re.I):
        return url
    if _SCHEME.match(url) or url.startswith("//"):
        return ""
    return "https://" + url

env = Environment(loader=FileSystemLoader(Path(__file__).parent / "templates"),
                  autoescape=True)
env.filters["safe_url"] = safe_url

def json_to_html(data: ExtractedRecord | dict, inline: bool = False) -> str:
    """Render résumé → HTML.  If inline=True, embed CSS in a <style> tag."""
    if isinstance(data, ExtractedRecord):
        data = data.to_dict()
    css_inline = _CSS_PATH.read_text() if inline else ""
    return env.get_template("base.html").render(r=data, inline_css=css_inline)
