"""
PDF ➜ raw text
– accepts a path or the uploaded bytes
– strips `(cid:N)` glyph artifacts
– suppresses verbose CropBox warnings from pdfplumber/pdfminer
"""
from io import BytesIO
from pathlib import Path
import re, logging, warnings, pdfplumber

from resume2draft.cleaner import normalize

# silence noisy PDF logging
logging.getLogger("pdfplumber").setLevel(logging.ERROR)
logging.getLogger("pdfminer").setLevel(logging.ERROR)
warnings.filterwarnings("ignore", category=UserWarning, module="pdfminer")

_CID_RE = re.compile(r"\(cid:\d+\)")

def pdf_to_text(source: str | Path | bytes) -> str:
    """Reading-order text of every page, normalised for the extractors."""
    if isinstance(source, (bytes, bytearray)):
        source = BytesIO(source)
    with pdfplumber.open(source) as pdf:
        pages = [p.extract_text() or "" for p in pdf.pages]
    return normalize(_CID_RE.sub("", "\n".join(pages)))
