# teamdraw/services/share_service.py
"""
Plain-text summary of an allocation, and links to hand it to other apps.
"""
import os
from typing import Dict
from urllib.parse import quote

from mako.lookup import TemplateLookup

from teamdraw.config.settings import settings
from teamdraw.domain.models import AllocationResult

TEMPLATE_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "templates")

templates = TemplateLookup(
    directories=[TEMPLATE_DIR],
    input_encoding="utf-8",
)


def render_summary(result: AllocationResult, title: str = None) -> str:
    template = templates.get_template("summary.txt.mako")
    return template.render(
        result=result,
        stats=result.statistics,
        title=title or settings.SHARE_TITLE,
    )


def share_links(text: str, title: str = None) -> Dict[str, str]:
    """WhatsApp and e-mail links carrying the summary text."""
    title = title or settings.SHARE_TITLE
    return {
        "whatsapp": f"https://wa.me/?text={quote(text)}",
        "email": f"mailto:?subject={quote(title)}&body={quote(text)}",
    }
