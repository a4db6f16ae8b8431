# tests/test_share.py
from urllib.parse import unquote

from teamdraw.domain.allocation import balance_statistics
from teamdraw.domain.models import AllocationResult, Group, Participant
from teamdraw.services.share_service import render_summary, share_links


def sample_result():
    ana = Participant(name="Ana", score=5, category="A")
    bo = Participant(name="Bo", score=3, category="B")
    return AllocationResult(
        groups=[Group(index=0, members=[ana]), Group(index=1, members=[bo])],
        group_scores=[5, 3],
        statistics=balance_statistics([5, 3]),
    )


def test_summary_lists_groups_and_members():
    text = render_summary(sample_result(), title="Teams drawn")
    lines = text.splitlines()
    assert lines[0] == "TEAMS DRAWN"
    assert "GROUP 1 (Score: 5)" in lines
    assert "• Ana (5) - A" in lines
    assert "GROUP 2 (Score: 3)" in lines
    assert "• Bo (3) - B" in lines
    assert lines.index("GROUP 1 (Score: 5)") < lines.index("GROUP 2 (Score: 3)")


def test_summary_rounds_statistics():
    text = render_summary(sample_result())
    assert "Balance: Average 4.0 | Difference 2.0 | Std dev 1.00" in text


def test_share_links_encode_text():
    text = "GROUP 1 (Score: 5)\n• Ana (5) - A\n"
    links = share_links(text, title="Teams drawn")
    assert links["whatsapp"].startswith("https://wa.me/?text=")
    assert "\n" not in links["whatsapp"]
    assert unquote(links["whatsapp"].split("text=", 1)[1]) == text
    assert links["email"].startswith("mailto:?subject=Teams%20drawn&body=")
    assert unquote(links["email"].split("body=", 1)[1]) == text
