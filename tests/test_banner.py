from codr.buffer import Buffer, Rect
from codr.style import Modifier
from codr.theme import Theme
from codr.widgets.banner import AgentStatus, BannerWidget

WIDTH = 40


def _render(**kwargs):
    area = Rect(0, 0, kwargs.pop("width", WIDTH), 3)
    buf = Buffer(area)
    params = {"theme": Theme.dark(), "model_name": "gpt", "role": "SAFE"}
    params.update(kwargs)
    BannerWidget(**params).render(area, buf)
    return buf


def test_title_line_layout():
    buf = _render()
    assert buf.row_text(0).startswith("codr gpt ● ● [SAFE]")


def test_separator_on_last_row():
    buf = _render()
    assert buf.row_text(2) == "─" * WIDTH


def test_idle_with_no_usage_leaves_second_row_blank():
    buf = _render()
    assert buf.row_text(1).strip() == ""


def test_role_colours():
    theme = Theme.dark()
    row = _render().row_text(0)
    x = row.index("SAFE")
    assert _render().cell(x, 0).style.fg_color == theme.success

    row = _render(role="YOLO").row_text(0)
    x = row.index("YOLO")
    assert _render(role="YOLO").cell(x, 0).style.fg_color == theme.error

    row = _render(role="PLAN").row_text(0)
    x = row.index("PLAN")
    assert _render(role="PLAN").cell(x, 0).style.fg_color == theme.secondary


def test_unknown_role_uses_dim_style():
    theme = Theme.dark()
    buf = _render(role="OTHER")
    x = buf.row_text(0).index("OTHER")
    style = buf.cell(x, 0).style
    assert style.fg_color == theme.dimmed
    assert Modifier.DIM in style.add_modifiers


def test_status_dot_colour_follows_agent_status():
    theme = Theme.dark()
    buf = _render(agent_status=AgentStatus.ERROR)
    x = buf.row_text(0).index("●")
    assert buf.cell(x, 0).style.fg_color == theme.error
    buf = _render(agent_status=AgentStatus.IDLE)
    assert buf.cell(x, 0).style.fg_color == theme.dimmed


def test_disconnected_indicator():
    assert "○" in _render(connected=False).row_text(0)
    assert "○" not in _render(connected=True).row_text(0)


def test_token_count_shown():
    assert "1234 tokens" in _render(tokens=1234).row_text(1)


def test_cost_shown_with_four_decimals():
    assert "$0.5000" in _render(cost=0.5).row_text(1)


def test_zero_cost_not_shown():
    assert "$" not in _render(cost=0.0, tokens=5).row_text(1)


def test_working_message_while_running():
    buf = _render(agent_status=AgentStatus.RUNNING, clock=lambda: 0.0)
    assert buf.row_text(1).startswith("discombambulating...")


def test_working_message_changes_every_three_seconds():
    buf = _render(agent_status=AgentStatus.STREAMING, clock=lambda: 3.0)
    assert buf.row_text(1).startswith("contemplating...")


def test_short_cwd_shown_whole():
    assert _render(cwd="/tmp").row_text(1).startswith("/tmp  ")


def test_long_cwd_truncated_from_the_left():
    width = 20
    cwd = "/very/long/path/to/somewhere"
    buf = _render(cwd=cwd, width=width)
    shown = buf.row_text(1).split("  ")[0]
    assert shown.startswith("…")
    assert len(shown) == width // 2
    assert cwd.endswith(shown[1:])