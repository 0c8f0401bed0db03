"""Render markdown into styled terminal text."""

from __future__ import annotations

from dataclasses import dataclass, field

from markdown_it import MarkdownIt
from markdown_it.token import Token

from codr.style import Color, Modifier, Style
from codr.text import Line, Span, Text

_PARSER = MarkdownIt("commonmark").enable("strikethrough")

_RULE = "———"


@dataclass(frozen=True)
class _MarkdownStyles:
    h1: Style = Style().fg(Color.CYAN).add_modifier(Modifier.BOLD).add_modifier(Modifier.UNDERLINED)
    h2: Style = Style().fg(Color.CYAN).add_modifier(Modifier.BOLD)
    h3: Style = Style().fg(Color.CYAN).add_modifier(Modifier.BOLD).add_modifier(Modifier.ITALIC)
    h4: Style = Style().fg(Color.CYAN).add_modifier(Modifier.ITALIC)
    h5: Style = Style().add_modifier(Modifier.ITALIC)
    h6: Style = Style().add_modifier(Modifier.ITALIC)
    code: Style = Style().fg(Color.from_rgb(180, 180, 180))
    emphasis: Style = Style().add_modifier(Modifier.ITALIC)
    strong: Style = Style().add_modifier(Modifier.BOLD)
    strikethrough: Style = Style().add_modifier(Modifier.CROSSED_OUT)
    ordered_list_marker: Style = Style().fg(Color.LIGHT_BLUE)
    unordered_list_marker: Style = Style()
    blockquote: Style = Style().fg(Color.GREEN).add_modifier(Modifier.ITALIC)

    def heading(self, level: int) -> Style:
        return (self.h1, self.h2, self.h3, self.h4, self.h5, self.h6)[level - 1]


@dataclass
class _IndentContext:
    prefix: list[Span]
    marker: list[Span] | None = None
    is_list: bool = False


def _lines(text: str) -> list[str]:
    """Split like a line iterator: no trailing empty line, CRLF tolerated."""
    if not text:
        return []
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def _language_token(info: str | None) -> str | None:
    if info is None:
        return None
    for separator in (",", " ", "\t"):
        info = info.split(separator, 1)[0]
    return info or None


@dataclass
class _Renderer:
    wrap_width: int
    text: Text = field(default_factory=Text)
    styles: _MarkdownStyles = field(default_factory=_MarkdownStyles)
    inline_styles: list[Style] = field(default_factory=list)
    indent_stack: list[_IndentContext] = field(default_factory=list)
    list_indices: list[int | None] = field(default_factory=list)
    needs_newline: bool = False
    pending_marker_line: bool = False
    in_paragraph: bool = False
    in_code_block: bool = False
    code_block_lang: str | None = None
    code_block_buffer: str = ""
    current_line: Line | None = None
    current_indent: list[Span] = field(default_factory=list)
    current_line_style: Style = Style()

    def run(self, tokens: list[Token]) -> Text:
        for token in tokens:
            self._block(token)
        self._flush_current_line()
        return self.text

    # -- token dispatch -------------------------------------------------

    def _block(self, token: Token) -> None:
        kind = token.type
        if kind == "paragraph_open":
            if not token.hidden:
                self._start_paragraph()
        elif kind == "paragraph_close":
            if not token.hidden:
                self._end_paragraph()
        elif kind == "heading_open":
            self._start_heading(int(token.tag[1:]))
        elif kind == "heading_close":
            self._end_heading()
        elif kind == "blockquote_open":
            self._start_blockquote()
        elif kind == "blockquote_close":
            self._end_blockquote()
        elif kind == "bullet_list_open":
            self._start_list(None)
        elif kind == "ordered_list_open":
            self._start_list(int(token.attrs.get("start", 1)))
        elif kind in ("bullet_list_close", "ordered_list_close"):
            self._end_list()
        elif kind == "list_item_open":
            self._start_item()
        elif kind == "list_item_close":
            self.indent_stack.pop()
            self.pending_marker_line = False
        elif kind == "fence":
            self._code_block(token.info, token.content)
        elif kind == "code_block":
            self._code_block(None, token.content)
        elif kind == "hr":
            self._rule()
        elif kind == "inline":
            for child in token.children or []:
                self._inline(child)

    def _inline(self, token: Token) -> None:
        kind = token.type
        if kind in ("text", "text_special"):
            self._text(token.content)
        elif kind == "code_inline":
            self._code(token.content)
        elif kind in ("softbreak", "hardbreak"):
            self._push_line(Line())
        elif kind == "em_open":
            self._push_inline_style(self.styles.emphasis)
        elif kind == "strong_open":
            self._push_inline_style(self.styles.strong)
        elif kind == "s_open":
            self._push_inline_style(self.styles.strikethrough)
        elif kind in ("em_close", "strong_close", "s_close"):
            self._pop_inline_style()
        elif kind == "image":
            for child in token.children or []:
                self._inline(child)

    # -- block elements -------------------------------------------------

    def _start_paragraph(self) -> None:
        if self.needs_newline:
            self._push_blank_line()
        self._push_line(Line())
        self.needs_newline = False
        self.in_paragraph = True

    def _end_paragraph(self) -> None:
        self.needs_newline = True
        self.in_paragraph = False
        self.pending_marker_line = False

    def _start_heading(self, level: int) -> None:
        if self.needs_newline:
            self._push_line(Line())
            self.needs_newline = False
        style = self.styles.heading(level)
        self._push_line(Line([Span("#" * level + " ", style)]))
        self._push_inline_style(style)
        self.needs_newline = False

    def _end_heading(self) -> None:
        self.needs_newline = True
        self._pop_inline_style()

    def _start_blockquote(self) -> None:
        if self.needs_newline:
            self._push_blank_line()
            self.needs_newline = False
        self.indent_stack.append(_IndentContext([Span("> ")]))

    def _end_blockquote(self) -> None:
        self.indent_stack.pop()
        self.needs_newline = True

    def _code_block(self, info: str | None, content: str) -> None:
        self._start_codeblock(info)
        if content:
            self._text(content)
        self._end_codeblock()

    def _start_codeblock(self, info: str | None) -> None:
        self._flush_current_line()
        if self.text.lines:
            self._push_blank_line()
        self.in_code_block = True
        self.code_block_lang = _language_token(info)
        self.code_block_buffer = ""
        self.needs_newline = True

    def _end_codeblock(self) -> None:
        code, self.code_block_buffer = self.code_block_buffer, ""
        if self.code_block_lang is not None:
            self.code_block_lang = None
            for line in _lines(code):
                self._push_line(Line())
                self._push_span(Span(line, self.styles.code))
        else:
            for line in _lines(code):
                self._push_line(Line())
                self._push_span(Span(line, self._inline_style()))
        self.needs_newline = True
        self.in_code_block = False

    def _start_list(self, start: int | None) -> None:
        if not self.list_indices and self.needs_newline:
            self._push_line(Line())
        self.list_indices.append(start)

    def _end_list(self) -> None:
        self.list_indices.pop()
        self.needs_newline = True

    def _start_item(self) -> None:
        self.pending_marker_line = True
        depth = len(self.list_indices)
        is_ordered = bool(self.list_indices) and self.list_indices[-1] is not None
        width = max(depth * 4 - 3, 0)
        marker: list[Span] | None = None
        if self.list_indices:
            index = self.list_indices[-1]
            if index is None:
                marker = [
                    Span(" " * max(width - 1, 0) + "- ", self.styles.unordered_list_marker)
                ]
            else:
                self.list_indices[-1] = index + 1
                marker = [Span(f"{index:>{width}}. ", self.styles.ordered_list_marker)]
        if depth == 0:
            prefix: list[Span] = []
        else:
            prefix = [Span(" " * (width + 2 if is_ordered else width + 1))]
        self.indent_stack.append(_IndentContext(prefix, marker, is_list=True))
        self.needs_newline = False

    def _rule(self) -> None:
        self._flush_current_line()
        if self.text.lines:
            self._push_blank_line()
        self._push_line(Line([Span(_RULE)]))
        self.needs_newline = True

    # -- inline content -------------------------------------------------

    def _text(self, content: str) -> None:
        if self.pending_marker_line:
            self._push_line(Line())
        self.pending_marker_line = False

        if self.in_code_block and self.code_block_lang is not None:
            self.code_block_buffer += content
            return

        for i, line in enumerate(_lines(content)):
            if self.needs_newline:
                self._push_line(Line())
                self.needs_newline = False
            if i > 0:
                self._push_line(Line())
            self._push_span(Span(line, self._inline_style()))
        self.needs_newline = False

    def _code(self, content: str) -> None:
        if self.pending_marker_line:
            self._push_line(Line())
            self.pending_marker_line = False
        self._push_span(Span(content, self.styles.code))

    def _inline_style(self) -> Style:
        return self.inline_styles[-1] if self.inline_styles else Style()

    def _push_inline_style(self, style: Style) -> None:
        self.inline_styles.append(self._inline_style().patch(style))

    def _pop_inline_style(self) -> None:
        if self.inline_styles:
            self.inline_styles.pop()

    # -- line assembly --------------------------------------------------

    def _flush_current_line(self) -> None:
        line, self.current_line = self.current_line, None
        if line is None:
            return
        style = self.current_line_style
        if not self.in_code_block:
            self.text.lines.extend(self._wrap_line(line, style))
        else:
            self.text.lines.append(Line([*self.current_indent, *line.spans], style))
        self.current_indent = []

    def _indent_width(self) -> int:
        return sum(span.width() for span in self.current_indent)

    def _wrap_line(self, line: Line, style: Style) -> list[Line]:
        result: list[Line] = []
        indent_width = self._indent_width()
        current = Line(list(self.current_indent))
        current_width = indent_width

        for span in line.spans:
            span_width = span.width()
            span_style = style.patch(span.style)

            if current_width + span_width > self.wrap_width and current_width > indent_width:
                result.append(current)
                current = Line(list(self.current_indent))
                current_width = indent_width

            if current_width + span_width > self.wrap_width:
                remaining = max(self.wrap_width - current_width, 0)
                if remaining > 0:
                    current.spans.append(Span(span.content[:remaining], span_style))
                result.append(current)
                current = Line(list(self.current_indent))
                current_width = indent_width
                rest = span.content[remaining:]
                if rest:
                    rest_span = Span(rest, span_style)
                    current.spans.append(rest_span)
                    current_width += rest_span.width()
            else:
                current.spans.append(Span(span.content, span_style))
                current_width += span_width

        if current.spans:
            result.append(current)
        return result or [Line()]

    def _push_line(self, line: Line) -> None:
        self._flush_current_line()
        blockquote_active = any(
            ">" in span.content for ctx in self.indent_stack for span in ctx.prefix
        )
        self.current_indent = self._prefix_spans(self.pending_marker_line)
        self.current_line_style = self.styles.blockquote if blockquote_active else line.style
        self.current_line = line
        self.pending_marker_line = False

    def _push_span(self, span: Span) -> None:
        if self.current_line is not None:
            self.current_line.spans.append(span)
        else:
            self._push_line(Line([span]))

    def _push_blank_line(self) -> None:
        self._flush_current_line()
        self.text.lines.append(Line())

    def _prefix_spans(self, pending_marker_line: bool) -> list[Span]:
        last_marker = None
        if pending_marker_line:
            last_marker = next(
                (i for i in reversed(range(len(self.indent_stack)))
                 if self.indent_stack[i].marker is not None),
                None,
            )
        last_list = next(
            (i for i in reversed(range(len(self.indent_stack))) if self.indent_stack[i].is_list),
            None,
        )

        prefix: list[Span] = []
        for i, ctx in enumerate(self.indent_stack):
            if pending_marker_line:
                if i == last_marker and ctx.marker is not None:
                    prefix.extend(ctx.marker)
                    continue
                if ctx.is_list and last_marker is not None and last_marker > i:
                    continue
            elif ctx.is_list and i != last_list:
                continue
            prefix.extend(ctx.prefix)
        return prefix


def render_markdown(text: str, width: int) -> Text:
    """Render markdown source as styled lines wrapped to ``width`` columns."""
    return _Renderer(wrap_width=width).run(_PARSER.parse(text))