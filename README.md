# codr

Terminal user-interface pieces for a chat-style coding assistant. Everything
draws into an in-memory cell buffer, so layouts can be built and inspected
without a real terminal.

What is inside:

- `codr.style`: `Color`, `Modifier` and an immutable `Style` with `fg`, `bg`,
  `add_modifier` and `patch`.
- `codr.theme`: `Theme` with the palettes `dark`, `dracula`,
  `catppuccin_mocha` and `tokyo_night`, plus style helpers such as
  `style_for_message_type`, `cursor_style` and `selection_style`.
- `codr.events`: key and mouse event types and `handle_key_event` /
  `handle_mouse_event`, which turn them into an `EventResult`.
- `codr.text` and `codr.buffer`: `Span`, `Line`, `Text`, `Rect`, `Cell` and
  `Buffer`.
- `codr.markdown`: `render_markdown(text, width)` turns markdown into styled,
  wrapped `Text`.
- `codr.widgets`: `BannerWidget`, `StatusWidget` with `ToastMessage`,
  `InputWidget` with cursor movement and history, and `ConversationWidget`
  for the message list with collapsible tool output and an approval box.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from codr.buffer import Buffer, Rect
from codr.theme import Theme
from codr.widgets.input import InputWidget

area = Rect(0, 0, 40, 3)
buf = Buffer(area)

box = InputWidget()
for ch in "hello":
    box.insert(ch)
box.render(area, buf)

print(buf.row_text(1))
```

Key handling:

```python
from codr.events import KeyCode, KeyEvent, KeyModifiers, handle_key_event

result = handle_key_event(KeyEvent(KeyCode.CHAR, char="d", modifiers=KeyModifiers.CONTROL))
```

Markdown:

```python
from codr.markdown import render_markdown

text = render_markdown("# Title\n\nSome *emphasis* and `code`.", 60)
for line in text.lines:
    print("".join(span.content for span in line.spans))
```