"""Render the session as rich renderables.

Nothing here touches curses; ``render_lines`` lays a renderable out into
lines of styled segments which the curses layer draws.
"""
from typing import List

from rich import box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.segment import Segment
from rich.text import Text

from config import card_width, field_labels, field_placeholders, styles, symbols
from operations.session import FlashcardSession, Mode

BROWSE_HELP = [
    "← / h : Previous word ",
    "→ / l : Next word     ",
    "SPACE : Toggle details",
    "a     : Add new card  ",
    "q     : Quit          ",
]

ADD_HELP = [
    "TAB: Next field",
    "ENTER: Save card",
    "ESC: Cancel",
]


def label(text: str, style_name: str) -> Text:
    return Text(text, style=styles[style_name])


def build_card(session: FlashcardSession):
    state = session.state
    card = session.current_card()
    if card is None:
        return Text("No words available.")

    body = Text()
    body.append_text(label("Pinyin", "subtitle"))
    body.append(": " + card.pinyin + "\n", style=styles["text"])
    body.append_text(label("Chinese", "subtitle_red"))
    body.append(": " + card.chinese, style=styles["text"])

    if state.show_details:
        body.append("\n")
        if state.loading_example:
            body.append_text(label("Loading example...", "subtitle_dark"))
        else:
            body.append_text(label("Definition", "subtitle_dark"))
            body.append(": " + card.definition + "\n\n", style=styles["text"])
            body.append_text(label("Example", "subtitle_dark"))
            body.append("\n" + card.example, style=styles["text"])

    title = label("Pinyin Vocab Flashcards", "title")
    title.append(f" ({state.current_index + 1}/{session.store.size()})")

    panel = Panel(
        body,
        box=box.ROUNDED,
        border_style=styles["card_border"],
        padding=(1, 2),
        width=card_width,
    )
    controls = Text("\n").join(
        [label("Controls:", "help")] + [Text(line) for line in BROWSE_HELP]
    )
    return Group(
        Align.center(title),
        Text(""),
        Align.center(panel),
        Text(""),
        Align.center(controls),
    )


def build_form(session: FlashcardSession):
    form = session.form
    parts = [label("Add New Vocabulary Card", "title"), Text("")]

    for i, field_label in enumerate(field_labels):
        value = form.value(i)
        content = Text(symbols["prompt"])
        if value:
            content.append(value, style=styles["text"])
        elif not form.is_focused(i):
            content.append(field_placeholders[i], style=styles["placeholder"])
        if form.is_focused(i):
            content.append(symbols["cursor"])
            if not value:
                content.append(field_placeholders[i], style=styles["placeholder"])

        border = styles["focused_border"] if form.is_focused(i) else styles["input_border"]
        parts.append(label(field_label, "subtitle"))
        parts.append(Panel(content, box=box.SQUARE, border_style=border, padding=(0, 1), width=card_width))

    parts.append(Text(""))
    parts.extend(label(line, "help") for line in ADD_HELP)
    return Group(*parts)


def build_view(session: FlashcardSession):
    if session.state.mode is Mode.ADDING:
        return build_form(session)
    return build_card(session)


def render_lines(renderable, width: int) -> List[List[Segment]]:
    console = Console(width=width, color_system="256", force_terminal=True, legacy_windows=False)
    options = console.options.update(width=width)
    return console.render_lines(renderable, options, pad=False)
