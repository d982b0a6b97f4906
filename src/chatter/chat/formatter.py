# ABOUTME: Renders chat messages into log lines from an indexed template
# ABOUTME: Substitutes the six message fields and word-wraps long lines with a continuation indent

import logging
import string
import textwrap

from chatter.chat.message import ChatMessage

logger = logging.getLogger(__name__)

# Number of indexed fields a line template may reference: {0} to {5}
FIELD_COUNT = 6

_FORMATTER = string.Formatter()


def _literal_token(field_name: str, spec: str | None, conversion: str | None) -> str:
    token = field_name
    if conversion:
        token += "!" + conversion
    if spec:
        token += ":" + spec
    return "{" + token + "}"


def render_template(template: str, fields: tuple[str, ...]) -> str:
    """
    Substitute indexed fields into a template.

    Unlike str.format this never raises: a placeholder that does not name
    one of the fields is written out literally, and a template that cannot
    be parsed at all is returned unchanged. Both cases are logged.

    Args:
        template: Template such as "{0} {1} [{3}]: {4}"
        fields: The values for {0}, {1}, ...

    Returns:
        The rendered line
    """
    try:
        parsed = list(_FORMATTER.parse(template))
    except ValueError as e:
        logger.warning(f"Invalid chat log template {template!r}: {e}")
        return template

    parts: list[str] = []
    for literal, field_name, spec, conversion in parsed:
        parts.append(literal)
        if field_name is None:
            continue

        if field_name.isdigit() and int(field_name) < len(fields):
            value = fields[int(field_name)]
            try:
                if conversion:
                    value = _FORMATTER.convert_field(value, conversion)
                parts.append(_FORMATTER.format_field(value, spec or ""))
                continue
            except ValueError as e:
                logger.warning(f"Invalid placeholder in chat log template {template!r}: {e}")
        else:
            logger.warning(
                f"Unknown placeholder {{{field_name}}} in chat log template {template!r}"
            )
        parts.append(_literal_token(field_name, spec, conversion))

    return "".join(parts)


def format_timestamp(message: ChatMessage, date_time_format: str) -> str:
    try:
        return message.when.strftime(date_time_format)
    except ValueError as e:
        logger.warning(f"Invalid date/time format {date_time_format!r}: {e}")
        return message.when.isoformat(sep=" ", timespec="seconds")


def wrap_line(line: str, wrap_width: int, wrap_indent: int) -> list[str]:
    """
    Word-wrap text at whitespace.

    Words are never split, so a word longer than the width overflows its
    line. Every word is measured with the space that follows it, so a
    wrapped line holds at most wrap_width - 1 characters. Every line after
    the first is prefixed with wrap_indent spaces.

    Args:
        line: The text to wrap
        wrap_width: Wrap column; 0 disables wrapping
        wrap_indent: Number of spaces in front of continuation lines

    Returns:
        The wrapped lines
    """
    if wrap_width <= 0 or len(line) <= wrap_width:
        return [line]

    chunks = textwrap.wrap(
        line,
        width=max(wrap_width - 1, 1),
        break_long_words=False,
        break_on_hyphens=False,
    )
    if not chunks:
        return [line]

    indent = " " * wrap_indent
    return [chunks[0]] + [indent + chunk for chunk in chunks[1:]]


def format_message(
    message: ChatMessage,
    rendered_sender: str,
    rendered_body: str,
    date_time_format: str,
    template: str,
    wrap_width: int = 0,
    wrap_indent: int = 0,
) -> list[str]:
    """
    Render a chat message into log lines.

    Template fields:
        {0} the timestamp formatted with date_time_format
        {1} the sender as rendered by the caller
        {2} the sender without home world
        {3} the chat type label
        {4} the body as rendered by the caller
        {5} the body without home worlds

    When the rendered line is longer than wrap_width the body ({4}) is
    wrapped to wrap_width columns. Its first chunk stays in the template
    line and the rest follow as continuation lines indented by wrap_indent,
    so with an indent matching the prefix they line up under the body.

    Returns:
        One line, or several when wrapping applies
    """
    timestamp = format_timestamp(message, date_time_format)
    sender_without_world = message.sender.as_text(False)
    body_without_world = message.body.as_text(False)

    def render(body: str) -> str:
        fields = (
            timestamp,
            rendered_sender,
            sender_without_world,
            message.type_label,
            body,
            body_without_world,
        )
        return render_template(template, fields)

    line = render(rendered_body)
    if wrap_width <= 0 or len(line) <= wrap_width:
        return [line]

    first, *continuations = wrap_line(rendered_body, wrap_width, wrap_indent)
    first_line = render(first)
    # Template without {4}: nothing to wrap
    if first_line == line:
        return [line]
    return [first_line] + continuations
