"""Plain-text rendering of navigation snapshots."""

from .item import DEFAULT_PORT
from .navigation import NavigationSnapshot

SELECTED_MARKER = ">"


class PageRenderer:
    """Renders a snapshot as numbered lines for a terminal."""

    def __init__(self, max_width: int | None = None):
        """
        Args:
            max_width: Truncate display text to this many characters
                (None for no limit).
        """
        self.max_width = max_width

    def render(self, snapshot: NavigationSnapshot) -> str:
        """
        Render the header, the items and the status line.

        Menu items show a type prefix and selectable items are numbered
        in order. Text documents are shown line by line.

        Args:
            snapshot: The state to render.

        Returns:
            Formatted page text.
        """
        lines = [self.render_header(snapshot)]

        if not snapshot.items:
            lines.append("(empty)")
        elif snapshot.is_menu:
            lines.extend(self._render_menu(snapshot))
        else:
            lines.extend(self._truncate(item.display) for item in snapshot.items)

        if snapshot.truncated:
            lines.append("(response truncated)")

        if snapshot.status:
            lines.append(f"-- {snapshot.status}")

        return "\n".join(lines)

    def render_header(self, snapshot: NavigationSnapshot) -> str:
        if not snapshot.host:
            return "[no page]"
        port = "" if snapshot.port == DEFAULT_PORT else f":{snapshot.port}"
        return f"[{snapshot.host}{port} {snapshot.selector}]"

    def _render_menu(self, snapshot: NavigationSnapshot) -> list[str]:
        lines = []
        number = 0

        for index, item in enumerate(snapshot.items):
            marker = SELECTED_MARKER if index == snapshot.selected_index else " "
            kind = item.kind

            if kind.is_selectable:
                number += 1
                label = f"{number:>3}."
            else:
                label = "    "

            text = self._truncate(item.display)
            lines.append(f"{marker}{label} {kind.prefix} {text}".rstrip())

        return lines

    def _truncate(self, text: str) -> str:
        if self.max_width is None or len(text) <= self.max_width:
            return text
        return text[: self.max_width]
