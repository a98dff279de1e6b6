"""Footer hook: ordered contributors appending markup at the end of a page."""

from typing import Callable

from .escaping import esc_attr

DEFAULT_PRIORITY = 10


class FooterHooks:
    """Contributors run by priority, then in the order they were added."""

    def __init__(self):
        self._entries: list[tuple[int, int, Callable[[], str]]] = []
        self._sequence = 0
        self._scripts: set[str] = set()

    def add(self, callback: Callable[[], str], priority: int = DEFAULT_PRIORITY) -> Callable[[], str]:
        self._entries.append((priority, self._sequence, callback))
        self._sequence += 1
        return callback

    def remove(self, callback: Callable[[], str], priority: int = DEFAULT_PRIORITY) -> bool:
        for entry in self._entries:
            if entry[0] == priority and entry[2] is callback:
                self._entries.remove(entry)
                return True
        return False

    def has(self, callback: Callable[[], str] | None = None) -> bool:
        if callback is None:
            return bool(self._entries)
        return any(entry[2] is callback for entry in self._entries)

    def contributors(self) -> tuple[Callable[[], str], ...]:
        return tuple(entry[2] for entry in sorted(self._entries, key=lambda e: (e[0], e[1])))

    def run(self) -> str:
        return "".join(callback() for callback in self.contributors())

    def enqueue_script(self, handle: str, src: str, priority: int = 20) -> bool:
        """Add a <script> tag for src, once per handle."""
        if handle in self._scripts:
            return False
        self._scripts.add(handle)
        tag = f'<script src="{esc_attr(src)}" id="{esc_attr(handle)}-js"></script>\n'
        self.add(lambda: tag, priority)
        return True
