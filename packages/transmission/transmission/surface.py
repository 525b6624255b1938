"""Host UI surface: named elements the presentation shows, hides and fills.

The core never draws. It asks the host to toggle visibility, classes,
text and offsets on elements identified by stable names.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Protocol

if TYPE_CHECKING:
    from transmission.particles import AmbientDot

# Phase containers
LANDING = "landing"
GLOBE_PHASE = "globe-phase"
LETTER_PHASE = "letter-phase"

# Controls
BEGIN = "btn-begin"
ACCEPT = "btn-accept"
RETRY = "btn-retry"

# Display targets
GLOBE_LOADING = "globe-loading"
STATUS_OVERLAY = "status-overlay"
LATENCY = "stat-latency"
PACKET = "stat-packet"
CONNECTION = "connection-established"
COUNTDOWN = "countdown"
RETRY_ERROR = "retry-error"
ASK = "the-ask"
ACCEPTED = "accepted-state"
CURSOR = "typewriter-cursor"

ROMANTIC_THEME = "romantic-phase"

Handler = Callable[[], Any]


class HostSurface(Protocol):
    def activate(self, container: str) -> None: ...

    def deactivate(self, container: str) -> None: ...

    def show(self, element: str) -> None: ...

    def hide(self, element: str) -> None: ...

    def exists(self, element: str) -> bool: ...

    def set_text(self, element: str, text: str) -> None: ...

    def append_text(self, element: str, text: str) -> None: ...

    def add_class(self, element: str, name: str) -> None: ...

    def remove_class(self, element: str, name: str) -> None: ...

    def set_style(self, element: str, **style: Any) -> None: ...

    def set_offset(self, element: str, x: float, y: float) -> None: ...

    def disable(self, element: str) -> None: ...

    def attach_cursor(self, element: str) -> None: ...

    def bind(self, control: str, handler: Handler) -> None: ...

    def set_theme(self, theme: str) -> None: ...

    def set_scroll_locked(self, locked: bool) -> None: ...

    def spawn_particle(self, dot: AmbientDot) -> None: ...

    def viewport(self) -> tuple[int, int]: ...


@dataclass
class Element:
    visible: bool = False
    text: str = ""
    classes: set[str] = field(default_factory=set)
    style: dict[str, Any] = field(default_factory=dict)
    offset: tuple[float, float] = (0.0, 0.0)
    disabled: bool = False


class RecordingSurface:
    """In-memory HostSurface.

    Elements spring into existence on first use. Removed elements stay
    gone and any further operation on them raises KeyError, so callbacks
    that fire late must check ``exists`` first. Every mutation is logged
    to ``events`` as ``(operation, element, argument)``.
    """

    def __init__(self, viewport: tuple[int, int] = (1280, 800)) -> None:
        self._viewport = viewport
        self.elements: dict[str, Element] = {}
        self.events: list[tuple[str, str, Any]] = []
        self.handlers: dict[str, Handler] = {}
        self.particles: list[AmbientDot] = []
        self.cursor_host: str | None = None
        self.theme: str | None = None
        self.scroll_locked = False
        self._removed: set[str] = set()

    def _el(self, name: str) -> Element:
        if name in self._removed:
            raise KeyError(f"Element '{name}' has been removed")
        if name not in self.elements:
            self.elements[name] = Element()
        return self.elements[name]

    def _log(self, op: str, element: str, arg: Any = None) -> None:
        self.events.append((op, element, arg))

    # --- HostSurface ---

    def activate(self, container: str) -> None:
        el = self._el(container)
        el.visible = True
        el.classes.add("active")
        self._log("activate", container)

    def deactivate(self, container: str) -> None:
        el = self._el(container)
        el.visible = False
        el.classes.discard("active")
        self._log("deactivate", container)

    def show(self, element: str) -> None:
        self._el(element).visible = True
        self._log("show", element)

    def hide(self, element: str) -> None:
        self._el(element).visible = False
        self._log("hide", element)

    def exists(self, element: str) -> bool:
        return element not in self._removed

    def set_text(self, element: str, text: str) -> None:
        self._el(element).text = text
        self._log("set_text", element, text)

    def append_text(self, element: str, text: str) -> None:
        self._el(element).text += text
        self._log("append_text", element, text)

    def add_class(self, element: str, name: str) -> None:
        self._el(element).classes.add(name)
        self._log("add_class", element, name)

    def remove_class(self, element: str, name: str) -> None:
        self._el(element).classes.discard(name)
        self._log("remove_class", element, name)

    def set_style(self, element: str, **style: Any) -> None:
        self._el(element).style.update(style)
        self._log("set_style", element, style)

    def set_offset(self, element: str, x: float, y: float) -> None:
        self._el(element).offset = (x, y)
        self._log("set_offset", element, (x, y))

    def disable(self, element: str) -> None:
        self._el(element).disabled = True
        self._log("disable", element)

    def attach_cursor(self, element: str) -> None:
        self._el(element)
        self.cursor_host = element
        self._log("attach_cursor", element)

    def bind(self, control: str, handler: Handler) -> None:
        self._el(control)
        self.handlers[control] = handler

    def set_theme(self, theme: str) -> None:
        self.theme = theme
        self._log("set_theme", "body", theme)

    def set_scroll_locked(self, locked: bool) -> None:
        self.scroll_locked = locked
        self._log("set_scroll_locked", "body", locked)

    def spawn_particle(self, dot: AmbientDot) -> None:
        self.particles.append(dot)

    def viewport(self) -> tuple[int, int]:
        return self._viewport

    # --- Host side ---

    def remove(self, element: str) -> None:
        self.elements.pop(element, None)
        self._removed.add(element)
        if self.cursor_host == element:
            self.cursor_host = None
        self._log("remove", element)

    def resize(self, width: int, height: int) -> None:
        self._viewport = (width, height)

    def interactable(self, control: str) -> bool:
        if not self.exists(control) or control not in self.handlers:
            return False
        el = self.elements[control]
        return not el.disabled and "hiding" not in el.classes

    def click(self, control: str) -> bool:
        """Dispatch a user activation. Returns False if the control ignores it."""
        if not self.interactable(control):
            return False
        self.handlers[control]()
        return True

    def text(self, element: str) -> str:
        return self._el(element).text

    def is_visible(self, element: str) -> bool:
        return self.exists(element) and element in self.elements and self.elements[element].visible

    def has_class(self, element: str, name: str) -> bool:
        return self.exists(element) and element in self.elements and name in self.elements[element].classes

    def ops(self, op: str, element: str | None = None) -> list[tuple[str, str, Any]]:
        return [e for e in self.events if e[0] == op and (element is None or e[1] == element)]
