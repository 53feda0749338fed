"""
Session controller for the splitpad editor.

Holds every piece of editor state (layout, zones of the current frame, keymap, the
active save prompt, status line) and dispatches one input event at a time. The
session is in one of two modes: "edit", where events go to the panes, and "save",
where a SaveFlow owns all input until it is confirmed or cancelled.
"""
from splitpad import logger, mouse, saveflow
from splitpad.events import KeyEvent, MouseAction, MouseEvent, ResizeEvent
from splitpad.keymap import Keymap
from splitpad.layout import Layout
from splitpad.zones import ZoneRegistry

class Session:
    def __init__(self, width: int = 0, height: int = 0):
        self.layout = Layout(width, height)
        self.zones = ZoneRegistry()
        self.keymap = Keymap()
        self.save_flow = None
        self.status_message = ""
        self.exit_flag = False
        self.keymap.update_enabled(self.layout)

    @property
    def mode(self) -> str:
        return "save" if self.save_flow is not None else "edit"

    @property
    def panes(self):
        return self.layout.panes

    @property
    def focus(self) -> int:
        return self.layout.focus

    def dispatch(self, event):
        """Process one input event."""
        if self.save_flow is not None:
            self._dispatch_save(event)
            return
        if self._dispatch_edit(event):
            return
        self.layout.size_panes()
        self.keymap.update_enabled(self.layout)

    # -- edit mode -----------------------------------------------------------

    def _dispatch_edit(self, event) -> bool:
        """Handle an event in edit mode. Returns True when the session is ending."""
        km = self.keymap
        if isinstance(event, KeyEvent):
            if km.quit.matches(event):
                self.quit()
                return True
            self.status_message = ""
            if km.next.matches(event):
                self.layout.focus_next()
            elif km.prev.matches(event):
                self.layout.focus_previous()
            elif km.add.matches(event):
                self.layout.add_pane()
            elif km.remove.matches(event):
                self.layout.remove_pane(self.zones)
            elif km.save.matches(event):
                self.begin_save()
            else:
                self._forward(event)
        elif isinstance(event, ResizeEvent):
            self.layout.resize(event.width, event.height)
        elif isinstance(event, MouseEvent):
            if event.action in (MouseAction.WHEEL_UP, MouseAction.WHEEL_DOWN):
                mouse.handle_wheel(self, event)
            elif event.action == MouseAction.LEFT:
                mouse.handle_click(self, event)
        else:
            self._forward(event)
        return False

    def _forward(self, event):
        # Every pane sees the event; blurred buffers ignore it.
        for pane in self.layout.panes:
            pane.buffer.update(event)

    def quit(self):
        self.layout.blur_all()
        logger.log("Editor exited.")
        self.exit_flag = True

    # -- save mode -----------------------------------------------------------

    def begin_save(self):
        """Open the save prompt for the focused pane."""
        idx = self.layout.focus
        self.save_flow = saveflow.SaveFlow.start(idx, self.layout.panes[idx].buffer.value())

    def _dispatch_save(self, event):
        if isinstance(event, ResizeEvent):
            self.layout.resize(event.width, event.height)
            self.layout.size_panes()
            return
        outcome = self.save_flow.handle(event)
        if outcome == saveflow.COMMITTED:
            self._commit_save()
        elif outcome == saveflow.CANCELLED:
            logger.log("save cancelled")
            self.save_flow = None

    def _commit_save(self):
        flow = self.save_flow
        filename = flow.filename.value
        self.save_flow = None
        try:
            saveflow.write_file(filename, flow.text)
        except OSError as e:
            logger.log(f"error saving pane {flow.target_index + 1} to '{filename}': {e}")
            self.status_message = f"error saving file: {filename}"
            return
        num_bytes = len(flow.text.encode("utf-8"))
        logger.log(f"pane {flow.target_index + 1} written to '{filename}' ({num_bytes} bytes)")
        self.status_message = f"wrote {filename} ({num_bytes} bytes)"
