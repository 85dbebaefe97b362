"""
Demo entry point for Pulse Canvas.

Opens a window showing the built-in presets in their static, animated,
repeated and trailed forms.
"""

import logging
import sys

from PyQt6.QtWidgets import (
    QApplication,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from pulse_canvas.gui.widgets import PulseView
from pulse_canvas.utils import log_operation, setup_logging


logger = logging.getLogger(__name__)


# (title, options) for each demo row
DEMO_PULSES = [
    ("Static pulse", dict(markup="pulse", distribution=6, height=60)),
    ("Animated pulse", dict(markup="pulse", distribution=6, height=60, animated=True)),
    ("Repeated, trailed", dict(
        markup="pulse", distribution=6, height=60, repeat=4, animated=True, trailed=True,
    )),
    ("Author signature", dict(
        markup="author", distribution=8, height=80, animated=True, trailed=True,
        speed=40, weight=3, color="#0e639c",
    )),
]


class DemoWindow(QMainWindow):
    """Window with one PulseView per demo configuration."""

    def __init__(self):
        super().__init__()
        self.setWindowTitle("Pulse Canvas")

        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)

        self._views = []
        for title, options in DEMO_PULSES:
            layout.addWidget(QLabel(title))
            view = PulseView(central)
            view.create_pulse(**options)
            layout.addWidget(view)
            self._views.append(view)
            log_operation("create_pulse", f"{title}: {options}", logging.DEBUG)

        self._toggle_button = QPushButton("Pause")
        self._toggle_button.clicked.connect(self._on_toggle_clicked)
        layout.addWidget(self._toggle_button)
        layout.addStretch()

        self._running = True

    def _on_toggle_clicked(self) -> None:
        """Pause or restart every animated pulse."""
        self._running = not self._running
        for view in self._views:
            pulse = view.pulse
            if pulse is None or not pulse.config.animated:
                continue
            if self._running:
                pulse.start_animation()
            else:
                pulse.pause_animation()
        self._toggle_button.setText("Pause" if self._running else "Resume")


def main():
    """Launch the demo window."""
    app = QApplication(sys.argv)
    app.setApplicationName("Pulse Canvas")

    setup_logging(log_file=None)

    window = DemoWindow()
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
