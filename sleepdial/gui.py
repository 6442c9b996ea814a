"""PySide6 front end for the sleep-window dial."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from functools import partial
from typing import Callable, Optional

from PySide6.QtCore import QPointF, QRectF, Qt, Signal
from PySide6.QtGui import (
    QColor,
    QFont,
    QHideEvent,
    QMouseEvent,
    QPaintEvent,
    QPainter,
    QPainterPath,
    QPen,
)
from PySide6.QtWidgets import (
    QComboBox,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from .engine import SleepDialEngine
from .geometry import hit_test
from .models import DragState, DragTarget, GeometrySnapshot, Point, Tick
from .pointer import RingBounds

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class DialSkin:
    """Palette that describes how the dial should be rendered."""

    name: str
    background_color: str
    face_color: str
    arc_color: str
    tick_color: str
    start_handle_color: str
    end_handle_color: str
    handle_border_color: str
    text_color: str
    accent_color: str


DIAL_SKIN_PRESETS = [
    DialSkin(
        name="Mist",
        background_color="#F5F4FA",
        face_color="#DCDBE1",
        arc_color="#FFFFFF",
        tick_color="#F5F4FA",
        start_handle_color="#6366F1",
        end_handle_color="#F59E0B",
        handle_border_color="#FFFFFF",
        text_color="#1F2937",
        accent_color="#6366F1",
    ),
    DialSkin(
        name="Night",
        background_color="#0F172A",
        face_color="#1E293B",
        arc_color="#38BDF8",
        tick_color="#0F172A",
        start_handle_color="#E2E8F0",
        end_handle_color="#FACC15",
        handle_border_color="#0F172A",
        text_color="#E2E8F0",
        accent_color="#38BDF8",
    ),
]

DIAL_SKINS = {skin.name: skin for skin in DIAL_SKIN_PRESETS}
DEFAULT_DIAL_SKIN = DIAL_SKIN_PRESETS[0]


def _detach_engine(
    engine: SleepDialEngine, listener: Callable[[int, int], None], *_: object
) -> None:
    engine.remove_listener(listener)
    engine.set_capture(None)


class _WidgetCapture:
    """Routes every mouse event to the dial while a gesture is active."""

    def __init__(self, widget: QWidget) -> None:
        self._widget = widget

    def acquire(self) -> None:
        self._widget.grabMouse()

    def release(self) -> None:
        self._widget.releaseMouse()


class SleepDialWidget(QWidget):
    """Widget that renders the ring and forwards mouse gestures to the engine."""

    timesChanged = Signal(int, int)

    def __init__(
        self,
        engine: Optional[SleepDialEngine] = None,
        skin: Optional[DialSkin] = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._engine = engine or SleepDialEngine()
        self._engine.set_capture(_WidgetCapture(self))
        self._engine.add_listener(self._on_times_changed)
        self.destroyed.connect(partial(_detach_engine, self._engine, self._on_times_changed))
        self._skin = skin or DEFAULT_DIAL_SKIN
        size = int(self._engine.config.size)
        self.setMinimumSize(size, size)

    @property
    def engine(self) -> SleepDialEngine:
        return self._engine

    def set_skin(self, skin: DialSkin) -> None:
        if self._skin == skin:
            return
        self._skin = skin
        self.update()

    def ring_bounds(self) -> RingBounds:
        """Square the ring occupies, centred in the widget."""
        size = self._engine.config.size
        return RingBounds(
            left=(self.width() - size) / 2.0,
            top=(self.height() - size) / 2.0,
            width=size,
            height=size,
        )

    def target_at(self, position: QPointF) -> Optional[DragTarget]:
        bounds = self.ring_bounds()
        local = Point(position.x() - bounds.left, position.y() - bounds.top)
        return hit_test(self._engine.geometry(), local, self._engine.config)

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return
        position = event.position()
        target = self.target_at(position)
        if target is None:
            super().mousePressEvent(event)
            return
        if self._engine.press(target, Point(position.x(), position.y()), self.ring_bounds()):
            self.setCursor(
                Qt.CursorShape.ClosedHandCursor
                if target is DragTarget.ARC_BODY
                else Qt.CursorShape.SizeAllCursor
            )
        event.accept()

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        if not self._engine.is_dragging:
            super().mouseMoveEvent(event)
            return
        position = event.position()
        self._engine.move(Point(position.x(), position.y()), self.ring_bounds())
        event.accept()

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        if not self._engine.is_dragging or event.button() != Qt.MouseButton.LeftButton:
            super().mouseReleaseEvent(event)
            return
        self._engine.release()
        self.unsetCursor()
        event.accept()

    def hideEvent(self, event: QHideEvent) -> None:
        if self._engine.is_dragging:
            LOG.debug("Dial hidden mid-gesture; cancelling")
            self._engine.cancel()
            self.unsetCursor()
        super().hideEvent(event)

    def _on_times_changed(self, start: int, end: int) -> None:
        self.update()
        self.timesChanged.emit(start, end)

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        painter.fillRect(self.rect(), QColor(self._skin.background_color))

        bounds = self.ring_bounds()
        painter.translate(bounds.left, bounds.top)

        snapshot = self._engine.geometry()
        self._draw_face(painter)
        self._draw_arc(painter, snapshot)
        self._draw_ticks(painter, self._engine.ticks())
        self._draw_handles(painter, snapshot)

    def _draw_face(self, painter: QPainter) -> None:
        cfg = self._engine.config
        painter.save()
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QColor(self._skin.face_color))
        painter.drawEllipse(QPointF(cfg.center_x, cfg.center_y), cfg.radius, cfg.radius)
        painter.restore()

    def _draw_arc(self, painter: QPainter, snapshot: GeometrySnapshot) -> None:
        cfg = self._engine.config
        r = cfg.arc_radius
        painter.save()
        pen = QPen(QColor(self._skin.arc_color))
        pen.setWidthF(cfg.arc_stroke_width)
        pen.setCapStyle(Qt.PenCapStyle.RoundCap)
        painter.setPen(pen)
        painter.setBrush(Qt.BrushStyle.NoBrush)
        # Qt measures degrees counter-clockwise, the ring runs clockwise on screen
        start_degrees = -math.degrees(snapshot.start_angle)
        sweep_degrees = -(snapshot.duration / cfg.total_minutes) * 360.0
        path = QPainterPath(QPointF(*snapshot.start_point))
        path.arcTo(QRectF(cfg.center_x - r, cfg.center_y - r, r * 2, r * 2), start_degrees, sweep_degrees)
        painter.drawPath(path)
        painter.restore()

    def _draw_ticks(self, painter: QPainter, ticks: tuple[Tick, ...]) -> None:
        painter.save()
        pen = QPen(QColor(self._skin.tick_color))
        pen.setWidthF(3.0)
        pen.setCapStyle(Qt.PenCapStyle.RoundCap)
        painter.setPen(pen)
        for tick in ticks:
            painter.drawLine(QPointF(*tick.inner), QPointF(*tick.outer))
        painter.restore()

    def _draw_handles(self, painter: QPainter, snapshot: GeometrySnapshot) -> None:
        radius = self._engine.config.handle_radius
        painter.save()
        border = QPen(QColor(self._skin.handle_border_color))
        border.setWidthF(2.0)
        painter.setPen(border)
        for point, color in (
            (snapshot.start_point, self._skin.start_handle_color),
            (snapshot.end_point, self._skin.end_handle_color),
        ):
            painter.setBrush(QColor(color))
            painter.drawEllipse(QPointF(*point), radius, radius)
        painter.restore()


class SleepDialWindow(QMainWindow):
    """Main application window."""

    def __init__(
        self,
        engine: Optional[SleepDialEngine] = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Sleep Window")
        self._engine = engine or SleepDialEngine()
        self._active_skin = DEFAULT_DIAL_SKIN
        self._dial = SleepDialWidget(engine=self._engine, skin=self._active_skin)
        self._dial.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self._dial.timesChanged.connect(self._update_labels)

        central = QWidget(self)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(12)

        self._times_label = QLabel()
        self._times_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        times_font = self._times_label.font()
        times_font.setPointSize(18)
        times_font.setWeight(QFont.Weight.DemiBold)
        self._times_label.setFont(times_font)
        layout.addWidget(self._times_label)

        self._duration_label = QLabel()
        self._duration_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._duration_label)

        layout.addWidget(self._dial, stretch=1)

        self._skin_selector = QComboBox()
        for skin in DIAL_SKIN_PRESETS:
            self._skin_selector.addItem(skin.name)
        self._skin_selector.setCurrentText(self._active_skin.name)
        self._skin_selector.currentTextChanged.connect(self._on_skin_selected)
        skin_layout = QHBoxLayout()
        skin_layout.addStretch(1)
        skin_layout.addWidget(self._skin_selector)
        skin_layout.addStretch(1)
        layout.addLayout(skin_layout)

        self.setCentralWidget(central)
        self.resize(420, 520)
        self._apply_skin_to_ui()
        self._update_labels()

    @property
    def dial(self) -> SleepDialWidget:
        return self._dial

    @property
    def times_text(self) -> str:
        return self._times_label.text()

    @property
    def duration_text(self) -> str:
        return self._duration_label.text()

    def _on_skin_selected(self, skin_name: str) -> None:
        skin = DIAL_SKINS.get(skin_name)
        if skin is None or skin == self._active_skin:
            return
        self._active_skin = skin
        self._dial.set_skin(skin)
        self._apply_skin_to_ui()

    def _apply_skin_to_ui(self) -> None:
        skin = self._active_skin
        self.centralWidget().setStyleSheet(f"background-color: {skin.background_color};")
        self._times_label.setStyleSheet(f"color: {skin.text_color};")
        self._duration_label.setStyleSheet(f"color: {skin.accent_color}; font-weight: 600;")
        self._skin_selector.setStyleSheet(
            f"QComboBox {{color: {skin.text_color}; padding: 4px 10px; "
            f"border-radius: 10px; border: 2px solid {skin.accent_color};}}"
        )

    def _update_labels(self, *_: int) -> None:
        engine = self._engine
        self._times_label.setText(f"Bedtime: {engine.start_label} | Wake: {engine.end_label}")
        self._duration_label.setText(f"Sleep: {engine.duration_label}")
        if engine.state is DragState.IDLE:
            LOG.debug("Interval set to %s-%s", engine.start_label, engine.end_label)
