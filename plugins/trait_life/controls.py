"""
Side-panel widgets for the Trait Life viewer

Flat, dark widgets drawn straight onto a pygame surface. Widgets are
positioned in panel-local coordinates; ControlPanel translates mouse
events before handing them down.
"""

import pygame


THEME = {
    "bg": (18, 18, 24),
    "panel": (25, 25, 35),
    "track": (50, 50, 65),
    "track_fill": (80, 140, 220),
    "handle": (200, 210, 230),
    "text": (180, 185, 195),
    "text_bright": (230, 235, 245),
    "text_dim": (100, 105, 115),
    "button": (40, 42, 55),
    "button_hover": (55, 58, 75),
    "button_active": (70, 100, 180),
    "divider": (40, 40, 55),
    "cursor": (255, 210, 90),
}


class Slider:
    """Horizontal integer slider with label and value."""

    def __init__(self, x, y, width, label, min_val, max_val, value, on_change=None):
        self.x = x
        self.y = y
        self.width = width
        self.height = 36
        self.label = label
        self.min_val = min_val
        self.max_val = max_val
        self.value = value
        self.on_change = on_change
        self.dragging = False

        self.track_x = self.x + 8
        self.track_y = self.y + 22
        self.track_w = self.width - 16

    def _val_to_x(self, val):
        frac = (val - self.min_val) / (self.max_val - self.min_val)
        return self.track_x + frac * self.track_w

    def _x_to_val(self, px):
        frac = max(0.0, min(1.0, (px - self.track_x) / self.track_w))
        return int(round(self.min_val + frac * (self.max_val - self.min_val)))

    def _drag_to(self, px):
        val = self._x_to_val(px)
        if val != self.value:
            self.value = val
            if self.on_change:
                self.on_change(val)

    def handle_event(self, event):
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            mx, my = event.pos
            if (self.track_x - 4 <= mx <= self.track_x + self.track_w + 4
                    and abs(my - self.track_y) <= 12):
                self.dragging = True
                self._drag_to(mx)
                return True
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.dragging = False
        elif event.type == pygame.MOUSEMOTION and self.dragging:
            self._drag_to(event.pos[0])
            return True
        return False

    def draw(self, surface, font):
        surface.blit(font.render(self.label, True, THEME["text"]), (self.x + 8, self.y + 2))
        val_surf = font.render(str(self.value), True, THEME["text_bright"])
        surface.blit(val_surf, (self.x + self.width - val_surf.get_width() - 8, self.y + 2))

        pygame.draw.rect(surface, THEME["track"],
                         pygame.Rect(self.track_x, self.track_y - 2, self.track_w, 4),
                         border_radius=2)
        hx = self._val_to_x(self.value)
        pygame.draw.rect(surface, THEME["track_fill"],
                         pygame.Rect(self.track_x, self.track_y - 2, hx - self.track_x, 4),
                         border_radius=2)
        pygame.draw.circle(surface, THEME["handle"], (int(hx), self.track_y), 7)


class Button:
    """Clickable button. ``active`` highlights toggles such as Run."""

    def __init__(self, x, y, width, height, label, on_click=None, active=False):
        self.rect = pygame.Rect(x, y, width, height)
        self.label = label
        self.on_click = on_click
        self.active = active
        self.hovered = False

    def handle_event(self, event):
        if event.type == pygame.MOUSEMOTION:
            self.hovered = self.rect.collidepoint(event.pos)
        elif (event.type == pygame.MOUSEBUTTONDOWN and event.button == 1
                and self.rect.collidepoint(event.pos)):
            if self.on_click:
                self.on_click()
            return True
        return False

    def draw(self, surface, font):
        if self.active:
            color = THEME["button_active"]
        elif self.hovered:
            color = THEME["button_hover"]
        else:
            color = THEME["button"]
        pygame.draw.rect(surface, color, self.rect, border_radius=4)
        label_surf = font.render(self.label, True, THEME["text_bright"])
        surface.blit(label_surf, label_surf.get_rect(center=self.rect.center))


class ButtonRow:
    """Wrapping row of buttons where exactly one is selected (presets)."""

    def __init__(self, x, y, width, labels, selected=0, on_select=None, btn_height=24):
        self.labels = labels
        self.selected = selected
        self.on_select = on_select
        self.buttons = []

        bx, by = x, y
        for label in labels:
            bw = max(len(label) * 8 + 16, 50)
            if bx + bw > x + width and bx > x:
                bx, by = x, by + btn_height + 4
            self.buttons.append(Button(bx, by, bw, btn_height, label))
            bx += bw + 4
        self.total_height = by - y + btn_height
        self.select(selected)

    def select(self, index):
        self.selected = index
        for i, btn in enumerate(self.buttons):
            btn.active = (i == index)

    def handle_event(self, event):
        for i, btn in enumerate(self.buttons):
            if btn.handle_event(event) and event.type == pygame.MOUSEBUTTONDOWN:
                self.select(i)
                if self.on_select:
                    self.on_select(i, self.labels[i])
                return True
        return False

    def draw(self, surface, font):
        for btn in self.buttons:
            btn.draw(surface, font)


class SectionHeader:
    """Divider line with a dim title."""

    def __init__(self, x, y, width, title):
        self.x = x
        self.y = y
        self.width = width
        self.title = title
        self.height = 24

    def draw(self, surface, font):
        pygame.draw.line(surface, THEME["divider"],
                         (self.x + 8, self.y + 8), (self.x + self.width - 8, self.y + 8))
        surface.blit(font.render(self.title, True, THEME["text_dim"]), (self.x + 8, self.y + 12))


class Readout:
    """Block of text lines refreshed every frame from a callable."""

    def __init__(self, x, y, lines_fn, n_lines, line_height=16):
        self.x = x
        self.y = y
        self.lines_fn = lines_fn
        self.line_height = line_height
        self.height = n_lines * line_height

    def draw(self, surface, font):
        for i, line in enumerate(self.lines_fn()):
            surface.blit(font.render(line, True, THEME["text"]),
                         (self.x + 8, self.y + i * self.line_height))


class ControlPanel:
    """
    Vertical stack of widgets on its own surface.
    Widgets are added top to bottom; the panel tracks the next free row.
    """

    def __init__(self, x, y, width, height):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.widgets = []
        self.surface = pygame.Surface((width, height))
        self._cursor_y = 8

    def _push(self, widget, height):
        self.widgets.append(widget)
        self._cursor_y += height
        return widget

    def add_section(self, title):
        header = SectionHeader(0, self._cursor_y, self.width, title)
        return self._push(header, header.height + 4)

    def add_slider(self, label, min_val, max_val, value, on_change=None):
        slider = Slider(0, self._cursor_y, self.width, label, min_val, max_val, value, on_change)
        return self._push(slider, slider.height + 6)

    def add_button_row(self, labels, selected=0, on_select=None):
        row = ButtonRow(8, self._cursor_y, self.width - 16, labels, selected, on_select)
        return self._push(row, row.total_height + 8)

    def add_buttons(self, specs):
        """Lay out (label, on_click) pairs side by side. Returns the buttons."""
        gap = 4
        bw = (self.width - 16 - gap * (len(specs) - 1)) // len(specs)
        buttons = []
        for i, (label, on_click) in enumerate(specs):
            btn = Button(8 + i * (bw + gap), self._cursor_y, bw, 28, label, on_click)
            self.widgets.append(btn)
            buttons.append(btn)
        self._cursor_y += 36
        return buttons

    def add_readout(self, lines_fn, n_lines):
        readout = Readout(0, self._cursor_y, lines_fn, n_lines)
        return self._push(readout, readout.height + 6)

    def handle_event(self, event):
        """Route a mouse event to the widgets, in panel-local coordinates."""
        if not hasattr(event, "pos"):
            return False
        local_pos = (event.pos[0] - self.x, event.pos[1] - self.y)
        if not (0 <= local_pos[0] <= self.width and 0 <= local_pos[1] <= self.height):
            if event.type == pygame.MOUSEBUTTONUP:
                for widget in self.widgets:
                    if isinstance(widget, Slider):
                        widget.dragging = False
            return False
        local = pygame.event.Event(event.type, {**event.__dict__, "pos": local_pos})
        for widget in self.widgets:
            if hasattr(widget, "handle_event") and widget.handle_event(local):
                return True
        return False

    def draw(self, target_surface, font):
        self.surface.fill(THEME["panel"])
        pygame.draw.line(self.surface, THEME["divider"], (0, 0), (0, self.height))
        for widget in self.widgets:
            widget.draw(self.surface, font)
        target_surface.blit(self.surface, (self.x, self.y))
