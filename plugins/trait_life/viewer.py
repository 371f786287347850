"""
Interactive Pygame Viewer for Trait Life

Shows the grid on the left and a control panel on the right. BORN cells
are green and DYING cells red; they only show up if you look between the
two phases of a tick. ALIVE cells go from deep blue (trait 0) to pale cyan
(trait 8).

Controls:
  ENTER       Step one generation
  SPACE       Run / Pause
  -           Reset from the current seed
  +           Toggle the cell under the cursor
  Arrows      Move the cursor
  Typing      Edit the seed string (the grid reseeds on every keystroke)
  BACKSPACE   Delete the last seed character
  TAB         Toggle control panel
  ESC         Quit
  Mouse L     Toggle a cell (on canvas area)
"""

import logging
import time

import pygame

from .controls import ControlPanel, THEME
from .presets import PRESET_ORDER, PRESETS
from .render import render_rgb
from .simulator import TraitLifeSimulator

logger = logging.getLogger(__name__)

PANEL_WIDTH = 300
MAX_SEED_LEN = 255


class Viewer:
    def __init__(self, width=900, height=600, start_preset="random", sim_width=None,
                 sim_height=None, seed_text=None):
        self.sim = TraitLifeSimulator(start_preset, width=sim_width, height=sim_height,
                                      seed_text=seed_text)
        self.canvas_w = width
        self.canvas_h = height
        self.cursor = (0, 0)
        self.paused = True
        self.running = True
        self.panel_visible = True
        self.ticks_per_second = 8
        self.tick_accumulator = 0.0
        self.panel = None
        self.preset_buttons = None
        self.run_button = None

    @property
    def total_w(self):
        return self.canvas_w + (PANEL_WIDTH if self.panel_visible else 0)

    @property
    def cell_px(self):
        grid = self.sim.grid
        return max(1, min(self.canvas_w // grid.width, self.canvas_h // grid.height))

    # -- panel -------------------------------------------------------------

    def _build_panel(self):
        panel = ControlPanel(self.canvas_w, 0, PANEL_WIDTH, self.canvas_h)

        panel.add_section("PRESET")
        self.preset_buttons = panel.add_button_row(
            [PRESETS[k]["name"] for k in PRESET_ORDER],
            selected=PRESET_ORDER.index(self.sim.preset_key),
            on_select=self._on_preset_select,
        )

        panel.add_section("SIMULATION")
        _, self.run_button, _, _ = panel.add_buttons([
            ("Step", self._on_step),
            ("Run", self._on_run_toggle),
            ("Reset", self._on_reset),
            ("Clear", self._on_clear),
        ])
        panel.add_slider("Ticks / second", 1, 60, self.ticks_per_second,
                         on_change=self._on_speed_change)

        panel.add_section("SEED")
        panel.add_readout(self._seed_lines, 3)

        panel.add_section("CELLS")
        panel.add_readout(self._count_lines, 7)
        self.panel = panel

    def _seed_lines(self):
        digest = self.sim.digest_hex
        return [f"Seed: {self.sim.seed_text[-26:]}_", digest[:32], digest[32:]]

    def _count_lines(self):
        stats = self.sim.stats
        hist = stats["trait_histogram"]
        return [
            f"Generation: {stats['generation']:,}",
            f"Empty: {stats['empty']}",
            f"Born:  {stats['born']}",
            f"Alive: {stats['alive']}",
            f"Dying: {stats['dying']}",
            f"Mean trait: {stats['mean_trait']:.2f}",
            "Traits: " + " ".join(str(n) for n in hist),
        ]

    # -- actions -----------------------------------------------------------

    def _on_preset_select(self, idx, name):
        self.sim.apply_preset(PRESET_ORDER[idx])
        self.cursor = (0, 0)

    def _on_step(self):
        self.sim.step()

    def _on_run_toggle(self):
        self.paused = not self.paused
        if self.run_button:
            self.run_button.active = not self.paused

    def _on_reset(self):
        self.sim.reset()

    def _on_clear(self):
        self.sim.clear()

    def _on_speed_change(self, val):
        self.ticks_per_second = val

    def _edit_seed(self, text):
        self.sim.reseed(text[:MAX_SEED_LEN])

    def _move_cursor(self, dx, dy):
        grid = self.sim.grid
        x = min(max(self.cursor[0] + dx, 0), grid.width - 1)
        y = min(max(self.cursor[1] + dy, 0), grid.height - 1)
        self.cursor = (x, y)

    # -- drawing -----------------------------------------------------------

    def _draw_grid(self, screen):
        px = self.cell_px
        rgb = render_rgb(self.sim.grid, scale=px)
        surface = pygame.surfarray.make_surface(rgb.swapaxes(0, 1))
        screen.blit(surface, (0, 0))
        cx, cy = self.cursor
        pygame.draw.rect(screen, THEME["cursor"], pygame.Rect(cx * px, cy * px, px, px), 1)

    def _draw_hud(self, screen, font):
        stats = self.sim.stats
        line = (f"{self.sim.preset['name']}  |  Gen: {stats['generation']:,}  |  "
                f"Alive: {stats['alive_pct']:.1f}%  |  "
                f"{self.sim.grid.width}x{self.sim.grid.height}")
        if stats["settled"]:
            line += "  |  settled"
        if self.paused:
            line = "[PAUSED]  " + line
        bg = pygame.Surface((self.canvas_w, 24), pygame.SRCALPHA)
        bg.fill((0, 0, 0, 140))
        screen.blit(bg, (0, self.canvas_h - 24))
        screen.blit(font.render(line, True, THEME["text_bright"]), (10, self.canvas_h - 20))

    def _handle_click(self, pos):
        px = self.cell_px
        x, y = pos[0] // px, pos[1] // px
        grid = self.sim.grid
        if x < grid.width and y < grid.height:
            self.cursor = (x, y)
            self.sim.toggle(x, y)

    # -- main loop ---------------------------------------------------------

    def run(self):
        """Main viewer loop."""
        pygame.init()
        screen = pygame.display.set_mode((self.total_w, self.canvas_h))
        pygame.display.set_caption("Trait Life")
        clock = pygame.time.Clock()
        hud_font = pygame.font.SysFont("menlo", 13)
        panel_font = pygame.font.SysFont("menlo", 12)

        self._build_panel()
        last_time = time.time()

        while self.running:
            now = time.time()
            dt = min(now - last_time, 0.1)
            last_time = now

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.KEYDOWN:
                    screen = self._handle_keydown(event, screen)
                elif self.panel_visible and self.panel.handle_event(event):
                    continue
                elif (event.type == pygame.MOUSEBUTTONDOWN and event.button == 1
                        and event.pos[0] < self.canvas_w):
                    self._handle_click(event.pos)

            if not self.paused:
                self.tick_accumulator += dt * self.ticks_per_second
                while self.tick_accumulator >= 1.0:
                    self.sim.step()
                    self.tick_accumulator -= 1.0

            screen.fill(THEME["bg"])
            self._draw_grid(screen)
            self._draw_hud(screen, hud_font)
            if self.panel_visible:
                self.panel.draw(screen, panel_font)

            pygame.display.flip()
            clock.tick(60)

        pygame.quit()

    def _handle_keydown(self, event, screen):
        key = event.key

        if key == pygame.K_ESCAPE:
            self.running = False
        elif key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            self._on_step()
        elif key == pygame.K_SPACE:
            self._on_run_toggle()
        elif key == pygame.K_TAB:
            self.panel_visible = not self.panel_visible
            screen = pygame.display.set_mode((self.total_w, self.canvas_h))
        elif key == pygame.K_UP:
            self._move_cursor(0, -1)
        elif key == pygame.K_DOWN:
            self._move_cursor(0, 1)
        elif key == pygame.K_LEFT:
            self._move_cursor(-1, 0)
        elif key == pygame.K_RIGHT:
            self._move_cursor(1, 0)
        elif key == pygame.K_BACKSPACE:
            if self.sim.seed_text:
                self._edit_seed(self.sim.seed_text[:-1])
        elif event.unicode == "-":
            self._on_reset()
        elif event.unicode == "+":
            self.sim.toggle(*self.cursor)
        elif event.unicode and event.unicode.isprintable():
            self._edit_seed(self.sim.seed_text + event.unicode)
            logger.debug("Seed is now %r", self.sim.seed_text)
        return screen
