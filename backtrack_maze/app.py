import logging
import sys

import pygame

from . import config
from .builder import RandomChooser
from .config import MazeConfig
from .controller import Phase, PhaseController
from .grid import Direction

logger = logging.getLogger(__name__)

COLOR_BG = (0, 0, 0)
COLOR_WALL = (255, 255, 255)
COLOR_BUILT = (0, 0, 255)
COLOR_SOLVE_VISITED = (70, 70, 170)
COLOR_PATH = (255, 0, 0)
COLOR_PANEL = (230, 230, 230)
COLOR_TEXT = (0, 0, 0)

# ==========================================
# 1. UI ELEMENTS
# ==========================================

class SimpleSlider:
    def __init__(self, x, y, w, h, min_val, max_val, start_val):
        self.rect = pygame.Rect(x, y, w, h)
        self.min_val = min_val
        self.max_val = max_val
        self.val = start_val
        self.dragging = False
        self.knob_rect = pygame.Rect(x, y - 5, 20, h + 10)
        self.update_knob_pos()

    def update_knob_pos(self):
        ratio = (self.val - self.min_val) / (self.max_val - self.min_val)
        self.knob_rect.centerx = self.rect.x + (self.rect.width * ratio)

    def handle_event(self, event):
        if event.type == pygame.MOUSEBUTTONDOWN:
            if self.knob_rect.collidepoint(event.pos) or self.rect.collidepoint(event.pos):
                self.dragging = True
                self.update_value(event.pos[0])
        elif event.type == pygame.MOUSEBUTTONUP:
            self.dragging = False
        elif event.type == pygame.MOUSEMOTION and self.dragging:
            self.update_value(event.pos[0])

    def update_value(self, mouse_x):
        x = max(self.rect.x, min(mouse_x, self.rect.right))
        ratio = (x - self.rect.x) / self.rect.width
        self.val = self.min_val + (ratio * (self.max_val - self.min_val))
        self.update_knob_pos()

    def draw(self, screen):
        pygame.draw.rect(screen, (180, 180, 180), self.rect, border_radius=5)
        fill_rect = pygame.Rect(self.rect.x, self.rect.y, self.knob_rect.centerx - self.rect.x, self.rect.height)
        pygame.draw.rect(screen, (100, 100, 200), fill_rect, border_radius=5)
        pygame.draw.rect(screen, (50, 50, 150), self.knob_rect, border_radius=5)
        pygame.draw.rect(screen, (255, 255, 255), self.knob_rect, 1, border_radius=5)

    def get_value(self): return self.val


class SimpleButton:
    def __init__(self, x, y, w, h, text, callback, color=(200, 50, 50)):
        self.rect = pygame.Rect(x, y, w, h)
        self.text = text
        self.callback = callback
        self.font = pygame.font.SysFont('Arial', 14, bold=True)
        self.bg_color = color
        self.hover_color = (min(color[0]+30, 255), min(color[1]+30, 255), min(color[2]+30, 255))
        self.active_color = (0, 150, 0)
        self.is_hovered = False
        self.is_active = False

    def handle_event(self, event):
        if event.type == pygame.MOUSEMOTION:
            self.is_hovered = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN:
            if self.rect.collidepoint(event.pos):
                self.callback()

    def draw(self, screen):
        color = self.active_color if self.is_active else (self.hover_color if self.is_hovered else self.bg_color)
        pygame.draw.rect(screen, color, self.rect, border_radius=5)
        pygame.draw.rect(screen, (0, 0, 0), self.rect, 2, border_radius=5)
        text_surf = self.font.render(self.text, True, (255, 255, 255))
        screen.blit(text_surf, text_surf.get_rect(center=self.rect.center))

# ==========================================
# 2. RENDERER
# ==========================================

def draw_maze(screen, controller: PhaseController):
    maze = controller.maze
    step_x = config.VIEWPORT_W / maze.width
    step_y = config.VIEWPORT_H / maze.height

    for idx in range(maze.size()):
        if not maze.isBuildVisited(idx):
            continue
        c, r = maze.toCoords(idx)
        x = int(c * step_x)
        y = int(r * step_y)
        w = int((c + 1) * step_x) - x
        h = int((r + 1) * step_y) - y

        if maze.isOnPath(idx): color = COLOR_PATH
        elif maze.isSolveVisited(idx): color = COLOR_SOLVE_VISITED
        else: color = COLOR_BUILT
        pygame.draw.rect(screen, color, (x, y, w, h))

        if not maze.hasPassage(idx, Direction.North):
            pygame.draw.line(screen, COLOR_WALL, (x, y), (x + w, y))
        if not maze.hasPassage(idx, Direction.South):
            pygame.draw.line(screen, COLOR_WALL, (x, y + h), (x + w, y + h))
        if not maze.hasPassage(idx, Direction.East):
            pygame.draw.line(screen, COLOR_WALL, (x + w, y), (x + w, y + h))
        if not maze.hasPassage(idx, Direction.West):
            pygame.draw.line(screen, COLOR_WALL, (x, y), (x, y + h))

    if controller.fade > 0:
        overlay = pygame.Surface((config.VIEWPORT_W, config.VIEWPORT_H), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, min(controller.fade, 255)))
        screen.blit(overlay, (0, 0))

# ==========================================
# 3. MAIN LOOP
# ==========================================

def main(cfg: MazeConfig):
    pygame.init()
    screen = pygame.display.set_mode((config.VIEWPORT_W + config.CONTROL_PANEL_WIDTH, config.VIEWPORT_H))
    clock = pygame.time.Clock()
    font = pygame.font.SysFont('Arial', 18)

    chooser = RandomChooser(cfg.seed) if cfg.seed is not None else None
    controller = PhaseController(cfg.width, cfg.height, cfg.fast_build, cfg.fast_solve, chooser)
    logger.info("Starting %dx%d maze (fast build: %s, fast solve: %s)",
                cfg.width, cfg.height, cfg.fast_build, cfg.fast_solve)

    def toggle_fast_build():
        controller.fast_build = not controller.fast_build
        btn_build.is_active = controller.fast_build

    def toggle_fast_solve():
        controller.fast_solve = not controller.fast_solve
        btn_solve.is_active = controller.fast_solve

    panel_x = config.VIEWPORT_W + 20
    slider = SimpleSlider(panel_x, 60, 180, 20, -10, 20, 0)
    btn_build = SimpleButton(panel_x, 110, 85, 30, "Fast build", toggle_fast_build, color=(100, 100, 200))
    btn_solve = SimpleButton(panel_x + 95, 110, 85, 30, "Fast solve", toggle_fast_solve, color=(100, 100, 200))
    btn_restart = SimpleButton(panel_x + 40, 160, 100, 30, "Restart", controller.restart)
    btn_build.is_active = controller.fast_build
    btn_solve.is_active = controller.fast_solve
    buttons = [btn_build, btn_solve, btn_restart]

    frame_counter = 0
    running = True
    try:
        while running:
            dt = clock.tick(config.FPS) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE:
                    running = False
                slider.handle_event(event)
                for btn in buttons:
                    btn.handle_event(event)

            # Negative speed waits frames between ticks, positive adds ticks per frame.
            val = int(slider.get_value())
            if val < 0:
                frame_counter += 1
                if frame_counter > abs(val):
                    frame_counter = 0
                    controller.tick(dt)
                else:
                    controller.elapsed += dt
            else:
                controller.tick(dt)
                for _ in range(val):
                    controller.tick(0.0)

            pygame.display.set_caption(f"Maze - {controller.phase}")
            screen.fill(COLOR_BG)
            draw_maze(screen, controller)

            pygame.draw.rect(screen, COLOR_PANEL, (config.VIEWPORT_W, 0, config.CONTROL_PANEL_WIDTH, config.VIEWPORT_H))
            screen.blit(font.render("Speed:", True, COLOR_TEXT), (panel_x, 25))
            screen.blit(font.render(f"Phase: {controller.phase}", True, COLOR_TEXT), (panel_x, 215))
            if controller.phase == Phase.Solved:
                screen.blit(font.render(f"Path: {len(controller.solution())} cells", True, COLOR_TEXT), (panel_x, 240))
            slider.draw(screen)
            for btn in buttons:
                btn.draw(screen)

            pygame.display.flip()
    except Exception:
        logger.exception("Maze loop crashed")
        raise
    finally:
        logger.info("Shutting down after %d restarts", controller.resets)
        pygame.quit()
    return 0


def run(argv=None):
    cfg = config.parse_args(argv)
    logging.basicConfig(level=cfg.log_level, format=config.LOG_FORMAT)
    sys.exit(main(cfg))
