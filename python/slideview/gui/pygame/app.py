"""Pygame GUI frontend with image tiles and drag-to-swipe input.

The window is a pure collaborator of ``PuzzleSession``: it keeps its own
copy of the cell order and updates it from ``tiles_swapped`` events, cuts
tile artwork from the regions sent with ``board_created``, and reads the
move counter and solved state from HUD events.
"""

from __future__ import annotations

import logging

import pygame

from slidepuzzle.config import PuzzleConfig
from slidepuzzle.engine.moves import SWIPE_THRESHOLD
from slidepuzzle.engine.session import PuzzleSession, SessionState
from slidepuzzle.errors import MissingResourceError
from slidepuzzle.events import (
    EVENT_BOARD_CREATED,
    EVENT_EMPTY_FILLED,
    EVENT_MOVE_COUNT_CHANGED,
    EVENT_PUZZLE_SOLVED,
    EVENT_TILES_SWAPPED,
)
from slidepuzzle.models.board import EMPTY, Cell, Direction
from slidepuzzle.models.regions import ImageRegion

LOGGER = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Catppuccin Mocha palette
# ---------------------------------------------------------------------------
COL_BASE = (30, 30, 46)
COL_MANTLE = (24, 24, 37)
COL_SURFACE0 = (49, 50, 68)
COL_SURFACE1 = (69, 71, 90)
COL_OVERLAY0 = (108, 112, 134)
COL_TEXT = (205, 214, 244)
COL_BLUE = (137, 180, 250)
COL_GREEN = (166, 227, 161)
COL_PINK = (245, 194, 231)
COL_RED = (243, 139, 168)

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
WIN_W, WIN_H = 500, 640
TILE_GAP = 4
MARGIN = 20
BOARD_TOP = 76
BOARD_MAX_W = WIN_W - 2 * MARGIN
BOARD_MAX_H = WIN_H - BOARD_TOP - 110

SHUFFLE_STEPS_PER_FRAME = 4


# ---------------------------------------------------------------------------
# Simple clickable button
# ---------------------------------------------------------------------------
class _Btn:
    __slots__ = ("rect", "text", "font", "bg", "hover", "fg", "_hot")

    def __init__(
        self,
        rect: tuple[int, int, int, int],
        text: str,
        font: pygame.font.Font,
        *,
        bg: tuple = COL_SURFACE0,
        hover: tuple = COL_SURFACE1,
        fg: tuple = COL_TEXT,
    ) -> None:
        self.rect = pygame.Rect(rect)
        self.text = text
        self.font = font
        self.bg = bg
        self.hover = hover
        self.fg = fg
        self._hot = False

    def draw(self, surf: pygame.Surface) -> None:
        pygame.draw.rect(surf, self.hover if self._hot else self.bg, self.rect, border_radius=8)
        lbl = self.font.render(self.text, True, self.fg)
        surf.blit(
            lbl,
            (
                self.rect.centerx - lbl.get_width() // 2,
                self.rect.centery - lbl.get_height() // 2,
            ),
        )

    def motion(self, pos: tuple[int, int]) -> None:
        self._hot = self.rect.collidepoint(pos)

    def hit(self, pos: tuple[int, int]) -> bool:
        return self.rect.collidepoint(pos)


def _cx(w: int) -> int:
    return (WIN_W - w) // 2


def _blit_center(surf: pygame.Surface, rendered: pygame.Surface, y: int) -> None:
    surf.blit(rendered, (_cx(rendered.get_width()), y))


# ---------------------------------------------------------------------------
# Main application
# ---------------------------------------------------------------------------
class PygameApp:
    def __init__(self, config: PuzzleConfig) -> None:
        self._config = config
        self._session = PuzzleSession(config)
        self._image = self._load_image(config)

        pygame.init()
        self._surf = pygame.display.set_mode((WIN_W, WIN_H))
        pygame.display.set_caption("Sliding Puzzle")
        self._clock = pygame.time.Clock()

        self._f_title = pygame.font.SysFont("Helvetica", 22, bold=True)
        self._f_body = pygame.font.SysFont("Helvetica", 16)
        self._f_btn = pygame.font.SysFont("Helvetica", 15, bold=True)
        self._f_small = pygame.font.SysFont("Helvetica", 13)

        self._tile_px = self._fit_tile_px(config.cols, config.rows)
        self._f_tile = pygame.font.SysFont("Helvetica", max(14, self._tile_px // 3), bold=True)

        # Renderer-side view of the board, driven by session events.
        self._cells: list[Cell] = []
        self._tile_images: dict[int, pygame.Surface] = {}
        self._filled_index: int | None = None
        self._moves = 0
        self._solved = False
        self._shuffle_iter = None
        self._drag: tuple[int, tuple[int, int]] | None = None

        bus = self._session.bus
        bus.subscribe(EVENT_BOARD_CREATED, self._on_board_created)
        bus.subscribe(EVENT_TILES_SWAPPED, self._on_tiles_swapped)
        bus.subscribe(EVENT_MOVE_COUNT_CHANGED, self._on_moves)
        bus.subscribe(EVENT_EMPTY_FILLED, self._on_empty_filled)
        bus.subscribe(EVENT_PUZZLE_SOLVED, self._on_solved)

        bw, gap = 140, 16
        sx = _cx(2 * bw + gap)
        self._restart_btn = _Btn(
            (sx, WIN_H - 70, bw, 44), "RESTART (R)", self._f_btn,
            bg=COL_BLUE, hover=(180, 205, 255), fg=COL_BASE,
        )
        self._exit_btn = _Btn(
            (sx + bw + gap, WIN_H - 70, bw, 44), "EXIT (Esc)", self._f_btn,
            bg=COL_RED, hover=(255, 170, 185), fg=COL_BASE,
        )

    # ── setup ───────────────────────────────────────────────────────────────

    @staticmethod
    def _load_image(config: PuzzleConfig) -> pygame.Surface | None:
        if config.image is None:
            return None
        try:
            return pygame.image.load(str(config.image))
        except (pygame.error, FileNotFoundError) as exc:
            raise MissingResourceError("Source image", config.image) from exc

    @staticmethod
    def _fit_tile_px(cols: int, rows: int) -> int:
        by_w = (BOARD_MAX_W - (cols + 1) * TILE_GAP) // cols
        by_h = (BOARD_MAX_H - (rows + 1) * TILE_GAP) // rows
        return max(8, min(by_w, by_h))

    def _start(self) -> None:
        size = self._image.get_size() if self._image is not None else None
        if self._shuffle_iter is None:
            self._session.start(image_size=size)
        else:
            self._session.restart()
        self._shuffle_iter = self._session.shuffle_steps()

    # ── session events ──────────────────────────────────────────────────────

    def _on_board_created(
        self,
        sender: PuzzleSession,
        width: int,
        height: int,
        cells: list[Cell],
        regions: dict[int, ImageRegion] | None,
    ) -> None:
        self._cells = list(cells)
        self._filled_index = None
        self._moves = 0
        self._solved = False
        self._tile_images = {}
        if regions is None or self._image is None:
            return

        image_h = self._image.get_height()
        px = self._tile_px
        for home, region in regions.items():
            r = region.to_top_left(image_h).centered_square()
            piece = self._image.subsurface(pygame.Rect(r.x, r.y, r.width, r.height))
            self._tile_images[home] = pygame.transform.smoothscale(piece, (px, px))

    def _on_tiles_swapped(
        self, sender: PuzzleSession, index_a: int, index_b: int, shuffling: bool
    ) -> None:
        cells = self._cells
        cells[index_a], cells[index_b] = cells[index_b], cells[index_a]

    def _on_moves(self, sender: PuzzleSession, moves: int) -> None:
        self._moves = moves

    def _on_empty_filled(
        self, sender: PuzzleSession, index: int, region: ImageRegion | None
    ) -> None:
        self._filled_index = index

    def _on_solved(self, sender: PuzzleSession, moves: int) -> None:
        self._solved = True

    # ── geometry ────────────────────────────────────────────────────────────

    def _board_origin(self) -> tuple[int, int, int, int]:
        """Return (origin_x, origin_y, total_w, total_h) of the board area."""
        cols, rows = self._config.cols, self._config.rows
        total_w = cols * self._tile_px + (cols + 1) * TILE_GAP
        total_h = rows * self._tile_px + (rows + 1) * TILE_GAP
        return _cx(total_w), BOARD_TOP, total_w, total_h

    def _tile_rect(self, index: int) -> pygame.Rect:
        ox, oy, _, _ = self._board_origin()
        row, col = divmod(index, self._config.cols)
        px = self._tile_px
        return pygame.Rect(
            ox + TILE_GAP + col * (px + TILE_GAP),
            oy + TILE_GAP + row * (px + TILE_GAP),
            px,
            px,
        )

    def _index_at(self, pos: tuple[int, int]) -> int | None:
        for index in range(len(self._cells)):
            if self._tile_rect(index).collidepoint(pos):
                return index
        return None

    # ── drawing ─────────────────────────────────────────────────────────────

    def _draw_tile(self, index: int, home: int) -> None:
        rect = self._tile_rect(index)
        if home in self._tile_images:
            self._surf.blit(self._tile_images[home], rect.topleft)
            if index == home:
                pygame.draw.rect(self._surf, COL_GREEN, rect, width=2, border_radius=4)
            return

        col = COL_GREEN if index == home else COL_BLUE
        pygame.draw.rect(self._surf, col, rect, border_radius=6)
        lbl = self._f_tile.render(str(home + 1), True, COL_BASE)
        self._surf.blit(
            lbl,
            (
                rect.centerx - lbl.get_width() // 2,
                rect.centery - lbl.get_height() // 2,
            ),
        )

    def _draw(self) -> None:
        self._surf.fill(COL_BASE)
        cfg = self._config

        _blit_center(
            self._surf,
            self._f_title.render(f"Sliding Puzzle  {cfg.cols}×{cfg.rows}", True, COL_TEXT),
            14,
        )
        if self._session.state is SessionState.SHUFFLING:
            hud = self._f_body.render("Shuffling…", True, COL_PINK)
        elif self._solved:
            hud = self._f_body.render(
                f"★ Solved in {self._moves} moves ★", True, COL_GREEN
            )
        else:
            hud = self._f_body.render(f"Moves: {self._moves}", True, COL_PINK)
        _blit_center(self._surf, hud, 44)

        ox, oy, total_w, total_h = self._board_origin()
        pygame.draw.rect(
            self._surf, COL_MANTLE, pygame.Rect(ox, oy, total_w, total_h), border_radius=10
        )
        for index, tile in enumerate(self._cells):
            if tile is not EMPTY:
                self._draw_tile(index, tile)
            elif index == self._filled_index:
                self._draw_tile(index, index)

        self._restart_btn.draw(self._surf)
        self._exit_btn.draw(self._surf)
        _blit_center(
            self._surf,
            self._f_small.render("Drag a tile or use the arrow keys", True, COL_OVERLAY0),
            WIN_H - 96,
        )

    # ── input ───────────────────────────────────────────────────────────────

    _KEY_DIRECTIONS = {
        pygame.K_UP: Direction.UP,
        pygame.K_w: Direction.UP,
        pygame.K_DOWN: Direction.DOWN,
        pygame.K_s: Direction.DOWN,
        pygame.K_LEFT: Direction.LEFT,
        pygame.K_a: Direction.LEFT,
        pygame.K_RIGHT: Direction.RIGHT,
        pygame.K_d: Direction.RIGHT,
    }

    def _handle(self, ev: pygame.event.Event) -> bool:
        if ev.type == pygame.MOUSEMOTION:
            self._restart_btn.motion(ev.pos)
            self._exit_btn.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if self._restart_btn.hit(ev.pos):
                self._start()
            elif self._exit_btn.hit(ev.pos):
                return False
            else:
                index = self._index_at(ev.pos)
                self._drag = (index, ev.pos) if index is not None else None
        elif ev.type == pygame.MOUSEBUTTONUP and ev.button == 1 and self._drag:
            index, (x0, y0) = self._drag
            self._drag = None
            # Screen y grows downwards; gestures expect "up" as positive.
            dx, dy = ev.pos[0] - x0, y0 - ev.pos[1]
            result = self._session.swipe(index, dx, dy, SWIPE_THRESHOLD)
            LOGGER.debug("swipe from %d (%d, %d): %s", index, dx, dy, result.outcome)
        elif ev.type == pygame.KEYDOWN:
            if ev.key in self._KEY_DIRECTIONS:
                self._session.move_toward_empty(self._KEY_DIRECTIONS[ev.key])
            elif ev.key == pygame.K_r:
                self._start()
            elif ev.key == pygame.K_ESCAPE:
                return False
        return True

    # ── main loop ───────────────────────────────────────────────────────────

    def run_loop(self) -> None:
        self._start()
        running = True
        while running:
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT or not self._handle(ev):
                    running = False
                    break

            if self._session.state is SessionState.SHUFFLING:
                for _ in range(SHUFFLE_STEPS_PER_FRAME):
                    if next(self._shuffle_iter, None) is None:
                        break

            self._draw()
            pygame.display.flip()
            self._clock.tick(60)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(config: PuzzleConfig) -> None:
    """Launch the Pygame GUI."""
    try:
        PygameApp(config).run_loop()
    finally:
        pygame.quit()
