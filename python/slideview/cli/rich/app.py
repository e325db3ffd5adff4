"""Rich terminal frontend drawn with tables and panels.

Acts as the renderer and HUD for a ``PuzzleSession``: the board is
redrawn from session state, the move counter and the solved banner are
fed by session events.
"""

from __future__ import annotations

import time

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from slidepuzzle.config import PuzzleConfig
from slidepuzzle.engine.session import PuzzleSession, SessionState
from slidepuzzle.events import EVENT_MOVE_COUNT_CHANGED, EVENT_PUZZLE_SOLVED
from slidepuzzle.models.board import EMPTY, Board, Direction
from slideview.cli.input_handler import read_key

console = Console()

SHUFFLE_FRAME_DELAY = 0.005


class _Hud:
    """Move counter and banner, updated only through session events."""

    def __init__(self, session: PuzzleSession) -> None:
        self.moves = 0
        self.solved = False
        session.bus.subscribe(EVENT_MOVE_COUNT_CHANGED, self._on_moves)
        session.bus.subscribe(EVENT_PUZZLE_SOLVED, self._on_solved)

    def reset(self) -> None:
        self.moves = 0
        self.solved = False

    def _on_moves(self, sender: PuzzleSession, moves: int) -> None:
        self.moves = moves

    def _on_solved(self, sender: PuzzleSession, moves: int) -> None:
        self.solved = True


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board, filled_index: int | None = None) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.width):
        table.add_column(width=width + 1, justify="center")

    for row in range(board.height):
        cells: list[str] = []
        for col in range(board.width):
            index = board.index_of(row, col)
            tile = board.cell_at(index)
            if index == filled_index:
                cells.append(f"[bold green]{index + 1:>{width}}[/bold green]")
            elif tile is EMPTY:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(index):
                cells.append(f"[bold green]{tile + 1:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{tile + 1:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _controls() -> Text:
    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  slide   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  restart   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")
    return controls


def _draw(session: PuzzleSession, hud: _Hud, status: str = "") -> None:
    console.clear()
    board = session.board
    assert board is not None

    table = _render_board(board, session.filled_index)
    title = f"Sliding Puzzle  {board.width}×{board.height}"

    stats = Text()
    if session.state is SessionState.SHUFFLING:
        stats.append("  Shuffling…", style="bold magenta")
    else:
        stats.append("  Moves: ", style="dim")
        stats.append(str(hud.moves), style="bold yellow")

    parts = [Align.center(table), Text(""), Align.center(stats)]
    if hud.solved:
        congrats = Text()
        congrats.append("\n  ★ ", style="bold yellow")
        congrats.append("SOLVED!", style="bold green")
        congrats.append(" ★", style="bold yellow")
        parts.append(Align.center(congrats))

    panel = Panel(
        Group(*parts),
        title=f"[bold cyan]{title}[/bold cyan]",
        border_style="bold green" if hud.solved else "bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(_controls()))


def _help_text() -> str:
    return (
        "[cyan]Arrows slide the tile next to the gap into it.  "
        "R reshuffles, Q quits.[/cyan]"
    )


# -- game loop ----------------------------------------------------------------


def _shuffle(session: PuzzleSession, hud: _Hud) -> None:
    """Animate the shuffle one step per frame."""
    hud.reset()
    for _ in session.shuffle_steps():
        _draw(session, hud)
        time.sleep(SHUFFLE_FRAME_DELAY)


def run(config: PuzzleConfig) -> None:
    """Launch the Rich terminal game."""
    session = PuzzleSession(config)
    hud = _Hud(session)
    session.start()
    _shuffle(session, hud)

    status = ""
    while True:
        _draw(session, hud, status)
        status = ""
        key = read_key()

        if isinstance(key, Direction):
            result = session.move_toward_empty(key)
            if not result.moved and session.state is SessionState.PLAYING:
                status = f"[dim]Nothing can slide {key.value}.[/dim]"
        elif key == "restart":
            session.restart()
            _shuffle(session, hud)
        elif key == "help":
            status = _help_text()
        elif key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return
