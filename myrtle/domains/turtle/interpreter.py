# myrtle/domains/turtle/interpreter.py
import logging
import sys
from dataclasses import dataclass
from typing import IO, Callable, Dict, List, Optional, Tuple

from ...framework.base_interpreter import BaseInterpreter, TokenSource
from ...framework.errors import ExitCode, MissingArgumentError, UnknownCommandError
from .canvas import Canvas
from .state import TurtleState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Command:
    name: str
    args: Tuple[str, ...]
    perform: Callable[..., None]

    @property
    def arity(self) -> int:
        return len(self.args)


class MyrtleInterpreter(BaseInterpreter):
    """
    Runs a Myrtle command stream against a fresh turtle and canvas.

    Each command handler receives its argument tokens already pulled from
    the stream. The canvas is written to `output` once, either when the
    stream runs out or when a `stop` command is performed.
    """
    def __init__(
        self,
        tokens: TokenSource,
        output: IO[str],
        rows: int = 50,
        cols: int = 50,
        verbose: bool = False,
        console: Optional[IO[str]] = None,
    ):
        super().__init__(tokens)
        self.output = output
        self.verbose = verbose
        self.console = console if console is not None else sys.stdout
        self.canvas = Canvas(rows, cols)
        self.turtle = TurtleState(rows, cols)
        self.stopped = False
        self.commands = self._build_command_table()

    def _build_command_table(self) -> Dict[str, Command]:
        table: List[Command] = [
            Command("backward", ("n",), self.backward),
            Command("forward", ("n",), self.forward),
            Command("hyper", ("row", "col"), self.hyper),
            Command("left", (), self.left),
            Command("penchar", ("c",), self.penchar),
            Command("pendown", (), self.pendown),
            Command("penup", (), self.penup),
            Command("right", (), self.right),
            Command("stop", (), self.stop),
        ]
        return {command.name: command for command in table}

    def run(self) -> ExitCode:
        self.canvas.clear()
        self.turtle.line = 1
        while not self.stopped:
            token = self.next_token()
            if token is None:
                break
            self.perform(token)
            self.turtle.line += 1

        if not self.stopped:
            self.write_world()
        return ExitCode.NORMAL

    def lookup(self, name: str) -> Command:
        command = self.commands.get(name)
        if command is None:
            raise UnknownCommandError(name, self.turtle.line)
        return command

    def perform(self, name: str):
        if self.verbose:
            print(f"Performing command: {name}", file=self.console)
        command = self.lookup(name)
        args = []
        for arg_name in command.args:
            token = self.next_token()
            if token is None:
                raise MissingArgumentError(name, arg_name, self.turtle.line)
            args.append(token)
        logger.debug("line %d (source line %d): %s %s",
                     self.turtle.line, self.tokens.source_line, name, " ".join(args))
        command.perform(*args)

    # --- Drawing ---
    def draw(self):
        if self.turtle.pen.down:
            self.canvas.draw_at(self.turtle.row, self.turtle.col, self.turtle.pen.glyph)

    def move(self, squares: int, direction: int):
        for _ in range(squares):
            before = self.turtle.position
            self.turtle.step(direction)
            self.draw()
            if self.turtle.position == before:
                # Against a wall; the remaining steps would redraw this cell.
                break

    def write_world(self):
        self.canvas.write(self.output)

    # --- Command Rules ---
    def forward(self, n): self.move(self.NUMBER(n), 1)
    def backward(self, n): self.move(self.NUMBER(n), -1)
    def left(self): self.turtle.turn_left()
    def right(self): self.turtle.turn_right()
    def penup(self): self.turtle.pen.down = False
    def pendown(self): self.turtle.pen.down = True
    def penchar(self, c): self.turtle.pen.glyph = self.CHAR(c)

    def hyper(self, row, col):
        # One draw at the destination, nothing along the way.
        self.turtle.move_to(self.NUMBER(row), self.NUMBER(col))
        self.draw()

    def stop(self):
        self.write_world()
        self.stopped = True
