"""Interactive car assembly session: menus, input handling and the main loop."""

from __future__ import annotations

import argparse
import re
import sys
from enum import Enum
from typing import Callable, Optional, Sequence, TextIO

from .checks import ActionManager, Assembly
from .managers import (
    BrakeSystemManager,
    CarManager,
    EngineManager,
    PartManager,
    SteeringSystemManager,
)
from .parts import Result, SelectionError, Step, delay
from .screens import ScreenManager

Pause = Callable[[int], None]

_NUMBER = re.compile(r"\s*[+-]?\d+")
_LINE_END = re.compile(r"[\r\n]")

PROMPT = "INPUT > "
GOODBYE = "바이바이"
NOT_INTEGER_ERROR = "ERROR :: 숫자만 입력 가능"
SYSTEM_ERROR = "System Error."


class InputKind(Enum):
    """What a line typed at the prompt turned out to be."""

    SUCCESS = 0
    EXIT = 1
    NOT_INTEGER = 2


def parse_input(line: str) -> tuple[InputKind, int]:
    """Classify a line of input; the number is 0 unless the kind is SUCCESS."""
    text = _LINE_END.split(line, maxsplit=1)[0]
    if text == "exit":
        return InputKind.EXIT, 0
    if not _NUMBER.fullmatch(text):
        return InputKind.NOT_INTEGER, 0
    return InputKind.SUCCESS, int(text)


def go_back(step: Step, answer: int) -> Optional[Step]:
    """The step to return to when the answer is 0, or None for any other answer.

    From the action menu, 0 returns to the very first question; elsewhere it
    goes back one question.
    """
    if answer != 0:
        return None
    if step == Step.RUN_TEST:
        return Step.CAR_TYPE
    return Step(max(step - 1, Step.CAR_TYPE))


class CarFactoryApp:
    """One assembly session reading answers from a stream and writing menus to another."""

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        out: Optional[TextIO] = None,
        pause: Optional[Pause] = None,
    ) -> None:
        self._in = stdin if stdin is not None else sys.stdin
        self._out = out if out is not None else sys.stdout
        self._pause = pause if pause is not None else delay
        self.screens = ScreenManager(self._out)
        self.cars = CarManager(self._out)
        self.engines = EngineManager(self._out)
        self.brakes = BrakeSystemManager(self._out)
        self.steering = SteeringSystemManager(self._out)
        self.actions = ActionManager(self._out, self._pause)
        self.last_result: Optional[Result] = None
        self._parts: dict[Step, PartManager] = {
            Step.CAR_TYPE: self.cars,
            Step.ENGINE: self.engines,
            Step.BRAKE_SYSTEM: self.brakes,
            Step.STEERING_SYSTEM: self.steering,
        }

    def validate(self, step: int, answer: int) -> int:
        """Return the answer if it is in range for ``step``; raise SelectionError otherwise."""
        if step == Step.RUN_TEST:
            return self.actions.validate(answer)
        manager = self._parts.get(step)
        if manager is None:
            raise SelectionError(SYSTEM_ERROR)
        return manager.validate(answer)

    def choose(self, step: int, answer: int) -> Step:
        """Act on a valid, non-zero answer and return the step to show next."""
        if step == Step.RUN_TEST:
            self.actions.set_options(
                Assembly(
                    car=self.cars.selected(),
                    engine=self.engines.selected(),
                    brake=self.brakes.selected(),
                    steering=self.steering.selected(),
                )
            )
            self.actions.select(answer)
            self.last_result = self.actions.perform()
            return Step.RUN_TEST
        manager = self._parts.get(step)
        if manager is None:
            raise SelectionError(SYSTEM_ERROR)
        manager.select(answer)
        self._pause(800)
        return manager.next_step()

    def handle(self, step: Step, line: str) -> Optional[Step]:
        """Process one line typed at ``step``; return the next step, or None to quit."""
        kind, answer = parse_input(line)
        if kind is InputKind.EXIT:
            self._out.write(GOODBYE + "\n")
            return None
        if kind is InputKind.NOT_INTEGER:
            self._out.write(NOT_INTEGER_ERROR + "\n")
            self._pause(800)
            return step
        try:
            self.validate(step, answer)
        except SelectionError as error:
            self._out.write(f"{error}\n")
            self._pause(800)
            return step
        previous = go_back(step, answer)
        if previous is not None:
            return previous
        return self.choose(step, answer)

    def run(self) -> None:
        """Show menus and read answers until the user types exit or input ends."""
        step: Optional[Step] = Step.CAR_TYPE
        while step is not None:
            self.screens.print_screen(step)
            self._out.write(PROMPT)
            self._out.flush()
            line = self._in.readline()
            if not line:
                self._out.write("\n" + GOODBYE + "\n")
                return
            step = self.handle(step, line)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start an interactive assembly session on the terminal."""
    parser = argparse.ArgumentParser(
        prog="carfactory", description="Assemble a car from parts, then run or test it."
    )
    parser.parse_args(argv)
    CarFactoryApp().run()
    return 0


if __name__ == "__main__":
    sys.exit(main())