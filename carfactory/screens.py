"""Menu screens shown at each assembly step."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from .parts import CLEAR_SCREEN, Step

SEPARATOR = "==============================="

_SCREENS = {
    Step.CAR_TYPE: [
        "        ______________",
        "       /|            | ",
        "  ____/_|_____________|____",
        " |                      O  |",
        " '-(@)----------------(@)--'",
        SEPARATOR,
        "어떤 차량 타입을 선택할까요?",
        "1. Sedan",
        "2. SUV",
        "3. Truck",
    ],
    Step.ENGINE: [
        "어떤 엔진을 탑재할까요?",
        "0. 뒤로가기",
        "1. GM",
        "2. TOYOTA",
        "3. WIA",
        "4. 고장난 엔진",
    ],
    Step.BRAKE_SYSTEM: [
        "어떤 제동장치를 선택할까요?",
        "0. 뒤로가기",
        "1. MANDO",
        "2. CONTINENTAL",
        "3. BOSCH",
    ],
    Step.STEERING_SYSTEM: [
        "어떤 조향장치를 선택할까요?",
        "0. 뒤로가기",
        "1. BOSCH",
        "2. MOBIS",
    ],
    Step.RUN_TEST: [
        "멋진 차량이 완성되었습니다.",
        "어떤 동작을 할까요?",
        "0. 처음 화면으로 돌아가기",
        "1. RUN",
        "2. Test",
    ],
}


class ScreenManager:
    """Renders the menu for a step and writes it to an output stream."""

    def __init__(self, out: Optional[TextIO] = None) -> None:
        self._out = out if out is not None else sys.stdout

    def render(self, step: int) -> str:
        """The full text of the screen for ``step``; unknown steps give only the separator."""
        lines = _SCREENS.get(step)
        body = CLEAR_SCREEN + "".join(f"{line}\n" for line in lines) if lines else ""
        return body + SEPARATOR + "\n"

    def print_screen(self, step: int) -> None:
        """Write the screen for ``step`` to the output stream."""
        self._out.write(self.render(step))