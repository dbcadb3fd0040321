"""Running and testing an assembled car against the part-combination rules."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable, Optional, TextIO

from .parts import (
    Action,
    BrakeSystem,
    CarType,
    Engine,
    Result,
    SelectionError,
    SteeringSystem,
    delay,
)

Pause = Callable[[int], None]

_FAIL_HEADER = "자동차 부품 조합 테스트 결과 : FAIL"
_PASS_LINE = "자동차 부품 조합 테스트 결과 : PASS"
_ACTION_RANGE_ERROR = "ERROR :: Run 또는 Test 중 하나를 선택 필요"


@dataclass(frozen=True)
class Assembly:
    """The four parts chosen for one car."""

    car: CarType
    engine: Engine
    brake: BrakeSystem
    steering: SteeringSystem


_RULES: tuple[tuple[Callable[[Assembly], bool], Result, str], ...] = (
    (
        lambda a: a.car == CarType.SEDAN and a.brake == BrakeSystem.CONTINENTAL,
        Result.SEDAN_UNABLE_CONTINENTAL_BRAKE,
        "Sedan에는 Continental제동장치 사용 불가",
    ),
    (
        lambda a: a.car == CarType.SUV and a.engine == Engine.TOYOTA,
        Result.SUV_UNABLE_TOYOTA_ENGINE,
        "SUV에는 TOYOTA엔진 사용 불가",
    ),
    (
        lambda a: a.car == CarType.TRUCK and a.engine == Engine.WIA,
        Result.TRUCK_UNABLE_WIA_ENGINE,
        "Truck에는 WIA엔진 사용 불가",
    ),
    (
        lambda a: a.car == CarType.TRUCK and a.brake == BrakeSystem.MANDO,
        Result.TRUCK_UNABLE_MANDO_BRAKE,
        "Truck에는 Mando제동장치 사용 불가",
    ),
    (
        lambda a: a.brake == BrakeSystem.BOSCH and a.steering != SteeringSystem.BOSCH,
        Result.BOSCH_BRAKE_ONLY_ABLE_BOSCH_STEERING,
        "Bosch제동장치에는 Bosch조향장치 이외 사용 불가",
    ),
)

_MESSAGES = {result: message for _, result, message in _RULES}


def find_violation(assembly: Assembly) -> Optional[Result]:
    """The first combination rule the assembly breaks, or None if it breaks none."""
    return next((result for rule, result, _ in _RULES if rule(assembly)), None)


class TestAction:
    """Checks the part combination and reports PASS or the first FAIL reason."""

    __test__ = False  # not a pytest test class

    def __init__(self, out: Optional[TextIO] = None, pause: Optional[Pause] = None) -> None:
        self._out = out if out is not None else sys.stdout
        self._pause = pause if pause is not None else delay

    def perform(self, assembly: Assembly) -> Result:
        self._out.write("Test...\n")
        self._pause(1500)
        violation = find_violation(assembly)
        if violation is None:
            self._out.write(_PASS_LINE + "\n")
            result = Result.MAKE_SUCCESS
        else:
            self._out.write(f"{_FAIL_HEADER}\n{_MESSAGES[violation]}\n")
            result = violation
        self._pause(2000)
        return result


_CAR_LINES = {
    CarType.SEDAN: "Car Type : Sedan\n",
    CarType.SUV: "Car Type : SUV\n",
    CarType.TRUCK: "Car Type : Truck\n",
}
_ENGINE_LINES = {
    Engine.GM: "Engine : GM\n",
    Engine.TOYOTA: "Engine : TOYOTA\n",
    Engine.WIA: "Engine : WIA\n",
}
_BRAKE_LINES = {
    BrakeSystem.MANDO: "Brake System : Mando",
    BrakeSystem.CONTINENTAL: "Brake System : Continental\n",
    BrakeSystem.BOSCH: "Brake System : Bosch\n",
}
_STEERING_LINES = {
    SteeringSystem.BOSCH: "SteeringSystem : Bosch\n",
    SteeringSystem.MOBIS: "SteeringSystem : Mobis\n",
}


class RunAction:
    """Drives the car if its parts fit together and its engine works."""

    def __init__(self, out: Optional[TextIO] = None, pause: Optional[Pause] = None) -> None:
        self._out = out if out is not None else sys.stdout
        self._pause = pause if pause is not None else delay

    def perform(self, assembly: Assembly) -> Result:
        if find_violation(assembly) is not None:
            self._out.write("자동차가 동작되지 않습니다\n")
            result = Result.MAKE_FAILED
        elif assembly.engine == Engine.BROKEN:
            self._out.write("엔진이 고장나있습니다.\n자동차가 움직이지 않습니다.\n")
            result = Result.ENGINE_BROKEN
        else:
            self._out.write(
                _CAR_LINES.get(assembly.car, "")
                + _ENGINE_LINES.get(assembly.engine, "")
                + _BRAKE_LINES.get(assembly.brake, "")
                + _STEERING_LINES.get(assembly.steering, "")
                + "자동차가 동작됩니다.\n"
            )
            result = Result.MAKE_SUCCESS
        self._pause(2000)
        return result


class ActionManager:
    """Validates the final menu answer and performs the chosen action."""

    def __init__(self, out: Optional[TextIO] = None, pause: Optional[Pause] = None) -> None:
        self._out = out if out is not None else sys.stdout
        self._pause = pause if pause is not None else delay
        self._assembly: Optional[Assembly] = None
        self._action: Optional[TestAction | RunAction] = None

    def validate(self, select: int) -> int:
        """Return the answer if it is a valid choice (0 means back to the start)."""
        if not min(Action) <= select <= max(Action):
            raise SelectionError(_ACTION_RANGE_ERROR)
        return select

    def select(self, select: int) -> Action:
        """Choose Test or Run."""
        if select == Action.TEST:
            self._action = TestAction(self._out, self._pause)
        elif select == Action.RUN:
            self._action = RunAction(self._out, self._pause)
        else:
            raise SelectionError(f"no action numbered {select}")
        return Action(select)

    def set_options(self, assembly: Assembly) -> None:
        """Remember the assembly the action will work on."""
        self._assembly = assembly

    def perform(self) -> Result:
        """Perform the chosen action on the remembered assembly."""
        if self._action is None:
            raise SelectionError("no action selected")
        if self._assembly is None:
            raise SelectionError("no assembly given")
        return self._action.perform(self._assembly)