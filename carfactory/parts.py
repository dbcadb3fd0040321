"""Part catalogue, assembly steps, action choices and result codes."""

from __future__ import annotations

import time
from enum import IntEnum

CLEAR_SCREEN = "\033[H\033[2J"


class Step(IntEnum):
    """The questions asked while assembling a car, in order."""

    CAR_TYPE = 0
    ENGINE = 1
    BRAKE_SYSTEM = 2
    STEERING_SYSTEM = 3
    RUN_TEST = 4


class CarType(IntEnum):
    SEDAN = 1
    SUV = 2
    TRUCK = 3


class Engine(IntEnum):
    GM = 1
    TOYOTA = 2
    WIA = 3
    BROKEN = 4


class BrakeSystem(IntEnum):
    MANDO = 1
    CONTINENTAL = 2
    BOSCH = 3


class SteeringSystem(IntEnum):
    BOSCH = 1
    MOBIS = 2


class Action(IntEnum):
    """Choices offered once the car is assembled."""

    HOME = 0
    TEST = 1
    RUN = 2


class Result(IntEnum):
    """Outcome of running or testing an assembled car."""

    MAKE_SUCCESS = 0
    MAKE_FAILED = 1
    SEDAN_UNABLE_CONTINENTAL_BRAKE = 2
    SUV_UNABLE_TOYOTA_ENGINE = 3
    TRUCK_UNABLE_WIA_ENGINE = 4
    TRUCK_UNABLE_MANDO_BRAKE = 5
    BOSCH_BRAKE_ONLY_ABLE_BOSCH_STEERING = 6
    ENGINE_BROKEN = 7


class SelectionError(ValueError):
    """Raised when a menu answer is out of range or names no part."""


def delay(ms: int) -> None:
    """Pause for the given number of milliseconds."""
    time.sleep(max(ms, 0) / 1000)