"""Managers that validate and record the choice of each car part."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import ClassVar, Mapping, Optional, TextIO

from .parts import BrakeSystem, CarType, Engine, SelectionError, SteeringSystem, Step


class PartManager:
    """Validates menu answers for one step and remembers the chosen part.

    Range problems raise SelectionError carrying the message to show the user.
    """

    step: ClassVar[Step]
    part: ClassVar[type[IntEnum]]
    noun: ClassVar[str]
    allows_back: ClassVar[bool] = True
    range_error: ClassVar[str]
    messages: ClassVar[Mapping[int, str]]

    def __init__(self, out: Optional[TextIO] = None) -> None:
        self._out = out if out is not None else sys.stdout
        self._selected: Optional[IntEnum] = None

    def validate(self, select: int) -> int:
        """Return the answer if it is in range for this step (0 means back)."""
        low = 0 if self.allows_back else 1
        high = max(self.part)
        if not low <= select <= high:
            raise SelectionError(self.range_error)
        return select

    def select(self, select: int) -> IntEnum:
        """Record the part numbered ``select`` and announce it."""
        try:
            part = self.part(select)
        except ValueError:
            raise SelectionError(f"no {self.noun} numbered {select}") from None
        self._out.write(self.messages[part] + "\n")
        self._selected = part
        return part

    def next_step(self) -> Step:
        """The step that follows this one."""
        return Step(self.step + 1)

    def selected(self) -> IntEnum:
        """The part chosen so far."""
        if self._selected is None:
            raise SelectionError(f"no {self.noun} selected")
        return self._selected


class CarManager(PartManager):
    step = Step.CAR_TYPE
    part = CarType
    noun = "car type"
    allows_back = False
    range_error = "ERROR :: 차량 타입은 1 ~ 3 범위만 선택 가능"
    messages = {
        CarType.SEDAN: "차량 타입으로 Sedan을 선택하셨습니다.",
        CarType.SUV: "차량 타입으로 SUV을 선택하셨습니다.",
        CarType.TRUCK: "차량 타입으로 Truck을 선택하셨습니다.",
    }


class EngineManager(PartManager):
    step = Step.ENGINE
    part = Engine
    noun = "engine"
    range_error = "ERROR :: 엔진은 1 ~ 4 범위만 선택 가능"
    messages = {
        Engine.GM: "GM 엔진을 선택하셨습니다.",
        Engine.TOYOTA: "TOYOTA 엔진을 선택하셨습니다.",
        Engine.WIA: "WIA 엔진을 선택하셨습니다.",
        Engine.BROKEN: "고장난 엔진을 선택하셨습니다.",
    }


class BrakeSystemManager(PartManager):
    step = Step.BRAKE_SYSTEM
    part = BrakeSystem
    noun = "brake system"
    range_error = "ERROR :: 제동장치는 1 ~ 3 범위만 선택 가능"
    messages = {
        BrakeSystem.MANDO: "MANDO 제동장치를 선택하셨습니다.",
        BrakeSystem.CONTINENTAL: "CONTINENTAL 제동장치를 선택하셨습니다.",
        BrakeSystem.BOSCH: "BOSCH 제동장치를 선택하셨습니다.",
    }


class SteeringSystemManager(PartManager):
    step = Step.STEERING_SYSTEM
    part = SteeringSystem
    noun = "steering system"
    range_error = "ERROR :: 조향장치는 1 ~ 2 범위만 선택 가능"
    messages = {
        SteeringSystem.BOSCH: "BOSCH 조향장치를 선택하셨습니다.",
        SteeringSystem.MOBIS: "MOBIS 조향장치를 선택하셨습니다.",
    }