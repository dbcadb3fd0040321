import io

import pytest

from carfactory.app import CarFactoryApp, InputKind, go_back, main, parse_input
from carfactory.parts import (
    Action,
    BrakeSystem,
    CarType,
    Engine,
    Result,
    SelectionError,
    SteeringSystem,
    Step,
)


def make_app(text=""):
    out = io.StringIO()
    pauses = []
    app = CarFactoryApp(stdin=io.StringIO(text), out=out, pause=pauses.append)
    return app, out, pauses


def assemble(app, car, engine, brake, steering):
    step = Step.CAR_TYPE
    for answer in (car, engine, brake, steering):
        step = app.choose(step, int(answer))
    return step


@pytest.mark.parametrize(
    "line, expected",
    [
        ("exit\n", (InputKind.EXIT, 0)),
        ("exit", (InputKind.EXIT, 0)),
        ("3\n", (InputKind.SUCCESS, 3)),
        ("1\r\n", (InputKind.SUCCESS, 1)),
        ("-1\n", (InputKind.SUCCESS, -1)),
        ("abc\n", (InputKind.NOT_INTEGER, 0)),
        ("\n", (InputKind.NOT_INTEGER, 0)),
        ("2x\n", (InputKind.NOT_INTEGER, 0)),
    ],
)
def test_parse_input(line, expected):
    assert parse_input(line) == expected


@pytest.mark.parametrize(
    "step, expected",
    [
        (Step.ENGINE, Step.CAR_TYPE),
        (Step.BRAKE_SYSTEM, Step.ENGINE),
        (Step.STEERING_SYSTEM, Step.BRAKE_SYSTEM),
        (Step.RUN_TEST, Step.CAR_TYPE),
    ],
)
def test_go_back_with_zero(step, expected):
    assert go_back(step, 0) == expected


def test_go_back_ignores_other_answers():
    assert go_back(Step.ENGINE, 1) is None


def test_validate_rejects_out_of_range_everywhere():
    app, _, _ = make_app()
    for step in Step:
        with pytest.raises(SelectionError):
            app.validate(step, 8)


def test_validate_accepts_in_range():
    app, _, _ = make_app()
    assert app.validate(Step.ENGINE, int(Engine.BROKEN)) == Engine.BROKEN
    assert app.validate(Step.RUN_TEST, 0) == 0


def test_validate_unknown_step():
    app, _, _ = make_app()
    with pytest.raises(SelectionError, match="System Error."):
        app.validate(9, 1)


def test_choose_advances_and_pauses():
    app, out, pauses = make_app()
    assert app.choose(Step.CAR_TYPE, int(CarType.SEDAN)) == Step.ENGINE
    assert pauses == [800]
    assert "차량 타입으로 Sedan을 선택하셨습니다." in out.getvalue()


@pytest.mark.parametrize(
    "parts, run_result, test_result",
    [
        (
            (CarType.SEDAN, Engine.GM, BrakeSystem.MANDO, SteeringSystem.BOSCH),
            Result.MAKE_SUCCESS,
            Result.MAKE_SUCCESS,
        ),
        (
            (CarType.SUV, Engine.WIA, BrakeSystem.CONTINENTAL, SteeringSystem.MOBIS),
            Result.MAKE_SUCCESS,
            Result.MAKE_SUCCESS,
        ),
        (
            (CarType.TRUCK, Engine.TOYOTA, BrakeSystem.BOSCH, SteeringSystem.BOSCH),
            Result.MAKE_SUCCESS,
            Result.MAKE_SUCCESS,
        ),
        (
            (CarType.SEDAN, Engine.TOYOTA, BrakeSystem.CONTINENTAL, SteeringSystem.BOSCH),
            Result.MAKE_FAILED,
            Result.SEDAN_UNABLE_CONTINENTAL_BRAKE,
        ),
        (
            (CarType.SUV, Engine.TOYOTA, BrakeSystem.CONTINENTAL, SteeringSystem.BOSCH),
            Result.MAKE_FAILED,
            Result.SUV_UNABLE_TOYOTA_ENGINE,
        ),
        (
            (CarType.TRUCK, Engine.WIA, BrakeSystem.CONTINENTAL, SteeringSystem.BOSCH),
            Result.MAKE_FAILED,
            Result.TRUCK_UNABLE_WIA_ENGINE,
        ),
        (
            (CarType.TRUCK, Engine.GM, BrakeSystem.MANDO, SteeringSystem.BOSCH),
            Result.MAKE_FAILED,
            Result.TRUCK_UNABLE_MANDO_BRAKE,
        ),
        (
            (CarType.TRUCK, Engine.GM, BrakeSystem.BOSCH, SteeringSystem.MOBIS),
            Result.MAKE_FAILED,
            Result.BOSCH_BRAKE_ONLY_ABLE_BOSCH_STEERING,
        ),
        (
            (CarType.SUV, Engine.BROKEN, BrakeSystem.CONTINENTAL, SteeringSystem.MOBIS),
            Result.ENGINE_BROKEN,
            Result.MAKE_SUCCESS,
        ),
    ],
)
def test_assemble_run_and_test(parts, run_result, test_result):
    app, _, _ = make_app()
    step = assemble(app, *parts)
    assert step == Step.RUN_TEST
    assert app.choose(step, int(Action.RUN)) == Step.RUN_TEST
    assert app.last_result == run_result
    app.choose(step, int(Action.TEST))
    assert app.last_result == test_result


def test_handle_exit():
    app, out, _ = make_app()
    assert app.handle(Step.ENGINE, "exit\n") is None
    assert out.getvalue() == "바이바이\n"


def test_handle_not_integer_stays():
    app, out, pauses = make_app()
    assert app.handle(Step.ENGINE, "abc\n") == Step.ENGINE
    assert out.getvalue() == "ERROR :: 숫자만 입력 가능\n"
    assert pauses == [800]


def test_handle_out_of_range_stays():
    app, out, _ = make_app()
    assert app.handle(Step.CAR_TYPE, "0\n") == Step.CAR_TYPE
    assert out.getvalue() == "ERROR :: 차량 타입은 1 ~ 3 범위만 선택 가능\n"


def test_handle_zero_goes_back():
    app, _, _ = make_app()
    assert app.handle(Step.BRAKE_SYSTEM, "0\n") == Step.ENGINE
    assert app.handle(Step.RUN_TEST, "0\n") == Step.CAR_TYPE


def test_run_full_session():
    app, out, _ = make_app("1\n1\n1\n1\n2\nexit\n")
    app.run()
    text = out.getvalue()
    assert "Car Type : Sedan\n" in text
    assert "자동차가 동작됩니다.\n" in text
    assert text.endswith("바이바이\n")
    assert app.last_result == Result.MAKE_SUCCESS


def test_run_reports_bad_input_and_continues():
    app, out, _ = make_app("abc\n9\nexit\n")
    app.run()
    text = out.getvalue()
    assert "ERROR :: 숫자만 입력 가능" in text
    assert "ERROR :: 차량 타입은 1 ~ 3 범위만 선택 가능" in text
    assert text.count("INPUT > ") == 3


def test_run_stops_at_end_of_input():
    app, out, _ = make_app("1\n")
    app.run()
    text = out.getvalue()
    assert text.count("INPUT > ") == 2
    assert "어떤 엔진을 탑재할까요?" in text
    assert text.endswith("바이바이\n")


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit):
        main(["--no-such-option"])