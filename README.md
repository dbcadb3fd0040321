# carfactory

A small interactive console game in which you assemble a car. You pick parts
one screen at a time, then either drive the car or run a parts compatibility
test on it. The menus and messages are in Korean.

## Installing

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Playing

Start the assembly line with:

    carfactory

The command takes no options other than `--help`.

The screens come in this order:

1. Car type: 1 Sedan, 2 SUV, 3 Truck
2. Engine: 1 GM, 2 TOYOTA, 3 WIA, 4 a broken engine
3. Brake system: 1 MANDO, 2 CONTINENTAL, 3 BOSCH
4. Steering system: 1 BOSCH, 2 MOBIS
5. Action screen

At each `INPUT >` prompt, type the number of an option. On the engine, brake
and steering screens, `0` takes you back one step; the car type screen has no
back option and treats `0` as out of range. On the action screen, `0` takes
you back to the first screen.

On the action screen, answer `1` performs the compatibility test and answer
`2` runs the car, even though the menu lists the choices as `1. RUN` and
`2. Test`. After either action the action screen is shown again.

Type `exit` to quit. The game also ends when input runs out (for example on
Ctrl-D). If you type something that is not a whole number, or a number
outside the screen's range, the game shows an error and asks again.

## Compatibility rules

The compatibility test fails, and the car will not run, when:

- a Sedan has a Continental brake system
- an SUV has a TOYOTA engine
- a Truck has a WIA engine
- a Truck has a Mando brake system
- a Bosch brake system is paired with any steering system other than Bosch

Only the first rule that applies, in this order, is reported. A car with a
broken engine passes the compatibility test, but it will not move when you
run it.

## Using it from Python

The pieces behind the game can also be used on their own:

- `carfactory.parts` holds the step and part enumerations (`Step`, `CarType`,
  `Engine`, `BrakeSystem`, `SteeringSystem`, `Action`), the `Result` codes,
  `SelectionError` and `delay(ms)`.
- `carfactory.managers` has one manager per part (`CarManager`,
  `EngineManager`, `BrakeSystemManager`, `SteeringSystemManager`, all built
  on `PartManager`). Each one checks an answer with `validate`, records a
  part with `select`, returns it with `selected` and reports the following
  step with `next_step`. Bad answers raise `SelectionError`.
- `carfactory.screens.ScreenManager` builds the menu text for a step with
  `render` and writes it with `print_screen`.
- `carfactory.checks` has `Assembly`, `find_violation`, `RunAction`,
  `TestAction` and `ActionManager`, which drive or test an assembled car and
  return a `Result`. The actions accept a `pause` callable, so the waits
  between messages can be skipped.
- `carfactory.app` has `parse_input`, `go_back` and `CarFactoryApp`, which
  ties everything together into the interactive loop (`run`) and can be fed
  one line at a time with `handle`. `carfactory.app.main` is the function
  behind the `carfactory` command.

For example:

    import io
    from carfactory.app import CarFactoryApp

    app = CarFactoryApp(stdin=io.StringIO("1\n1\n1\n1\n1\nexit\n"),
                        out=io.StringIO(), pause=lambda ms: None)
    app.run()
    print(app.last_result)   # Result.MAKE_SUCCESS

## What it does not do

The game keeps nothing between sessions: there is no saving or loading of
assembled cars, and each session starts again from the car type screen.