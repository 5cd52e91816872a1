# kidsmath

A set of small, narrated math lessons for children. Each lesson works through
one story problem step by step and writes its explanation, in Thai, to the log
(the standard `logging` module, at INFO level, with warnings and errors where a
lesson points out a problem).

| Command                   | Module                     | Lesson                                                   |
|---------------------------|----------------------------|----------------------------------------------------------|
| `kidsmath-addition`       | `kidsmath.addition`        | Counting strawberries and bananas (addition)             |
| `kidsmath-subtraction`    | `kidsmath.subtraction`     | Giving toys away to friends (subtraction)                |
| `kidsmath-multiplication` | `kidsmath.multiplication`  | Bags of candies and times tables (multiplication)        |
| `kidsmath-division`       | `kidsmath.division`        | Sharing cookies, quotient and remainder (division)       |
| `kidsmath-shopping`       | `kidsmath.shopping`        | A market bill with discount, VAT and split payment       |
| `kidsmath-geometry`       | `kidsmath.geometry`        | Areas and volumes: field, pool, box, triangle, cone, rai |
| `kidsmath-safecalc`       | `kidsmath.safecalc`        | Error handling: division by zero, bad input, interest    |
| `kidsmath-calculator`     | `kidsmath.calculator`      | A menu-driven calculator with history and a shop till    |

## Installation

```
pip install .
```

Python 3.10 or later is required. No third-party libraries are needed.

## Running a lesson

```
kidsmath-addition
kidsmath-calculator --no-delay
```

Each lesson pauses between sections so its narration can be read. Every command
accepts `--no-delay` to skip the pauses.

## Using the lessons as a library

The arithmetic behind each lesson can be called on its own:

```python
from kidsmath.division import share, exact_divisors
from kidsmath.shopping import Product, calculate_total_bill, apply_vat, split_payment
from kidsmath.geometry import rectangle_metrics, cone_volume, to_rai
from kidsmath.safecalc import safe_divide, validate_number, CalculationError, ErrorCode
from kidsmath.calculator import Calculator, Operation

share(13, 4)                 # (3, 1): quotient and remainder
exact_divisors(30, 10)       # (people, per_person) for group sizes up to 10 that divide 30

bill = calculate_total_bill([Product("apple", 6, 15.0)])
apply_vat(bill, 7.0)
split_payment(bill, 3)       # raises ValueError for zero or fewer people

rectangle_metrics(100.0, 60.0)   # (area, perimeter, area in rai)

try:
    safe_divide(12, 0, "pizza for no customers")
except CalculationError as err:
    print(err.code is ErrorCode.DIVISION_BY_ZERO, err.message)

validate_number("12.50", "price")    # 12.5; non-numbers raise CalculationError

calc = Calculator(sleep=lambda seconds: None)
calc.perform(Operation.ADD, 25.5, 14.3)
calc.shop_mode()             # rings up the demonstration cart, returns the amount to pay
calc.history_mode()          # the latest five history entries
```

Errors are raised as exceptions: `kidsmath.safecalc` raises `CalculationError`
(a `ValueError` carrying an `ErrorCode`), while the helpers in
`kidsmath.calculator` raise `ZeroDivisionError` for division by zero and
`ValueError` for other refused input. `Calculator` keeps at most 50 history
entries, dropping the oldest.

The lesson modules `addition`, `subtraction`, `multiplication`, `division`,
`shopping`, `geometry` and `safecalc` each offer `run(sleep)` to play the lesson
with a custom pause function (pass `lambda seconds: None` to run without
waiting). Every module, `calculator` included, has `main()`, the entry point
used by the commands above.

## What it does not do

The calculator does not read input from the user. Its menu is a fixed
demonstration: `Calculator.simulate_menu_navigation()` visits the basic,
advanced, shop and history screens in turn with built-in example values. To
calculate with your own numbers, call `Calculator.perform` or the helper
functions from Python.

## Running the tests

```
pip install ".[test]"
pytest
```