"""Integer calculator operations and an interactive menu."""

from __future__ import annotations

import argparse
import math
from collections.abc import Callable, Iterable

__all__ = [
    "add",
    "subtract",
    "multiply",
    "divide",
    "square",
    "square_root",
    "main",
]

MENU = (
    "Select any operation from the calculator"
    "\n1 = Addition"
    "\n2 = Subtraction"
    "\n3 = Multiplication"
    "\n4 = Division"
    "\n5 = Square"
    "\n6 = Square Root"
    "\n7 = Exit"
    "\n \n Make a choice: "
)
EXIT_CHOICE = 7


def add(numbers: Iterable[int]) -> int:
    """Sum of all the numbers."""
    return sum(numbers)


def subtract(first: int, second: int) -> int:
    """Difference of two numbers."""
    return first - second


def multiply(first: int, second: int) -> int:
    """Product of two numbers."""
    return first * second


def divide(first: int, second: int) -> int:
    """Integer quotient, truncated toward zero."""
    if second == 0:
        raise ZeroDivisionError("divisor cannot be zero")
    quotient = abs(first) // abs(second)
    return quotient if (first < 0) == (second < 0) else -quotient


def square(number: int) -> int:
    """The number multiplied by itself."""
    return number * number


def square_root(number: float) -> float:
    """Square root of a non-negative number."""
    return math.sqrt(number)


def _read_int(prompt: str) -> int:
    while True:
        text = input(prompt)
        try:
            return int(text.strip())
        except ValueError:
            print("Please enter a whole number.")


def _read_pair() -> tuple[int, int]:
    first = _read_int(" \n Enter the First number = ")
    second = _read_int("\n Enter the Second number = ")
    return first, second


def _addition() -> None:
    count = _read_int("How many numbers you want to add: ")
    print("Please enter the number one by one: ")
    numbers = [_read_int("") for _ in range(count)]
    print(f"\n Sum of the numbers = {add(numbers)}")


def _subtraction() -> None:
    first, second = _read_pair()
    print(f"\n Subtraction of the number = {subtract(first, second)}")


def _multiplication() -> None:
    first, second = _read_pair()
    print(f"\n Multiplication of two numbers = {multiply(first, second)}")


def _division() -> None:
    first, second = _read_pair()
    while second == 0:
        print("\n Divisor canot be zero")
        second = _read_int("\n Please enter the divisor once again: ")
    print(f"\n Division of two numbers = {divide(first, second)}")


def _square() -> None:
    number = _read_int(" \n Enter a number to find the Square: ")
    print(f" \n Square of {number} is : {square(number)}")


def _square_root() -> None:
    number = _read_int("\n Enter the number to find the Square Root:")
    try:
        result = f"{square_root(number):g}"
    except ValueError:
        result = "nan"
    print(f" \n Square Root of {number} is : {result}")


_ACTIONS: dict[int, Callable[[], None]] = {
    1: _addition,
    2: _subtraction,
    3: _multiplication,
    4: _division,
    5: _square,
    6: _square_root,
}


def main(argv: list[str] | None = None) -> int:
    """Run the menu-driven calculator on standard input until Exit or end of input."""
    parser = argparse.ArgumentParser(
        prog="algokit-calculator", description="Interactive integer calculator."
    )
    parser.parse_args(argv)
    try:
        while True:
            try:
                choice: int | None = int(input(MENU).strip())
            except ValueError:
                choice = None
            if choice == EXIT_CHOICE:
                break
            action = _ACTIONS.get(choice) if choice is not None else None
            if action is None:
                print("Something is wrong..!!")
            else:
                action()
            print(" \n------------------------------")
    except EOFError:
        pass
    return 0