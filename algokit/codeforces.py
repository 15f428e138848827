"""Solutions to short competitive-programming problems.

Each function takes the problem's input as Python values and returns the
answer rather than printing it.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import chain, pairwise, takewhile
from typing import Any

__all__ = [
    "anton_and_danik",
    "arrival_of_general",
    "bear_and_big_brother",
    "beautiful_matrix",
    "beautiful_year",
    "bit_plus_plus",
    "boy_or_girl",
    "calculating_function",
    "domino_piling",
    "elephant",
    "george_and_accommodation",
    "helpful_maths",
    "hulk",
    "easy_problem",
    "magnets",
    "nearly_lucky",
    "next_round",
    "petya_strings",
    "presents",
    "quirky_quantifiers",
    "soldier_and_bananas",
    "stones_on_table",
    "team",
    "tram",
    "translation",
    "ultra_fast_mathematician",
    "vanya_and_fence",
    "watermelon",
    "abbreviate",
    "word_case",
    "capitalize_word",
    "wrong_subtraction",
    "queue_at_school",
]

_MATRIX_SIZE = 5
_MATRIX_CENTRE = _MATRIX_SIZE // 2


def anton_and_danik(outcomes: str) -> str:
    """Who won more games: 'A' marks Anton's wins, anything else Danik's."""
    anton = outcomes.count("A")
    danik = len(outcomes) - anton
    if anton > danik:
        return "Anton"
    if anton < danik:
        return "Danik"
    return "Friendship"


def arrival_of_general(heights: Sequence[int]) -> int:
    """Adjacent swaps needed to put the tallest soldier first and the shortest last.

    The first tallest and the last shortest soldier are the ones moved.
    """
    if not heights:
        raise ValueError("no soldiers given")
    size = len(heights)
    max_index = heights.index(max(heights))
    min_index = size - 1 - list(reversed(heights)).index(min(heights))
    if max_index > min_index:
        min_index += 1
    return max_index + (size - min_index - 1)


def bear_and_big_brother(limak: int, bob: int) -> int:
    """Years until Limak, tripling yearly, outweighs Bob, who doubles yearly."""
    if limak < 1:
        raise ValueError("Limak's weight must be positive")
    years = 0
    while limak <= bob:
        limak *= 3
        bob *= 2
        years += 1
    return years


def beautiful_matrix(matrix: Sequence[Sequence[int]]) -> int:
    """Moves needed to bring the single 1 of a 5x5 matrix to its centre."""
    if len(matrix) != _MATRIX_SIZE or any(len(row) != _MATRIX_SIZE for row in matrix):
        raise ValueError("matrix must be 5x5")
    ones = [
        (r, c)
        for r, row in enumerate(matrix)
        for c, value in enumerate(row)
        if value == 1
    ]
    if not ones:
        raise ValueError("matrix holds no 1")
    row, column = ones[-1]
    return abs(row - _MATRIX_CENTRE) + abs(column - _MATRIX_CENTRE)


def _distinct_digits(year: int) -> bool:
    return len(set(f"{year % 10000:04d}")) == 4


def beautiful_year(year: int) -> int:
    """The first year after ``year`` whose last four digits are all different."""
    if year < 0:
        raise ValueError("year must not be negative")
    year += 1
    while not _distinct_digits(year):
        year += 1
    return year


def bit_plus_plus(statements: Iterable[str]) -> int:
    """Final value of x after running statements such as 'X++' or '--X' from 0."""
    value = 0
    for statement in statements:
        if len(statement) < 2:
            raise ValueError(f"malformed statement {statement!r}")
        if statement[1] == "+":
            value += 1
        elif statement[1] == "-":
            value -= 1
    return value


def boy_or_girl(username: str) -> str:
    """Verdict from the parity of the number of distinct characters."""
    if len(set(username)) % 2:
        return "IGNORE HIM!"
    return "CHAT WITH HER!"


def calculating_function(n: int) -> int:
    """Value of -1 + 2 - 3 + ... + (-1)**n * n."""
    odd = (n + 1) // 2
    even = n // 2
    return even * (even + 1) - odd * odd


def domino_piling(m: int, n: int) -> int:
    """Most 2x1 dominoes that fit on an m by n board."""
    if m < 0 or n < 0:
        raise ValueError("board dimensions must not be negative")
    return (m * n) // 2


def elephant(distance: int) -> int:
    """Fewest steps of length 1 to 5 needed to cover ``distance``."""
    if distance <= 5:
        return 1
    return -(-distance // 5)


def george_and_accommodation(rooms: Iterable[tuple[int, int]]) -> int:
    """Rooms, given as (occupants, capacity), with space for two more people."""
    return sum(1 for occupants, capacity in rooms if capacity - occupants >= 2)


def helpful_maths(expression: str) -> str:
    """Reorder a sum of single digits such as '3+1+2' into non-decreasing order."""
    if not expression:
        raise ValueError("expression is empty")
    return "+".join(sorted(expression[::2]))


def hulk(layers: int) -> str:
    """Hulk's feelings with ``layers`` alternating layers of hate and love."""
    if layers < 0:
        raise ValueError("layers must not be negative")
    feelings = ("I hate" if i % 2 == 0 else "I love" for i in range(layers))
    return "".join(f"{feeling} that " for feeling in feelings)[: -len("that ")] + "it" \
        if layers else "it"


def easy_problem(responses: Iterable[int]) -> str:
    """'HARD' if anyone answered 1, otherwise 'EASY'."""
    for response in responses:
        if response == 1:
            return "HARD"
    return "EASY"


def magnets(magnets: Iterable[Any]) -> int:
    """Number of groups formed by a row of magnets.

    A magnet starts a new group when it differs from the one before it; the
    first magnet is compared with 0.
    """
    return sum(1 for before, after in pairwise(chain([0], magnets)) if before != after)


def nearly_lucky(number: int) -> str:
    """'YES' when the count of digits 4 and 7 in ``number`` is 4 or 7."""
    if number < 0:
        raise ValueError("number must not be negative")
    lucky = sum(1 for digit in str(number) if digit in "47") if number else 0
    return "YES" if lucky in (4, 7) else "NO"


def next_round(scores: Sequence[int], k: int) -> int:
    """Contestants advancing: the leading run with positive scores at least the k-th's."""
    if not 1 <= k <= len(scores):
        raise ValueError(f"k must be between 1 and {len(scores)}")
    threshold = scores[k - 1]
    return sum(
        1 for _ in takewhile(lambda score: score >= threshold and score != 0, scores)
    )


def petya_strings(first: str, second: str) -> int:
    """Compare two strings ignoring case: -1, 0 or 1."""
    a, b = first.lower(), second.lower()
    if a < b:
        return -1
    if a == b:
        return 0
    return 1


def presents(gifts: Sequence[int]) -> list[int]:
    """Answer for each friend from the list of gift receivers.

    A friend i (counting from 1) who gave to themselves keeps that number;
    otherwise the answer is the entry at index ``gifts[i] % n``.
    """
    size = len(gifts)
    return [
        gift if gift == position else gifts[gift % size]
        for position, gift in enumerate(gifts, start=1)
    ]


def quirky_quantifiers(n: int) -> int:
    """Remainder of ``n`` divided by 2, carrying the sign of ``n``."""
    return n % 2 if n >= 0 else -((-n) % 2)


def soldier_and_bananas(k: int, money: int, count: int) -> int:
    """Money to borrow for ``count`` bananas, the i-th costing ``i * k``."""
    cost = (count * (count + 1) // 2) * k
    return max(0, cost - money)


def stones_on_table(stones: str) -> int:
    """Stones to remove so that no two neighbouring stones share a colour."""
    return sum(1 for a, b in pairwise(stones) if a == b)


def team(problems: Iterable[Sequence[int]]) -> int:
    """Problems that at least two of the three friends are sure about."""
    return sum(1 for votes in problems if sum(votes) > 1)


def tram(stops: Iterable[tuple[int, int]]) -> int:
    """Smallest tram capacity, given (exiting, entering) counts per stop."""
    passengers = 0
    capacity = 0
    for exiting, entering in stops:
        if entering < exiting:
            capacity = max(capacity, passengers)
        passengers += entering - exiting
    return capacity


def translation(word: str, candidate: str) -> str:
    """'YES' when ``candidate`` is ``word`` written backwards."""
    if len(word) != len(candidate):
        return "NO"
    mirrored = all(a == b for a, b in zip(reversed(word), candidate))
    return "YES" if mirrored else "NO"


def ultra_fast_mathematician(first: str, second: str) -> str:
    """Digit-wise XOR of two binary strings of equal length."""
    if len(first) != len(second):
        raise ValueError("numbers must have the same length")
    return "".join(str(int(a) ^ int(b)) for a, b in zip(first, second))


def vanya_and_fence(heights: Iterable[int], fence_height: int) -> int:
    """Road width needed: friends taller than the fence bend and take two units."""
    return sum(2 if height > fence_height else 1 for height in heights)


def watermelon(weight: int) -> str:
    """'YES' when the weight splits into two positive even parts."""
    splittable = weight >= 4 and weight % 2 == 0
    return "YES" if splittable else "NO"


def abbreviate(word: str) -> str:
    """Shorten words longer than ten letters to first letter, count, last letter."""
    if len(word) <= 10:
        return word
    return f"{word[0]}{len(word) - 2}{word[-1]}"


def word_case(word: str) -> str:
    """Make the word all upper case if upper-case letters are the majority, else lower."""
    lower = sum(1 for char in word if ord(char) >= 97)
    upper = len(word) - lower
    return word.upper() if upper > lower else word.lower()


def capitalize_word(word: str) -> str:
    """Upper-case the first letter and leave the rest alone."""
    return word[:1].upper() + word[1:]


def wrong_subtraction(number: int, times: int) -> int:
    """Subtract one ``times`` times, dropping a trailing zero instead of subtracting."""
    for _ in range(times):
        if number % 10 == 0:
            number //= 10
        else:
            number -= 1
    return number


def queue_at_school(queue: str, seconds: int) -> str:
    """Queue after ``seconds`` seconds, each boy letting the girl behind him ahead."""
    for _ in range(seconds):
        queue = queue.replace("BG", "GB")
    return queue