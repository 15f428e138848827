import pytest

from algokit.numtheory import (
    MOD,
    digit_removal,
    fibonacci,
    gcd_weighted_sum,
    is_armstrong,
    nth_prime,
    power_mod,
)


def test_sixth_prime_is_thirteen():
    assert nth_prime(6) == 13


def test_ten_thousand_and_first_prime():
    assert nth_prime(10001) == 104743


def test_first_primes_are_prime_and_increasing():
    primes = [nth_prime(k) for k in range(1, 40)]
    assert primes[0] == 2
    assert all(a < b for a, b in zip(primes, primes[1:]))
    for p in primes:
        assert all(p % d for d in range(2, p))


def test_nth_prime_rejects_zero():
    with pytest.raises(ValueError):
        nth_prime(0)


def test_armstrong_examples_from_driver():
    assert is_armstrong(407) is True
    assert is_armstrong(1542) is False


@pytest.mark.parametrize("number", range(10))
def test_single_digits_are_armstrong(number):
    assert is_armstrong(number) is True


def test_armstrong_rejects_negative():
    with pytest.raises(ValueError):
        is_armstrong(-5)


@pytest.mark.parametrize(
    "base, exponent, modulus",
    [(2, 10, MOD), (3, 200, MOD), (7, 13, 11), (123456789, 987654321, MOD)],
)
def test_power_mod_matches_builtin(base, exponent, modulus):
    assert power_mod(base, exponent, modulus) == pow(base, exponent, modulus)


def test_power_mod_default_modulus():
    assert power_mod(10, 12) == 10**12 % MOD


def test_power_mod_zero_exponent_is_one():
    assert power_mod(5, 0, 1) == 1


def test_power_mod_rejects_negative_exponent():
    with pytest.raises(ValueError):
        power_mod(2, -1)


def test_fibonacci_base_cases():
    assert fibonacci(0) == 1
    assert fibonacci(1) == 1


@pytest.mark.parametrize("n", range(2, 30))
def test_fibonacci_recurrence(n):
    assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


@pytest.mark.parametrize("p", [2, 3, 5, 7, 11, 13, 97])
def test_gcd_weighted_sum_for_primes(p):
    assert gcd_weighted_sum(p) == p * (p - 1) // 2 + p * p


@pytest.mark.parametrize("n", range(1, 60))
def test_gcd_weighted_sum_at_least_last_term(n):
    assert gcd_weighted_sum(n) >= n * n


@pytest.mark.parametrize("digit", range(10))
def test_digit_removal_result_avoids_digit(digit):
    for n in range(0, 3000, 7):
        added = digit_removal(n, digit)
        assert added >= 0
        assert str(digit) not in str(n + added)


@pytest.mark.parametrize("digit", range(10))
def test_digit_removal_is_minimal(digit):
    for n in range(0, 250):
        added = digit_removal(n, digit)
        assert all(str(digit) in str(n + k) for k in range(added))


def test_digit_removal_rejects_bad_digit():
    with pytest.raises(ValueError):
        digit_removal(5, 10)