import math

import pytest

from dsakit.numbers import (
    count_down,
    count_set_bits,
    count_up,
    digit_count,
    factorial,
    factors,
    fibonacci_sequence,
    gcd,
    hanoi_moves,
    is_bit_set,
    is_palindrome_number,
    is_power_of_two,
    is_prime,
    lcm,
    max_rope_pieces,
    prime_factors,
    sum_natural,
    sum_of_digits,
    trailing_zeros,
)


@pytest.mark.parametrize("n", [1, 9, 10, 99, 100, 12345, 987654321])
def test_digit_count_matches_decimal_length(n):
    assert digit_count(n) == len(str(n))


def test_digit_count_ignores_sign():
    assert digit_count(-4567) == digit_count(4567)


@pytest.mark.parametrize("n", range(0, 15))
def test_factorial_matches_math(n):
    assert factorial(n) == math.factorial(n)


def test_factorial_rejects_negative():
    with pytest.raises(ValueError):
        factorial(-1)


@pytest.mark.parametrize("n", [1, 12, 28, 97, 100])
def test_factors_divide_and_pair_up(n):
    found = factors(n)
    assert found == sorted(found)
    assert found[0] == 1 and found[-1] == n
    assert all(n % d == 0 for d in found)
    assert all(n // d in found for d in found)


@pytest.mark.parametrize("n", range(2, 60))
def test_prime_agrees_with_factors(n):
    assert is_prime(n) == (factors(n) == [1, n])


def test_small_numbers_are_not_prime():
    assert not any(is_prime(n) for n in (-7, 0, 1))


def test_fibonacci_recurrence():
    seq = fibonacci_sequence(20)
    assert len(seq) == 20
    assert seq[:2] == [0, 1]
    assert all(seq[i] == seq[i - 1] + seq[i - 2] for i in range(2, len(seq)))


def test_fibonacci_empty():
    assert fibonacci_sequence(0) == []


@pytest.mark.parametrize("a,b", [(12, 18), (7, 13), (100, 75), (5, 5), (1, 99)])
def test_gcd_and_lcm_match_math(a, b):
    assert gcd(a, b) == math.gcd(a, b)
    assert lcm(a, b) == math.lcm(a, b)
    assert gcd(a, b) * lcm(a, b) == a * b


@pytest.mark.parametrize("a,b", [(0, 5), (5, 0), (-3, 6)])
def test_gcd_rejects_non_positive(a, b):
    with pytest.raises(ValueError):
        gcd(a, b)


def test_palindrome_number():
    assert is_palindrome_number(12321)
    assert is_palindrome_number(7)
    assert not is_palindrome_number(12345)


@pytest.mark.parametrize("k", range(1, 20))
def test_power_of_two(k):
    assert is_power_of_two(2**k)
    assert not is_power_of_two(2**k + 1)


def test_one_is_not_counted_as_power_of_two():
    assert not is_power_of_two(1)
    assert not is_power_of_two(0)


@pytest.mark.parametrize("n", [2, 12, 97, 360, 1001, 2**10, 999983])
def test_prime_factors_multiply_back(n):
    found = prime_factors(n)
    assert math.prod(found) == n
    assert found == sorted(found)
    assert all(is_prime(p) for p in found)


@pytest.mark.parametrize("n", [1, 0, -5])
def test_prime_factors_of_small_numbers(n):
    assert prime_factors(n) == []


def test_count_up_and_down_are_mirrors():
    assert count_up(6) == list(range(1, 7))
    assert count_down(6) == count_up(6)[::-1]
    assert count_up(0) == count_down(0) == []


@pytest.mark.parametrize("n", [1, 5, 6, 255, 1024, 123456])
def test_bits_agree_with_count(n):
    set_bits = sum(is_bit_set(n, k) for k in range(1, n.bit_length() + 1))
    assert set_bits == count_set_bits(n)


@pytest.mark.parametrize("k", range(1, 16))
def test_count_set_bits_of_all_ones(k):
    assert count_set_bits(2**k - 1) == k


def test_count_set_bits_non_positive():
    assert count_set_bits(0) == 0
    assert count_set_bits(-8) == 0


def test_is_bit_set_rejects_position_zero():
    with pytest.raises(ValueError):
        is_bit_set(5, 0)


@pytest.mark.parametrize("n", [1, 9, 10, 1234, 99999, 100001])
def test_sum_of_digits_congruent_mod_nine(n):
    assert sum_of_digits(n) % 9 == n % 9


def test_sum_of_digits_single_digit():
    assert sum_of_digits(7) == 7
    with pytest.raises(ValueError):
        sum_of_digits(-1)


@pytest.mark.parametrize("n", range(1, 30))
def test_sum_natural_steps(n):
    assert sum_natural(n) - sum_natural(n - 1) == n


def test_sum_natural_rejects_negative():
    with pytest.raises(ValueError):
        sum_natural(-3)


@pytest.mark.parametrize("n", range(1, 8))
def test_hanoi_moves_are_legal_and_complete(n):
    moves = hanoi_moves(n, "A", "B", "C")
    assert len(moves) == 2**n - 1
    pegs = {"A": list(range(n, 0, -1)), "B": [], "C": []}
    for disk, src, dst in moves:
        assert pegs[src][-1] == disk
        assert not pegs[dst] or pegs[dst][-1] > disk
        pegs[dst].append(pegs[src].pop())
    assert pegs["C"] == list(range(n, 0, -1))


def test_hanoi_single_disk():
    assert hanoi_moves(1) == [(1, "A", "C")]


def test_rope_with_unit_pieces():
    assert max_rope_pieces(9, 1, 1, 1) == 9


def test_rope_pinned_example():
    assert max_rope_pieces(23, 11, 9, 12) == 2


def test_rope_impossible():
    assert max_rope_pieces(7, 2, 4, 6) is None
    assert max_rope_pieces(-1, 1, 2, 3) is None


def test_rope_rejects_non_positive_length():
    with pytest.raises(ValueError):
        max_rope_pieces(5, 0, 1, 2)


@pytest.mark.parametrize("n", [0, 4, 5, 10, 25, 26, 100, 125])
def test_trailing_zeros_match_factorial(n):
    text = str(math.factorial(n))
    assert trailing_zeros(n) == len(text) - len(text.rstrip("0"))