import math

import pytest

from practicebox.euler_numbers import (
    amicable_sum,
    collatz_next,
    count_divisors,
    counting_sundays,
    factorial_digit_sum,
    first_triangle_with_divisors,
    is_abundant,
    longest_collatz_chain,
    main,
    name_score,
    non_abundant_sum,
    number_letter_count,
    power_digit_sum,
    sum_proper_divisors,
    total_name_scores,
)


def _chain_length(start):
    length = 1
    term = start
    while term != 1:
        term = collatz_next(term)
        length += 1
    return length


@pytest.mark.parametrize("prime", [2, 3, 13, 97])
def test_count_divisors_of_prime_and_its_powers(prime):
    assert count_divisors(prime) == 2
    assert count_divisors(prime ** 4) == 5


def test_count_divisors_of_one():
    assert count_divisors(1) == 1


def test_count_divisors_rejects_zero():
    with pytest.raises(ValueError):
        count_divisors(0)


def test_count_divisors_is_multiplicative_on_coprimes():
    assert count_divisors(8 * 9 * 5) == count_divisors(8) * count_divisors(9) * count_divisors(5)


def test_first_triangle_with_more_than_five_divisors():
    assert first_triangle_with_divisors(5) == 28


@pytest.mark.parametrize("minimum", [1, 5, 20, 50])
def test_first_triangle_is_the_first_one_over_the_minimum(minimum):
    result = first_triangle_with_divisors(minimum)
    n = math.isqrt(2 * result)
    assert n * (n + 1) // 2 == result
    assert count_divisors(result) > minimum
    assert all(count_divisors(k * (k + 1) // 2) <= minimum for k in range(1, n))


@pytest.mark.parametrize("k", [1, 3, 10, 77])
def test_collatz_next_halves_even_numbers(k):
    assert collatz_next(2 * k) == k


@pytest.mark.parametrize("k", [1, 3, 7, 27])
def test_collatz_next_grows_odd_numbers_to_even(k):
    result = collatz_next(k)
    assert result % 2 == 0
    assert result > k


def test_collatz_next_rejects_zero():
    with pytest.raises(ValueError):
        collatz_next(0)


@pytest.mark.parametrize("limit", [3, 10, 100, 1000])
def test_longest_collatz_chain_is_longest_and_earliest(limit):
    start, length = longest_collatz_chain(limit)
    assert start < limit
    assert length == _chain_length(start)
    assert all(_chain_length(s) < length for s in range(1, start))
    assert all(_chain_length(s) <= length for s in range(start, limit))


def test_longest_collatz_chain_smallest_limit():
    assert longest_collatz_chain(2) == (1, 1)


def test_longest_collatz_chain_rejects_tiny_limit():
    with pytest.raises(ValueError):
        longest_collatz_chain(1)


def test_power_digit_sum_of_powers_of_ten():
    assert power_digit_sum(10, 50) == 1
    assert power_digit_sum(2, 0) == 1


@pytest.mark.parametrize("exponent", [2, 5, 40, 100])
def test_power_digit_sum_of_powers_of_three_divisible_by_nine(exponent):
    assert power_digit_sum(3, exponent) % 9 == 0


def test_power_digit_sum_rejects_negative_exponent():
    with pytest.raises(ValueError):
        power_digit_sum(2, -1)


def test_number_letter_count():
    assert number_letter_count() == 21124


def test_counting_sundays_over_the_twentieth_century():
    total = counting_sundays(1901, 2000)
    assert total == sum(counting_sundays(year, year) for year in range(1901, 2001))


@pytest.mark.parametrize("year", [1900, 1901, 1996, 2000, 2023])
def test_every_year_has_one_to_three_sunday_firsts(year):
    assert 1 <= counting_sundays(year, year) <= 3


def test_counting_sundays_rejects_reversed_years():
    with pytest.raises(ValueError):
        counting_sundays(2000, 1901)


def test_factorial_digit_sum_of_small_values():
    assert factorial_digit_sum(0) == 1
    assert factorial_digit_sum(1) == 1


@pytest.mark.parametrize("n", [6, 10, 50, 100])
def test_factorial_digit_sum_divisible_by_nine(n):
    assert factorial_digit_sum(n) % 9 == 0


def test_factorial_digit_sum_rejects_negative():
    with pytest.raises(ValueError):
        factorial_digit_sum(-1)


@pytest.mark.parametrize("perfect", [6, 28, 496, 8128])
def test_sum_proper_divisors_of_perfect_numbers(perfect):
    assert sum_proper_divisors(perfect) == perfect


@pytest.mark.parametrize("prime", [2, 13, 97])
def test_sum_proper_divisors_of_primes(prime):
    assert sum_proper_divisors(prime) == 1


def test_sum_proper_divisors_of_amicable_pair_round_trips():
    partner = sum_proper_divisors(220)
    assert partner != 220
    assert sum_proper_divisors(partner) == 220


def test_amicable_sum_counts_only_numbers_below_limit():
    assert amicable_sum(220) == 0
    assert amicable_sum(221) == 220
    assert amicable_sum(285) == 220 + sum_proper_divisors(220)


def test_name_score_letters():
    assert name_score("A") == 1
    assert name_score("COLIN") == name_score("colin")
    assert name_score("AB") == name_score("A") + name_score("B")


def test_name_score_rejects_non_letters():
    with pytest.raises(ValueError):
        name_score("O'NEIL")


def test_total_name_scores_weights_by_sorted_position():
    assert total_name_scores(["B", "A"]) == name_score("A") + 2 * name_score("B")
    assert total_name_scores(["MARY"]) == name_score("MARY")


def test_total_name_scores_ignores_input_order():
    names = ["MARY", "PATRICIA", "LINDA", "BARBARA"]
    assert total_name_scores(names) == total_name_scores(reversed(names))


def test_is_abundant():
    assert is_abundant(12)
    assert not is_abundant(11)
    assert not is_abundant(28)


def test_non_abundant_sum_below_first_abundant_pair():
    assert non_abundant_sum(24) == sum(range(1, 24))
    assert non_abundant_sum(25) == sum(range(1, 24))
    assert non_abundant_sum(1) == 0


def test_main_prints_chosen_answers(capsys):
    assert main(["16", "20"]) == 0
    out = capsys.readouterr().out
    assert out == f"16: {power_digit_sum(2, 1000)}\n20: {factorial_digit_sum(100)}\n"


def test_main_reads_names_file(tmp_path, capsys):
    names_file = tmp_path / "names.txt"
    names_file.write_text('"MARY","ANN","LINDA"')
    assert main(["22", "--names", str(names_file)]) == 0
    expected = total_name_scores(["MARY", "ANN", "LINDA"])
    assert capsys.readouterr().out == f"22: {expected}\n"


def test_main_problem_22_needs_names():
    with pytest.raises(SystemExit):
        main(["22"])