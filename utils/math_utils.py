"""
Mathematical utility functions for probability calculations.

This module provides functions for calculating probabilities related to
card draws using the hypergeometric distribution. Every function here is
total: inputs that describe an impossible or degenerate draw yield a
probability of 0.0 instead of raising, so callers never need to guard
against failures from this module.

Binomial coefficients are computed in log space so that large decks do not
overflow intermediate factorials.
"""

import math


def log_factorial(n: int) -> float:
    """
    Return ln(n!) by summing logarithms.

    ln(0!) and ln(1!) are both 0. Negative values are not supported.
    """
    if n <= 1:
        return 0.0
    result = 0.0
    for i in range(2, n + 1):
        result += math.log(i)
    return result


def binomial_coefficient(n: int, k: int) -> int:
    """
    Calculate C(n, k), the number of ways to choose k items from n.

    Uses ln(n!) - ln(k!) - ln((n-k)!) and exponentiates only the final value,
    rounding to the nearest integer to remove log/exp round-trip error. For
    very large n (thousands of items) the rounding error can compound, so the
    result is an approximation there. Once the coefficient is too large for a
    float (ln C(n, k) above ~709) the exact integer from math.comb is used.

    Args:
        n: Number of items to choose from
        k: Number of items chosen

    Returns:
        C(n, k), or 0 when k < 0 or k > n

    Example:
        >>> binomial_coefficient(10, 5)
        252
    """
    if k < 0 or k > n:
        return 0
    if k == 0 or k == n:
        return 1

    log_result = log_factorial(n) - log_factorial(k) - log_factorial(n - k)
    try:
        return round(math.exp(log_result))
    except OverflowError:
        return math.comb(n, k)


def hypergeometric_probability(
    population: int,
    successes_in_pop: int,
    sample_size: int,
    successes_in_sample: int,
) -> float:
    """
    Calculate the exact probability of drawing a specific number of target cards.

    Uses the hypergeometric distribution to compute the probability of drawing
    exactly k target cards when drawing n cards from a deck of N cards that
    contains K copies of the target card.

    Formula: P(X = k) = [C(K, k) × C(N-K, n-k)] / C(N, n)

    Args:
        population: Total number of cards in the deck (N)
        successes_in_pop: Number of target cards in the deck (K)
        sample_size: Number of cards drawn (n)
        successes_in_sample: Target number of cards to draw (k)

    Returns:
        Probability as a float between 0.0 and 1.0. Outcomes outside the
        support of the distribution, and degenerate populations, return 0.0.

    Example:
        >>> # Probability of drawing none of 3 targets in 7 cards from 48
        >>> hypergeometric_probability(48, 3, 7, 0)
        0.6163...
    """
    # Support is max(0, n - (N - K)) <= k <= min(K, n)
    failures_in_pop = population - successes_in_pop
    if (
        successes_in_sample < 0
        or successes_in_sample > min(successes_in_pop, sample_size)
        or successes_in_sample < max(0, sample_size - failures_in_pop)
    ):
        return 0.0

    numerator = binomial_coefficient(successes_in_pop, successes_in_sample) * binomial_coefficient(
        failures_in_pop, sample_size - successes_in_sample
    )
    denominator = binomial_coefficient(population, sample_size)

    if denominator == 0:
        return 0.0

    return numerator / denominator


def hypergeometric_distribution(
    population: int,
    successes_in_pop: int,
    sample_size: int,
) -> list[float]:
    """
    Return P(X = k) for every k from 0 to min(K, n), in increasing k order.

    The list is the full support of the distribution (plus any leading zero
    entries below max(0, n - (N - K))), so index i is the probability of
    drawing exactly i target cards.
    """
    max_successes = min(successes_in_pop, sample_size)
    return [
        hypergeometric_probability(population, successes_in_pop, sample_size, k)
        for k in range(max_successes + 1)
    ]
