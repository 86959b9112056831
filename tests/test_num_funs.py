"""Tests for the numeric helpers shared by float and mpf values."""
import math
import sys

import mpmath

from num_funs import real_type, epsilon, sqrt, exp, nint, ulp_distance, gcd, dot


# --- real type ---

def test_real_type_float():
    assert real_type([1, 2.0]) is float
    assert real_type([]) is float


def test_real_type_mpf():
    assert real_type([1, mpmath.mpf(2)]) is mpmath.mpf


def test_epsilon():
    assert epsilon(1.0) == sys.float_info.epsilon
    with mpmath.workdps(50):
        assert epsilon(mpmath.mpf(1)) == mpmath.mp.eps
        assert epsilon(mpmath.mpf(1)) < 1e-49


def test_sqrt_and_exp_keep_the_type():
    assert isinstance(sqrt(2.0), float)
    assert isinstance(sqrt(mpmath.mpf(2)), mpmath.mpf)
    assert isinstance(exp(1.0), float)
    assert isinstance(exp(mpmath.mpf(1)), mpmath.mpf)


# --- rounding ---

def test_nint_halves_away_from_zero():
    assert nint(2.5) == 3
    assert nint(-2.5) == -3
    assert nint(0.5) == 1
    assert nint(-0.5) == -1


def test_nint():
    assert nint(0.4) == 0
    assert nint(-0.4) == 0
    assert nint(-0.6) == -1
    assert nint(1.0e20) == 10**20
    assert nint(mpmath.mpf("1.5")) == 2
    assert isinstance(nint(mpmath.mpf("7.2")), int)


# --- representable steps ---

def test_ulp_distance_float():
    assert ulp_distance(1.0, 1.0) == 0
    assert ulp_distance(1.0, math.nextafter(1.0, 2.0)) == 1
    assert ulp_distance(math.nextafter(1.0, 2.0), 1.0) == 1
    assert ulp_distance(1.0, 2.0) == 2**52


def test_ulp_distance_mpf():
    with mpmath.workdps(30):
        a = mpmath.mpf(1)
        assert ulp_distance(a, a) == 0
        assert ulp_distance(a, a + mpmath.mp.eps) == 1
        assert ulp_distance(a, a + 8*mpmath.mp.eps) == 8


# --- integers ---

def test_gcd():
    assert gcd([4, 6, 8]) == 2
    assert gcd([3, -5]) == 1
    assert gcd(-3) == 3
    assert gcd(0, 5) == 5
    assert gcd(12, -18) == 6


def test_dot():
    assert dot([1, 2], [3, 4]) == 11
    assert dot([1, 2], [3, 4, 5]) == 11
