"""Tests for the named constant tables."""
import mpmath

from constants import small_dictionary, standard_dictionary


def test_small_dictionary():
    with mpmath.workdps(30):
        d = small_dictionary()
        assert sorted(d.values()) == sorted(["π", "e", "√2", "ln(2)"])
        assert d[+mpmath.pi] == "π"
        assert d[mpmath.sqrt(2)] == "√2"


def test_standard_dictionary():
    with mpmath.workdps(30):
        d = standard_dictionary()
        assert len(d) == 63
        assert len(set(d.values())) == 63
        assert all(isinstance(v, mpmath.mpf) for v in d)
        assert all(v > 0 for v in d)
        assert d[mpmath.zeta(3)] == "ζ(3)"
        assert d[mpmath.log(7)] == "ln(7)"


def test_precision_follows_mpmath():
    with mpmath.workdps(60):
        d = standard_dictionary()
    pi = [v for v, s in d.items() if s == "π"][0]
    with mpmath.workdps(60):
        assert abs(pi - mpmath.pi) < mpmath.mpf(10)**-55
