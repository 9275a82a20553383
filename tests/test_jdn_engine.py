# tests/test_jdn_engine.py

import random

from ethiocal.core.epochs import (
    JD_EPOCH_OFFSET_AMETE_ALEM,
    JD_EPOCH_OFFSET_AMETE_MIHRET,
    JD_EPOCH_OFFSET_GREGORIAN,
)
from ethiocal.engines import (
    ethiopic_to_jdn,
    gregorian_to_jdn,
    is_valid_ethiopic_date,
    jdn_to_ethiopic,
    jdn_to_gregorian,
)


def test_known_gregorian_jdns():
    assert gregorian_to_jdn(2000, 1, 1) == 2451545
    assert gregorian_to_jdn(1900, 1, 1) == 2415021
    assert gregorian_to_jdn(1582, 10, 15) == 2299161
    # Proleptic Gregorian 1-01-01
    assert gregorian_to_jdn(1, 1, 1) == JD_EPOCH_OFFSET_GREGORIAN


def test_gregorian_roundtrip_from_jdn():
    random.seed(42)
    for _ in range(10000):
        jdn_in = random.randint(0, 5373484)
        y, m, d = jdn_to_gregorian(jdn_in)
        assert gregorian_to_jdn(y, m, d) == jdn_in


def test_gregorian_roundtrip_every_day_of_a_leap_cycle():
    jdn = gregorian_to_jdn(1999, 12, 31)
    for offset in range(1, 4 * 366):
        d = jdn_to_gregorian(jdn + offset)
        assert gregorian_to_jdn(*d) == jdn + offset
    assert jdn_to_gregorian(gregorian_to_jdn(2000, 2, 29)) == (2000, 2, 29)
    assert jdn_to_gregorian(gregorian_to_jdn(2000, 3, 1) - 1) == (2000, 2, 29)
    assert jdn_to_gregorian(gregorian_to_jdn(1900, 3, 1) - 1) == (1900, 2, 28)


def test_ethiopic_roundtrip_both_eras():
    random.seed(7)
    for era in (JD_EPOCH_OFFSET_AMETE_MIHRET, JD_EPOCH_OFFSET_AMETE_ALEM):
        for _ in range(5000):
            jdn_in = random.randint(-500000, 3000000)
            y, m, d = jdn_to_ethiopic(jdn_in, era)
            assert is_valid_ethiopic_date(y, m, d)
            assert ethiopic_to_jdn(y, m, d, era) == jdn_in


def test_ethiopic_new_year_and_pagume_sequence():
    # Leap year 2015 ends with Pagume 6, then 2016 starts.
    p6 = ethiopic_to_jdn(2015, 13, 6)
    assert jdn_to_ethiopic(p6) == (2015, 13, 6)
    assert jdn_to_ethiopic(p6 + 1) == (2016, 1, 1)
    # Common year 2016 ends with Pagume 5.
    p5 = ethiopic_to_jdn(2016, 13, 5)
    assert jdn_to_ethiopic(p5 + 1) == (2017, 1, 1)
    assert ethiopic_to_jdn(2017, 1, 1) - ethiopic_to_jdn(2016, 1, 1) == 365
    assert ethiopic_to_jdn(2016, 1, 1) - ethiopic_to_jdn(2015, 1, 1) == 366


def test_amete_mihret_epoch_anchor():
    # 1 Meskerem 1 AM = proleptic Gregorian 8-08-27
    assert ethiopic_to_jdn(1, 1, 1) == JD_EPOCH_OFFSET_AMETE_MIHRET + 365
    assert jdn_to_gregorian(ethiopic_to_jdn(1, 1, 1)) == (8, 8, 27)


def test_era_gap_is_5500_years():
    jdn_am = ethiopic_to_jdn(2017, 4, 16, JD_EPOCH_OFFSET_AMETE_MIHRET)
    jdn_aa = ethiopic_to_jdn(2017 + 5500, 4, 16, JD_EPOCH_OFFSET_AMETE_ALEM)
    assert jdn_am == jdn_aa


def test_non_validating_functions_are_total():
    # Impossible dates still produce a number; nothing raises.
    assert isinstance(ethiopic_to_jdn(2017, 14, 40), int)
    assert isinstance(gregorian_to_jdn(2023, 2, 30), int)
    # Feb 30 silently lands in March.
    assert jdn_to_gregorian(gregorian_to_jdn(2023, 2, 30)) == (2023, 3, 2)
