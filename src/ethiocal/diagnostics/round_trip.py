from __future__ import annotations

import argparse
import random

import ethiocal
from ethiocal.engines import guess_era


def roundtrip_test(N: int, start_jdn: int, end_jdn: int, seed: int, *, max_failures: int) -> int:
    """
    Random JDNs -> both calendars -> back.

    Checks JDN identity through each calendar and the cross-calendar
    Gregorian -> Ethiopian -> Gregorian path with the detected era.
    """
    random.seed(seed)
    failures = 0

    for _ in range(N):
        jdn = random.randint(start_jdn, end_jdn)
        era = guess_era(jdn)

        g = ethiocal.jdn_to_gregorian(jdn)
        e = ethiocal.jdn_to_ethiopic(jdn, era)

        problems = []
        if not ethiocal.is_valid_gregorian_date(*g):
            problems.append("gregorian invalid")
        if not ethiocal.is_valid_ethiopic_date(*e):
            problems.append("ethiopic invalid")
        if ethiocal.gregorian_to_jdn(*g) != jdn:
            problems.append("gregorian jdn")
        if ethiocal.ethiopic_to_jdn(*e, era=era) != jdn:
            problems.append("ethiopic jdn")
        if ethiocal.gregorian_to_ethiopic(*g) != e:
            problems.append("gregorian -> ethiopic")
        if ethiocal.ethiopic_to_gregorian(*e, era=era) != g:
            problems.append("ethiopic -> gregorian")

        if problems:
            failures += 1
            print("\nFAIL")
            print("jdn:", jdn, "era:", era.name)
            print("gregorian:", g)
            print("ethiopic:", e)
            print("checks:", ", ".join(problems))
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: JDN -> gregorian/ethiopic -> JDN.")
    p.add_argument("--N", type=int, default=20000, help="Trials.")
    p.add_argument("--start", type=str, default="-3000-01-01", help="Start Gregorian date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="4000-12-31", help="End Gregorian date YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    start = ethiocal.GregorianDate.parse(args.start).jdn
    end = ethiocal.GregorianDate.parse(args.end).jdn
    if end < start:
        raise SystemExit("--end must be >= --start")

    failures = roundtrip_test(args.N, start, end, args.seed, max_failures=args.max_failures)
    if failures == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {failures}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
