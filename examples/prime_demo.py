"""Example of configuring the checker and inspecting its decisions."""

import logging

from primecheck import check, configure_checker, is_prime


def main():
    logging.basicConfig(level=logging.INFO, format="[%(name)s] %(message)s")
    configure_checker(
        int_bits=32,
        log_decisions=True,
    )

    for n in (-10, 2, 1000, 49, 7917, 7919):
        verdict = check(n)
        print(n, verdict.is_prime, verdict.branch.name)

    print(is_prime(2**31 - 1))


if __name__ == "__main__":
    main()
