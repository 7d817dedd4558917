"""Basic integrals over finite and infinite intervals.

Prints three estimates:

- x^5 - x^4 + x^2 - 1 over [0, 5]   (exact: 15625/6 - 625 + 125/3 - 5)
- e^x over (-inf, 0]                 (exact: 1)
- e^-x over [0, inf)                 (exact: 1)

Run with BI_LOGGING=DEBUG to watch each refinement pass.
"""

import math

import booleint


def quintic(x: float) -> float:
    xsq = x * x
    return xsq * (xsq * x - xsq + 1) - 1


def main() -> None:
    booleint.configure_from_env()

    print(booleint.integrate(quintic, 0.0, 5.0, 1e-4))
    print(booleint.integrate(math.exp, -math.inf, 0.0, 1e-6))
    print(booleint.integrate(lambda x: math.exp(-x), 0.0, math.inf, 1e-6))


if __name__ == "__main__":
    main()
