from typing import Any, Dict, List, Sequence

from .fmt import cformat, format_number, tidy_number

LAMBDA = "λ"
LATEX_LAMBDA = r"\lambda"


class Polynomial:
    """Univariate polynomial stored as ``{exponent: coefficient}``."""

    powers: Dict[int, float]
    var: str

    def __init__(self, powers: Dict[int, float], var: str = "x"):
        self.powers = {k: v for k, v in powers.items() if v != 0}
        self.var = var

    @classmethod
    def from_coefficients(cls, coefficients: Sequence[float], var: str = "x") -> "Polynomial":
        """Build from coefficients listed highest degree first."""
        degree = len(coefficients) - 1
        return cls({degree - i: coef for i, coef in enumerate(coefficients)}, var)

    @property
    def degree(self) -> int:
        return max(self.powers.keys(), default=0)

    def coefficients(self, degree: int = None) -> List[float]:
        """Coefficients highest degree first, padded with zeros up to ``degree``."""
        if degree is None:
            degree = self.degree
        return [self.powers.get(exp, 0) for exp in range(degree, -1, -1)]

    def __call__(self, x: float) -> float:
        res = 0
        for coef in self.coefficients():
            res = res * x + coef
        return res

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, (int, float)) and other == 0:
            return not self.powers
        if isinstance(other, Polynomial):
            return self.var == other.var and self.powers == other.powers
        return NotImplemented

    def __repr__(self) -> str:
        return "Polynomial(%r, var=%r)" % (self.powers, self.var)

    def __str__(self) -> str:
        return format_polynomial(self.coefficients(), self.var)

    def cformat(self, arg_of: str = None) -> str:
        res = ""
        for exp, coef in sorted(self.powers.items(), key=lambda x: -x[0]):
            coef = tidy_number(coef)
            if coef == 0:
                continue
            if cformat(coef).startswith("-"):
                res += "-"
                coef = -coef
            else:
                if res:
                    res += "+"
            coef_str = "" if coef == 1 and exp != 0 else cformat(coef)
            var_str = "" if exp == 0 else r"{%s}" % self.var
            pow_str = "" if exp <= 1 else r"^{%s}" % exp
            res += coef_str + var_str + pow_str
        if not res:
            res = "0"
        if arg_of is None or arg_of == "+":
            return res
        if len(self.powers) <= 1 and not (res.startswith("-") and arg_of == "*"):
            return res
        return "(%s)" % res


def format_polynomial(coefficients: Sequence[float], var: str = LAMBDA) -> str:
    """
    Render coefficients (highest degree first) as plain text.

    A coefficient of 1 is dropped unless it is the constant term, the first
    power is written as the bare variable and the constant as the number
    alone. Terms that print as zero are skipped.
    Example:
    >>> format_polynomial([1, -4, 3])
    'λ^2 - 4λ + 3'
    """
    degree = len(coefficients) - 1
    res = ""
    for i, coef in enumerate(coefficients):
        exp = degree - i
        coef = tidy_number(float(coef))
        if coef == 0:
            continue
        negative = coef < 0
        magnitude = -coef if negative else coef
        if format_number(magnitude) == "0":
            continue
        coef_str = "" if magnitude == 1 and exp != 0 else format_number(magnitude)
        if exp == 0:
            var_str = ""
        elif exp == 1:
            var_str = var
        else:
            var_str = "%s^%d" % (var, exp)
        term = coef_str + var_str
        if not res:
            res = "-" + term if negative else term
        else:
            res += (" - " if negative else " + ") + term
    return res or "0"
