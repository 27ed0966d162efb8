from typing import List, Any
import sympy

INTEGER_SNAP = 1e-10
LATEX_DIGITS = 6


def tidy_number(val: Any) -> Any:
    """
    Snap floats that are integers up to rounding noise to ``int``.

    Other values are returned unchanged.
    Example:
    >>> tidy_number(2.9999999999999996)
    3
    """
    if isinstance(val, bool) or not isinstance(val, float):
        return val
    nearest = round(val)
    if abs(val - nearest) <= INTEGER_SNAP:
        return int(nearest)
    return val


def pcformat(fstr, *vals):
    """
    Format a percent sign string with the given values.
    Example:
    >>> pcformat(r"%s + %s = %s", 1, 2, 3)
    "1 + 2 = 3"
    """
    formatted_vals = tuple(cformat(val) for val in vals)
    return fstr % formatted_vals


def cformat(val, arg_of=None):
    if hasattr(val, "cformat") and callable(val.cformat):
        return val.cformat(arg_of)
    if isinstance(val, str):
        return val
    val = tidy_number(val)
    if isinstance(val, float):
        val = sympy.Float(val, LATEX_DIGITS)
    try:
        res = sympy.latex(val)
    except Exception:  # sympy cannot render every object, fall back to str
        return str(val)
    if arg_of == "*" and res.startswith("-"):
        return "(%s)" % res
    return res


def format_number(val: float) -> str:
    """
    Plain-text rendering of a number for human consumption.

    Integers (after snapping) print without a decimal point, everything else
    with at most six decimals and no trailing zeros.
    """
    val = tidy_number(float(val))
    if isinstance(val, int):
        return str(val)
    res = ("%.6f" % val).rstrip("0").rstrip(".")
    if res in ("-0", ""):
        return "0"
    return res


def make_latex_matrix(items: List[List[Any]]) -> str:
    start = r"\begin{pmatrix}"
    end = r"\end{pmatrix}"
    if not items:
        return start + end
    rows = [r" & ".join([cformat(item) for item in row]) for row in items]
    return start + (r"\\[0.1em]" + "\n").join(rows) + end


def make_latex_augmented_matrix(items: List[List[Any]], bar_col: int = None) -> str:
    if not items or len(items[0]) <= 1:
        return make_latex_matrix(items)
    if bar_col is None:
        bar_col = len(items[0]) - 1
    rows = [r" & ".join([cformat(item) for item in row]) for row in items]
    # Vertical bar sits in front of bar_col
    n_cols = len(items[0])
    col_format = "".join([("|c" if j == bar_col else "c") for j in range(n_cols)])
    start = r"\left(\begin{array}{" + col_format + "}\n"
    end = "\n" + r"\end{array}\right)"
    return start + (r" \\[0.1em]" + "\n").join(rows) + end


def make_latex_list(items: List[Any]) -> str:
    if not items:
        return r"\emptyset"
    return ", ".join(cformat(item) for item in items)
