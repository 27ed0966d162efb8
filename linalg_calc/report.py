import argparse
from typing import List, Optional

from .analysis import analyze_triangular_pair
from .eigen import compute_characteristic_polynomial_and_eigenvalues
from .elimination import compute_rank_and_inverse
from .log import Logger, log, nest_logger
from .presets import (
    DECOMPOSITION_PRESETS,
    EIGENVALUE_PRESETS,
    RANK_INVERSE_PRESETS,
    TRIANGULAR_PAIR_PRESETS,
    MatrixPreset,
    TriangularPairPreset,
)
from .structure import decompose_into_symmetric_and_skew


# -----------------------------------------------------------------------------
# Example sections
# -----------------------------------------------------------------------------


def rank_inverse_example(preset: MatrixPreset):
    log(r"\subsection{%s}", preset.label)
    log(r"%s", preset.description)
    A = preset.to_matrix()
    log(r"Input matrix $A$: $%s$", A)
    res = compute_rank_and_inverse(A, do_log=True)
    log(r"\textbf{Rank:} $%s$", res.rank)
    if res.has_inverse:
        log(r"\textbf{Inverse:} $%s$", res.inverse)
    elif res.is_square:
        log(r"\textbf{Inverse:} the matrix is singular.")
    else:
        log(r"\textbf{Inverse:} only square matrices have an inverse.")


def decomposition_example(preset: MatrixPreset):
    log(r"\subsection{%s}", preset.label)
    log(r"%s", preset.description)
    decompose_into_symmetric_and_skew(preset.to_matrix(), do_log=True)


def eigenvalues_example(preset: MatrixPreset):
    log(r"\subsection{%s}", preset.label)
    log(r"%s", preset.description)
    res = compute_characteristic_polynomial_and_eigenvalues(
        preset.to_matrix(), do_log=True
    )
    log(r"\textbf{Characteristic polynomial:} \verb|%s|", res.formatted_polynomial)


def triangular_example(preset: TriangularPairPreset):
    log(r"\subsection{%s}", preset.label)
    log(r"%s", preset.description)
    a, b = preset.to_matrices()
    analyze_triangular_pair(a, b, do_log=True)


# -----------------------------------------------------------------------------
# Report assembly
# -----------------------------------------------------------------------------


def build_report(logger: Optional[Logger] = None) -> str:
    """Run every preset through its computation and return the LaTeX text."""
    with nest_logger(logger) as lg:
        log(r"\section{Triangular matrices}")
        for preset in TRIANGULAR_PAIR_PRESETS:
            triangular_example(preset)
        log(r"\section{Symmetric and skew-symmetric parts}")
        for preset in DECOMPOSITION_PRESETS:
            decomposition_example(preset)
        log(r"\section{Rank and inverse}")
        for preset in RANK_INVERSE_PRESETS:
            rank_inverse_example(preset)
        log(r"\section{Eigenvalues}")
        for preset in EIGENVALUE_PRESETS:
            eigenvalues_example(preset)
    return str(lg)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Write a LaTeX walkthrough of the built-in example matrices."
    )
    parser.add_argument(
        "-o", "--output", default="output.tex", help="LaTeX file to write"
    )
    parser.add_argument(
        "--print", dest="echo", action="store_true", help="also echo the report"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logger = Logger()
    logger.auto_print = args.echo
    text = build_report(logger)
    with open(args.output, "w", encoding="utf-8") as f:
        f.write(text)
    return 0
