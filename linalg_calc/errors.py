class ShapeError(ValueError):
    """
    Raised when a matrix does not have the shape an operation requires.

    Examples are ragged rows, a non-square matrix where a square one is
    needed, or multiplying matrices whose inner dimensions differ. It is
    always raised before any computation starts.
    """
