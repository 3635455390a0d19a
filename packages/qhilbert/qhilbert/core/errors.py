"""qhilbert: Error Taxonomy and Logging
-----------------------------------

Exception types and the shared logger for the qhilbert package.

Error Hierarchy
---------------
- QHError: Base exception for all qhilbert errors
- QHIOError: Configuration file access errors (100-199)
- QHInvalidArgumentError: Structurally invalid input (200-499)
    - 2xx: Hilbert space construction and indexing
    - 3xx: Quantum state construction and mutation
    - 4xx: Unitary transformation construction and application
- QHConfigError: Configuration validation errors (500-599)
- QHOutOfRangeError: Accessor index outside ``[0, rank)`` (600-699)
- QHSolverError: Eigen-decomposition failures (900-999)

The concrete errors also derive from the matching builtin exception
(``ValueError``, ``IndexError``, ``RuntimeError``) so callers may catch
either form.

Logging
-------
The shared logger is named "qhilbert" and can be configured for console
and file output with optional JSON formatting. Python warnings are captured
into logging with adjustable levels.
"""

import logging
import os

__all__ = [
    "QHError",
    "QHIOError",
    "QHInvalidArgumentError",
    "QHOutOfRangeError",
    "QHConfigError",
    "QHSolverError",
    "get_logger",
    "configure_logging",
]


# =============================================================================
# Exception Hierarchy
# =============================================================================


class QHError(Exception):
    """Base exception for all qhilbert errors.

    Examples
    --------
    >>> try:
    ...     HilbertSpace(0)
    ... except QHError as e:
    ...     print(f"qhilbert error occurred: {e}")
    qhilbert error occurred: [200] Dimension cannot be zero

    """

    pass


class QHIOError(QHError):
    """Configuration file access errors (Code 100-199)."""

    pass


class QHInvalidArgumentError(QHError, ValueError):
    """Structurally invalid input (Code 200-499).

    Raised for zero dimensions, non-square matrices, matrix/space dimension
    mismatches, rank mismatches, out-of-range subsystem indices, matrices
    failing the density-matrix axioms, and matrices failing unitarity.
    """

    pass


class QHOutOfRangeError(QHError, IndexError):
    """Accessor called with an index outside ``[0, rank)`` (Code 600-699)."""

    pass


class QHConfigError(QHError):
    """Configuration-related errors (Code 500-599).

    Raised when configuration validation or resolution fails.
    Examples: unknown keys, tolerances outside ``(0, 1)``, unparsable YAML.
    """

    pass


class QHSolverError(QHError, RuntimeError):
    """Eigen-decomposition did not converge (Code 900-999).

    Not expected in normal operation.
    """

    pass


# =============================================================================
# Logger Configuration
# =============================================================================

_logger: logging.Logger | None = None

_PLAIN_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_JSON_FORMAT = (
    '{"time":"%(asctime)s","level":"%(levelname)s",'
    '"logger":"%(name)s","msg":"%(message)s"}'
)


def get_logger() -> logging.Logger:
    """Get the shared qhilbert logger instance.

    Returns
    -------
    logging.Logger
        The singleton logger named "qhilbert" configured at INFO level by
        default with a console handler. Handlers are created lazily on first
        use.

    Examples
    --------
    >>> logger = get_logger()
    >>> logger.name
    'qhilbert'

    """
    global _logger
    if _logger is None:
        _logger = logging.getLogger("qhilbert")
        _logger.setLevel(logging.INFO)
        if not _logger.handlers:
            h = logging.StreamHandler()
            h.setFormatter(logging.Formatter(_PLAIN_FORMAT))
            _logger.addHandler(h)
    return _logger


def configure_logging(
    verbose: bool = False,
    log_file: str | None = None,
    as_json: bool = False,
    suppress_warnings: bool = False,
) -> None:
    """Configure the shared logger outputs and warning capture.

    Parameters
    ----------
    verbose : bool, default False
        When True, set logger level to DEBUG; otherwise INFO.
    log_file : str or None, default None
        Optional file path to append logs. A path that cannot be opened is
        reported on the console handler and otherwise skipped.
    as_json : bool, default False
        Emit logs in a compact JSON line format when True; otherwise plain text.
    suppress_warnings : bool, default False
        Route Python warnings into logging and raise their level to ERROR when
        True; otherwise capture warnings at WARNING level.

    Examples
    --------
    >>> configure_logging(verbose=True, as_json=False)  # doctest: +SKIP
    >>> logger = get_logger()
    >>> logger.level in (logging.INFO, logging.DEBUG)
    True

    """
    logger = get_logger()
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    fmt = logging.Formatter(_JSON_FORMAT if as_json else _PLAIN_FORMAT)
    ch = logging.StreamHandler()
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    if log_file:
        try:
            fh = logging.FileHandler(os.fspath(log_file), encoding="utf-8")
        except OSError as e:
            logger.warning(f"[101] Cannot open log file {log_file}: {e}")
        else:
            fh.setFormatter(fmt)
            logger.addHandler(fh)

    logging.captureWarnings(True)
    logging.getLogger("py.warnings").setLevel(
        logging.ERROR if suppress_warnings else logging.WARNING
    )
