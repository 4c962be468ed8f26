"""Contract violation error"""


class ContractViolation(AssertionError):
    """
    Raised when a caller breaks a precondition of the logging core.

    These are programmer errors (adding a sink before enabling its kind,
    resolving an empty hierarchy, logging with INHERIT as severity, ...)
    and are not meant to be caught and recovered from. The class derives
    from AssertionError and is raised explicitly so the checks remain
    active under ``python -O``.
    """
