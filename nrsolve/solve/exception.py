from nrsolve.solve.results import FLAG_DETAILS

# Written by the nrsolve developers, October 2026.


# ======================================================================

class SolverError(RuntimeError):
    """
    Raised by a root finder when it is unable to return a root and the
    caller has asked for failures to be reported (``disp=True``) rather
    than signalled by a `nan` result.

    Notes
    -----
    Solvers attach their own additional attributes (for example `x`,
    `iterations`, `fevals`) so that the last state reached can be
    inspected.
    """

    def __init__(self, *args, flag: int = None, details: str = None,
                 **kwargs):
        """
        Parameters
        ----------
        args :
            Passed to `RuntimeError`.
        flag : int, default = None
            Status code of the failed solve, one of the codes listed in
            `RootResults`.
        details : str, default = None
            Short description of the failure.  If omitted, the standard
            description of `flag` is used.
        kwargs :
            Become attributes of the exception.

        Raises
        ------
        ValueError
            If `flag` is not a known status code.
        """
        if flag is not None and flag not in FLAG_DETAILS:
            raise ValueError(f"Unknown solver status flag {flag!r}.")

        super().__init__(*args)
        self.flag = flag
        if details is None and flag is not None:
            details = FLAG_DETAILS[flag]
        self.details = details
        for k, v in kwargs.items():
            setattr(self, k, v)

    def __str__(self):
        """List each attribute that is set beneath the message."""
        lines = [super().__str__()]
        lines += [f"{k} -> {v}" for k, v in vars(self).items()
                  if v is not None]
        return "\n".join(lines)
