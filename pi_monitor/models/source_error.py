class SourceUnavailable(Exception):
    """
    Raised when a host data source cannot be read or parsed.

    Never leaves a probe: the probe boundary turns it into an absent value.
    """

    def __init__(self, source: str, reason: str):
        super().__init__(f"{source}: {reason}")

        self.source = source
        self.reason = reason
