class InvalidInputLength(ValueError):
    """SAS bytes shorter than the requested code form needs."""

    def __init__(self, required, actual):
        self.required = required
        self.actual = actual
        super().__init__(f'SAS input must be at least {required} bytes, got {actual}')
