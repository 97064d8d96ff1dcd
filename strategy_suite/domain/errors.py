class StrategySuiteError(Exception):
    pass


class InvalidInput(StrategySuiteError):
    pass


class OperationNotFound(StrategySuiteError):
    def __init__(self, key: str) -> None:
        super().__init__(f"Operation not registered: {key}")
        self.key = key


class InvalidOperationKey(StrategySuiteError):
    def __init__(self, key: str) -> None:
        super().__init__(f"Unsupported operation key: {key!r}")
        self.key = key
