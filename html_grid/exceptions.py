class GridError(Exception):
    pass


class NameNotAvailable(GridError, ValueError):
    def __init__(self, name):
        self.name = name
        super().__init__(f"Name [{name}] is not available.")


class UnknownControlType(GridError):
    def __init__(self, type_):
        self.type = type_
        super().__init__(f"Control type [{type_}] is not supported.")
