class GasReportException(Exception):
    """
    An exception raised by gasreport.
    """

    def __init__(self, message):
        if not message.endswith("."):
            message = f"{message}."
        super().__init__(message)


class TraceError(GasReportException):
    """
    Raised when a call-trace document or arena is malformed.
    """


class InvalidChildIndexError(TraceError):
    """
    Raised when a trace node lists a child index that does not
    exist in its arena.
    """

    def __init__(self, node_index: int, child_index: int):
        self.node_index = node_index
        self.child_index = child_index
        super().__init__(f"Node {node_index} has invalid child index '{child_index}'")


class SharedChildNodeError(TraceError):
    """
    Raised when a trace node is listed as a child of more than one
    parent, or the root is listed as a child.
    """

    def __init__(self, child_index: int):
        self.child_index = child_index
        super().__init__(f"Node {child_index} has more than one parent")


class ConfigError(GasReportException):
    """
    Raised when a problem occurs from the configuration file.
    """


class FilterError(ConfigError):
    """
    Raised when a ``report_for`` contract filter is not usable.
    """

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid contract filter '{value}'")
