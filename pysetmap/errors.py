class SetMapError(Exception):
    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class CapabilityError(SetMapError, TypeError):
    def __init__(self, kind: str, item: object, capability: str) -> None:
        super().__init__(f"{kind} {item!r} is not {capability}")
        self.kind = kind
        self.item = item
        self.capability = capability
