__all__ = ("CachePolicyError", "InvalidOptions", "InvalidSnapshot")


class CachePolicyError(Exception): ...


class InvalidOptions(CachePolicyError): ...


class InvalidSnapshot(CachePolicyError): ...
