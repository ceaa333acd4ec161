from typing import Any


class UnmarshalError(ValueError):
    """
    Raised when a field of an API payload can't be decoded into its Python type.
    Keeps track of where the failure happened so the caller can point at the offending value.
    """

    def __init__(self, type_name: str, field: str, json_key: str, value: Any, message: str, raw: Any = None):
        self.type_name = type_name
        self.field = field
        self.json_key = json_key
        self.value = value
        self.message = message
        self.raw = raw
        super().__init__(str(self))

    def __str__(self) -> str:
        return (f"{self.type_name}: can't unmarshal field {self.field} "
                f"(json key \"{self.json_key}\", value {self.value!r}): {self.message}")


class UnmarshalErrorMaker:
    """Builds UnmarshalError for a given type and payload."""

    def __init__(self, type_name: str, raw: Any):
        self.type_name = type_name
        self.raw = raw

    def err(self, field: str, json_key: str, value: Any, message: str) -> UnmarshalError:
        return UnmarshalError(self.type_name, field, json_key, value, message, raw=self.raw)


class UnknownEmbeddedTypeError(ValueError):
    pass


class InvalidIDError(ValueError):
    pass
