"""
Exceptions that abort a whole generation run
"""


class ModelError(ValueError):
    """The API model is malformed and cannot be generated at all"""


class DuplicateIdentifierError(ModelError):
    """Two items of the same category share an identifier"""

    def __init__(self, category: str, identifier: str):
        super().__init__(f"Duplicate {category} identifier '{identifier}'")
        self.category = category
        self.identifier = identifier


class ArrayLengthError(ModelError):
    """A fixed array field has a length that does not resolve to an integer"""

    def __init__(self, struct_name: str, field_name: str, length):
        super().__init__(
            f"Cannot resolve array length '{length}' of field '{field_name}' in struct '{struct_name}'"
        )
        self.struct_name = struct_name
        self.field_name = field_name
        self.length = length


class ConfigError(ValueError):
    """Configuration or model file is malformed"""
