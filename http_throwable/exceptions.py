
class ConstructionError(TypeError):
    """
    Raised when a throwable is built without a required field,
    or with a field of the wrong type.

    This is a programming error of the caller, not the HTTP error
    the throwable stands for.
    """
    def __init__(self, field, detail="is required"):
        self._field = field
        super().__init__(f"{field} {detail}.")

    @property
    def field(self):
        return self._field
