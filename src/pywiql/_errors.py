"""Exception hierarchy and diagnostic messages for WIQL analysis."""


class WiqlError(Exception):
    """Base exception for WIQL analysis errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details for logging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class UnmappedFieldTypeError(WiqlError):
    """Raised when a field type has no compatibility entry.

    This is a registration gap in the compatibility table or the variable
    table, never a problem with the query being checked.
    """


class InvalidFieldMetadataError(WiqlError):
    """Raised when a field metadata payload cannot be read."""


class InvalidVariableTableError(WiqlError):
    """Raised when a configured variable table is malformed."""


class FieldFetchError(WiqlError):
    """Raised when fetching field metadata fails."""


# Sanitized user-facing error message constants
ERR_MSG_UNMAPPED_FIELD_TYPE = "unmapped field type"
ERR_MSG_INVALID_FIELD_METADATA = "invalid field metadata"
ERR_MSG_INVALID_VARIABLE_TABLE = "invalid variable table"
ERR_MSG_FIELD_FETCH_FAILED = "field metadata fetch failed"

# Diagnostic message templates
MSG_NO_VALID_OPERATION = "There is no valid operation for {field} and {rhs}"
MSG_VALID_COMPARISONS = "Valid comparisons are {operators}"
MSG_NO_GROUP_COMPARISONS = "{field} does not support group comparisons"
MSG_EXPECTED_VALUE_TYPE = "Expected value of type {kind}"
MSG_EXPECTED_FIELD_TYPE = "Expected field of type {field_type}"
MSG_LIST_VALUES_LITERAL = "Values in list must be literals"
