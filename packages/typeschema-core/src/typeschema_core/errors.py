"""Custom exception hierarchy for typeschema-core.

This module defines the exception classes raised during schema derivation:
- TypeSchemaError: Base exception for all typeschema errors
- UnsupportedKindError: Raised when a descriptor kind has no schema mapping
- MalformedDescriptorError: Raised when a descriptor lacks required children
- IntrospectionError: Raised when a Python type cannot be described

User-facing messages are safe to display. Technical details are logged
internally via structlog and never become part of the message.
"""

from __future__ import annotations

import structlog

logger = structlog.get_logger(__name__)


class TypeSchemaError(Exception):
    """Base exception for typeschema.

    All typeschema exceptions inherit from this class.

    Args:
        user_message: Safe message to display to the user.
        internal_details: Optional technical details for logging. This is
            logged internally but never exposed through ``str(error)``.

    Example:
        >>> raise TypeSchemaError(
        ...     "Schema derivation failed",
        ...     internal_details="descriptor 'Person' element 3 has no child",
        ... )
    """

    def __init__(
        self,
        user_message: str,
        *,
        internal_details: str | None = None,
    ) -> None:
        """Initialize TypeSchemaError with user message and optional internal details.

        Args:
            user_message: Safe message to display to the user.
            internal_details: Technical details for internal logging only.
        """
        super().__init__(user_message)
        self.user_message = user_message

        if internal_details:
            logger.error(
                "typeschema_error",
                error_type=self.__class__.__name__,
                user_message=user_message,
                internal_details=internal_details,
            )


class UnsupportedKindError(TypeSchemaError):
    """Raised when a descriptor's structural kind has no schema mapping.

    Currently only the contextual kind (serializer resolved at runtime, type
    unknown statically) is unsupported. This is a terminal failure for the
    derivation call; it is never downgraded to a default schema.

    Attributes:
        kind: The unsupported kind value.
        serial_name: Name of the descriptor that carried the kind.

    Example:
        >>> raise UnsupportedKindError("contextual", serial_name="Payload")
        # User sees: "Cannot derive a schema for 'Payload': kind 'contextual' is not supported"
    """

    def __init__(
        self,
        kind: str,
        *,
        serial_name: str | None = None,
        internal_details: str | None = None,
    ) -> None:
        """Initialize UnsupportedKindError.

        Args:
            kind: The unsupported kind value.
            serial_name: Name of the described type, if known.
            internal_details: Technical details for internal logging only.
        """
        subject = f"'{serial_name}'" if serial_name else "descriptor"
        super().__init__(
            f"Cannot derive a schema for {subject}: kind '{kind}' is not supported",
            internal_details=internal_details,
        )
        self.kind = kind
        self.serial_name = serial_name


class MalformedDescriptorError(TypeSchemaError):
    """Raised when a descriptor does not carry the children its kind requires.

    Use this exception when:
    - A list descriptor has no item element
    - A map descriptor lacks its key or value element
    - An element index is out of range

    This points at a defect in the descriptor provider and is propagated
    rather than patched.

    Attributes:
        serial_name: Name of the malformed descriptor.
        index: Element index that could not be resolved, if any.
    """

    def __init__(
        self,
        user_message: str,
        *,
        serial_name: str,
        index: int | None = None,
        internal_details: str | None = None,
    ) -> None:
        """Initialize MalformedDescriptorError.

        Args:
            user_message: Safe message to display to the user.
            serial_name: Name of the malformed descriptor.
            index: Element index that could not be resolved.
            internal_details: Technical details for internal logging only.
        """
        super().__init__(
            f"Malformed descriptor '{serial_name}': {user_message}",
            internal_details=internal_details,
        )
        self.serial_name = serial_name
        self.index = index


class IntrospectionError(TypeSchemaError):
    """Raised when a Python type cannot be turned into a descriptor.

    Use this exception when:
    - The annotation is not a supported type
    - A type refers to itself (no finite descriptor exists)
    - A ``Literal`` carries non-string values

    Attributes:
        type_name: Readable name of the offending type.
    """

    def __init__(
        self,
        user_message: str,
        *,
        type_name: str,
        internal_details: str | None = None,
    ) -> None:
        """Initialize IntrospectionError.

        Args:
            user_message: Safe message to display to the user.
            type_name: Readable name of the offending type.
            internal_details: Technical details for internal logging only.
        """
        super().__init__(
            f"Cannot describe type '{type_name}': {user_message}",
            internal_details=internal_details,
        )
        self.type_name = type_name
