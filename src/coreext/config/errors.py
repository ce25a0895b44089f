from __future__ import annotations

"""Exception types for configuration handling."""


class ConfigurationError(RuntimeError):
    """Raised when configuration values are missing or malformed."""

    @classmethod
    def invalid_format(cls, param_name: str, received_value: str, expected_format: str = "") -> "ConfigurationError":
        """Create error for invalid format."""
        msg = f"{param_name} has invalid format (received {received_value!r})"
        if expected_format:
            msg += f". Expected {expected_format}"
        return cls(msg)

    @classmethod
    def unknown_extension(cls, group_name: str, known: tuple[str, ...]) -> "ConfigurationError":
        """Create error for an extension group that does not exist."""
        return cls(f"Unknown extension group {group_name!r}. Known groups: {', '.join(known)}")

    @classmethod
    def load_failed(cls, resource: str, identifier: str = "") -> "ConfigurationError":
        """Create error for failed resource load."""
        msg = f"Failed to load {resource}"
        if identifier:
            msg += f" for {identifier}"
        return cls(msg)


__all__ = ["ConfigurationError"]
