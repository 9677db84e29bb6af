"""Structured representation of an engine invocation."""

from pydantic import BaseModel, Field


class CommandLine(BaseModel):
    """Executable plus ordered flags, serialized only when launched."""

    executable: str = Field(..., description="Engine executable")
    options: list[tuple[str, str | None]] = Field(
        default_factory=list, description="Ordered (flag, value) pairs"
    )
    environment: dict[str, str] = Field(
        default_factory=dict, description="Variables added to the child environment"
    )

    def add(self, flag: str, value: str | None = None) -> "CommandLine":
        """Append a flag with an optional value."""
        self.options.append((flag, value))
        return self

    def add_property(self, name: str, value: object) -> "CommandLine":
        """Append a JMeter property override (-Jname=value)."""
        return self.add(f"-J{name}={value}")

    def has_flag(self, flag: str) -> bool:
        """Check whether a flag is present."""
        return any(option == flag for option, _ in self.options)

    def value_of(self, flag: str) -> str | None:
        """Return the value of the first occurrence of a flag."""
        for option, value in self.options:
            if option == flag:
                return value
        return None

    def to_argv(self) -> list[str]:
        """Flatten into an argument vector for subprocess."""
        argv = [self.executable]
        for flag, value in self.options:
            argv.append(flag)
            if value is not None:
                argv.append(value)
        return argv
