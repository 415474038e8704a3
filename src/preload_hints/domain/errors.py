"""Domain errors for resource hint generation."""


class UnsupportedBuildVersion(ValueError):
    """
    Raised when an unknown build-version identifier selects the association variant.

    Attributes:
        version: The identifier that was supplied
        supported: Identifiers that are accepted
    """

    def __init__(self, version: object, supported: list[str]) -> None:
        self.version = version
        self.supported = supported
        super().__init__(
            f"An invalid build version was supplied: {version!r}. "
            f"Supported values: {', '.join(supported)}."
        )


class InvalidOptionError(ValueError):
    """
    Raised when a plugin option holds a value the pipeline cannot use.

    Attributes:
        option: Option name as it appears in configuration
        value: Offending value
        hint: Actionable hint for resolution (optional)
    """

    def __init__(self, option: str, value: object, hint: str | None = None) -> None:
        self.option = option
        self.value = value
        self.hint = hint
        msg = f"The '{option}' option isn't set to a recognized value: {value!r}"
        if hint:
            msg += f". {hint}"
        super().__init__(msg)


class HookNotFoundError(Exception):
    """
    Raised (or reported) when no HTML-generation hook can be found on a compilation.

    Attributes:
        plugin_name: Name of the plugin that tried to register
    """

    def __init__(self, plugin_name: str) -> None:
        self.plugin_name = plugin_name
        super().__init__(
            f"Unable to tap into the HTML plugin's callbacks. Make sure to list "
            f"{plugin_name} at some point after the HTML plugin in the build's plugins list."
        )


class InvalidLinkDescriptor(ValueError):
    """Raised when link attributes break the preload/as/crossorigin invariants."""
