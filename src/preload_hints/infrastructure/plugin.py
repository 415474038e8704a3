"""Plugin object binding the resource hint pipeline to a build host."""

from __future__ import annotations

import logging
from functools import partial
from typing import Any, Mapping

from ..application.dto.options import PreloadOptions
from ..application.ports.build_host import AsyncHookPort, DoneCallback, LegacyPluginHostPort, SyncHookPort
from ..application.ports.compilation import CompilationPort
from ..application.services.association import BuildVersion
from ..application.use_cases.add_links import add_links
from ..domain.errors import HookNotFoundError
from ..domain.models.document import DocumentPayload
from .host.hooks import HTML_AFTER_PROCESSING, LEGACY_COMPILATION_EVENT, LEGACY_HTML_EVENT
from .logging import new_correlation_id

logger = logging.getLogger(__name__)


class PreloadPlugin:
    """
    Injects <link rel="preload"> / <link rel="prefetch"> tags into generated HTML.

    Hosts exposing `hooks` run the v4 association variant; hosts exposing only
    `plugin(event, fn)` run the v3 variant.
    """

    def __init__(self, options: PreloadOptions | Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        if isinstance(options, PreloadOptions) and not kwargs:
            self.options = options
        else:
            data = options.model_dump(by_alias=True) if isinstance(options, PreloadOptions) else dict(options or {})
            data.update(kwargs)
            self.options = PreloadOptions.from_mapping(data)

    @property
    def name(self) -> str:
        return type(self).__name__

    def add_links(
        self,
        build_version: str | BuildVersion,
        compilation: CompilationPort,
        payload: DocumentPayload,
    ) -> DocumentPayload:
        return add_links(build_version, compilation, payload, self.options)

    def apply(self, compiler: Any) -> None:
        """
        Register with the host, choosing the registration style the host supports.

        Registration problems are logged and appended to the host's error list
        when it has one; they are never raised.
        """
        compilation_hook = getattr(getattr(compiler, "hooks", None), "compilation", None)
        if isinstance(compilation_hook, SyncHookPort):
            compilation_hook.tap(self.name, self._on_compilation)
        elif isinstance(compiler, LegacyPluginHostPort):
            compiler.plugin(LEGACY_COMPILATION_EVENT, self._on_legacy_compilation)
        else:
            self._report(compiler, HookNotFoundError(self.name))

    def _find_html_hook(self, compilation: Any) -> AsyncHookPort | None:
        hook = getattr(getattr(compilation, "hooks", None), HTML_AFTER_PROCESSING, None)
        if not isinstance(hook, AsyncHookPort) and self.options.html_plugin is not None:
            hook = getattr(self.options.html_plugin.get_hooks(compilation), "before_emit", None)
        return hook if isinstance(hook, AsyncHookPort) else None

    def _on_compilation(self, compilation: Any) -> None:
        hook = self._find_html_hook(compilation)
        if hook is None:
            # Most likely a plugin ordering issue
            self._report(compilation, HookNotFoundError(self.name))
            return
        hook.tap_async(self.name, partial(self._handle_document, BuildVersion.V4, compilation))

    def _on_legacy_compilation(self, compilation: Any) -> None:
        compilation.plugin(LEGACY_HTML_EVENT, partial(self._handle_document, BuildVersion.V3, compilation))

    def _handle_document(
        self,
        version: BuildVersion,
        compilation: CompilationPort,
        payload: DocumentPayload,
        callback: DoneCallback,
    ) -> None:
        new_correlation_id()
        try:
            result = self.add_links(version, compilation, payload)
        except Exception as e:
            logger.error(
                f"Failed to add resource hints to '{payload.output_name}': {e}",
                exc_info=True,
            )
            callback(e)
            return
        logger.info(f"Processed resource hints for '{payload.output_name}'")
        callback(None, result)

    def _report(self, target: Any, error: Exception) -> None:
        logger.error(str(error))
        errors = getattr(target, "errors", None)
        if isinstance(errors, list):
            errors.append(str(error))
