from __future__ import annotations

import logging
from dataclasses import replace

from ...domain.models.document import DocumentPayload
from ...domain.services.head_injector import insert_links_into_head
from ...domain.services.tag_serializer import render_element
from ..dto.options import PreloadOptions
from ..ports.compilation import CompilationPort
from ..services.association import BuildVersion, does_chunk_belong_to_html
from ..services.attribute_resolver import resolve_link
from ..services.chunk_extractor import extract_chunks
from ..services.file_selector import select_files

logger = logging.getLogger(__name__)


def add_links(
    build_version: str | BuildVersion,
    compilation: CompilationPort,
    payload: DocumentPayload,
    options: PreloadOptions,
) -> DocumentPayload:
    """
    Inject resource hints for the document's files into its head.

    Args:
        build_version: Identifier selecting the chunk association variant ("v3" or "v4")
        compilation: Build output, read only
        payload: Document produced by the HTML-generation stage
        options: Plugin options

    Returns:
        Payload with updated html; the input payload is returned untouched when
        the document is excluded.

    Raises:
        UnsupportedBuildVersion: If build_version is not supported
        InvalidOptionError: If an option value cannot be applied
    """
    version = BuildVersion.parse(build_version)

    if payload.output_name in options.exclude_html_names:
        logger.debug(f"Skipping excluded document '{payload.output_name}'")
        return payload

    extracted_chunks = extract_chunks(compilation, options.include)

    if options.include_all_assets:
        html_chunks = extracted_chunks
    else:
        html_chunks = [
            chunk
            for chunk in extracted_chunks
            if does_chunk_belong_to_html(version, chunk, compilation, payload.asset_chunks)
        ]

    files = select_files(html_chunks, options.selection_policy)
    logger.debug(
        f"Selected {len(files)} file(s) from {len(html_chunks)} chunk(s) for '{payload.output_name}'",
        extra={"document": payload.output_name, "files": files},
    )

    links: list[str] = []
    for file in files:
        descriptor = resolve_link(
            file,
            public_path=compilation.public_path or "",
            rel=options.rel,
            as_option=options.as_,
        )
        links.append(render_element("link", descriptor.to_attributes(), closing_tag_omitted=True))

    return replace(payload, html=insert_links_into_head(payload.html, links))
