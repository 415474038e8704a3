from dataclasses import dataclass, field


@dataclass(frozen=True)
class AssetChunk:
    """Entry chunk emitted into a document, as reported by the HTML stage."""

    hash: str | None = None


@dataclass(frozen=True)
class DocumentPayload:
    """
    In-progress HTML document handed over by the HTML-generation stage.

    Fields:
        html: Current markup
        output_name: File name the document will be written to
        asset_chunks: Entry chunks already known to belong to the document, keyed by chunk name
    """

    html: str
    output_name: str = "index.html"
    asset_chunks: dict[str, AssetChunk] = field(default_factory=dict)
