"""
plantuml-switcher language server using pygls.

Offers the relation switch as a ``refactor.rewrite`` code action on
PlantUML documents. The requested range decides the mode: an empty range
is a cursor (toggle the arrow modifier or switch the line), anything else
switches every covered line.

Client positions arrive in the negotiated encoding (UTF-16 by default) and
are converted to string indices with the document's position codec.
"""

import logging
from typing import List, Optional, Sequence

from lsprotocol.types import (
    INITIALIZE,
    TEXT_DOCUMENT_CODE_ACTION,
    CodeAction,
    CodeActionKind,
    CodeActionOptions,
    CodeActionParams,
    InitializeParams,
    Position,
    Range,
    TextEdit,
    WorkspaceEdit,
)
from pygls.lsp.server import LanguageServer
from pygls.workspace import PositionCodec

from plantuml_switcher._version import get_version
from plantuml_switcher.config import SwitcherConfig, load_config
from plantuml_switcher.core import text as core_text
from plantuml_switcher.core.errors import SwitcherError

logger = logging.getLogger(__name__)

SWITCH_RELATION_COMMAND = "plantuml-switcher.relation"
SWITCH_RELATION_TITLE = "Switch PlantUML relation"
SWITCH_RELATION_KIND = f"{CodeActionKind.RefactorRewrite.value}.{SWITCH_RELATION_COMMAND}"

server = LanguageServer("plantuml-switcher-lsp", f"v{get_version()}")


def _to_selection(range_: Range) -> core_text.Selection:
    return core_text.Selection(
        start=core_text.Position(line=range_.start.line, character=range_.start.character),
        end=core_text.Position(line=range_.end.line, character=range_.end.character),
    )


def _to_lsp_range(text_range: core_text.TextRange) -> Range:
    return Range(
        start=Position(line=text_range.start.line, character=text_range.start.character),
        end=Position(line=text_range.end.line, character=text_range.end.character),
    )


def kind_requested(only: Optional[Sequence[str]]) -> bool:
    """
    Check whether a client's ``only`` filter admits the switch action.

    A filter entry matches when it equals the action kind or is one of its
    dotted prefixes (``refactor``, ``refactor.rewrite``).
    """
    if not only:
        return True
    kinds = [kind.value if isinstance(kind, CodeActionKind) else kind for kind in only]
    return any(
        SWITCH_RELATION_KIND == kind or SWITCH_RELATION_KIND.startswith(f"{kind}.")
        for kind in kinds
    )


def build_switch_action(
    uri: str,
    source: str,
    range_: Range,
    codec: Optional[PositionCodec] = None,
) -> Optional[CodeAction]:
    """
    Build the switch code action for a document range.

    Args:
        uri: Document URI the edit applies to
        source: Full document text
        range_: Requested range in client units
        codec: Converts between client units and string indices;
            positions pass through unchanged without one

    Returns:
        CodeAction carrying the edit, or None when nothing would change
        or the range does not address the document.
    """
    document = core_text.LineDocument(source)
    if codec is not None:
        range_ = codec.range_from_client_units(document.lines, range_)

    try:
        edit = core_text.switch_text(document, _to_selection(range_))
    except SwitcherError as e:
        logger.warning(f"Cannot switch {uri}: {e}")
        return None

    if document.get_text(edit.range) == edit.new_text:
        return None

    edit_range = _to_lsp_range(edit.range)
    if codec is not None:
        edit_range = codec.range_to_client_units(document.lines, edit_range)

    return CodeAction(
        title=SWITCH_RELATION_TITLE,
        kind=SWITCH_RELATION_KIND,
        edit=WorkspaceEdit(changes={uri: [TextEdit(range=edit_range, new_text=edit.new_text)]}),
    )


@server.feature(INITIALIZE)
def initialize(ls: LanguageServer, params: InitializeParams):
    """Initialize the language server."""
    if params.root_uri:
        logger.info(f"Workspace root: {params.root_uri}")


@server.feature(
    TEXT_DOCUMENT_CODE_ACTION,
    CodeActionOptions(code_action_kinds=[CodeActionKind.RefactorRewrite]),
)
def code_action(ls: LanguageServer, params: CodeActionParams) -> Optional[List[CodeAction]]:
    """Offer the relation switch for the requested range."""
    if not kind_requested(params.context.only):
        return None

    document = ls.workspace.get_text_document(params.text_document.uri)
    action = build_switch_action(
        params.text_document.uri, document.source, params.range, document.position_codec
    )
    if action is None:
        return None
    return [action]


def configure_logging(config: SwitcherConfig) -> None:
    """Apply the configured level, also when a handler is already installed."""
    logging.basicConfig(level=config.logging.level)
    logging.getLogger().setLevel(config.logging.level)


def start_server():
    """Start the plantuml-switcher LSP server on stdio."""
    configure_logging(load_config())
    server.start_io()


def start_tcp_server(config: Optional[SwitcherConfig] = None, port: Optional[int] = None):
    """Start the server on TCP, for debugging."""
    config = config or load_config()
    configure_logging(config)
    server.start_tcp(config.server.host, port or config.server.port)
