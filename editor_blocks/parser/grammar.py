"""
Parser de la grammaire des blocs — contenu sérialisé → liste de nœuds bruts.

Délimiteurs (commentaires HTML) :
  <!-- wp:namespace/name {"attr": 1} -->   ouvrant
  <!-- /wp:namespace/name -->              fermant
  <!-- wp:namespace/name {"attr": 1} /-->  auto-fermant
Sans namespace, le bloc appartient à "core/" (wp:paragraph → core/paragraph).
Le HTML situé entre deux blocs de premier niveau devient un bloc "freeform" (blockName = None).

Nœud brut : {"blockName", "attrs", "innerBlocks", "innerHTML", "innerContent"}
"""
import json
import re
from typing import Any, Dict, List, Optional

from ..errors import BlockParseError

_TOKEN_RE = re.compile(
    r"<!--\s+(?P<closer>/)?wp:(?P<namespace>[a-z][a-z0-9_-]*/)?(?P<name>[a-z][a-z0-9_-]*)\s+"
    r"(?P<attrs>\{.*?\}\s+)?(?P<void>/)?-->",
    re.DOTALL,
)

DEFAULT_NAMESPACE = "core/"


def _new_block(name: Optional[str], attrs: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "blockName":    name,
        "attrs":        attrs,
        "innerBlocks":  [],
        "innerHTML":    "",
        "innerContent": [],
    }


def _freeform(html: str) -> Dict[str, Any]:
    block = _new_block(None, {})
    block["innerHTML"] = html
    block["innerContent"] = [html]
    return block


def _append_html(block: Dict[str, Any], html: str) -> None:
    if html:
        block["innerHTML"] += html
        block["innerContent"].append(html)


class _Frame:
    """Bloc ouvert en attente de son fermant."""

    def __init__(self, block: Dict[str, Any], token_start: int, token_length: int,
                 leading_html_start: Optional[int] = None):
        self.block = block
        self.token_start = token_start
        self.token_length = token_length
        self.prev_offset = token_start + token_length
        self.leading_html_start = leading_html_start


class BlockParser:
    """
    Parser à pile, une passe sur le document.

    Usage:
        >>> BlockParser().parse('<!-- wp:paragraph --><p>Hi</p><!-- /wp:paragraph -->')[0]["blockName"]
        'core/paragraph'
    """

    def parse(self, document: str) -> List[Dict[str, Any]]:
        self.document = document or ""
        self.offset = 0
        self.output: List[Dict[str, Any]] = []
        self.stack: List[_Frame] = []

        while self._proceed():
            pass

        return self.output

    # ── Tokens ───────────────────────────────────────────────────────────────

    def _next_token(self):
        match = _TOKEN_RE.search(self.document, self.offset)
        if match is None:
            return None

        name = (match.group("namespace") or DEFAULT_NAMESPACE) + match.group("name")
        raw_attrs = match.group("attrs")
        attrs: Dict[str, Any] = {}
        if raw_attrs:
            try:
                attrs = json.loads(raw_attrs)
            except ValueError as e:
                raise BlockParseError(f"Attributs JSON invalides pour le bloc {name!r} : {e}") from e

        if match.group("closer"):
            kind = "closer"
        elif match.group("void"):
            kind = "void"
        else:
            kind = "opener"

        start = match.start()
        return kind, name, attrs, start, match.end() - start

    def _proceed(self) -> bool:
        token = self._next_token()
        depth = len(self.stack)

        if token is None:
            if depth == 0:
                self._add_freeform()
            else:
                self._close_unterminated()
            return False

        kind, name, attrs, start, length = token
        leading_html_start = self.offset if start > self.offset else None

        if kind == "void":
            block = _new_block(name, attrs)
            if depth == 0:
                if leading_html_start is not None:
                    self.output.append(_freeform(self.document[leading_html_start:start]))
                self.output.append(block)
            else:
                self._add_inner_block(block, start, length)
            self.offset = start + length
            return True

        if kind == "opener":
            self.stack.append(_Frame(_new_block(name, attrs), start, length, leading_html_start))
            self.offset = start + length
            return True

        # Fermant sans ouvrant : le reste du document est du HTML libre
        if depth == 0:
            self._add_freeform()
            return False

        if depth == 1:
            self._add_block_from_stack(start)
            self.offset = start + length
            return True

        frame = self.stack.pop()
        _append_html(frame.block, self.document[frame.prev_offset:start])
        self._add_inner_block(frame.block, frame.token_start, frame.token_length, start + length)
        self.offset = start + length
        return True

    # ── Assemblage ───────────────────────────────────────────────────────────

    def _add_freeform(self) -> None:
        html = self.document[self.offset:]
        if html:
            self.output.append(_freeform(html))
        self.offset = len(self.document)

    def _add_inner_block(self, block: Dict[str, Any], token_start: int, token_length: int,
                         last_offset: Optional[int] = None) -> None:
        parent = self.stack[-1]
        parent.block["innerBlocks"].append(block)
        _append_html(parent.block, self.document[parent.prev_offset:token_start])
        parent.block["innerContent"].append(None)
        parent.prev_offset = last_offset if last_offset is not None else token_start + token_length

    def _add_block_from_stack(self, end_offset: Optional[int] = None) -> None:
        frame = self.stack.pop()
        end = len(self.document) if end_offset is None else end_offset
        _append_html(frame.block, self.document[frame.prev_offset:end])

        if frame.leading_html_start is not None:
            self.output.append(_freeform(self.document[frame.leading_html_start:frame.token_start]))
        self.output.append(frame.block)

    def _close_unterminated(self) -> None:
        """Fin de document avec des blocs encore ouverts : fermeture implicite, du plus profond au plus haut."""
        end = len(self.document)
        while len(self.stack) > 1:
            frame = self.stack.pop()
            _append_html(frame.block, self.document[frame.prev_offset:end])
            parent = self.stack[-1]
            parent.block["innerBlocks"].append(frame.block)
            _append_html(parent.block, self.document[parent.prev_offset:frame.token_start])
            parent.block["innerContent"].append(None)
            parent.prev_offset = end
        self._add_block_from_stack()
        self.offset = end


def parse_blocks(document: str) -> List[Dict[str, Any]]:
    """Découpe un contenu sérialisé en nœuds bruts (voir BlockParser)."""
    return BlockParser().parse(document)
