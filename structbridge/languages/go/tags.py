"""
JSON tag synthesis for Go structs.

Rewrites exported struct fields that carry no tag, deriving the JSON
key from the snake_case form of the field name.
"""

from typing import List

from ...core.classifier import GO_STRUCT_HEADER
from ...core.naming import is_exported, to_snake_case
from ...core.parser import BlockScanner, LineRole
from ...logging_config import get_logger
from .parser import UNTAGGED_FIELD

logger = get_logger(__name__)


class TagSynthesizer:
    """Adds missing ``json`` tags to the exported fields of a struct."""

    def _rewrite_line(self, line: str) -> str:
        """Return the line with a synthesized tag, or unchanged."""
        if "json:" in line:
            return line

        match = UNTAGGED_FIELD.match(line)
        if not match:
            return line

        indent, name, go_type, comment = match.groups()
        if not is_exported(name):
            return line

        json_name = to_snake_case(name)
        rewritten = f'{indent}{name} {go_type} `json:"{json_name}"`'
        if comment:
            rewritten += f" {comment}"
        # CRLF input: the pattern consumed the "\r"
        if line.endswith("\r"):
            rewritten += "\r"
        return rewritten

    def _rewrite(self, text: str) -> List[str]:
        scanner = BlockScanner(GO_STRUCT_HEADER)
        lines = []
        for role, line in scanner.scan(text):
            if role == LineRole.BODY:
                line = self._rewrite_line(line)
            lines.append(line)
        return lines

    def missing_tags(self, text: str) -> List[str]:
        """
        List the exported fields that have no JSON tag.

        Args:
            text: Go struct source

        Returns:
            Field names in source order
        """
        scanner = BlockScanner(GO_STRUCT_HEADER)
        missing = []
        for role, line in scanner.scan(text):
            if role == LineRole.BODY and self._rewrite_line(line) != line:
                missing.append(UNTAGGED_FIELD.match(line).group(2))
        return missing

    def needs_tags(self, text: str) -> bool:
        """Check whether any exported field in the struct lacks a tag."""
        return bool(self.missing_tags(text))

    def add_missing_tags(self, text: str) -> str:
        """
        Add JSON tags to every exported field that lacks one.

        Tagged and unexported fields, indentation and trailing comments
        are kept as written. Applying this to its own output is a no-op.
        """
        missing = self.missing_tags(text)
        if missing:
            logger.info("Adding JSON tags to %d field(s): %s", len(missing), ", ".join(missing))
        return "\n".join(self._rewrite(text))


def add_missing_json_tags(text: str) -> str:
    """Convenience wrapper around :class:`TagSynthesizer`."""
    return TagSynthesizer().add_missing_tags(text)
