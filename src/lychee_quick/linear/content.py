"""Preview-comment body in both Linear document and Markdown form."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from lychee_quick.linear.client import PreviewLink

Node = dict[str, Any]


@dataclass(frozen=True)
class Mention:
    id: str
    label: str


@dataclass(frozen=True)
class CommentBody:
    linear: Node
    markdown: list[str]


def _text(text: str) -> Node:
    return {"type": "text", "text": text}


def _mention(mention: Mention) -> list[Node]:
    return [
        {"type": "suggestion_userMentions", "attrs": {"id": mention.id, "label": mention.label}},
        _text(", "),
    ]


def _hello(mentions: Sequence[Mention]) -> list[Node]:
    content = [_text("Hello ")]
    for mention in mentions:
        content.extend(_mention(mention))
    content.append(_text("preview links👇"))
    return [{"type": "paragraph", "content": content}, {"type": "horizontal_rule"}]


def _previews(previews: Sequence[PreviewLink], identifier: str) -> Node:
    return {
        "type": "bullet_list",
        "content": [
            {
                "type": "list_item",
                "content": [
                    {
                        "type": "paragraph",
                        "content": [
                            {
                                "type": "text",
                                "marks": [{"type": "link", "attrs": {"href": preview.url}}],
                                "text": f"{identifier} {preview.url}",
                            }
                        ],
                    }
                ],
            }
            for preview in previews
        ],
    }


def _footer(footer: str) -> list[Node]:
    return [{"type": "horizontal_rule"}, {"type": "paragraph", "content": [_text(footer)]}]


def build_comment_body(
    identifier: str,
    mentions: Sequence[Mention],
    previews: Sequence[PreviewLink],
    footer: str | None = None,
) -> CommentBody:
    content: list[Node] = [*_hello(mentions), _previews(previews, identifier)]
    markdown = [
        f"# Hello {','.join(m.label for m in mentions)}, preview links👇",
        "---",
        *(f"- [{identifier} {p.url}]({p.url})" for p in previews),
    ]
    if footer:
        content.extend(_footer(footer))
        markdown.extend(["---", footer])
    return CommentBody(linear={"type": "doc", "content": content}, markdown=markdown)
