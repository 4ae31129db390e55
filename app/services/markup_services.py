# app/services/markup_services.py
import re
from typing import List, Optional, Tuple

from app.data.assessment import get_message
from app.models.markup_models import MarkupFragment

BLOCK_PATTERN = re.compile(r"(:::(?:important|step|image)[\s\S]*?:::)")
LABEL_PATTERN = re.compile(r"\[(.*?)\]")
PLACEHOLDER_PATTERN = re.compile(r"\[IMAGE_PLACEHOLDER_\d+\]")

BLOCK_DELIMITER = ":::"
DEFAULT_STEP_NUMBER = "?"


def image_placeholder(index: int) -> str:
    return f"[IMAGE_PLACEHOLDER_{index}]"


def insert_images(text: str, images: List[str]) -> str:
    """
    Swap the numbered image placeholders for :::image blocks.

    Placeholder N takes the N-th image (1-based). Only the first occurrence of
    each placeholder is used; placeholders without an image are dropped.
    """
    for index, image in enumerate(images, start=1):
        placeholder = image_placeholder(index)
        if placeholder in text:
            replacement = f":::image {image}:::" if image else ""
            text = text.replace(placeholder, replacement, 1)
    return PLACEHOLDER_PATTERN.sub("", text)


def _block_inner(block: str, tag: str) -> str:
    return block[len(BLOCK_DELIMITER) + len(tag):-len(BLOCK_DELIMITER)].strip()


def _split_labelled(content: str) -> Tuple[Optional[str], str]:
    lines = content.split("\n")
    match = LABEL_PATTERN.search(lines[0])
    return (match.group(1) if match else None), "\n".join(lines[1:])


def _render_block(block: str, language: str) -> Optional[MarkupFragment]:
    if block.startswith(":::image"):
        url = _block_inner(block, "image")
        if not url:
            return None
        return MarkupFragment(type="image", url=url)

    if block.startswith(":::step"):
        number, body = _split_labelled(_block_inner(block, "step"))
        return MarkupFragment(type="step", number=number or DEFAULT_STEP_NUMBER, body=body)

    if block.startswith(":::important"):
        title, body = _split_labelled(_block_inner(block, "important"))
        return MarkupFragment(
            type="callout", title=title or get_message("important_note", language), body=body
        )

    return None


def render_markup(text: str, images: Optional[List[str]] = None, language: str = "fa") -> List[MarkupFragment]:
    """
    Turn an AI answer into typed fragments for display.

    re.split with a capturing group alternates plain spans (even indices) and
    matched blocks (odd indices). Unterminated blocks never match, so they
    come back as plain text with their ::: markers intact.
    """
    processed = insert_images(text or "", images or [])

    fragments = []
    for i, span in enumerate(BLOCK_PATTERN.split(processed)):
        if i % 2 == 0:
            if span.strip():
                fragments.append(MarkupFragment(type="text", content=span))
            continue

        fragment = _render_block(span, language)
        if fragment is not None:
            fragments.append(fragment)
    return fragments
