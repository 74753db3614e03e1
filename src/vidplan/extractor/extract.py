"""Turn freeform notes into a partial plan update."""

import logging

from ..models import GROUP_MODELS, ExtractionResult, PlanDocument
from .base import normalize_text
from .lines import LineClassifier
from .paragraphs import ParagraphClassifier

logger = logging.getLogger(__name__)


def extract_ideas(raw: str, document: PlanDocument) -> ExtractionResult:
    """Extract plan fields from unstructured notes.

    Labelled lines (``Tone: ...``) set fields directly. Paragraphs that
    introduce a character or a sequence become new entries, and other
    paragraphs fill cinematography and audio attributes by topic. A value
    from a labelled line always beats a paragraph on the same attribute.

    Args:
        raw: The user's notes.
        document: Current plan, read for the prior value of each group.

    Returns:
        Only the fields found in the notes. Groups come back complete, with
        untouched attributes copied from ``document``. Empty notes give an
        empty result.
    """
    if not raw.strip():
        return ExtractionResult()

    text = normalize_text(raw)
    from_lines = LineClassifier().run(text)
    from_paragraphs = ParagraphClassifier().run(text)

    merged = from_lines.overrides.copy()
    for target, value in from_paragraphs.overrides.items():
        merged.set_default(target, value)

    fields: dict = dict(merged.scalars())
    for group_name in GROUP_MODELS:
        updates = merged.group(group_name)
        if updates:
            fields[group_name] = getattr(document, group_name).model_copy(update=updates)

    if from_paragraphs.characters:
        fields["characters"] = from_paragraphs.characters
    if from_paragraphs.sequences:
        fields["sequences"] = from_paragraphs.sequences

    logger.debug(
        f"Line values: {len(from_lines.overrides)}, "
        f"paragraph values: {len(from_paragraphs.overrides)}"
    )
    logger.info(f"Extracted fields: {', '.join(fields) or 'none'}")
    return ExtractionResult(**fields)
