from typing import Iterable, Tuple
import logging

from pdf_digest.models.llm_client import call_llm, LLMConfig

logger = logging.getLogger(__name__)


SYNTHESIS_PROMPT = """Provide a comprehensive summary of key themes, common methodologies,
and overall findings across these articles about {subject}. Highlight any contrasting viewpoints
or particularly notable findings."""


# Concatenate (filename, text) pairs, each behind an article header
def build_combined_text(documents: Iterable[Tuple[str, str]]) -> str:
    return "".join(
        f"\n\n--- Article: {filename} ---\n\n{text}"
        for filename, text in documents
    )


# One call over the whole group; no chunking here
def synthesize_group(subject: str, combined_text: str, cfg: LLMConfig, client=None) -> str:

    logger.debug("Synthesizing group %r (%d chars)", subject, len(combined_text))

    return call_llm(
        system_prompt=SYNTHESIS_PROMPT.format(subject=subject),
        user_prompt=combined_text,
        cfg=cfg,
        json_mode=False,
        client=client,
    )
