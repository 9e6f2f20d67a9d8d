from typing import List
import logging

from pdf_digest.models.llm_client import call_llm, parse_json_or_throw, LLMConfig
from pdf_digest.models.merger import merge_summaries
from pdf_digest.models.schema import ArticleSummary
from pdf_digest.utils.chunking import split_text

logger = logging.getLogger(__name__)

# Default chunk threshold in characters
MAX_TEXT_LENGTH = 3000


# Prompt for structured extraction
EXTRACTION_PROMPT = """Extract the following information as JSON:
{
	"title": "[Article title]",
	"objectives": "[Main objectives]",
	"study_type": "[Study type]",
	"methodology": "[Methodology]",
	"findings": "[Main findings]",
	"conclusions": "[Conclusions]",
	"limitations": "[Limitations]",
	"keywords": ["keyword1", "keyword2"]
}"""


def _extract_chunk(filename: str, chunk: str, cfg: LLMConfig, client=None) -> ArticleSummary:
    user_prompt = f"Filename: {filename}\n\nContent:\n{chunk}"

    raw = call_llm(
        system_prompt=EXTRACTION_PROMPT,
        user_prompt=user_prompt,
        cfg=cfg,
        json_mode=True,
        client=client,
    )

    return ArticleSummary.from_dict(parse_json_or_throw(raw))


# Chunk → extract → merge, strictly in chunk order.
# Any failure propagates; no partial summary is returned.
def summarize_article(
    filename: str,
    text: str,
    cfg: LLMConfig,
    max_length: int = MAX_TEXT_LENGTH,
    client=None,
) -> ArticleSummary:

    chunks: List[str] = split_text(text, max_length)
    summary = ArticleSummary()

    for idx, chunk in enumerate(chunks, 1):
        logger.debug("Extracting %s chunk %d/%d (%d chars)", filename, idx, len(chunks), len(chunk))
        partial = _extract_chunk(filename, chunk, cfg, client=client)
        summary = merge_summaries(summary, partial)

    return summary
