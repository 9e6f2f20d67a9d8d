"""
Batch orchestration for the PDF digest.

Files are ordered by an injectable strategy, split into fixed-size batches,
and each batch becomes one SubjectGroup. A batch in which any document
fails is logged and skipped; the run continues with the next batch.
"""

from typing import Callable, List, Sequence, Tuple
import logging
import os

from pdf_digest.config import DigestConfig
from pdf_digest.errors import (
    BatchError,
    ConfigError,
    ExtractionError,
    LLMTransportError,
    ResultsWriteError,
    SummaryDecodeError,
)
from pdf_digest.models.llm_client import LLMConfig
from pdf_digest.models.schema import ResultSet, SkippedBatch, SubjectGroup
from pdf_digest.models.summarizer import MAX_TEXT_LENGTH, summarize_article
from pdf_digest.models.synthesizer import build_combined_text, synthesize_group
from pdf_digest.pipeline.batching import (
    OrderStrategy,
    determine_subject,
    partition,
    shuffle_order,
)
from pdf_digest.utils.io import find_pdf_files, write_json
from pdf_digest.utils.pdf_parser import extract_text_from_pdf

logger = logging.getLogger(__name__)

DOCUMENT_ERRORS = (ExtractionError, LLMTransportError, SummaryDecodeError)

TextExtractor = Callable[[str], str]


def process_group(
    files: Sequence[str],
    cfg_extract: LLMConfig,
    cfg_synth: LLMConfig,
    max_length: int = MAX_TEXT_LENGTH,
    extractor: TextExtractor = extract_text_from_pdf,
    client=None,
) -> SubjectGroup:
    """
    Summarize every file of one batch, then synthesize the group.

    Raises:
        BatchError: wrapping the first extraction, transport or decode
            error, with the name of the file being processed.
    """
    subject = determine_subject(files)

    summaries = []
    documents: List[Tuple[str, str]] = []

    for path in files:
        filename = os.path.basename(path)
        try:
            text = extractor(path)
            summary = summarize_article(filename, text, cfg_extract, max_length=max_length, client=client)
        except DOCUMENT_ERRORS as exc:
            raise BatchError(filename, exc) from exc

        summaries.append(summary)
        documents.append((filename, text))

    try:
        group_summary = synthesize_group(subject, build_combined_text(documents), cfg_synth, client=client)
    except LLMTransportError as exc:
        raise BatchError(f"group {subject!r}", exc) from exc

    return SubjectGroup(
        subject=subject,
        articles=tuple(summaries),
        group_summary=group_summary,
    )


def run_batches(
    files: Sequence[str],
    batch_size: int,
    cfg_extract: LLMConfig,
    cfg_synth: LLMConfig,
    max_length: int = MAX_TEXT_LENGTH,
    order: OrderStrategy | None = None,
    extractor: TextExtractor = extract_text_from_pdf,
    client=None,
) -> ResultSet:
    """
    Order, partition and process all files; returns the accumulated results.

    ``order`` defaults to a clock-seeded shuffle; pass
    ``batching.identity_order`` for a deterministic run.
    """
    if order is None:
        order = shuffle_order()

    results = ResultSet()
    batches = partition(order(files), batch_size)

    for idx, batch in enumerate(batches, 1):
        group_name = f"Group_{idx}"
        logger.info(
            "Processing %s (%d files): %s",
            group_name, len(batch), ", ".join(os.path.basename(f) for f in batch),
        )

        try:
            group = process_group(
                batch,
                cfg_extract,
                cfg_synth,
                max_length=max_length,
                extractor=extractor,
                client=client,
            )
        except BatchError as exc:
            logger.error("Skipping %s: %s", group_name, exc)
            results = results.skip(SkippedBatch(index=idx, files=tuple(batch), reason=str(exc)))
            continue

        results = results.add(group)

    if results.skipped:
        logger.warning("%d of %d batch(es) skipped", len(results.skipped), len(batches))

    return results


# Discovery → batching → persistence
def run_digest(
    config: DigestConfig,
    order: OrderStrategy | None = None,
    extractor: TextExtractor = extract_text_from_pdf,
    client=None,
) -> ResultSet:

    pdf_files = find_pdf_files(config.pdfs_dir)
    logger.info("Found %d PDF file(s) in %s", len(pdf_files), config.pdfs_dir)

    if len(pdf_files) < config.batch_size:
        raise ConfigError(f"Directory needs at least {config.batch_size} PDF files, found {len(pdf_files)}")

    cfg_extract = LLMConfig(
        model=config.model,
        temperature=config.extraction_temperature,
        api_key=config.api_key,
    )
    cfg_synth = LLMConfig(
        model=config.model,
        temperature=config.synthesis_temperature,
        api_key=config.api_key,
    )

    results = run_batches(
        pdf_files,
        config.batch_size,
        cfg_extract,
        cfg_synth,
        max_length=config.max_text_length,
        order=order,
        extractor=extractor,
        client=client,
    )

    try:
        write_json(config.results_file, results.to_dict())
    except OSError as exc:
        raise ResultsWriteError(config.results_file, exc) from exc

    logger.info("Processing complete. Results saved to %s", config.results_file)

    return results
