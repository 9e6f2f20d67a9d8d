# Top-level package for the PDF article digest.

# This project implements:
# - PDF → raw text extraction
# - Paragraph-aligned chunking of long documents
# - Structured per-article extraction with an LLM
# - Cross-article group synthesis
# - Batch orchestration and JSON persistence

# Subpackages:
#     utils/       → PDF parsing, chunking, IO helpers
#     models/      → LLM client, schema, merger, summarizer, synthesizer
#     pipeline/    → Batching and orchestration
#     experiments/ → Runner scripts
